"""localecheck - cross-locale consistency checker for message templates.

Verifies that every declared message identifier has a value in the base
resource and in every locale, and that printf-style and MessageFormat-style
values keep the same placeholder shape as the base locale.

Public API:
    check_source - Check one message source
    check_sources - Check several sources on a thread pool
    check_plain - Check a resource family whose base file defines the keys
    MessageSource, MessageIdentifier, LocaleResource - Input model
    PrintfGrammar, MessageGrammar - Placeholder grammars
    Dialect, EventKind - Enumerations

Exceptions:
    LocaleCheckError - Base exception class
    FormatParseError - Template rejected by a grammar
    ConfigurationError - Invalid source configuration

Submodules:
    localecheck.grammar - Placeholder grammars and tokens
    localecheck.analysis - Baseline/diff analysis and unused-key reporting
    localecheck.checking - Orchestration and result types
    localecheck.resources - .properties parsing and loading
    localecheck.diagnostics - Error types, events, sinks and report formatting
    localecheck.locales - Locale list configuration
"""

from .checking import CheckSummary, SourceReport, check_plain, check_source, check_sources
from .diagnostics import ConfigurationError, FormatParseError, LocaleCheckError
from .enums import Dialect, EventKind
from .grammar import MessageGrammar, PrintfGrammar
from .model import LocaleResource, MessageIdentifier, MessageSource

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError  # noqa: E402
from importlib.metadata import version as _get_version  # noqa: E402

try:
    __version__ = _get_version("localecheck")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CheckSummary",
    "ConfigurationError",
    "Dialect",
    "EventKind",
    "FormatParseError",
    "LocaleCheckError",
    "LocaleResource",
    "MessageGrammar",
    "MessageIdentifier",
    "MessageSource",
    "PrintfGrammar",
    "SourceReport",
    "__version__",
    "check_plain",
    "check_source",
    "check_sources",
]
