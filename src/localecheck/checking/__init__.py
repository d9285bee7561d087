"""Check orchestration over message sources.

Python 3.13+. Zero external dependencies.
"""

from .identifiers import resolve_default_dialect, resolve_identifiers, validate_source
from .orchestrator import check_source, check_sources
from .plain import check_plain, plain_source
from .results import CheckSummary, LocaleOutcome, SourceReport

__all__ = [
    "CheckSummary",
    "LocaleOutcome",
    "SourceReport",
    "check_plain",
    "check_source",
    "check_sources",
    "plain_source",
    "resolve_default_dialect",
    "resolve_identifiers",
    "validate_source",
]
