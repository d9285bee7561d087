"""Shared constants for localecheck.

Centralized configuration constants used by the grammars, the resource
layer and the report formatter. Placing them here avoids circular imports
between the grammar, analysis and checking packages.

Constants are grouped by domain:
- Resource naming: file extension and locale separators
- Grammar tables: closed sets of accepted conversions and format types
- Reporting: indentation and content limits

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Resource naming
    "PROPERTIES_EXTENSION",
    "LOCALE_SUFFIX_SEPARATOR",
    "LOCALE_LIST_SEPARATOR",
    # Grammar tables
    "PRINTF_GENERAL_CONVERSIONS",
    "PRINTF_CHARACTER_CONVERSIONS",
    "PRINTF_INTEGER_CONVERSIONS",
    "PRINTF_FLOAT_CONVERSIONS",
    "PRINTF_TEXT_CONVERSIONS",
    "PRINTF_DATETIME_CONVERSIONS",
    "MESSAGE_FORMAT_TYPES",
    # Reporting
    "INDENT_WIDTH",
    "MAX_DETAIL_LENGTH",
]

# ============================================================================
# RESOURCE NAMING
# ============================================================================

# Extension of key/value resource files ("Messages.properties").
PROPERTIES_EXTENSION: str = ".properties"

# Joins a resource base name and a locale tag ("Messages" + "_" + "de").
LOCALE_SUFFIX_SEPARATOR: str = "_"

# Separates locale tags in configuration strings ("de, fr, pt_BR").
LOCALE_LIST_SEPARATOR: str = ","

# ============================================================================
# PRINTF GRAMMAR TABLES
# ============================================================================
#
# Conversion categories follow java.util.Formatter. Upper-case variants
# produce upper-cased output but accept the same arguments.

PRINTF_GENERAL_CONVERSIONS: frozenset[str] = frozenset("bBsShH")
PRINTF_CHARACTER_CONVERSIONS: frozenset[str] = frozenset("cC")
PRINTF_INTEGER_CONVERSIONS: frozenset[str] = frozenset("doxX")
PRINTF_FLOAT_CONVERSIONS: frozenset[str] = frozenset("eEgGfaA")

# Conversions that consume no argument and never become placeholder tokens.
PRINTF_TEXT_CONVERSIONS: frozenset[str] = frozenset("%n")

# Closed set of date/time suffix characters.
PRINTF_DATETIME_CONVERSIONS: frozenset[str] = frozenset(
    # Time
    "HIklMNLQpsSTzZ"
    # Date
    "aAbBCdehjmyY"
    # Composites
    "rRcDF"
)

# ============================================================================
# MESSAGE GRAMMAR TABLES
# ============================================================================

# Accepted argument format types. The empty string is a bare "{0}" argument.
MESSAGE_FORMAT_TYPES: frozenset[str] = frozenset(("", "number", "date", "time", "choice"))

# ============================================================================
# REPORTING
# ============================================================================

# Spaces per nesting level in text reports.
INDENT_WIDTH: int = 2

# Maximum length of a resource value echoed into a report before truncation.
MAX_DETAIL_LENGTH: int = 200
