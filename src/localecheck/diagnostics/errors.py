"""localecheck exception hierarchy with structured diagnostics.

Grammar errors are recoverable: the analyzers catch FormatParseError and
report INVALID_FORMAT events. ConfigurationError is fatal for the message
source it was raised for and unwinds to the orchestrator boundary.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "BadArgumentIndexError",
    "BadFormatTypeError",
    "ConfigurationError",
    "ConflictingDialectError",
    "DuplicateFlagsError",
    "FormatParseError",
    "IncompatibleFlagsError",
    "InvalidPrecisionError",
    "InvalidWidthError",
    "LocaleCheckError",
    "MissingWidthError",
    "PropertiesSyntaxError",
    "UnbalancedBracesError",
    "UnknownConversionError",
]


class LocaleCheckError(Exception):
    """Base exception for all localecheck errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LocaleCheckError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


# ============================================================================
# GRAMMAR ERRORS
# ============================================================================


class FormatParseError(LocaleCheckError):
    """Template rejected by a placeholder grammar.

    str(error) is the grammar message reported in INVALID_FORMAT events.
    """


class UnknownConversionError(FormatParseError):
    """Unknown printf conversion, or a stray '%' in literal text.

    Attributes:
        conversion: The offending conversion text ("k", "%", "tq")
    """

    def __init__(self, message: str | Diagnostic, *, conversion: str) -> None:
        super().__init__(message)
        self.conversion = conversion


class DuplicateFlagsError(FormatParseError):
    """Same printf flag given twice in one specifier.

    Attributes:
        flags: The duplicated flag character
    """

    def __init__(self, message: str | Diagnostic, *, flags: str) -> None:
        super().__init__(message)
        self.flags = flags


class IncompatibleFlagsError(FormatParseError):
    """printf flags that cannot be combined with each other or the conversion.

    Attributes:
        flags: Canonical text of the offending flag(s)
        conversion: Conversion character ("" for flag-only combinations)
    """

    def __init__(
        self, message: str | Diagnostic, *, flags: str, conversion: str = ""
    ) -> None:
        super().__init__(message)
        self.flags = flags
        self.conversion = conversion


class MissingWidthError(IncompatibleFlagsError):
    """'-' or '0' flag given without a width."""


class InvalidWidthError(FormatParseError):
    """Width that is out of range or not allowed for the conversion.

    Attributes:
        width: The rejected width
    """

    def __init__(self, message: str | Diagnostic, *, width: int) -> None:
        super().__init__(message)
        self.width = width


class InvalidPrecisionError(FormatParseError):
    """Precision that is out of range or not allowed for the conversion.

    Attributes:
        precision: The rejected precision
    """

    def __init__(self, message: str | Diagnostic, *, precision: int) -> None:
        super().__init__(message)
        self.precision = precision


class BadArgumentIndexError(FormatParseError):
    """MessageFormat argument index that is not a non-negative integer.

    Attributes:
        index_text: The raw index segment
    """

    def __init__(self, message: str | Diagnostic, *, index_text: str) -> None:
        super().__init__(message)
        self.index_text = index_text


class BadFormatTypeError(FormatParseError):
    """MessageFormat format type outside number, date, time and choice.

    Attributes:
        format_type: The raw type segment
    """

    def __init__(self, message: str | Diagnostic, *, format_type: str) -> None:
        super().__init__(message)
        self.format_type = format_type


class UnbalancedBracesError(FormatParseError):
    """MessageFormat template ending inside an argument block."""


# ============================================================================
# CONFIGURATION AND RESOURCE ERRORS
# ============================================================================


class ConfigurationError(LocaleCheckError):
    """Invalid caller configuration; aborts the current message source only."""


class ConflictingDialectError(ConfigurationError):
    """Both printf and MessageFormat declared for one identifier or one source.

    Attributes:
        source: Message source name
        key: Identifier with conflicting markers (None for a source-level conflict)
    """

    def __init__(
        self, message: str | Diagnostic, *, source: str, key: str | None = None
    ) -> None:
        super().__init__(message)
        self.source = source
        self.key = key


class PropertiesSyntaxError(LocaleCheckError):
    """Malformed .properties content.

    Attributes:
        line: 1-indexed line number where the error was found
    """

    def __init__(self, message: str | Diagnostic, *, line: int) -> None:
        super().__init__(message)
        self.line = line
