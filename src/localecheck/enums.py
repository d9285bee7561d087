"""Enumerations for localecheck type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class Dialect(StrEnum):
    """Placeholder grammar a message template is written in.

    StrEnum provides automatic string conversion: str(Dialect.PRINTF) == "printf"
    """

    PRINTF = "printf"
    """printf-style specifiers: Hello %1$s, you have %d new messages"""

    MESSAGE = "message"
    """MessageFormat-style arguments: Hello {0}, you have {1,number} new messages"""


class Severity(StrEnum):
    """Severity of a check event.

    Errors fail a run; warnings are informational only.
    """

    ERROR = "error"
    WARNING = "warning"


class EventKind(StrEnum):
    """Kind of problem reported while checking a message source.

    StrEnum provides automatic string conversion: str(EventKind.MISSING_KEY) == "missing-key"
    """

    MISSING_KEY = "missing-key"
    """Declared identifier absent from a locale resource."""

    MISSING_VALUE = "missing-value"
    """Declared identifier present but blank."""

    INVALID_FORMAT = "invalid-format"
    """Value could not be parsed by its placeholder grammar."""

    FORMAT_MISMATCH = "format-mismatch"
    """Placeholder shape differs from the base locale."""

    NOT_FORMATTED = "not-formatted"
    """Formatted identifier whose base value has no placeholders (opt-in check)."""

    UNUSED_KEY = "unused-key"
    """Resource key that no declared identifier refers to."""

    MISSING_LOCALE_FILE = "missing-locale-file"
    """Locale resource could not be located."""

    NO_MESSAGES = "no-messages"
    """Base resource of a plain source defines no keys."""

    @property
    def severity(self) -> Severity:
        """Severity implied by this kind (only unused keys are warnings)."""
        if self is EventKind.UNUSED_KEY:
            return Severity.WARNING
        return Severity.ERROR


class LoadStatus(StrEnum):
    """Outcome of loading a single locale resource."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    ERROR = "error"


__all__ = [
    "Dialect",
    "EventKind",
    "LoadStatus",
    "Severity",
]
