"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic attached to exceptions.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Presence errors (missing keys, values, resources)
        2000-2999: Format consistency errors
        3000-3999: Warnings
        4000-4099: printf grammar errors
        4100-4199: MessageFormat grammar errors
        5000-5999: Configuration and resource errors
    """

    # Presence errors (1000-1999)
    MISSING_KEY = 1001
    MISSING_VALUE = 1002
    MISSING_LOCALE_FILE = 1003
    NO_MESSAGES = 1004

    # Format consistency errors (2000-2999)
    INVALID_FORMAT = 2001
    FORMAT_MISMATCH = 2002
    NOT_FORMATTED = 2003

    # Warnings (3000-3999)
    UNUSED_KEY = 3001

    # printf grammar errors (4000-4099)
    UNKNOWN_CONVERSION = 4001
    DUPLICATE_FLAGS = 4002
    INCOMPATIBLE_FLAGS = 4003
    MISSING_WIDTH = 4004
    INVALID_WIDTH = 4005
    INVALID_PRECISION = 4006

    # MessageFormat grammar errors (4100-4199)
    BAD_ARGUMENT_INDEX = 4101
    BAD_FORMAT_TYPE = 4102
    UNBALANCED_BRACES = 4103

    # Configuration and resource errors (5000-5999)
    CONFLICTING_DIALECT = 5001
    DUPLICATE_IDENTIFIER = 5002
    UNKNOWN_LOCALE = 5003
    PROPERTIES_SYNTAX = 5004
    INVALID_RESOURCE_PATH = 5005


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        position: Character offset in the template or line number in a
            resource file, depending on the producer (None if unknown)
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    position: int | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message
