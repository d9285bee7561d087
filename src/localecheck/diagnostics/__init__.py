"""Diagnostic system for localecheck.

Provides structured error diagnostics with codes and hints, the exception
hierarchy, check events with their sinks, and report formatting.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    BadArgumentIndexError,
    BadFormatTypeError,
    ConfigurationError,
    ConflictingDialectError,
    DuplicateFlagsError,
    FormatParseError,
    IncompatibleFlagsError,
    InvalidPrecisionError,
    InvalidWidthError,
    LocaleCheckError,
    MissingWidthError,
    PropertiesSyntaxError,
    UnbalancedBracesError,
    UnknownConversionError,
)
from .events import CheckEvent, EventCollector, EventSink, LoggingSink, TeeSink
from .formatter import OutputFormat, ReportFormatter
from .templates import ErrorTemplate

__all__ = [
    "BadArgumentIndexError",
    "BadFormatTypeError",
    "CheckEvent",
    "ConfigurationError",
    "ConflictingDialectError",
    "Diagnostic",
    "DiagnosticCode",
    "DuplicateFlagsError",
    "ErrorTemplate",
    "EventCollector",
    "EventSink",
    "FormatParseError",
    "IncompatibleFlagsError",
    "InvalidPrecisionError",
    "InvalidWidthError",
    "LocaleCheckError",
    "LoggingSink",
    "MissingWidthError",
    "OutputFormat",
    "PropertiesSyntaxError",
    "ReportFormatter",
    "TeeSink",
    "UnbalancedBracesError",
    "UnknownConversionError",
]
