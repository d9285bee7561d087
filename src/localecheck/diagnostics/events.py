"""Check events and the sinks that receive them.

Every recoverable problem found while checking a message source becomes one
immutable CheckEvent pushed into an EventSink. Components never hold counters
of their own; the per-source EventCollector is threaded through the pipeline
and merged into the run summary afterwards, which keeps sources independent
when they are checked in parallel.

Python 3.13+.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from localecheck.enums import EventKind, Severity

from .codes import Diagnostic, DiagnosticCode

__all__ = [
    "CheckEvent",
    "EventCollector",
    "EventSink",
    "LoggingSink",
    "TeeSink",
]

_EVENT_CODES: dict[EventKind, DiagnosticCode] = {
    EventKind.MISSING_KEY: DiagnosticCode.MISSING_KEY,
    EventKind.MISSING_VALUE: DiagnosticCode.MISSING_VALUE,
    EventKind.INVALID_FORMAT: DiagnosticCode.INVALID_FORMAT,
    EventKind.FORMAT_MISMATCH: DiagnosticCode.FORMAT_MISMATCH,
    EventKind.NOT_FORMATTED: DiagnosticCode.NOT_FORMATTED,
    EventKind.UNUSED_KEY: DiagnosticCode.UNUSED_KEY,
    EventKind.MISSING_LOCALE_FILE: DiagnosticCode.MISSING_LOCALE_FILE,
    EventKind.NO_MESSAGES: DiagnosticCode.NO_MESSAGES,
}


def _render_tokens(tokens: tuple[str, ...]) -> str:
    return "[" + ", ".join(tokens) + "]"


@dataclass(frozen=True, slots=True)
class CheckEvent:
    """One problem found in one locale resource of a message source.

    Attributes:
        kind: What went wrong
        source: Message source name (e.g. "com.example.Messages")
        locale: Locale tag of the resource ("" for the base resource)
        key: Message identifier, or the resource name for MISSING_LOCALE_FILE
        detail: Grammar message for INVALID_FORMAT, free text otherwise
        expected: Base placeholder tokens (FORMAT_MISMATCH only)
        found: Placeholder tokens in this locale (FORMAT_MISMATCH only)
        diagnostic: Structured grammar or load error behind the event, if any
    """

    kind: EventKind
    source: str
    locale: str
    key: str
    detail: str = ""
    expected: tuple[str, ...] = ()
    found: tuple[str, ...] = ()
    diagnostic: Diagnostic | None = None

    @property
    def severity(self) -> Severity:
        """Severity implied by the event kind."""
        return self.kind.severity

    @property
    def is_error(self) -> bool:
        """Check if this event fails a run."""
        return self.severity is Severity.ERROR

    @property
    def code(self) -> DiagnosticCode:
        """Numeric diagnostic code for this event kind."""
        return _EVENT_CODES[self.kind]

    def describe(self) -> str:
        """Return a one-line human-readable description.

        Example:
            >>> CheckEvent(EventKind.MISSING_KEY, "Messages", "de", "greet").describe()
            'Missing key [greet]'
        """
        match self.kind:
            case EventKind.MISSING_KEY:
                return f"Missing key [{self.key}]"
            case EventKind.MISSING_VALUE:
                return f"Missing value [{self.key}]"
            case EventKind.INVALID_FORMAT:
                return f"Invalid format [{self.key}]: {self.detail}"
            case EventKind.FORMAT_MISMATCH:
                return (
                    f"Format not matched [{self.key}]: "
                    f"expected {_render_tokens(self.expected)}, "
                    f"found {_render_tokens(self.found)}"
                )
            case EventKind.NOT_FORMATTED:
                return f"Invalid format [{self.key}]: expected formatted property"
            case EventKind.UNUSED_KEY:
                return f"Unused key [{self.key}]"
            case EventKind.MISSING_LOCALE_FILE:
                if self.detail:
                    return f"Missing {self.key}: {self.detail}"
                return f"Missing {self.key}"
            case EventKind.NO_MESSAGES:
                return f"No base messages found in {self.key}"


class EventSink(Protocol):
    """Receiver of check events.

    Sinks shared between sources checked in parallel must be thread-safe.
    """

    def emit(self, event: CheckEvent) -> None:
        """Receive one event."""


class EventCollector:
    """Accumulating sink owned by one message source.

    Not thread-safe: each source gets its own collector and the
    results are merged after the source completes.

    Example:
        >>> collector = EventCollector()
        >>> collector.emit(CheckEvent(EventKind.UNUSED_KEY, "Messages", "", "old"))
        >>> collector.error_count, collector.warning_count
        (0, 1)
    """

    __slots__ = ("_events", "_forward")

    def __init__(self, forward: EventSink | None = None) -> None:
        """Initialize collector.

        Args:
            forward: Optional sink receiving every event as it is emitted
        """
        self._events: list[CheckEvent] = []
        self._forward = forward

    def emit(self, event: CheckEvent) -> None:
        """Record an event and forward it if a downstream sink is set."""
        self._events.append(event)
        if self._forward is not None:
            self._forward.emit(event)

    @property
    def events(self) -> tuple[CheckEvent, ...]:
        """All events in emission order."""
        return tuple(self._events)

    @property
    def error_count(self) -> int:
        """Number of error events."""
        return sum(1 for e in self._events if e.is_error)

    @property
    def warning_count(self) -> int:
        """Number of warning events."""
        return sum(1 for e in self._events if not e.is_error)

    def of_kind(self, kind: EventKind) -> tuple[CheckEvent, ...]:
        """Get all events of one kind."""
        return tuple(e for e in self._events if e.kind is kind)


class LoggingSink:
    """Sink that writes events to the standard logging system.

    Errors are logged at ERROR, warnings at WARNING. Thread-safe because
    logging handlers serialize emission internally.
    """

    __slots__ = ("_logger",)

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("localecheck.events")

    def emit(self, event: CheckEvent) -> None:
        """Log one event."""
        level = logging.ERROR if event.is_error else logging.WARNING
        locale = event.locale or "default"
        self._logger.log(level, "%s [%s]: %s", event.source, locale, event.describe())


class TeeSink:
    """Sink forwarding every event to several sinks in order."""

    __slots__ = ("_sinks",)

    def __init__(self, sinks: Iterable[EventSink]) -> None:
        self._sinks = tuple(sinks)

    def emit(self, event: CheckEvent) -> None:
        """Forward one event to every sink."""
        for sink in self._sinks:
            sink.emit(event)
