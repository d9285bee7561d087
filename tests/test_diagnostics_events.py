"""Tests for check events and sinks."""

from __future__ import annotations

import logging

import pytest

from localecheck.diagnostics import (
    CheckEvent,
    DiagnosticCode,
    EventCollector,
    LoggingSink,
    TeeSink,
)
from localecheck.enums import EventKind, Severity


def _event(kind: EventKind, key: str = "k", **kwargs: object) -> CheckEvent:
    return CheckEvent(kind, "Messages", "de", key, **kwargs)  # type: ignore[arg-type]


class TestCheckEventDescribe:
    """Test one-line descriptions."""

    @pytest.mark.parametrize(
        ("event", "expected"),
        [
            (_event(EventKind.MISSING_KEY), "Missing key [k]"),
            (_event(EventKind.MISSING_VALUE), "Missing value [k]"),
            (
                _event(EventKind.INVALID_FORMAT, detail="Unknown conversion: 'k'"),
                "Invalid format [k]: Unknown conversion: 'k'",
            ),
            (
                _event(EventKind.FORMAT_MISMATCH, expected=("s", "d"), found=("d",)),
                "Format not matched [k]: expected [s, d], found [d]",
            ),
            (
                _event(EventKind.NOT_FORMATTED),
                "Invalid format [k]: expected formatted property",
            ),
            (_event(EventKind.UNUSED_KEY), "Unused key [k]"),
            (
                _event(EventKind.MISSING_LOCALE_FILE, "Messages_de.properties"),
                "Missing Messages_de.properties",
            ),
            (
                _event(EventKind.MISSING_LOCALE_FILE, "Messages_de.properties", detail="denied"),
                "Missing Messages_de.properties: denied",
            ),
            (
                _event(EventKind.NO_MESSAGES, "Messages.properties"),
                "No base messages found in Messages.properties",
            ),
        ],
    )
    def test_describe(self, event: CheckEvent, expected: str) -> None:
        assert event.describe() == expected

    def test_empty_token_lists(self) -> None:
        event = _event(EventKind.FORMAT_MISMATCH, expected=("s",), found=())
        assert event.describe().endswith("found []")


class TestCheckEventSeverity:
    """Test severity and code mapping."""

    def test_only_unused_key_is_warning(self) -> None:
        for kind in EventKind:
            expected = Severity.WARNING if kind is EventKind.UNUSED_KEY else Severity.ERROR
            assert _event(kind).severity is expected

    def test_every_kind_has_code(self) -> None:
        codes = {_event(kind).code for kind in EventKind}
        assert len(codes) == len(EventKind)
        assert _event(EventKind.UNUSED_KEY).code is DiagnosticCode.UNUSED_KEY


class TestEventCollector:
    """Test the accumulating sink."""

    def test_counts(self) -> None:
        collector = EventCollector()
        collector.emit(_event(EventKind.MISSING_KEY))
        collector.emit(_event(EventKind.UNUSED_KEY))
        collector.emit(_event(EventKind.UNUSED_KEY, "other"))
        assert collector.error_count == 1
        assert collector.warning_count == 2
        assert [e.key for e in collector.of_kind(EventKind.UNUSED_KEY)] == ["k", "other"]

    def test_forwarding(self) -> None:
        downstream = EventCollector()
        collector = EventCollector(forward=downstream)
        event = _event(EventKind.MISSING_KEY)
        collector.emit(event)
        assert downstream.events == (event,)

    def test_events_snapshot(self) -> None:
        """events returns a snapshot, not the live list."""
        collector = EventCollector()
        snapshot = collector.events
        collector.emit(_event(EventKind.MISSING_KEY))
        assert snapshot == ()


class TestLoggingSink:
    """Test logging output."""

    def test_levels(self, caplog: pytest.LogCaptureFixture) -> None:
        sink = LoggingSink()
        with caplog.at_level(logging.WARNING, logger="localecheck.events"):
            sink.emit(_event(EventKind.MISSING_KEY))
            sink.emit(CheckEvent(EventKind.UNUSED_KEY, "Messages", "", "old"))

        first, second = caplog.records
        assert first.levelno == logging.ERROR
        assert first.getMessage() == "Messages [de]: Missing key [k]"
        assert second.levelno == logging.WARNING
        assert second.getMessage() == "Messages [default]: Unused key [old]"


class TestTeeSink:
    def test_fan_out(self) -> None:
        a, b = EventCollector(), EventCollector()
        event = _event(EventKind.MISSING_KEY)
        TeeSink([a, b]).emit(event)
        assert a.events == b.events == (event,)
