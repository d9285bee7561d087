"""Tests for the presence check and unused-key reporting."""

from __future__ import annotations

from hypothesis import event, given

from localecheck.analysis import ResidualKeyReporter, take_value
from localecheck.diagnostics import EventCollector
from localecheck.enums import EventKind, Severity
from localecheck.model import MessageIdentifier
from tests.strategies import locale_maps


class TestTakeValue:
    """Test the shared presence helper."""

    def test_present_value(self) -> None:
        """Present non-blank value is returned and removed."""
        collector = EventCollector()
        entries = {"a": "A"}
        assert take_value(entries, "a", source="M", locale="", sink=collector) == "A"
        assert entries == {}
        assert collector.events == ()

    def test_missing_key(self) -> None:
        """Absent key reports MISSING_KEY."""
        collector = EventCollector()
        assert take_value({}, "a", source="M", locale="de", sink=collector) is None
        assert collector.events[0].describe() == "Missing key [a]"

    def test_blank_value_consumed(self) -> None:
        """Blank value is consumed and reports MISSING_VALUE."""
        collector = EventCollector()
        entries = {"a": "   "}
        assert take_value(entries, "a", source="M", locale="de", sink=collector) is None
        assert entries == {}
        assert collector.events[0].kind is EventKind.MISSING_VALUE


class TestResidualKeyReporter:
    """Test presence check and unused keys."""

    def test_presence_check_consumes_pending(self) -> None:
        """Pending identifiers are presence-checked and cleared."""
        collector = EventCollector()
        entries = {"a": "A", "b": ""}
        pending = {k: MessageIdentifier(k) for k in ("a", "b", "c")}

        ResidualKeyReporter("M").check_presence("de", entries, pending, collector)

        assert pending == {}
        assert entries == {}
        assert [(e.kind, e.key) for e in collector.events] == [
            (EventKind.MISSING_VALUE, "b"),
            (EventKind.MISSING_KEY, "c"),
        ]

    def test_unused_keys_sorted(self) -> None:
        """Unused keys are reported in ascending order as warnings."""
        collector = EventCollector()
        entries = {"zeta": "z", "alpha": "a", "mid": "m"}

        unused = ResidualKeyReporter("M").report_unused("fr", entries, collector)

        assert unused == ("alpha", "mid", "zeta")
        assert [e.key for e in collector.events] == ["alpha", "mid", "zeta"]
        assert all(e.severity is Severity.WARNING for e in collector.events)
        assert collector.events[0].describe() == "Unused key [alpha]"
        assert entries == {}

    def test_check_returns_unused_count(self) -> None:
        """check() combines both stages."""
        collector = EventCollector()
        count = ResidualKeyReporter("M").check(
            "", {"a": "A", "x": "X"}, {"a": MessageIdentifier("a")}, collector
        )
        assert count == 1
        assert collector.error_count == 0
        assert collector.warning_count == 1

    @given(entries=locale_maps())
    def test_every_key_reported_once(self, entries: dict[str, str]) -> None:
        """PROPERTY: with nothing pending, each key yields exactly one warning."""
        event(f"size={len(entries)}")
        collector = EventCollector()
        original = dict(entries)

        ResidualKeyReporter("M").check("", entries, {}, collector)

        reported = [e.key for e in collector.events]
        assert reported == sorted(original)
        assert entries == {}
