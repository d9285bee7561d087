"""Presence check and unused-key reporting.

Runs last for every locale resource: identifiers no format analyzer took
are checked for presence only, and whatever keys are then left in the
locale map belong to no declared identifier.

Python 3.13+. Zero external dependencies.
"""

import logging

from localecheck.diagnostics import CheckEvent, EventSink
from localecheck.enums import EventKind
from localecheck.model import LocaleCode, MessageId, MessageIdentifier

__all__ = [
    "ResidualKeyReporter",
    "take_value",
]

logger = logging.getLogger(__name__)


def take_value(
    entries: dict[MessageId, str],
    key: MessageId,
    *,
    source: str,
    locale: LocaleCode,
    sink: EventSink,
) -> str | None:
    """Remove a key from a locale map and check that it has a value.

    The key is consumed whether or not it is present, so a key is never
    both checked and reported as unused.

    Args:
        entries: Mutable locale map (consumed)
        key: Identifier to take
        source: Source name for events
        locale: Locale tag for events
        sink: Event receiver

    Returns:
        The value, or None after emitting MISSING_KEY or MISSING_VALUE
    """
    value = entries.pop(key, None)
    if value is None:
        sink.emit(CheckEvent(EventKind.MISSING_KEY, source, locale, key))
        return None
    if not value.strip():
        sink.emit(CheckEvent(EventKind.MISSING_VALUE, source, locale, key))
        return None
    return value


class ResidualKeyReporter:
    """Final stage for one locale resource of one message source.

    Example:
        >>> from localecheck.diagnostics import EventCollector
        >>> collector = EventCollector()
        >>> reporter = ResidualKeyReporter("Messages")
        >>> reporter.check("de", {"zeta": "z", "alpha": "a"}, {}, collector)
        2
        >>> [e.key for e in collector.events]
        ['alpha', 'zeta']
    """

    __slots__ = ("_source",)

    def __init__(self, source: str) -> None:
        self._source = source

    def check_presence(
        self,
        locale: LocaleCode,
        entries: dict[MessageId, str],
        pending: dict[MessageId, MessageIdentifier],
        sink: EventSink,
    ) -> None:
        """Consume and presence-check every still pending identifier."""
        for key in pending:
            take_value(entries, key, source=self._source, locale=locale, sink=sink)
        pending.clear()

    def report_unused(
        self, locale: LocaleCode, entries: dict[MessageId, str], sink: EventSink
    ) -> tuple[MessageId, ...]:
        """Emit one UNUSED_KEY warning per remaining key, in ascending key order.

        The map is emptied afterwards.

        Returns:
            The unused keys, sorted
        """
        unused = tuple(sorted(entries))
        for key in unused:
            sink.emit(CheckEvent(EventKind.UNUSED_KEY, self._source, locale, key))
        entries.clear()
        if unused:
            logger.debug("%d unused keys in %s [%s]", len(unused), self._source, locale)
        return unused

    def check(
        self,
        locale: LocaleCode,
        entries: dict[MessageId, str],
        pending: dict[MessageId, MessageIdentifier],
        sink: EventSink,
    ) -> int:
        """Run the presence check, then report unused keys.

        Returns:
            Number of unused keys
        """
        self.check_presence(locale, entries, pending, sink)
        return len(self.report_unused(locale, entries, sink))
