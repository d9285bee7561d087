"""Baseline/diff analysis of placeholder shapes across locales.

A ConsistencyAnalyzer is bound to one grammar and one message source. The
first locale map it sees (the base resource) establishes the baseline: the
placeholder tokens of every identifier routed to its grammar. Every later
map is compared against that baseline.

Identifiers are consumed as they are checked: their key is removed from the
locale map and the identifier from the pending set, so that the residual
stage only sees what no analyzer claimed.

Python 3.13+. Zero external dependencies.
"""

import logging
from typing import TypeAlias
from collections.abc import Mapping
from types import MappingProxyType

from localecheck.diagnostics import CheckEvent, EventSink, FormatParseError
from localecheck.enums import Dialect, EventKind
from localecheck.grammar import FormatGrammar, render_tokens
from localecheck.model import LocaleCode, MessageId, MessageIdentifier

from .residual import take_value

__all__ = ["ConsistencyAnalyzer"]

logger = logging.getLogger(__name__)

Baseline: TypeAlias = dict[MessageId, tuple[str, ...]]


class ConsistencyAnalyzer:
    """Placeholder-shape checker for one grammar within one message source.

    Not thread-safe: an analyzer belongs to the single thread checking its
    source.

    Example:
        >>> from localecheck.diagnostics import EventCollector
        >>> from localecheck.grammar import PrintfGrammar
        >>> ids = {"n": MessageIdentifier("n", frozenset({Dialect.PRINTF}))}
        >>> analyzer = ConsistencyAnalyzer(PrintfGrammar(), "Messages")
        >>> collector = EventCollector()
        >>> analyzer.check("", {"n": "%d files"}, dict(ids), collector)
        >>> analyzer.check("de", {"n": "%s Dateien"}, dict(ids), collector)
        >>> collector.events[0].describe()
        'Format not matched [n]: expected [d], found [s]'
    """

    __slots__ = ("_baseline", "_default_dialect", "_grammar", "_require_placeholders", "_source")

    def __init__(
        self,
        grammar: FormatGrammar,
        source: str,
        *,
        default_dialect: Dialect | None = None,
        require_placeholders: bool = False,
    ) -> None:
        """Initialize analyzer.

        Args:
            grammar: Grammar parsing routed values
            source: Source name for events
            default_dialect: Dialect of identifiers without their own marker
            require_placeholders: Report base values without placeholders
                as NOT_FORMATTED
        """
        self._grammar = grammar
        self._source = source
        self._default_dialect = default_dialect
        self._require_placeholders = require_placeholders
        self._baseline: Baseline | None = None

    @property
    def dialect(self) -> Dialect:
        """Dialect of the bound grammar."""
        return self._grammar.dialect

    @property
    def has_baseline(self) -> bool:
        """Check if the first locale map has been analyzed."""
        return self._baseline is not None

    @property
    def baseline(self) -> Mapping[MessageId, tuple[str, ...]]:
        """Read-only view of the baseline token strings (empty before the first check)."""
        return MappingProxyType(self._baseline if self._baseline is not None else {})

    def routes(self, identifier: MessageIdentifier) -> bool:
        """Check if an identifier is checked with this analyzer's grammar.

        Dynamic identifiers are never routed. Identifiers with one marker go
        to that dialect; unmarked ones follow the source default.
        """
        if identifier.is_dynamic:
            return False
        declared = identifier.declared_dialect
        if declared is not None:
            return declared is self.dialect
        return not identifier.dialects and self._default_dialect is self.dialect

    def check(
        self,
        locale: LocaleCode,
        entries: dict[MessageId, str],
        pending: dict[MessageId, MessageIdentifier],
        sink: EventSink,
    ) -> None:
        """Check one locale map, establishing the baseline on first use.

        Args:
            locale: Locale tag for events
            entries: Mutable locale map; routed keys are removed
            pending: Identifiers not yet handled for this map; routed ones are removed
            sink: Event receiver
        """
        routed = [identifier for identifier in pending.values() if self.routes(identifier)]
        establishing = self._baseline is None
        baseline: Baseline = {} if self._baseline is None else self._baseline

        for identifier in routed:
            key = identifier.id
            del pending[key]
            tokens = self._parse(locale, entries, key, sink)
            if tokens is None:
                continue

            if establishing:
                if self._require_placeholders and not tokens:
                    sink.emit(CheckEvent(EventKind.NOT_FORMATTED, self._source, locale, key))
                    continue
                baseline[key] = tokens
                continue

            expected = baseline.get(key)
            if expected is not None and expected != tokens:
                sink.emit(
                    CheckEvent(
                        EventKind.FORMAT_MISMATCH,
                        self._source,
                        locale,
                        key,
                        expected=expected,
                        found=tokens,
                    )
                )

        if establishing:
            self._baseline = baseline
            logger.debug(
                "%s baseline for %s: %d of %d keys",
                self.dialect,
                self._source,
                len(baseline),
                len(routed),
            )

    def _parse(
        self, locale: LocaleCode, entries: dict[MessageId, str], key: MessageId, sink: EventSink
    ) -> tuple[str, ...] | None:
        value = take_value(entries, key, source=self._source, locale=locale, sink=sink)
        if value is None:
            return None
        try:
            return render_tokens(self._grammar.parse(value))
        except FormatParseError as e:
            sink.emit(
                CheckEvent(
                    EventKind.INVALID_FORMAT,
                    self._source,
                    locale,
                    key,
                    detail=str(e),
                    diagnostic=e.diagnostic,
                )
            )
            return None

    def __repr__(self) -> str:
        return (
            f"ConsistencyAnalyzer(dialect={self.dialect.value!r}, source={self._source!r}, "
            f"baseline={'set' if self.has_baseline else 'unset'})"
        )
