"""Result types of a check run.

All result types are immutable; statistics are computed properties derived
from the stored tuples.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from localecheck.diagnostics import CheckEvent, LocaleCheckError
from localecheck.enums import EventKind
from localecheck.model import LocaleCode, ResourceName

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    "LocaleOutcome",
    "SourceReport",
    "CheckSummary",
]


@dataclass(frozen=True, slots=True)
class LocaleOutcome:
    """Key accounting for one processed locale resource.

    Attributes:
        locale: Locale tag ('' for the base resource)
        resource_name: Resource name
        original_size: Number of keys in the loaded resource
        consumed: Keys taken by the analyzers and the presence check
        residual: Keys reported as unused
    """

    locale: LocaleCode
    resource_name: ResourceName
    original_size: int
    consumed: int
    residual: int

    @property
    def is_balanced(self) -> bool:
        """Check that every key was either consumed or reported, exactly once."""
        return self.consumed + self.residual == self.original_size


@dataclass(frozen=True, slots=True)
class SourceReport:
    """Outcome of checking one message source.

    Attributes:
        source: Source name
        events: Events in emission order
        outcomes: One entry per located resource, in resource order
        resource_names: Every resource of the source, located or not, in order
        fatal: Configuration error that aborted the source, if any
    """

    source: str
    events: tuple[CheckEvent, ...] = ()
    outcomes: tuple[LocaleOutcome, ...] = ()
    resource_names: tuple[ResourceName, ...] = ()
    fatal: LocaleCheckError | None = None

    @property
    def error_count(self) -> int:
        """Error events, plus one for a fatal error."""
        count = sum(1 for e in self.events if e.is_error)
        return count + (1 if self.fatal is not None else 0)

    @property
    def warning_count(self) -> int:
        """Warning events."""
        return sum(1 for e in self.events if not e.is_error)

    @property
    def passed(self) -> bool:
        """Check if the source has no errors (warnings never fail)."""
        return self.error_count == 0

    def get_events(
        self, *, kind: EventKind | None = None, locale: LocaleCode | None = None
    ) -> tuple[CheckEvent, ...]:
        """Get events filtered by kind and/or locale."""
        return tuple(
            e
            for e in self.events
            if (kind is None or e.kind is kind) and (locale is None or e.locale == locale)
        )


@dataclass(frozen=True, slots=True)
class CheckSummary:
    """Aggregate of all source reports of one run.

    Attributes:
        reports: Source reports in input order

    Example:
        >>> summary = CheckSummary((SourceReport("Messages"),))
        >>> summary.passed, summary.error_count
        (True, 0)
    """

    reports: tuple[SourceReport, ...]

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"CheckSummary(sources={self.total_sources}, "
            f"errors={self.error_count}, "
            f"warnings={self.warning_count}, "
            f"fatal={len(self.get_fatal())})"
        )

    @property
    def total_sources(self) -> int:
        """Number of checked sources."""
        return len(self.reports)

    @property
    def error_count(self) -> int:
        """Total errors across all sources."""
        return sum(r.error_count for r in self.reports)

    @property
    def warning_count(self) -> int:
        """Total warnings across all sources."""
        return sum(r.warning_count for r in self.reports)

    @property
    def passed(self) -> bool:
        """Check if the run has zero errors."""
        return self.error_count == 0

    def get_fatal(self) -> tuple[SourceReport, ...]:
        """Get reports of sources aborted by a configuration error."""
        return tuple(r for r in self.reports if r.fatal is not None)

    def get_events(self, *, kind: EventKind | None = None) -> tuple[CheckEvent, ...]:
        """Get all events across sources, optionally of one kind."""
        return tuple(e for r in self.reports for e in r.get_events(kind=kind))

    def get_report(self, source: str) -> SourceReport | None:
        """Get the report of a source by name."""
        return next((r for r in self.reports if r.source == source), None)
