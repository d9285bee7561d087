"""Per-source check pipeline and multi-source fan-out.

For every located resource of a message source, in resource order (base
first):

    printf analyzer -> message analyzer -> presence check -> unused keys

A resource that could not be loaded yields one MISSING_LOCALE_FILE error and
is skipped. If the base resource is missing, the first located resource
establishes the baselines.

Sources are independent: check_sources runs them on a thread pool, each with
its own analyzers and EventCollector, and a ConfigurationError aborts only
the source it was raised for.

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor

from localecheck.analysis import ConsistencyAnalyzer, ResidualKeyReporter
from localecheck.diagnostics import (
    CheckEvent,
    ConfigurationError,
    EventCollector,
    EventSink,
    LocaleCheckError,
)
from localecheck.enums import Dialect, EventKind
from localecheck.grammar import grammar_for
from localecheck.model import LocaleResource, MessageSource

from .identifiers import validate_source
from .results import CheckSummary, LocaleOutcome, SourceReport

__all__ = [
    "check_source",
    "check_sources",
]

logger = logging.getLogger(__name__)


def missing_resource_event(source: MessageSource, resource: LocaleResource) -> CheckEvent:
    error = resource.error
    return CheckEvent(
        EventKind.MISSING_LOCALE_FILE,
        source.name,
        resource.locale,
        resource.resource_name,
        detail=str(error) if error is not None else "",
        diagnostic=error.diagnostic if isinstance(error, LocaleCheckError) else None,
    )


def check_source(
    source: MessageSource,
    *,
    sink: EventSink | None = None,
    require_placeholders: bool = False,
) -> SourceReport:
    """Check one message source.

    Args:
        source: Source to check
        sink: Optional sink receiving every event as it is emitted
        require_placeholders: Report formatted identifiers whose base value
            has no placeholders

    Returns:
        Report with all events and per-resource key accounting

    Raises:
        ConfigurationError: Conflicting dialect markers or duplicate
            identifiers; raised before any resource is parsed
    """
    validate_source(source)
    logger.info("Checking %s", source.name)

    collector = EventCollector(forward=sink)
    analyzers = tuple(
        ConsistencyAnalyzer(
            grammar,
            source.name,
            default_dialect=source.default_dialect,
            require_placeholders=require_placeholders,
        )
        for grammar in map(grammar_for, (Dialect.PRINTF, Dialect.MESSAGE))
    )
    reporter = ResidualKeyReporter(source.name)
    outcomes: list[LocaleOutcome] = []

    for resource in source.resources:
        if resource.entries is None:
            collector.emit(missing_resource_event(source, resource))
            continue

        logger.debug("Checking %s", resource.resource_name)
        entries = dict(resource.entries)
        original_size = len(entries)
        pending = {identifier.id: identifier for identifier in source.identifiers}

        for analyzer in analyzers:
            analyzer.check(resource.locale, entries, pending, collector)
        reporter.check_presence(resource.locale, entries, pending, collector)
        consumed = original_size - len(entries)
        unused = reporter.report_unused(resource.locale, entries, collector)

        outcomes.append(
            LocaleOutcome(
                locale=resource.locale,
                resource_name=resource.resource_name,
                original_size=original_size,
                consumed=consumed,
                residual=len(unused),
            )
        )

    report = SourceReport(
        source.name,
        collector.events,
        tuple(outcomes),
        resource_names=tuple(r.resource_name for r in source.resources),
    )
    logger.debug(
        "Checked %s: %d errors, %d warnings",
        source.name,
        report.error_count,
        report.warning_count,
    )
    return report


def _check_isolated(
    source: MessageSource, sink: EventSink | None, require_placeholders: bool
) -> SourceReport:
    try:
        return check_source(source, sink=sink, require_placeholders=require_placeholders)
    except ConfigurationError as e:
        logger.error("%s: %s", source.name, e)
        return SourceReport(source.name, fatal=e)


def check_sources(
    sources: Iterable[MessageSource],
    *,
    max_workers: int | None = None,
    sink: EventSink | None = None,
    require_placeholders: bool = False,
) -> CheckSummary:
    """Check several message sources, concurrently when more than one.

    Args:
        sources: Sources to check
        max_workers: Thread pool size (None for the executor default, 1 to
            run sequentially)
        sink: Optional shared sink; must be thread-safe when max_workers != 1
        require_placeholders: See check_source

    Returns:
        Summary with one report per source, in input order
    """
    pending = tuple(sources)
    if max_workers == 1 or len(pending) <= 1:
        reports = [_check_isolated(s, sink, require_placeholders) for s in pending]
    else:
        with ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="localecheck"
        ) as executor:
            reports = list(
                executor.map(lambda s: _check_isolated(s, sink, require_placeholders), pending)
            )

    summary = CheckSummary(tuple(reports))
    logger.info(
        "%d sources checked: %d errors, %d warnings",
        summary.total_sources,
        summary.error_count,
        summary.warning_count,
    )
    return summary
