"""Plain-file mode.

Checks a resource family without declared identifiers: the keys of the
base resource are the identifiers, all tagged with one optional dialect.

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Iterable

from localecheck.diagnostics import CheckEvent, EventCollector, EventSink
from localecheck.enums import Dialect, EventKind
from localecheck.model import LocaleCode, MessageIdentifier, MessageSource
from localecheck.resources import ResourceLoader, load_resources

from .orchestrator import check_source, missing_resource_event
from .results import SourceReport

__all__ = [
    "check_plain",
    "plain_source",
]

logger = logging.getLogger(__name__)


def plain_source(
    loader: ResourceLoader,
    base_path: str,
    locales: Iterable[LocaleCode],
    *,
    base_locale: LocaleCode = "",
    dialect: Dialect | None = None,
) -> MessageSource:
    """Load a resource family and derive its identifiers from the base resource.

    Args:
        loader: Resource loader
        base_path: Resource base name ("i18n/Messages" or "i18n/messages/")
        locales: Secondary locale tags
        base_locale: Locale of the base resource
        dialect: Dialect assigned to every key, None for presence checks only

    Returns:
        Source named after base_path; no identifiers if the base resource
        is missing
    """
    resources = load_resources(loader, base_path, locales, base_locale)
    base_entries = resources[0].entries or {}
    markers = frozenset({dialect}) if dialect is not None else frozenset()
    identifiers = tuple(MessageIdentifier(key, markers) for key in base_entries)
    logger.debug("Loaded %d base keys from %s", len(identifiers), resources[0].resource_name)
    return MessageSource(base_path, identifiers, resources, default_dialect=dialect)


def check_plain(
    loader: ResourceLoader,
    base_path: str,
    locales: Iterable[LocaleCode],
    *,
    base_locale: LocaleCode = "",
    dialect: Dialect | None = None,
    sink: EventSink | None = None,
    require_placeholders: bool = False,
) -> SourceReport:
    """Check one resource family in plain-file mode.

    A missing base resource yields MISSING_LOCALE_FILE and an empty one
    NO_MESSAGES; in both cases nothing else is checked.
    """
    source = plain_source(loader, base_path, locales, base_locale=base_locale, dialect=dialect)
    base = source.resources[0]

    if not base.entries:
        collector = EventCollector(forward=sink)
        if base.entries is None:
            collector.emit(missing_resource_event(source, base))
        else:
            collector.emit(
                CheckEvent(EventKind.NO_MESSAGES, source.name, base.locale, base.resource_name)
            )
        return SourceReport(source.name, collector.events)

    return check_source(source, sink=sink, require_placeholders=require_placeholders)
