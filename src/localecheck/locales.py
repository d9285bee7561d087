"""Locale list configuration.

Locale lists arrive as comma-separated strings from configuration ("de, fr,
pt-BR") or as sequences from callers. Tags are normalized to the POSIX form
used in resource file names (pt_BR), and the base locale is dropped because
its resource is always checked first.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Iterable

from localecheck.constants import LOCALE_LIST_SEPARATOR
from localecheck.core.babel_compat import get_locale_class, get_unknown_locale_error, require_babel
from localecheck.diagnostics import ConfigurationError, ErrorTemplate

__all__ = [
    "is_known_locale",
    "normalize_locale",
    "parse_locale_list",
    "validate_locale_tags",
]

logger = logging.getLogger(__name__)


def normalize_locale(locale_code: str) -> str:
    """Convert a BCP-47 locale code to the POSIX form used in file names.

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("de")
        'de'
    """
    return locale_code.strip().replace("-", "_")


def parse_locale_list(
    locales: str | Iterable[str] | None, base_locale: str = ""
) -> tuple[str, ...]:
    """Parse a locale list into ordered, unique, normalized tags.

    Args:
        locales: Comma-separated string, iterable of tags, or None
        base_locale: Locale of the base resource (dropped from the result)

    Returns:
        Tags in first-seen order, without empties and the base locale

    Example:
        >>> parse_locale_list(" de, ,fr,en,de ", base_locale="en")
        ('de', 'fr')
    """
    if locales is None:
        return ()
    raw = locales.split(LOCALE_LIST_SEPARATOR) if isinstance(locales, str) else locales
    base = normalize_locale(base_locale)

    tags: dict[str, None] = {}
    for item in raw:
        tag = normalize_locale(item)
        if tag and tag != base:
            tags.setdefault(tag, None)
    return tuple(tags)


@functools.lru_cache(maxsize=256)
def is_known_locale(locale_code: str) -> bool:
    """Check a tag against CLDR via Babel.

    Thread-safe via lru_cache internal locking.

    Raises:
        BabelImportError: If Babel is not installed
    """
    locale_class = get_locale_class()
    unknown_locale_error = get_unknown_locale_error()
    try:
        locale_class.parse(normalize_locale(locale_code))
    except (unknown_locale_error, ValueError):
        return False
    return True


def validate_locale_tags(tags: Iterable[str]) -> tuple[str, ...]:
    """Reject locale tags unknown to CLDR.

    Args:
        tags: Tags to validate

    Returns:
        The tags, unchanged, as a tuple

    Raises:
        ConfigurationError: Listing every unknown tag
        BabelImportError: If Babel is not installed
    """
    require_babel("validate_locale_tags")
    checked = tuple(tags)
    unknown = tuple(tag for tag in checked if not is_known_locale(tag))
    if unknown:
        raise ConfigurationError(ErrorTemplate.unknown_locales(unknown))
    logger.debug("Validated %d locale tags", len(checked))
    return checked
