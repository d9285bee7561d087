"""Resource loading for message sources.

Provides the protocol for resource loaders, a filesystem implementation
with path-traversal protection, the naming scheme that maps a base path and
a locale list to resource names, and the function that loads one
LocaleResource per name.

Naming:
    "i18n/Messages"  + ["de", "fr"]  -> i18n/Messages.properties,
                                        i18n/Messages_de.properties,
                                        i18n/Messages_fr.properties
    "i18n/messages/" + ["de"]        -> i18n/messages/.properties,
                                        i18n/messages/de.properties

    A non-empty base locale replaces the base name suffix-free resource:
    "i18n/Messages" with base locale "en" -> i18n/Messages_en.properties.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from localecheck.constants import LOCALE_SUFFIX_SEPARATOR, PROPERTIES_EXTENSION
from localecheck.diagnostics import ErrorTemplate, PropertiesSyntaxError
from localecheck.enums import LoadStatus
from localecheck.model import LocaleCode, LocaleResource, ResourceName

from .properties import parse_properties

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "ResourceLoader",
    # Concrete loader
    "PropertiesResourceLoader",
    # Naming and loading
    "resource_names",
    "load_resources",
]

logger = logging.getLogger(__name__)


class ResourceLoader(Protocol):
    """Protocol for loading resource text by name.

    Example:
        >>> class DictLoader:
        ...     def __init__(self, files: dict[str, str]) -> None:
        ...         self.files = files
        ...     def load(self, resource_name: str) -> str:
        ...         try:
        ...             return self.files[resource_name]
        ...         except KeyError:
        ...             raise FileNotFoundError(resource_name) from None
    """

    def load(self, resource_name: ResourceName) -> str:
        """Load resource text.

        Args:
            resource_name: Resource name relative to the loader root

        Returns:
            Decoded resource text

        Raises:
            FileNotFoundError: If the resource doesn't exist
            OSError: If the resource cannot be read
        """
        ...


def resource_names(
    base_path: str, locales: Iterable[LocaleCode], base_locale: LocaleCode = ""
) -> tuple[tuple[LocaleCode, ResourceName], ...]:
    """Build the ordered (locale, resource name) list for one message source.

    The base resource comes first with locale "" (or base_locale when set).

    Args:
        base_path: Resource base name; a trailing "/" selects directory mode
        locales: Secondary locale tags (base locale already removed)
        base_locale: Locale of the base resource, "" for the suffix-free file

    Example:
        >>> resource_names("i18n/Messages", ["de"])
        (('', 'i18n/Messages.properties'), ('de', 'i18n/Messages_de.properties'))
        >>> resource_names("i18n/msg/", ["fr"], base_locale="en")
        (('en', 'i18n/msg/en.properties'), ('fr', 'i18n/msg/fr.properties'))
    """
    separator = "" if base_path.endswith("/") else LOCALE_SUFFIX_SEPARATOR

    def name_for(locale: LocaleCode) -> ResourceName:
        return f"{base_path}{separator}{locale}{PROPERTIES_EXTENSION}"

    base_name = name_for(base_locale) if base_locale else f"{base_path}{PROPERTIES_EXTENSION}"
    names: list[tuple[LocaleCode, ResourceName]] = [(base_locale, base_name)]
    names.extend((locale, name_for(locale)) for locale in locales)
    return tuple(names)


@dataclass(frozen=True, slots=True)
class PropertiesResourceLoader:
    """File system loader for .properties resources under a root directory.

    Security:
        Resource names that are absolute or resolve outside the root
        directory are rejected.

    Attributes:
        root_dir: Directory resource names are resolved against
        encoding: Text encoding of resource files
    """

    root_dir: str | Path = "."
    encoding: str = "utf-8"
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Cache the resolved root directory."""
        object.__setattr__(self, "_resolved_root", Path(self.root_dir).resolve())

    def _resolve(self, resource_name: ResourceName) -> Path:
        msg = ErrorTemplate.unsafe_resource_name(resource_name).message
        if Path(resource_name).is_absolute():
            raise ValueError(msg)
        full_path = (self._resolved_root / resource_name).resolve()
        try:
            full_path.relative_to(self._resolved_root)
        except ValueError:
            raise ValueError(msg) from None
        return full_path

    def load(self, resource_name: ResourceName) -> str:
        """Read one resource file.

        Raises:
            ValueError: If the name escapes the root directory
            FileNotFoundError: If the file doesn't exist
            OSError: If the file cannot be read
        """
        return self._resolve(resource_name).read_text(encoding=self.encoding)


def load_resources(
    loader: ResourceLoader,
    base_path: str,
    locales: Iterable[LocaleCode],
    base_locale: LocaleCode = "",
) -> tuple[LocaleResource, ...]:
    """Load every resource of one message source, base resource first.

    Missing resources become LocaleResource(entries=None, status=NOT_FOUND);
    unreadable or malformed ones carry status ERROR and the exception.

    Raises:
        ValueError: If a resource name escapes the loader root
    """
    resources: list[LocaleResource] = []
    for locale, name in resource_names(base_path, locales, base_locale):
        try:
            entries = parse_properties(loader.load(name))
        except FileNotFoundError:
            logger.debug("Resource not found: %s", name)
            resources.append(LocaleResource(locale, name, None, LoadStatus.NOT_FOUND))
            continue
        except (OSError, UnicodeDecodeError, PropertiesSyntaxError) as e:
            logger.warning("Failed to load %s: %s", name, e)
            resources.append(LocaleResource(locale, name, None, LoadStatus.ERROR, e))
            continue
        resources.append(LocaleResource(locale, name, entries))
    return tuple(resources)
