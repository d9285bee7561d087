"""Data model shared by the analyzers and the orchestrator.

A MessageSource is one unit of checking: the identifiers application code
declares together with the locale resources that must define them.

Python 3.13+. Zero external dependencies.
"""

from typing import TypeAlias
from collections.abc import Mapping
from dataclasses import dataclass

from localecheck.enums import Dialect, LoadStatus

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Type aliases
    "MessageId",
    "LocaleCode",
    "ResourceName",
    "LocaleEntries",
    # Model
    "MessageIdentifier",
    "LocaleResource",
    "MessageSource",
]

MessageId: TypeAlias = str
"""Key of a message in every locale resource (e.g., 'greeting', 'errors.404')."""

LocaleCode: TypeAlias = str
"""Locale tag of a resource (e.g., 'de', 'pt_BR'); '' for the base resource."""

ResourceName: TypeAlias = str
"""Resource file name relative to the loader root (e.g., 'Messages_de.properties')."""

LocaleEntries: TypeAlias = Mapping[MessageId, str]
"""Loaded key/value content of one locale resource."""


@dataclass(frozen=True, slots=True)
class MessageIdentifier:
    """A message key declared by application code.

    Attributes:
        id: Resource key
        dialects: Dialect markers declared for this key (normally 0 or 1)
        is_dynamic: Key computed at runtime; never format-checked

    Example:
        >>> MessageIdentifier("greet", frozenset({Dialect.PRINTF})).declared_dialect
        <Dialect.PRINTF: 'printf'>
    """

    id: MessageId
    dialects: frozenset[Dialect] = frozenset()
    is_dynamic: bool = False

    @property
    def declared_dialect(self) -> Dialect | None:
        """The single declared dialect, or None when undeclared or conflicting."""
        if len(self.dialects) == 1:
            return next(iter(self.dialects))
        return None

    @property
    def is_conflicting(self) -> bool:
        """Check if more than one dialect was declared."""
        return len(self.dialects) > 1


@dataclass(frozen=True, slots=True)
class LocaleResource:
    """One locale resource of a message source.

    Attributes:
        locale: Locale tag ('' for the base resource)
        resource_name: Resource name used in reports
        entries: Loaded key/value pairs, None if the resource could not be loaded
        status: Load outcome
        error: Exception raised while loading (status ERROR only)
    """

    locale: LocaleCode
    resource_name: ResourceName
    entries: LocaleEntries | None
    status: LoadStatus = LoadStatus.SUCCESS
    error: Exception | None = None

    @property
    def is_located(self) -> bool:
        """Check if entries are available."""
        return self.entries is not None


@dataclass(frozen=True, slots=True)
class MessageSource:
    """Declared identifiers plus the resources that must define them.

    Attributes:
        name: Source name used in reports (e.g., 'com.example.Messages')
        identifiers: Declared identifiers in declaration order
        resources: Locale resources, base resource first
        default_dialect: Dialect of identifiers without their own marker
    """

    name: str
    identifiers: tuple[MessageIdentifier, ...]
    resources: tuple[LocaleResource, ...]
    default_dialect: Dialect | None = None
