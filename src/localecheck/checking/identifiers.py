"""Identifier resolution and validation.

Application code declares message keys in groups (one group per message
source), optionally marking the whole group and individual keys with a
dialect, and may contribute keys that are computed at runtime. This module
turns such declarations into MessageIdentifier tuples and rejects
configurations the checker cannot interpret.

Python 3.13+. Zero external dependencies.
"""

from typing import TypeAlias
from collections.abc import Iterable, Mapping

from localecheck.diagnostics import ConfigurationError, ConflictingDialectError, ErrorTemplate
from localecheck.enums import Dialect
from localecheck.model import MessageId, MessageIdentifier, MessageSource

__all__ = [
    "resolve_default_dialect",
    "resolve_identifiers",
    "validate_source",
]

Declarations: TypeAlias = Mapping[MessageId, Iterable[Dialect]] | Iterable[
    tuple[MessageId, Iterable[Dialect]]
]


def resolve_default_dialect(source: str, type_dialects: Iterable[Dialect] = ()) -> Dialect | None:
    """Resolve the group-level dialect marker of a message source.

    Raises:
        ConflictingDialectError: If more than one dialect is given

    Example:
        >>> resolve_default_dialect("Messages", [Dialect.MESSAGE]) is Dialect.MESSAGE
        True
        >>> resolve_default_dialect("Messages") is None
        True
    """
    dialects = frozenset(type_dialects)
    if len(dialects) > 1:
        raise ConflictingDialectError(
            ErrorTemplate.conflicting_source_dialect(source), source=source
        )
    return next(iter(dialects), None)


def resolve_identifiers(
    source: str,
    declarations: Declarations,
    *,
    dynamic_ids: Iterable[MessageId] = (),
) -> tuple[MessageIdentifier, ...]:
    """Build identifiers from per-key dialect markers.

    Markers are kept as declared; a key with two markers is rejected later by
    validate_source so that the conflict aborts only its own source. Dynamic
    keys carry no marker and replace a declared key of the same name.

    Args:
        source: Source name for error messages
        declarations: Key to markers, as a mapping or (key, markers) pairs
        dynamic_ids: Keys computed at runtime

    Returns:
        Identifiers in declaration order, dynamic ones last

    Raises:
        ConfigurationError: If a key is declared twice
    """
    pairs = declarations.items() if isinstance(declarations, Mapping) else declarations

    resolved: dict[MessageId, MessageIdentifier] = {}
    for key, markers in pairs:
        if key in resolved:
            raise ConfigurationError(ErrorTemplate.duplicate_identifier(source, key))
        resolved[key] = MessageIdentifier(key, frozenset(markers))

    for key in dynamic_ids:
        resolved.pop(key, None)
        resolved[key] = MessageIdentifier(key, is_dynamic=True)
    return tuple(resolved.values())


def validate_source(source: MessageSource) -> None:
    """Reject a source whose identifiers cannot be routed.

    Raises:
        ConflictingDialectError: If an identifier declares both dialects
        ConfigurationError: If an identifier id occurs twice
    """
    seen: set[MessageId] = set()
    for identifier in source.identifiers:
        if identifier.is_conflicting:
            raise ConflictingDialectError(
                ErrorTemplate.conflicting_identifier_dialect(source.name, identifier.id),
                source=source.name,
                key=identifier.id,
            )
        if identifier.id in seen:
            raise ConfigurationError(ErrorTemplate.duplicate_identifier(source.name, identifier.id))
        seen.add(identifier.id)
