"""MessageFormat-style template grammar.

Parses templates such as "Hello {0}, {1,number,#.##} files" into one token
per argument block. A block is {index[,type[,style]]}; the style segment is
discarded, so two blocks have the same shape when index and type agree:

    "some numb {0,number,#} {0,number,short}" -> ("0,number", "0,number")

Quoting follows MessageFormat: '' is a literal quote, a single quote toggles
quoted text (where braces are literal), and inside a block quoted text is
copied verbatim. Nested braces in the style segment (choice sub-patterns)
are tracked by depth and never close the block early.

Python 3.13+. Zero external dependencies.
"""

import re
from dataclasses import dataclass

from localecheck.constants import MESSAGE_FORMAT_TYPES
from localecheck.diagnostics import (
    BadArgumentIndexError,
    BadFormatTypeError,
    ErrorTemplate,
    UnbalancedBracesError,
)
from localecheck.enums import Dialect

from .cursor import Cursor

__all__ = [
    "MessageGrammar",
    "MessageToken",
    "parse_message",
]

# Signed ASCII integer, as accepted for argument numbers.
_INDEX_PATTERN = re.compile(r"[+-]?[0-9]+")

# Segment slots of an argument block.
_TEXT, _INDEX, _TYPE, _STYLE = 0, 1, 2, 3


@dataclass(frozen=True, slots=True)
class MessageToken:
    """One MessageFormat argument block.

    Attributes:
        argument_index: Zero-based argument number
        format_type: "" (bare argument), "number", "date", "time" or "choice"
    """

    argument_index: int
    format_type: str = ""

    def __str__(self) -> str:
        """Return canonical "index,type" text."""
        return f"{self.argument_index},{self.format_type}"


def _make_token(index_text: str, type_text: str, position: int) -> MessageToken:
    if _INDEX_PATTERN.fullmatch(index_text) is None:
        raise BadArgumentIndexError(
            ErrorTemplate.bad_argument_index(index_text, position), index_text=index_text
        )
    index = int(index_text)
    if index < 0:
        raise BadArgumentIndexError(
            ErrorTemplate.negative_argument_index(index, position), index_text=index_text
        )

    raw_type = type_text.strip()
    format_type = raw_type.lower()
    if format_type not in MESSAGE_FORMAT_TYPES:
        raise BadFormatTypeError(
            ErrorTemplate.bad_format_type(raw_type, position), format_type=raw_type
        )
    return MessageToken(argument_index=index, format_type=format_type)


def parse_message(template: str) -> tuple[MessageToken, ...]:
    """Parse a MessageFormat-style template into argument tokens.

    Args:
        template: Template text

    Returns:
        One token per argument block, in template order

    Raises:
        BadArgumentIndexError: Index segment is not a non-negative integer
        BadFormatTypeError: Type outside "", number, date, time and choice
        UnbalancedBracesError: Template ends inside an argument block

    Example:
        >>> [str(t) for t in parse_message("{0,choice,0#none|1#{0,number} items}")]
        ['0,choice']
        >>> parse_message("It''s '{literal}'")
        ()
    """
    tokens: list[MessageToken] = []
    segments: list[list[str]] = [[], [], [], []]
    part = _TEXT
    depth = 0
    in_quote = False
    cursor = Cursor(template, 0)

    while not cursor.is_eof:
        ch = cursor.current
        if part == _TEXT:
            if ch == "'":
                if cursor.peek(1) == "'":
                    segments[_TEXT].append("'")
                    cursor = cursor.advance()
                else:
                    in_quote = not in_quote
            elif ch == "{" and not in_quote:
                part = _INDEX
            else:
                segments[_TEXT].append(ch)
        elif in_quote:
            segments[part].append(ch)
            if ch == "'":
                in_quote = False
        else:
            match ch:
                case "," if part < _STYLE:
                    part += 1
                case "{":
                    depth += 1
                    segments[part].append(ch)
                case "}" if depth == 0:
                    tokens.append(
                        _make_token(
                            "".join(segments[_INDEX]), "".join(segments[_TYPE]), cursor.pos
                        )
                    )
                    for segment in segments[_INDEX:]:
                        segment.clear()
                    part = _TEXT
                case "}":
                    depth -= 1
                    segments[part].append(ch)
                case " " if part == _TYPE and not segments[_TYPE]:
                    pass
                case "'":
                    in_quote = True
                    segments[part].append(ch)
                case _:
                    segments[part].append(ch)
        cursor = cursor.advance()

    if part != _TEXT:
        raise UnbalancedBracesError(ErrorTemplate.unbalanced_braces(len(template)))
    return tuple(tokens)


class MessageGrammar:
    """FormatGrammar implementation for MessageFormat-style templates."""

    __slots__ = ()

    @property
    def dialect(self) -> Dialect:
        """Dialect this grammar parses."""
        return Dialect.MESSAGE

    def parse(self, template: str) -> tuple[MessageToken, ...]:
        """Parse a template (see parse_message)."""
        return parse_message(template)

    def __repr__(self) -> str:
        return "MessageGrammar()"
