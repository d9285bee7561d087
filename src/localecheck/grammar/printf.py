"""printf-style template grammar.

Parses templates written for java.util.Formatter-compatible formatting:

    %[argument_index$][flags][width][.precision][t]conversion

into placeholder tokens. Literal text, "%%" and "%n" consume no argument
and never produce tokens; every other specifier produces exactly one token
whose canonical string re-serializes index, flags, width, precision and
conversion without the leading '%':

    "%4$s %3$s"      -> ("4$s", "3$s")
    "%2$s %s %<s"    -> ("2$s", "s", "<s")
    "%1$tm %1$-10d"  -> ("1$tm", "1$-10d")

Validation mirrors the formatter's own checks so that a template accepted
here does not fail at format time because of its specifiers alone.

Python 3.13+. Zero external dependencies.
"""

import re
from dataclasses import dataclass
from enum import IntFlag

from localecheck.constants import (
    PRINTF_CHARACTER_CONVERSIONS,
    PRINTF_DATETIME_CONVERSIONS,
    PRINTF_FLOAT_CONVERSIONS,
    PRINTF_GENERAL_CONVERSIONS,
    PRINTF_INTEGER_CONVERSIONS,
    PRINTF_TEXT_CONVERSIONS,
)
from localecheck.diagnostics import (
    DuplicateFlagsError,
    ErrorTemplate,
    IncompatibleFlagsError,
    InvalidPrecisionError,
    InvalidWidthError,
    MissingWidthError,
    UnknownConversionError,
)
from localecheck.enums import Dialect

__all__ = [
    "ORDINARY_INDEX",
    "RELATIVE_INDEX",
    "PrintfFlag",
    "PrintfGrammar",
    "PrintfToken",
    "parse_printf",
]

# Index values of tokens without an explicit "n$" index.
ORDINARY_INDEX: int = 0
RELATIVE_INDEX: int = -1

# Marker for absent width/precision.
_UNSET: int = -1

# ASCII digits only: \d would also accept other Unicode decimal digits.
_SPECIFIER = re.compile(
    r"%([0-9]+\$)?([-#+ 0,(<]*)?([0-9]+)?(\.[0-9]+)?([tT])?([a-zA-Z%])"
)

_VALID_CONVERSIONS: frozenset[str] = (
    PRINTF_GENERAL_CONVERSIONS
    | PRINTF_CHARACTER_CONVERSIONS
    | PRINTF_INTEGER_CONVERSIONS
    | PRINTF_FLOAT_CONVERSIONS
    | PRINTF_TEXT_CONVERSIONS
)


class PrintfFlag(IntFlag):
    """Specifier flags, one bit each."""

    NONE = 0
    LEFT_JUSTIFY = 1 << 0  # '-'
    ALTERNATE = 1 << 1  # '#'
    PLUS = 1 << 2  # '+'
    LEADING_SPACE = 1 << 3  # ' '
    ZERO_PAD = 1 << 4  # '0'
    GROUP = 1 << 5  # ','
    PARENTHESES = 1 << 6  # '('
    PREVIOUS = 1 << 7  # '<'


# Canonical flag order used when rendering tokens.
_FLAG_CHARS: dict[str, PrintfFlag] = {
    "-": PrintfFlag.LEFT_JUSTIFY,
    "#": PrintfFlag.ALTERNATE,
    "+": PrintfFlag.PLUS,
    " ": PrintfFlag.LEADING_SPACE,
    "0": PrintfFlag.ZERO_PAD,
    ",": PrintfFlag.GROUP,
    "(": PrintfFlag.PARENTHESES,
    "<": PrintfFlag.PREVIOUS,
}


def _flags_text(flags: PrintfFlag) -> str:
    return "".join(ch for ch, flag in _FLAG_CHARS.items() if flag in flags)


@dataclass(frozen=True, slots=True)
class PrintfToken:
    """One argument-consuming printf specifier.

    Attributes:
        index: Explicit argument index (> 0), ORDINARY_INDEX or RELATIVE_INDEX
        conversion: Conversion character, case preserved ("s", "X"); for
            date/time specifiers the suffix after 't'/'T' ("m", "Y")
        flags: Specifier flags
        width: Minimum width, -1 if absent
        precision: Precision, -1 if absent
        is_datetime: True for 't'/'T' date/time specifiers
        upper_datetime: True if the date/time prefix was 'T'
    """

    index: int
    conversion: str
    flags: PrintfFlag = PrintfFlag.NONE
    width: int = _UNSET
    precision: int = _UNSET
    is_datetime: bool = False
    upper_datetime: bool = False

    def __str__(self) -> str:
        """Return canonical specifier text without the leading '%'."""
        parts: list[str] = []
        if self.index > 0:
            parts.append(f"{self.index}$")
        parts.append(_flags_text(self.flags))
        if self.width != _UNSET:
            parts.append(str(self.width))
        if self.precision != _UNSET:
            parts.append(f".{self.precision}")
        if self.upper_datetime:
            # 'T' upper-cases the whole output, so %Tb and %TB format alike
            parts.append("T" + self.conversion.upper())
        elif self.is_datetime:
            parts.append("t" + self.conversion)
        else:
            parts.append(self.conversion)
        return "".join(parts)


# ============================================================================
# SPECIFIER VALIDATION
# ============================================================================


def _parse_flags(text: str, position: int) -> PrintfFlag:
    flags = PrintfFlag.NONE
    for ch in text:
        flag = _FLAG_CHARS[ch]
        if flag in flags:
            raise DuplicateFlagsError(
                ErrorTemplate.duplicate_flags(ch, position), flags=ch
            )
        flags |= flag
    return flags


def _reject_flags(
    token: PrintfToken, conversion: str, position: int, *bad: PrintfFlag
) -> None:
    for flag in bad:
        if flag in token.flags:
            flag_text = _flags_text(flag)
            raise IncompatibleFlagsError(
                ErrorTemplate.flag_conversion_mismatch(flag_text, conversion, position),
                flags=flag_text,
                conversion=conversion,
            )


def _require_width(token: PrintfToken, position: int, *flags: PrintfFlag) -> None:
    if token.width != _UNSET:
        return
    for flag in flags:
        if flag in token.flags:
            raise MissingWidthError(
                ErrorTemplate.missing_width(str(token), position),
                flags=_flags_text(flag),
                conversion=token.conversion,
            )


def _reject_precision(token: PrintfToken, position: int) -> None:
    if token.precision != _UNSET:
        raise InvalidPrecisionError(
            ErrorTemplate.invalid_precision(token.precision, position),
            precision=token.precision,
        )


def _illegal_flags(token: PrintfToken, position: int) -> IncompatibleFlagsError:
    text = _flags_text(token.flags)
    return IncompatibleFlagsError(ErrorTemplate.illegal_flags(text, position), flags=text)


_NON_NUMERIC_FLAGS = (
    PrintfFlag.PLUS,
    PrintfFlag.LEADING_SPACE,
    PrintfFlag.ZERO_PAD,
    PrintfFlag.GROUP,
    PrintfFlag.PARENTHESES,
)


def _check_general(token: PrintfToken, position: int) -> None:
    conversion = token.conversion.lower()
    if conversion in ("b", "h"):
        _reject_flags(token, token.conversion, position, PrintfFlag.ALTERNATE)
    _require_width(token, position, PrintfFlag.LEFT_JUSTIFY)
    _reject_flags(token, token.conversion, position, *_NON_NUMERIC_FLAGS)


def _check_character(token: PrintfToken, position: int) -> None:
    _reject_precision(token, position)
    _reject_flags(token, token.conversion, position, PrintfFlag.ALTERNATE, *_NON_NUMERIC_FLAGS)
    _require_width(token, position, PrintfFlag.LEFT_JUSTIFY)


def _check_datetime(token: PrintfToken, prefix: str, position: int) -> None:
    _reject_precision(token, position)
    if token.conversion not in PRINTF_DATETIME_CONVERSIONS:
        conversion = prefix + token.conversion
        raise UnknownConversionError(
            ErrorTemplate.unknown_conversion(conversion, position), conversion=conversion
        )
    _reject_flags(
        token, prefix + token.conversion, position, PrintfFlag.ALTERNATE, *_NON_NUMERIC_FLAGS
    )
    _require_width(token, position, PrintfFlag.LEFT_JUSTIFY)


def _check_numeric(token: PrintfToken, position: int) -> None:
    if token.width < _UNSET:
        raise InvalidWidthError(
            ErrorTemplate.invalid_width(token.width, position), width=token.width
        )
    if token.precision < _UNSET:
        _reject_precision(token, position)
    _require_width(token, position, PrintfFlag.LEFT_JUSTIFY, PrintfFlag.ZERO_PAD)
    flags = token.flags
    if (PrintfFlag.PLUS in flags and PrintfFlag.LEADING_SPACE in flags) or (
        PrintfFlag.LEFT_JUSTIFY in flags and PrintfFlag.ZERO_PAD in flags
    ):
        raise _illegal_flags(token, position)


def _check_integer(token: PrintfToken, position: int) -> None:
    _check_numeric(token, position)
    _reject_precision(token, position)
    if token.conversion == "d":
        _reject_flags(token, "d", position, PrintfFlag.ALTERNATE)
    else:
        _reject_flags(token, token.conversion, position, PrintfFlag.GROUP)


def _check_float(token: PrintfToken, position: int) -> None:
    _check_numeric(token, position)
    match token.conversion.lower():
        case "a":
            _reject_flags(
                token, token.conversion, position, PrintfFlag.PARENTHESES, PrintfFlag.GROUP
            )
        case "e":
            _reject_flags(token, token.conversion, position, PrintfFlag.GROUP)
        case "g":
            _reject_flags(token, token.conversion, position, PrintfFlag.ALTERNATE)
        case _:
            pass


def _check_text(token: PrintfToken, position: int) -> None:
    _reject_precision(token, position)
    if token.conversion == "%":
        if token.flags not in (PrintfFlag.NONE, PrintfFlag.LEFT_JUSTIFY):
            raise _illegal_flags(token, position)
        _require_width(token, position, PrintfFlag.LEFT_JUSTIFY)
    else:
        if token.width != _UNSET:
            raise InvalidWidthError(
                ErrorTemplate.invalid_width(token.width, position), width=token.width
            )
        if token.flags != PrintfFlag.NONE:
            raise _illegal_flags(token, position)


def _build_token(match: re.Match[str]) -> PrintfToken | None:
    """Validate one matched specifier.

    Returns:
        The token, or None for "%%" and "%n"
    """
    position = match.start()
    index_text, flags_text, width_text, precision_text, prefix, conversion = match.groups()

    index = int(index_text[:-1]) if index_text else ORDINARY_INDEX
    flags = _parse_flags(flags_text or "", position)
    if PrintfFlag.PREVIOUS in flags:
        index = RELATIVE_INDEX

    token = PrintfToken(
        index=index,
        conversion=conversion,
        flags=flags,
        width=int(width_text) if width_text else _UNSET,
        precision=int(precision_text[1:]) if precision_text else _UNSET,
        is_datetime=prefix is not None,
        upper_datetime=prefix == "T",
    )

    if prefix is not None:
        _check_datetime(token, prefix, position)
        return token

    if conversion not in _VALID_CONVERSIONS:
        raise UnknownConversionError(
            ErrorTemplate.unknown_conversion(conversion, position), conversion=conversion
        )

    if conversion in PRINTF_GENERAL_CONVERSIONS:
        _check_general(token, position)
    elif conversion in PRINTF_CHARACTER_CONVERSIONS:
        _check_character(token, position)
    elif conversion in PRINTF_INTEGER_CONVERSIONS:
        _check_integer(token, position)
    elif conversion in PRINTF_FLOAT_CONVERSIONS:
        _check_float(token, position)
    else:
        _check_text(token, position)
        return None
    return token


def _check_literal(template: str, start: int, end: int) -> None:
    """Reject a '%' in literal text that did not start a valid specifier."""
    idx = template.find("%", start, end)
    if idx == -1:
        return
    conversion = "%" if idx >= end - 1 else template[idx + 1]
    raise UnknownConversionError(
        ErrorTemplate.unknown_conversion(conversion, idx), conversion=conversion
    )


def parse_printf(template: str) -> tuple[PrintfToken, ...]:
    """Parse a printf-style template into placeholder tokens.

    Args:
        template: Template text

    Returns:
        Tokens in template order

    Raises:
        FormatParseError: UnknownConversionError, DuplicateFlagsError,
            IncompatibleFlagsError, MissingWidthError, InvalidWidthError or
            InvalidPrecisionError

    Example:
        >>> [str(t) for t in parse_printf("%2$s %s %<s %<s")]
        ['2$s', 's', '<s', '<s']
        >>> parse_printf("Fixed string, %%, %n")
        ()
    """
    tokens: list[PrintfToken] = []
    pos = 0
    while pos < len(template):
        match = _SPECIFIER.search(template, pos)
        if match is None:
            _check_literal(template, pos, len(template))
            break
        _check_literal(template, pos, match.start())
        token = _build_token(match)
        if token is not None:
            tokens.append(token)
        pos = match.end()
    return tuple(tokens)


class PrintfGrammar:
    """FormatGrammar implementation for printf-style templates."""

    __slots__ = ()

    @property
    def dialect(self) -> Dialect:
        """Dialect this grammar parses."""
        return Dialect.PRINTF

    def parse(self, template: str) -> tuple[PrintfToken, ...]:
        """Parse a template (see parse_printf)."""
        return parse_printf(template)

    def __repr__(self) -> str:
        return "PrintfGrammar()"
