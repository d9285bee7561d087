"""Parser for Java .properties resource text.

Supports the full line-oriented syntax:
    - '#' and '!' comment lines, blank lines
    - '=', ':' or whitespace between key and value
    - backslash line continuation (leading whitespace of the next line dropped)
    - escapes \\t \\n \\r \\f and \\uXXXX; any other escaped character is literal

Later definitions of a key replace earlier ones.

Python 3.13+. Zero external dependencies.
"""

import re
from collections.abc import Iterator

from localecheck.diagnostics import ErrorTemplate, PropertiesSyntaxError

__all__ = ["parse_properties"]

_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

# Whitespace recognized by the format (not the full Unicode set).
_WHITESPACE = " \t\f"
_SEPARATORS = "=:"

_ESCAPES: dict[str, str] = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def _continues(line: str) -> bool:
    """Check if a line ends with an odd number of backslashes."""
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _logical_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield (1-indexed starting line number, joined logical line)."""
    natural = _LINE_BREAK.split(text)
    i = 0
    while i < len(natural):
        line_no = i + 1
        line = natural[i].lstrip(_WHITESPACE)
        i += 1
        if not line or line[0] in "#!":
            continue
        parts: list[str] = []
        while _continues(line):
            parts.append(line[:-1])
            if i >= len(natural):
                line = ""
                break
            line = natural[i].lstrip(_WHITESPACE)
            i += 1
        parts.append(line)
        yield line_no, "".join(parts)


def _split_entry(line: str) -> tuple[str, str]:
    """Split a logical line into raw (still escaped) key and value."""
    end = 0
    while end < len(line):
        ch = line[end]
        if ch == "\\":
            end += 2
            continue
        if ch in _SEPARATORS or ch in _WHITESPACE:
            break
        end += 1
    end = min(end, len(line))

    start = end
    while start < len(line) and line[start] in _WHITESPACE:
        start += 1
    if start < len(line) and line[start] in _SEPARATORS:
        start += 1
        while start < len(line) and line[start] in _WHITESPACE:
            start += 1
    return line[:end], line[start:]


def _unescape(raw: str, line_no: int) -> str:
    if "\\" not in raw:
        return raw
    out: list[str] = []
    i = 0
    while i < len(raw):
        ch = raw[i]
        if ch != "\\":
            out.append(ch)
            i += 1
            continue
        i += 1
        if i >= len(raw):
            break
        ch = raw[i]
        if ch == "u":
            digits = raw[i + 1 : i + 5]
            if len(digits) != 4 or not _HEX_DIGITS.issuperset(digits):
                escape = "\\u" + digits
                raise PropertiesSyntaxError(
                    ErrorTemplate.bad_unicode_escape(escape, line_no), line=line_no
                )
            out.append(chr(int(digits, 16)))
            i += 5
        else:
            out.append(_ESCAPES.get(ch, ch))
            i += 1
    return _join_surrogates("".join(out), line_no)


def _join_surrogates(text: str, line_no: int) -> str:
    """Combine \\uD83D\\uDE00-style pairs into one character."""
    if not any(0xD800 <= ord(ch) <= 0xDFFF for ch in text):
        return text
    encoded = text.encode("utf-16-le", "surrogatepass")
    try:
        return encoded.decode("utf-16-le")
    except UnicodeDecodeError as e:
        unit = int.from_bytes(encoded[e.start : e.start + 2], "little")
        escape = f"\\u{unit:04X}"
        raise PropertiesSyntaxError(
            ErrorTemplate.unpaired_surrogate(escape, line_no), line=line_no
        ) from None


def parse_properties(text: str) -> dict[str, str]:
    """Parse .properties text into an ordered key/value dict.

    Args:
        text: Resource text (already decoded)

    Returns:
        Keys in first-definition order mapped to their last value

    Raises:
        PropertiesSyntaxError: On a malformed \\uXXXX escape or an unpaired
            surrogate escape

    Example:
        >>> parse_properties("# greeting\\nhello = Hello, %s!\\nbye: Bye \\\\\\n  now")
        {'hello': 'Hello, %s!', 'bye': 'Bye now'}
    """
    entries: dict[str, str] = {}
    for line_no, line in _logical_lines(text):
        raw_key, raw_value = _split_entry(line)
        entries[_unescape(raw_key, line_no)] = _unescape(raw_value, line_no)
    return entries
