"""Tests for the .properties parser."""

from __future__ import annotations

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from localecheck.diagnostics import PropertiesSyntaxError
from localecheck.resources import parse_properties
from tests.strategies import message_keys, safe_text


class TestPropertiesSyntax:
    """Test the supported syntax."""

    def test_separators(self) -> None:
        """'=', ':' and whitespace separate key and value."""
        text = "a=1\nb : 2\nc 3\nd\t=\t4"
        assert parse_properties(text) == {"a": "1", "b": "2", "c": "3", "d": "4"}

    def test_comments_and_blank_lines(self) -> None:
        """'#' and '!' comment lines and blank lines are skipped."""
        text = "# comment\n! other\n\n   \na = 1"
        assert parse_properties(text) == {"a": "1"}

    def test_key_without_value(self) -> None:
        """A bare key has an empty value."""
        assert parse_properties("empty\nalso =") == {"empty": "", "also": ""}

    def test_continuation(self) -> None:
        """Backslash joins lines and drops the next line's indentation."""
        text = "long = first \\\n    second \\\n    third"
        assert parse_properties(text) == {"long": "first second third"}

    def test_escaped_backslash_does_not_continue(self) -> None:
        """An even run of backslashes is literal."""
        assert parse_properties("path = C:\\\\\nnext = 1") == {"path": "C:\\", "next": "1"}

    def test_continuation_at_eof(self) -> None:
        """A trailing continuation at end of input is dropped."""
        assert parse_properties("a = 1\\") == {"a": "1"}

    def test_escapes(self) -> None:
        """Standard escapes and \\uXXXX are decoded."""
        text = "a = tab\\there\\nline\nb = \\u00e9t\\u00E9\nc = \\=\\:\\#"
        assert parse_properties(text) == {"a": "tab\there\nline", "b": "été", "c": "=:#"}

    def test_escaped_separator_in_key(self) -> None:
        """Escaped separators belong to the key."""
        assert parse_properties("a\\=b\\ c = v") == {"a=b c": "v"}

    def test_crlf_and_cr(self) -> None:
        """All line terminators are recognized."""
        assert parse_properties("a=1\r\nb=2\rc=3") == {"a": "1", "b": "2", "c": "3"}

    def test_placeholder_text_untouched(self) -> None:
        """Template syntax passes through unchanged."""
        text = "msg = {0,choice,0#none|1#one}\nfmt = %1$s: %2$5.2f%%"
        assert parse_properties(text) == {
            "msg": "{0,choice,0#none|1#one}",
            "fmt": "%1$s: %2$5.2f%%",
        }

    def test_later_definition_wins(self) -> None:
        """Duplicate keys keep the last value."""
        assert parse_properties("a=1\na=2") == {"a": "2"}

    def test_comment_marker_inside_value(self) -> None:
        """'#' after the key is part of the value."""
        assert parse_properties("a = 1 # not a comment") == {"a": "1 # not a comment"}

    @pytest.mark.parametrize("text", ["a = \\u12", "a = \\uZZZZ", "x=1\nb = \\u00g1"])
    def test_malformed_unicode_escape(self, text: str) -> None:
        """Malformed \\u escapes are rejected with a line number."""
        with pytest.raises(PropertiesSyntaxError) as exc_info:
            parse_properties(text)
        assert exc_info.value.line == text.count("\n") + 1

    def test_surrogate_pair_escape(self) -> None:
        """A \\uXXXX high/low pair decodes to one supplementary character."""
        entries = parse_properties("smile = \\uD83D\\uDE00 %s\nmixed = \\u00e9\\uD83D\\ude00")
        assert entries == {"smile": "\U0001f600 %s", "mixed": "é\U0001f600"}
        assert len(entries["smile"]) == 3

    def test_escaped_and_literal_keys_match(self) -> None:
        """A key written with a surrogate pair equals the same key written literally."""
        escaped = parse_properties("grin\\uD83D\\uDE00 = x")
        literal = parse_properties("grin\U0001f600 = y")
        assert escaped.keys() == literal.keys()
        assert list(escaped) == ["grin\U0001f600"]

    @pytest.mark.parametrize(
        ("text", "escape"),
        [
            ("a = \\uD83D", "\\uD83D"),
            ("x=1\na = \\uDE00 tail", "\\uDE00"),
            ("a = \\uD83Dx", "\\uD83D"),
            ("\U0001f600\\uD83D = v", "\\uD83D"),
        ],
    )
    def test_unpaired_surrogate_escape(self, text: str, escape: str) -> None:
        """Half of a surrogate pair is rejected with its escape and line number."""
        with pytest.raises(PropertiesSyntaxError) as exc_info:
            parse_properties(text)
        assert exc_info.value.line == text.count("\n") + 1
        assert escape in str(exc_info.value)


class TestPropertiesProperties:
    """Property-based tests."""

    @given(entries=st.dictionaries(message_keys(), safe_text, max_size=10))
    def test_simple_entries_round_trip(self, entries: dict[str, str]) -> None:
        """PROPERTY: key = value lines parse back to the same mapping."""
        event(f"size={len(entries)}")
        text = "\n".join(f"{k} = {v}" for k, v in entries.items())
        expected = {k: v.lstrip(" ") for k, v in entries.items()}
        assert parse_properties(text) == expected
