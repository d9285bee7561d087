"""Tests for the MessageFormat-style template grammar.

Covers argument extraction, quoting, nested choice sub-patterns and the
index/type/brace error cases.
"""

from __future__ import annotations

import pytest

from localecheck.diagnostics import (
    BadArgumentIndexError,
    BadFormatTypeError,
    DiagnosticCode,
    UnbalancedBracesError,
)
from localecheck.enums import Dialect
from localecheck.grammar import MessageGrammar, MessageToken, parse_message


def canonical(template: str) -> list[str]:
    """Parse and render tokens to their canonical strings."""
    return [str(token) for token in parse_message(template)]


# ============================================================================
# TOKENIZATION
# ============================================================================


class TestMessageTokenization:
    """Test argument extraction."""

    def test_no_arguments(self) -> None:
        """Plain text has no tokens."""
        assert parse_message("Hello, world!") == ()

    def test_bare_argument(self) -> None:
        """'{0}' has an empty type."""
        assert parse_message("Hello {0}") == (MessageToken(0, ""),)
        assert canonical("Hello {0}") == ["0,"]

    def test_style_discarded(self) -> None:
        """Two blocks differing only in style have equal tokens."""
        assert canonical("some numb {0,number,#} {0,number,short}") == [
            "0,number",
            "0,number",
        ]

    def test_nested_choice(self) -> None:
        """Nested blocks in a choice style do not produce tokens."""
        template = (
            "There {0,choice,0#are no files|1#is one file|1<are {0,number,integer} files}."
        )
        assert canonical(template) == ["0,choice"]

    def test_multiple_arguments_in_order(self) -> None:
        """Tokens follow template order, not index order."""
        assert canonical("{1} of {0,number} on {2,date,short}") == ["1,", "0,number", "2,date"]

    def test_type_is_trimmed_and_lowercased(self) -> None:
        """Whitespace around the type is ignored and case is folded."""
        assert canonical("{0, NUMBER ,integer}") == ["0,number"]

    def test_quoted_braces_are_literal(self) -> None:
        """Braces inside quotes are text."""
        assert parse_message("'{0}' is literal") == ()

    def test_doubled_quote_is_literal(self) -> None:
        """'' is a literal quote and does not start quoting."""
        assert canonical("It''s {0}") == ["0,"]

    def test_unterminated_quote_swallows_rest(self) -> None:
        """An unmatched quote quotes the remaining text."""
        assert parse_message("It's {0}") == ()

    def test_quote_inside_style(self) -> None:
        """Quoted text in a style may contain braces and commas."""
        assert canonical("{0,date,'{,}' yyyy}") == ["0,date"]

    def test_stray_closing_brace_is_text(self) -> None:
        """A '}' outside a block is literal."""
        assert canonical("a } b {0}") == ["0,"]

    def test_time_type(self) -> None:
        """'time' is an accepted type."""
        assert canonical("{3,time}") == ["3,time"]


# ============================================================================
# ERRORS
# ============================================================================


class TestMessageErrors:
    """Test malformed argument blocks."""

    def test_bad_format_type(self) -> None:
        """Unknown type is reported with its raw text."""
        with pytest.raises(BadFormatTypeError) as exc_info:
            parse_message("some {0,wrong,full}")
        assert exc_info.value.format_type == "wrong"
        assert str(exc_info.value) == "Format type = 'wrong'"

    @pytest.mark.parametrize("template", ["{a}", "{}", "{0.5}", "{ 0}"])
    def test_unparseable_index(self, template: str) -> None:
        """Non-integer indexes are rejected."""
        with pytest.raises(BadArgumentIndexError) as exc_info:
            parse_message(template)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.BAD_ARGUMENT_INDEX

    def test_negative_index(self) -> None:
        """Negative indexes are rejected."""
        with pytest.raises(BadArgumentIndexError) as exc_info:
            parse_message("{-1}")
        assert exc_info.value.index_text == "-1"

    def test_signed_positive_index(self) -> None:
        """A '+' sign is accepted on the index."""
        assert canonical("{+2}") == ["2,"]

    @pytest.mark.parametrize(
        "template", ["Hello {0", "{0,number", "{0,choice,1#{0}", "{0,choice,1#{0,number}"]
    )
    def test_unbalanced_braces(self, template: str) -> None:
        """Input ending inside a block is rejected at any depth."""
        with pytest.raises(UnbalancedBracesError):
            parse_message(template)


# ============================================================================
# GRAMMAR OBJECT
# ============================================================================


class TestMessageGrammar:
    """Test the FormatGrammar implementation."""

    def test_dialect(self) -> None:
        """Grammar reports the message dialect."""
        assert MessageGrammar().dialect is Dialect.MESSAGE

    def test_parse_delegates(self) -> None:
        """Grammar.parse matches parse_message."""
        assert MessageGrammar().parse("{0} {1,date}") == parse_message("{0} {1,date}")
