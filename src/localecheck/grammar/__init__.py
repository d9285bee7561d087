"""Placeholder grammars.

Each grammar turns a template into a tuple of placeholder tokens whose
canonical strings describe the placeholder shape. Grammars are stateless.

Python 3.13+. Zero external dependencies.
"""

from localecheck.enums import Dialect

from .base import FormatGrammar, PlaceholderToken, render_tokens
from .message import MessageGrammar, MessageToken, parse_message
from .printf import PrintfFlag, PrintfGrammar, PrintfToken, parse_printf

__all__ = [
    "FormatGrammar",
    "MessageGrammar",
    "MessageToken",
    "PlaceholderToken",
    "PrintfFlag",
    "PrintfGrammar",
    "PrintfToken",
    "grammar_for",
    "parse_message",
    "parse_printf",
    "render_tokens",
]


def grammar_for(dialect: Dialect) -> FormatGrammar:
    """Get the grammar parsing the given dialect."""
    match dialect:
        case Dialect.PRINTF:
            return PrintfGrammar()
        case Dialect.MESSAGE:
            return MessageGrammar()
