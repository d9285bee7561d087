"""Common interface of the placeholder grammars.

Python 3.13+. Zero external dependencies.
"""

from typing import Protocol

from localecheck.enums import Dialect

__all__ = [
    "FormatGrammar",
    "PlaceholderToken",
    "render_tokens",
]


class PlaceholderToken(Protocol):
    """Normalized, comparable description of one placeholder.

    Two tokens describe the same placeholder shape if and only if their
    canonical strings (str(token)) are equal.
    """

    def __str__(self) -> str:
        """Return the canonical form ("1$s", "0,number")."""
        ...


class FormatGrammar(Protocol):
    """Placeholder grammar used by a ConsistencyAnalyzer.

    Implementations are stateless and safe to share between threads.
    """

    @property
    def dialect(self) -> Dialect:
        """Dialect this grammar parses."""
        ...

    def parse(self, template: str) -> tuple[PlaceholderToken, ...]:
        """Parse a template into its placeholder tokens.

        Args:
            template: Message template text

        Returns:
            Placeholder tokens in template order (literal text excluded)

        Raises:
            FormatParseError: If the template is malformed
        """
        ...


def render_tokens(tokens: tuple[PlaceholderToken, ...]) -> tuple[str, ...]:
    """Render tokens to their canonical strings for comparison and reporting."""
    return tuple(str(token) for token in tokens)
