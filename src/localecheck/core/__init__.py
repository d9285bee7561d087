"""Core infrastructure shared across localecheck.

Python 3.13+.
"""

from .babel_compat import BabelImportError, is_babel_available, require_babel

__all__ = [
    "BabelImportError",
    "is_babel_available",
    "require_babel",
]
