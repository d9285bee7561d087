"""Per-source analysis stages.

ConsistencyAnalyzer compares placeholder shapes against the base locale;
ResidualKeyReporter checks the remaining identifiers and reports unused keys.

Python 3.13+. Zero external dependencies.
"""

from .consistency import ConsistencyAnalyzer
from .residual import ResidualKeyReporter, take_value

__all__ = [
    "ConsistencyAnalyzer",
    "ResidualKeyReporter",
    "take_value",
]
