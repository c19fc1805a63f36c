"""
Per-line reasoning for the nonogram solver.

Modules:
- possibilities.py: every pattern satisfying one clue on one line
- prune.py: filter a line's possibilities against known cells and unify
"""

from .possibilities import (
    count_possibilities,
    line_runs,
    min_line_length,
    normalize_clue,
    possibilities,
    possibilities_for_lines,
    validate_clue,
)
from .prune import LineSpace, filter_compatible, prune, unify

__all__ = [
    "normalize_clue",
    "min_line_length",
    "validate_clue",
    "count_possibilities",
    "possibilities",
    "possibilities_for_lines",
    "line_runs",
    "LineSpace",
    "filter_compatible",
    "unify",
    "prune",
]
