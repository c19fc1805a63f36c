"""
nono_core: Core primitives for the nonogram solver.

Provides:
- types: cell-state codes, Grid, LineRef
- errors: InvalidInputError, ContradictionError, UnderdeterminedError
- combinations: lazy stars-and-bars enumeration
- grid: NonogramGrid (flat buffer with strided row/column views)
"""

from .combinations import combinations, count_combinations, iter_combinations
from .errors import (
    ContradictionError,
    InvalidInputError,
    NonogramError,
    UnderdeterminedError,
)
from .grid import NonogramGrid
from .types import COLUMN, EMPTY, FILLED, ROW, UNKNOWN, LineRef

__all__ = [
    "EMPTY",
    "FILLED",
    "UNKNOWN",
    "ROW",
    "COLUMN",
    "LineRef",
    "NonogramGrid",
    "NonogramError",
    "InvalidInputError",
    "ContradictionError",
    "UnderdeterminedError",
    "iter_combinations",
    "combinations",
    "count_combinations",
]
