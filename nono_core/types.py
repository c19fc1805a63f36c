"""
Core type definitions for the nonogram solver.

Cell codes follow the byte encoding used throughout: 0 = empty (white),
1 = filled (black), 2 = unknown. Grids are indexed grid[row][col].
"""

from dataclasses import dataclass
from typing import NewType, Sequence

import numpy as np

# Cell states
CellState = NewType("CellState", int)

EMPTY = CellState(0)
FILLED = CellState(1)
UNKNOWN = CellState(2)

CELL_STATES = (EMPTY, FILLED, UNKNOWN)

# Storage dtype for grids and possibility arrays
CELL_DTYPE = np.int8

# Grid representation
Grid = list[list[int]]  # Grid[r][c] = cell state ∈ {0, 1, 2}

# Clue sequence for one line (ordered run lengths)
Clue = Sequence[int]

# Line axes
Axis = str  # "row" or "column"
ROW = "row"
COLUMN = "column"


@dataclass(frozen=True, order=True)
class LineRef:
    """Identity of one line of the grid (axis + index)."""
    axis: Axis
    index: int

    def __str__(self) -> str:
        return f"{self.axis} {self.index}"
