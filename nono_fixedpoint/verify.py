"""
Solution checks and clue derivation.

- verify_solution: a grid is a solution iff it has no UNKNOWN cell and every
  row and column has exactly its clue's runs
- derive_clues: the row/column clues of a complete picture
"""

from typing import List, Sequence, Tuple

import numpy as np

from nono_core.grid import GridLike, NonogramGrid
from nono_core.types import UNKNOWN, Clue
from nono_lines.possibilities import line_runs, normalize_clue


def _as_array(grid: GridLike) -> np.ndarray:
    if isinstance(grid, NonogramGrid):
        return grid.to_array()
    return NonogramGrid.from_rows(grid).to_array()


def verify_solution(
    grid: GridLike,
    row_clues: Sequence[Clue],
    column_clues: Sequence[Clue],
) -> bool:
    """True iff grid is complete and matches every row and column clue."""
    cells = _as_array(grid)
    height, width = cells.shape

    if len(row_clues) != height or len(column_clues) != width:
        return False
    if np.any(cells == UNKNOWN):
        return False

    for r, clue in enumerate(row_clues):
        if line_runs(cells[r, :]) != normalize_clue(clue):
            return False
    for c, clue in enumerate(column_clues):
        if line_runs(cells[:, c]) != normalize_clue(clue):
            return False
    return True


def derive_clues(grid: GridLike) -> Tuple[List[List[int]], List[List[int]]]:
    """
    Row and column clues of a complete picture.

    Returns:
        (row_clues, column_clues); an empty line gets []

    Raises:
        ValueError: If the grid still has UNKNOWN cells
    """
    cells = _as_array(grid)
    if np.any(cells == UNKNOWN):
        raise ValueError("Cannot derive clues from a grid with unknown cells")

    row_clues = [list(line_runs(cells[r, :])) for r in range(cells.shape[0])]
    column_clues = [list(line_runs(cells[:, c])) for c in range(cells.shape[1])]
    return row_clues, column_clues


__all__ = ["verify_solution", "derive_clues"]
