"""
Grid coordinator: fixed-point line propagation over the whole grid.

Each pass prunes every column, then every row, writing each line's refined
knowledge back into the shared grid and recording whether the line is solved.

Key principles:
1. Monotone: possibility sets only shrink, determined cells never change
2. Convergence: stop when every row and every column reports solved
3. No guessing: a pass that resolves no cell while unknowns remain is a
   stall and raises UnderdeterminedError instead of looping forever
4. Fixed order: columns then rows, for reproducible pass counts

Termination:
- Every productive pass resolves at least one cell, so passes ≤ H×W + 1
- Contradictions surface as ContradictionError from the offending line
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from nono_core.errors import ContradictionError, InvalidInputError, UnderdeterminedError
from nono_core.grid import GridLike, NonogramGrid
from nono_core.types import COLUMN, ROW, Axis, Clue, Grid, LineRef
from nono_lines.possibilities import possibilities, validate_clue
from nono_lines.prune import LineSpace, prune

logger = logging.getLogger(__name__)

PassCallback = Callable[[int, NonogramGrid], None]


# =============================================================================
# Types
# =============================================================================


@dataclass
class SolveReceipt:
    """
    Summary of one solve run.

    {
        "passes": 3,
        "total_removals": 41,
        "removals_per_axis": {"column": 17, "row": 24},
        "initial_possibilities": 58,
        "final_possibilities": 17,
        "resolved_per_pass": [12, 11, 0]
    }
    """
    passes: int                          # Full column+row passes executed
    total_removals: int                  # Possibilities discarded across all lines
    removals_per_axis: Dict[str, int]    # Discards split by axis
    initial_possibilities: int           # Sum of possibility set sizes before pass 1
    final_possibilities: int             # Sum after convergence (== H + W when solved)
    resolved_per_pass: List[int] = field(default_factory=list)  # Cells resolved per pass


# =============================================================================
# Validation
# =============================================================================


def validate_puzzle(
    grid: NonogramGrid,
    row_clues: Sequence[Clue],
    column_clues: Sequence[Clue],
) -> Tuple[List[Tuple[int, ...]], List[Tuple[int, ...]]]:
    """
    Check clue counts against grid dimensions and every clue against its line.

    Returns:
        (row_runs, column_runs): normalized clues

    Raises:
        InvalidInputError: Naming the axis, line index and reason
    """
    if len(row_clues) != grid.height:
        raise InvalidInputError(
            f"{len(row_clues)} row clues for a grid of height {grid.height}", axis=ROW
        )
    if len(column_clues) != grid.width:
        raise InvalidInputError(
            f"{len(column_clues)} column clues for a grid of width {grid.width}", axis=COLUMN
        )

    row_runs = [
        validate_clue(clue, grid.width, LineRef(ROW, r)) for r, clue in enumerate(row_clues)
    ]
    column_runs = [
        validate_clue(clue, grid.height, LineRef(COLUMN, c)) for c, clue in enumerate(column_clues)
    ]
    return row_runs, column_runs


def _build_grid(
    initial_grid: Optional[GridLike],
    row_clues: Sequence[Clue],
    column_clues: Sequence[Clue],
) -> NonogramGrid:
    if initial_grid is None:
        return NonogramGrid(len(row_clues), len(column_clues))
    if isinstance(initial_grid, NonogramGrid):
        return initial_grid.copy()
    return NonogramGrid.from_rows(initial_grid)


# =============================================================================
# Main Entry Points
# =============================================================================


def solve_with_receipt(
    initial_grid: Optional[GridLike],
    row_clues: Sequence[Clue],
    column_clues: Sequence[Clue],
    on_pass: Optional[PassCallback] = None,
) -> Tuple[NonogramGrid, SolveReceipt]:
    """
    Solve a nonogram by line propagation.

    Args:
        initial_grid: Rows of cell codes (EMPTY/FILLED hints, UNKNOWN elsewhere),
            a NonogramGrid, or None for an all-unknown grid sized by the clues.
            The caller's grid is never modified.
        row_clues: One clue per row (height entries), each for a line of width cells
        column_clues: One clue per column (width entries), each for a line of height cells
        on_pass: Optional callback(pass_number, grid) after every pass, for
            inspecting intermediate states. The grid must not be modified.

    Returns:
        (grid, receipt) where grid has no UNKNOWN cell

    Raises:
        InvalidInputError: Dimension mismatch, bad cell code, or a clue that
            cannot fit its line (raised before any possibility is built)
        ContradictionError: A line has no possibility consistent with the grid
        UnderdeterminedError: A full pass resolved nothing and unknowns remain
    """
    grid = _build_grid(initial_grid, row_clues, column_clues)
    row_runs, column_runs = validate_puzzle(grid, row_clues, column_clues)

    row_spaces = [
        LineSpace(possibilities(runs, grid.width), ROW, r) for r, runs in enumerate(row_runs)
    ]
    column_spaces = [
        LineSpace(possibilities(runs, grid.height), COLUMN, c)
        for c, runs in enumerate(column_runs)
    ]

    initial_possibilities = _total_size(row_spaces) + _total_size(column_spaces)
    logger.debug(
        "Solving %d×%d grid: %d possibilities, %d unknown cells",
        grid.height, grid.width, initial_possibilities, grid.unknown_count(),
    )

    removals_per_axis: Dict[str, int] = {COLUMN: 0, ROW: 0}
    row_solved = [False] * grid.height
    column_solved = [False] * grid.width
    resolved_per_pass: List[int] = []
    passes = 0

    # Solved flags start False, so a complete input is still checked once
    while not (all(row_solved) and all(column_solved)):
        resolved = _run_axis(grid, COLUMN, column_spaces, column_solved, removals_per_axis)
        resolved += _run_axis(grid, ROW, row_spaces, row_solved, removals_per_axis)

        passes += 1
        resolved_per_pass.append(resolved)
        logger.debug(
            "Pass %d: resolved %d cells, %d unknown remain",
            passes, resolved, grid.unknown_count(),
        )

        if on_pass is not None:
            on_pass(passes, grid)

        if all(row_solved) and all(column_solved):
            break

        # No cell changed, so the next pass would see identical lines
        if resolved == 0:
            unresolved = grid.unknown_count()
            logger.warning(
                "Stalled after %d passes with %d unknown cells", passes, unresolved
            )
            raise UnderdeterminedError(grid.to_list(), unresolved, passes)

    # CRITICAL VERIFICATION: every line solved means no unknown cell anywhere
    assert grid.is_complete(), \
        f"All lines report solved but {grid.unknown_count()} cells are unknown"

    final_possibilities = _total_size(row_spaces) + _total_size(column_spaces)
    receipt = SolveReceipt(
        passes=passes,
        total_removals=sum(removals_per_axis.values()),
        removals_per_axis=removals_per_axis,
        initial_possibilities=initial_possibilities,
        final_possibilities=final_possibilities,
        resolved_per_pass=resolved_per_pass,
    )

    logger.info(
        "Converged in %d passes (%d possibilities removed)", passes, receipt.total_removals
    )
    return grid, receipt


def solve(
    initial_grid: Optional[GridLike],
    row_clues: Sequence[Clue],
    column_clues: Sequence[Clue],
    on_pass: Optional[PassCallback] = None,
) -> Grid:
    """
    Solve a nonogram and return the final grid as rows of EMPTY/FILLED codes.

    See solve_with_receipt for arguments and errors.

    Example:
        >>> solve(None, [[1], [3], [1]], [[1], [3], [1]])
        [[0, 1, 0], [1, 1, 1], [0, 1, 0]]
    """
    grid, _ = solve_with_receipt(initial_grid, row_clues, column_clues, on_pass)
    return grid.to_list()


# =============================================================================
# Helper Functions
# =============================================================================


def _run_axis(
    grid: NonogramGrid,
    axis: Axis,
    spaces: List[LineSpace],
    solved_flags: List[bool],
    removals_per_axis: Dict[str, int],
) -> int:
    """Prune every line along one axis. Returns cells resolved."""
    resolved = 0
    for index, space in enumerate(spaces):
        before = space.size
        try:
            updated, solved = prune(grid.line(axis, index), space)
        except ContradictionError:
            logger.warning("Contradiction in %s %d", axis, index)
            raise
        removals_per_axis[axis] += before - space.size
        resolved += grid.write_line(axis, index, updated)
        solved_flags[index] = solved
    return resolved


def _total_size(spaces: List[LineSpace]) -> int:
    return sum(space.size for space in spaces)


__all__ = [
    "solve",
    "solve_with_receipt",
    "validate_puzzle",
    "SolveReceipt",
]
