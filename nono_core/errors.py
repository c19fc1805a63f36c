"""
Error taxonomy for the nonogram solver.

Three terminal conditions, all derived from NonogramError:
- InvalidInputError: bad dimensions, bad cell codes, or a clue that cannot fit
  its line. Raised before any solving work.
- ContradictionError: a line has no possibility left that agrees with the
  known cells.
- UnderdeterminedError: a full pass resolved nothing while unknown cells
  remain (line logic alone cannot finish the puzzle).
"""

from typing import Optional

from .types import Axis, Grid


class NonogramError(Exception):
    """Base class for all solver errors."""


class InvalidInputError(NonogramError, ValueError):
    """Caller supplied clues or a grid that violate the solver's preconditions."""

    def __init__(self, reason: str, axis: Optional[Axis] = None, index: Optional[int] = None):
        self.reason = reason
        self.axis = axis
        self.index = index
        if axis is not None and index is not None:
            message = f"Invalid {axis} {index}: {reason}"
        elif axis is not None:
            message = f"Invalid {axis} input: {reason}"
        else:
            message = f"Invalid input: {reason}"
        super().__init__(message)


class ContradictionError(NonogramError):
    """A line's possibility set became empty: hints and clues are unsatisfiable."""

    def __init__(self, axis: Optional[Axis] = None, index: Optional[int] = None):
        self.axis = axis
        self.index = index
        if axis is not None and index is not None:
            message = f"Contradiction in {axis} {index}: no possibility matches the known cells"
        else:
            message = "Contradiction: no possibility matches the known cells"
        super().__init__(message)


class UnderdeterminedError(NonogramError):
    """A full pass made no progress while unknown cells remain."""

    def __init__(self, grid: Grid, unresolved: int, passes: int):
        self.grid = grid
        self.unresolved = unresolved
        self.passes = passes
        super().__init__(
            f"Stalled after {passes} passes with {unresolved} unknown cells "
            f"(clues do not force a unique solution by line logic)"
        )
