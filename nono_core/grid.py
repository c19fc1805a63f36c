"""
Grid storage for the nonogram solver.

NonogramGrid owns one flat int8 buffer of height × width cells. Rows and
columns are numpy views into that buffer (a contiguous slice for a row, a
stride-W slice for a column), so no extract/reinsert copies are needed:
readers get views, writers go through write_row / write_column which check
monotonic refinement.
"""

from typing import Iterable, Optional, Sequence, Tuple, Union

import numpy as np

from .errors import InvalidInputError
from .types import CELL_DTYPE, CELL_STATES, COLUMN, EMPTY, FILLED, ROW, UNKNOWN, Grid


GridLike = Union[Grid, Sequence[Sequence[int]], np.ndarray]


class NonogramGrid:
    """Flat cell buffer with (row, col) accessors and strided line views."""

    def __init__(self, height: int, width: int, cells: Optional[np.ndarray] = None):
        if height < 1 or width < 1:
            raise InvalidInputError(f"grid must be at least 1×1, got {height}×{width}")

        self.height = height
        self.width = width

        if cells is None:
            self._cells = np.full(height * width, UNKNOWN, dtype=CELL_DTYPE)
        else:
            flat = np.asarray(cells, dtype=CELL_DTYPE).reshape(-1)
            if flat.size != height * width:
                raise InvalidInputError(
                    f"buffer has {flat.size} cells, expected {height * width}"
                )
            self._cells = flat.copy()

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_rows(cls, rows: GridLike) -> "NonogramGrid":
        """
        Build a grid from rows of cell codes.

        Raises:
            InvalidInputError: If the grid is empty, ragged, or holds a value
                outside {EMPTY, FILLED, UNKNOWN}
        """
        if isinstance(rows, np.ndarray):
            if rows.ndim != 2:
                raise InvalidInputError(f"grid must be 2-D, got {rows.ndim}-D array")
            height, width = rows.shape
        else:
            height = len(rows)
            if height == 0:
                raise InvalidInputError("grid has no rows")
            width = len(rows[0])
            for r, row in enumerate(rows):
                if len(row) != width:
                    raise InvalidInputError(
                        f"row has {len(row)} cells, expected {width}", axis=ROW, index=r
                    )

        if height < 1 or width < 1:
            raise InvalidInputError(f"grid must be at least 1×1, got {height}×{width}")

        raw = np.asarray(rows).reshape(-1)

        # Check codes before narrowing to int8 so out-of-range values cannot wrap
        bad = ~np.isin(raw, CELL_STATES)
        if bad.any():
            flat_index = int(np.flatnonzero(bad)[0])
            r, c = divmod(flat_index, width)
            raise InvalidInputError(
                f"cell ({r}, {c}) holds {raw[flat_index].item()!r}, "
                f"expected one of {list(CELL_STATES)}"
            )

        return cls(height, width, raw)

    @classmethod
    def from_hints(
        cls,
        height: int,
        width: int,
        filled: Iterable[Tuple[int, int]] = (),
        empty: Iterable[Tuple[int, int]] = (),
    ) -> "NonogramGrid":
        """All-unknown grid with the given (row, col) cells pre-set."""
        grid = cls(height, width)
        for r, c in filled:
            grid.set_cell(r, c, FILLED)
        for r, c in empty:
            grid.set_cell(r, c, EMPTY)
        return grid

    def copy(self) -> "NonogramGrid":
        return NonogramGrid(self.height, self.width, self._cells)

    # -------------------------------------------------------------------------
    # Cell access
    # -------------------------------------------------------------------------

    def _index(self, r: int, c: int) -> int:
        if not (0 <= r < self.height and 0 <= c < self.width):
            raise IndexError(f"cell ({r}, {c}) outside {self.height}×{self.width} grid")
        return r * self.width + c

    def cell(self, r: int, c: int) -> int:
        return int(self._cells[self._index(r, c)])

    def set_cell(self, r: int, c: int, value: int) -> None:
        if value not in CELL_STATES:
            raise InvalidInputError(f"cell ({r}, {c}) cannot be set to {value}")
        self._cells[self._index(r, c)] = value

    # -------------------------------------------------------------------------
    # Line views
    # -------------------------------------------------------------------------

    def row(self, r: int) -> np.ndarray:
        """View of row r (length = width)."""
        if not 0 <= r < self.height:
            raise IndexError(f"row {r} outside grid of height {self.height}")
        start = r * self.width
        return self._cells[start:start + self.width]

    def column(self, c: int) -> np.ndarray:
        """Strided view of column c (length = height)."""
        if not 0 <= c < self.width:
            raise IndexError(f"column {c} outside grid of width {self.width}")
        return self._cells[c::self.width]

    def line(self, axis: str, index: int) -> np.ndarray:
        if axis == ROW:
            return self.row(index)
        if axis == COLUMN:
            return self.column(index)
        raise ValueError(f"Unknown axis: {axis}")

    def write_row(self, r: int, values: np.ndarray) -> int:
        """Write refined knowledge into row r. Returns number of cells resolved."""
        return _write_line(self.row(r), values)

    def write_column(self, c: int, values: np.ndarray) -> int:
        """Write refined knowledge into column c. Returns number of cells resolved."""
        return _write_line(self.column(c), values)

    def write_line(self, axis: str, index: int, values: np.ndarray) -> int:
        return _write_line(self.line(axis, index), values)

    # -------------------------------------------------------------------------
    # Inspection
    # -------------------------------------------------------------------------

    def unknown_count(self) -> int:
        return int(np.count_nonzero(self._cells == UNKNOWN))

    def is_complete(self) -> bool:
        return self.unknown_count() == 0

    def to_array(self) -> np.ndarray:
        """height × width copy of the cells."""
        return self._cells.reshape(self.height, self.width).copy()

    def to_list(self) -> Grid:
        return self._cells.reshape(self.height, self.width).tolist()

    def __eq__(self, other) -> bool:
        if not isinstance(other, NonogramGrid):
            return NotImplemented
        return (
            self.height == other.height
            and self.width == other.width
            and np.array_equal(self._cells, other._cells)
        )

    def __repr__(self) -> str:
        return f"NonogramGrid({self.height}×{self.width}, unknown={self.unknown_count()})"


def _write_line(view: np.ndarray, values: np.ndarray) -> int:
    """
    Copy values into a line view, enforcing monotonic refinement.

    Only UNKNOWN cells may change; a determined cell must keep its value.
    """
    values = np.asarray(values, dtype=CELL_DTYPE)
    if values.shape != view.shape:
        raise ValueError(f"line has {view.shape[0]} cells, got {values.shape[0]} values")

    known = view != UNKNOWN

    # CRITICAL VERIFICATION: determined cells never flip or revert to unknown
    assert np.array_equal(view[known], values[known]), \
        "Monotonic refinement violated: a determined cell changed value"

    resolved = int(np.count_nonzero(~known & (values != UNKNOWN)))
    view[:] = values
    return resolved


__all__ = ["NonogramGrid", "GridLike"]
