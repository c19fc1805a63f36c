"""
Unit tests for nono_core/grid.py.

Focus:
- Row/column views read and write the shared flat buffer
- Input validation (shape, ragged rows, cell codes)
- Monotonic refinement on write-back
"""

import numpy as np
import pytest

from nono_core.errors import InvalidInputError
from nono_core.grid import NonogramGrid
from nono_core.types import COLUMN, EMPTY, FILLED, ROW, UNKNOWN

E, F, U = EMPTY, FILLED, UNKNOWN


@pytest.fixture
def grid_2x3():
    return NonogramGrid.from_rows([
        [F, E, U],
        [U, F, E],
    ])


class TestConstruction:

    def test_dimensions(self, grid_2x3):
        assert grid_2x3.height == 2
        assert grid_2x3.width == 3

    def test_blank_grid_is_unknown(self):
        grid = NonogramGrid(3, 4)
        assert grid.unknown_count() == 12
        assert not grid.is_complete()

    def test_from_numpy(self):
        grid = NonogramGrid.from_rows(np.array([[0, 1], [1, 0]]))
        assert grid.to_list() == [[0, 1], [1, 0]]

    def test_from_hints(self):
        grid = NonogramGrid.from_hints(2, 2, filled=[(0, 0)], empty=[(1, 1)])
        assert grid.to_list() == [[F, U], [U, E]]

    def test_caller_rows_not_aliased(self):
        rows = np.array([[U, U]])
        grid = NonogramGrid.from_rows(rows)
        grid.set_cell(0, 0, FILLED)
        assert rows[0, 0] == U, "BUG: grid shares memory with caller input"


class TestValidation:

    def test_empty_grid(self):
        with pytest.raises(InvalidInputError):
            NonogramGrid.from_rows([])

    def test_zero_width(self):
        with pytest.raises(InvalidInputError):
            NonogramGrid.from_rows([[]])

    def test_ragged_rows_name_the_row(self):
        with pytest.raises(InvalidInputError) as exc_info:
            NonogramGrid.from_rows([[0, 1], [0]])
        assert exc_info.value.axis == ROW
        assert exc_info.value.index == 1

    def test_bad_cell_code(self):
        with pytest.raises(InvalidInputError, match=r"cell \(1, 0\)"):
            NonogramGrid.from_rows([[0, 0], [3, 0]])

    def test_large_code_does_not_wrap(self):
        """
        Bug to catch: 258 narrowed to int8 becomes 2 (UNKNOWN) and slips through.
        """
        with pytest.raises(InvalidInputError):
            NonogramGrid.from_rows([[258]])

    def test_one_dimensional_array(self):
        with pytest.raises(InvalidInputError):
            NonogramGrid.from_rows(np.array([0, 1]))

    def test_set_cell_rejects_bad_value(self, grid_2x3):
        with pytest.raises(InvalidInputError):
            grid_2x3.set_cell(0, 0, 7)

    def test_out_of_bounds(self, grid_2x3):
        with pytest.raises(IndexError):
            grid_2x3.cell(2, 0)
        with pytest.raises(IndexError):
            grid_2x3.column(3)


class TestLineViews:

    def test_row_and_column_values(self, grid_2x3):
        assert grid_2x3.row(0).tolist() == [F, E, U]
        assert grid_2x3.column(0).tolist() == [F, U]
        assert grid_2x3.column(2).tolist() == [U, E]

    def test_line_dispatch(self, grid_2x3):
        assert grid_2x3.line(ROW, 1).tolist() == grid_2x3.row(1).tolist()
        assert grid_2x3.line(COLUMN, 1).tolist() == grid_2x3.column(1).tolist()
        with pytest.raises(ValueError):
            grid_2x3.line("diagonal", 0)

    def test_column_write_visible_in_rows(self, grid_2x3):
        """A column write lands in the same storage rows read from."""
        grid_2x3.write_column(2, np.array([F, E], dtype=np.int8))
        assert grid_2x3.row(0).tolist() == [F, E, F]
        assert grid_2x3.cell(0, 2) == F

    def test_views_match_array(self, grid_2x3):
        array = grid_2x3.to_array()
        for c in range(grid_2x3.width):
            assert grid_2x3.column(c).tolist() == array[:, c].tolist()


class TestWriteBack:

    def test_returns_resolved_count(self, grid_2x3):
        resolved = grid_2x3.write_row(1, np.array([E, F, E], dtype=np.int8))
        assert resolved == 1
        assert grid_2x3.unknown_count() == 1

    def test_flip_is_rejected(self, grid_2x3):
        """
        Bug to catch: a FILLED cell overwritten with EMPTY.
        """
        with pytest.raises(AssertionError, match="Monotonic refinement"):
            grid_2x3.write_row(0, np.array([E, E, F], dtype=np.int8))

    def test_revert_to_unknown_is_rejected(self, grid_2x3):
        with pytest.raises(AssertionError):
            grid_2x3.write_column(1, np.array([U, F], dtype=np.int8))

    def test_length_mismatch(self, grid_2x3):
        with pytest.raises(ValueError):
            grid_2x3.write_row(0, np.array([F, E], dtype=np.int8))


class TestCopyAndEquality:

    def test_copy_is_independent(self, grid_2x3):
        clone = grid_2x3.copy()
        assert clone == grid_2x3
        clone.set_cell(0, 2, FILLED)
        assert clone != grid_2x3
        assert grid_2x3.cell(0, 2) == U

    def test_to_list_roundtrip(self, grid_2x3):
        assert NonogramGrid.from_rows(grid_2x3.to_list()) == grid_2x3
