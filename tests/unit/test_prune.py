"""
Unit tests for nono_lines/prune.py.

Focus:
- Filter discards exactly the incompatible patterns, permanently
- Unify resolves only cells all survivors agree on
- Monotonicity: set size never grows, determined cells never change
- Empty survivor set raises ContradictionError with the line identity
"""

import numpy as np
import pytest

from nono_core.errors import ContradictionError
from nono_core.types import EMPTY, FILLED, ROW, UNKNOWN
from nono_lines.possibilities import possibilities
from nono_lines.prune import LineSpace, filter_compatible, prune, unify

E, F, U = EMPTY, FILLED, UNKNOWN


def line(*values):
    return np.array(values, dtype=np.int8)


class TestPrune:

    def test_no_knowledge_resolves_overlap(self):
        """[3] on 5 cells: only the middle cell is FILLED in every placement."""
        space = LineSpace(possibilities([3], 5))
        updated, solved = prune(line(U, U, U, U, U), space)

        assert updated.tolist() == [U, U, F, U, U]
        assert solved is False
        assert space.size == 3, "BUG: patterns removed without any known cell"

    def test_known_cell_forces_line(self):
        space = LineSpace(possibilities([3], 5))
        updated, solved = prune(line(F, U, U, U, U), space)

        assert updated.tolist() == [F, F, F, E, E]
        assert solved is True
        assert space.size == 1

    def test_known_empty_cell(self):
        space = LineSpace(possibilities([3], 5))
        updated, solved = prune(line(U, U, U, U, E), space)

        # Offsets 0 and 1 survive: cells 1, 2 FILLED in both
        assert updated.tolist() == [U, F, F, U, E]
        assert solved is False
        assert space.size == 2

    def test_input_not_mutated(self):
        knowledge = line(F, U, U, U, U)
        prune(knowledge, LineSpace(possibilities([3], 5)))
        assert knowledge.tolist() == [F, U, U, U, U]

    def test_empty_clue_line(self):
        updated, solved = prune(line(U, U, U), LineSpace(possibilities([], 3)))
        assert updated.tolist() == [E, E, E]
        assert solved is True

    def test_length_mismatch(self):
        with pytest.raises(ValueError):
            prune(line(U, U), LineSpace(possibilities([1], 3)))


class TestContradiction:

    def test_hint_against_full_run(self):
        """
        Hint says cell 0 EMPTY, [5] on 5 cells forces it FILLED.
        """
        space = LineSpace(possibilities([5], 5), axis=ROW, index=4)
        with pytest.raises(ContradictionError) as exc_info:
            prune(line(E, U, U, U, U), space)

        assert space.size == 0
        assert exc_info.value.axis == ROW
        assert exc_info.value.index == 4
        assert "row 4" in str(exc_info.value)

    def test_anonymous_space(self):
        with pytest.raises(ContradictionError):
            prune(line(F, F, F), LineSpace(possibilities([1], 3)))


class TestMonotonicity:
    """Repeated prunes with growing knowledge: size non-increasing, cells stable."""

    def test_size_and_cells_stable(self):
        # Knowledge is revealed from the picture [F, F, E, F, E, E]
        space = LineSpace(possibilities([2, 1], 6))
        sizes = [space.size]

        knowledge = line(U, U, U, U, U, U)
        updated, _ = prune(knowledge, space)
        sizes.append(space.size)

        for position, value in [(5, E), (0, F), (3, F)]:
            previous = updated.copy()
            knowledge = updated.copy()
            knowledge[position] = value
            updated, solved = prune(knowledge, space)
            sizes.append(space.size)

            determined = previous != U
            assert np.array_equal(updated[determined], previous[determined]), \
                f"BUG: determined cells changed: {previous.tolist()} -> {updated.tolist()}"

        assert sizes == sorted(sizes, reverse=True), f"BUG: set grew: {sizes}"
        assert updated.tolist() == [F, F, E, F, E, E]
        assert solved is True

    def test_second_call_same_knowledge_removes_nothing(self):
        space = LineSpace(possibilities([2, 1], 6))
        knowledge = line(U, U, U, E, U, U)
        first, _ = prune(knowledge, space)
        size_after_first = space.size
        second, _ = prune(first, space)

        assert space.size == size_after_first
        assert np.array_equal(first, second)


class TestBuildingBlocks:

    def test_filter_compatible(self):
        patterns = np.array([[F, E], [E, F]], dtype=np.int8)
        assert filter_compatible(line(F, U), patterns).tolist() == [True, False]
        assert filter_compatible(line(U, U), patterns).tolist() == [True, True]

    def test_unify_mixed_stays_unknown(self):
        patterns = np.array([[F, E, F], [F, F, E]], dtype=np.int8)
        assert unify(line(U, U, U), patterns).tolist() == [F, U, U]

    def test_unify_no_patterns_is_copy(self):
        knowledge = line(U, F)
        result = unify(knowledge, np.zeros((0, 2), dtype=np.int8))
        assert result.tolist() == [U, F]
        assert result is not knowledge

    def test_retain_counts_removals(self):
        space = LineSpace(possibilities([1], 4))
        removed = space.retain(np.array([True, False, False, True]))
        assert removed == 2
        assert space.size == 2
        assert space.length == 4
