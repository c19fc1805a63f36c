"""
Line solver: prune a line's possibility set against known cells, then unify.

Per line, one call does:
1. Filter: drop every pattern that disagrees with a known (non-UNKNOWN) cell.
   Dropped patterns are gone for good; the LineSpace keeps only survivors.
2. Unify: a cell FILLED in every survivor becomes FILLED, a cell EMPTY in
   every survivor becomes EMPTY, anything mixed stays UNKNOWN.
3. Determine: the line is solved iff no UNKNOWN cell remains.

An empty survivor set means the line is unsatisfiable and raises
ContradictionError.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from nono_core.errors import ContradictionError
from nono_core.types import CELL_DTYPE, EMPTY, FILLED, UNKNOWN, Axis


@dataclass
class LineSpace:
    """
    Live possibility set for one line.

    patterns is replaced (never edited in place) by each retain() call, so the
    set only shrinks over the life of a solve.
    """
    patterns: np.ndarray             # (P, L) int8 array of EMPTY/FILLED
    axis: Optional[Axis] = None      # "row" / "column", for error reporting
    index: Optional[int] = None

    @property
    def size(self) -> int:
        return int(self.patterns.shape[0])

    @property
    def length(self) -> int:
        return int(self.patterns.shape[1])

    def retain(self, mask: np.ndarray) -> int:
        """Keep only patterns where mask is True. Returns number removed."""
        before = self.size
        self.patterns = self.patterns[mask]
        return before - self.size


def filter_compatible(knowledge: np.ndarray, patterns: np.ndarray) -> np.ndarray:
    """
    Boolean mask over patterns: True where the pattern agrees with every known cell.

    UNKNOWN cells in knowledge impose no constraint.
    """
    known = knowledge != UNKNOWN
    agrees = (patterns == knowledge) | ~known
    return np.all(agrees, axis=1)


def unify(knowledge: np.ndarray, patterns: np.ndarray) -> np.ndarray:
    """
    Refine knowledge with the cells all patterns agree on.

    Args:
        knowledge: Current line state (EMPTY/FILLED/UNKNOWN)
        patterns: Surviving possibilities, all compatible with knowledge

    Returns:
        New line state; input is not modified
    """
    updated = np.array(knowledge, dtype=CELL_DTYPE, copy=True)
    if patterns.shape[0] == 0:
        return updated

    all_filled = np.all(patterns == FILLED, axis=0)
    all_empty = np.all(patterns == EMPTY, axis=0)

    updated[all_filled] = FILLED
    updated[all_empty] = EMPTY
    return updated


def prune(knowledge: np.ndarray, space: LineSpace) -> Tuple[np.ndarray, bool]:
    """
    Filter space against knowledge, then unify the survivors.

    Args:
        knowledge: Current line state, length == space.length
        space: The line's live possibility set (shrunk in place)

    Returns:
        (updated_knowledge, solved) where solved means no UNKNOWN cell remains

    Raises:
        ContradictionError: If no possibility agrees with the known cells

    Example:
        >>> space = LineSpace(possibilities([3], 5))
        >>> line, solved = prune(np.full(5, UNKNOWN, dtype=np.int8), space)
        >>> line.tolist(), solved
        ([2, 2, 1, 2, 2], False)
    """
    knowledge = np.asarray(knowledge, dtype=CELL_DTYPE)
    if knowledge.shape[0] != space.length:
        raise ValueError(
            f"line has {knowledge.shape[0]} cells but possibilities have {space.length}"
        )

    space.retain(filter_compatible(knowledge, space.patterns))

    if space.size == 0:
        raise ContradictionError(space.axis, space.index)

    updated = unify(knowledge, space.patterns)
    solved = not bool(np.any(updated == UNKNOWN))
    return updated, solved


__all__ = [
    "LineSpace",
    "filter_compatible",
    "unify",
    "prune",
]
