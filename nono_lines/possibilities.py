"""
Line possibility generator.

Given a clue (ordered run lengths) and a line length L, builds every
EMPTY/FILLED pattern whose filled runs are exactly the clue, in order.

Layout model: K runs split the line into K+1 buckets of empty cells
(before each run, plus one trailing bucket). Interior buckets need at
least one empty cell, the outer two may be empty. So

    slack = L - sum(clue) - (K - 1)

is distributed over K+1 buckets with iter_combinations, then 1 is added back
to each interior bucket before laying the runs out left to right.

Patterns come back as a (P, L) int8 array, one row per possibility.
"""

import math
from typing import List, Optional, Sequence, Tuple

import numpy as np

from nono_core.combinations import iter_combinations
from nono_core.errors import InvalidInputError
from nono_core.types import CELL_DTYPE, EMPTY, FILLED, Clue, LineRef


def normalize_clue(clue: Clue, line: Optional[LineRef] = None) -> Tuple[int, ...]:
    """
    Normalize a clue to a tuple of positive run lengths.

    Zero entries are dropped, so zero-padded clue tables ([0, 0, 2, 2]) and
    the [0] convention for an empty line are accepted.

    Raises:
        InvalidInputError: On negative or non-integer entries
    """
    axis, index = (line.axis, line.index) if line is not None else (None, None)
    runs = []
    for value in clue:
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise InvalidInputError(f"clue entry {value!r} is not an integer", axis, index)
        if value < 0:
            raise InvalidInputError(f"clue entry {value} is negative", axis, index)
        if value > 0:
            runs.append(int(value))
    return tuple(runs)


def min_line_length(clue: Clue) -> int:
    """Shortest line that can hold the clue: runs plus one separator between each."""
    runs = normalize_clue(clue)
    if not runs:
        return 0
    return sum(runs) + len(runs) - 1


def validate_clue(clue: Clue, length: int, line: Optional[LineRef] = None) -> Tuple[int, ...]:
    """
    Check that a clue fits a line of the given length.

    Returns:
        The normalized clue

    Raises:
        InvalidInputError: If the line length is not positive or the clue's
            minimum required length exceeds it
    """
    axis, index = (line.axis, line.index) if line is not None else (None, None)
    if length < 1:
        raise InvalidInputError(f"line length must be >= 1, got {length}", axis, index)

    runs = normalize_clue(clue, line)
    required = min_line_length(runs)
    if required > length:
        raise InvalidInputError(
            f"clue {list(runs)} needs at least {required} cells, line has {length}",
            axis,
            index,
        )
    return runs


def count_possibilities(clue: Clue, length: int) -> int:
    """Closed-form possibility count: C(slack + K, K)."""
    runs = validate_clue(clue, length)
    k = len(runs)
    slack = length - min_line_length(runs)
    return math.comb(slack + k, k)


def possibilities(clue: Clue, length: int, line: Optional[LineRef] = None) -> np.ndarray:
    """
    Every pattern of `length` cells satisfying `clue`.

    Args:
        clue: Ordered run lengths
        length: Line length L
        line: Optional line identity, used in error messages

    Returns:
        (P, L) int8 array of EMPTY/FILLED values; P = count_possibilities(clue, L).
        An empty clue yields a single all-EMPTY row.

    Raises:
        InvalidInputError: If the clue cannot fit (checked before enumeration)

    Example:
        >>> possibilities([3], 5).tolist()
        [[1, 1, 1, 0, 0], [0, 1, 1, 1, 0], [0, 0, 1, 1, 1]]
    """
    runs = validate_clue(clue, length, line)

    if not runs:
        return np.full((1, length), EMPTY, dtype=CELL_DTYPE)

    k = len(runs)
    slack = length - min_line_length(runs)

    patterns = []
    for gaps in iter_combinations(k + 1, slack):
        pattern = np.full(length, EMPTY, dtype=CELL_DTYPE)
        index = 0
        for b, run in enumerate(runs):
            # Interior buckets carry the mandatory separator
            index += gaps[b] + (1 if b > 0 else 0)
            pattern[index:index + run] = FILLED
            index += run
        # Trailing bucket stays EMPTY
        patterns.append(pattern)

    return np.stack(patterns)


def possibilities_for_lines(
    clues: Sequence[Clue],
    length: int,
    axis: Optional[str] = None,
) -> List[np.ndarray]:
    """Possibility arrays for a batch of parallel lines sharing one length."""
    result = []
    for i, clue in enumerate(clues):
        line = LineRef(axis, i) if axis is not None else None
        result.append(possibilities(clue, length, line))
    return result


def line_runs(line: Sequence[int]) -> Tuple[int, ...]:
    """
    Filled run lengths of a concrete line, left to right.

    UNKNOWN cells are treated as run breaks; callers checking a solution
    should first make sure the line is complete.
    """
    runs = []
    current = 0
    for value in line:
        if value == FILLED:
            current += 1
        elif current:
            runs.append(current)
            current = 0
    if current:
        runs.append(current)
    return tuple(runs)


__all__ = [
    "normalize_clue",
    "min_line_length",
    "validate_clue",
    "count_possibilities",
    "possibilities",
    "possibilities_for_lines",
    "line_runs",
]
