"""
Stars-and-bars enumeration: every way to put `slack` identical units into
`buckets` ordered, unbounded buckets.

Provides:
- iter_combinations(buckets, slack): lazy generator of tuples
- combinations(buckets, slack): the same tuples as a list
- count_combinations(buckets, slack): C(slack + buckets - 1, buckets - 1)

Tuples are produced in lexicographic order: the first bucket takes 0..slack
in ascending order and the remaining buckets share what is left.
"""

import math
from typing import Iterator, List, Tuple

from .errors import InvalidInputError


def _check_arguments(buckets: int, slack: int) -> None:
    if buckets < 1:
        raise InvalidInputError(f"bucket count must be >= 1, got {buckets}")
    if slack < 0:
        raise InvalidInputError(f"slack must be >= 0, got {slack}")


def iter_combinations(buckets: int, slack: int) -> Iterator[Tuple[int, ...]]:
    """
    Yield every tuple of `buckets` non-negative ints summing to `slack`.

    Iterative form of the recursive decomposition (fix the first bucket,
    recurse on the rest). An explicit stack of (prefix, remaining) frames
    replaces the call stack; children are pushed in reverse so that the
    smallest first-bucket value is popped first.

    Args:
        buckets: Number of ordered buckets (B >= 1)
        slack: Units to distribute (S >= 0)

    Yields:
        Tuples of length B summing to S, lexicographic order

    Raises:
        InvalidInputError: If B < 1 or S < 0

    Example:
        >>> list(iter_combinations(2, 2))
        [(0, 2), (1, 1), (2, 0)]
    """
    _check_arguments(buckets, slack)
    return _generate(buckets, slack)


def _generate(buckets: int, slack: int) -> Iterator[Tuple[int, ...]]:
    stack: List[Tuple[Tuple[int, ...], int]] = [((), slack)]

    while stack:
        prefix, remaining = stack.pop()

        # Last bucket takes whatever is left
        if len(prefix) == buckets - 1:
            yield prefix + (remaining,)
            continue

        for value in range(remaining, -1, -1):
            stack.append((prefix + (value,), remaining - value))


def combinations(buckets: int, slack: int) -> List[Tuple[int, ...]]:
    """Materialized form of iter_combinations."""
    return list(iter_combinations(buckets, slack))


def count_combinations(buckets: int, slack: int) -> int:
    """Number of tuples iter_combinations(buckets, slack) yields."""
    _check_arguments(buckets, slack)
    return math.comb(slack + buckets - 1, buckets - 1)


__all__ = [
    "iter_combinations",
    "combinations",
    "count_combinations",
]
