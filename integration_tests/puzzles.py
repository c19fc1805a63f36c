"""
Hand-checked puzzles for integration runs.

Each entry: row_clues, column_clues, optional hints grid, and the outcome
line propagation should reach ("PASS", "CONTRADICTION" or "UNDERDETERMINED").
"""

from nono_core.types import EMPTY, FILLED, UNKNOWN

E, F, U = EMPTY, FILLED, UNKNOWN

PUZZLES = {
    # Every line fully forced after the first column pass
    "stripes_5x5": {
        "row_clues": [[5], [1, 1], [5], [1, 1], [5]],
        "column_clues": [[1, 1, 1], [5], [1, 1, 1], [5], [1, 1, 1]],
        "expected": "PASS",
    },
    # Columns 1 and 3 are [5], so rows 1 and 3 cannot be [1]
    "stripes_5x5_inconsistent": {
        "row_clues": [[5], [1], [5], [1], [5]],
        "column_clues": [[1, 1, 1], [5], [1, 1, 1], [5], [1, 1, 1]],
        "expected": "CONTRADICTION",
    },
    "plus_3x3": {
        "row_clues": [[1], [3], [1]],
        "column_clues": [[1], [3], [1]],
        "expected": "PASS",
    },
    "letter_h_5x5": {
        "row_clues": [[1, 1], [1, 1], [5], [1, 1], [1, 1]],
        "column_clues": [[5], [1], [1], [1], [5]],
        "expected": "PASS",
    },
    # Two diagonal solutions, line logic cannot choose
    "diagonal_2x2": {
        "row_clues": [[1], [1]],
        "column_clues": [[1], [1]],
        "expected": "UNDERDETERMINED",
    },
    # Same clues, a single hint breaks the tie
    "diagonal_2x2_hinted": {
        "row_clues": [[1], [1]],
        "column_clues": [[1], [1]],
        "hints": [[F, U], [U, U]],
        "expected": "PASS",
    },
    # Hint contradicts a fully forced row
    "forced_row_bad_hint": {
        "row_clues": [[5]],
        "column_clues": [[1], [1], [1], [1], [1]],
        "hints": [[E, U, U, U, U]],
        "expected": "CONTRADICTION",
    },
    # Zero-padded clue table (ECLiPSe "n6" instance)
    "n6_15x15": {
        "row_clues": [
            [0, 0, 0, 5], [0, 0, 2, 2], [0, 0, 1, 1], [0, 0, 1, 1], [0, 0, 4, 4],
            [2, 2, 1, 2], [0, 1, 3, 1], [1, 1, 1, 1], [0, 2, 7, 2], [0, 4, 1, 5],
            [0, 2, 1, 1], [0, 1, 1, 2], [0, 1, 1, 1], [0, 2, 5, 2], [0, 0, 3, 4],
        ],
        "column_clues": [
            [0, 0, 0, 4], [0, 0, 2, 2], [0, 0, 1, 5], [0, 1, 2, 2], [0, 5, 2, 1],
            [2, 1, 1, 2], [0, 1, 3, 1], [0, 1, 1, 6], [0, 1, 3, 1], [2, 1, 2, 2],
            [0, 4, 2, 1], [0, 1, 1, 1], [0, 1, 3, 2], [0, 2, 2, 3], [0, 0, 0, 4],
        ],
        "expected": None,
    },
}
