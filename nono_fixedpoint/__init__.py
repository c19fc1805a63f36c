"""
Fixed-point solver for nonograms.

Modules:
- coordinator.py: column/row propagation passes until convergence or stall
- verify.py: solution checks and clue derivation
"""

from .coordinator import SolveReceipt, solve, solve_with_receipt, validate_puzzle
from .verify import derive_clues, verify_solution

__all__ = [
    "solve",
    "solve_with_receipt",
    "validate_puzzle",
    "SolveReceipt",
    "verify_solution",
    "derive_clues",
]
