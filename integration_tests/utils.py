"""
Utility functions for nonogram integration runs.

Provides:
- Random picture sampling (puzzles built from pictures via derive_clues)
- Receipt generation and summary statistics
- Logging setup
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np

from nono_core.types import EMPTY, FILLED, Grid
from nono_fixedpoint.verify import derive_clues


def random_pictures(
    n: int, height: int, width: int, density: float = 0.5, seed: Optional[int] = None
) -> Dict[str, Grid]:
    """
    Sample N random complete pictures.

    Args:
        n: Number of pictures
        height: Rows per picture
        width: Columns per picture
        density: Probability that a cell is FILLED
        seed: Optional random seed for reproducibility

    Returns:
        Dict mapping puzzle_id -> picture (rows of EMPTY/FILLED)
    """
    if not 0.0 <= density <= 1.0:
        raise ValueError(f"density must be in [0, 1], got {density}")

    rng = np.random.default_rng(seed)
    pictures = {}
    for i in range(n):
        cells = np.where(rng.random((height, width)) < density, FILLED, EMPTY)
        pictures[f"random_{height}x{width}_{i:03d}"] = cells.tolist()
    return pictures


def puzzle_from_picture(picture: Grid) -> Dict[str, Any]:
    """Puzzle dict {"row_clues", "column_clues", "solution"} for a picture."""
    row_clues, column_clues = derive_clues(picture)
    return {
        "row_clues": row_clues,
        "column_clues": column_clues,
        "solution": picture,
    }


def setup_logger(name: str, log_file: Path, level=logging.INFO) -> logging.Logger:
    """
    Setup logger for integration runs.

    Args:
        name: Logger name
        log_file: Path to log file
        level: Logging level

    Returns:
        Configured logger
    """
    # Create logs directory if it doesn't exist
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Clear any existing handlers
    logger.handlers = []

    file_handler = logging.FileHandler(log_file, mode="w")
    file_handler.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)

    formatter = logging.Formatter(
        "[%(asctime)s] %(levelname)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
    )
    file_handler.setFormatter(formatter)
    console_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger


def build_receipt(
    puzzle_id: str,
    status: str,
    solve_data: Optional[Dict[str, Any]] = None,
    error: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Build a receipt dictionary for one puzzle.

    Args:
        puzzle_id: Puzzle identifier
        status: "PASS", "FAIL", "UNDERDETERMINED" or "CONTRADICTION"
        solve_data: SolveReceipt fields, when the solve converged
        error: Error message if the solve raised

    Returns:
        Receipt dictionary
    """
    receipt = {
        "puzzle_id": puzzle_id,
        "timestamp": datetime.now().isoformat(),
        "status": status,
    }

    if solve_data is not None:
        receipt["solve"] = solve_data

    if error is not None:
        receipt["error"] = error

    return receipt


def save_receipt(receipt: Dict[str, Any], output_dir: Path) -> None:
    """Save receipt to output_dir/<puzzle_id>.json."""
    output_dir.mkdir(parents=True, exist_ok=True)
    receipt_file = output_dir / f"{receipt['puzzle_id']}.json"

    with open(receipt_file, "w") as f:
        json.dump(receipt, f, indent=2)


def compute_summary_stats(receipts: List[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Compute summary statistics from a list of receipts.

    Returns:
        Counts per status, pass rate, and pass statistics over converged solves
    """
    total = len(receipts)
    by_status: Dict[str, int] = {}
    for r in receipts:
        by_status[r["status"]] = by_status.get(r["status"], 0) + 1

    passed = by_status.get("PASS", 0)
    stats = {
        "total_puzzles": total,
        "by_status": by_status,
        "pass_rate": passed / total if total > 0 else 0.0,
    }

    solved = [r for r in receipts if "solve" in r]
    if solved:
        passes = [r["solve"]["passes"] for r in solved]
        stats["solve"] = {
            "avg_passes": sum(passes) / len(passes),
            "max_passes": max(passes),
            "avg_removals": sum(r["solve"]["total_removals"] for r in solved) / len(solved),
        }

    return stats
