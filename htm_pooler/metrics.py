"""Per-cycle statistics and CSV logging for pooler runs."""

import csv
import os
from typing import Any, Dict, Set

import numpy as np

from .columns import ColumnPool

FIELDNAMES = [
    "step",
    "active_columns",
    "sparsity",
    "mean_overlap",
    "mean_boost",
    "max_boost",
    "zero_boost_columns",
    "mean_active_duty",
    "mean_overlap_duty",
    "connected_fraction",
    "rescued_columns",
    "stability_jaccard",
]


def sparsity(mask: np.ndarray) -> float:
    """Fraction of ON entries in ``mask``."""
    if mask.size == 0:
        return 0.0
    return float(np.count_nonzero(mask)) / mask.size


def jaccard(a: Set[int], b: Set[int]) -> float:
    if not a and not b:
        return 1.0
    union = len(a | b)
    return len(a & b) / union if union else 1.0


def connected_fraction(pool: ColumnPool, threshold: float) -> float:
    if pool.permanences.size == 0:
        return 0.0
    return float(np.mean(pool.connected_mask(threshold)))


def cycle_stats(sp, active: np.ndarray, prev_active: np.ndarray = None) -> Dict[str, Any]:
    """Summarise pooler state right after a ``compute`` call."""
    pool = sp.pool
    row = {
        "step": sp.iteration,
        "active_columns": int(np.count_nonzero(active)),
        "sparsity": sparsity(active),
        "mean_overlap": float(np.mean(sp.last_overlap)),
        "mean_boost": float(np.mean(pool.boosts)),
        "max_boost": float(np.max(pool.boosts)),
        "zero_boost_columns": int(np.count_nonzero(pool.boosts == 0)),
        "mean_active_duty": float(np.mean(pool.active_duty_cycles)),
        "mean_overlap_duty": float(np.mean(pool.overlap_duty_cycles)),
        "connected_fraction": connected_fraction(pool, sp.cfg.permanence_threshold),
        "rescued_columns": int(np.count_nonzero(sp.last_rescued)),
        "stability_jaccard": "",
    }
    if prev_active is not None:
        row["stability_jaccard"] = jaccard(
            set(np.flatnonzero(prev_active).tolist()),
            set(np.flatnonzero(active).tolist()),
        )
    return row


def init_metrics(run_dir: str, filename: str = "metrics.csv") -> str:
    """Start a fresh per-cycle CSV in ``run_dir`` (header only) and return its path."""
    os.makedirs(run_dir, exist_ok=True)
    path = os.path.join(run_dir, filename)
    with open(path, "w", newline="") as f:
        csv.DictWriter(f, fieldnames=FIELDNAMES).writeheader()
    return path


def append_row(csv_path: str, row: Dict[str, Any]) -> None:
    """Append one cycle to a CSV created by :func:`init_metrics`.

    Keys outside ``FIELDNAMES`` raise ``ValueError``.
    """
    if not os.path.exists(csv_path):
        raise FileNotFoundError(f"{csv_path} was not initialised with init_metrics")
    with open(csv_path, "a", newline="") as f:
        csv.DictWriter(f, fieldnames=FIELDNAMES).writerow(row)
