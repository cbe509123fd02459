"""Local inhibition between neighbouring columns."""

from typing import Tuple

import numpy as np

from .config import PoolerConfig


def neighborhood_bounds(column_count: int, radius: int) -> Tuple[np.ndarray, np.ndarray]:
    """Half-open ``[lo, hi)`` windows of ``[i-r, i+r]`` clipped to the array.

    The window still contains ``i`` itself; callers exclude it.
    """
    cols = np.arange(column_count)
    lo = np.maximum(cols - radius, 0)
    hi = np.minimum(cols + radius + 1, column_count)
    return lo, hi


def neighborhood_index(column_count: int, radius: int) -> np.ndarray:
    """``(columns, 2*radius)`` neighbor indices, own index excluded.

    Slots that fall past an edge point at ``column_count``, a padding slot
    holding a zero score.
    """
    offsets = np.concatenate((np.arange(-radius, 0), np.arange(1, radius + 1)))
    idx = np.arange(column_count)[:, None] + offsets
    idx[(idx < 0) | (idx >= column_count)] = column_count
    return idx


class LocalInhibition:
    """Two-gate local competition: global stimulus floor plus local k-th score."""

    def __init__(self, cfg: PoolerConfig):
        self.k = cfg.active_columns_per_area
        self.radius = cfg.inhibition_radius
        self.stimulus_threshold = cfg.stimulus_threshold
        self.neighbors = neighborhood_index(cfg.column_count, cfg.inhibition_radius)
        # reused every cycle; the padding slot stays 0
        self._scores = np.zeros(cfg.column_count + 1, dtype=np.float32)
        self._windows = np.empty(self.neighbors.shape, dtype=np.float32)
        self._rows = np.arange(cfg.column_count)

    def local_thresholds(self, overlap: np.ndarray) -> np.ndarray:
        """k-th largest positive neighbor score per column.

        Falls back to the smallest positive neighbor score when fewer than
        ``k`` are positive, and to 0 when none are.
        """
        self._scores[:-1] = overlap
        np.take(self._scores, self.neighbors, out=self._windows)
        positive = np.count_nonzero(self._windows > 0, axis=1)
        self._windows.sort(axis=1)  # positives end up in the last ``positive`` slots
        width = self._windows.shape[1]
        pick = np.minimum(width - np.minimum(positive, self.k), width - 1)
        kth = self._windows[self._rows, pick]
        return np.where(positive > 0, kth, np.float32(0.0))

    def select(self, overlap: np.ndarray) -> np.ndarray:
        """Return the boolean active mask; ties with either threshold lose."""
        thresholds = self.local_thresholds(overlap)
        return (overlap > self.stimulus_threshold) & (overlap > thresholds)


def select_active(overlap: np.ndarray, cfg: PoolerConfig) -> np.ndarray:
    return LocalInhibition(cfg).select(overlap)
