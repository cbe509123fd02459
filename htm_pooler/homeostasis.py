"""Duty cycles, boosting and rescue of under-used columns."""

import numpy as np

from .columns import ColumnPool
from .config import PoolerConfig
from .inhibition import neighborhood_bounds

BOOST_STEP = 1.0


def _ema(old: np.ndarray, sample: np.ndarray, period: int) -> np.ndarray:
    new = (old * np.float32(period - 1) + sample.astype(np.float32)) / np.float32(period)
    return np.clip(new, 0.0, 1.0).astype(np.float32)


def neighbor_sums(values: np.ndarray, lo: np.ndarray, hi: np.ndarray):
    """Sum and size of each column's neighborhood, own value excluded.

    Also returns a bound on the rounding error of the prefix-sum totals
    (``values`` must be non-negative).
    """
    v = values.astype(np.float64)
    csum = np.concatenate(([0.0], np.cumsum(v)))
    totals = csum[hi] - csum[lo] - v
    counts = (hi - lo - 1).astype(np.float64)
    err = 4 * np.finfo(np.float64).eps * hi * csum[hi]
    return totals, counts, err


def neighbor_means(values: np.ndarray, lo: np.ndarray, hi: np.ndarray) -> np.ndarray:
    """Mean of ``values`` over each column's neighborhood, own value excluded.

    An empty neighborhood has mean 0.
    """
    totals, counts, _ = neighbor_sums(values, lo, hi)
    return np.divide(totals, counts, out=np.zeros_like(totals), where=counts > 0)


class Homeostasis:
    """Applies the per-cycle homeostatic step to every column of a pool."""

    def __init__(self, cfg: PoolerConfig):
        self.period = cfg.duty_cycle_period
        self.min_overlap_duty_cycle = cfg.min_overlap_duty_cycle
        self.permanence_increment = cfg.permanence_increment
        self.lo, self.hi = neighborhood_bounds(cfg.column_count, cfg.inhibition_radius)

    def update_duty_cycles(self, pool: ColumnPool, active: np.ndarray, overlap: np.ndarray) -> None:
        pool.active_duty_cycles[:] = _ema(pool.active_duty_cycles, active, self.period)
        pool.overlap_duty_cycles[:] = _ema(pool.overlap_duty_cycles, overlap, self.period)

    def update_boosts(self, pool: ColumnPool) -> None:
        duty = pool.active_duty_cycles.astype(np.float64)
        totals, counts, err = neighbor_sums(duty, self.lo, self.hi)
        # own >= mean, compared as sums; only prefix-sum rounding counts as a tie
        up = duty * counts >= totals - err
        boosts = np.where(up, pool.boosts + BOOST_STEP, pool.boosts - BOOST_STEP)
        pool.boosts[:] = np.maximum(boosts, 0.0)

    def rescue(self, pool: ColumnPool) -> np.ndarray:
        """Raise every permanence of columns whose overlap duty is too low."""
        starving = pool.overlap_duty_cycles < self.min_overlap_duty_cycle
        if starving.any():
            perm = pool.permanences[starving] + np.float32(self.permanence_increment)
            np.clip(perm, 0.0, 1.0, out=perm)
            pool.permanences[starving] = perm
        return starving

    def step(self, pool: ColumnPool, active: np.ndarray, overlap: np.ndarray) -> np.ndarray:
        """Run the full homeostatic step; returns the mask of rescued columns."""
        self.update_duty_cycles(pool, active, overlap)
        self.update_boosts(pool)
        return self.rescue(pool)
