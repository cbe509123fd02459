"""Hebbian permanence update for active columns."""

import numpy as np

from .columns import ColumnPool


def learn(pool: ColumnPool, input_bits: np.ndarray, active: np.ndarray,
          increment: float, decrement: float) -> None:
    """Strengthen synapses on ON bits, weaken the rest, for active columns only."""
    active_columns = np.flatnonzero(active)
    if active_columns.size == 0:
        return
    idx = pool.indices[active_columns]
    perm = pool.permanences[active_columns]
    on = input_bits[idx]
    perm = perm + np.float32(increment) * on - np.float32(decrement) * (~on)
    np.clip(perm, 0.0, 1.0, out=perm)
    pool.permanences[active_columns] = perm
