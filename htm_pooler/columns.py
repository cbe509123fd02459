"""Column population and its one-time random wiring."""

from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from .config import PoolerConfig

INITIAL_PERMANENCE = 0.5
INITIAL_BOOST = 1.0


def seeded_rng(seed: int) -> np.random.Generator:
    return np.random.default_rng(seed)


@dataclass
class Column:
    """Read-only snapshot of one column."""
    index: int
    synapses: List[Tuple[int, float]]
    boost: float
    active_duty_cycle: float
    overlap_duty_cycle: float


@dataclass
class ColumnPool:
    """Structure-of-arrays arena holding every column.

    Row ``i`` of ``indices``/``permanences`` is column ``i``'s potential pool,
    indices sorted ascending and unique within the row.
    """
    indices: np.ndarray              # (columns, pool) int64
    permanences: np.ndarray          # (columns, pool) float32
    boosts: np.ndarray               # (columns,) float32
    active_duty_cycles: np.ndarray   # (columns,) float32
    overlap_duty_cycles: np.ndarray  # (columns,) float32

    @classmethod
    def create(cls, cfg: PoolerConfig, rng: np.random.Generator) -> 'ColumnPool':
        n, p = cfg.column_count, cfg.potential_pool_size
        idx = np.empty((n, p), dtype=np.int64)
        for col in range(n):
            idx[col] = np.sort(rng.choice(cfg.input_length, size=p, replace=False))
        perm = np.full((n, p), INITIAL_PERMANENCE, dtype=np.float32)
        return cls(
            indices=idx,
            permanences=perm,
            boosts=np.full(n, INITIAL_BOOST, dtype=np.float32),
            active_duty_cycles=np.zeros(n, dtype=np.float32),
            overlap_duty_cycles=np.zeros(n, dtype=np.float32),
        )

    @property
    def column_count(self) -> int:
        return self.indices.shape[0]

    @property
    def pool_size(self) -> int:
        return self.indices.shape[1]

    def connected_mask(self, threshold: float) -> np.ndarray:
        return self.permanences >= threshold

    def column(self, i: int) -> Column:
        if not 0 <= i < self.column_count:
            raise IndexError(f"column {i} out of range [0, {self.column_count})")
        synapses = [(int(s), float(p)) for s, p in zip(self.indices[i], self.permanences[i])]
        return Column(
            index=i,
            synapses=synapses,
            boost=float(self.boosts[i]),
            active_duty_cycle=float(self.active_duty_cycles[i]),
            overlap_duty_cycle=float(self.overlap_duty_cycles[i]),
        )
