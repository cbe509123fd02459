"""Spatial pooler: overlap, local inhibition, Hebbian learning and homeostasis."""

import logging
from typing import Optional

import numpy as np

from .columns import Column, ColumnPool
from .config import PoolerConfig
from .errors import InputLengthMismatch
from .homeostasis import Homeostasis
from .inhibition import LocalInhibition
from .overlap import compute_overlap
from .plasticity import learn as hebbian_learn

log = logging.getLogger(__name__)


class SpatialPooler:
    """Maps binary input vectors onto sparse column activations.

    Build instances with :meth:`construct`; each :meth:`compute` call is one
    full cycle and mutates permanences, boosts and duty cycles in place.
    Cycles on a single instance must not run concurrently.
    """

    def __init__(self, cfg: PoolerConfig, pool: ColumnPool):
        self.cfg = cfg
        self.pool = pool
        self.inhibition = LocalInhibition(cfg)
        self.homeostasis = Homeostasis(cfg)
        self.iteration = 0
        self.last_overlap = np.zeros(cfg.column_count, dtype=np.float32)
        self.last_rescued = np.zeros(cfg.column_count, dtype=bool)

    @classmethod
    def construct(cls, cfg: PoolerConfig, rng: np.random.Generator) -> 'SpatialPooler':
        """Validate ``cfg`` and wire every column using ``rng``."""
        cfg.validate()
        pool = ColumnPool.create(cfg, rng)
        log.info(
            "spatial pooler: %d columns x %d synapses over %d inputs (k=%d, r=%d)",
            cfg.column_count, cfg.potential_pool_size, cfg.input_length,
            cfg.active_columns_per_area, cfg.inhibition_radius,
        )
        return cls(cfg, pool)

    # ------------------------------------------------------------------
    def _as_input(self, input_bits) -> np.ndarray:
        bits = np.asarray(input_bits)
        if bits.ndim != 1 or bits.shape[0] != self.cfg.input_length:
            actual = bits.shape[0] if bits.ndim == 1 else bits.shape
            raise InputLengthMismatch(self.cfg.input_length, actual)
        return bits.astype(bool)

    def _overlap(self, bits: np.ndarray) -> np.ndarray:
        threshold: Optional[float] = None
        if self.cfg.connected_only:
            threshold = self.cfg.permanence_threshold
        return compute_overlap(bits, self.pool, threshold)

    def overlap(self, input_bits) -> np.ndarray:
        """Boosted overlap per column for ``input_bits``; no state changes."""
        return self._overlap(self._as_input(input_bits))

    def compute(self, input_bits, learn: bool = True) -> np.ndarray:
        """Run one cycle and return the boolean active-column mask.

        Raises ``InputLengthMismatch`` before touching any state when the
        input has the wrong length. With ``learn=False`` only overlap and
        inhibition run.
        """
        bits = self._as_input(input_bits)

        overlap = self._overlap(bits)
        active = self.inhibition.select(overlap)

        if learn:
            hebbian_learn(self.pool, bits, active,
                          self.cfg.permanence_increment, self.cfg.permanence_decrement)
            self.last_rescued = self.homeostasis.step(self.pool, active, overlap)
            self.iteration += 1

        self.last_overlap = overlap
        log.debug("cycle %d: %d active, %d rescued",
                  self.iteration, int(active.sum()), int(self.last_rescued.sum()))
        return active

    # ------------------------------------------------------------------
    def column(self, i: int) -> Column:
        return self.pool.column(i)

    @property
    def pool_indices(self) -> np.ndarray:
        return self.pool.indices.copy()

    @property
    def permanences(self) -> np.ndarray:
        return self.pool.permanences.copy()

    @property
    def boosts(self) -> np.ndarray:
        return self.pool.boosts.copy()

    @property
    def active_duty_cycles(self) -> np.ndarray:
        return self.pool.active_duty_cycles.copy()

    @property
    def overlap_duty_cycles(self) -> np.ndarray:
        return self.pool.overlap_duty_cycles.copy()


def construct(cfg: PoolerConfig, rng: np.random.Generator) -> SpatialPooler:
    return SpatialPooler.construct(cfg, rng)


def compute(pooler: SpatialPooler, input_bits, learn: bool = True) -> np.ndarray:
    return pooler.compute(input_bits, learn=learn)
