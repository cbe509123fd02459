import numpy as np
import pytest

from htm_pooler.columns import ColumnPool
from htm_pooler.config import PoolerConfig


@pytest.fixture
def small_cfg():
    return PoolerConfig(
        input_length=60,
        column_count=40,
        active_columns_per_area=2,
        inhibition_radius=4,
        potential_pool_size=6,
        permanence_increment=0.05,
        permanence_decrement=0.02,
        stimulus_threshold=0.0,
        duty_cycle_period=10,
        min_overlap_duty_cycle=0.05,
    )


@pytest.fixture
def make_pool():
    """Factory for hand-wired pools."""
    def _make(indices, permanences=0.5, boosts=None, active_duty=None, overlap_duty=None):
        idx = np.asarray(indices, dtype=np.int64)
        n = idx.shape[0]
        perm = np.broadcast_to(np.asarray(permanences, dtype=np.float32), idx.shape).copy()

        def _vec(values, default):
            if values is None:
                return np.full(n, default, dtype=np.float32)
            return np.asarray(values, dtype=np.float32).copy()

        return ColumnPool(
            indices=idx,
            permanences=perm,
            boosts=_vec(boosts, 1.0),
            active_duty_cycles=_vec(active_duty, 0.0),
            overlap_duty_cycles=_vec(overlap_duty, 0.0),
        )
    return _make
