"""Per-cycle overlap scoring."""

from typing import Optional

import numpy as np

from .columns import ColumnPool


def compute_overlap(input_bits: np.ndarray, pool: ColumnPool,
                    connected_threshold: Optional[float] = None) -> np.ndarray:
    """Boosted count of ON input bits in each column's potential pool.

    With ``connected_threshold`` set, only synapses whose permanence reaches
    it are counted. Reads ``pool`` without modifying it.
    """
    hits = input_bits[pool.indices]
    if connected_threshold is not None:
        hits = hits & pool.connected_mask(connected_threshold)
    overlap = np.sum(hits, axis=1).astype(np.float32)
    return overlap * pool.boosts
