"""Spatial pooler with local inhibition, Hebbian learning and homeostasis."""

from .config import PoolerConfig, RunConfig
from .columns import Column, ColumnPool, seeded_rng
from .errors import ConfigError, InputLengthMismatch, PoolerError, PoolerRuntimeError
from .sp import SpatialPooler, construct, compute

__version__ = "0.1.0"

__all__ = [
    "PoolerConfig",
    "RunConfig",
    "Column",
    "ColumnPool",
    "seeded_rng",
    "ConfigError",
    "InputLengthMismatch",
    "PoolerError",
    "PoolerRuntimeError",
    "SpatialPooler",
    "construct",
    "compute",
]
