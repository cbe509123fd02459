"""Binary input patterns for driving a pooler."""

import numpy as np


def alternating_input(length: int, first_on: bool = False) -> np.ndarray:
    """OFF/ON/OFF/ON... pattern (ON/OFF/... with ``first_on``)."""
    bits = np.zeros(length, dtype=bool)
    bits[(0 if first_on else 1)::2] = True
    return bits


def random_input(length: int, on_bits: int, rng: np.random.Generator) -> np.ndarray:
    """Vector with exactly ``on_bits`` ON positions drawn without replacement."""
    if not 0 <= on_bits <= length:
        raise ValueError(f"on_bits must be in [0, {length}], got {on_bits}")
    bits = np.zeros(length, dtype=bool)
    bits[rng.choice(length, size=on_bits, replace=False)] = True
    return bits
