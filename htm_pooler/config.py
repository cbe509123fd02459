from dataclasses import dataclass
from typing import Optional, List

from .errors import ConfigError


@dataclass
class PoolerConfig:
    # Inputs / columns
    input_length: int = 1000
    column_count: int = 2048

    # Local inhibition
    active_columns_per_area: int = 8   # k
    inhibition_radius: int = 10        # r, must exceed k

    # Proximal synapses
    potential_pool_size: int = 10
    permanence_threshold: float = 0.5
    permanence_increment: float = 0.05
    permanence_decrement: float = 0.02
    connected_only: bool = False       # score only synapses >= permanence_threshold

    # Activation / homeostasis
    stimulus_threshold: float = 1.0
    duty_cycle_period: int = 1000
    min_overlap_duty_cycle: float = 0.001

    def _checks(self):
        k = self.active_columns_per_area
        yield "input_length >= 1", self.input_length >= 1
        yield "column_count >= 1", self.column_count >= 1
        yield "active_columns_per_area >= 1", k >= 1
        yield "inhibition_radius > active_columns_per_area", self.inhibition_radius > k
        yield "potential_pool_size >= 0", self.potential_pool_size >= 0
        yield "potential_pool_size <= input_length", self.potential_pool_size <= self.input_length
        yield "duty_cycle_period >= 1", self.duty_cycle_period >= 1
        yield "0 <= permanence_threshold <= 1", 0.0 <= self.permanence_threshold <= 1.0
        yield "permanence_increment >= 0", self.permanence_increment >= 0
        yield "permanence_decrement >= 0", self.permanence_decrement >= 0

    def validate(self) -> "PoolerConfig":
        """Raise ``ConfigError`` naming the first violated constraint."""
        for constraint, ok in self._checks():
            if not ok:
                raise ConfigError(constraint)
        return self


@dataclass
class RunConfig:
    seed: int = 7
    steps: int = 2
    pattern: str = "alternating"  # choices: "alternating", "random"
    on_bits: int = 40             # only used by the "random" pattern
    outdir: str = "runs"
    run_name: Optional[str] = None
    plots: Optional[List[str]] = None  # any of "cycles", "boosts"
