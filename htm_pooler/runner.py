"""Runner that drives a pooler over a generated input stream."""

import json
import logging
import os
import time
import warnings
from dataclasses import asdict

import numpy as np

from .columns import seeded_rng
from .config import PoolerConfig, RunConfig
from .inputs import alternating_input, random_input
from .sp import SpatialPooler
from . import metrics
from . import plotting

log = logging.getLogger(__name__)

PATTERNS = ("alternating", "random")


def _write_configs(pooler_cfg: PoolerConfig, run_cfg: RunConfig, run_dir: str) -> None:
    with open(os.path.join(run_dir, "config_pooler.json"), "w") as f:
        json.dump(asdict(pooler_cfg), f, indent=2, sort_keys=True)
    with open(os.path.join(run_dir, "config_run.json"), "w") as f:
        json.dump(asdict(run_cfg), f, indent=2, sort_keys=True)


def _input_stream(pooler_cfg: PoolerConfig, run_cfg: RunConfig, rng: np.random.Generator):
    if run_cfg.pattern == "alternating":
        bits = alternating_input(pooler_cfg.input_length)
        for _ in range(run_cfg.steps):
            yield bits
    elif run_cfg.pattern == "random":
        for _ in range(run_cfg.steps):
            yield random_input(pooler_cfg.input_length, run_cfg.on_bits, rng)
    else:
        raise ValueError(f"unknown pattern {run_cfg.pattern!r}; choose from {PATTERNS}")


def main(pooler_cfg: PoolerConfig, run_cfg: RunConfig) -> str:
    if run_cfg.pattern not in PATTERNS:
        raise ValueError(f"unknown pattern {run_cfg.pattern!r}; choose from {PATTERNS}")
    timestamp = time.strftime("%Y%m%d_%H%M%S")
    name = run_cfg.run_name or run_cfg.pattern
    run_dir = os.path.join(run_cfg.outdir, f"{timestamp}_{name}")
    os.makedirs(run_dir, exist_ok=True)
    _write_configs(pooler_cfg, run_cfg, run_dir)
    metrics_path = metrics.init_metrics(run_dir)

    # wiring and input sampling draw from separate streams of the same seed
    wiring_rng, input_rng = seeded_rng(run_cfg.seed).spawn(2)
    sp = SpatialPooler.construct(pooler_cfg, wiring_rng)

    prev_active = None
    empty_cycles = 0
    for bits in _input_stream(pooler_cfg, run_cfg, input_rng):
        active = sp.compute(bits)
        row = metrics.cycle_stats(sp, active, prev_active)
        metrics.append_row(metrics_path, row)
        if row["active_columns"] == 0:
            empty_cycles += 1
        prev_active = active

    if empty_cycles:
        warnings.warn(f"{empty_cycles} of {run_cfg.steps} cycles produced no active columns")

    plots = run_cfg.plots or []
    if plots:
        plotting.set_matplotlib_headless()
    if "cycles" in plots:
        df = plotting.load_metrics(metrics_path)
        plotting.plot_cycle_metrics(df, os.path.join(run_dir, "cycle_metrics.png"))
    if "boosts" in plots:
        plotting.plot_boost_histogram(sp.boosts, os.path.join(run_dir, "boost_histogram.png"))

    log.info("run finished after %d cycles: %s", sp.iteration, run_dir)
    print(f"[SP] {sp.iteration} cycles, last active={0 if prev_active is None else int(prev_active.sum())}, "
          f"outputs in {run_dir}")
    return run_dir
