from pathlib import Path
from typing import Union

import numpy as np
import pandas as pd
import matplotlib
import matplotlib.pyplot as plt

PathLike = Union[str, Path]


def set_matplotlib_headless() -> None:
    """Configure matplotlib to use a headless backend."""
    matplotlib.use("Agg", force=True)


def load_metrics(csv_path: PathLike) -> pd.DataFrame:
    return pd.read_csv(csv_path)


def plot_cycle_metrics(df: pd.DataFrame, outpath: PathLike) -> None:
    """Sparsity, boost and duty-cycle trajectories over cycles."""
    req = {"step", "sparsity", "mean_boost", "max_boost", "mean_active_duty", "mean_overlap_duty"}
    missing = req - set(df.columns)
    if missing:
        raise ValueError(f"metrics missing columns for cycle plot: {sorted(missing)}")

    fig, axes = plt.subplots(3, 1, figsize=(8, 9), sharex=True)
    axes[0].plot(df["step"], df["sparsity"], marker="o")
    axes[0].set_ylabel("sparsity")
    axes[0].set_title("Spatial pooler activity")

    axes[1].plot(df["step"], df["mean_boost"], label="mean")
    axes[1].plot(df["step"], df["max_boost"], label="max")
    axes[1].set_ylabel("boost")
    axes[1].legend(frameon=False, fontsize=8)

    axes[2].plot(df["step"], df["mean_active_duty"], label="active")
    axes[2].plot(df["step"], df["mean_overlap_duty"], label="overlap")
    axes[2].set_ylabel("duty cycle (mean)")
    axes[2].set_xlabel("cycle")
    axes[2].legend(frameon=False, fontsize=8)

    fig.tight_layout()
    fig.savefig(outpath)
    plt.close(fig)


def plot_boost_histogram(boosts: np.ndarray, outpath: PathLike) -> None:
    plt.figure(figsize=(6, 4))
    bins = min(50, max(1, int(np.max(boosts)) + 1)) if boosts.size else 1
    plt.hist(boosts, bins=bins)
    plt.title("Boost distribution")
    plt.xlabel("boost")
    plt.ylabel("columns")
    plt.tight_layout()
    plt.savefig(outpath)
    plt.close()
