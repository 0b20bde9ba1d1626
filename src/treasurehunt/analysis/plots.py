"""Plotting helpers."""
from __future__ import annotations
from pathlib import Path
import pandas as pd
import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt


def plot_metrics(run_dir: Path):
    metrics_path = run_dir / "metrics.csv"
    if not metrics_path.exists():
        return None
    df = pd.read_csv(metrics_path)
    out_dir = run_dir / "plots"
    out_dir.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots()
    for col in ("best_fitness", "mean_fitness"):
        if col in df.columns:
            ax.plot(df["generation"], df[col], label=col)
    ax.set_xlabel("generation")
    ax.set_ylabel("fitness")
    ax.legend()
    out = out_dir / "fitness.png"
    fig.savefig(out)
    plt.close(fig)

    if "best_treasures" in df.columns:
        fig2, ax2 = plt.subplots()
        ax2.step(df["generation"], df["best_treasures"], where="post")
        ax2.set_xlabel("generation")
        ax2.set_ylabel("treasures")
        ax2.set_title("Treasures collected by the generation leader")
        fig2.savefig(out_dir / "treasures.png")
        plt.close(fig2)
    return out
