"""Metrics aggregation and output."""
from __future__ import annotations
from pathlib import Path
from typing import Sequence
import pandas as pd

from treasurehunt.substrates.digital.genome import Genome


def summarize_generation(generation: int, population: Sequence[Genome]) -> dict:
    """One metrics row for a population already sorted best-first."""
    best = population[0]
    return {
        "generation": generation,
        "best_fitness": best.fitness,
        "mean_fitness": sum(g.fitness for g in population) / len(population),
        "best_treasures": best.treasures_found,
        "best_steps": best.steps,
        "best_iterations": best.iterations_run,
    }


def save_metrics(records: list[dict], path: Path):
    df = pd.DataFrame(records)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False)
    return df
