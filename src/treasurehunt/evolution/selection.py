"""Parent selection: roulette wheel and binary tournament."""
from __future__ import annotations
from enum import IntEnum
from typing import Sequence, Tuple
import numpy as np

from treasurehunt.substrates.digital.genome import Genome

Parents = Tuple[Genome, Genome]


class SelectionMethod(IntEnum):
    ROULETTE = 0
    TOURNAMENT = 1


def _spin(population: Sequence[Genome], total_fitness: float, rng: np.random.Generator) -> Genome:
    r = rng.uniform(0.0, total_fitness)
    cumulative = 0.0
    for genome in population:
        cumulative += genome.fitness
        if cumulative > r:
            return genome
    # Reached when r sits on the summed total (or the total is zero).
    return population[-1]


def selection_roulette(population: Sequence[Genome], total_fitness: float, rng: np.random.Generator) -> Parents:
    """Fitness-proportional selection, two independent spins.

    ``total_fitness`` must be the sum of ``population`` fitness values; it is
    not recomputed here.
    """
    return _spin(population, total_fitness, rng), _spin(population, total_fitness, rng)


def _duel(population: Sequence[Genome], rng: np.random.Generator) -> Genome:
    first = population[int(rng.integers(len(population)))]
    second = population[int(rng.integers(len(population)))]
    return first if first.fitness > second.fitness else second


def selection_tournament(population: Sequence[Genome], rng: np.random.Generator) -> Parents:
    return _duel(population, rng), _duel(population, rng)


def select_parents(
    method: SelectionMethod, population: Sequence[Genome], total_fitness: float, rng: np.random.Generator
) -> Parents:
    if method == SelectionMethod.ROULETTE:
        return selection_roulette(population, total_fitness, rng)
    return selection_tournament(population, rng)
