"""Digital organism fitness."""
from __future__ import annotations
from treasurehunt.world.grid import Grid, GridSurvey
from .instruction_vm import run_virtual_machine
from .genome import Genome

STEP_PENALTY = 0.005


def calculate_fitness(step_count: int, treasures_found: int, total_treasures: int) -> float:
    """Share of treasures found minus a linear per-move penalty, floored at 0.

    Never negative, so roulette selection can sum fitness values directly.
    """
    fitness = treasures_found / total_treasures - step_count * STEP_PENALTY
    return max(0.0, fitness)


def evaluate_genome(genome: Genome, grid: Grid, survey: GridSurvey) -> float:
    result = run_virtual_machine(genome.instructions, grid, survey.start_x, survey.start_y, survey.treasures)
    genome.iterations_run = result.iterations
    genome.treasures_found = result.treasures_found
    genome.step_trace = result.step_trace
    genome.fitness = calculate_fitness(len(result.step_trace), result.treasures_found, survey.treasures)
    return genome.fitness
