"""Generation loop driving the treasure hunt search."""
from __future__ import annotations
import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional
import numpy as np
import yaml
from rich.console import Console
from rich.table import Table

from treasurehunt.config import ConfigSchema, EvolutionConfig
from treasurehunt.core.rng import make_rng
from treasurehunt.engine.metrics import save_metrics, summarize_generation
from treasurehunt.evolution import reproduce, select_parents
from treasurehunt.substrates.digital import Genome, evaluate_genome
from treasurehunt.world import Grid, GridSurvey, build_environment, format_trace, survey_grid

console = Console()
logger = logging.getLogger(__name__)


class EventKind(Enum):
    SOLUTION_FOUND = "solution_found"
    TARGET_REACHED = "target_reached"


class StopReason(Enum):
    SOLUTION_ACCEPTED = "solution_accepted"
    TARGET_REACHED = "target_reached"


@dataclass(frozen=True)
class SearchEvent:
    kind: EventKind
    generation: int
    genome: Genome


Decision = Callable[[SearchEvent], bool]


def stop_searching(event: SearchEvent) -> bool:
    return False


@dataclass
class SearchResult:
    best: Genome
    best_generation: int
    generations: int
    stop_reason: StopReason
    history: List[dict] = field(default_factory=list)
    run_dir: Optional[Path] = None


def evaluate_population(population: List[Genome], grid: Grid, survey: GridSurvey) -> float:
    """Run every genome in order, sort best-first and return the fitness total."""
    for genome in population:
        evaluate_genome(genome, grid, survey)
    population.sort(key=lambda g: g.fitness, reverse=True)
    return sum(g.fitness for g in population)


def breed(population: List[Genome], total_fitness: float, evolution: EvolutionConfig, rng: np.random.Generator) -> List[Genome]:
    offspring: List[Genome] = []
    while len(offspring) < evolution.population:
        parent_a, parent_b = select_parents(evolution.selection, population, total_fitness, rng)
        litter = min(evolution.children_per_pair, evolution.population - len(offspring))
        for _ in range(litter):
            offspring.append(Genome(instructions=reproduce(parent_a, parent_b, evolution.mutation_probability, rng)))
    return offspring


def _describe(genome: Genome) -> str:
    return (
        f"F: {genome.fitness:.4f}, T: {genome.treasures_found}, "
        f"S: {genome.steps}, I: {genome.iterations_run}"
    )


def run_search(config: ConfigSchema, decide: Optional[Decision] = None) -> SearchResult:
    """Evolve programs until ``decide`` declines to continue.

    ``decide`` is consulted when a generation produces a complete solution
    better than anything seen so far (at most once per generation, for its
    fittest complete solution), and when the configured number of
    generations has been evaluated. Returning True after the target keeps the
    search going with no generation limit.
    """
    decide = decide or stop_searching
    evolution = config.evolution
    rng = make_rng(config.seed)
    grid = build_environment()
    survey = survey_grid(grid)

    population = [Genome.random(rng) for _ in range(evolution.population)]
    target: Optional[int] = evolution.generations
    generation = 0
    best: Optional[Genome] = None
    best_generation = 0
    history: List[dict] = []

    while True:
        if target is not None and generation >= target:
            console.log(f"target generation reached | best {_describe(best)}")
            if not decide(SearchEvent(EventKind.TARGET_REACHED, generation, best)):
                stop_reason = StopReason.TARGET_REACHED
                break
            target = None
        generation += 1
        total_fitness = evaluate_population(population, grid, survey)
        history.append(summarize_generation(generation, population))
        logger.debug("generation %d total fitness %.4f", generation, total_fitness)

        solution = next((g for g in population if g.treasures_found == survey.treasures), None)
        if solution is not None and (best is None or solution.fitness > best.fitness):
            console.log(
                f"successful solution at generation {generation} | {_describe(solution)} | "
                f"steps {format_trace(solution.step_trace)}"
            )
            if not decide(SearchEvent(EventKind.SOLUTION_FOUND, generation, solution)):
                best, best_generation = solution, generation
                stop_reason = StopReason.SOLUTION_ACCEPTED
                break

        offspring = breed(population, total_fitness, evolution, rng)
        leader = population[0]
        if best is None or leader.fitness > best.fitness:
            best, best_generation = leader, generation
        if generation % config.outputs.progress_interval == 0:
            console.log(f"generation {generation} | {_describe(best)}")
        population = offspring

    result = SearchResult(
        best=best,
        best_generation=best_generation,
        generations=generation,
        stop_reason=stop_reason,
        history=history,
    )
    if config.outputs.save_metrics:
        result.run_dir = _write_outputs(config, result)
    if config.outputs.summarize:
        console.print(summary_table(result))
    return result


def _write_outputs(config: ConfigSchema, result: SearchResult) -> Path:
    label = config.seed if config.seed is not None else "entropy"
    run_dir = Path(config.outputs.run_dir) / f"search_{label}"
    run_dir.mkdir(parents=True, exist_ok=True)
    save_metrics(result.history, run_dir / "metrics.csv")
    best = {"generation": result.best_generation, "stop_reason": result.stop_reason.value, **result.best.as_dict()}
    (run_dir / "best_solution.json").write_text(json.dumps(best, indent=2))
    with open(run_dir / "config.yaml", "w") as f:
        yaml.safe_dump(config.model_dump(mode="json"), f)
    return run_dir


def summary_table(result: SearchResult) -> Table:
    best = result.best
    table = Table(title="Best solution", show_lines=True)
    table.add_column("metric")
    table.add_column("value")
    table.add_row("generation", str(result.best_generation))
    table.add_row("fitness", f"{best.fitness:.4f}")
    table.add_row("treasures", str(best.treasures_found))
    table.add_row("steps", f"{format_trace(best.step_trace)} ({best.steps})")
    table.add_row("iterations", str(best.iterations_run))
    table.add_row("stop reason", result.stop_reason.value)
    return table
