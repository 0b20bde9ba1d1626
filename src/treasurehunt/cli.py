"""Typer CLI for the treasure hunt search."""
from __future__ import annotations
import typer
from pathlib import Path
from typing import Optional
from rich import print
from rich.markup import escape

from treasurehunt.config import load_config, parse_run_arguments
from treasurehunt.config.schema import DEFAULTS_PATH
from treasurehunt.engine.sim_runner import EventKind, SearchEvent, run_search
from treasurehunt.world import build_environment, render_grid
from treasurehunt.analysis import plot_metrics, write_report

app = typer.Typer(help="Evolve VM programs that collect treasure on a 7x7 grid")


def ask_to_continue(event: SearchEvent) -> bool:
    if event.kind == EventKind.SOLUTION_FOUND:
        print(f"[green]Successful solution![/green] Generation: {event.generation}")
    else:
        print(f"[yellow]Target generation reached![/yellow] Generation: {event.generation}")
    print(render_grid(build_environment(), event.genome.step_trace))
    print(f"Genes: {event.genome.instructions.tolist()}")
    try:
        return typer.confirm("Do you want to keep searching for a better solution?", default=False)
    except typer.Abort:
        # No answer on stdin counts as "no".
        return False


@app.command()
def run(
    subjects: str = typer.Argument(..., help="Number of subjects (>= 20)"),
    generations: str = typer.Argument(..., help="Target generation number (>= 1)"),
    mutation: str = typer.Argument(..., help="Per-bit mutation probability"),
    selection: str = typer.Argument(..., help="Selection method: 0 roulette, 1 tournament"),
    config: Path = typer.Option(DEFAULTS_PATH, help="YAML config path"),
    seed: Optional[int] = typer.Option(None, help="Override seed"),
    run_dir: Optional[Path] = typer.Option(None, help="Override output directory"),
    interactive: bool = typer.Option(True, help="Ask before stopping on a solution or the target"),
):
    parsed = parse_run_arguments(subjects, generations, mutation, selection)
    if not parsed.ok:
        print(f"[red]{parsed.error.kind.value}[/red] {escape(str(parsed.error))}")
        raise typer.Exit(code=2)
    cfg = parsed.arguments.apply(load_config(config))
    if seed is not None:
        cfg.seed = seed
    if run_dir is not None:
        cfg.outputs.run_dir = run_dir
    print(render_grid(build_environment()))
    result = run_search(cfg, decide=ask_to_continue if interactive else None)
    print(render_grid(build_environment(), result.best.step_trace))
    if result.run_dir is not None:
        print(f"Outputs written to {result.run_dir}")


@app.command()
def grid():
    print(render_grid(build_environment()))


@app.command()
def analyze(run: Path = typer.Option(..., help="Run directory")):
    plot_metrics(run)
    write_report(run)
    print(f"Analysis complete for {run}")


if __name__ == "__main__":
    app()
