import pytest

pytest.importorskip("pydantic")
pytest.importorskip("pandas")
pytest.importorskip("numpy")

from treasurehunt.config import ConfigSchema
from treasurehunt.engine.sim_runner import EventKind, StopReason, run_search
import pandas as pd
import shutil


def _config(tmp_path, **evolution):
    cfg = ConfigSchema(seed=948464)
    cfg.outputs.run_dir = tmp_path / "runs"
    cfg.outputs.summarize = False
    cfg.evolution.population = 20
    cfg.evolution.generations = 15
    for key, value in evolution.items():
        setattr(cfg.evolution, key, value)
    return cfg


def test_deterministic_run(tmp_path):
    cfg = _config(tmp_path)
    first = run_search(cfg)
    df1 = pd.read_csv(first.run_dir / "metrics.csv")
    shutil.rmtree(first.run_dir)
    second = run_search(cfg)
    df2 = pd.read_csv(second.run_dir / "metrics.csv")
    assert df1.equals(df2)
    assert (second.run_dir / "best_solution.json").exists()
    assert (second.run_dir / "config.yaml").exists()


@pytest.mark.parametrize("selection", [0, 1])
def test_search_stops_at_target(tmp_path, selection):
    cfg = _config(tmp_path, selection=selection)
    cfg.outputs.save_metrics = False
    events = []

    def decide(event):
        events.append(event)
        return False

    result = run_search(cfg, decide=decide)
    assert result.run_dir is None
    assert events[-1].kind in (EventKind.TARGET_REACHED, EventKind.SOLUTION_FOUND)
    if result.stop_reason == StopReason.TARGET_REACHED:
        assert result.generations == 15
        assert len(result.history) == 15
        assert events[-1].genome is result.best
        best_row = max(result.history, key=lambda row: row["best_fitness"])
        assert result.best.fitness == pytest.approx(best_row["best_fitness"])
    else:
        assert result.best.treasures_found == 5


def test_continuing_past_solutions_runs_to_target(tmp_path):
    cfg = _config(tmp_path, generations=8)
    cfg.outputs.save_metrics = False
    kinds = []

    def decide(event):
        kinds.append(event.kind)
        return event.kind == EventKind.SOLUTION_FOUND

    result = run_search(cfg, decide=decide)
    assert result.stop_reason == StopReason.TARGET_REACHED
    assert result.generations == 8
    assert kinds[-1] == EventKind.TARGET_REACHED
    assert kinds.count(EventKind.TARGET_REACHED) == 1
