"""Pydantic config schema and loader."""
from pathlib import Path
from typing import Optional
import yaml
from pydantic import BaseModel, Field, field_validator

from treasurehunt.evolution.selection import SelectionMethod

MIN_POPULATION = 20
MIN_GENERATIONS = 1
DEFAULTS_PATH = Path(__file__).with_name("defaults.yaml")


class EvolutionConfig(BaseModel):
    population: int = 50
    generations: int = 1000
    mutation_probability: float = 0.01
    selection: SelectionMethod = SelectionMethod.TOURNAMENT
    children_per_pair: int = 2

    @field_validator("population")
    @classmethod
    def validate_population(cls, v: int) -> int:
        if v < MIN_POPULATION:
            raise ValueError(f"population must be at least {MIN_POPULATION}")
        return v

    @field_validator("generations")
    @classmethod
    def validate_generations(cls, v: int) -> int:
        if v < MIN_GENERATIONS:
            raise ValueError(f"generations must be at least {MIN_GENERATIONS}")
        return v

    @field_validator("mutation_probability")
    @classmethod
    def validate_probability(cls, v: float) -> float:
        if not 0 <= v <= 1:
            raise ValueError("mutation_probability must be within [0, 1]")
        return v

    @field_validator("children_per_pair")
    @classmethod
    def validate_children(cls, v: int) -> int:
        if v < 1:
            raise ValueError("children_per_pair must be positive")
        return v


class OutputConfig(BaseModel):
    run_dir: Path = Path("runs")
    save_metrics: bool = True
    progress_interval: int = 500
    summarize: bool = True

    @field_validator("progress_interval")
    @classmethod
    def validate_interval(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("progress_interval must be positive")
        return v


class ConfigSchema(BaseModel):
    seed: Optional[int] = None
    evolution: EvolutionConfig = Field(default_factory=EvolutionConfig)
    outputs: OutputConfig = Field(default_factory=OutputConfig)


def load_config(path: Path = DEFAULTS_PATH) -> ConfigSchema:
    data = yaml.safe_load(Path(path).read_text()) or {}
    return ConfigSchema(**data)
