"""Typed parsing of the positional ``run`` arguments.

Parsing never raises or exits: the caller gets a :class:`ParseResult` holding
either the parsed values or an :class:`ArgumentError` naming what went wrong,
and decides how to report it.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple, TypeVar

from .schema import ConfigSchema, MIN_GENERATIONS, MIN_POPULATION
from treasurehunt.evolution.selection import SelectionMethod

T = TypeVar("T")


class ArgumentErrorKind(Enum):
    INVALID_ARGUMENT = "invalid_argument"
    OUT_OF_RANGE = "out_of_range"


@dataclass(frozen=True)
class ArgumentError:
    kind: ArgumentErrorKind
    argument: str
    message: str

    def __str__(self) -> str:
        return f"{self.argument}: {self.message}"


@dataclass(frozen=True)
class RunArguments:
    subjects: int
    generations: int
    mutation_probability: float
    selection: SelectionMethod

    def apply(self, config: ConfigSchema) -> ConfigSchema:
        evolution = config.evolution.model_copy(
            update={
                "population": self.subjects,
                "generations": self.generations,
                "mutation_probability": self.mutation_probability,
                "selection": self.selection,
            }
        )
        return config.model_copy(update={"evolution": evolution})


@dataclass(frozen=True)
class ParseResult:
    arguments: Optional[RunArguments] = None
    error: Optional[ArgumentError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _convert(name: str, raw: str, kind: Callable[[str], T]) -> Tuple[Optional[T], Optional[ArgumentError]]:
    try:
        return kind(raw.strip()), None
    except ValueError:
        label = "an integer" if kind is int else "a number"
        return None, ArgumentError(ArgumentErrorKind.INVALID_ARGUMENT, name, f"expected {label}, got {raw!r}")


def _out_of_range(name: str, message: str) -> ParseResult:
    return ParseResult(error=ArgumentError(ArgumentErrorKind.OUT_OF_RANGE, name, message))


def parse_run_arguments(subjects: str, generations: str, mutation_probability: str, selection: str) -> ParseResult:
    """Parse ``<subjects> <generations> <mutation probability> <selection>``."""
    n_subjects, err = _convert("subjects", subjects, int)
    if err:
        return ParseResult(error=err)
    if n_subjects < MIN_POPULATION:
        return _out_of_range("subjects", f"minimum number of subjects is {MIN_POPULATION}")

    n_generations, err = _convert("generations", generations, int)
    if err:
        return ParseResult(error=err)
    if n_generations < MIN_GENERATIONS:
        return _out_of_range("generations", f"minimum number of generations is {MIN_GENERATIONS}")

    probability, err = _convert("mutation_probability", mutation_probability, float)
    if err:
        return ParseResult(error=err)
    if not 0.0 <= probability <= 1.0:
        return _out_of_range("mutation_probability", "must be within [0, 1]")

    method, err = _convert("selection", selection, int)
    if err:
        return ParseResult(error=err)
    if method not in {m.value for m in SelectionMethod}:
        return _out_of_range("selection", "selection method must be 0 (roulette) or 1 (tournament)")

    return ParseResult(
        arguments=RunArguments(
            subjects=n_subjects,
            generations=n_generations,
            mutation_probability=probability,
            selection=SelectionMethod(method),
        )
    )
