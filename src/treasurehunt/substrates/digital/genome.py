"""Instruction genome representation."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List
import numpy as np

from .instruction_vm import Direction, MEMORY_SIZE

RANDOM_PREFIX = 16


def random_instructions(rng: np.random.Generator) -> np.ndarray:
    """First 16 bytes uniform over 0..255, the remaining 48 zero."""
    out = np.zeros(MEMORY_SIZE, dtype=np.uint8)
    out[:RANDOM_PREFIX] = rng.integers(0, 256, size=RANDOM_PREFIX, dtype=np.uint8)
    return out


@dataclass
class Genome:
    instructions: np.ndarray
    fitness: float = 0.0
    treasures_found: int = 0
    iterations_run: int = 0
    step_trace: List[Direction] = field(default_factory=list)

    def __post_init__(self):
        self.instructions = np.asarray(self.instructions, dtype=np.uint8)
        if self.instructions.shape != (MEMORY_SIZE,):
            raise ValueError(f"Genome must hold exactly {MEMORY_SIZE} instructions")

    @classmethod
    def random(cls, rng: np.random.Generator) -> "Genome":
        return cls(instructions=random_instructions(rng))

    @property
    def steps(self) -> int:
        return len(self.step_trace)

    def as_dict(self) -> dict:
        return {
            "genes": self.instructions.tolist(),
            "fitness": self.fitness,
            "treasures_found": self.treasures_found,
            "iterations": self.iterations_run,
            "steps": "".join(d.symbol for d in self.step_trace),
        }
