"""Bitwise crossover and mutation helpers."""
from __future__ import annotations
import numpy as np

from treasurehunt.substrates.digital.genome import Genome


def reproduce(parent_a: Genome, parent_b: Genome, mutation_probability: float, rng: np.random.Generator) -> np.ndarray:
    """Build a child's instructions bit by bit.

    Each bit (MSB first within every byte) comes from either parent with
    probability 0.5 and is then flipped with ``mutation_probability``.
    Parents are left untouched.
    """
    bits_a = np.unpackbits(parent_a.instructions[:, None], axis=1)
    bits_b = np.unpackbits(parent_b.instructions[:, None], axis=1)
    from_a = rng.random(bits_a.shape) < 0.5
    flips = rng.random(bits_a.shape) < mutation_probability
    child = np.where(from_a, bits_a, bits_b) ^ flips.astype(np.uint8)
    return np.packbits(child, axis=1).ravel()
