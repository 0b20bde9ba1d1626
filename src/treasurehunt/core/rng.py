"""Central RNG helpers using PCG64DXSM."""
from __future__ import annotations
from typing import Optional
from numpy.random import Generator, PCG64DXSM


def make_rng(seed: Optional[int] = None) -> Generator:
    """Return the single generator threaded through a search.

    ``seed=None`` seeds from OS entropy.
    """
    return Generator(PCG64DXSM(seed))
