import numpy as np

from treasurehunt.evolution import reproduce
from treasurehunt.substrates.digital import Genome, random_instructions


def test_reproduce_identical_parents_is_identity(rng):
    parent = Genome(instructions=rng.integers(0, 256, size=64, dtype=np.uint8))
    child = reproduce(parent, parent, 0.0, rng)
    assert child.dtype == np.uint8
    assert np.array_equal(child, parent.instructions)


def test_reproduce_only_inherits_parent_bits(rng):
    a = Genome(instructions=rng.integers(0, 256, size=64, dtype=np.uint8))
    b = Genome(instructions=rng.integers(0, 256, size=64, dtype=np.uint8))
    before_a, before_b = a.instructions.copy(), b.instructions.copy()
    for _ in range(20):
        child = reproduce(a, b, 0.0, rng)
        assert child.shape == (64,)
        # Bits where the parents agree must be copied verbatim.
        agree = ~(a.instructions ^ b.instructions)
        assert np.array_equal(child & agree, a.instructions & agree)
    assert np.array_equal(a.instructions, before_a)
    assert np.array_equal(b.instructions, before_b)


def test_reproduce_mixes_both_parents(rng):
    a = Genome(instructions=np.zeros(64, dtype=np.uint8))
    b = Genome(instructions=np.full(64, 0xFF, dtype=np.uint8))
    child = reproduce(a, b, 0.0, rng)
    ones = np.unpackbits(child).mean()
    assert 0.35 < ones < 0.65


def test_reproduce_full_mutation_flips_every_bit(rng):
    parent = Genome(instructions=random_instructions(rng))
    child = reproduce(parent, parent, 1.0, rng)
    assert np.array_equal(child, ~parent.instructions)


def test_reproduce_is_deterministic_for_a_seed():
    from treasurehunt.core.rng import make_rng

    a = Genome(instructions=random_instructions(make_rng(1)))
    b = Genome(instructions=random_instructions(make_rng(2)))
    assert np.array_equal(reproduce(a, b, 0.05, make_rng(7)), reproduce(a, b, 0.05, make_rng(7)))
