import statistics

import pytest

from polyvol.rng import RandomNumberGenerator


def _draw(rng, n=20):
    return [(rng.sample_urdist(), rng.sample_uidist(), rng.sample_ndist()) for _ in range(n)]


def test_same_seed_gives_same_sequence():
    a = RandomNumberGenerator(5, seed=42)
    b = RandomNumberGenerator(5, seed=42)
    assert _draw(a) == _draw(b)


def test_different_seeds_give_different_sequences():
    a = RandomNumberGenerator(5, seed=1)
    b = RandomNumberGenerator(5, seed=2)
    assert _draw(a) != _draw(b)


def test_set_seed_restarts_sequence():
    rng = RandomNumberGenerator(3, seed=7)
    first = _draw(rng)
    rng.set_seed(7)
    assert _draw(rng) == first


def test_set_seed_matches_constructor_seed():
    a = RandomNumberGenerator(3)
    a.set_seed(99)
    b = RandomNumberGenerator(3, seed=99)
    assert _draw(a) == _draw(b)


def test_uniform_real_in_unit_interval():
    rng = RandomNumberGenerator(2, seed=11)
    samples = [rng.sample_urdist() for _ in range(2000)]
    assert all(0.0 <= s < 1.0 for s in samples)


def test_uniform_int_covers_exactly_dimension_range():
    rng = RandomNumberGenerator(4, seed=3)
    samples = {rng.sample_uidist() for _ in range(2000)}
    assert samples == {0, 1, 2, 3}


def test_uniform_int_with_dimension_one_is_zero():
    rng = RandomNumberGenerator(1, seed=3)
    assert {rng.sample_uidist() for _ in range(50)} == {0}


def test_normal_samples_are_roughly_standard():
    rng = RandomNumberGenerator(2, seed=5)
    samples = [rng.sample_ndist() for _ in range(20000)]
    assert abs(statistics.fmean(samples)) < 0.05
    assert abs(statistics.pstdev(samples) - 1.0) < 0.05


def test_invalid_dimension_raises():
    with pytest.raises(ValueError):
        RandomNumberGenerator(0, seed=1)