import numpy as np
import pytest

from polyvol.hpolytope import HPolytope
from polyvol.random_generators import (
    gen_zonotope_exponential,
    gen_zonotope_gaussian,
    gen_zonotope_uniform,
    random_hpoly,
    random_hpoly_ball,
    random_vpoly,
)


def test_random_hpoly_unit_normals_and_offsets():
    P = random_hpoly(4, 12, seed=5)
    assert isinstance(P, HPolytope)
    assert P.A.shape == (12, 4)
    assert np.allclose(np.linalg.norm(P.A, axis=1), 1.0)
    assert np.all(P.b == 10.0)


def test_random_hpoly_is_reproducible():
    first = random_hpoly(3, 7, seed=42)
    second = random_hpoly(3, 7, seed=42)
    assert np.array_equal(first.A, second.A)
    assert np.array_equal(first.b, second.b)


def test_random_hpoly_seed_changes_result():
    assert not np.array_equal(random_hpoly(3, 7, seed=1).A, random_hpoly(3, 7, seed=2).A)


def test_random_hpoly_contains_origin():
    P = random_hpoly(3, 20, seed=3)
    assert P.is_in(np.zeros(3))


def test_random_hpoly_ball_offsets_in_unit_interval():
    P = random_hpoly_ball(5, 30, seed=9)
    assert P.A.shape == (30, 5)
    assert np.allclose(np.linalg.norm(P.A, axis=1), 1.0)
    assert np.all(P.b >= 0.0) and np.all(P.b < 1.0)


def test_random_hpoly_ball_reproducible():
    first = random_hpoly_ball(2, 6, seed=11)
    second = random_hpoly_ball(2, 6, seed=11)
    assert first.b.shape == (6,)
    assert first.b.tolist() == second.b.tolist()
    assert first.A.tolist() == second.A.tolist()


def test_random_vpoly_vertices_on_sphere():
    V = random_vpoly(3, 15, seed=4)
    assert V.shape == (15, 3)
    assert np.allclose(np.linalg.norm(V, axis=1), 1.0)


def test_random_vpoly_float_seed_matches_integer_seed():
    assert np.array_equal(random_vpoly(3, 5, seed=7.0), random_vpoly(3, 5, seed=7))


def test_unseeded_generation_has_right_shape():
    V = random_vpoly(2, 4, seed=float("nan"))
    assert V.shape == (4, 2)
    assert np.allclose(np.linalg.norm(V, axis=1), 1.0)


def _assert_lengths_bounded(G):
    assert G.shape == (25, 4)
    lengths = np.linalg.norm(G, axis=1)
    assert np.all(lengths > 0.0)
    assert np.all(lengths < 100.0)


def test_gaussian_zonotope_segment_lengths_bounded():
    G = gen_zonotope_gaussian(4, 25, seed=13)
    assert G.shape == (25, 4)
    _assert_lengths_bounded(G)


def test_uniform_zonotope_segment_lengths_bounded():
    G = gen_zonotope_uniform(4, 25, seed=13)
    assert G.shape == (25, 4)
    _assert_lengths_bounded(G)


def test_exponential_zonotope_segment_lengths_bounded():
    G = gen_zonotope_exponential(4, 25, seed=13)
    assert G.shape == (25, 4)
    _assert_lengths_bounded(G)


def test_gaussian_zonotope_reproducible():
    first = gen_zonotope_gaussian(3, 8, seed=21)
    second = gen_zonotope_gaussian(3, 8, seed=21)
    assert first.shape == (8, 3)
    assert first.tolist() == second.tolist()


def test_uniform_zonotope_reproducible():
    first = gen_zonotope_uniform(3, 8, seed=21)
    second = gen_zonotope_uniform(3, 8, seed=21)
    assert first.shape == (8, 3)
    assert first.tolist() == second.tolist()


def test_exponential_zonotope_reproducible():
    first = gen_zonotope_exponential(3, 8, seed=21)
    second = gen_zonotope_exponential(3, 8, seed=21)
    assert first.shape == (8, 3)
    assert first.tolist() == second.tolist()


def test_invalid_dimension_rejected():
    with pytest.raises(ValueError):
        random_hpoly(0, 3, seed=1)
    with pytest.raises(ValueError):
        random_hpoly_ball(0, 3, seed=1)
    with pytest.raises(ValueError):
        random_vpoly(0, 3, seed=1)
    with pytest.raises(ValueError):
        gen_zonotope_gaussian(0, 3, seed=1)
    with pytest.raises(ValueError):
        gen_zonotope_uniform(0, 3, seed=1)
    with pytest.raises(ValueError):
        gen_zonotope_exponential(0, 3, seed=1)