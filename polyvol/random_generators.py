"""Random polytopes: H-polytopes, V-polytopes and zonotopes.

H-polytopes are returned as :class:`HPolytope`; V-polytopes as a numpy array
whose rows are the vertices; zonotopes as a numpy array whose rows are the
generating segments.
"""

from __future__ import annotations

import math
import time

import numpy as np

from polyvol.hpolytope import HPolytope

_SEED_MASK = 0xFFFFFFFF
_FACET_OFFSET = 10.0


def _make_rng(seed: int | float | None) -> np.random.Generator:
    """Mersenne-twister generator; time-seeded when ``seed`` is None or NaN."""
    if seed is None or (isinstance(seed, float) and math.isnan(seed)):
        seed = time.time_ns()
    return np.random.Generator(np.random.MT19937(int(seed) & _SEED_MASK))


def _check_sizes(dim: int, count: int) -> None:
    if dim < 1:
        raise ValueError("dimension must be at least 1")
    if count < 0:
        raise ValueError("the number of rows must be non-negative")


def _unit_direction(gen: np.random.Generator, dim: int) -> np.ndarray:
    row = gen.standard_normal(dim)
    return row / np.linalg.norm(row)


def random_hpoly(dim: int, m: int, seed: int | float | None = None) -> HPolytope:
    """``m`` facets with uniformly random unit normals, each at distance 10 from the origin."""
    _check_sizes(dim, m)
    gen = _make_rng(seed)
    A = np.array([_unit_direction(gen, dim) for _ in range(m)]).reshape(m, dim)
    return HPolytope(A, np.full(m, _FACET_OFFSET))


def random_hpoly_ball(dim: int, m: int, seed: int | float | None = None) -> HPolytope:
    """``m`` facets with random unit normals at uniform distances in [0, 1) from the origin."""
    _check_sizes(dim, m)
    gen = _make_rng(seed)
    rows = []
    offsets = []
    for _ in range(m):
        rows.append(_unit_direction(gen, dim))
        offsets.append(gen.random())
    A = np.array(rows).reshape(m, dim)
    return HPolytope(A, np.array(offsets, dtype=float))


def random_vpoly(dim: int, k: int, seed: int | float | None = None) -> np.ndarray:
    """``k`` vertices drawn uniformly from the unit sphere."""
    _check_sizes(dim, k)
    gen = _make_rng(seed)
    return np.array([_unit_direction(gen, dim) for _ in range(k)]).reshape(k, dim)


def _zonotope(dim: int, m: int, seed: int | float | None, draw_length) -> np.ndarray:
    _check_sizes(dim, m)
    gen = _make_rng(seed)
    rows = [_unit_direction(gen, dim) * draw_length(gen) for _ in range(m)]
    return np.array(rows).reshape(m, dim)


def _truncated(draw):
    """Redraw until the value falls strictly inside (0, 100)."""

    def sample(gen: np.random.Generator) -> float:
        while True:
            value = draw(gen)
            if 0.0 < value < 100.0:
                return value

    return sample


def gen_zonotope_gaussian(dim: int, m: int, seed: int | float | None = None) -> np.ndarray:
    """Segments in random directions with lengths from N(50, 33.3) truncated to (0, 100)."""
    return _zonotope(dim, m, seed, _truncated(lambda gen: float(gen.normal(50.0, 33.3))))


def gen_zonotope_uniform(dim: int, m: int, seed: int | float | None = None) -> np.ndarray:
    """Segments in random directions with lengths uniform in [0, 100)."""
    return _zonotope(dim, m, seed, lambda gen: float(gen.uniform(0.0, 100.0)))


def gen_zonotope_exponential(dim: int, m: int, seed: int | float | None = None) -> np.ndarray:
    """Segments in random directions with lengths from N(1/30, 1) truncated to (0, 100)."""
    return _zonotope(dim, m, seed, _truncated(lambda gen: float(gen.normal(1.0 / 30.0, 1.0))))