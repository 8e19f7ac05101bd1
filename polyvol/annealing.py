"""Volume of a convex body by annealing a sequence of spherical Gaussians.

The schedule follows "A practical volume algorithm" by Cousins and Vempala.
The body is assumed to contain its inscribed-ball centre, which is moved to
the origin before the Gaussians ``exp(-a ||x||^2)`` are annealed towards the
uniform distribution (``a = 0``).
"""

from __future__ import annotations

import copy
import math
import sys
from collections.abc import Callable, Iterable
from typing import Any

import numpy as np

from polyvol.point import Point
from polyvol.rng import RandomNumberGenerator
from polyvol.walks import GaussianBallWalk

_FIRST_GAUSSIAN_TOL = 1e-7
_FIRST_GAUSSIAN_MAXITER = 10000
_NEXT_GAUSSIAN_TOL = 1e-5
_SCHEDULE_TOL = 0.001
_INITIAL_LAST_RATIO = 0.1

WalkFactory = Callable[[float, int, float], Any]


def _ball_walk_factory(radius: float, dim: int, a: float) -> GaussianBallWalk:
    return GaussianBallWalk(radius, dim, a)


def _density_ratio(p: Point, new_a: float, old_a: float) -> float:
    """``exp(-new_a |p|^2) / exp(-old_a |p|^2)`` without underflowing."""
    return math.exp((old_a - new_a) * p.squared_length())


class GaussianAnnealingParameters:
    """Default constants of the annealing for a body of dimension ``dim``."""

    __slots__ = ("frac", "ratio", "C", "N", "W")

    def __init__(self, dim: int) -> None:
        if dim < 1:
            raise ValueError("dimension must be at least 1")
        self.frac = 0.1
        self.ratio = 1.0 - 1.0 / dim
        self.C = 2.0
        self.N = 500 * int(self.C) + (dim * dim) // 2
        self.W = 6 * dim * dim + 800

    def __repr__(self) -> str:
        return (
            f"GaussianAnnealingParameters(frac={self.frac}, ratio={self.ratio}, "
            f"C={self.C}, N={self.N}, W={self.W})"
        )


def get_mean_variance(values: Iterable[float]) -> tuple[float, float]:
    """Mean and population variance by Welford's algorithm."""
    mean = 0.0
    m2 = 0.0
    variance = 0.0
    for count, value in enumerate(values, start=1):
        delta = value - mean
        mean += delta / count
        m2 += delta * (value - mean)
        variance = m2 / count
    return mean, variance


def _tail_mass(dists: np.ndarray, a: float) -> float:
    return float(np.sum(np.exp(-a * dists**2) / (2.0 * dists * math.sqrt(math.pi * a))))


def get_first_gaussian(polytope: Any, frac: float, error: float) -> float:
    """The variance parameter ``a_0`` of the starting Gaussian.

    It is chosen so that the Gaussian mass outside the facets of ``polytope``
    (which must contain the origin strictly inside) is about ``frac * error``.
    """
    dists = np.asarray(polytope.get_dists(), dtype=float)
    if np.any(dists <= 0):
        raise ValueError("the origin must lie strictly inside the polytope")
    target = frac * error

    lower, upper = 0.0, 1.0
    for _ in range(_FIRST_GAUSSIAN_MAXITER):
        if _tail_mass(dists, upper) > target:
            upper *= 10.0
        else:
            break
    else:
        raise ValueError("cannot obtain a sharp enough starting Gaussian")

    while upper - lower > _FIRST_GAUSSIAN_TOL:
        mid = (upper + lower) / 2.0
        if _tail_mass(dists, mid) < target:
            upper = mid
        else:
            lower = mid
    return (upper + lower) / 2.0


def get_next_gaussian(
    polytope: Any,
    p: Point,
    a: float,
    n_samples: int,
    ratio: float,
    c: float,
    walk_length: int,
    rng: RandomNumberGenerator,
    walk: Any,
) -> tuple[float, Point]:
    """Compute ``a_{i+1} = a * ratio**k`` from ``a_i = a``.

    ``n_samples`` points are drawn with ``walk`` starting at ``p``; ``k`` is
    doubled while the estimated ratio of integrals stays well-conditioned.
    Returns the next parameter and the last sampled point.
    """
    squared = []
    for _ in range(n_samples):
        p = walk.apply(polytope, p, a, walk_length, rng)
        squared.append(p.squared_length())
    sq = np.array(squared, dtype=float)

    last_ratio = _INITIAL_LAST_RATIO
    k = 1.0
    while True:
        new_a = a * ratio**k
        mean, variance = get_mean_variance(np.exp((a - new_a) * sq).tolist())
        if variance / (mean * mean) >= c or mean / last_ratio < 1.0 + _NEXT_GAUSSIAN_TOL:
            if k != 1.0:
                k /= 2.0
            break
        k *= 2.0
        last_ratio = mean
    return a * ratio**k, p


def compute_annealing_schedule(
    polytope: Any,
    ratio: float,
    c: float,
    frac: float,
    n_samples: int,
    walk_length: int,
    radius: float,
    error: float,
    rng: RandomNumberGenerator,
    walk_factory: WalkFactory | None = None,
) -> list[float]:
    """The decreasing sequence ``a_0 > a_1 > ... > a_m = 0`` of Gaussians.

    ``walk_factory(radius, dim, a)`` builds the walk used for parameter ``a``.
    """
    factory = walk_factory or _ball_walk_factory
    n = polytope.dimension()
    a_stop = 0.0
    total_steps = int(150.0 / ((1.0 - frac) * error)) + 1

    a_vals = [max(get_first_gaussian(polytope, frac, error), a_stop)]
    p = Point.zeros(n)

    while True:
        current = a_vals[-1]
        next_a, p = get_next_gaussian(
            polytope, p, current, n_samples, ratio, c, walk_length, rng,
            factory(radius, n, current),
        )

        walk = factory(radius, n, current)
        curr_fn = 0.0
        for _ in range(total_steps):
            p = walk.apply(polytope, p, current, walk_length, rng)
            curr_fn += _density_ratio(p, next_a, current)

        if next_a > 0 and curr_fn / total_steps > 1.0 + _SCHEDULE_TOL:
            a_vals.append(next_a)
        elif next_a <= 0:
            a_vals.append(a_stop)
            break
        else:
            a_vals[-1] = a_stop
            break
    return a_vals


def volume_cooling_gaussians(
    polytope: Any,
    inner_ball: tuple[Point, float],
    rng: RandomNumberGenerator,
    error: float = 0.1,
    walk_length: int = 1,
    walk_factory: WalkFactory | None = None,
) -> float:
    """Estimate the volume of ``polytope`` by Gaussian cooling.

    ``inner_ball`` is ``(centre, radius)`` of a ball inscribed in the body.
    The body passed in is not modified.
    """
    if error <= 0:
        raise ValueError("the error parameter has to be a positive number")
    factory = walk_factory or _ball_walk_factory
    center, radius = inner_ball

    body = copy.deepcopy(polytope)
    body.shift(center)
    n = body.dimension()
    params = GaussianAnnealingParameters(n)

    a_vals = compute_annealing_schedule(
        body, params.ratio, params.C, params.frac, params.N, walk_length,
        radius, error, rng, factory,
    )
    if a_vals[0] <= 0:
        raise ValueError("the annealing schedule has no starting Gaussian")

    window_len = params.W
    mm = len(a_vals) - 1
    vol = (math.pi / a_vals[0]) ** (n / 2.0)
    p = Point.zeros(n)

    for current, following in zip(a_vals, a_vals[1:]):
        curr_eps = error / math.sqrt(mm)
        min_val = sys.float_info.min
        max_val = sys.float_info.max
        min_index = max_index = window_len - 1
        index = 0
        window = [0.0] * window_len
        fn = 0.0
        its = 0.0

        walk = factory(radius, n, current)
        done = False
        while not done:
            p = walk.apply(body, p, current, walk_length, rng)
            its += 1.0
            fn += _density_ratio(p, following, current)
            val = fn / its

            window[index] = val
            if val <= min_val:
                min_val, min_index = val, index
            elif min_index == index:
                min_val = min(window)
                min_index = window.index(min_val)

            if val >= max_val:
                max_val, max_index = val, index
            elif max_index == index:
                max_val = max(window)
                max_index = window.index(max_val)

            if (max_val - min_val) / max_val <= curr_eps / 2.0:
                done = True
            index = (index + 1) % window_len

        vol *= fn / its
    return vol