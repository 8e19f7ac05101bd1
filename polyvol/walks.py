"""Random walks: Gaussian ball walk, Gaussian hit-and-run and billiard walk."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

import numpy as np

from polyvol.gaussian import chord_random_point_generator_exp, eval_exp
from polyvol.point import Point
from polyvol.rng import RandomNumberGenerator

_BILLIARD_SHRINK = 0.995
_REFLECTIONS_PER_DIM = 50


def _random_direction(dim: int, rng: RandomNumberGenerator) -> Point:
    """A direction drawn uniformly from the unit sphere."""
    coords = np.array([rng.sample_ndist() for _ in range(dim)])
    return Point(coords / np.linalg.norm(coords))


def _random_point_in_ball(dim: int, radius: float, rng: RandomNumberGenerator) -> Point:
    """A point drawn uniformly from the ball of ``radius`` centred at the origin."""
    direction = _random_direction(dim, rng)
    scale = radius * rng.sample_urdist() ** (1.0 / dim)
    return direction * scale


class GaussianBallWalk:
    """Ball walk with a spherical Gaussian target ``exp(-a ||x||^2)``."""

    def __init__(self, radius: float, dim: int, a: float, delta: float | None = None) -> None:
        if delta is None:
            delta = 4.0 * radius / math.sqrt(max(1.0, a) * dim)
        self.delta = float(delta)

    def apply(self, body: Any, p: Point, a: float, walk_length: int, rng: RandomNumberGenerator) -> Point:
        """Take ``walk_length`` steps from ``p`` inside ``body``; return the end point."""
        for _ in range(walk_length):
            y = _random_point_in_ball(body.dimension(), self.delta, rng) + p
            if body.is_in(y):
                f_x = eval_exp(p, a)
                f_y = eval_exp(y, a)
                if rng.sample_urdist() <= f_y / f_x:
                    p = y
        return p

    def update_delta(self, delta: float) -> None:
        self.delta = float(delta)


class GaussianRDHRWalk:
    """Random-directions hit-and-run with a spherical Gaussian target."""

    def apply(self, body: Any, p: Point, a: float, walk_length: int, rng: RandomNumberGenerator) -> Point:
        """Take ``walk_length`` steps from ``p`` inside ``body``; return the end point."""
        for _ in range(walk_length):
            v = _random_direction(p.dimension(), rng)
            min_plus, max_minus = body.line_intersect(p, v)
            upper = min_plus * v + p
            lower = max_minus * v + p
            p = chord_random_point_generator_exp(lower, upper, a, rng)
        return p


class BilliardWalk:
    """Billiard walk for the uniform distribution over a convex body.

    The walk keeps track of its own position, which starts near ``p`` after an
    initial trajectory and is what each call to :meth:`apply` continues from.
    ``length`` bounds the length of each trajectory (typically the diameter).
    """

    def __init__(self, body: Any, p: Point, rng: RandomNumberGenerator, length: float) -> None:
        self.length = float(length)
        self._initialize(body, p, rng)

    @property
    def position(self) -> Point:
        """The current position of the walk."""
        return self._p

    def _initialize(self, body: Any, p: Point, rng: RandomNumberGenerator) -> None:
        n = body.dimension()
        max_reflections = _REFLECTIONS_PER_DIM * n
        self._p = p
        self._v = _random_direction(n, rng)
        remaining = rng.sample_urdist() * self.length

        t, facet = body.line_positive_intersect(self._p, self._v)
        if remaining <= t:
            self._p = self._p + remaining * self._v
            return
        step = _BILLIARD_SHRINK * t
        self._p = self._p + step * self._v
        remaining -= step
        self._v = body.compute_reflection(self._v, facet)

        it = 0
        while it <= max_reflections:
            t, facet = body.line_positive_intersect(self._p, self._v)
            if remaining <= t:
                self._p = self._p + remaining * self._v
                break
            if it == max_reflections:
                self._p = self._p + (rng.sample_urdist() * t) * self._v
                break
            step = _BILLIARD_SHRINK * t
            self._p = self._p + step * self._v
            remaining -= step
            self._v = body.compute_reflection(self._v, facet)
            it += 1

    def apply(self, body: Any, p: Point, walk_length: int, rng: RandomNumberGenerator) -> Point:
        """Run ``walk_length`` trajectories from the walk's position and return the end point.

        ``p`` is the caller's current point; the walk continues from its own
        tracked position, which after each call equals the returned point.
        """
        n = body.dimension()
        max_reflections = _REFLECTIONS_PER_DIM * n
        for _ in range(walk_length):
            remaining = rng.sample_urdist() * self.length
            self._v = _random_direction(n, rng)
            start = self._p
            it = 0
            while it < max_reflections:
                t, facet = body.line_positive_intersect(self._p, self._v)
                if remaining <= t:
                    self._p = self._p + remaining * self._v
                    break
                step = _BILLIARD_SHRINK * t
                self._p = self._p + step * self._v
                remaining -= step
                self._v = body.compute_reflection(self._v, facet)
                it += 1
            if it == max_reflections:
                self._p = start
        return self._p

    def update_delta(self, length: float) -> None:
        self.length = float(length)


def hpolytope_diameter(dim: int, radius: float) -> float:
    """Trajectory length for an H-polytope with inscribed ball of ``radius``."""
    return 4.0 * math.sqrt(dim) * radius


def vertex_diameter(vertices: Sequence[Sequence[float]] | np.ndarray) -> float:
    """Largest distance between two of the given vertices."""
    V = np.atleast_2d(np.asarray(vertices, dtype=float))
    if V.shape[0] < 2:
        return 0.0
    diffs = V[:, None, :] - V[None, :, :]
    return float(np.linalg.norm(diffs, axis=2).max())


def zonotope_diameter(generators: Sequence[Sequence[float]] | np.ndarray) -> float:
    """Diameter estimate for the zonotope spanned by the rows of ``generators``."""
    V = np.atleast_2d(np.asarray(generators, dtype=float))
    D = V.T @ V
    D = (D + D.T) / 2.0
    eigenvalues, eigenvectors = np.linalg.eigh(D)
    max_eig, max_index = 0.0, None
    for index, value in enumerate(eigenvalues):
        if value > max_eig:
            max_eig, max_index = value, index
    if max_index is None:
        raise ValueError("the generators span no positive direction")
    direction = -eigenvectors[:, max_index]
    objective = V @ direction
    x0 = np.where(objective < 0.0, -1.0, 1.0)
    return float(2.0 * np.linalg.norm(V.T @ x0))