"""Convex polytopes given by linear inequalities ``A x <= b``."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from polyvol.point import Point


def _coeffs(p: Point | np.ndarray | Sequence[float]) -> np.ndarray:
    if isinstance(p, Point):
        return p.coefficients
    return np.asarray(p, dtype=float)


def _bounds(numerators: np.ndarray, denominators: np.ndarray) -> tuple[float, float]:
    """Smallest positive and largest negative ratio, ignoring zero denominators."""
    mask = denominators != 0
    with np.errstate(divide="ignore", invalid="ignore"):
        lambdas = numerators[mask] / denominators[mask]
    positive = lambdas[lambdas > 0]
    negative = lambdas[lambdas < 0]
    min_plus = float(positive.min()) if positive.size else math.inf
    max_minus = float(negative.max()) if negative.size else -math.inf
    return min_plus, max_minus


class HPolytope:
    """The H-polytope ``{x : A x <= b}``."""

    def __init__(self, A: Sequence[Sequence[float]] | np.ndarray, b: Sequence[float] | np.ndarray) -> None:
        A = np.array(A, dtype=float)
        b = np.array(b, dtype=float)
        if A.ndim != 2:
            raise ValueError("A must be a two-dimensional matrix")
        if b.ndim != 1 or b.shape[0] != A.shape[0]:
            raise ValueError("b must be a vector with one entry per row of A")
        self.A = A
        self.b = b

    @classmethod
    def from_ine(cls, rows: Sequence[Sequence[float]]) -> "HPolytope":
        """Build from ine-style rows: a header ``[m, d + 1]`` then ``[b_i, -a_i...]``."""
        if not rows:
            raise ValueError("an ine description needs at least a header row")
        dim = int(rows[0][1]) - 1
        body = np.array(rows[1:], dtype=float).reshape(len(rows) - 1, -1)
        if body.shape[1] < dim + 1:
            raise ValueError("ine rows are shorter than the declared dimension")
        return cls(-body[:, 1:dim + 1], body[:, 0])

    def dimension(self) -> int:
        return self.A.shape[1]

    def num_of_hyperplanes(self) -> int:
        return self.A.shape[0]

    def num_of_generators(self) -> int:
        return 0

    def is_in(self, p: Point) -> bool:
        """Whether ``p`` satisfies every inequality."""
        return bool(np.all(self.b - self.A @ _coeffs(p) >= 0))

    def line_intersect(self, r: Point, v: Point) -> tuple[float, float]:
        """Parameters where the line ``r + t v`` leaves the polytope, as ``(t_plus, t_minus)``."""
        return _bounds(self.b - self.A @ _coeffs(r), self.A @ _coeffs(v))

    def line_positive_intersect(self, r: Point, v: Point) -> tuple[float, int | None]:
        """Positive exit parameter of the ray ``r + t v`` and the index of the facet hit."""
        numerators = self.b - self.A @ _coeffs(r)
        denominators = self.A @ _coeffs(v)
        best, facet = math.inf, None
        with np.errstate(divide="ignore", invalid="ignore"):
            lambdas = np.where(denominators != 0, numerators / denominators, np.nan)
        candidates = np.flatnonzero(lambdas > 0)
        if candidates.size:
            index = int(candidates[np.argmin(lambdas[candidates])])
            best, facet = float(lambdas[index]), index
        return best, facet

    def line_intersect_coord(self, r: Point, coord: int) -> tuple[float, float]:
        """Exit parameters along the coordinate direction ``coord`` from ``r``."""
        return _bounds(self.b - self.A @ _coeffs(r), self.A[:, coord])

    def linear_transform(self, T: Sequence[Sequence[float]] | np.ndarray) -> None:
        """Replace ``A`` by ``A T``."""
        self.A = self.A @ np.asarray(T, dtype=float)

    def shift(self, c: Point | Sequence[float] | np.ndarray) -> None:
        """Translate the polytope by ``-c``."""
        self.b = self.b - self.A @ _coeffs(c)

    def get_dists(self) -> list[float]:
        """Distance of each facet hyperplane from the origin."""
        return (self.b / np.linalg.norm(self.A, axis=1)).tolist()

    def normalize(self) -> None:
        """Scale each inequality so its normal has unit length."""
        norms = np.linalg.norm(self.A, axis=1)
        self.A = self.A / norms[:, None]
        self.b = self.b / norms

    def compute_reflection(self, v: Point, facet: int) -> Point:
        """Reflect direction ``v`` on the (normalized) facet ``facet``."""
        normal = self.A[facet]
        return Point(v.coefficients - 2.0 * v.dot(normal) * normal)

    def __str__(self) -> str:
        lines = [f" {self.num_of_hyperplanes()} {self.dimension()} float"]
        for row, rhs in zip(self.A, self.b):
            entries = "".join(f"{x:g} " for x in row)
            lines.append(f"{entries}<= {rhs:g}")
        return "\n".join(lines)


def extract_mat_poly(polytope: HPolytope) -> np.ndarray:
    """Return the matrix ``[b | A]`` describing the polytope."""
    return np.column_stack([polytope.b, polytope.A])