"""Helpers for sampling the spherical Gaussian ``exp(-a ||x||^2)``."""

from __future__ import annotations

import math

from polyvol.point import Point
from polyvol.rng import RandomNumberGenerator

# Below this variance parameter the density is treated as flat along a chord.
EXP_CHORD_TOLERANCE = 1e-8


def eval_exp(p: Point, a: float) -> float:
    """Unnormalised density ``exp(-a ||p||^2)`` at ``p``."""
    return math.exp(-a * p.squared_length())


def _chord_frame(lower: Point, upper: Point) -> tuple[Point, Point, float, float, float]:
    """Unit direction ``b``, the point ``z`` of the line nearest the origin,
    the chord length, and the parameters of ``lower`` and ``upper`` along ``b``
    measured from ``z``."""
    segment = upper - lower
    length = math.sqrt(segment.squared_length())
    b = segment / length
    start = lower.dot(b)
    z = lower - start * b
    return b, z, length, start, start + length


def get_max(lower: Point, upper: Point, a: float) -> float:
    """Largest value of the density on the segment from ``lower`` to ``upper``."""
    if (upper - lower).squared_length() == 0.0:
        return eval_exp(lower, a)
    _, z, _, low_bd, up_bd = _chord_frame(lower, upper)
    if low_bd * up_bd > 0:
        return max(eval_exp(upper, a), eval_exp(lower, a))
    return eval_exp(z, a)


def get_max_coord(lower: float, upper: float, a: float) -> float:
    """Largest value of ``exp(-a t^2)`` for ``t`` between ``lower`` and ``upper``."""
    if lower < 0.0 < upper:
        return 1.0
    return max(math.exp(-a * lower * lower), math.exp(-a * upper * upper))


def chord_random_point_generator_exp(
    lower: Point, upper: Point, a: float, rng: RandomNumberGenerator
) -> Point:
    """Draw a point on the chord from ``lower`` to ``upper`` with density
    proportional to ``exp(-a ||x||^2)``."""
    length = math.sqrt((upper - lower).squared_length())
    if a > EXP_CHORD_TOLERANCE and length >= 2.0 / math.sqrt(2.0 * a):
        # Enough of the Gaussian's weight lies on the chord: sample the
        # one-dimensional Gaussian and reject what falls outside.
        b, z, _, low_bd, up_bd = _chord_frame(lower, upper)
        scale = math.sqrt(2.0 * a)
        while True:
            r = rng.sample_ndist() / scale
            if low_bd <= r <= up_bd:
                return r * b + z

    # Rejection sampling from the bounding rectangle.
    bound = get_max(lower, upper, a)
    while True:
        r = rng.sample_urdist()
        p = (1.0 - r) * lower + r * upper
        if bound * rng.sample_urdist() < eval_exp(p, a):
            return p