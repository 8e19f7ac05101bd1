"""Intersection of a convex body with an H-polytope."""

from __future__ import annotations

from typing import Any

from polyvol.hpolytope import HPolytope
from polyvol.point import Point


class BodyIntersectHPolytope:
    """The intersection of a convex body (such as a zonotope) with an H-polytope.

    The body must offer ``is_in``, ``line_intersect``, ``line_positive_intersect``,
    ``line_intersect_coord``, ``compute_reflection`` and ``num_of_generators``.
    A boundary hit on the body is reported with the facet index
    ``num_of_hyperplanes() + 1``; smaller indices are facets of the H-polytope.
    """

    def __init__(self, body: Any, hpoly: HPolytope) -> None:
        self.body = body
        self.hpoly = hpoly

    @property
    def body_facet(self) -> int:
        """Facet index that stands for the boundary of the body."""
        return self.hpoly.num_of_hyperplanes() + 1

    def dimension(self) -> int:
        return self.hpoly.dimension()

    def num_of_hyperplanes(self) -> int:
        return self.hpoly.num_of_hyperplanes()

    def num_of_generators(self) -> int:
        return self.body.num_of_generators()

    def is_in(self, p: Point) -> bool:
        """Whether ``p`` lies in both the H-polytope and the body."""
        return bool(self.hpoly.is_in(p) and self.body.is_in(p))

    def line_intersect(self, r: Point, v: Point) -> tuple[float, float]:
        """Exit parameters of the line ``r + t v``, as ``(t_plus, t_minus)``."""
        poly_plus, poly_minus = self.hpoly.line_intersect(r, v)
        body_plus, body_minus = self.body.line_intersect(r, v)
        return min(poly_plus, body_plus), max(poly_minus, body_minus)

    def line_positive_intersect(self, r: Point, v: Point) -> tuple[float, int | None]:
        """Positive exit parameter of the ray ``r + t v`` and the facet that is hit."""
        poly_t, poly_facet = self.hpoly.line_positive_intersect(r, v)
        body_t, _ = self.body.line_positive_intersect(r, v)
        facet = poly_facet if poly_t < body_t else self.body_facet
        return min(poly_t, body_t), facet

    def line_intersect_coord(self, r: Point, coord: int) -> tuple[float, float]:
        """Exit parameters along the coordinate direction ``coord`` from ``r``."""
        poly_plus, poly_minus = self.hpoly.line_intersect_coord(r, coord)
        body_plus, body_minus = self.body.line_intersect_coord(r, coord)
        return min(poly_plus, body_plus), max(poly_minus, body_minus)

    def compute_reflection(self, v: Point, facet: int) -> Point:
        """Reflect direction ``v`` on the boundary part named by ``facet``."""
        if facet == self.body_facet:
            return self.body.compute_reflection(v, facet)
        return self.hpoly.compute_reflection(v, facet)