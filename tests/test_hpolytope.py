import math

import numpy as np
import pytest

from polyvol.hpolytope import HPolytope, extract_mat_poly
from polyvol.point import Point


def cube(dim):
    A = np.vstack([np.eye(dim), -np.eye(dim)])
    return HPolytope(A, np.ones(2 * dim))


def test_dimension_and_counts():
    P = cube(3)
    assert P.dimension() == 3
    assert P.num_of_hyperplanes() == 6
    assert P.num_of_generators() == 0


def test_mismatched_b_raises():
    with pytest.raises(ValueError):
        HPolytope([[1.0, 0.0], [0.0, 1.0]], [1.0])


def test_is_in():
    P = cube(2)
    assert P.is_in(Point([0.0, 0.0]))
    assert P.is_in(Point([1.0, -1.0]))
    assert not P.is_in(Point([1.5, 0.0]))


def test_from_ine_negates_coefficients():
    P = HPolytope.from_ine([[2, 2], [1, -1], [1, 1]])
    assert P.dimension() == 1
    np.testing.assert_array_equal(P.A, [[1.0], [-1.0]])
    np.testing.assert_array_equal(P.b, [1.0, 1.0])


def test_line_intersect_from_center():
    P = cube(2)
    plus, minus = P.line_intersect(Point([0.0, 0.0]), Point([1.0, 0.0]))
    assert plus == 1.0
    assert minus == -1.0


def test_line_intersect_endpoints_lie_on_boundary():
    P = cube(3)
    r = Point([0.2, -0.3, 0.1])
    v = Point([0.3, 0.5, -0.8])
    plus, minus = P.line_intersect(r, v)
    for t in (plus, minus):
        slack = P.b - P.A @ (r + t * v).coefficients
        assert slack.min() == pytest.approx(0.0, abs=1e-12)


def test_line_positive_intersect_reports_facet():
    P = cube(2)
    t, facet = P.line_positive_intersect(Point([0.5, 0.0]), Point([0.0, -1.0]))
    assert t == 1.0
    assert facet == 3


def test_line_positive_intersect_without_hit():
    P = HPolytope([[1.0, 0.0]], [1.0])
    t, facet = P.line_positive_intersect(Point([0.0, 0.0]), Point([0.0, 1.0]))
    assert t == math.inf
    assert facet is None


def test_line_intersect_coord_matches_general_direction():
    P = cube(3)
    r = Point([0.2, -0.4, 0.7])
    assert P.line_intersect_coord(r, 2) == P.line_intersect(r, Point([0.0, 0.0, 1.0]))


def test_shift_translates_polytope():
    P = cube(2)
    P.shift(Point([0.5, 0.0]))
    assert not P.is_in(Point([0.8, 0.0]))
    assert P.is_in(Point([-1.4, 0.0]))


def test_linear_transform_scales():
    P = cube(2)
    P.linear_transform(2.0 * np.eye(2))
    assert not P.is_in(Point([0.6, 0.0]))
    assert P.is_in(Point([0.5, -0.5]))


def test_normalize_keeps_membership_and_gives_unit_rows():
    A = np.array([[2.0, 0.0], [0.0, 3.0], [-4.0, 0.0], [0.0, -5.0]])
    P = HPolytope(A, [2.0, 3.0, 4.0, 5.0])
    points = [Point([0.9, 0.9]), Point([1.1, 0.0]), Point([0.0, -1.2])]
    before = [P.is_in(p) for p in points]
    P.normalize()
    np.testing.assert_allclose(np.linalg.norm(P.A, axis=1), 1.0)
    assert [P.is_in(p) for p in points] == before


def test_get_dists_invariant_under_row_scaling():
    A = np.vstack([np.eye(2), -np.eye(2)])
    P = HPolytope(A * 3.0, np.ones(4) * 3.0)
    assert P.get_dists() == pytest.approx(cube(2).get_dists())
    assert P.get_dists() == pytest.approx([1.0] * 4)


def test_compute_reflection_flips_normal_component_and_keeps_length():
    P = cube(2)
    v = Point([0.6, 0.8])
    w = P.compute_reflection(v, 0)
    assert w == Point([-0.6, 0.8])
    assert w.squared_length() == pytest.approx(v.squared_length())


def test_str_format():
    P = HPolytope([[1.0], [-1.0]], [1.0, 0.5])
    assert str(P) == " 2 1 float\n1 <= 1\n-1 <= 0.5"


def test_extract_mat_poly_puts_b_first():
    P = cube(3)
    M = extract_mat_poly(P)
    assert M.shape == (6, 4)
    np.testing.assert_array_equal(M[:, 0], P.b)
    np.testing.assert_array_equal(M[:, 1:], P.A)