import itertools

import numpy as np
import pytest

from polyvol.hpolytope import extract_mat_poly
from polyvol.zonotope import zonotope_pca_approximation


@pytest.mark.parametrize(
    "G",
    [
        [[1.0, 0.0], [0.0, 2.0]],
        [[1.0, 1.0], [2.0, -1.0], [0.5, 3.0]],
        [[1.0, 0.2, 0.0], [0.0, 1.0, 0.3], [0.4, 0.0, 1.0], [1.0, 1.0, 1.0]],
    ],
)
def test_box_contains_zonotope(G):
    generators = np.asarray(G, dtype=float)
    n = generators.shape[1]
    box = zonotope_pca_approximation(G)
    assert box.num_of_hyperplanes() == 2 * n
    slack = np.array(
        [
            box.b - box.A @ (np.asarray(signs) @ generators)
            for signs in itertools.product((-1.0, 1.0), repeat=generators.shape[0])
        ]
    )
    assert slack.min() >= -1e-9


def test_box_is_symmetric():
    G = [[1.0, 1.0], [2.0, -1.0], [0.5, 3.0]]
    box = zonotope_pca_approximation(G)
    n = 2
    np.testing.assert_allclose(box.b[:n], box.b[n:])
    np.testing.assert_allclose(box.A[:n], -box.A[n:])


def test_normals_are_orthonormal():
    box = zonotope_pca_approximation([[1.0, 1.0], [2.0, -1.0], [0.5, 3.0]])
    normals = box.A[2:]
    np.testing.assert_allclose(normals @ normals.T, np.eye(2), atol=1e-12)


def test_axis_aligned_generators_give_exact_box():
    box = zonotope_pca_approximation([[1.0, 0.0], [0.0, 2.0]])
    assert box.dimension() == 2
    assert box.num_of_hyperplanes() == 4
    np.testing.assert_allclose(sorted(box.b), [1.0, 1.0, 2.0, 2.0])


def test_matrix_form_has_b_first():
    box = zonotope_pca_approximation([[1.0, 0.0], [0.0, 2.0]])
    mat = extract_mat_poly(box)
    assert mat.shape == (4, 3)
    np.testing.assert_allclose(mat[:, 0], box.b)


@pytest.mark.parametrize("G", [[1.0, 2.0], [], [[]]])
def test_invalid_generators_raise(G):
    with pytest.raises(ValueError, match="not a zonotope"):
        zonotope_pca_approximation(G)