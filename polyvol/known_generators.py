"""Generators for well-known polytopes: cubes, cross-polytopes and simplices.

H-representations are returned as :class:`HPolytope`; V-representations as a
numpy array whose rows are the vertices.
"""

from __future__ import annotations

import numpy as np

from polyvol.hpolytope import HPolytope


def _check_dim(dim: int) -> None:
    if dim < 1:
        raise ValueError("dimension must be at least 1")


def _signed_identity(dim: int) -> np.ndarray:
    eye = np.eye(dim)
    return np.vstack([eye, -eye])


def _sign_patterns(dim: int) -> np.ndarray:
    """All 2**dim vectors of +-1; bit j of the row index sets coordinate j."""
    rows = np.arange(1 << dim)[:, None]
    bits = (rows >> np.arange(dim)) & 1
    return np.where(bits == 1, 1.0, -1.0)


def gen_cube(dim: int, vpoly: bool = False) -> HPolytope | np.ndarray:
    """The cube ``[-1, 1]^dim``."""
    _check_dim(dim)
    if vpoly:
        return _sign_patterns(dim)
    return HPolytope(_signed_identity(dim), np.ones(2 * dim))


def gen_cross(dim: int, vpoly: bool = False) -> HPolytope | np.ndarray:
    """The cross-polytope, the unit ball of the 1-norm."""
    _check_dim(dim)
    if vpoly:
        return _signed_identity(dim)
    A = _sign_patterns(dim)
    return HPolytope(A, np.ones(A.shape[0]))


def gen_simplex(dim: int, vpoly: bool = False) -> HPolytope | np.ndarray:
    """A ``dim``-simplex.

    In H-representation: ``x_i <= 0`` and ``-sum(x) <= 1``.
    In V-representation: the unit vectors and the origin.
    """
    _check_dim(dim)
    if vpoly:
        return np.vstack([np.eye(dim), np.zeros(dim)])
    A = np.vstack([np.eye(dim), -np.ones(dim)])
    b = np.zeros(dim + 1)
    b[dim] = 1.0
    return HPolytope(A, b)


def gen_prod_simplex(dim: int, vpoly: bool = False) -> HPolytope:
    """The product of two ``dim``-simplices, a polytope of dimension ``2 dim``."""
    _check_dim(dim)
    if vpoly:
        raise ValueError("only product simplices in H-representation can be generated")
    A = np.zeros((2 * dim + 2, 2 * dim))
    b = np.zeros(2 * dim + 2)
    eye = np.eye(dim)
    A[:dim, dim:] = eye
    A[dim, dim:] = -1.0
    b[dim] = 1.0
    A[dim + 1:2 * dim + 1, :dim] = eye
    A[2 * dim + 1, :dim] = -1.0
    b[2 * dim + 1] = 1.0
    return HPolytope(A, b)


def gen_skinny_cube(dim: int, vpoly: bool = False) -> HPolytope:
    """The box ``[-100, 100] x [-1, 1]^(dim-1)``."""
    _check_dim(dim)
    if vpoly:
        raise ValueError("only skinny cubes in H-representation can be generated")
    b = np.ones(2 * dim)
    b[0] = 100.0
    b[dim] = 100.0
    return HPolytope(_signed_identity(dim), b)