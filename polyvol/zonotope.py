"""Over-approximation of a zonotope by a box aligned with its principal axes."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from polyvol.hpolytope import HPolytope


def zonotope_pca_approximation(
    generators: Sequence[Sequence[float]] | np.ndarray,
) -> HPolytope:
    """Enclose the zonotope spanned by the rows of ``generators`` in a box.

    The box axes are the principal directions of the symmetrised generator
    set; its half-widths are the support values of the zonotope along them.
    The result has ``2 d`` facets: the first ``d`` with normals ``-u_i``,
    the next ``d`` with normals ``u_i``.
    """
    G = np.asarray(generators, dtype=float)
    if G.ndim != 2 or G.shape[0] == 0 or G.shape[1] == 0:
        raise ValueError("This is not a zonotope.")
    n = G.shape[1]

    X = np.hstack([G.T, -G.T])
    U, _, _ = np.linalg.svd(X @ X.T)

    projected = G @ U
    half_widths = np.abs(projected).sum(axis=0)
    b = np.concatenate([half_widths, half_widths])

    signs = np.hstack([-np.eye(n), np.eye(n)])
    A = signs.T @ U.T
    return HPolytope(A, b)