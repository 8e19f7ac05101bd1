"""Seedable random number generator for the random walks."""

from __future__ import annotations

import time

import numpy as np

_SEED_MASK = 0xFFFFFFFF


def _as_seed(seed: int | float) -> int:
    return int(seed) & _SEED_MASK


class RandomNumberGenerator:
    """Mersenne-twister source of uniform, integer and normal samples.

    Integers are drawn uniformly from ``0 .. dim - 1``; without a seed the
    generator is seeded from the current time.
    """

    def __init__(self, dim: int, seed: int | float | None = None) -> None:
        if dim < 1:
            raise ValueError("dimension must be at least 1")
        self._dim = dim
        if seed is None:
            seed = time.time_ns()
        self._gen = np.random.Generator(np.random.MT19937(_as_seed(seed)))

    def sample_urdist(self) -> float:
        """Return a uniform sample from [0, 1)."""
        return float(self._gen.random())

    def sample_uidist(self) -> int:
        """Return a uniform integer from 0 to ``dim - 1`` inclusive."""
        return int(self._gen.integers(0, self._dim))

    def sample_ndist(self) -> float:
        """Return a standard normal sample."""
        return float(self._gen.standard_normal())

    def set_seed(self, seed: int | float) -> None:
        """Reseed the generator."""
        self._gen = np.random.Generator(np.random.MT19937(_as_seed(seed)))