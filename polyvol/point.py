"""Points in Cartesian space backed by a numpy coefficient vector."""

from __future__ import annotations

import numbers
from collections.abc import Iterable, Iterator

import numpy as np

# Relative tolerance for comparing coordinates (Knuth, TAOCP vol. II, p. 234).
_EQ_TOLERANCE = 1e-11


class Point:
    """An immutable point (or vector) in d-dimensional Cartesian space."""

    __slots__ = ("_coeffs",)

    def __init__(self, coeffs: Iterable[float] | np.ndarray) -> None:
        arr = np.array(coeffs, dtype=float)
        if arr.ndim != 1:
            raise ValueError("point coefficients must form a one-dimensional sequence")
        arr.setflags(write=False)
        self._coeffs = arr

    @classmethod
    def zeros(cls, dim: int) -> "Point":
        """Return the origin of a space of dimension ``dim``."""
        if dim < 0:
            raise ValueError("dimension must be non-negative")
        return cls(np.zeros(dim))

    def dimension(self) -> int:
        return self._coeffs.shape[0]

    @property
    def coefficients(self) -> np.ndarray:
        """The coordinates as a read-only numpy array."""
        return self._coeffs

    def dot(self, other: "Point | Iterable[float] | np.ndarray") -> float:
        other_coeffs = other.coefficients if isinstance(other, Point) else np.asarray(other, dtype=float)
        return float(np.dot(self._coeffs, other_coeffs))

    def squared_length(self) -> float:
        return float(np.dot(self._coeffs, self._coeffs))

    def __getitem__(self, index: int) -> float:
        return float(self._coeffs[index])

    def __len__(self) -> int:
        return self.dimension()

    def __iter__(self) -> Iterator[float]:
        return (float(x) for x in self._coeffs)

    def __add__(self, other: object) -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self._coeffs + other._coeffs)

    def __sub__(self, other: object) -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self._coeffs - other._coeffs)

    def __mul__(self, k: object) -> "Point":
        if not isinstance(k, numbers.Real):
            return NotImplemented
        return Point(self._coeffs * float(k))

    def __rmul__(self, k: object) -> "Point":
        return self.__mul__(k)

    def __truediv__(self, k: object) -> "Point":
        if not isinstance(k, numbers.Real):
            return NotImplemented
        return Point(self._coeffs / float(k))

    def __neg__(self) -> "Point":
        return Point(-self._coeffs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        if self.dimension() != other.dimension():
            return False
        diff = np.abs(self._coeffs - other._coeffs)
        if np.any(diff > _EQ_TOLERANCE * np.abs(self._coeffs)):
            return False
        if np.any(diff > _EQ_TOLERANCE * np.abs(other._coeffs)):
            return False
        return True

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Point({self._coeffs.tolist()!r})"

    def __str__(self) -> str:
        return " ".join(f"{x:g}" for x in self._coeffs)