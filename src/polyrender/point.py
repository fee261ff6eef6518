"""Points in arbitrary-dimensional Euclidean space.

A :class:`Point` is a plain, immutable sequence of coordinates.  Arithmetic
returns new points; mixing points of different dimension raises
:class:`~polyrender.errors.DimensionMismatch`.

Construction goes through two factories rather than a single overloaded
constructor:

- :func:`zero`: the origin of R^n.
- :func:`from_coordinates`: a point from any iterable of numbers.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

from .config import EPSILON
from .errors import DimensionMismatch


@dataclass(frozen=True)
class Point:
    coordinates: tuple[float, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "coordinates", tuple(float(c) for c in self.coordinates))

    def __len__(self) -> int:
        return len(self.coordinates)

    def __getitem__(self, index: int) -> float:
        return self.coordinates[index]

    def __iter__(self) -> Iterator[float]:
        return iter(self.coordinates)

    def dimensions(self) -> int:
        return len(self.coordinates)

    def clone(self) -> "Point":
        """Return an independent point with the same coordinates."""
        return Point(self.coordinates)

    def add(self, other: "Point") -> "Point":
        _check_dimensions(self, other)
        return Point(a + b for a, b in zip(self.coordinates, other.coordinates))

    def subtract(self, other: "Point") -> "Point":
        _check_dimensions(self, other)
        return Point(a - b for a, b in zip(self.coordinates, other.coordinates))

    def scale(self, r: float) -> "Point":
        return Point(c * r for c in self.coordinates)

    def magnitude(self) -> float:
        return math.sqrt(sum(c * c for c in self.coordinates))

    def project(self) -> "Point":
        """Orthographic projection into 3D.

        Lower-dimensional points are padded with zeros, higher-dimensional
        ones keep their first three coordinates.
        """
        if len(self.coordinates) >= 3:
            return Point(self.coordinates[:3])
        return pad_right(self, 3 - len(self.coordinates))

    def apply_matrix(self, matrix) -> "Point":
        """Multiply *matrix* by this point taken as a column vector."""
        import numpy as np

        mat = np.asarray(matrix, dtype=float)
        if mat.ndim != 2 or mat.shape[1] != len(self.coordinates):
            raise DimensionMismatch(
                f"Cannot apply a {mat.shape} matrix to a {len(self.coordinates)}D point"
            )
        return Point(mat @ np.asarray(self.coordinates, dtype=float))


# ═══════════════════════════════════════════════════════════════════
# Factories
# ═══════════════════════════════════════════════════════════════════

def zero(dimensions: int) -> Point:
    """The origin of R^*dimensions*."""
    if dimensions < 0:
        raise ValueError("dimensions must be >= 0")
    return Point((0.0,) * dimensions)


def from_coordinates(coordinates: Iterable[float]) -> Point:
    return Point(tuple(coordinates))


# ═══════════════════════════════════════════════════════════════════
# Combinators
# ═══════════════════════════════════════════════════════════════════

def product(p: Point, q: Point) -> Point:
    """Cartesian product of two points: *p*'s coordinates followed by *q*'s."""
    return Point(p.coordinates + q.coordinates)


def pad_left(p: Point, n: int) -> Point:
    """Prepend *n* zero coordinates."""
    return Point((0.0,) * n + p.coordinates)


def pad_right(p: Point, n: int) -> Point:
    """Append *n* zero coordinates."""
    return Point(p.coordinates + (0.0,) * n)


def approx_equal(a: Point, b: Point, eps: float = EPSILON) -> bool:
    """Coordinate-wise equality relative to *a*'s magnitude.

    The test ``|a[i] - b[i]| <= |a[i]| * eps`` is deliberately asymmetric:
    only *a* scales the tolerance, so a zero coordinate in *a* demands an
    exact zero in *b*.
    """
    _check_dimensions(a, b)
    for x, y in zip(a.coordinates, b.coordinates):
        if abs(x - y) > abs(x * eps):
            return False
    return True


def _check_dimensions(*points: Sequence[float]) -> None:
    dims = {len(p) for p in points}
    if len(dims) > 1:
        raise DimensionMismatch(
            f"Points have different numbers of dimensions: {sorted(dims)}"
        )
