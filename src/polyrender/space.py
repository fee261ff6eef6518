"""Tolerance-aware geometric predicates on :class:`~polyrender.point.Point`.

Every 2D computation takes the projection plane explicitly as a pair of
coordinate indices (*axis0*, *axis1*), so that two faces projected onto
different planes never share state.
"""

from __future__ import annotations

import math
from typing import NamedTuple, Optional, Tuple

from .config import EPSILON
from .point import Point, _check_dimensions, approx_equal


class ProjectionAxes(NamedTuple):
    """The coordinate plane a face is swept in.

    *axis2* is the remaining axis of 3-space, used to lift a 2D result
    back into 3D; it is ``None`` for faces living in more than 3 dimensions.
    """

    axis0: int
    axis1: int
    axis2: Optional[int] = None

    @classmethod
    def for_dimensions(cls, axis0: int, axis1: int, dimensions: int) -> "ProjectionAxes":
        axis2 = 3 - axis0 - axis1 if dimensions <= 3 else None
        return cls(axis0, axis1, axis2)


def distance_sq(a: Point, b: Point) -> float:
    _check_dimensions(a, b)
    return sum((x - y) ** 2 for x, y in zip(a.coordinates, b.coordinates))


def distance(a: Point, b: Point) -> float:
    return math.sqrt(distance_sq(a, b))


def collinear(a: Point, b: Point, c: Point, eps: float = EPSILON) -> bool:
    """Whether the angle at *a* between *b* and *c* is straight (or null).

    Coincident points count as collinear.
    """
    if approx_equal(a, b, eps) or approx_equal(a, c, eps):
        return True
    _check_dimensions(a, c)

    dot = norm0 = norm1 = 0.0
    for x, y, z in zip(a.coordinates, b.coordinates, c.coordinates):
        sub0 = y - x
        sub1 = z - x
        dot += sub0 * sub1
        norm0 += sub0 * sub0
        norm1 += sub1 * sub1

    norms = norm0 * norm1
    if norms == 0:
        return False
    return 1 - abs(dot / math.sqrt(norms)) <= eps


def _slope_angle(dx: float, dy: float) -> float:
    if dy == 0:
        return math.copysign(math.pi / 2, dx)
    return math.atan(dx / dy)


def same_slope(dx0: float, dy0: float, dx1: float, dy1: float, eps: float = EPSILON) -> bool:
    """Whether directions (dx0, dy0) and (dx1, dy1) are parallel to within *eps*.

    Angles are compared modulo π.
    """
    s = _slope_angle(dx0, dy0) - _slope_angle(dx1, dy1)
    return (s + math.pi + eps) % math.pi < 2 * eps


def segment_intersect(
    a: Point,
    b: Point,
    c: Point,
    d: Point,
    axis0: int = 0,
    axis1: int = 1,
    eps: float = EPSILON,
) -> Optional[Point]:
    """Intersection of segments *ab* and *cd* projected onto (*axis0*, *axis1*).

    The segments are assumed coplanar.  Returns ``None`` when they are
    parallel, when either is degenerate in the projection plane, or when
    the crossing does not lie strictly inside both segments (at least
    *eps* away from each endpoint in parameter space).  Otherwise the
    crossing is returned in the full dimension of the inputs.
    """
    _check_dimensions(a, b, c, d)

    p0, p1 = a[axis0], a[axis1]
    r0, r1 = b[axis0] - p0, b[axis1] - p1
    q0, q1 = c[axis0], c[axis1]
    s0, s1 = d[axis0] - q0, d[axis1] - q1

    if (r0 == 0 and r1 == 0) or (s0 == 0 and s1 == 0):
        return None
    if same_slope(r0, r1, s0, s1, eps):
        return None

    denom = s0 * r1 - s1 * r0
    if denom == 0:
        return None
    t = ((p0 - q0) * s1 - (p1 - q1) * s0) / denom
    u = ((p0 - q0) * r1 - (p1 - q1) * r0) / denom

    if t <= eps or t >= 1 - eps or u <= eps or u >= 1 - eps:
        return None

    return Point(x + (y - x) * t for x, y in zip(a.coordinates, b.coordinates))


def area(a: Point, b: Point, c: Point, j: int, k: int) -> float:
    """Twice the unsigned area of triangle *abc* projected onto axes *j*, *k*."""
    return abs(
        a[j] * (b[k] - c[k])
        + b[j] * (c[k] - a[k])
        + c[j] * (a[k] - b[k])
    )


def best_projection_axes(a: Point, b: Point, c: Point) -> Tuple[int, int]:
    """Coordinate plane onto which triangle *abc* projects with the largest area.

    Sweeping a face in that plane keeps its 2D image as far from
    degenerate as the coordinate planes allow.  Falls back to (0, 1).
    """
    _check_dimensions(a, b, c)
    best = (0, 1)
    max_area = 0.0
    n = a.dimensions()
    for j in range(n):
        for k in range(j + 1, n):
            candidate = area(a, b, c, j, k)
            if candidate > max_area:
                best = (j, k)
                max_area = candidate
    return best
