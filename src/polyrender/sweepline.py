"""Sweep-line edges and the two orders used by the arrangement sweep.

An edge on the sweep line is named by its left vertex plus the neighbour
slot leading to its right vertex.  The right vertex is looked up on demand,
so when a divide reroutes the left vertex to a new intersection node, the
edge already stored on the sweep line shrinks to the new segment without
being touched.  Edges are only ever cut on their right side.

The tie-break ID has to survive that shrinking while staying derivable from
the two endpoints, so that a freshly built lookup edge finds its stored
twin.  :class:`SweepContext` keeps a redirect table from endpoint pairs to
the ID the edge was first given.
"""

from __future__ import annotations

import math
from typing import Dict, Tuple

from .linked_cycle import VertexNode
from .point import Point
from .space import ProjectionAxes


def _pair_id(x: int, y: int) -> int:
    # Cantor pairing: unique for ordered pairs of node ids.
    return (x + y) * (x + y + 1) // 2 + y


class SweepContext:
    """Per-face sweep state: projection plane, tolerance, current event.

    One context is created for each face and discarded with it.
    """

    def __init__(self, axes: ProjectionAxes, eps: float) -> None:
        self.axis0 = axes.axis0
        self.axis1 = axes.axis1
        self.eps = eps
        self.event: VertexNode[Point] | None = None
        self._redirects: Dict[Tuple[int, int], int] = {}

    # ── edge identity ───────────────────────────────────────────────

    def edge_id(self, left: VertexNode[Point], right: VertexNode[Point]) -> int:
        key = (left.id, right.id)
        return self._redirects.get(key, _pair_id(*key))

    def redirect(self, edge: "SweeplineEdge") -> None:
        """Map the edge's current endpoints to the ID it was first given."""
        self._redirects[(edge.left_vertex.id, edge.right_vertex().id)] = edge.id

    # ── orders ──────────────────────────────────────────────────────

    def event_order(self, a: VertexNode[Point], b: VertexNode[Point]) -> float:
        """Lexicographic order on (axis0, axis1, node id).

        Coordinates are compared exactly: an epsilon here would make the
        order intransitive.
        """
        c = a.value[self.axis0] - b.value[self.axis0]
        if c == 0:
            c = a.value[self.axis1] - b.value[self.axis1]
            if c == 0:
                return a.id - b.id
        return c

    def status_order(self, x: "SweeplineEdge", y: "SweeplineEdge") -> float:
        """Order edges by where they cross the sweep line at the current event.

        Near-equal heights are resolved by shared endpoints, then slope,
        then edge ID.
        """
        if x.left_vertex is y.left_vertex and x.right_vertex() is y.right_vertex():
            return 0

        i0, i1, eps = self.axis0, self.axis1, self.eps
        a, b = x.left_vertex.value, x.right_vertex().value
        c, d = y.left_vertex.value, y.right_vertex().value
        assert self.event is not None
        k = self.event.value[i0]

        # Position of the sweep line along each segment, 1 at the left end.
        lambda0 = _sweep_parameter(k, a[i0], b[i0])
        lambda1 = _sweep_parameter(k, c[i0], d[i0])

        res = (a[i1] * lambda0 + b[i1] * (1 - lambda0)) - (
            c[i1] * lambda1 + d[i1] * (1 - lambda1)
        )

        if abs(res) < eps:
            # x starts where y ends: x goes after y, and vice versa.
            if lambda0 > 1 - eps and lambda1 < eps:
                return 1
            if lambda0 < eps and lambda1 > 1 - eps:
                return -1

            if lambda0 > 1 - eps:
                # Both start here: increasing slope.
                res = 1
            elif lambda0 < eps:
                # Both end here: decreasing slope.
                res = -1
            else:
                return res if res != 0 else x.id - y.id

            res *= math.atan(x.slope) - math.atan(y.slope)
            if abs(res) < eps:
                return x.id - y.id

        return res


def _sweep_parameter(k: float, left: float, right: float) -> float:
    span = left - right
    if span == 0:
        return 0.0
    return (k - right) / span


class SweeplineEdge:
    """An edge of the face boundary, seen from its left endpoint.

    *right_index* is the neighbour slot of *left_vertex* (``0`` next,
    ``1`` previous) holding the right endpoint.
    """

    __slots__ = ("left_vertex", "right_index", "slope", "id")

    def __init__(
        self,
        left_vertex: VertexNode[Point],
        right_index: int,
        context: SweepContext,
    ) -> None:
        self.left_vertex = left_vertex
        self.right_index = right_index
        right = self.right_vertex()

        a, b = left_vertex.value, right.value
        dx = a[context.axis0] - b[context.axis0]
        dy = a[context.axis1] - b[context.axis1]
        # Fixed at creation; later cuts don't change the edge's direction.
        self.slope = dy / dx if dx != 0 else math.copysign(math.inf, dy)
        self.id = context.edge_id(left_vertex, right)

    def right_vertex(self) -> VertexNode[Point]:
        node = self.left_vertex.neighbor(self.right_index)
        if node is None:
            raise ValueError(f"Vertex {self.left_vertex.id} is missing a neighbour")
        return node

    def directed_edge(self) -> Tuple[VertexNode[Point], VertexNode[Point]]:
        """The endpoints in the cycle's forward direction."""
        if self.right_index == 0:
            return self.left_vertex, self.right_vertex()
        return self.right_vertex(), self.left_vertex

    def __repr__(self) -> str:
        return (
            f"SweeplineEdge({list(self.left_vertex.value)}, "
            f"{list(self.right_vertex().value)})"
        )
