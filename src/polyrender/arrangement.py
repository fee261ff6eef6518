"""Decomposition of a polygonal face into simple closed loops.

A polytope face is a cycle of points that may cross itself.  A polygon
filler needs simple loops instead, so each face is swept once:

1. Pick the coordinate plane in which the face projects largest.
2. Run a Bentley–Ottmann sweep over the projected boundary.  The event
   queue holds vertices in lexicographic order; the sweep-line status
   holds the edges currently crossed by the sweep line.
3. Whenever two edges adjacent on the sweep line cross, *divide* them:
   add two nodes at the crossing and swap the edges' tails, turning an
   ``X`` into two non-crossing turns.
4. Read the simple loops off the relinked boundary.

Each call owns its own queue, status and linked cycle, so faces are
independent of one another.

Usage
-----
>>> from polyrender.point import from_coordinates
>>> bowtie = [from_coordinates(c) for c in [(0, 0), (1, 1), (1, 0), (0, 1)]]
>>> len(arrange_face(bowtie).loops)
2
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from .avl_tree import AvlTree
from .config import DEFAULT_CONFIG, ArrangementConfig
from .errors import ArrangementInconsistency, DegenerateFace, LookupFailure
from .linked_cycle import LinkedCycle, VertexNode, link_to_next
from .point import Point, approx_equal
from .space import ProjectionAxes, best_projection_axes, collinear, segment_intersect
from .sweepline import SweepContext, SweeplineEdge

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FaceArrangement:
    """Simple loops making up one face.

    *loops* hold points in the face's full dimension.  *axes* is the
    plane the face was swept in, or ``None`` for a degenerate face (which
    has no loops).  *intersections* counts the crossings that were divided.
    """

    loops: List[List[Point]] = field(default_factory=list)
    axes: Optional[ProjectionAxes] = None
    intersections: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.loops

    def to_dict(self) -> dict:
        return {
            "axes": list(self.axes) if self.axes is not None else None,
            "intersections": self.intersections,
            "loops": [[list(p.coordinates) for p in loop] for loop in self.loops],
        }


def arrange_face(
    points: Sequence[Point],
    config: Optional[ArrangementConfig] = None,
) -> FaceArrangement:
    """Split the boundary cycle *points* into simple, non-crossing loops.

    Degenerate faces (fewer than 3 points, or all points coincident or
    collinear) give an empty :class:`FaceArrangement`.

    Raises
    ------
    ArrangementInconsistency
        The sweep-line status lost its order, or refused an edge.
    LookupFailure
        An edge ending at the current event was not on the sweep line.
    DimensionMismatch
        The points do not all have the same dimension.
    """
    config = config or DEFAULT_CONFIG
    if len(points) < 3:
        logger.debug("Skipping face with %d vertices", len(points))
        return FaceArrangement()

    cycle: LinkedCycle[Point] = LinkedCycle(points)
    try:
        v0, va, vb = reference_triangle([node.value for node in cycle.nodes], config.epsilon)
    except DegenerateFace as exc:
        logger.debug("Skipping degenerate face: %s", exc)
        return FaceArrangement()

    axis0, axis1 = best_projection_axes(v0, va, vb)
    axes = ProjectionAxes.for_dimensions(axis0, axis1, v0.dimensions())

    sweep = _Sweep(cycle, axes, config)
    sweep.run()

    loops = cycle.extract_loops()
    logger.debug(
        "Face of %d vertices: %d crossings, %d loops (axes %d, %d)",
        len(points), sweep.intersections, len(loops), axis0, axis1,
    )
    return FaceArrangement(loops=loops, axes=axes, intersections=sweep.intersections)


def reference_triangle(points: Sequence[Point], eps: float) -> Tuple[Point, Point, Point]:
    """First vertex plus two more that span a genuine triangle with it.

    Raises :class:`DegenerateFace` if every point coincides with the first
    one, or all points lie on one line.
    """
    v0 = points[0]
    a = 1
    while approx_equal(v0, points[a], eps):
        a += 1
        if a >= len(points):
            raise DegenerateFace("all vertices coincide")
    va = points[a]

    b = 2 if a == 1 else 1
    while b < len(points) and collinear(v0, va, points[b], eps):
        b += 1
    if b >= len(points):
        raise DegenerateFace("all vertices are collinear")
    return v0, va, points[b]


# ═══════════════════════════════════════════════════════════════════
# Sweep
# ═══════════════════════════════════════════════════════════════════

class _Sweep:
    """Bentley–Ottmann state for a single face."""

    def __init__(self, cycle: LinkedCycle[Point], axes: ProjectionAxes, config: ArrangementConfig) -> None:
        self.cycle = cycle
        self.context = SweepContext(axes, config.epsilon)
        self.check_sorted = config.check_sorted
        self.intersections = 0

        self.queue: AvlTree[VertexNode[Point]] = AvlTree(self.context.event_order)
        for node in cycle.nodes:
            self.queue.insert(node)
        self.status: AvlTree[SweeplineEdge] = AvlTree(self.context.status_order)

    def run(self) -> None:
        ctx = self.context
        eps = ctx.eps
        while not self.queue.is_empty():
            event = self.queue.find_minimum()
            assert event is not None
            ctx.event = event
            self.queue.delete(event)

            if self.check_sorted and not self.status.check_sorted():
                raise ArrangementInconsistency(
                    f"sweep-line status out of order at event {list(event.value)}"
                )

            for direction in (0, 1):
                neighbor = event.neighbor(direction)
                if neighbor is None:
                    raise ArrangementInconsistency(f"vertex {event.id} lost a neighbour")

                ord_ = event.value[ctx.axis0] - neighbor.value[ctx.axis0]
                if ord_ < -eps:
                    self._left_endpoint(event, direction)
                elif ord_ > eps:
                    self._right_endpoint(neighbor, 1 - direction)
                elif event.value[ctx.axis1] > neighbor.value[ctx.axis1]:
                    # Perpendicular to the sweep; handled once, from its upper end.
                    self._vertical_edge(event, direction)

    def _left_endpoint(self, event: VertexNode[Point], direction: int) -> None:
        edge = SweeplineEdge(event, direction, self.context)
        node = self.status.insert(edge)
        if node is None:
            raise ArrangementInconsistency(f"sweep-line insertion failed for {edge!r}")

        below = self.status.prev(node)
        above = self.status.next(node)
        if below is not None:
            self._divide(edge, below.key)
        if above is not None:
            self._divide(edge, above.key)

    def _right_endpoint(self, left: VertexNode[Point], direction: int) -> None:
        edge = SweeplineEdge(left, direction, self.context)
        node = self.status.get_node(edge)
        if node is None:
            raise LookupFailure(f"edge {edge!r} missing from the sweep line")

        below = self.status.prev(node)
        above = self.status.next(node)
        # Once this edge leaves, its neighbours become adjacent.
        if below is not None and above is not None:
            self._divide(below.key, above.key)
        self.status.delete(edge)

    def _vertical_edge(self, event: VertexNode[Point], direction: int) -> None:
        edge = SweeplineEdge(event, direction, self.context)
        # Walking bottom-up keeps each crossing on the part still attached to the event.
        node = self.status.find_minimum_node()
        while node is not None:
            self._divide(edge, node.key)
            node = self.status.next(node)

    def _divide(self, edge_a: SweeplineEdge, edge_b: SweeplineEdge) -> None:
        """Cut two crossing edges and reconnect them without the crossing."""
        a_left, a_right = edge_a.left_vertex.value, edge_a.right_vertex().value
        b_left, b_right = edge_b.left_vertex.value, edge_b.right_vertex().value
        if (
            a_left is b_left
            or a_left is b_right
            or a_right is b_left
            or a_right is b_right
        ):
            return

        a0, a1 = edge_a.directed_edge()
        b0, b1 = edge_b.directed_edge()
        ctx = self.context
        crossing = segment_intersect(
            a0.value, a1.value, b0.value, b1.value, ctx.axis0, ctx.axis1, ctx.eps,
        )
        if crossing is None:
            return

        node1 = self.cycle.new_node(crossing)
        node2 = self.cycle.new_node(crossing.clone())

        link_to_next(a0, node1)
        link_to_next(node1, b1)
        link_to_next(b0, node2)
        link_to_next(node2, a1)

        ctx.redirect(edge_a)
        ctx.redirect(edge_b)

        self.queue.insert(node1)
        self.queue.insert(node2)
        self.intersections += 1
