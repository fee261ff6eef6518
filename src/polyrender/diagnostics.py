"""Checks on arrangement output."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from .config import DEFAULT_CONFIG, EPSILON, ArrangementConfig
from .point import Point
from .polytope import Polytope
from .render import render_to
from .scene import Scene
from .space import ProjectionAxes, segment_intersect

Segment = Tuple[Point, Point]


def _loop_edges(loop: Sequence[Point]) -> List[Segment]:
    return [(loop[i], loop[(i + 1) % len(loop)]) for i in range(len(loop))]


def loop_crossings(
    loop: Sequence[Point],
    axes: ProjectionAxes = ProjectionAxes(0, 1),
    eps: float = EPSILON,
) -> List[Tuple[int, int]]:
    """Index pairs of non-adjacent edges of *loop* that cross in the plane *axes*.

    Edge ``i`` runs from ``loop[i]`` to ``loop[i + 1]``.  Touching at an
    endpoint does not count as a crossing.
    """
    edges = _loop_edges(loop)
    n = len(edges)
    crossings: List[Tuple[int, int]] = []
    for i in range(n):
        for j in range(i + 2, n):
            if i == 0 and j == n - 1:
                continue
            (a, b), (c, d) = edges[i], edges[j]
            if segment_intersect(a, b, c, d, axes.axis0, axes.axis1, eps) is not None:
                crossings.append((i, j))
    return crossings


def has_edge_crossings(
    loops: Sequence[Sequence[Point]],
    axes: ProjectionAxes = ProjectionAxes(0, 1),
    eps: float = EPSILON,
) -> bool:
    """Whether any edge of *loops* crosses another, within a loop or across loops."""
    for loop in loops:
        if loop_crossings(loop, axes, eps):
            return True

    per_loop = [_loop_edges(loop) for loop in loops]
    for i, edges_a in enumerate(per_loop):
        for edges_b in per_loop[i + 1 :]:
            for a, b in edges_a:
                for c, d in edges_b:
                    if segment_intersect(a, b, c, d, axes.axis0, axes.axis1, eps) is not None:
                        return True
    return False


def arrangement_report(
    polytope: Polytope,
    config: Optional[ArrangementConfig] = None,
) -> Dict[str, object]:
    """Render *polytope* into a scratch scene and summarise the result."""
    config = config or DEFAULT_CONFIG
    scene = Scene()
    report = render_to(polytope, scene, config)

    residual = sum(
        1
        for arrangement in scene.faces
        if arrangement.axes is not None
        and has_edge_crossings(arrangement.loops, arrangement.axes, config.epsilon)
    )
    loop_sizes = [len(loop) for loop in scene.loops()]

    summary: Dict[str, object] = {"faces": len(polytope.faces)}
    summary.update(report.to_dict())
    summary["loops"] = len(loop_sizes)
    summary["max_loop_size"] = max(loop_sizes, default=0)
    summary["residual_crossings"] = residual
    return summary
