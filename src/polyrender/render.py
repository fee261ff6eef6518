"""Render pass: arranges polytope faces into a scene, and PNG output."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .arrangement import arrange_face
from .config import DEFAULT_CONFIG, ArrangementConfig
from .errors import ArrangementError
from .polytope import Polytope
from .scene import Scene

logger = logging.getLogger(__name__)


@dataclass
class RenderReport:
    """Outcome of :func:`render_to` for one polytope."""

    rendered: int = 0
    skipped: int = 0
    failed: List[ArrangementError] = field(default_factory=list)
    intersections: int = 0

    @property
    def ok(self) -> bool:
        return not self.failed

    def to_dict(self) -> dict:
        return {
            "rendered": self.rendered,
            "skipped": self.skipped,
            "failed": [
                {"face": exc.face_index, "error": type(exc).__name__, "message": str(exc)}
                for exc in self.failed
            ],
            "intersections": self.intersections,
        }


def render_to(
    polytope: Polytope,
    scene: Scene,
    config: Optional[ArrangementConfig] = None,
) -> RenderReport:
    """Arrange every face of *polytope* and add the loops to *scene*.

    A face whose sweep aborts contributes no loops; the error is logged,
    tagged with the face index and kept in the report, and the remaining
    faces are still rendered.
    """
    config = config or DEFAULT_CONFIG
    if config.recenter:
        polytope = polytope.recenter()
    scene.add_polytope(polytope)

    report = RenderReport()
    for index, face in enumerate(polytope.faces):
        if len(face) < 3:
            report.skipped += 1
            continue

        try:
            arrangement = arrange_face(polytope.face_points(index), config)
        except ArrangementError as exc:
            exc.face_index = index
            logger.warning("Aborted %s", exc)
            report.failed.append(exc)
            continue

        if arrangement.is_empty:
            report.skipped += 1
            continue
        scene.add(arrangement)
        report.rendered += 1
        report.intersections += arrangement.intersections

    logger.info(
        "Rendered %d faces (%d skipped, %d failed, %d crossings)",
        report.rendered, report.skipped, len(report.failed), report.intersections,
    )
    return report


def render_png(
    scene: Scene,
    output_path: str | Path,
    face_alpha: float = 0.35,
    edge_color: str = "#2b2b2b",
    face_color: str = "#5aa9e6",
    elev: float = 25.0,
    azim: float = -60.0,
    dpi: int = 150,
) -> None:
    """Render a scene's loops to PNG as filled 3D polygons.

    Requires matplotlib; imported lazily to keep core package lightweight.
    """
    try:
        import matplotlib.pyplot as plt
        from mpl_toolkits.mplot3d.art3d import Poly3DCollection
    except ImportError as exc:  # pragma: no cover - requires optional dep
        raise RuntimeError(
            "matplotlib is required for rendering. Install with `pip install matplotlib`."
        ) from exc

    polygons = scene.polygons_3d()
    if not polygons:
        raise ValueError("Scene has no loops to render.")

    fig = plt.figure()
    ax = fig.add_subplot(projection="3d")
    collection = Poly3DCollection(
        polygons,
        facecolors=face_color,
        edgecolors=edge_color,
        linewidths=0.8,
        alpha=face_alpha,
    )
    ax.add_collection3d(collection)

    mins, maxs = scene.bounds()
    centre = (mins + maxs) / 2
    half = max(float((maxs - mins).max()) / 2, 1e-9)
    ax.set_xlim(centre[0] - half, centre[0] + half)
    ax.set_ylim(centre[1] - half, centre[1] + half)
    ax.set_zlim(centre[2] - half, centre[2] + half)
    ax.view_init(elev=elev, azim=azim)
    ax.set_axis_off()

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=dpi, bbox_inches="tight", pad_inches=0)
    plt.close(fig)
