"""polyrender: splits self-intersecting polytope faces into simple loops.

Public API is organised into layers:

- **Core**: points, predicates, configuration, errors
- **Structures**: AVL tree, linked cycles, sweep-line edges
- **Arrangement**: the per-face Bentley–Ottmann sweep
- **Polytopes**: container, builders, I/O
- **Rendering**: scene and render pass (PNG output requires matplotlib)
- **Diagnostics**: crossing checks and reports
"""

# ── Core ────────────────────────────────────────────────────────────
from .config import EPSILON, DEFAULT_CONFIG, ArrangementConfig
from .errors import (
    GeometryError,
    DimensionMismatch,
    DegenerateFace,
    ArrangementError,
    ArrangementInconsistency,
    LookupFailure,
)
from .point import Point, zero, from_coordinates, product, pad_left, pad_right, approx_equal
from .space import (
    ProjectionAxes,
    distance,
    collinear,
    same_slope,
    segment_intersect,
    area,
    best_projection_axes,
)

# ── Structures ──────────────────────────────────────────────────────
from .avl_tree import AvlTree, AvlNode
from .linked_cycle import LinkedCycle, VertexNode, link_to_next, extract_cycle
from .sweepline import SweepContext, SweeplineEdge

# ── Arrangement ─────────────────────────────────────────────────────
from .arrangement import FaceArrangement, arrange_face, reference_triangle

# ── Polytopes ───────────────────────────────────────────────────────
from .polytope import Polytope
from .builders import (
    build_segment,
    build_polygon,
    extrude_to_prism,
    extrude_to_pyramid,
    build_hypercube,
)
from .io import load_json, save_json, save_arrangements_json

# ── Rendering (render_png requires matplotlib) ─────────────────────
from .scene import Scene
from .render import RenderReport, render_to, render_png

# ── Diagnostics ─────────────────────────────────────────────────────
from .diagnostics import loop_crossings, has_edge_crossings, arrangement_report

__all__ = [
    # Core
    "EPSILON",
    "DEFAULT_CONFIG",
    "ArrangementConfig",
    "GeometryError",
    "DimensionMismatch",
    "DegenerateFace",
    "ArrangementError",
    "ArrangementInconsistency",
    "LookupFailure",
    "Point",
    "zero",
    "from_coordinates",
    "product",
    "pad_left",
    "pad_right",
    "approx_equal",
    "ProjectionAxes",
    "distance",
    "collinear",
    "same_slope",
    "segment_intersect",
    "area",
    "best_projection_axes",
    # Structures
    "AvlTree",
    "AvlNode",
    "LinkedCycle",
    "VertexNode",
    "link_to_next",
    "extract_cycle",
    "SweepContext",
    "SweeplineEdge",
    # Arrangement
    "FaceArrangement",
    "arrange_face",
    "reference_triangle",
    # Polytopes
    "Polytope",
    "build_segment",
    "build_polygon",
    "extrude_to_prism",
    "extrude_to_pyramid",
    "build_hypercube",
    "load_json",
    "save_json",
    "save_arrangements_json",
    # Rendering
    "Scene",
    "RenderReport",
    "render_to",
    "render_png",
    # Diagnostics
    "loop_crossings",
    "has_edge_crossings",
    "arrangement_report",
]
