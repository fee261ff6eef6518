"""Polytope container: vertices, edges as vertex pairs, faces as edge lists."""

from __future__ import annotations

import json
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .linked_cycle import VertexNode
from .point import Point, from_coordinates, zero


class Polytope:
    """A polytope stored as an element list, mirroring the OFF layout.

    *vertices* are points; *edges* are pairs of vertex indices; *faces* are
    tuples of edge indices, in any order.  Higher-rank elements are not
    needed for rendering and are not stored.
    """

    VERSION = "1.0"

    def __init__(
        self,
        vertices: Iterable[Point],
        edges: Iterable[Sequence[int]] = (),
        faces: Iterable[Sequence[int]] = (),
        metadata: Optional[dict] = None,
    ) -> None:
        self.vertices: List[Point] = list(vertices)
        self.edges: List[Tuple[int, int]] = [(int(e[0]), int(e[1])) for e in edges]
        self.faces: List[Tuple[int, ...]] = [tuple(int(i) for i in f) for f in faces]
        self.metadata = metadata or {}

    @property
    def rank(self) -> int:
        """Highest element rank stored (0 vertices, 1 edges, 2 faces)."""
        if self.faces:
            return 2
        if self.edges:
            return 1
        return 0 if self.vertices else -1

    @property
    def space_dimensions(self) -> int:
        return self.vertices[0].dimensions() if self.vertices else 0

    # ── faces ───────────────────────────────────────────────────────

    def face_to_vertices(self, index: int) -> List[int]:
        """Vertex indices of face *index*, in boundary order."""
        if not 0 <= index < len(self.faces):
            raise IndexError(f"Polytope has no face {index}")

        nodes: Dict[int, VertexNode[int]] = {}
        for edge_index in self.faces[index]:
            a, b = self.edges[edge_index]
            for vid in (a, b):
                if vid not in nodes:
                    nodes[vid] = VertexNode(vid, vid)
            nodes[a].link_to(nodes[b])

        first_vertex = self.edges[self.faces[index][0]][0]
        return nodes[first_vertex].walk()

    def face_points(self, index: int) -> List[Point]:
        return [self.vertices[vid] for vid in self.face_to_vertices(index)]

    # ── metric helpers ──────────────────────────────────────────────

    def gravicenter(self) -> Point:
        """Mean of the vertices."""
        d = self.space_dimensions
        if not self.vertices:
            return zero(0)
        sums = [0.0] * d
        for v in self.vertices:
            for i in range(d):
                sums[i] += v[i]
        return from_coordinates(s / len(self.vertices) for s in sums)

    def circumradius(self) -> float:
        """Largest vertex distance from the origin."""
        return max((v.magnitude() for v in self.vertices), default=0.0)

    def move(self, offset: Point, mult: float = 1.0) -> "Polytope":
        shift = offset.scale(mult)
        return self._with_vertices(v.add(shift) for v in self.vertices)

    def scale(self, r: float) -> "Polytope":
        return self._with_vertices(v.scale(r) for v in self.vertices)

    def recenter(self) -> "Polytope":
        """Copy with the gravicenter moved to the origin."""
        if not self.vertices:
            return self._with_vertices([])
        return self.move(self.gravicenter(), -1)

    def _with_vertices(self, vertices: Iterable[Point]) -> "Polytope":
        return Polytope(vertices, self.edges, self.faces, dict(self.metadata))

    # ── validation ──────────────────────────────────────────────────

    def validate(self) -> list[str]:
        errors: list[str] = []

        dims = {v.dimensions() for v in self.vertices}
        if len(dims) > 1:
            errors.append(f"Vertices have mixed dimensions {sorted(dims)}")

        for i, (a, b) in enumerate(self.edges):
            for vid in (a, b):
                if not 0 <= vid < len(self.vertices):
                    errors.append(f"Edge {i} references missing vertex {vid}")
            if a == b:
                errors.append(f"Edge {i} is a loop on vertex {a}")

        for i, face in enumerate(self.faces):
            degree: Dict[int, int] = {}
            for edge_index in face:
                if not 0 <= edge_index < len(self.edges):
                    errors.append(f"Face {i} references missing edge {edge_index}")
                    continue
                for vid in self.edges[edge_index]:
                    degree[vid] = degree.get(vid, 0) + 1
            if any(count != 2 for count in degree.values()):
                errors.append(f"Face {i} edges do not form a closed cycle")

        return errors

    # ── serialisation ───────────────────────────────────────────────

    def to_dict(self) -> dict:
        return {
            "version": self.VERSION,
            "metadata": self.metadata,
            "vertices": [list(v.coordinates) for v in self.vertices],
            "edges": [list(e) for e in self.edges],
            "faces": [list(f) for f in self.faces],
        }

    @classmethod
    def from_dict(cls, payload: dict) -> "Polytope":
        return cls(
            [from_coordinates(v) for v in payload.get("vertices", [])],
            payload.get("edges", []),
            payload.get("faces", []),
            payload.get("metadata", {}),
        )

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, sort_keys=True)

    @classmethod
    def from_json(cls, json_data: str) -> "Polytope":
        return cls.from_dict(json.loads(json_data))

    def __repr__(self) -> str:
        return (
            f"Polytope({len(self.vertices)} vertices, {len(self.edges)} edges, "
            f"{len(self.faces)} faces, {self.space_dimensions}D)"
        )


