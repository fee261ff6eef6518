"""Scene: the loops produced by render passes, plus their polytopes."""

from __future__ import annotations

from typing import Iterator, List, Optional

from .arrangement import FaceArrangement
from .point import Point
from .polytope import Polytope


class Scene:
    """Everything a render pass produced: polytopes and their face loops."""

    def __init__(self) -> None:
        self.polytopes: List[Polytope] = []
        self.faces: List[FaceArrangement] = []

    def add(self, arrangement: FaceArrangement) -> None:
        if not arrangement.is_empty:
            self.faces.append(arrangement)

    def add_polytope(self, polytope: Polytope) -> None:
        self.polytopes.append(polytope)

    def clear(self) -> None:
        self.polytopes.clear()
        self.faces.clear()

    def loops(self) -> Iterator[List[Point]]:
        for arrangement in self.faces:
            yield from arrangement.loops

    def polygons_3d(self) -> list:
        """Every loop as a ``(k, 3)`` numpy array of projected points."""
        import numpy as np

        return [
            np.array([p.project().coordinates for p in loop], dtype=float)
            for loop in self.loops()
        ]

    def bounds(self) -> Optional[tuple]:
        """Axis-aligned ``(mins, maxs)`` of the projected loops, or ``None``."""
        import numpy as np

        polygons = self.polygons_3d()
        if not polygons:
            return None
        stacked = np.vstack(polygons)
        return stacked.min(axis=0), stacked.max(axis=0)

    def __len__(self) -> int:
        return len(self.faces)
