"""Exception types raised by the geometry core."""

from __future__ import annotations

from typing import Optional


class GeometryError(Exception):
    """Base class for every error raised by polyrender."""


class DimensionMismatch(GeometryError, ValueError):
    """Two points (or a point and a matrix) live in spaces of different dimension."""


class DegenerateFace(GeometryError):
    """A face has fewer than 3 vertices, or all of them are coincident/collinear.

    Never escapes :func:`~polyrender.arrangement.arrange_face`; degenerate
    faces just produce no loops.
    """


class ArrangementError(GeometryError):
    """The sweep over one face had to be aborted.

    *face_index* is filled in by the render pass so that diagnostics can
    name the offending face.
    """

    def __init__(self, message: str, face_index: Optional[int] = None) -> None:
        super().__init__(message)
        self.face_index = face_index

    def __str__(self) -> str:
        message = super().__str__()
        if self.face_index is None:
            return message
        return f"face {self.face_index}: {message}"


class ArrangementInconsistency(ArrangementError):
    """The sweep-line status stopped being sorted, or rejected an insertion."""


class LookupFailure(ArrangementError):
    """An edge expected on the sweep-line status could not be found."""
