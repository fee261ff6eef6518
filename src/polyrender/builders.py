"""Builders for polygons, star polygons, prisms, pyramids and hypercubes."""

from __future__ import annotations

import math
from typing import List, Tuple

from .point import Point, from_coordinates, pad_left, pad_right, product, zero
from .polytope import Polytope


def build_segment(length: float = 1.0) -> Polytope:
    """A 1D segment centred on the origin."""
    if length <= 0:
        raise ValueError("length must be > 0")
    half = length / 2
    return Polytope(
        [from_coordinates((-half,)), from_coordinates((half,))],
        [(0, 1)],
        metadata={"name": "segment"},
    )


def build_polygon(sides: int, density: int = 1, radius: float = 1.0) -> Polytope:
    """Regular polygon {sides/density} in the plane, one face.

    density=1 gives a convex polygon; larger densities connect every
    *density*-th vertex and give a self-intersecting star (density=2 with
    5 sides is the pentagram).  The first vertex points along +y.
    """
    if sides < 3:
        raise ValueError("sides must be >= 3")
    if density < 1 or 2 * density >= sides:
        raise ValueError(f"density must be in [1, {(sides - 1) // 2}] for {sides} sides")
    if math.gcd(sides, density) != 1:
        raise ValueError(f"{{{sides}/{density}}} is a compound, not a single polygon")

    vertices = [_polygon_corner(k, sides, radius) for k in range(sides)]
    edges = [(k, (k + density) % sides) for k in range(sides)]
    name = f"{{{sides}}}" if density == 1 else f"{{{sides}/{density}}}"
    return Polytope(vertices, edges, [tuple(range(sides))], metadata={"name": name})


def _polygon_corner(k: int, sides: int, radius: float) -> Point:
    angle = math.pi / 2 + 2 * math.pi * k / sides
    return from_coordinates((radius * math.cos(angle), radius * math.sin(angle)))


def extrude_to_prism(polytope: Polytope, height: float = 1.0) -> Polytope:
    """Prism over *polytope*, one dimension up.

    The base is copied to -height/2 and +height/2 along the new axis; every
    vertex gets a lateral edge and every edge a lateral square face.
    """
    n = len(polytope.vertices)
    m = len(polytope.edges)
    half = height / 2
    below = from_coordinates((-half,))
    above = from_coordinates((half,))

    vertices = [product(v, below) for v in polytope.vertices]
    vertices += [product(v, above) for v in polytope.vertices]

    edges: List[Tuple[int, int]] = list(polytope.edges)
    edges += [(a + n, b + n) for a, b in polytope.edges]
    edges += [(i, i + n) for i in range(n)]

    faces: List[Tuple[int, ...]] = list(polytope.faces)
    faces += [tuple(e + m for e in face) for face in polytope.faces]
    for e, (a, b) in enumerate(polytope.edges):
        faces.append((e, 2 * m + a, e + m, 2 * m + b))

    return Polytope(vertices, edges, faces, _derived_metadata(polytope, "prism"))


def extrude_to_pyramid(polytope: Polytope, apex_height: float = 1.0) -> Polytope:
    """Pyramid over *polytope* with its apex on the new axis."""
    n = len(polytope.vertices)
    m = len(polytope.edges)
    dims = polytope.space_dimensions

    vertices = [pad_right(v, 1) for v in polytope.vertices]
    vertices.append(pad_left(from_coordinates((apex_height,)), dims))

    edges: List[Tuple[int, int]] = list(polytope.edges)
    edges += [(i, n) for i in range(n)]

    faces: List[Tuple[int, ...]] = list(polytope.faces)
    for e, (a, b) in enumerate(polytope.edges):
        faces.append((e, m + a, m + b))

    return Polytope(vertices, edges, faces, _derived_metadata(polytope, "pyramid"))


def build_hypercube(dimensions: int, edge_length: float = 1.0) -> Polytope:
    """Hypercube built by extruding a point *dimensions* times."""
    if dimensions < 1:
        raise ValueError("dimensions must be >= 1")
    cube = Polytope([zero(0)])
    for _ in range(dimensions):
        cube = extrude_to_prism(cube, edge_length)
    cube.metadata = {"name": f"{dimensions}-cube"}
    return cube


def _derived_metadata(polytope: Polytope, kind: str) -> dict:
    base = polytope.metadata.get("name")
    return {"name": f"{base} {kind}" if base else kind}
