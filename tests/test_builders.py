import pytest

from polyrender.builders import (
    build_hypercube,
    build_polygon,
    build_segment,
    extrude_to_prism,
    extrude_to_pyramid,
)
from polyrender.point import Point


def test_segment():
    seg = build_segment(2.0)
    assert seg.vertices == [Point((-1.0,)), Point((1.0,))]
    assert seg.edges == [(0, 1)]
    with pytest.raises(ValueError):
        build_segment(0)


class TestPolygon:
    def test_regular(self):
        hexagon = build_polygon(6, radius=2.0)
        assert len(hexagon.vertices) == 6
        assert len(hexagon.faces) == 1
        assert hexagon.circumradius() == pytest.approx(2.0)
        assert hexagon.vertices[0].coordinates == pytest.approx((0.0, 2.0))
        assert hexagon.validate() == []

    def test_star_order(self):
        star = build_polygon(5, 2)
        assert star.edges == [(0, 2), (1, 3), (2, 4), (3, 0), (4, 1)]
        assert star.face_to_vertices(0) == [0, 2, 4, 1, 3]
        assert star.metadata["name"] == "{5/2}"

    @pytest.mark.parametrize("sides,density", [(2, 1), (5, 0), (5, 3), (6, 3), (6, 2)])
    def test_invalid(self, sides, density):
        with pytest.raises(ValueError):
            build_polygon(sides, density)


class TestExtrusion:
    def test_prism_of_square(self):
        prism = extrude_to_prism(build_polygon(4))
        assert len(prism.vertices) == 8
        assert len(prism.edges) == 12
        assert len(prism.faces) == 6
        assert prism.space_dimensions == 3
        assert prism.validate() == []

    def test_prism_heights(self):
        prism = extrude_to_prism(build_polygon(3), height=4.0)
        assert {v[2] for v in prism.vertices} == {-2.0, 2.0}

    def test_pyramid_of_square(self):
        pyramid = extrude_to_pyramid(build_polygon(4), apex_height=3.0)
        assert len(pyramid.vertices) == 5
        assert len(pyramid.edges) == 8
        assert len(pyramid.faces) == 5
        assert pyramid.vertices[-1] == Point((0, 0, 3))
        assert pyramid.validate() == []


class TestHypercube:
    @pytest.mark.parametrize(
        "dimensions,counts",
        [(1, (2, 1, 0)), (2, (4, 4, 1)), (3, (8, 12, 6)), (4, (16, 32, 24))],
    )
    def test_element_counts(self, dimensions, counts):
        cube = build_hypercube(dimensions)
        assert (len(cube.vertices), len(cube.edges), len(cube.faces)) == counts
        assert cube.space_dimensions == dimensions
        assert cube.validate() == []

    def test_faces_are_squares(self):
        tesseract = build_hypercube(4)
        assert all(len(face) == 4 for face in tesseract.faces)
        assert all(len(tesseract.face_to_vertices(i)) == 4 for i in range(len(tesseract.faces)))

    def test_invalid(self):
        with pytest.raises(ValueError):
            build_hypercube(0)
