"""Tests for the face arrangement sweep."""

import pytest

from polyrender.arrangement import arrange_face, reference_triangle
from polyrender.builders import build_polygon
from polyrender.config import ArrangementConfig
from polyrender.diagnostics import has_edge_crossings, loop_crossings
from polyrender.errors import ArrangementInconsistency, DegenerateFace
from polyrender.point import Point


def _points(coords):
    return [Point(c) for c in coords]


def _as_tuples(loop):
    return [p.coordinates for p in loop]


def _same_cycle(loop, expected):
    """Whether *loop* equals *expected* up to rotation."""
    if len(loop) != len(expected):
        return False
    doubled = expected + expected
    return any(doubled[i : i + len(loop)] == loop for i in range(len(expected)))


SQUARE = [(0, 0), (1, 0), (1, 1), (0, 1)]
BOWTIE = [(0, 0), (1, 1), (1, 0), (0, 1)]
# Vertex (1, 3) lies inside the edge from (0, 2) to (4, 6).
T_JUNCTION = [(0, 6), (1, 3), (0, 2), (4, 6)]


class TestSimpleFaces:
    def test_convex_square_is_unchanged(self):
        result = arrange_face(_points(SQUARE))
        assert result.intersections == 0
        assert len(result.loops) == 1
        assert _same_cycle(_as_tuples(result.loops[0]), [tuple(map(float, c)) for c in SQUARE])

    def test_triangle(self):
        result = arrange_face(_points([(0, 0), (3, 1), (1, 2)]))
        assert len(result.loops) == 1
        assert len(result.loops[0]) == 3

    def test_axes_recorded(self):
        result = arrange_face(_points(SQUARE))
        assert result.axes is not None
        assert (result.axes.axis0, result.axes.axis1) == (0, 1)


class TestSelfIntersectingFaces:
    def test_bowtie_splits_into_two_triangles(self):
        result = arrange_face(_points(BOWTIE))
        assert result.intersections == 1
        loops = sorted((_as_tuples(loop) for loop in result.loops), key=lambda l: l[0])
        assert _same_cycle(loops[0], [(0.0, 0.0), (0.5, 0.5), (0.0, 1.0)])
        assert _same_cycle(loops[1], [(1.0, 1.0), (1.0, 0.0), (0.5, 0.5)])

    def test_crossing_points_are_distinct_objects(self):
        result = arrange_face(_points(BOWTIE))
        crossings = [p for loop in result.loops for p in loop if p == Point((0.5, 0.5))]
        assert len(crossings) == 2
        assert crossings[0] is not crossings[1]

    def test_pentagram(self):
        star = build_polygon(5, 2)
        result = arrange_face(star.face_points(0))
        assert result.intersections == 5
        assert sorted(len(loop) for loop in result.loops) == [5, 10]
        assert not has_edge_crossings(result.loops, result.axes)

    def test_heptagram(self):
        star = build_polygon(7, 2)
        result = arrange_face(star.face_points(0))
        assert result.intersections == 7
        assert sum(len(loop) for loop in result.loops) == 7 + 2 * 7
        for loop in result.loops:
            assert loop_crossings(loop, result.axes) == []

    def test_arrangement_is_idempotent(self):
        first = arrange_face(_points(BOWTIE))
        for loop in first.loops:
            again = arrange_face(loop)
            assert again.intersections == 0
            assert len(again.loops) == 1
            assert _same_cycle(_as_tuples(again.loops[0]), _as_tuples(loop))


class TestNearDegenerateFaces:
    def test_vertical_edge_crossing(self):
        result = arrange_face(_points([(0, 0), (2, 2), (1, 3), (1, -1)]))
        assert result.intersections == 1
        loops = sorted((_as_tuples(loop) for loop in result.loops), key=lambda l: l[0])
        assert _same_cycle(loops[0], [(0.0, 0.0), (1.0, 1.0), (1.0, -1.0)])
        assert _same_cycle(loops[1], [(2.0, 2.0), (1.0, 3.0), (1.0, 1.0)])

    def test_collinear_overlapping_edges(self):
        result = arrange_face(_points([(4, 5), (5, 4), (2, 4), (4, 4)]))
        assert result.intersections == 0
        assert len(result.loops) == 1
        assert len(result.loops[0]) == 4

    def test_t_junction_aborts(self):
        with pytest.raises(ArrangementInconsistency):
            arrange_face(_points(T_JUNCTION))


class TestHigherDimensions:
    def test_face_in_yz_plane(self):
        result = arrange_face(_points([(1, 0, 0), (1, 1, 0), (1, 1, 1), (1, 0, 1)]))
        assert (result.axes.axis0, result.axes.axis1, result.axes.axis2) == (1, 2, 0)
        assert len(result.loops) == 1

    def test_bowtie_in_4d_keeps_all_coordinates(self):
        result = arrange_face(_points([(x, y, 0, 1) for x, y in BOWTIE]))
        assert result.axes.axis2 is None
        assert result.intersections == 1
        crossing = Point((0.5, 0.5, 0.0, 1.0))
        assert all(crossing in loop for loop in result.loops)


class TestDegenerateFaces:
    def test_two_vertices(self):
        result = arrange_face(_points([(0, 0), (1, 1)]))
        assert result.is_empty
        assert result.axes is None

    def test_collinear(self):
        assert arrange_face(_points([(0, 0), (1, 1), (2, 2), (3, 3)])).is_empty

    def test_coincident(self):
        assert arrange_face(_points([(1, 2), (1, 2), (1, 2)])).is_empty

    def test_reference_triangle_raises(self):
        with pytest.raises(DegenerateFace):
            reference_triangle(_points([(0, 0), (1, 0), (2, 0)]), 1e-12)

    def test_reference_triangle_skips_repeated_start(self):
        v0, va, vb = reference_triangle(_points([(0, 0), (0, 0), (1, 0), (0, 1)]), 1e-12)
        assert va == Point((1, 0))
        assert vb == Point((0, 1))


def test_without_sorted_check():
    config = ArrangementConfig(check_sorted=False)
    result = arrange_face(_points(BOWTIE), config)
    assert len(result.loops) == 2


def test_to_dict():
    data = arrange_face(_points(BOWTIE)).to_dict()
    assert data["intersections"] == 1
    assert data["axes"][:2] == [0, 1]
    assert len(data["loops"]) == 2
