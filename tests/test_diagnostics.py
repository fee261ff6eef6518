"""Tests for diagnostics module."""

from polyrender.builders import build_hypercube, build_polygon
from polyrender.diagnostics import arrangement_report, has_edge_crossings, loop_crossings
from polyrender.point import Point


def _points(coords):
    return [Point(c) for c in coords]


def test_loop_crossings_on_bowtie():
    bowtie = _points([(0, 0), (1, 1), (1, 0), (0, 1)])
    assert loop_crossings(bowtie) == [(0, 2)]


def test_loop_crossings_on_square():
    square = _points([(0, 0), (1, 0), (1, 1), (0, 1)])
    assert loop_crossings(square) == []


def test_has_edge_crossings_between_loops():
    horizontal = _points([(0, 0), (4, 0), (4, 1), (0, 1)])
    vertical = _points([(1, -1), (2, -1), (2, 3), (1, 3)])
    assert has_edge_crossings([horizontal]) is False
    assert has_edge_crossings([horizontal, vertical]) is True


def test_arrangement_report_for_pentagram():
    report = arrangement_report(build_polygon(5, 2))
    assert report["faces"] == 1
    assert report["rendered"] == 1
    assert report["intersections"] == 5
    assert report["loops"] == 2
    assert report["max_loop_size"] == 10
    assert report["residual_crossings"] == 0
    assert report["failed"] == []


def test_arrangement_report_smoke():
    report = arrangement_report(build_hypercube(3))
    assert report["rendered"] == 6
    assert report["loops"] == 6
    assert report["residual_crossings"] == 0
