import pytest

from polyrender.errors import DimensionMismatch
from polyrender.point import (
    Point,
    approx_equal,
    from_coordinates,
    pad_left,
    pad_right,
    product,
    zero,
)


def test_arithmetic():
    p = from_coordinates((1, 2, 3))
    q = from_coordinates((4, 5, 6))
    assert p.add(q) == Point((5, 7, 9))
    assert q.subtract(p) == Point((3, 3, 3))
    assert p.scale(2) == Point((2, 4, 6))
    assert from_coordinates((3, 4)).magnitude() == pytest.approx(5.0)


def test_add_then_subtract_restores_point():
    p = from_coordinates((0.25, -1.5, 7.0))
    q = from_coordinates((3.0, 2.0, -0.5))
    assert p.add(q).subtract(q) == p


def test_dimension_mismatch():
    p = from_coordinates((1, 2))
    q = from_coordinates((1, 2, 3))
    with pytest.raises(DimensionMismatch):
        p.add(q)
    with pytest.raises(ValueError):
        p.subtract(q)


def test_zero_and_factories():
    assert zero(3) == Point((0.0, 0.0, 0.0))
    assert zero(0).dimensions() == 0
    with pytest.raises(ValueError):
        zero(-1)
    assert from_coordinates(x for x in range(3)).coordinates == (0.0, 1.0, 2.0)


def test_value_equality_and_hash():
    assert Point((1, 2)) == Point((1.0, 2.0))
    assert len({Point((1, 2)), Point((1.0, 2.0)), Point((2, 1))}) == 2


def test_clone_is_independent_object():
    p = from_coordinates((1, 2))
    c = p.clone()
    assert c == p
    assert c is not p


def test_product_and_padding():
    assert product(Point((1, 2)), Point((3,))) == Point((1, 2, 3))
    assert pad_left(Point((1,)), 2) == Point((0, 0, 1))
    assert pad_right(Point((1,)), 2) == Point((1, 0, 0))


class TestProject:
    def test_pads_low_dimensions(self):
        assert Point((1, 2)).project() == Point((1, 2, 0))

    def test_truncates_high_dimensions(self):
        assert Point((1, 2, 3, 4)).project() == Point((1, 2, 3))


class TestApplyMatrix:
    def test_rotation(self):
        rotated = Point((1, 0)).apply_matrix([[0, -1], [1, 0]])
        assert rotated.coordinates == pytest.approx((0.0, 1.0))

    def test_mismatch(self):
        with pytest.raises(DimensionMismatch):
            Point((1, 0, 0)).apply_matrix([[1, 0], [0, 1]])


class TestApproxEqual:
    def test_relative_tolerance(self):
        assert approx_equal(Point((1.0, 2.0)), Point((1.0 + 1e-14, 2.0)))
        assert not approx_equal(Point((1.0, 2.0)), Point((1.1, 2.0)))

    def test_zero_coordinate_requires_exact_zero(self):
        assert approx_equal(Point((0.0, 1.0)), Point((0.0, 1.0)))
        assert not approx_equal(Point((0.0, 1.0)), Point((1e-30, 1.0)))

    def test_mismatch(self):
        with pytest.raises(DimensionMismatch):
            approx_equal(Point((1,)), Point((1, 1)))


def test_scale_composes():
    p = from_coordinates((1.5, -2.0, 4.0))
    assert approx_equal(p.scale(3.0).scale(0.5), p.scale(1.5))


def test_product_and_padding_dimensions():
    p = from_coordinates((7, 8))
    q = from_coordinates((9, 10, 11))
    joined = product(p, q)
    assert joined.dimensions() == 5
    assert joined.coordinates[:2] == p.coordinates

    padded = pad_right(pad_left(p, 2), 3)
    assert padded.dimensions() == 7
    assert padded.coordinates[2:4] == p.coordinates
