"""Tests for Polygon."""

import math

import pytest

from patchwork.shapes import Polygon
from patchwork.types import Color, Vec2

BLUE = Color(r=0, g=0, b=255)


def _polygon(*coords: tuple[float, float]) -> Polygon:
    return Polygon(points=[Vec2(x=x, y=y) for x, y in coords], color=BLUE)


def _square() -> Polygon:
    return _polygon((0, 0), (4, 0), (4, 4), (0, 4))


class TestMeasurements:
    def test_square_area_and_perimeter(self) -> None:
        square = _square()
        assert square.area() == pytest.approx(16)
        assert square.perimeter() == pytest.approx(16)

    def test_ten_square_halves(self) -> None:
        square = _polygon((0, 0), (10, 0), (10, 10), (0, 10))
        assert square.area() == 100.0
        assert square.perimeter() == 40.0

    def test_triangle_area(self) -> None:
        assert _polygon((0, 0), (4, 0), (0, 3)).area() == pytest.approx(6)

    def test_perimeter_includes_closing_edge(self) -> None:
        assert _polygon((0, 0), (3, 0), (0, 4)).perimeter() == pytest.approx(12)

    def test_points_are_copied(self) -> None:
        points = [Vec2(x=0, y=0), Vec2(x=1, y=0), Vec2(x=0, y=1)]
        polygon = Polygon(points=points, color=BLUE)
        points.append(Vec2(x=9, y=9))
        assert len(polygon.points) == 3


class TestTransforms:
    def test_homothety_defaults_to_box_center(self) -> None:
        square = _square()
        square.homothety(2.0)
        assert square.points == [
            Vec2(x=-2, y=-2),
            Vec2(x=6, y=-2),
            Vec2(x=6, y=6),
            Vec2(x=-2, y=6),
        ]

    def test_homothety_about_point(self) -> None:
        square = _square()
        square.homothety(0.5, Vec2(x=0, y=0))
        assert square.points[2] == Vec2(x=2, y=2)

    def test_rotate_without_origin_turns_about_zero(self) -> None:
        triangle = _polygon((1, 0), (2, 0), (1, 1))
        triangle.rotate(math.pi / 2)
        expected = [(0, 1), (0, 2), (-1, 1)]
        for point, (x, y) in zip(triangle.points, expected, strict=True):
            assert point.x == pytest.approx(x, abs=1e-9)
            assert point.y == pytest.approx(y, abs=1e-9)

    def test_rotate_keeps_area(self) -> None:
        square = _square()
        square.rotate(0.3, Vec2(x=2, y=2))
        assert square.area() == pytest.approx(16)

    def test_central_symmetry(self) -> None:
        triangle = _polygon((1, 1), (2, 1), (1, 2))
        triangle.central_sym(Vec2(x=0, y=0))
        assert triangle.points == [Vec2(x=-1, y=-1), Vec2(x=-2, y=-1), Vec2(x=-1, y=-2)]

    def test_axial_symmetry_across_x_axis(self) -> None:
        triangle = _polygon((1, 1), (2, 1), (1, 2))
        triangle.axial_sym(Vec2(x=0, y=0), Vec2(x=1, y=0))
        assert triangle.points == [Vec2(x=1, y=-1), Vec2(x=2, y=-1), Vec2(x=1, y=-2)]


class TestSerialize:
    def test_record(self) -> None:
        triangle = _polygon((0, 0), (4, 0), (0, 3))
        assert triangle.serialize() == "polygon 3 0.00 0.00 4.00 0.00 0.00 3.00 0 0 255"

    def test_bounding_box(self) -> None:
        box = _polygon((-1.5, 2), (3, -4), (0, 7.9)).bounding_box()
        assert (box.x_min, box.x_max, box.y_min, box.y_max) == (-1, 3, -4, 7)


class TestRasterize:
    def test_square_fill(self) -> None:
        pixels = set(_square().pixels())
        expected = {(x, y) for x in range(1, 5) for y in range(1, 5)}
        assert pixels == expected

    def test_empty_polygon_draws_nothing(self) -> None:
        assert list(Polygon(points=[], color=BLUE).pixels()) == []
