"""Tests for Line."""

import math

import pytest

from patchwork.shapes import Line
from patchwork.types import Color, Vec2

GREEN = Color(r=0, g=128, b=0)


def _line(x: float, y: float, dx: float, dy: float) -> Line:
    return Line(point=Vec2(x=x, y=y), direction=Vec2(x=dx, y=dy), color=GREEN)


class TestLine:
    def test_nominal_measurements(self) -> None:
        line = _line(0, 0, 30, 40)
        assert line.area() == 1.0
        assert line.perimeter() == 1.0

    def test_end(self) -> None:
        assert _line(1, 2, 3, 4).end == Vec2(x=4, y=6)

    def test_translate_moves_point_only(self) -> None:
        line = _line(1, 2, 3, 4)
        line.translate(Vec2(x=10, y=10))
        assert line.point == Vec2(x=11, y=12)
        assert line.direction == Vec2(x=3, y=4)

    def test_rotate_about_own_point(self) -> None:
        line = _line(1, 1, 3, 0)
        line.rotate(math.pi / 2)
        assert line.point == Vec2(x=1, y=1)
        assert line.direction.x == pytest.approx(0, abs=1e-9)
        assert line.direction.y == pytest.approx(3)

    def test_rotate_about_other_point(self) -> None:
        line = _line(2, 0, 1, 0)
        line.rotate(math.pi, Vec2(x=0, y=0))
        assert line.point.x == pytest.approx(-2)
        assert line.direction.x == pytest.approx(-1)
        assert line.direction.y == pytest.approx(0, abs=1e-9)

    def test_homothety_is_noop(self) -> None:
        line = _line(1, 2, 3, 4)
        line.homothety(5.0, Vec2(x=0, y=0))
        assert line == _line(1, 2, 3, 4)

    def test_axial_symmetry_is_noop(self) -> None:
        line = _line(1, 2, 3, 4)
        line.axial_sym(Vec2(x=0, y=0), Vec2(x=1, y=0))
        assert line == _line(1, 2, 3, 4)

    def test_central_symmetry_moves_point(self) -> None:
        line = _line(0, 0, 3, 4)
        line.central_sym(Vec2(x=1, y=1))
        assert line.point == Vec2(x=2, y=2)
        assert line.direction == Vec2(x=3, y=4)

    def test_bounding_box_covers_segment(self) -> None:
        box = _line(1, 1, -2, 3).bounding_box()
        assert (box.x_min, box.x_max, box.y_min, box.y_max) == (-1, 1, 1, 4)

    def test_serialize(self) -> None:
        assert _line(0, 0, 3, 0).serialize() == "line 0.00 0.00 3.00 0.00 0 128 0"

    def test_pixels_follow_segment(self) -> None:
        assert list(_line(0, 0, 3, 0).pixels()) == [(0, 0), (1, 0), (2, 0), (3, 0)]
