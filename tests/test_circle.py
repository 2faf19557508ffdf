"""Tests for Circle."""

import math

import pytest

from patchwork.rendering import PillowSurface
from patchwork.shapes import Circle
from patchwork.types import Color, ShapeKind, Vec2

RED = Color(r=255, g=0, b=0)
WHITE = Color(r=255, g=255, b=255)


def _circle(x: float = 0, y: float = 0, radius: float = 10) -> Circle:
    return Circle(origin=Vec2(x=x, y=y), radius=radius, color=RED)


class TestMeasurements:
    def test_area_and_perimeter(self) -> None:
        circle = _circle(radius=10)
        assert circle.area() == pytest.approx(314.16, abs=0.01)
        assert circle.perimeter() == pytest.approx(62.83, abs=0.01)

    def test_kind(self) -> None:
        assert _circle().kind is ShapeKind.CIRCLE

    def test_bounding_box(self) -> None:
        box = _circle(5, -5, 10).bounding_box()
        assert (box.x_min, box.x_max, box.y_min, box.y_max) == (-5, 15, -15, 5)


class TestTransforms:
    def test_homothety_about_own_center(self) -> None:
        circle = _circle(0, 0, 10)
        circle.homothety(2.0, Vec2(x=0, y=0))
        assert circle.radius == 20
        assert circle.origin == Vec2(x=0, y=0)

    def test_homothety_moves_center_along_ray(self) -> None:
        circle = _circle(10, 0, 5)
        circle.homothety(2.0, Vec2(x=0, y=0))
        assert circle.origin == Vec2(x=20, y=0)
        assert circle.radius == 10

    def test_homothety_without_origin_scales_radius(self) -> None:
        circle = _circle(3, 4, 5)
        circle.homothety(0.5)
        assert circle.origin == Vec2(x=3, y=4)
        assert circle.radius == 2.5

    def test_negative_ratio_flips_radius(self) -> None:
        circle = _circle(0, 0, 5)
        circle.homothety(-1.0)
        assert circle.radius == -5
        box = circle.bounding_box()
        assert (box.x_min, box.x_max) == (-5, 5)

    def test_rotate_without_origin_changes_nothing(self) -> None:
        circle = _circle(3, 4, 5)
        circle.rotate(1.0)
        assert circle == _circle(3, 4, 5)

    def test_rotate_about_point(self) -> None:
        circle = _circle(10, 0, 5)
        circle.rotate(math.pi, Vec2(x=0, y=0))
        assert circle.origin.x == pytest.approx(-10)
        assert circle.origin.y == pytest.approx(0, abs=1e-9)

    def test_translate_round_trip(self) -> None:
        circle = _circle(1.5, -2.25, 3)
        circle.translate(Vec2(x=7.1, y=-3.3))
        circle.translate(Vec2(x=-7.1, y=3.3))
        assert circle.origin.x == pytest.approx(1.5)
        assert circle.origin.y == pytest.approx(-2.25)

    def test_central_symmetry(self) -> None:
        circle = _circle(1, 2, 3)
        circle.central_sym(Vec2(x=0, y=0))
        assert circle.origin == Vec2(x=-1, y=-2)

    def test_axial_symmetry_across_y_axis(self) -> None:
        circle = _circle(3, 4, 1)
        circle.axial_sym(Vec2(x=0, y=0), Vec2(x=0, y=1))
        assert circle.origin == Vec2(x=-3, y=4)


class TestSerialize:
    def test_two_decimal_rounding(self) -> None:
        circle = _circle(1.005, 2.004, 3)
        assert circle.serialize() == "circle 1.01 2.00 3.00 255 0 0"

    def test_str(self) -> None:
        assert str(_circle(1, 2, 3)).startswith("Circle\n\t")


class TestRasterize:
    def test_unit_circle_pixels(self) -> None:
        pixels = set(_circle(0, 0, 1).pixels())
        assert pixels == {(0, 0), (1, 0), (-1, 0), (0, 1), (0, -1)}

    def test_filled_not_outlined(self) -> None:
        pixels = set(_circle(0, 0, 10).pixels())
        assert (0, 0) in pixels
        assert (10, 0) in pixels
        assert (8, 8) not in pixels

    def test_origin_maps_to_surface_center(self) -> None:
        surface = PillowSurface(41, 41)
        _circle(0, 0, 3).rasterize(surface)
        assert surface.get_color(20, 20) == RED
        assert surface.get_color(23, 20) == RED
        assert surface.get_color(24, 20) == WHITE

    def test_scaled_rasterize_leaves_shape_untouched(self) -> None:
        surface = PillowSurface(41, 41)
        circle = _circle(0, 0, 10)
        circle.rasterize(surface, 0.5)
        assert circle.radius == 10
        assert surface.get_color(25, 20) == RED
        assert surface.get_color(27, 20) == WHITE
