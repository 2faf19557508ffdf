"""Tests for value types: Vec2, Color, BoundingBox and kinds."""

import math

import pytest
from pydantic import ValidationError

from patchwork.types import (
    EMPTY_MAX,
    EMPTY_MIN,
    BoundingBox,
    Color,
    ShapeKind,
    TransformKind,
    Vec2,
    dot,
    norm,
    shape_kind_from_name,
    transform_kind_from_name,
)


class TestVec2:
    def test_add_and_subtract(self) -> None:
        a = Vec2(x=1, y=2)
        b = Vec2(x=3, y=-4)
        assert a + b == Vec2(x=4, y=-2)
        assert a - b == Vec2(x=-2, y=6)

    def test_scalar_multiply_both_sides(self) -> None:
        v = Vec2(x=1.5, y=-2)
        assert v * 2 == Vec2(x=3, y=-4)
        assert 2 * v == Vec2(x=3, y=-4)

    def test_negate(self) -> None:
        assert -Vec2(x=1, y=-2) == Vec2(x=-1, y=2)

    def test_dot_and_norm(self) -> None:
        a = Vec2(x=3, y=4)
        assert dot(a, Vec2(x=1, y=0)) == 3
        assert norm(a) == 5
        assert a.norm() == 5

    def test_equality_is_exact(self) -> None:
        assert Vec2(x=0.1 + 0.2, y=0) != Vec2(x=0.3, y=0)

    def test_is_immutable(self) -> None:
        v = Vec2(x=1, y=2)
        with pytest.raises(ValidationError):
            v.x = 5  # type: ignore[misc]

    def test_str(self) -> None:
        assert str(Vec2(x=1.0, y=2.5)) == "(1.0, 2.5)"


class TestColor:
    def test_channels_validated(self) -> None:
        with pytest.raises(ValidationError):
            Color(r=256, g=0, b=0)
        with pytest.raises(ValidationError):
            Color(r=0, g=-1, b=0)

    def test_equality(self) -> None:
        assert Color(r=1, g=2, b=3) == Color(r=1, g=2, b=3)
        assert Color(r=1, g=2, b=3) != Color(r=1, g=2, b=4)

    def test_hex_round_trip(self) -> None:
        color = Color.from_hex("#ff8032")
        assert color == Color(r=255, g=128, b=50)
        assert color.to_hex() == "#ff8032"

    def test_from_hex_rejects_short_strings(self) -> None:
        with pytest.raises(ValueError):
            Color.from_hex("#fff")

    def test_str(self) -> None:
        assert str(Color(r=255, g=0, b=10)) == "(255, 0, 10)"


class TestBoundingBox:
    def test_new_box_is_empty_with_sentinels(self) -> None:
        box = BoundingBox()
        assert box.is_empty
        assert box.x_min == EMPTY_MIN
        assert box.y_min == EMPTY_MIN
        assert box.x_max == EMPTY_MAX
        assert box.y_max == EMPTY_MAX
        assert box.width == 0
        assert box.height == 0

    def test_first_point_sets_both_bounds(self) -> None:
        box = BoundingBox()
        box.include(3, -7)
        assert not box.is_empty
        assert (box.x_min, box.x_max, box.y_min, box.y_max) == (3, 3, -7, -7)

    def test_coordinates_truncate_toward_zero(self) -> None:
        box = BoundingBox()
        box.include(-1.7, 2.9)
        assert (box.x_min, box.y_min) == (-1, 2)

    def test_non_finite_points_ignored(self) -> None:
        box = BoundingBox()
        box.include(math.nan, 1)
        box.include(math.inf, 1)
        assert box.is_empty

    def test_merge(self) -> None:
        a = BoundingBox.around([Vec2(x=0, y=0), Vec2(x=10, y=5)])
        b = BoundingBox.around([Vec2(x=-3, y=2), Vec2(x=4, y=8)])
        a.merge(b)
        assert (a.x_min, a.x_max, a.y_min, a.y_max) == (-3, 10, 0, 8)

    def test_merge_empty_is_noop(self) -> None:
        a = BoundingBox.around([Vec2(x=1, y=1)])
        a.merge(BoundingBox())
        assert (a.x_min, a.x_max, a.y_min, a.y_max) == (1, 1, 1, 1)

    def test_center(self) -> None:
        box = BoundingBox(x_min=0, x_max=10, y_min=-4, y_max=0)
        assert box.center == Vec2(x=5, y=-2)


class TestKinds:
    def test_shape_kind_lookup(self) -> None:
        assert shape_kind_from_name("circle") is ShapeKind.CIRCLE
        assert shape_kind_from_name("ellipse") is ShapeKind.ELLIPSE
        assert shape_kind_from_name("annotation") is None

    def test_image_has_no_record_keyword(self) -> None:
        assert shape_kind_from_name("image") is None

    def test_transform_kind_lookup(self) -> None:
        assert transform_kind_from_name("axial_sym") is TransformKind.AXIAL_SYM
        assert transform_kind_from_name("shear") is None
