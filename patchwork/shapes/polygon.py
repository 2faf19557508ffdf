"""Filled polygon."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import ClassVar

from patchwork.codec import encode_record, format_float
from patchwork.shapes.base import Shape
from patchwork.transforms import (
    point_in_polygon,
    reflect_across,
    reflect_through,
    rotate_point,
    scale_point,
    triangle_area,
)
from patchwork.types import ORIGIN, BoundingBox, Color, ShapeKind, Vec2


@dataclass
class Polygon(Shape):
    """A closed polygon. Points are in boundary order, the last joins the first.

    At least three points are expected; fewer is not checked.
    """

    kind: ClassVar[ShapeKind] = ShapeKind.POLYGON

    points: list[Vec2]
    color: Color

    def __post_init__(self) -> None:
        self.points = list(self.points)

    def __str__(self) -> str:
        lines = ["Polygon", *(f"\t{p}" for p in self.points), f"\t{self.color}"]
        return "\n".join(lines)

    def area(self) -> float:
        """Fan triangulation from the first vertex.

        Exact when every fan triangle lies inside the polygon (convex, or
        star-shaped from points[0]); other polygons get an approximation.
        """
        first = self.points[0]
        return sum(
            triangle_area(first, a, b)
            for a, b in zip(self.points[1:-1], self.points[2:], strict=True)
        )

    def perimeter(self) -> float:
        closed = [*self.points[1:], self.points[0]]
        return sum((b - a).norm() for a, b in zip(self.points, closed, strict=True))

    def translate(self, t: Vec2) -> None:
        self.points = [p + t for p in self.points]

    def homothety(self, ratio: float, origin: Vec2 | None = None) -> None:
        if origin is None:
            origin = self.bounding_box().center
        self.points = [scale_point(p, ratio, origin) for p in self.points]

    def rotate(self, angle: float, origin: Vec2 | None = None) -> None:
        # Without an explicit origin the vertices turn about (0, 0), not the centre
        pivot = ORIGIN if origin is None else origin
        self.points = [rotate_point(p, angle, pivot) for p in self.points]

    def central_sym(self, center: Vec2) -> None:
        self.points = [reflect_through(p, center) for p in self.points]

    def axial_sym(self, line_point: Vec2, line_direction: Vec2) -> None:
        self.points = [reflect_across(p, line_point, line_direction) for p in self.points]

    def bounding_box(self) -> BoundingBox:
        return BoundingBox.around(self.points)

    def serialize(self) -> str:
        fields = [str(len(self.points))]
        for p in self.points:
            fields.append(format_float(p.x))
            fields.append(format_float(p.y))
        return encode_record(self.kind.value, fields, self.color)

    def pixels(self) -> Iterator[tuple[int, int]]:
        box = self.bounding_box()
        if box.is_empty:
            return
        vertices = [p.as_tuple() for p in self.points]
        for x in range(box.x_min - 1, box.x_max + 2):
            for y in range(box.y_min - 1, box.y_max + 2):
                if point_in_polygon(x, y, vertices):
                    yield (x, y)
