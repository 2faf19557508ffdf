"""Axis-aligned filled ellipse."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass
from typing import ClassVar

from patchwork.codec import encode_record, format_float
from patchwork.shapes.base import Shape
from patchwork.transforms import ellipse_offsets, reflect_across, reflect_through, scale_point
from patchwork.types import BoundingBox, Color, ShapeKind, Vec2


@dataclass
class Ellipse(Shape):
    """An ellipse with independent x and y radii.

    The axes always stay aligned with the coordinate axes, so rotation is
    not representable and both rotate forms do nothing.
    """

    kind: ClassVar[ShapeKind] = ShapeKind.ELLIPSE

    origin: Vec2
    radius: Vec2
    color: Color

    def __str__(self) -> str:
        return f"Ellipse\n\t{self.origin} {self.radius} {self.color}"

    def area(self) -> float:
        return math.pi * self.radius.x * self.radius.y

    def perimeter(self) -> float:
        """Ramanujan's second approximation."""
        rx, ry = self.radius.x, self.radius.y
        if rx + ry == 0:
            return 0.0
        h = (rx - ry) ** 2 / (rx + ry) ** 2
        return math.pi * (rx + ry) * (1 + (3 * h) / (10 + math.sqrt(4 - 3 * h)))

    def translate(self, t: Vec2) -> None:
        self.origin = self.origin + t

    def homothety(self, ratio: float, origin: Vec2 | None = None) -> None:
        if origin is not None:
            self.origin = scale_point(self.origin, ratio, origin)
        self.radius = ratio * self.radius

    def rotate(self, angle: float, origin: Vec2 | None = None) -> None:
        """No-op: a rotated ellipse cannot be represented."""

    def central_sym(self, center: Vec2) -> None:
        self.origin = reflect_through(self.origin, center)

    def axial_sym(self, line_point: Vec2, line_direction: Vec2) -> None:
        self.origin = reflect_across(self.origin, line_point, line_direction)

    def bounding_box(self) -> BoundingBox:
        rx, ry = abs(self.radius.x), abs(self.radius.y)
        box = BoundingBox()
        box.include(self.origin.x - rx, self.origin.y - ry)
        box.include(self.origin.x + rx, self.origin.y + ry)
        return box

    def serialize(self) -> str:
        return encode_record(
            self.kind.value,
            [
                format_float(self.origin.x),
                format_float(self.origin.y),
                format_float(self.radius.x),
                format_float(self.radius.y),
            ],
            self.color,
        )

    def pixels(self) -> Iterator[tuple[int, int]]:
        if not (math.isfinite(self.origin.x) and math.isfinite(self.origin.y)):
            return
        for i, j in ellipse_offsets(self.radius.x, self.radius.y):
            yield (int(self.origin.x + i), int(self.origin.y + j))
