"""Filled circle."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass
from typing import ClassVar

from patchwork.codec import encode_record, format_float
from patchwork.shapes.base import Shape
from patchwork.transforms import (
    ellipse_offsets,
    reflect_across,
    reflect_through,
    rotate_point,
    scale_point,
)
from patchwork.types import BoundingBox, Color, ShapeKind, Vec2


@dataclass
class Circle(Shape):
    """A circle given by its centre and radius.

    The radius goes negative under a homothety with a negative ratio. That
    is allowed: the circle looks the same.
    """

    kind: ClassVar[ShapeKind] = ShapeKind.CIRCLE

    origin: Vec2
    radius: float
    color: Color

    def __str__(self) -> str:
        return f"Circle\n\t{self.origin} {self.radius} {self.color}"

    def area(self) -> float:
        return math.pi * self.radius * self.radius

    def perimeter(self) -> float:
        return 2 * math.pi * self.radius

    def translate(self, t: Vec2) -> None:
        self.origin = self.origin + t

    def homothety(self, ratio: float, origin: Vec2 | None = None) -> None:
        if origin is not None:
            self.origin = scale_point(self.origin, ratio, origin)
        self.radius *= ratio

    def rotate(self, angle: float, origin: Vec2 | None = None) -> None:
        # Rotating about its own centre changes nothing
        if origin is not None:
            self.origin = rotate_point(self.origin, angle, origin)

    def central_sym(self, center: Vec2) -> None:
        self.origin = reflect_through(self.origin, center)

    def axial_sym(self, line_point: Vec2, line_direction: Vec2) -> None:
        self.origin = reflect_across(self.origin, line_point, line_direction)

    def bounding_box(self) -> BoundingBox:
        r = abs(self.radius)
        box = BoundingBox()
        box.include(self.origin.x - r, self.origin.y - r)
        box.include(self.origin.x + r, self.origin.y + r)
        return box

    def serialize(self) -> str:
        return encode_record(
            self.kind.value,
            [format_float(self.origin.x), format_float(self.origin.y), format_float(self.radius)],
            self.color,
        )

    def pixels(self) -> Iterator[tuple[int, int]]:
        if not (math.isfinite(self.origin.x) and math.isfinite(self.origin.y)):
            return
        for i, j in ellipse_offsets(self.radius, self.radius):
            yield (int(self.origin.x + i), int(self.origin.y + j))
