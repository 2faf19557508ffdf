"""Infinite line through a point."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import ClassVar

from patchwork.codec import encode_record, format_float
from patchwork.shapes.base import Shape
from patchwork.transforms import reflect_through, rotate_point, segment_pixels
from patchwork.types import BoundingBox, Color, ShapeKind, Vec2


@dataclass
class Line(Shape):
    """A line through point along direction.

    The line is infinite for transforms. It is drawn, and boxed, as the
    segment from point to point + direction.
    """

    kind: ClassVar[ShapeKind] = ShapeKind.LINE

    point: Vec2
    direction: Vec2
    color: Color

    def __str__(self) -> str:
        return f"Line\n\t{self.point} {self.direction} {self.color}"

    @property
    def end(self) -> Vec2:
        return self.point + self.direction

    def area(self) -> float:
        return 1.0

    def perimeter(self) -> float:
        return 1.0

    def translate(self, t: Vec2) -> None:
        self.point = self.point + t

    def homothety(self, ratio: float, origin: Vec2 | None = None) -> None:
        """No-op: scaling an infinite line is not supported."""

    def rotate(self, angle: float, origin: Vec2 | None = None) -> None:
        pivot = self.point if origin is None else origin
        end = rotate_point(self.end, angle, pivot)
        self.point = rotate_point(self.point, angle, pivot)
        self.direction = end - self.point

    def central_sym(self, center: Vec2) -> None:
        self.point = reflect_through(self.point, center)

    def axial_sym(self, line_point: Vec2, line_direction: Vec2) -> None:
        """No-op: mirroring a line across another line is not supported."""

    def bounding_box(self) -> BoundingBox:
        return BoundingBox.around([self.point, self.end])

    def serialize(self) -> str:
        return encode_record(
            self.kind.value,
            [
                format_float(self.point.x),
                format_float(self.point.y),
                format_float(self.direction.x),
                format_float(self.direction.y),
            ],
            self.color,
        )

    def pixels(self) -> Iterator[tuple[int, int]]:
        return segment_pixels(self.point, self.end)
