"""Core geometry types."""

from __future__ import annotations

import math
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict

# Sentinels for an empty bounding box: the first included point always
# replaces both bounds on each axis.
EMPTY_MIN = 2**31 - 1
EMPTY_MAX = -(2**31)


class Vec2(BaseModel):
    """A 2D vector, also used for points."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(x=self.x + other.x, y=self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(x=self.x - other.x, y=self.y - other.y)

    def __neg__(self) -> Vec2:
        return Vec2(x=-self.x, y=-self.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(x=self.x * scalar, y=self.y * scalar)

    def __rmul__(self, scalar: float) -> Vec2:
        return self.__mul__(scalar)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def norm(self) -> float:
        return math.sqrt(self.dot(self))

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


ORIGIN = Vec2(x=0.0, y=0.0)


def dot(a: Vec2, b: Vec2) -> float:
    """Dot product of two vectors."""
    return a.dot(b)


def norm(v: Vec2) -> float:
    """Euclidean length of a vector."""
    return v.norm()


@dataclass
class BoundingBox:
    """Axis-aligned integer extent of a shape.

    A fresh box is empty: its minimums sit at EMPTY_MIN and its maximums at
    EMPTY_MAX. Coordinates are truncated toward zero when included.

    Attributes:
        x_min: Left edge
        x_max: Right edge
        y_min: Top edge
        y_max: Bottom edge
    """

    x_min: int = EMPTY_MIN
    x_max: int = EMPTY_MAX
    y_min: int = EMPTY_MIN
    y_max: int = EMPTY_MAX

    @property
    def is_empty(self) -> bool:
        return self.x_min > self.x_max or self.y_min > self.y_max

    @property
    def width(self) -> int:
        return 0 if self.is_empty else self.x_max - self.x_min

    @property
    def height(self) -> int:
        return 0 if self.is_empty else self.y_max - self.y_min

    @property
    def center(self) -> Vec2:
        return Vec2(x=(self.x_min + self.x_max) / 2, y=(self.y_min + self.y_max) / 2)

    def include(self, x: float, y: float) -> None:
        """Grow the box to contain (x, y). Non-finite coordinates are ignored."""
        if not (math.isfinite(x) and math.isfinite(y)):
            return
        xi, yi = int(x), int(y)
        self.x_min = min(self.x_min, xi)
        self.x_max = max(self.x_max, xi)
        self.y_min = min(self.y_min, yi)
        self.y_max = max(self.y_max, yi)

    def merge(self, other: BoundingBox) -> None:
        """Grow the box to contain another box."""
        if other.is_empty:
            return
        self.x_min = min(self.x_min, other.x_min)
        self.x_max = max(self.x_max, other.x_max)
        self.y_min = min(self.y_min, other.y_min)
        self.y_max = max(self.y_max, other.y_max)

    @classmethod
    def around(cls, points: list[Vec2]) -> BoundingBox:
        """Box enclosing the given points (empty for no points)."""
        box = cls()
        for point in points:
            box.include(point.x, point.y)
        return box
