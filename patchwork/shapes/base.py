"""Shape contract shared by primitives and images."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import ClassVar, Protocol

from patchwork.types import ORIGIN, BoundingBox, Color, ShapeKind, Vec2


class Surface(Protocol):
    """Pixel sink a shape can be rasterized onto."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def set_draw_color(self, color: Color) -> None: ...

    def draw_point(self, x: int, y: int) -> None: ...


class Shape(ABC):
    """A transformable, drawable, serializable 2D shape.

    Transforms mutate the shape in place. Angles are in radians. The kind
    is fixed per class and never changes.
    """

    kind: ClassVar[ShapeKind]
    color: Color

    @abstractmethod
    def area(self) -> float: ...

    @abstractmethod
    def perimeter(self) -> float: ...

    @abstractmethod
    def translate(self, t: Vec2) -> None: ...

    @abstractmethod
    def homothety(self, ratio: float, origin: Vec2 | None = None) -> None:
        """Scale by ratio about origin, or about the shape's own centre."""

    @abstractmethod
    def rotate(self, angle: float, origin: Vec2 | None = None) -> None:
        """Rotate about origin, or about the shape's intrinsic centre."""

    @abstractmethod
    def central_sym(self, center: Vec2) -> None: ...

    @abstractmethod
    def axial_sym(self, line_point: Vec2, line_direction: Vec2) -> None: ...

    @abstractmethod
    def bounding_box(self) -> BoundingBox: ...

    @abstractmethod
    def serialize(self) -> str:
        """Encode the shape as scene text."""

    @abstractmethod
    def pixels(self) -> Iterator[tuple[int, int]]:
        """World-space integer pixels covered by the shape."""

    def rasterize(self, surface: Surface, scale_ratio: float = 1.0) -> None:
        """Plot the shape with world (0, 0) at the surface centre.

        A ratio other than 1 draws a scaled copy; this shape is untouched.
        """
        if scale_ratio != 1.0:
            scaled = copy.deepcopy(self)
            scaled.homothety(scale_ratio, ORIGIN)
            scaled.rasterize(surface)
            return

        cx = surface.width // 2
        cy = surface.height // 2
        surface.set_draw_color(self.color)
        for x, y in self.pixels():
            surface.draw_point(cx + x, cy + y)
