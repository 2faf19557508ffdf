"""Patchwork: 2D shapes that transform, rasterize and serialize.

Usage:

    from patchwork import Circle, Color, Image, Polygon, Vec2

    image = Image(annotation="demo")
    image.add_component(Circle(origin=Vec2(x=0, y=0), radius=50, color=Color(r=255, g=0, b=0)))
    image.rotate(0.5, Vec2(x=10, y=10))
    text = image.serialize()
"""

from patchwork.codec import ParseIssue, format_float
from patchwork.commands import CommandError, TransformCommand, apply_command, parse_command
from patchwork.shapes import (
    Circle,
    Ellipse,
    Image,
    Line,
    Polygon,
    Shape,
    Surface,
    decode_scene,
)
from patchwork.types import (
    BoundingBox,
    Color,
    ShapeKind,
    TransformKind,
    Vec2,
)

__all__ = [
    "BoundingBox",
    "Circle",
    "Color",
    "CommandError",
    "Ellipse",
    "Image",
    "Line",
    "ParseIssue",
    "Polygon",
    "Shape",
    "ShapeKind",
    "Surface",
    "TransformCommand",
    "TransformKind",
    "Vec2",
    "apply_command",
    "decode_scene",
    "format_float",
    "parse_command",
]

__version__ = "1.0.0"
