"""Shapes: the primitives and the composite image.

- base: Shape contract and the Surface protocol
- circle, polygon, line, ellipse: primitives
- image: thread-safe composite
- records: scene text decoding
"""

from patchwork.shapes.base import Shape, Surface
from patchwork.shapes.circle import Circle
from patchwork.shapes.ellipse import Ellipse
from patchwork.shapes.image import Image
from patchwork.shapes.line import Line
from patchwork.shapes.polygon import Polygon
from patchwork.shapes.records import DecodedScene, decode_scene

__all__ = [
    "Circle",
    "DecodedScene",
    "Ellipse",
    "Image",
    "Line",
    "Polygon",
    "Shape",
    "Surface",
    "decode_scene",
]
