"""Type definitions for patchwork.

This package contains the value types shared by every shape:
- geometry: Vec2 and BoundingBox
- color: RGB Color
- kinds: ShapeKind and TransformKind enumerations
"""

from patchwork.types.color import BLACK, WHITE, Color
from patchwork.types.geometry import (
    EMPTY_MAX,
    EMPTY_MIN,
    ORIGIN,
    BoundingBox,
    Vec2,
    dot,
    norm,
)
from patchwork.types.kinds import (
    RECORD_KINDS,
    ShapeKind,
    TransformKind,
    shape_kind_from_name,
    transform_kind_from_name,
)

__all__ = [
    "BLACK",
    "EMPTY_MAX",
    "EMPTY_MIN",
    "ORIGIN",
    "RECORD_KINDS",
    "WHITE",
    "BoundingBox",
    "Color",
    "ShapeKind",
    "TransformKind",
    "Vec2",
    "dot",
    "norm",
    "shape_kind_from_name",
    "transform_kind_from_name",
]
