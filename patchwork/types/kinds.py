"""Shape and transform enumerations."""

from enum import Enum


class ShapeKind(str, Enum):
    """Kinds of shapes. The value doubles as the record keyword in scene text."""

    CIRCLE = "circle"
    POLYGON = "polygon"
    LINE = "line"
    ELLIPSE = "ellipse"
    IMAGE = "image"  # Composite, has no record of its own


class TransformKind(str, Enum):
    """Transform operations that can be named in a command."""

    ROTATE = "rotate"
    HOMOTHETY = "homothety"
    TRANSLATE = "translate"
    AXIAL_SYM = "axial_sym"
    CENTRAL_SYM = "central_sym"


# Shape kinds that are written as records in scene text
RECORD_KINDS: tuple[ShapeKind, ...] = (
    ShapeKind.CIRCLE,
    ShapeKind.POLYGON,
    ShapeKind.LINE,
    ShapeKind.ELLIPSE,
)


def shape_kind_from_name(name: str) -> ShapeKind | None:
    """Look up a record keyword, None if it is not a shape record."""
    for kind in RECORD_KINDS:
        if kind.value == name:
            return kind
    return None


def transform_kind_from_name(name: str) -> TransformKind | None:
    """Look up a transform by name, None if unknown."""
    try:
        return TransformKind(name)
    except ValueError:
        return None
