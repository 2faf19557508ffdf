"""Composite shape: an image owns an ordered list of child shapes."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from threading import Lock
from typing import ClassVar

from patchwork.codec import ParseIssue, encode_annotation
from patchwork.shapes.base import Shape, Surface
from patchwork.shapes.records import decode_scene
from patchwork.types import BLACK, ORIGIN, BoundingBox, Color, ShapeKind, Vec2

logger = logging.getLogger(__name__)


class Image(Shape):
    """Thread-safe container of shapes, itself a shape.

    Children, including nested images, belong to the image once added.
    Every read or write of the child list and annotation holds the image's
    lock for the whole operation. Nested images lock themselves.

    Images cannot be copied with the copy module; use clone(), which goes
    through scene text.

    Example:
        image = Image()
        image.add_component(Circle(origin=Vec2(x=0, y=0), radius=10, color=RED))
        image.rotate(math.pi / 2, Vec2(x=5, y=5))
        text = image.serialize()
    """

    kind: ClassVar[ShapeKind] = ShapeKind.IMAGE

    def __init__(
        self,
        origin: Vec2 = ORIGIN,
        annotation: str = "",
        color: Color = BLACK,
    ) -> None:
        self.color = color
        self._origin = origin
        self._annotation = annotation
        self._components: list[Shape] = []
        self._lock = Lock()

    def __copy__(self) -> Image:
        raise TypeError("Image cannot be copied, use Image.clone()")

    def __deepcopy__(self, memo: dict) -> Image:
        raise TypeError("Image cannot be copied, use Image.clone()")

    def __len__(self) -> int:
        with self._lock:
            return len(self._components)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self.components)

    def __str__(self) -> str:
        with self._lock:
            parts = [f"Image {self._origin} {self._annotation!r}"]
            parts.extend(str(child) for child in self._components)
        return "\n".join(parts)

    # -------------------------------------------------------------------------
    # Children, annotation and frame
    # -------------------------------------------------------------------------

    @property
    def components(self) -> list[Shape]:
        """Snapshot of the children in insertion order."""
        with self._lock:
            return list(self._components)

    def add_component(self, shape: Shape) -> None:
        """Take ownership of shape, moving it into this image's frame."""
        if shape is self or (isinstance(shape, Image) and shape._contains(self)):
            raise ValueError("An image cannot contain itself")
        with self._lock:
            shape.translate(self._origin)
            self._components.append(shape)

    def _contains(self, image: Image) -> bool:
        """True if image is a descendant. Locks one image at a time."""
        for child in self.components:
            if child is image or (isinstance(child, Image) and child._contains(image)):
                return True
        return False

    @property
    def annotation(self) -> str:
        with self._lock:
            return self._annotation

    @annotation.setter
    def annotation(self, text: str) -> None:
        self.annotate(text)

    def annotate(self, text: str) -> None:
        with self._lock:
            self._annotation = text

    @property
    def origin(self) -> Vec2:
        with self._lock:
            return self._origin

    @origin.setter
    def origin(self, new_origin: Vec2) -> None:
        self.move_origin(new_origin)

    def move_origin(self, new_origin: Vec2) -> None:
        """Move the frame; children follow by the same offset."""
        with self._lock:
            delta = new_origin - self._origin
            for child in self._components:
                child.translate(delta)
            self._origin = new_origin

    # -------------------------------------------------------------------------
    # Shape contract
    # -------------------------------------------------------------------------

    def _bounding_box_locked(self) -> BoundingBox:
        box = BoundingBox()
        for child in self._components:
            box.merge(child.bounding_box())
        return box

    def bounding_box(self) -> BoundingBox:
        with self._lock:
            return self._bounding_box_locked()

    def area(self) -> float:
        """Area of the aggregate bounding box, not the sum of the children."""
        box = self.bounding_box()
        return float(box.width * box.height)

    def perimeter(self) -> float:
        """Perimeter of the aggregate bounding box."""
        box = self.bounding_box()
        if box.is_empty:
            return 0.0
        return float(2 * (box.width + box.height))

    def translate(self, t: Vec2) -> None:
        """Shift every child and the frame, so later additions land alongside."""
        with self._lock:
            self._origin = self._origin + t
            for child in self._components:
                child.translate(t)

    def homothety(self, ratio: float, origin: Vec2 | None = None) -> None:
        with self._lock:
            for child in self._components:
                child.homothety(ratio, origin)

    def rotate(self, angle: float, origin: Vec2 | None = None) -> None:
        with self._lock:
            for child in self._components:
                child.rotate(angle, origin)

    def central_sym(self, center: Vec2) -> None:
        with self._lock:
            for child in self._components:
                child.central_sym(center)

    def axial_sym(self, line_point: Vec2, line_direction: Vec2) -> None:
        with self._lock:
            for child in self._components:
                child.axial_sym(line_point, line_direction)

    def pixels(self) -> Iterator[tuple[int, int]]:
        with self._lock:
            children = list(self._components)
        for child in children:
            yield from child.pixels()

    def rasterize(self, surface: Surface, scale_ratio: float = 1.0) -> None:
        with self._lock:
            for child in self._components:
                child.rasterize(surface, scale_ratio)

    # -------------------------------------------------------------------------
    # Display
    # -------------------------------------------------------------------------

    def fit_ratio(self, width: int, height: int) -> float:
        """Uniform scale that fits the image on a width x height surface.

        World (0, 0) sits at the surface centre, so the extent on each axis
        is the box edge farthest from it. Never more than 1.
        """
        box = self.bounding_box()
        return _fit_ratio(box, width, height)

    def display(self, surface: Surface) -> float:
        """Draw every child, shrunk uniformly if the image would overflow.

        Returns the ratio used.
        """
        with self._lock:
            box = self._bounding_box_locked()
            if box.is_empty:
                return 1.0
            final_ratio = _fit_ratio(box, surface.width, surface.height)
            if final_ratio < 1.0:
                logger.debug(
                    f"Scaling image by {final_ratio:.3f} to fit "
                    f"{surface.width}x{surface.height}"
                )
            for child in self._components:
                child.rasterize(surface, final_ratio)
        return final_ratio

    # -------------------------------------------------------------------------
    # Scene text
    # -------------------------------------------------------------------------

    def _records_locked(self) -> list[str]:
        records: list[str] = []
        for child in self._components:
            if isinstance(child, Image):
                records.extend(child.serialize_components())
            else:
                records.append(child.serialize())
        return records

    def serialize_components(self) -> list[str]:
        """Records of every primitive, nested images flattened in order."""
        with self._lock:
            return self._records_locked()

    def serialize(self) -> str:
        """All child records followed by the annotation trailer."""
        with self._lock:
            records = self._records_locked()
            records.append(encode_annotation(self._annotation))
        return " ".join(records)

    def deserialize(self, text: str) -> list[ParseIssue]:
        """Replace all children and the annotation with decoded scene text.

        Coordinates are taken as absolute; the origin is not applied. Decoding
        is best-effort: dropped records are returned, never raised.
        """
        scene = decode_scene(text)
        with self._lock:
            self._components = scene.shapes
            self._annotation = scene.annotation
        logger.debug(f"Deserialized {len(scene.shapes)} shapes")
        return scene.issues

    def clone(self) -> Image:
        """Independent copy built from this image's scene text."""
        text = self.serialize()
        with self._lock:
            duplicate = Image(origin=self._origin, color=self.color)
        duplicate.deserialize(text)
        return duplicate


def _fit_ratio(box: BoundingBox, width: int, height: int) -> float:
    if box.is_empty:
        return 1.0
    extent_x = max(abs(box.x_min), abs(box.x_max))
    extent_y = max(abs(box.y_min), abs(box.y_max))
    width_ratio = (width / 2) / extent_x if extent_x else float("inf")
    height_ratio = (height / 2) / extent_y if extent_y else float("inf")
    if width_ratio < 1.0 or height_ratio < 1.0:
        return min(width_ratio, height_ratio)
    return 1.0
