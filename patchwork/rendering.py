"""Pillow-backed rendering of shapes.

This module provides the pixel surface shapes rasterize onto and a single
entry point for turning a shape into a PIL image, PNG bytes or base64.
"""

from __future__ import annotations

import asyncio
import base64
import io
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from PIL import Image as PILImage
from PIL import ImageDraw

from patchwork.shapes import Image, Shape
from patchwork.types import BLACK, WHITE, Color

if TYPE_CHECKING:
    from patchwork.config import Settings

logger = logging.getLogger(__name__)


class PillowSurface:
    """A Surface drawing single pixels into an RGB PIL image.

    Points outside the image are dropped.
    """

    def __init__(self, width: int, height: int, background: Color = WHITE) -> None:
        self.image = PILImage.new("RGB", (width, height), background.as_tuple())
        self._draw = ImageDraw.Draw(self.image)
        self._fill: tuple[int, int, int] = BLACK.as_tuple()
        self.points_drawn = 0

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    def set_draw_color(self, color: Color) -> None:
        self._fill = color.as_tuple()

    def draw_point(self, x: int, y: int) -> None:
        if 0 <= x < self.image.width and 0 <= y < self.image.height:
            self._draw.point((x, y), fill=self._fill)
            self.points_drawn += 1

    def get_color(self, x: int, y: int) -> Color:
        """Color of a pixel, mostly useful in tests."""
        r, g, b = self.image.getpixel((x, y))
        return Color(r=r, g=g, b=b)


@dataclass(frozen=True)
class RenderOptions:
    """Configuration for shape rendering.

    Attributes:
        width: Output image width in pixels
        height: Output image height in pixels
        background_color: Background as a Color or #rrggbb string
        fit: Shrink images that would overflow (Image.display); otherwise
            rasterize at ratio 1 and let pixels fall off the edge
        output_format: Return type - "image" (PIL), "bytes", or "base64"
        optimize_png: Enable PNG optimization (slower but smaller)
    """

    width: int = 800
    height: int = 600
    background_color: Color | str = WHITE
    fit: bool = True
    output_format: Literal["image", "bytes", "base64"] = "bytes"
    optimize_png: bool = False

    def _parse_background(self) -> Color:
        """Parse background_color to a Color."""
        if isinstance(self.background_color, Color):
            return self.background_color
        return Color.from_hex(self.background_color)


def render_shape(
    shape: Shape,
    options: RenderOptions | None = None,
) -> PILImage.Image | bytes | str:
    """Render a shape (or a whole image) to a picture.

    Args:
        shape: Shape to draw; world (0, 0) lands on the picture centre
        options: Render configuration (uses defaults if None)

    Returns:
        PIL Image, PNG bytes, or base64 string depending on options.output_format
    """
    if options is None:
        options = RenderOptions()

    surface = PillowSurface(options.width, options.height, options._parse_background())
    if options.fit and isinstance(shape, Image):
        ratio = shape.display(surface)
    else:
        ratio = 1.0
        shape.rasterize(surface)
    logger.info(
        f"Rendered {shape.kind.value} at {options.width}x{options.height}",
        extra={"ratio": ratio, "points": surface.points_drawn},
    )

    if options.output_format == "image":
        return surface.image

    buffer = io.BytesIO()
    surface.image.save(buffer, format="PNG", optimize=options.optimize_png)
    png_bytes = buffer.getvalue()

    if options.output_format == "base64":
        return base64.standard_b64encode(png_bytes).decode("utf-8")

    return png_bytes


async def render_shape_async(
    shape: Shape,
    options: RenderOptions | None = None,
) -> PILImage.Image | bytes | str:
    """Async wrapper for render_shape (runs in thread pool)."""
    return await asyncio.to_thread(render_shape, shape, options)


def options_from_settings(
    settings: Settings,
    output_format: Literal["image", "bytes", "base64"] = "bytes",
) -> RenderOptions:
    """Options sized and colored from application settings."""
    return RenderOptions(
        width=settings.surface_width,
        height=settings.surface_height,
        background_color=settings.background_color,
        output_format=output_format,
    )
