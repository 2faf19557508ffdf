"""Best-effort decoding of scene text into shapes.

Each record keyword consumes a fixed number of tokens. A record with a
malformed or missing token is dropped: the problem is logged and reported
as a ParseIssue, and decoding picks up again at the next keyword.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from pydantic import ValidationError

from patchwork.codec import (
    ANNOTATION_KEYWORD,
    ParseIssue,
    TokenReader,
    parse_float,
    parse_int,
)
from patchwork.shapes.base import Shape
from patchwork.shapes.circle import Circle
from patchwork.shapes.ellipse import Ellipse
from patchwork.shapes.line import Line
from patchwork.shapes.polygon import Polygon
from patchwork.types import RECORD_KINDS, Color, ShapeKind, Vec2, shape_kind_from_name

logger = logging.getLogger(__name__)

KEYWORDS = frozenset([kind.value for kind in RECORD_KINDS] + [ANNOTATION_KEYWORD])


@dataclass(frozen=True)
class _Failure:
    """Why a record could not be built."""

    position: int
    token: str | None
    reason: str


@dataclass
class DecodedScene:
    """Result of decoding scene text."""

    shapes: list[Shape] = field(default_factory=list)
    annotation: str = ""
    issues: list[ParseIssue] = field(default_factory=list)


def _failure(reader: TokenReader, token: str | None, reason: str) -> _Failure:
    start = reader.position - len(token) if token is not None else reader.position
    return _Failure(position=start, token=token, reason=reason)


def _read_numbers(
    reader: TokenReader, count: int, parse: Callable[[str | None], float | int | None]
) -> list | _Failure:
    values = []
    for _ in range(count):
        token = reader.next_token()
        value = parse(token)
        if value is None:
            reason = "record ended early" if token is None else "expected a number"
            return _failure(reader, token, reason)
        values.append(value)
    return values


def _read_color(reader: TokenReader) -> Color | _Failure:
    channels = _read_numbers(reader, 3, parse_int)
    if isinstance(channels, _Failure):
        return channels
    r, g, b = channels
    try:
        return Color(r=r, g=g, b=b)
    except ValidationError:
        return _Failure(
            position=reader.position,
            token=f"{r} {g} {b}",
            reason="color channel outside 0..255",
        )


def _decode_circle(reader: TokenReader) -> Shape | _Failure:
    values = _read_numbers(reader, 3, parse_float)
    if isinstance(values, _Failure):
        return values
    color = _read_color(reader)
    if isinstance(color, _Failure):
        return color
    x, y, radius = values
    return Circle(origin=Vec2(x=x, y=y), radius=radius, color=color)


def _decode_polygon(reader: TokenReader) -> Shape | _Failure:
    count = _read_numbers(reader, 1, parse_int)
    if isinstance(count, _Failure):
        return count
    if count[0] < 0:
        return _failure(reader, str(count[0]), "negative point count")
    values = _read_numbers(reader, 2 * count[0], parse_float)
    if isinstance(values, _Failure):
        return values
    color = _read_color(reader)
    if isinstance(color, _Failure):
        return color
    points = [Vec2(x=values[i], y=values[i + 1]) for i in range(0, len(values), 2)]
    return Polygon(points=points, color=color)


def _decode_line(reader: TokenReader) -> Shape | _Failure:
    values = _read_numbers(reader, 4, parse_float)
    if isinstance(values, _Failure):
        return values
    color = _read_color(reader)
    if isinstance(color, _Failure):
        return color
    x, y, dx, dy = values
    return Line(point=Vec2(x=x, y=y), direction=Vec2(x=dx, y=dy), color=color)


def _decode_ellipse(reader: TokenReader) -> Shape | _Failure:
    values = _read_numbers(reader, 4, parse_float)
    if isinstance(values, _Failure):
        return values
    color = _read_color(reader)
    if isinstance(color, _Failure):
        return color
    x, y, rx, ry = values
    return Ellipse(origin=Vec2(x=x, y=y), radius=Vec2(x=rx, y=ry), color=color)


_DECODERS: dict[ShapeKind, Callable[[TokenReader], Shape | _Failure]] = {
    ShapeKind.CIRCLE: _decode_circle,
    ShapeKind.POLYGON: _decode_polygon,
    ShapeKind.LINE: _decode_line,
    ShapeKind.ELLIPSE: _decode_ellipse,
}


def _decode_annotation(reader: TokenReader, keyword: str) -> str | _Failure:
    """Read `<len> <text>` after an annotation marker.

    The text is read with a len + 2 buffer, i.e. up to len + 1 raw
    characters: the separating space plus the text. The separator is dropped.
    """
    if keyword != ANNOTATION_KEYWORD:
        logger.warning(f"Unknown keyword {keyword!r} read as an annotation marker")
    token = reader.next_token()
    length = parse_int(token)
    if length is None:
        reason = "record ended early" if token is None else "expected a number"
        return _failure(reader, token, reason)
    if length < 0:
        return _failure(reader, token, "negative annotation length")
    raw = reader.read_line(length + 2)
    if raw[:1].isspace():
        raw = raw[1:]
    return raw


def decode_scene(text: str) -> DecodedScene:
    """Decode scene text into shapes, the last annotation and any issues."""
    scene = DecodedScene()
    reader = TokenReader(text)

    while (keyword := reader.next_token()) is not None:
        start = reader.position - len(keyword)
        kind = shape_kind_from_name(keyword)

        result: Shape | str | _Failure
        if kind is None:
            result = _decode_annotation(reader, keyword)
        else:
            result = _DECODERS[kind](reader)

        if isinstance(result, _Failure):
            issue = ParseIssue(
                position=start, record=keyword, token=result.token, reason=result.reason
            )
            scene.issues.append(issue)
            logger.warning(
                f"Dropped {keyword} record at {start}: {result.reason}",
                extra={"record": keyword, "token": result.token, "position": start},
            )
            reader.position = result.position
            reader.skip_to(KEYWORDS)
        elif isinstance(result, str):
            scene.annotation = result
        else:
            scene.shapes.append(result)

    if scene.issues:
        logger.info(
            f"Decoded {len(scene.shapes)} shapes with {len(scene.issues)} dropped records"
        )
    return scene
