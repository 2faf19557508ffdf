"""Pure functions for point transforms and pixel scanning.

Every shape builds its transforms out of these helpers. They take and
return values only. No side effects or I/O.
"""

import math
from collections.abc import Iterator

from patchwork.types import ORIGIN, Vec2


def translate_point(p: Vec2, t: Vec2) -> Vec2:
    """Shift a point by t."""
    return p + t


def scale_point(p: Vec2, ratio: float, origin: Vec2 = ORIGIN) -> Vec2:
    """Homothety of a point: origin + ratio * (p - origin)."""
    return origin + ratio * (p - origin)


def rotate_point(p: Vec2, angle: float, origin: Vec2 = ORIGIN) -> Vec2:
    """Rotate a point by angle radians about origin."""
    s = math.sin(angle)
    c = math.cos(angle)
    dx = p.x - origin.x
    dy = p.y - origin.y
    return Vec2(x=dx * c - dy * s + origin.x, y=dx * s + dy * c + origin.y)


def reflect_through(p: Vec2, center: Vec2) -> Vec2:
    """Point reflection of p through center."""
    return p + 2 * (center - p)


def project_on_line(p: Vec2, line_point: Vec2, line_direction: Vec2) -> Vec2 | None:
    """Orthogonal projection of p on a line, None for a zero direction."""
    denom = line_direction.dot(line_direction)
    if denom == 0:
        return None
    b = (p - line_point).dot(line_direction) / denom
    return line_point + b * line_direction


def reflect_across(p: Vec2, line_point: Vec2, line_direction: Vec2) -> Vec2:
    """Mirror p across the line through line_point along line_direction.

    A zero direction does not define a line; p is returned unchanged.
    """
    intersection = project_on_line(p, line_point, line_direction)
    if intersection is None:
        return p
    return p + 2 * (intersection - p)


def triangle_area(a: Vec2, b: Vec2, c: Vec2) -> float:
    """Unsigned area of a triangle from the 2D cross product."""
    return 0.5 * abs((b.x - a.x) * (c.y - a.y) - (c.x - a.x) * (b.y - a.y))


def point_in_polygon(x: float, y: float, vertices: list[tuple[float, float]]) -> bool:
    """Ray casting test: odd number of edge crossings means inside.

    An edge counts when it straddles the point's row and the crossing lies
    at or to the right of the point.
    """
    inside = False
    n = len(vertices)
    j = n - 1
    for i in range(n):
        xi, yi = vertices[i]
        xj, yj = vertices[j]
        if (yi >= y) != (yj >= y) and x <= (xj - xi) * (y - yi) / (yj - yi) + xi:
            inside = not inside
        j = i
    return inside


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation between two values."""
    return a + (b - a) * t


def segment_pixels(start: Vec2, end: Vec2) -> Iterator[tuple[int, int]]:
    """Integer pixels along a segment (DDA, one sample per major-axis step)."""
    if not all(math.isfinite(v) for v in (start.x, start.y, end.x, end.y)):
        return
    x0, y0 = int(start.x), int(start.y)
    x1, y1 = int(end.x), int(end.y)
    steps = max(abs(x1 - x0), abs(y1 - y0))
    if steps == 0:
        yield (x0, y0)
        return
    for i in range(steps + 1):
        t = i / steps
        yield (round(lerp(x0, x1, t)), round(lerp(y0, y1, t)))


def ellipse_offsets(rx: float, ry: float) -> Iterator[tuple[int, int]]:
    """Integer offsets (i, j) inside an axis-aligned ellipse centred on 0.

    A circle is the rx == ry case.
    """
    rx, ry = abs(rx), abs(ry)
    if not (math.isfinite(rx) and math.isfinite(ry)):
        return
    nx, ny = int(rx), int(ry)
    limit = rx * rx * ry * ry
    for i in range(-nx, nx + 1):
        for j in range(-ny, ny + 1):
            if j * j * rx * rx + i * i * ry * ry <= limit:
                yield (i, j)
