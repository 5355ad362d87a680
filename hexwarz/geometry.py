"""Plane geometry used to lay out hexes and detect which ones touch.

Coordinates follow screen conventions: x grows to the right and y grows
downwards.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

Point = tuple[float, float]

_UNIT_HEXAGON: tuple[Point, ...] = (
    (1, 0),
    (2, 0),
    (3, 1),
    (2, 2),
    (1, 2),
    (0, 1),
)

_EPS = 1e-9


def hexagon_points(scale: float) -> list[Point]:
    """Return the six corners of a flat-topped hexagon scaled by ``scale``."""
    return [(x * scale, y * scale) for x, y in _UNIT_HEXAGON]


def ray_end(origin: Point, length: float, angle_degrees: float) -> Point:
    """Return the end of a segment of ``length`` leaving ``origin``.

    The angle is measured counter-clockwise from the positive x axis, as seen
    on screen: 90 degrees points up (towards smaller y).
    """
    radians = math.radians(angle_degrees)
    ox, oy = origin
    return (ox + length * math.cos(radians), oy - length * math.sin(radians))


def _cross(o: Point, a: Point, b: Point) -> float:
    return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])


def _within_box(p: Point, a: Point, b: Point) -> bool:
    return (
        min(a[0], b[0]) - _EPS <= p[0] <= max(a[0], b[0]) + _EPS
        and min(a[1], b[1]) - _EPS <= p[1] <= max(a[1], b[1]) + _EPS
    )


def _sign(value: float) -> int:
    if value > _EPS:
        return 1
    if value < -_EPS:
        return -1
    return 0


def segments_intersect(a1: Point, a2: Point, b1: Point, b2: Point) -> bool:
    """Return True if segment a1-a2 and segment b1-b2 share at least one point."""
    d1 = _sign(_cross(b1, b2, a1))
    d2 = _sign(_cross(b1, b2, a2))
    d3 = _sign(_cross(a1, a2, b1))
    d4 = _sign(_cross(a1, a2, b2))

    if d1 * d2 < 0 and d3 * d4 < 0:
        return True

    return (
        (d1 == 0 and _within_box(a1, b1, b2))
        or (d2 == 0 and _within_box(a2, b1, b2))
        or (d3 == 0 and _within_box(b1, a1, a2))
        or (d4 == 0 and _within_box(b2, a1, a2))
    )


def _edges(polygon: Sequence[Point]):
    return zip(polygon, [*polygon[1:], polygon[0]])


def point_in_polygon(point: Point, polygon: Sequence[Point]) -> bool:
    """Return True if ``point`` lies inside ``polygon`` (even-odd rule)."""
    px, py = point
    inside = False
    for (x1, y1), (x2, y2) in _edges(polygon):
        if (y1 > py) != (y2 > py):
            x_cross = x1 + (py - y1) * (x2 - x1) / (y2 - y1)
            if px < x_cross:
                inside = not inside
    return inside


def segment_intersects_polygon(
    start: Point, end: Point, polygon: Sequence[Point]
) -> bool:
    """Return True if the segment touches the polygon's outline or lies inside it."""
    if not polygon:
        return False
    if point_in_polygon(start, polygon) or point_in_polygon(end, polygon):
        return True
    return any(segments_intersect(start, end, a, b) for a, b in _edges(polygon))