"""Clipping of segments by an axis-aligned rectangle using region codes."""

from __future__ import annotations

import math
from collections.abc import Iterable

Point = tuple[float, float]
Rect = tuple[Point, Point]
Segment = tuple[Point, Point]

TOP = 1
BOTTOM = 2
RIGHT = 4
LEFT = 8


def outcode(rect: Rect, point: Point) -> int:
    """Return the region code of ``point`` relative to ``rect``.

    ``rect`` is given by its top-left and bottom-right corners in screen
    coordinates, where ``y`` grows downwards.
    """
    left, right = rect
    x, y = point
    code = 0
    if x < left[0]:
        code |= LEFT
    if x > right[0]:
        code |= RIGHT
    if y > right[1]:
        code |= BOTTOM
    if y < left[1]:
        code |= TOP
    return code


def find_boundary_point(
    start: Point, end: Point, left: Point, right: Point
) -> Point | None:
    """Find where the line from ``start`` towards ``end`` enters the rectangle."""
    qx, qy = start
    slope = (end[1] - qy) / (end[0] - qx) if start[0] != end[0] else math.inf
    finite = math.isfinite(slope)

    if finite and left[0] >= qx:
        y = slope * (left[0] - qx) + qy
        if left[1] <= y <= right[1]:
            return (left[0], y)

    if finite and right[0] <= qx:
        y = slope * (right[0] - qx) + qy
        if left[1] <= y <= right[1]:
            return (right[0], y)

    if slope == 0.0:
        return None

    if left[1] >= qy:
        x = (left[1] - qy) / slope + qx
        if left[0] <= x <= right[0]:
            return (x, left[1])

    if right[1] <= qy:
        x = (right[1] - qy) / slope + qx
        if left[0] <= x <= right[0]:
            return (x, right[1])

    return None


def _clip(rect: Rect, segment: Segment) -> Segment | None:
    left, right = rect
    p1, p2 = segment
    code1, code2 = outcode(rect, p1), outcode(rect, p2)
    if code1 == 0 and code2 == 0:
        return (p1, p2)
    if code1 & code2:
        return None
    r1, r2 = p1, p2
    if code1:
        r1 = find_boundary_point(p1, p2, left, right)
        if r1 is None:
            return None
    if code2:
        r2 = find_boundary_point(p2, p1, left, right)
        if r2 is None:
            return None
    return (r1, r2)


def clip_segments(rect: Rect, lines: Iterable[Segment]) -> list[Segment]:
    """Return the visible parts of ``lines`` inside ``rect``, in order."""
    return [part for part in (_clip(rect, line) for line in lines) if part is not None]