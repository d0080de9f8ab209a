"""Clipping of a polygon by a convex polygon (Sutherland–Hodgman)."""

from __future__ import annotations

import math
from collections.abc import Sequence

from rastercut.convexclip import NotConvexError, is_convex

Point = tuple[float, float]

_EPSILON = 1.1920929e-07


def visibility(point: Point, begin: Point, end: Point) -> float:
    """Side of the line ``begin``-``end`` on which ``point`` lies: -1.0, 0.0 or 1.0."""
    res = (point[0] - begin[0]) * (end[1] - begin[1]) - (point[1] - begin[1]) * (
        end[0] - begin[0]
    )
    if abs(res) < _EPSILON:
        return 0.0
    return math.copysign(1.0, res)


def segments_cross(begin1: Point, end1: Point, begin2: Point, end2: Point) -> bool:
    """True if the ends of segment 1 lie strictly on opposite sides of line 2."""
    vis1 = visibility(begin1, begin2, end2)
    vis2 = visibility(end1, begin2, end2)
    return (vis1 < 0.0 and vis2 > 0.0) or (vis1 > 0.0 and vis2 < 0.0)


def cross_point(begin1: Point, end1: Point, begin2: Point, end2: Point) -> Point:
    """Intersection of the lines through two segments.

    Raises ValueError if the lines are parallel.
    """
    a = end1[0] - begin1[0]
    b = begin2[0] - end2[0]
    c = end1[1] - begin1[1]
    d = begin2[1] - end2[1]
    det = a * d - b * c
    if det == 0.0:
        raise ValueError("lines are parallel")
    r1 = begin2[0] - begin1[0]
    r2 = begin2[1] - begin1[1]
    t = (r1 * d - b * r2) / det
    return (begin1[0] + a * t, begin1[1] + c * t)


def clip_polygon_by(clipper: Sequence[Point], polygon: Sequence[Point]) -> list[Point]:
    """Clip ``polygon`` by each edge of ``clipper`` in turn.

    ``clipper`` is closed: its last vertex repeats the first. An empty list is
    returned when nothing of the polygon is left.
    """
    current = [(float(x), float(y)) for x, y in polygon]
    if not current:
        return []
    for w_start, w_end in zip(clipper, clipper[1:]):
        kept: list[Point] = []
        previous = current[-1]
        for point in current:
            if segments_cross(previous, point, w_start, w_end):
                kept.append(cross_point(previous, point, w_start, w_end))
            if visibility(point, w_start, w_end) <= 0.0:
                kept.append(point)
            previous = point
        if segments_cross(previous, current[0], w_start, w_end):
            kept.append(cross_point(previous, current[0], w_start, w_end))
        if not kept:
            return []
        current = kept
    return current


def clip_polygon(cutter: Sequence[Point], polygon: Sequence[Point]) -> list[Point]:
    """Clip ``polygon`` by the convex ``cutter``; the result is closed if not empty.

    Raises :class:`NotConvexError` if the cutter is too small or not convex.
    """
    if len(cutter) < 3:
        raise NotConvexError()
    vertices = [(float(x), float(y)) for x, y in cutter]
    if not is_convex(vertices):
        raise NotConvexError()
    (x0, y0), (x1, y1), (x2, y2) = vertices[0], vertices[1], vertices[2]
    orientation = (x0 - x1) * (y1 - y2) - (y0 - y1) * (x1 - x2)
    if not orientation > 0.0:
        vertices.reverse()
    vertices.append(vertices[0])
    result = clip_polygon_by(vertices, polygon)
    if result:
        result.append(result[0])
    return result