"""Clipping of segments by a convex polygon (Cyrus–Beck)."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from rastercut.errors import GraphicsError

Point = tuple[float, float]
Segment = tuple[Point, Point]


class NotConvexError(GraphicsError):
    """The clipping polygon is not convex or has too few vertices."""

    def __init__(self) -> None:
        super().__init__("Многоугольник не выпуклый")


def _sub(a: Point, b: Point) -> Point:
    return (a[0] - b[0], a[1] - b[1])


def _dot(a: Point, b: Point) -> float:
    return a[0] * b[0] + a[1] * b[1]


def _cross(a: Point, b: Point) -> float:
    return a[0] * b[1] - a[1] * b[0]


def _normal(a: Point, b: Point, towards: Point) -> Point:
    """Normal of edge ``a``-``b`` pointing to the side where ``towards`` lies."""
    fx, fy = _sub(b, a)
    norm = (1.0, -fx / fy) if fy != 0.0 else (0.0, 1.0)
    if _dot(_sub(towards, b), norm) < 0.0:
        norm = (-norm[0], -norm[1])
    return norm


def _rotations(vertices: Sequence[Point]):
    vertices = list(vertices)
    return vertices[-2:] + vertices[:-2], vertices[-1:] + vertices[:-1]


def is_convex(vertices: Sequence[Point]) -> bool:
    """Check that the polygon (without a repeated last vertex) is convex."""
    if len(vertices) < 3:
        return False
    first = _sub(vertices[0], vertices[1])
    second = _sub(vertices[1], vertices[2])
    sign = 1.0 if _cross(first, second) > 0.0 else -1.0
    before_prev, prev = _rotations(vertices)
    return all(
        sign * _cross(_sub(p2, p1), _sub(p1, cur)) >= 0.0
        for p2, p1, cur in zip(before_prev, prev, vertices)
    )


def clip_segment(polygon: Sequence[Point], segment: Segment) -> Segment | None:
    """Return the part of ``segment`` inside the convex ``polygon``, if any."""
    start, end = segment
    d = _sub(end, start)
    vertices = list(polygon)
    following = vertices[1:] + vertices[:1]
    after_next = vertices[2:] + vertices[:2]
    top, bottom = 0.0, 1.0
    for a, b, c in zip(vertices, following, after_next):
        norm = _normal(a, b, c)
        d_scal = _dot(d, norm)
        w_scal = _dot(_sub(start, a), norm)
        if d_scal == 0.0:
            if w_scal < 0.0:
                return None
            continue
        param = -w_scal / d_scal
        if d_scal > 0.0:
            if param > 1.0:
                return None
            top = max(top, param)
        else:
            if not param >= 0.0:
                return None
            bottom = min(bottom, param)
    if top > bottom:
        return None
    return (
        (start[0] + d[0] * top, start[1] + d[1] * top),
        (start[0] + d[0] * bottom, start[1] + d[1] * bottom),
    )


def clip_segments(polygon: Sequence[Point], lines: Iterable[Segment]) -> list[Segment]:
    """Clip ``lines`` by a closed polygon whose last vertex repeats the first.

    Raises :class:`NotConvexError` if the polygon is too small or not convex.
    """
    if len(polygon) < 3:
        raise NotConvexError()
    vertices = list(polygon)[:-1]
    if not is_convex(vertices):
        raise NotConvexError()
    return [part for part in (clip_segment(vertices, line) for line in lines) if part is not None]