"""Rasterisation of segments, circles and ellipses into pixel positions."""

from __future__ import annotations

import math

Point = tuple[float, float]

_SIGNS = ((1.0, 1.0), (-1.0, 1.0), (1.0, -1.0), (-1.0, -1.0))


def _round(value: float) -> float:
    """Round half away from zero."""
    return math.copysign(math.floor(abs(value) + 0.5), value)


def dda(start: Point, end: Point) -> list[Point]:
    """Pixels of the segment by the digital differential analyser.

    The end point itself is not included unless it equals the start.
    """
    start = (float(start[0]), float(start[1]))
    end = (float(end[0]), float(end[1]))
    if start == end:
        return [start]
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    length = max(abs(dx), abs(dy))
    step_x, step_y = dx / length, dy / length
    x, y = start
    pixels = []
    for _ in range(int(length)):
        pixels.append((_round(x), _round(y)))
        x += step_x
        y += step_y
    return pixels


def circle_pixels(center: Point, radius: float) -> list[Point]:
    """Pixels of a circle, computed for one octant and mirrored."""
    xc, yc = float(center[0]), float(center[1])
    sqr_radius = int(radius * radius)
    x_range = radius / math.sqrt(2.0) + 1.0
    pixels: list[Point] = []
    x = 0
    while x <= x_range:
        y = _round(math.sqrt(max(sqr_radius - x * x, 0)))
        for sx, sy in _SIGNS:
            pixels.append((xc + x * sx, yc + y * sy))
            pixels.append((xc + y * sy, yc + x * sx))
        x += 1
    return pixels


def ellipse_pixels(center: Point, radii: Point) -> list[Point]:
    """Pixels of an axis-aligned ellipse, computed for one quadrant and mirrored.

    Raises ValueError unless both semi-axes are positive.
    """
    a, b = float(radii[0]), float(radii[1])
    if not (a > 0.0 and b > 0.0):
        raise ValueError("ellipse semi-axes must be positive")
    xc, yc = float(center[0]), float(center[1])
    sqr_a, sqr_b = a * a, b * b
    hyp = math.sqrt(sqr_a + sqr_b)
    pixels: list[Point] = []

    def plot(x: float, y: float) -> None:
        for sx, sy in _SIGNS:
            pixels.append((xc + x * sx, yc + y * sy))

    coeff = b / a
    x_range = sqr_a / hyp + 1.0
    x = 0.0
    while x <= x_range:
        plot(x, _round(coeff * math.sqrt(max(sqr_a - x * x, 0.0))))
        x += 1.0

    coeff = a / b
    y_range = sqr_b / hyp + 1.0
    y = 0.0
    while y <= y_range:
        plot(_round(coeff * math.sqrt(max(sqr_b - y * y, 0.0))), y)
        y += 1.0

    return pixels