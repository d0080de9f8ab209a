"""State of the scan-line polygon filling tool."""

from __future__ import annotations

import math

from rastercut.errors import GraphicsError, parse_unsigned
from rastercut.scanline import Color, Point, ScanlineCanvas

WHITE: Color = (255, 255, 255)
RED: Color = (255, 0, 0)

DEGENERATE = "Вырожденный многоугольник"
NOTHING_TO_CLOSE = "Нечего замкнуть"
NOT_CLOSED = "Фигура не замкнута!"

SNAP_DISTANCE = 2.0
CLOSE_RADIUS_SQUARED = 100.0


def _round(value: float) -> float:
    """Round half away from zero."""
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _slope(x1: float, y1: float, x2: float, y2: float) -> float:
    """Slope with the IEEE results for a zero run: ±inf, or NaN for 0/0."""
    rise = y2 - y1
    run = x2 - x1
    if run == 0.0:
        if rise == 0.0:
            return math.nan
        return math.copysign(math.inf, rise) * math.copysign(1.0, run)
    return rise / run


def are_collinear(
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    x3: float,
    y3: float,
    x4: float,
    y4: float,
) -> bool:
    """True if segment 1-2 and segment 3-4 have the same slope."""
    slope1 = _slope(x1, y1, x2, y2)
    slope2 = _slope(x3, y3, x4, y4)
    return slope1 == slope2 or (math.isinf(slope1) and math.isinf(slope2))


class ScanlineApp:
    """Figures entered by clicks or text fields and filled by scan lines."""

    def __init__(self, background: Color = WHITE, stroke: Color = RED) -> None:
        self.background: Color = tuple(background)
        self.canvas = ScanlineCanvas()
        self.stroke = stroke
        self.timeout = False
        self.duration = 0.0

    @property
    def stroke(self) -> Color:
        return self._stroke

    @stroke.setter
    def stroke(self, color: Color) -> None:
        self._stroke = tuple(color)
        self.canvas.set_color(self._stroke)

    def _open_count(self) -> int:
        return len(self.canvas.points) - self.canvas.last_closed

    def click(self, position: Point, shift: bool = False) -> None:
        """Add a vertex at a clicked position, snapping it to nearby vertices.

        ``shift`` makes the new edge horizontal or vertical.
        """
        px, py = _round(float(position[0])), _round(float(position[1]))
        points = self.canvas.points
        if points:
            last = points[-1]
            first = self.canvas.last_closed_point()
            if first is not None:
                if abs(last[0] - px) <= SNAP_DISTANCE:
                    px = last[0]
                if abs(last[1] - py) <= SNAP_DISTANCE:
                    py = last[1]
                if (first[0] - px) ** 2 + (first[1] - py) ** 2 <= CLOSE_RADIUS_SQUARED:
                    px, py = first
            if shift:
                dx = abs(last[0] - px)
                dy = abs(last[1] - py)
                if dy > dx:
                    px = last[0]
                else:
                    py = last[1]
        point = (_round(px), _round(py))
        if self._open_count() > 2:
            (x1, y1), (x2, y2), (x3, y3) = points[-1], points[-2], points[-3]
            if are_collinear(x1, y1, x2, y2, x3, y3, *point):
                raise GraphicsError(DEGENERATE)
        self.canvas.add_point(point)

    def add_point(self, x_text: str, y_text: str) -> None:
        """Add a vertex from text fields."""
        x = float(parse_unsigned(x_text, 32))
        y = float(parse_unsigned(y_text, 32))
        points = self.canvas.points
        if self._open_count() > 2:
            (x1, y1), (x2, y2) = points[-1], points[-2]
            x3, y3 = points[-2]
            if are_collinear(x1, y1, x2, y2, x3, y3, x, y):
                raise GraphicsError(DEGENERATE)
        self.canvas.add_point((x, y))

    def close_figure(self) -> None:
        """Close the figure being drawn."""
        points = self.canvas.points
        if self._open_count() > 2:
            (x1, y1), (x2, y2), (x3, y3) = points[-1], points[-2], points[-3]
            if are_collinear(x1, y1, x2, y2, x3, y3, x1, y1):
                raise GraphicsError(DEGENERATE)
        if not self.canvas.close():
            raise GraphicsError(NOTHING_TO_CLOSE)

    def clear_figure(self) -> None:
        """Remove all figures and the fill."""
        self.duration = 0.0
        self.canvas.clear()

    def clean_figure(self) -> None:
        """Remove the fill, keeping the figures."""
        self.duration = 0.0
        self.canvas.clean()

    def _set_duration(self, seconds: float) -> None:
        self.duration = seconds

    def fill_figure(self, delay_text: str = "") -> float:
        """Refill all closed figures; return the seconds the fill took.

        The delay in milliseconds between strings is used only when
        ``timeout`` is set and the text is not empty.
        """
        self.clean_figure()
        if self.canvas.is_closed():
            raise GraphicsError(NOT_CLOSED)
        delay = 0
        if self.timeout and delay_text:
            delay = parse_unsigned(delay_text, 64)
        self.duration = self.canvas.fill(delay, self._set_duration)
        return self.duration