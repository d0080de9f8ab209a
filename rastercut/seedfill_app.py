"""State of the seed-fill tool: outlines of polylines, circles and ellipses."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, auto

from rastercut.errors import GraphicsError, parse_unsigned
from rastercut.seedfill import Color, Point, SeedCanvas

WHITE: Color = (255, 255, 255)
RED: Color = (255, 0, 0)
BLACK: Color = (0, 0, 0)

SEED_ON_BORDER = "Затравочный пиксель должен быть внутри области"
NO_SEED = "Не указана затравка"

_U32_MAX = 0xFFFFFFFF


def _round(value: float) -> float:
    """Round half away from zero."""
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _to_u32(value: float) -> int:
    """Truncate to an unsigned 32-bit integer, saturating at the range ends."""
    if not value > 0:
        return 0
    if value >= _U32_MAX:
        return _U32_MAX
    return int(value)


class DrawMode(Enum):
    """What a click on the canvas draws."""

    LINE = auto()
    ELLIPSE = auto()
    CIRCLE = auto()


@dataclass
class _Pending:
    """First click of a two-click shape."""

    center: Point | None = None


class SeedFillApp:
    """Outlines drawn by clicks or text fields and filled from a seed pixel."""

    def __init__(
        self,
        background: Color = WHITE,
        stroke: Color = RED,
        border_color: Color = BLACK,
    ) -> None:
        self.canvas = SeedCanvas(background)
        self.stroke: Color = tuple(stroke)
        self.border_color: Color = tuple(border_color)
        self.mode = DrawMode.LINE
        self.seed: Point | None = None
        self.timeout = False
        self.recursive = False
        self.duration = 0.0
        self._ellipse = _Pending()
        self._circle = _Pending()

    @property
    def background(self) -> Color:
        return self.canvas.background

    @background.setter
    def background(self, color: Color) -> None:
        self.canvas.background = tuple(color)

    @property
    def pending_center(self) -> Point | None:
        """Centre chosen by the first click of the current shape mode, if any."""
        if self.mode is DrawMode.ELLIPSE:
            return self._ellipse.center
        if self.mode is DrawMode.CIRCLE:
            return self._circle.center
        return None

    def click(self, position: Point, shift: bool = False) -> None:
        """Handle a click on the canvas according to the drawing mode.

        In line mode a vertex is added (``shift`` makes the edge horizontal or
        vertical); in circle and ellipse mode the first click chooses the
        centre and the second one the size.
        """
        px, py = _round(float(position[0])), _round(float(position[1]))
        if self.mode is DrawMode.LINE:
            last = self.canvas.last_closed_point()
            if last == (px, py):
                return
            if last is not None and shift:
                dx = abs(last[0] - px)
                dy = abs(last[1] - py)
                if dy > dx:
                    px = last[0]
                else:
                    py = last[1]
            self.canvas.add_point((_round(px), _round(py)), self.border_color)
        elif self.mode is DrawMode.ELLIPSE:
            center = self._ellipse.center
            if center is None:
                self._ellipse.center = (px, py)
                return
            self._ellipse.center = None
            radii = (abs(center[0] - px), abs(center[1] - py))
            self.canvas.add_ellipse(center, radii, self.border_color)
        else:
            center = self._circle.center
            if center is None:
                self._circle.center = (px, py)
                return
            self._circle.center = None
            radius = max(_to_u32(abs(center[0] - px)), _to_u32(abs(center[1] - py)))
            self.canvas.add_circle(center, float(radius), self.border_color)

    def middle_click(self, position: Point) -> None:
        """Put the seed pixel at a clicked position."""
        x = _to_u32(_round(float(position[0])))
        y = _to_u32(_round(float(position[1])))
        self.set_seed_pos(x, y)

    def add_point(self, x_text: str, y_text: str) -> None:
        """Add a polyline vertex from text fields."""
        x = parse_unsigned(x_text, 32)
        y = parse_unsigned(y_text, 32)
        self.canvas.add_point((float(x), float(y)), self.border_color)

    def add_circle(self, x_text: str, y_text: str, radius_text: str) -> None:
        """Add a circle from text fields."""
        x = parse_unsigned(x_text, 32)
        y = parse_unsigned(y_text, 32)
        radius = parse_unsigned(radius_text, 32)
        self.canvas.add_circle((float(x), float(y)), float(radius), self.border_color)

    def add_ellipse(self, x_text: str, y_text: str, rx_text: str, ry_text: str) -> None:
        """Add an ellipse from text fields; both semi-axes must be positive."""
        x = parse_unsigned(x_text, 32)
        y = parse_unsigned(y_text, 32)
        rx = parse_unsigned(rx_text, 32)
        ry = parse_unsigned(ry_text, 32)
        self.canvas.add_ellipse(
            (float(x), float(y)), (float(rx), float(ry)), self.border_color
        )

    def close_figure(self) -> None:
        """Join the current polyline back to its first vertex, if it can be."""
        self.canvas.close()

    def set_seed(self, x_text: str, y_text: str) -> None:
        """Set the seed pixel from text fields."""
        x = parse_unsigned(x_text, 32)
        y = parse_unsigned(y_text, 32)
        self.set_seed_pos(x, y)

    def set_seed_pos(self, x: int, y: int) -> None:
        """Set the seed pixel; it must not lie on a border pixel."""
        if self.canvas.at(x, y) == self.border_color:
            raise GraphicsError(SEED_ON_BORDER)
        self.seed = (float(x), float(y))

    def clear_figure(self) -> None:
        """Remove all outlines and the fill."""
        self.duration = 0.0
        self.canvas.clear()

    def clean_figure(self) -> None:
        """Remove the fill, keeping the outlines."""
        self.duration = 0.0
        self.canvas.clean()

    def _set_duration(self, seconds: float) -> None:
        self.duration = seconds

    def fill_figure(self, delay_text: str = "") -> float:
        """Fill from the seed pixel; return the seconds the fill took.

        The delay in milliseconds between spans is used only when ``timeout``
        is set and the text is not empty.
        """
        delay = 0
        if self.timeout and delay_text:
            delay = parse_unsigned(delay_text, 64)
        if self.seed is None:
            raise GraphicsError(NO_SEED)
        self.duration = self.canvas.fill(
            self.seed,
            self.stroke,
            self.border_color,
            delay,
            self.recursive,
            self._set_duration,
        )
        return self.duration