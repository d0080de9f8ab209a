"""Pixel canvas with outlines and seed fills by spans."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterator

from rastercut.raster import circle_pixels, dda, ellipse_pixels

Point = tuple[float, float]
Segment = tuple[Point, Point]
Color = tuple[int, int, int]
Progress = Callable[[float], None]

CANVAS_WIDTH = 1500
CANVAS_HEIGHT = 1024
WHITE: Color = (255, 255, 255)

_U32_MAX = 0xFFFFFFFF


def _pixel(value: float) -> int:
    """Convert a coordinate to a pixel index, saturating at the unsigned range."""
    if not value > 0:
        return 0
    if value >= _U32_MAX:
        return _U32_MAX
    return int(value)


class SeedCanvas:
    """Outlines drawn pixel by pixel, plus fill pixels that cover them."""

    def __init__(self, background: Color = WHITE) -> None:
        self.background: Color = tuple(background)
        self.strings: list[tuple[Segment, Color]] = []
        self.points: list[tuple[Point, Color]] = []
        self.circles: list[tuple[Point, float, Color]] = []
        self.ellipses: list[tuple[Point, Point, Color]] = []
        self.pixels_fill: dict[tuple[int, int], Color] = {}
        self.pixels_edges: dict[tuple[int, int], Color] = {}
        self.outline: list[tuple[Point, Color]] = []
        self.closes: list[int] = [0]

    def _plot(self, pixels: list[Point], color: Color) -> None:
        for pixel in pixels:
            self.pixels_edges[(_pixel(pixel[0]), _pixel(pixel[1]))] = color
            self.outline.append((pixel, color))

    def last_closed_point(self) -> Point | None:
        """Last point, if the figure being drawn has any points."""
        if len(self.points) > self.closes[-1]:
            return self.last_point()
        return None

    def last_point(self) -> Point | None:
        return self.points[-1][0] if self.points else None

    def add_point(self, point: Point, color: Color) -> None:
        """Add a vertex; a segment to the previous vertex is rasterised."""
        point = (float(point[0]), float(point[1]))
        color = tuple(color)
        if len(self.points) - self.closes[-1] >= 1:
            self._plot(dda(self.points[-1][0], point), color)
        self.points.append((point, color))

    def add_circle(self, center: Point, radius: float, color: Color) -> None:
        center = (float(center[0]), float(center[1]))
        color = tuple(color)
        self._plot(circle_pixels(center, radius), color)
        self.circles.append((center, float(radius), color))

    def add_ellipse(self, center: Point, radii: Point, color: Color) -> None:
        center = (float(center[0]), float(center[1]))
        radii = (float(radii[0]), float(radii[1]))
        color = tuple(color)
        self._plot(ellipse_pixels(center, radii), color)
        self.ellipses.append((center, radii, color))

    def clear(self) -> None:
        self.points.clear()
        self.closes = [0]
        self.strings.clear()
        self.outline.clear()
        self.pixels_fill.clear()
        self.pixels_edges.clear()
        self.circles.clear()
        self.ellipses.clear()

    def clean(self) -> None:
        """Remove the fill, keeping the outlines."""
        self.strings.clear()
        self.pixels_fill.clear()

    def close(self) -> bool:
        """Join the last vertex to the first one of the current polyline."""
        index = self.closes[-1]
        if len(self.points) - index >= 3:
            position, color = self.points[index]
            self.add_point(position, color)
            self.closes.append(len(self.points))
            return True
        return False

    def at(self, x: int, y: int) -> Color:
        """Colour of a pixel: fill first, then outline, then background."""
        key = (x, y)
        if key in self.pixels_fill:
            return self.pixels_fill[key]
        return self.pixels_edges.get(key, self.background)

    def draw_line(self, start: tuple[int, int], end: tuple[int, int], color: Color) -> None:
        """Fill the pixels of one row from ``start`` to ``end`` inclusive."""
        color = tuple(color)
        for x in range(start[0], end[0] + 1):
            self.pixels_fill[(x, end[1])] = color
        self.strings.append(
            (
                ((float(start[0]) - 1.0, float(start[1])), (float(end[0]) + 1.0, float(end[1]))),
                color,
            )
        )

    def eq_color(self, x: int, y: int, color: Color) -> bool:
        return self.at(x, y) == tuple(color)

    def fill(
        self,
        seed: Point,
        fill: Color,
        border: Color,
        delay_ms: int = 0,
        recursive: bool = False,
        on_progress: Progress | None = None,
    ) -> float:
        """Fill the area around ``seed`` up to ``border``; return the seconds it took."""
        run = fill_recursive if recursive else fill_ordinary
        return run(self, _pixel(seed[0]), _pixel(seed[1]), fill, border, delay_ms, on_progress)


def _is_open(canvas: SeedCanvas, x: int, y: int, fill: Color, border: Color) -> bool:
    color = canvas.at(x, y)
    return color != border and color != fill


def _span_bounds(
    canvas: SeedCanvas, x: int, y: int, fill: Color, border: Color
) -> tuple[int | None, int]:
    """Leftmost open pixel from ``x`` (None if ``x`` is closed) and right end of the span."""
    right = x
    for tx in range(x + 1, CANVAS_WIDTH + 1):
        if not _is_open(canvas, tx, y, fill, border):
            break
        right = tx
    left = None
    for tx in range(x, -1, -1):
        if not _is_open(canvas, tx, y, fill, border):
            break
        left = tx
    return left, right


def _row_seeds(
    canvas: SeedCanvas, left: int, right: int, y: int, fill: Color, border: Color
) -> Iterator[int]:
    """Yield the right end of every open run in ``left..=right`` on row ``y``."""
    tx = left
    while tx <= right:
        found = False
        while tx <= right and _is_open(canvas, tx, y, fill, border):
            found = True
            tx += 1
        if found:
            yield tx - 1
        begin = tx
        while tx <= right and not _is_open(canvas, tx, y, fill, border):
            tx += 1
        if tx == begin:
            tx += 1


def _inner_row(y: int) -> bool:
    return 0 < y < CANVAS_HEIGHT - 1


def _pause(start: float, delay_ms: int, on_progress: Progress | None) -> None:
    if delay_ms:
        time.sleep(delay_ms / 1000)
    if on_progress is not None:
        on_progress(time.perf_counter() - start)


def fill_ordinary(
    canvas: SeedCanvas,
    x: int,
    y: int,
    fill: Color,
    border: Color,
    delay_ms: int = 0,
    on_progress: Progress | None = None,
) -> float:
    """Span seed fill driven by an explicit stack; return the seconds it took."""
    fill, border = tuple(fill), tuple(border)
    start = time.perf_counter()
    stack = [(x, y)]
    while stack:
        x, y = stack.pop()
        left, right = _span_bounds(canvas, x, y, fill, border)
        left_x = x if left is None else left
        canvas.draw_line((left_x, y), (right, y), fill)
        _pause(start, delay_ms, on_progress)
        for row in (y + 1, y - 1):
            if _inner_row(row):
                stack.extend((seed, row) for seed in _row_seeds(canvas, left_x, right, row, fill, border))
    return time.perf_counter() - start


def _recursive_span(
    canvas: SeedCanvas,
    x: int,
    y: int,
    fill: Color,
    border: Color,
    delay_ms: int,
    on_progress: Progress | None,
    start: float,
) -> Iterator[tuple[int, int]]:
    if not _is_open(canvas, x, y, fill, border):
        return
    left, right = _span_bounds(canvas, x, y, fill, border)
    left_x = x if left is None else left + 1
    canvas.draw_line((left_x, y), (right, y), fill)
    _pause(start, delay_ms, on_progress)
    for row in (y - 1, y + 1):
        if _inner_row(row):
            for seed in _row_seeds(canvas, left_x, right, row, fill, border):
                yield seed, row


def fill_recursive(
    canvas: SeedCanvas,
    x: int,
    y: int,
    fill: Color,
    border: Color,
    delay_ms: int = 0,
    on_progress: Progress | None = None,
) -> float:
    """Span seed fill that descends into each new span at once; return the seconds it took."""
    fill, border = tuple(fill), tuple(border)
    start = time.perf_counter()
    frames = [_recursive_span(canvas, x, y, fill, border, delay_ms, on_progress, start)]
    while frames:
        try:
            seed_x, seed_y = next(frames[-1])
        except StopIteration:
            frames.pop()
            continue
        frames.append(
            _recursive_span(canvas, seed_x, seed_y, fill, border, delay_ms, on_progress, start)
        )
    return time.perf_counter() - start