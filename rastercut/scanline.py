"""Polygon filling by scan lines with an ordered table of edges."""

from __future__ import annotations

import math
import time
from collections.abc import Callable
from dataclasses import dataclass

Point = tuple[float, float]
Color = tuple[int, int, int]

WHITE: Color = (255, 255, 255)


def _round(value: float) -> float:
    """Round half away from zero."""
    return math.copysign(math.floor(abs(value) + 0.5), value)


@dataclass(frozen=True, order=True)
class EdgeInfo:
    """An edge crossing a row: its x there, rows left to cross and x step per row."""

    x: float
    dy: float
    dx: float


def _edge(begin: Point, end: Point) -> tuple[int, EdgeInfo] | None:
    if begin[1] > end[1]:
        begin, end = end, begin
    dy = end[1] - begin[1]
    if dy == 0.0:
        return None
    return int(end[1]), EdgeInfo(end[0], dy, (begin[0] - end[0]) / dy)


class ScanlineCanvas:
    """Closed polylines and the horizontal strings that fill them."""

    def __init__(self) -> None:
        self.points: list[Point] = []
        self.edges: list[tuple[int, int]] = []
        self.filler: list[tuple[Point, Point]] = []
        self.closes: list[int] = [0]
        self.color: Color = WHITE
        self.min_bound: Point = (math.inf, math.inf)
        self.max_bound: Point = (-math.inf, -math.inf)
        self._y_groups: dict[int, set[EdgeInfo]] = {}

    @property
    def last_closed(self) -> int:
        """Index of the first point of the figure being drawn."""
        return self.closes[-1]

    def last_closed_point(self) -> Point | None:
        """First point of the figure being drawn, if it has one."""
        index = self.closes[-1]
        return self.points[index] if index < len(self.points) else None

    def remove_point(self, index: int) -> None:
        del self.points[index]

    def set_color(self, color: Color) -> None:
        self.color = tuple(color)

    def fill_string(self, start: Point, end: Point) -> None:
        self.filler.append((start, end))

    def add_line(self, a: int, b: int) -> None:
        self.edges.append((a, b))

    def close(self) -> bool:
        """Close the current figure; False if it has fewer than three points."""
        if len(self.points) - self.last_closed >= 3:
            self.add_line(self.last_closed, len(self.points) - 1)
            self.closes.append(len(self.points))
            return True
        return False

    def is_closed(self) -> bool:
        """True while the figure being drawn has at least two points."""
        return len(self.points) - self.last_closed >= 2

    def clear(self) -> None:
        self.points.clear()
        self.closes = [0]
        self.min_bound = (math.inf, math.inf)
        self.max_bound = (-math.inf, -math.inf)
        self.edges.clear()
        self.filler.clear()
        self._y_groups.clear()

    def clean(self) -> None:
        """Remove the fill, keeping the figures."""
        self.filler.clear()
        self._y_groups.clear()
        self._update_y_group(0)

    def add_point(self, point: Point) -> None:
        """Add a vertex; repeating the first vertex of the figure closes it."""
        point = (float(point[0]), float(point[1]))
        last = self.last_closed
        if len(self.points) > last and self.points[last] == point:
            self.close()
            return
        self._update_bounds(point)
        self.points.append(point)
        count = len(self.points)
        if count - last >= 2:
            self.add_line(count - 2, count - 1)

    def _update_bounds(self, point: Point) -> None:
        self.min_bound = (min(self.min_bound[0], point[0]), min(self.min_bound[1], point[1]))
        self.max_bound = (max(self.max_bound[0], point[0]), max(self.max_bound[1], point[1]))

    def _create_y_groups(self) -> None:
        for begin, end in zip(self.closes, self.closes[1:]):
            figure = self.points[begin:end]
            pairs = list(zip(figure, figure[1:]))
            pairs.append((self.points[begin], self.points[end - 1]))
            for p1, p2 in pairs:
                found = _edge(p1, p2)
                if found is not None:
                    y, edge = found
                    self._y_groups.setdefault(y, set()).add(edge)

    def _update_y_group(self, y: int) -> None:
        edges = self._y_groups.pop(y + 1, None)
        if edges is None:
            return
        moved = {
            EdgeInfo(edge.x + edge.dx, edge.dy - 1.0, edge.dx)
            for edge in edges
            if edge.dy != 1.0
        }
        self._y_groups.setdefault(y, set()).update(moved)

    def fill(
        self,
        delay_ms: int = 0,
        on_progress: Callable[[float], None] | None = None,
    ) -> float:
        """Fill all closed figures row by row; return the seconds it took.

        ``on_progress`` receives the elapsed seconds after every row.
        """
        start = time.perf_counter()
        self._create_y_groups()
        elapsed = 0.0
        if not (math.isfinite(self.min_bound[1]) and math.isfinite(self.max_bound[1])):
            return elapsed
        min_y, max_y = int(self.min_bound[1]), int(self.max_bound[1])
        for y in range(max_y, min_y, -1):
            edges = iter(sorted(self._y_groups.get(y, ())))
            for first, second in zip(edges, edges):
                if delay_ms:
                    time.sleep(delay_ms / 1000)
                self.fill_string((_round(first.x), float(y)), (_round(second.x), float(y)))
            elapsed = time.perf_counter() - start
            if on_progress is not None:
                on_progress(elapsed)
            self._update_y_group(y - 1)
        return elapsed