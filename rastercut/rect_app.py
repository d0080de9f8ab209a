"""State of the rectangular clipping tool."""

from __future__ import annotations

from dataclasses import dataclass, field

from rastercut.errors import parse_unsigned
from rastercut.rectclip import Point, Rect, Segment, clip_segments


def _snap(anchor: Point, point: Point) -> Point:
    dx = abs(anchor[0] - point[0])
    dy = abs(anchor[1] - point[1])
    if dy > dx:
        return (anchor[0], point[1])
    return (point[0], anchor[1])


@dataclass
class RectClipApp:
    """Segments, a clipping rectangle and the visible parts of the segments."""

    cutter: Rect | None = None
    cutter_anchor: Point | None = None
    line_start: Point | None = None
    lines: list[Segment] = field(default_factory=list)
    cut_lines: list[Segment] = field(default_factory=list)
    res_width: int = 2

    def primary_click(self, position: Point) -> None:
        """Place a corner of the clipping rectangle."""
        position = (float(position[0]), float(position[1]))
        if self.cutter_anchor is not None:
            left, pos = self.cutter_anchor, position
            if left[0] > pos[0]:
                left, pos = pos, left
            if left[1] > pos[1]:
                left, pos = (left[0], pos[1]), (pos[0], left[1])
            self.cutter = (left, pos)
            self.cutter_anchor = None
        elif self.cutter is not None:
            if self.line_start is None:
                self.cutter = None
                self.cutter_anchor = position
        else:
            self.cutter_anchor = position

    def secondary_click(self, position: Point, shift: bool = False) -> None:
        """Place an end of a segment; ``shift`` makes it horizontal or vertical."""
        position = (float(position[0]), float(position[1]))
        if self.line_start is not None:
            start = self.line_start
            end = _snap(start, position) if shift else position
            self.line_start = None
            self.lines.append((start, end))
        elif self.cutter_anchor is None:
            self.line_start = position

    def cut(self) -> None:
        """Clip all segments by the rectangle, if it is set."""
        if self.cutter is not None:
            self.cut_lines = clip_segments(self.cutter, self.lines)

    def clear(self) -> None:
        self.lines.clear()
        self.cut_lines.clear()
        self.cutter = None
        self.cutter_anchor = None

    def set_cutter(self, x_left: str, y_top: str, x_right: str, y_bottom: str) -> None:
        """Set the rectangle from text fields; x coordinates are put in order."""
        x1 = parse_unsigned(x_left, 32)
        y1 = parse_unsigned(y_top, 32)
        x2 = parse_unsigned(x_right, 32)
        y2 = parse_unsigned(y_bottom, 32)
        if x1 > x2:
            x1, x2 = x2, x1
        self.cutter = ((float(x1), float(y1)), (float(x2), float(y2)))
        self.cutter_anchor = None

    def add_line(self, x1: str, y1: str, x2: str, y2: str) -> None:
        """Add a segment from text fields."""
        start = (float(parse_unsigned(x1, 32)), float(parse_unsigned(y1, 32)))
        end = (float(parse_unsigned(x2, 32)), float(parse_unsigned(y2, 32)))
        self.lines.append((start, end))