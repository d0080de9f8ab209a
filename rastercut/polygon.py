"""A polygon that is built vertex by vertex and then closed."""

from __future__ import annotations

from dataclasses import dataclass, field

Point = tuple[float, float]


@dataclass
class Polygon:
    """Vertices of a polyline; closing repeats the first vertex at the end.

    With ``skip_repeats`` a vertex equal to the previous one is ignored.
    """

    skip_repeats: bool = True
    vertices: list[Point] = field(default_factory=list, init=False)
    closed: bool = field(default=False, init=False)

    @property
    def last(self) -> Point | None:
        return self.vertices[-1] if self.vertices else None

    def push(self, point: Point) -> Polygon:
        point = (float(point[0]), float(point[1]))
        if self.skip_repeats and self.vertices and self.vertices[-1] == point:
            return self
        self.vertices.append(point)
        return self

    def clear(self) -> Polygon:
        return self.open()

    def close(self) -> Polygon:
        """Close the polygon if it has at least three vertices."""
        if len(self.vertices) < 3 or self.closed:
            return self
        self.vertices.append(self.vertices[0])
        self.closed = True
        return self

    def open(self) -> Polygon:
        """Drop all vertices and start a new, open polygon."""
        self.vertices.clear()
        self.closed = False
        return self