"""Point and query-shape value types plus pure distance helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass


def dist(x1: float, y1: float, x2: float, y2: float) -> float:
    """Return the Euclidean distance between ``(x1, y1)`` and ``(x2, y2)``."""

    return math.hypot(x2 - x1, y2 - y1)


def point_line_dist(
    px: float, py: float, x1: float, y1: float, x2: float, y2: float
) -> float:
    """Unsigned distance from ``(px, py)`` to the infinite line through two points.

    Degenerate lines (both points equal) fall back to the point distance.
    """

    length = dist(x1, y1, x2, y2)
    if length == 0:
        return dist(px, py, x1, y1)
    return abs((x2 - x1) * (y1 - py) - (x1 - px) * (y2 - y1)) / length


def point_segment_dist(
    px: float, py: float, x1: float, y1: float, x2: float, y2: float
) -> float:
    """Distance from ``(px, py)`` to the closed segment ``(x1, y1)-(x2, y2)``.

    Equal to :func:`point_line_dist` when the foot of the perpendicular
    falls on the segment, otherwise the distance to the nearer endpoint.
    """

    dx = x2 - x1
    dy = y2 - y1
    length_sq = dx * dx + dy * dy
    if length_sq == 0:
        return dist(px, py, x1, y1)
    t = ((px - x1) * dx + (py - y1) * dy) / length_sq
    t = max(0.0, min(1.0, t))
    return dist(px, py, x1 + t * dx, y1 + t * dy)


@dataclass(frozen=True)
class Point:
    """Immutable 2D coordinate, compared by value."""

    x: float
    y: float


@dataclass(frozen=True)
class Circle:
    """Circular query shape."""

    x: float
    y: float
    radius: float

    def contains(self, point: Point) -> bool:
        return dist(self.x, self.y, point.x, point.y) <= self.radius


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its center and full extents.

    ``y`` grows downward, so :attr:`top` is the smaller y value.
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x - self.width / 2

    @property
    def right(self) -> float:
        return self.x + self.width / 2

    @property
    def top(self) -> float:
        return self.y - self.height / 2

    @property
    def bottom(self) -> float:
        return self.y + self.height / 2

    def contains(self, point: Point) -> bool:
        """Closed-bounds containment test."""
        return (
            abs(point.x - self.x) <= self.width / 2
            and abs(point.y - self.y) <= self.height / 2
        )

    def intersects(self, other: "Rect") -> bool:
        """Separating-axis test; rectangles that only touch still intersect."""
        if other.left > self.right or other.right < self.left:
            return False
        if other.top > self.bottom or other.bottom < self.top:
            return False
        return True

    def edges(self) -> tuple[tuple[float, float, float, float], ...]:
        """Return the four boundary segments as ``(x1, y1, x2, y2)`` tuples."""
        left, right, top, bottom = self.left, self.right, self.top, self.bottom
        return (
            (left, top, right, top),
            (left, bottom, left, top),
            (right, bottom, right, top),
            (left, bottom, right, bottom),
        )


__all__ = [
    "Point",
    "Circle",
    "Rect",
    "dist",
    "point_line_dist",
    "point_segment_dist",
]
