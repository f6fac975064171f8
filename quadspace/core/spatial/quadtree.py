from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional

from ...config import ConfigError
from .geometry import Circle, Point, Rect, dist, point_segment_dist

logger = logging.getLogger(__name__)


class QuadTree:
    """One node of a point quadtree covering an axis-aligned rectangle.

    A node is either a leaf holding up to ``capacity`` points or an internal
    router with exactly four children (``nw``, ``ne``, ``sw``, ``se``), each
    covering one quadrant. ``y`` grows downward so the north children sit at
    ``y - height / 4``.
    """

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        capacity: int,
        *,
        depth: int = 0,
        max_depth: int = 20,
    ) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.capacity = capacity
        self.depth = depth
        self.max_depth = max_depth
        self.points: List[Point] = []
        self.subdivided = False
        self.nw: Optional[QuadTree] = None
        self.ne: Optional[QuadTree] = None
        self.sw: Optional[QuadTree] = None
        self.se: Optional[QuadTree] = None

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    @property
    def boundary(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    @property
    def children(self) -> tuple[QuadTree, ...]:
        """Children in routing order, empty on a leaf."""
        if not self.subdivided:
            return ()
        return (self.nw, self.ne, self.sw, self.se)  # type: ignore[return-value]

    def contains(self, point: Point) -> bool:
        return (
            abs(point.x - self.x) <= self.width / 2
            and abs(point.y - self.y) <= self.height / 2
        )

    def overlaps_rect(self, rect: Rect) -> bool:
        return self.boundary.intersects(rect)

    def overlaps_circle(self, circle: Circle) -> bool:
        """True when ``circle`` touches this node's rectangle."""
        if self.contains(Point(circle.x, circle.y)):
            return True
        for x1, y1, x2, y2 in self.boundary.edges():
            if point_segment_dist(circle.x, circle.y, x1, y1, x2, y2) <= circle.radius:
                return True
        return False

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def build(self, points: Iterable[Point]) -> None:
        for p in points:
            self.insert(p)

    def insert(self, point: Point) -> None:
        """Store ``point`` if it lies inside this node; otherwise do nothing."""
        if not self.contains(point):
            return
        self._place(point)

    def _place(self, point: Point) -> None:
        if not self.subdivided:
            if len(self.points) < self.capacity or self.depth >= self.max_depth:
                self.points.append(point)
                return
            self.subdivide()
        self._child_for(point)._place(point)

    def _child_for(self, point: Point) -> QuadTree:
        for child in self.children:
            if child.contains(point):
                return child
        # Rounding can leave a sliver between child bounds; fall back to
        # the quadrant on the same side of the center.
        if point.y <= self.y:
            return self.nw if point.x <= self.x else self.ne  # type: ignore[return-value]
        return self.sw if point.x <= self.x else self.se  # type: ignore[return-value]

    def subdivide(self) -> None:
        """Split into four children and hand every held point down."""
        if self.subdivided:
            return
        w = self.width / 2
        h = self.height / 2
        kwargs = {"depth": self.depth + 1, "max_depth": self.max_depth}
        self.nw = QuadTree(self.x - self.width / 4, self.y - self.height / 4, w, h, self.capacity, **kwargs)
        self.ne = QuadTree(self.x + self.width / 4, self.y - self.height / 4, w, h, self.capacity, **kwargs)
        self.sw = QuadTree(self.x - self.width / 4, self.y + self.height / 4, w, h, self.capacity, **kwargs)
        self.se = QuadTree(self.x + self.width / 4, self.y + self.height / 4, w, h, self.capacity, **kwargs)
        self.subdivided = True

        moving, self.points = self.points, []
        for p in moving:
            self._child_for(p)._place(p)
        logger.debug(
            "Subdivided node at (%s, %s) size %sx%s depth %d; moved %d points",
            self.x, self.y, self.width, self.height, self.depth, len(moving),
        )

    def clear_tree(self) -> None:
        """Drop every point and child, leaving an empty leaf."""
        self.points = []
        for child in self.children:
            child.clear_tree()
        self.nw = self.ne = self.sw = self.se = None
        self.subdivided = False

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def points_within_rect(self, rect: Rect) -> List[Point]:
        if not self.overlaps_rect(rect):
            return []
        found = [p for p in self.points if rect.contains(p)]
        for child in self.children:
            found.extend(child.points_within_rect(rect))
        return found

    def points_within_circle(self, circle: Circle) -> List[Point]:
        if not self.overlaps_circle(circle):
            return []
        found = [p for p in self.points if circle.contains(p)]
        for child in self.children:
            found.extend(child.points_within_circle(circle))
        return found

    def nearest_points(self, point: Point, n: int, step: float = 10.0) -> List[Point]:
        """Approximate ``n`` nearest points via an expanding circular search.

        When the tree holds ``n`` points or fewer, all of them are returned,
        nearest first, without searching. Otherwise the radius grows by
        ``step`` until more than ``n`` points fall inside or the radius
        reaches this node's width. Unevenly spread data can leave true
        neighbours outside the final circle; the result is then the best of
        what was found, nearest first. If the width bound stops the search
        with exactly ``n`` points inside, they are returned in query order.
        """
        if step <= 0:
            raise ConfigError(f"step must be positive, got {step!r}")
        if n <= 0:
            return []

        stored = self.to_array()
        if len(stored) <= n:
            stored.sort(key=lambda p: dist(p.x, p.y, point.x, point.y))
            return stored

        radius = 0.0
        while True:
            radius += step
            found = self.points_within_circle(Circle(point.x, point.y, radius))
            if len(found) > n or radius >= self.width:
                break

        if len(found) == n:
            return found
        found.sort(key=lambda p: dist(p.x, p.y, point.x, point.y))
        return found[:n]

    def nearest_points_xy(self, x: float, y: float, n: int, step: float = 10.0) -> List[Point]:
        return self.nearest_points(Point(x, y), n, step)

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------
    def to_array(self) -> List[Point]:
        """All stored points: own points first, then ``nw, ne, sw, se``."""
        points = list(self.points)
        for child in self.children:
            points.extend(child.to_array())
        return points

    def walk(self) -> Iterator[QuadTree]:
        """Yield this node and every descendant in pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()


__all__ = ["QuadTree"]
