from __future__ import annotations

import logging
from typing import Iterable, Iterator, List

from ...config import IndexConfig, validate_region
from .geometry import Circle, Point, Rect
from .quadtree import QuadTree

logger = logging.getLogger(__name__)


class SpatialIndex:
    """Point quadtree over a fixed rectangular region.

    Points outside the region are silently ignored. The index is a multiset:
    inserting an equal point twice stores it twice. Not thread-safe; guard
    writers and readers externally if the index is shared.
    """

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        capacity: int,
        *,
        search_step: float = 10.0,
        max_depth: int = 20,
    ) -> None:
        validate_region(x, y, width, height, capacity, search_step, max_depth)
        self.search_step = search_step
        self._root = QuadTree(x, y, width, height, capacity, max_depth=max_depth)
        logger.debug(
            "Created index at (%s, %s) size %sx%s capacity %d", x, y, width, height, capacity
        )

    @classmethod
    def from_config(cls, cfg: IndexConfig) -> "SpatialIndex":
        return cls(
            cfg.center[0],
            cfg.center[1],
            cfg.width,
            cfg.height,
            cfg.capacity,
            search_step=cfg.search_step,
            max_depth=cfg.max_depth,
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------
    @property
    def root(self) -> QuadTree:
        return self._root

    @property
    def boundary(self) -> Rect:
        return self._root.boundary

    @property
    def capacity(self) -> int:
        return self._root.capacity

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def insert(self, point: Point) -> None:
        """Insert ``point``; points outside :attr:`boundary` are dropped."""
        self._root.insert(point)

    def build(self, points: Iterable[Point]) -> None:
        """Insert ``points`` one at a time in input order."""
        self._root.build(points)

    def clear_tree(self) -> None:
        """Reset to an empty leaf covering the same region."""
        self._root.clear_tree()
        logger.debug("Cleared index at (%s, %s)", self._root.x, self._root.y)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def points_within_rect(self, rect: Rect) -> List[Point]:
        return self._root.points_within_rect(rect)

    def points_within_circle(self, circle: Circle) -> List[Point]:
        return self._root.points_within_circle(circle)

    def nearest_points(self, point: Point, n: int) -> List[Point]:
        """Return up to ``n`` points near ``point``.

        Approximate, and usually ordered nearest first: see
        :meth:`QuadTree.nearest_points` for when the order is left as found.
        """
        return self._root.nearest_points(point, n, self.search_step)

    def nearest_points_xy(self, x: float, y: float, n: int) -> List[Point]:
        return self.nearest_points(Point(x, y), n)

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------
    def to_array(self) -> List[Point]:
        return self._root.to_array()

    def nodes(self) -> Iterator[QuadTree]:
        """Pre-order walk of every node, e.g. for drawing outlines."""
        return self._root.walk()

    def depth(self) -> int:
        return max(node.depth for node in self._root.walk())

    def __len__(self) -> int:
        return sum(len(node.points) for node in self._root.walk())

    def __iter__(self) -> Iterator[Point]:
        return iter(self.to_array())

    def __contains__(self, point: object) -> bool:
        if not isinstance(point, Point) or not self._root.contains(point):
            return False
        return point in self._root.points_within_rect(Rect(point.x, point.y, 0, 0))


__all__ = ["SpatialIndex"]
