"""spatial package."""

from .geometry import Circle, Point, Rect
from .quadtree import QuadTree
from .spatial_index import SpatialIndex

__all__ = ["Circle", "Point", "Rect", "QuadTree", "SpatialIndex"]
