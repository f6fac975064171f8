# quadspace/gui/renderer.py
"""Renderer for drawing a :class:`SpatialIndex` to a :class:`Window`."""

from __future__ import annotations

from typing import Any, Dict, List

from ..core.spatial.geometry import Circle, Point, Rect
from ..core.spatial.spatial_index import SpatialIndex
from .window import Window

OUTLINE_COLOR = (90, 90, 90)
POINT_COLOR = (230, 230, 230)
QUERY_COLOR = (80, 200, 120)
HIT_COLOR = (80, 200, 120)
NEAREST_COLOR = (255, 100, 100)
STATUS_COLOR = (200, 200, 200)


def query_shape(state: Dict[str, Any]) -> Circle | Rect | None:
    """Build the query shape described by the viewer ``state``."""
    mouse = state.get("mouse_world")
    if mouse is None:
        return None
    size = float(state.get("query_size", 0.0))
    if state.get("query_mode", "circle") == "rect":
        return Rect(mouse[0], mouse[1], size, size)
    return Circle(mouse[0], mouse[1], size / 2)


class Renderer:
    """Draws node outlines, points and the active query onto a window."""

    def __init__(self, window: Window, index: SpatialIndex) -> None:
        self.window = window
        bounds = index.boundary
        self.camera_world_x: float = bounds.x
        self.camera_world_y: float = bounds.y
        self.zoom: float = min(window.size[0] / bounds.width, window.size[1] / bounds.height)

    def world_to_screen(self, world_x: float, world_y: float) -> tuple[int, int]:
        screen_x = self.window.size[0] / 2 + (world_x - self.camera_world_x) * self.zoom
        screen_y = self.window.size[1] / 2 + (world_y - self.camera_world_y) * self.zoom
        return int(screen_x), int(screen_y)

    def screen_to_world_coords(self, screen_pos: tuple[int, int]) -> tuple[float, float]:
        screen_x, screen_y = screen_pos
        world_x = self.camera_world_x + (screen_x - self.window.size[0] / 2) / self.zoom
        world_y = self.camera_world_y + (screen_y - self.window.size[1] / 2) / self.zoom
        return world_x, world_y

    def _draw_outlines(self, index: SpatialIndex) -> None:
        for node in index.nodes():
            rect = node.boundary
            left, top = self.world_to_screen(rect.left, rect.top)
            self.window.draw_rect_outline(
                left, top, int(rect.width * self.zoom), int(rect.height * self.zoom), OUTLINE_COLOR
            )

    def _draw_points(self, points: List[Point], colour: tuple[int, int, int], radius: int) -> None:
        for p in points:
            sx, sy = self.world_to_screen(p.x, p.y)
            self.window.draw_point(sx, sy, colour, radius)

    def _draw_shape(self, shape: Circle | Rect) -> None:
        if isinstance(shape, Rect):
            left, top = self.world_to_screen(shape.left, shape.top)
            self.window.draw_rect_outline(
                left, top, int(shape.width * self.zoom), int(shape.height * self.zoom), QUERY_COLOR
            )
        else:
            sx, sy = self.world_to_screen(shape.x, shape.y)
            self.window.draw_circle_outline(sx, sy, int(shape.radius * self.zoom), QUERY_COLOR)

    def update(self, index: SpatialIndex, state: Dict[str, Any]) -> List[Point]:
        """Draw one frame and return the points matched by the active query."""
        if state.get("show_outlines", True):
            self._draw_outlines(index)

        self._draw_points(index.to_array(), POINT_COLOR, 2)

        hits: List[Point] = []
        shape = query_shape(state)
        if shape is not None:
            self._draw_shape(shape)
            if isinstance(shape, Rect):
                hits = index.points_within_rect(shape)
            else:
                hits = index.points_within_circle(shape)
            self._draw_points(hits, HIT_COLOR, 3)

            if state.get("show_nearest", False):
                nearest = index.nearest_points(
                    Point(shape.x, shape.y), int(state.get("nearest_count", 1))
                )
                self._draw_points(nearest, NEAREST_COLOR, 4)

        status = (
            f"Points:{len(index)} Depth:{index.depth()} "
            f"Mode:{state.get('query_mode', 'circle')} Hits:{len(hits)}"
        )
        self.window.draw_text(status, 5, 5, STATUS_COLOR)
        return hits


__all__ = ["Renderer", "query_shape"]
