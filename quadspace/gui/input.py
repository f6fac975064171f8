"""Handle viewer input events and feed points into the index."""

from __future__ import annotations

import logging
from typing import Any, Dict

import pygame

from ..core.spatial.geometry import Point
from ..core.spatial.spatial_index import SpatialIndex

logger = logging.getLogger(__name__)

MIN_QUERY_SIZE = 2.0
ZOOM_STEP = 1.1


def _insert_at(index: SpatialIndex, renderer: Any, screen_pos: tuple[int, int]) -> None:
    wx, wy = renderer.screen_to_world_coords(screen_pos)
    index.insert(Point(wx, wy))


def handle_events(index: SpatialIndex, renderer: Any, state: Dict[str, Any]) -> None:
    """Process ``pygame`` events, mutating ``index`` and the viewer ``state``."""
    max_query_size = max(index.boundary.width, index.boundary.height) * 2

    for ev in pygame.event.get():
        if ev.type == pygame.QUIT:
            state["running"] = False
            return

        if ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            state["drawing"] = True
            _insert_at(index, renderer, ev.pos)

        elif ev.type == pygame.MOUSEBUTTONUP and ev.button == 1:
            state["drawing"] = False

        elif ev.type == pygame.MOUSEMOTION:
            state["mouse_world"] = renderer.screen_to_world_coords(ev.pos)
            if state.get("drawing"):
                _insert_at(index, renderer, ev.pos)

        elif ev.type == pygame.MOUSEWHEEL:
            size = float(state.get("query_size", MIN_QUERY_SIZE))
            size = size * ZOOM_STEP if ev.y > 0 else size / ZOOM_STEP
            state["query_size"] = max(MIN_QUERY_SIZE, min(size, max_query_size))

        elif ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_r:
                state["query_mode"] = "circle" if state.get("query_mode") == "rect" else "rect"
            elif ev.key == pygame.K_v:
                state["show_outlines"] = not state.get("show_outlines", True)
            elif ev.key == pygame.K_n:
                state["show_nearest"] = not state.get("show_nearest", False)
            elif ev.key == pygame.K_c:
                index.clear_tree()
                logger.info("Cleared all points.")
            elif ev.key == pygame.K_ESCAPE:
                state["running"] = False
                return


__all__ = ["handle_events"]
