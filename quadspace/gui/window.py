# quadspace/gui/window.py
"""Simple ``pygame`` window for drawing points, outlines and text."""

from __future__ import annotations

import pygame

from ..config import CONFIG


class Window:
    """``pygame`` backed drawing surface."""

    def __init__(
        self,
        size: tuple[int, int] | None = None,
        *,
        caption: str | None = None,
        resizable: bool = False,
    ) -> None:
        if size is None:
            size = CONFIG.viewer.window_size
        self.size = size
        flags = pygame.RESIZABLE if resizable else 0

        if not pygame.get_init(): pygame.init()
        if not pygame.font.get_init(): pygame.font.init()
        if not pygame.display.get_init(): pygame.display.init()

        self._surface = pygame.display.set_mode(self.size, flags)
        pygame.display.set_caption(caption or CONFIG.viewer.caption)

        try:
            self._font = pygame.font.SysFont(None, 20)
        except pygame.error:
            self._font = pygame.font.Font(None, 20)

    def draw_point(
        self, x: int, y: int, colour: tuple[int, int, int] = (255, 255, 255), radius: int = 2
    ) -> None:
        pygame.draw.circle(self._surface, colour, (x, y), radius)

    def draw_rect_outline(
        self, left: int, top: int, width: int, height: int, colour: tuple[int, int, int] = (255, 255, 255)
    ) -> None:
        pygame.draw.rect(self._surface, colour, (left, top, max(1, width), max(1, height)), 1)

    def draw_circle_outline(
        self, x: int, y: int, radius: int, colour: tuple[int, int, int] = (255, 255, 255)
    ) -> None:
        if radius <= 0: return
        pygame.draw.circle(self._surface, colour, (x, y), radius, 1)

    def draw_text(
        self, text: str, x: int, y: int, colour: tuple[int, int, int] = (255, 255, 255)
    ) -> None:
        if not self._font: return
        text_surf = self._font.render(text, True, colour)
        self._surface.blit(text_surf, (x, y))

    def refresh(self) -> None:
        pygame.display.flip()

    def clear(self, color: tuple[int, int, int] = (0, 0, 0)) -> None:
        self._surface.fill(color)


__all__ = ["Window"]
