"""Scrolling event log panel at the bottom of the screen."""
from __future__ import annotations

from collections import deque

import pygame

from ui.constants import COLOR_DIVIDER, COLOR_LOG_BG, LOG_COLORS


class EventLogPanel:
    """Most recent game events, newest at the bottom."""

    def __init__(self, max_entries: int = 50) -> None:
        self.entries: deque[tuple[str, tuple[int, int, int]]] = deque(maxlen=max_entries)

    def add(self, text: str, category: str = "default") -> None:
        color = LOG_COLORS.get(category, LOG_COLORS["default"])
        self.entries.append((text, color))

    def draw(
        self,
        surface: pygame.Surface,
        font: pygame.font.Font,
        x: int, y: int, w: int, h: int,
    ) -> None:
        pygame.draw.rect(surface, COLOR_LOG_BG, (x, y, w, h))
        pygame.draw.line(surface, COLOR_DIVIDER, (x, y), (x + w, y))

        line_h = 14
        max_lines = max(1, (h - 8) // line_h)
        ty = y + 4
        for text, color in list(self.entries)[-max_lines:]:
            surface.blit(font.render(text, True, color), (x + 6, ty))
            ty += line_h
