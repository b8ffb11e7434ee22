"""HUD overlays - idle prompt, pause indicator, game over banner."""
from __future__ import annotations

import pygame

from ui.constants import GRID_H, GRID_W
from wave_runner import GamePhase, Snapshot


def draw_phase_overlay(surface: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    """Dim the board and print a banner for every phase except RUNNING."""
    if snap.phase is GamePhase.RUNNING:
        return
    if snap.phase is GamePhase.IDLE:
        title, hint = "WAVE RUNNER", "Space to start"
    elif snap.phase is GamePhase.PAUSED:
        title, hint = "PAUSED", "Space to resume"
    else:
        title, hint = "GAME OVER", f"Score {snap.score}  Best {snap.high_score}  -  R to restart"

    overlay = pygame.Surface((GRID_W, GRID_H), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))
    surface.blit(overlay, (0, 0))

    big_font = pygame.font.SysFont("monospace", 36, bold=True)
    text = big_font.render(title, True, (255, 255, 255))
    surface.blit(text, text.get_rect(center=(GRID_W // 2, GRID_H // 2)))

    sub = font.render(hint, True, (180, 180, 180))
    surface.blit(sub, sub.get_rect(center=(GRID_W // 2, GRID_H // 2 + 34)))
