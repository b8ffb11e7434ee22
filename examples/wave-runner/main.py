"""Wave Runner - reflex arcade demo.

A band of light sweeps across a 15x20 grid. Click the marked target cell
while the wave covers it. Hits build a combo, misses and timeouts cost a
life, and every few levels the wave speeds up or changes shape.

Controls:
  Left-click  Click a cell
  Space       Start / Pause / Resume
  R           Reset (keeps the high score)
  Escape      Quit
"""
from __future__ import annotations

import argparse
import sys

import pygame
from loguru import logger

from ui.board import draw_board, draw_target
from ui.constants import COLOR_BG, FPS, GRID_H, LOG_H, SCREEN_H, SCREEN_W, cell_at
from ui.hud import draw_phase_overlay
from ui.log_panel import EventLogPanel
from ui.sidebar import draw_sidebar
from wave_runner import GameConfig, Outcome, WaveRunner
from wave_runner.engine import SHIELD_END


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Wave Runner - reflex arcade demo")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument("--fps", type=int, default=FPS, help=f"Frame rate cap (default: {FPS})")
    p.add_argument("--lives", type=int, default=3, help="Starting lives (1-9, default: 3)")
    p.add_argument("--verbose", action="store_true", help="Log engine events to stderr")
    args = p.parse_args()
    args.fps = max(10, min(240, args.fps))
    args.lives = max(1, min(9, args.lives))
    return args


def main() -> None:
    args = parse_args()

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "INFO")
    logger.enable("wave_runner")

    config = GameConfig(initial_lives=args.lives)
    engine = WaveRunner(config, seed=args.seed)
    logger.info("wave runner seed={}", engine.seed)

    log_panel = EventLogPanel()

    def _on_hit(signal: str, data: dict) -> None:
        log_panel.add(f"Hit +{data['points']} (combo {data['combo']})", "hit")

    def _on_miss(signal: str, data: dict) -> None:
        suffix = "" if data["life_lost"] else " (shielded)"
        log_panel.add(f"Miss at ({data['row']}, {data['col']}){suffix}", "miss")

    def _on_expired(signal: str, data: dict) -> None:
        log_panel.add(f"Target timed out, {data['lives']} lives left", "expired")

    def _on_level_up(signal: str, data: dict) -> None:
        log_panel.add(f"Level {data['level']}! difficulty x{data['difficulty']:g}", "level_up")

    def _on_pattern(signal: str, data: dict) -> None:
        log_panel.add(f"Wave pattern: {data['pattern'].value}", "pattern")

    def _on_shield(signal: str, data: dict) -> None:
        log_panel.add("Shield up!" if data["active"] else "Shield down", "shield")

    def _on_game_over(signal: str, data: dict) -> None:
        log_panel.add(f"Game over - score {data['score']}, best {data['high_score']}", "game_over")

    engine.subscribe("hit", _on_hit)
    engine.subscribe("miss", _on_miss)
    engine.subscribe("expired", _on_expired)
    engine.subscribe("level_up", _on_level_up)
    engine.subscribe("pattern_changed", _on_pattern)
    engine.subscribe("shield", _on_shield)
    engine.subscribe("game_over", _on_game_over)

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Wave Runner")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)
    small_font = pygame.font.SysFont("monospace", 11)

    running = True
    while running:
        # Real elapsed milliseconds drive every engine timer.
        engine.advance(clock.tick(args.fps))

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    engine.toggle()
                elif event.key == pygame.K_r:
                    engine.reset()
                    log_panel.add("Reset", "default")

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                cell = cell_at(*event.pos)
                if cell is not None and engine.click(*cell) is Outcome.IGNORED:
                    logger.debug("click at {} ignored in phase {}", cell, engine.phase.value)

        # --- Render ---
        snap = engine.snapshot()
        screen.fill(COLOR_BG)
        draw_board(screen, snap)
        draw_target(screen, snap, blink_on=(pygame.time.get_ticks() // 250) % 2 == 0)
        draw_phase_overlay(screen, font, snap)
        draw_sidebar(screen, font, snap, engine.scheduler.remaining(SHIELD_END), config.shield_ms)
        log_panel.draw(screen, small_font, 0, GRID_H, SCREEN_W, LOG_H)
        pygame.display.flip()

    pygame.quit()
    logger.info("final score {} (best {})", engine.state.score, engine.state.high_score)
    sys.exit()


if __name__ == "__main__":
    main()
