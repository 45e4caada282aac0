"""Pygame desktop window that hosts a game loop."""

from __future__ import annotations

import asyncio
import logging

import pygame  # type: ignore

from grid_snake.config import GameConfig
from grid_snake.engine import Snapshot
from grid_snake.render import FillRect
from grid_snake.scheduler import GameLoop

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Snake"

_KEY_NAMES: dict[int, str] = {
    pygame.K_w: "w",
    pygame.K_a: "a",
    pygame.K_s: "s",
    pygame.K_d: "d",
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_ESCAPE: "escape",
}


def key_name(key: int) -> str:
    """Return the binding name for a pygame key constant."""
    return _KEY_NAMES.get(key, f"key-{key}")


def paint(surface: pygame.Surface, rects: list[FillRect]) -> None:
    for r in rects:
        surface.fill(r.color, pygame.Rect(r.x, r.y, r.width, r.height))


def dispatch(event: pygame.event.Event, loop: GameLoop) -> None:
    """Forward one pygame event to the game loop."""
    if event.type == pygame.QUIT:
        logger.info("Window closed; stopping game loop.")
        loop.stop()
    elif event.type == pygame.KEYDOWN:
        name = key_name(event.key)
        loop.key_down(name)
        # Pygame has no separate key-typed event; a press counts as one.
        loop.key_typed(name)
    elif event.type == pygame.KEYUP:
        loop.key_up(key_name(event.key))


async def _pump_events(loop: GameLoop, interval: float) -> None:
    while loop.running:
        for event in pygame.event.get():
            dispatch(event, loop)
        await asyncio.sleep(interval)


async def _play(loop: GameLoop, interval: float) -> None:
    loop.start()
    await asyncio.gather(_pump_events(loop, interval), loop.run())


def run_window(config: GameConfig) -> int:
    """Open a window, play until quit or close, and return the exit code."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((config.width, config.height))
        pygame.display.set_caption(WINDOW_TITLE)

        def present(_snapshot: Snapshot, rects: list[FillRect]) -> None:
            paint(screen, rects)
            pygame.display.flip()

        loop = GameLoop.from_config(config, present)
        asyncio.run(_play(loop, config.refresh_ms / 1000.0))
    finally:
        pygame.quit()
    return 0
