"""Periodic update, input and repaint tasks driving one game."""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable

from grid_snake.config import DEFAULT_REFRESH_MS, DEFAULT_TICK_MS, GameConfig
from grid_snake.controls import InputTracker
from grid_snake.engine import GameEngine, Snapshot
from grid_snake.render import FillRect, Renderer

logger = logging.getLogger(__name__)

# Receives the snapshot and draw calls for one frame; may be async.
FrameSink = Callable[[Snapshot, list[FillRect]], Awaitable[None] | None]


class GameLoop:
    """Runs the update, input and repaint tasks over one shared engine.

    Heading, snake and food are only read or written while holding
    :attr:`lock`. The engine's ``running`` flag is the shared stop signal:
    every task checks it once per cycle, and :meth:`stop` also cancels
    tasks that are sleeping.
    """

    def __init__(
        self,
        engine: GameEngine,
        tracker: InputTracker,
        renderer: Renderer,
        present: FrameSink,
        tick_ms: int = DEFAULT_TICK_MS,
        refresh_ms: int = DEFAULT_REFRESH_MS,
    ) -> None:
        if tick_ms < 1 or refresh_ms < 1:
            raise ValueError("tick_ms and refresh_ms must be positive.")
        self.engine = engine
        self.tracker = tracker
        self.renderer = renderer
        self.present = present
        self.tick_ms = tick_ms
        self.refresh_ms = refresh_ms
        self.lock = asyncio.Lock()
        self.frames = 0
        self._tasks: list[asyncio.Task] = []

    @classmethod
    def from_config(cls, config: GameConfig, present: FrameSink) -> GameLoop:
        return cls(
            engine=GameEngine.from_config(config),
            tracker=InputTracker(config.keys),
            renderer=Renderer.from_config(config),
            present=present,
            tick_ms=config.tick_ms,
            refresh_ms=config.refresh_ms,
        )

    @property
    def running(self) -> bool:
        return self.engine.running

    @property
    def started(self) -> bool:
        return bool(self._tasks)

    def start(self) -> None:
        """Schedule the three periodic tasks on the running event loop."""
        if self._tasks:
            raise RuntimeError("Game loop already started.")
        tick = self.tick_ms / 1000.0
        refresh = self.refresh_ms / 1000.0
        self._tasks = [
            asyncio.create_task(self._periodic("update", tick, self._update)),
            asyncio.create_task(self._periodic("input", refresh, self._sample_input)),
            asyncio.create_task(self._periodic("repaint", refresh, self._repaint)),
        ]
        logger.info(
            "Game loop started on a %dx%d grid (tick=%dms, refresh=%dms).",
            self.engine.columns, self.engine.rows, self.tick_ms, self.refresh_ms,
        )

    async def run(self) -> None:
        """Start the tasks if needed and wait until all of them have exited."""
        if not self._tasks:
            self.start()
        await asyncio.gather(*self._tasks, return_exceptions=True)
        logger.info(
            "Game loop stopped after %d frames (episode %d).",
            self.frames, self.engine.episode,
        )

    def stop(self) -> None:
        """Clear the running flag and cancel any task still sleeping."""
        self.engine.stop()
        current = asyncio.current_task() if self._has_event_loop() else None
        for task in self._tasks:
            if task is not current and not task.done():
                task.cancel()

    # --- event callbacks from the presentation layer ---

    def key_down(self, code: str) -> None:
        self.tracker.key_down(code)

    def key_up(self, code: str) -> None:
        self.tracker.key_up(code)

    def key_typed(self, code: str) -> bool:
        """Forward a typed key; stops the loop and returns True on quit."""
        if not self.tracker.key_typed(code):
            return False
        logger.info("Quit key typed; stopping game loop.")
        self.stop()
        return True

    # --- periodic work ---

    async def _periodic(
        self,
        name: str,
        interval: float,
        action: Callable[[], Awaitable[None]],
    ) -> None:
        try:
            while self.running:
                await action()
                await asyncio.sleep(interval)
        except asyncio.CancelledError:
            logger.debug("%s task cancelled.", name)
        except Exception:
            logger.exception("%s task failed; stopping game loop.", name)
            self.stop()

    async def _update(self) -> None:
        async with self.lock:
            self.engine.tick()

    async def _sample_input(self) -> None:
        async with self.lock:
            self.engine.heading = self.tracker.derive_heading(
                self.engine.heading, len(self.engine.snake),
            )

    async def _repaint(self) -> None:
        async with self.lock:
            snapshot = self.engine.snapshot()
        rects = self.renderer.render(snapshot)
        result = self.present(snapshot, rects)
        if inspect.isawaitable(result):
            await result
        self.frames += 1

    @staticmethod
    def _has_event_loop() -> bool:
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return False
        return True
