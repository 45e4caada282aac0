"""Tests for the periodic game loop."""

from __future__ import annotations

import asyncio

import pytest

from grid_snake.config import GameConfig
from grid_snake.controls import InputTracker
from grid_snake.engine import GameEngine
from grid_snake.render import Renderer
from grid_snake.scheduler import GameLoop
from grid_snake.snake import Heading


def _make_loop(present, tick_ms=20, refresh_ms=2):
    engine = GameEngine(width=1280, height=720, cell_size=20, seed=0)
    engine.arrange([(10, 10)], food=(60, 30))
    return GameLoop(
        engine=engine,
        tracker=InputTracker(),
        renderer=Renderer(1280, 720),
        present=present,
        tick_ms=tick_ms,
        refresh_ms=refresh_ms,
    )


async def _wait_for(predicate, timeout=2.0):
    deadline = asyncio.get_running_loop().time() + timeout
    while not predicate():
        if asyncio.get_running_loop().time() > deadline:
            raise AssertionError("condition not reached in time")
        await asyncio.sleep(0.005)


class TestGameLoopInit:
    def test_invalid_intervals(self):
        with pytest.raises(ValueError, match="positive"):
            _make_loop(lambda s, r: None, tick_ms=0)

    def test_from_config(self):
        config = GameConfig(width=400, height=200, tick_ms=50, refresh_ms=10)
        loop = GameLoop.from_config(config, lambda s, r: None)
        assert (loop.engine.columns, loop.engine.rows) == (20, 10)
        assert loop.tick_ms == 50
        assert not loop.started


class TestGameLoopRun:
    @pytest.mark.asyncio
    async def test_frames_are_presented(self):
        frames = []
        loop = _make_loop(lambda snap, rects: frames.append((snap, rects)))
        loop.start()
        await _wait_for(lambda: len(frames) >= 3)
        loop.stop()
        await loop.run()
        snap, rects = frames[0]
        assert snap.snake == ((10, 10),)
        # Background, one snake cell, food.
        assert len(rects) == 3

    @pytest.mark.asyncio
    async def test_async_sink(self):
        frames = []

        async def present(snap, rects):
            await asyncio.sleep(0)
            frames.append(rects)

        loop = _make_loop(present)
        loop.start()
        await _wait_for(lambda: len(frames) >= 2)
        loop.stop()
        await loop.run()
        assert loop.frames >= 2

    @pytest.mark.asyncio
    async def test_held_key_steers_snake(self):
        loop = _make_loop(lambda s, r: None)
        loop.key_down("d")
        loop.start()
        await _wait_for(lambda: loop.engine.snake.head[0] >= 12)
        loop.stop()
        await loop.run()
        assert loop.engine.heading is Heading.RIGHT
        assert loop.engine.snake.head[1] == 10

    @pytest.mark.asyncio
    async def test_quit_key_stops_all_tasks(self):
        loop = _make_loop(lambda s, r: None)
        loop.start()
        await asyncio.sleep(0.02)
        assert loop.key_typed("escape")
        await asyncio.wait_for(loop.run(), timeout=1.0)
        assert not loop.running

    @pytest.mark.asyncio
    async def test_non_quit_key_keeps_running(self):
        loop = _make_loop(lambda s, r: None)
        loop.start()
        assert not loop.key_typed("w")
        assert loop.running
        loop.stop()
        await loop.run()

    @pytest.mark.asyncio
    async def test_failing_sink_stops_loop(self):
        def present(snap, rects):
            raise RuntimeError("surface lost")

        loop = _make_loop(present)
        await asyncio.wait_for(loop.run(), timeout=1.0)
        assert not loop.running

    @pytest.mark.asyncio
    async def test_double_start_rejected(self):
        loop = _make_loop(lambda s, r: None)
        loop.start()
        with pytest.raises(RuntimeError, match="already started"):
            loop.start()
        loop.stop()
        await loop.run()
