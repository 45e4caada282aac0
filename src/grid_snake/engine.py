"""Tick-based game engine composing grid, snake, and food logic."""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np

from grid_snake.config import DEFAULT_CELL_SIZE, GameConfig
from grid_snake.food import DEFAULT_MAX_ATTEMPTS, FoodSpawner
from grid_snake.grid import Cell, CellType, Grid
from grid_snake.snake import Heading, Snake

logger = logging.getLogger(__name__)


class TickResult(enum.Enum):
    """What a single tick did to the board."""

    STOPPED = "stopped"
    MOVED = "moved"
    ATE = "ate"
    HIT_WALL = "hit_wall"
    HIT_SELF = "hit_self"


@dataclass(frozen=True)
class Snapshot:
    """Immutable copy of everything the renderer needs for one frame."""

    snake: tuple[Cell, ...]
    food: Cell | None
    heading: Heading
    score: int
    episode: int


class GameEngine:
    """Single-player snake engine that restarts itself on collision.

    The engine owns the grid, snake, food and heading. Each call to
    :meth:`tick` advances the game by one step; hitting a wall or the
    snake's own body silently starts a new episode.
    """

    def __init__(
        self,
        width: int,
        height: int,
        cell_size: int = DEFAULT_CELL_SIZE,
        max_food_attempts: int = DEFAULT_MAX_ATTEMPTS,
        seed: int | None = None,
    ) -> None:
        self.grid = Grid.from_pixels(width, height, cell_size)
        self.rng = np.random.default_rng(seed)
        self.food_spawner = FoodSpawner(
            self.grid, rng=self.rng, max_attempts=max_food_attempts,
        )

        self.heading = Heading.NONE
        self.snake = Snake([(0, 0)])
        self.food: Cell | None = None
        self.episode = 0
        self.score = 0
        self.ticks = 0
        self.running = True
        self.reset()

    @classmethod
    def from_config(cls, config: GameConfig) -> GameEngine:
        return cls(
            width=config.width,
            height=config.height,
            cell_size=config.cell_size,
            max_food_attempts=config.max_food_attempts,
            seed=config.seed,
        )

    @property
    def columns(self) -> int:
        return self.grid.columns

    @property
    def rows(self) -> int:
        return self.grid.rows

    def reset(self) -> None:
        """Start a new episode with a one-cell snake at a random position."""
        self.heading = Heading.NONE
        self.grid.clear()
        start = self.grid.random_cell(self.rng)
        self.snake = Snake([start])
        self.grid.set(start, CellType.SNAKE)
        self.episode += 1
        self.score = 0
        self.ticks = 0
        self.spawn_food()

    def spawn_food(self) -> Cell | None:
        """Move the food to a random cell the snake does not occupy."""
        self.food = self.food_spawner.spawn()
        return self.food

    def tick(self) -> TickResult:
        """Advance the game by one step."""
        if not self.running:
            return TickResult.STOPPED

        vacated = self.snake.advance(self.heading)
        head = self.snake.head

        # --- wall check ---
        if not self.grid.in_bounds(head):
            self._end_episode(TickResult.HIT_WALL)
            return TickResult.HIT_WALL

        # --- self-collision check ---
        if self.snake.self_collision():
            self._end_episode(TickResult.HIT_SELF)
            return TickResult.HIT_SELF

        # The vacated cell is cleared before the head is painted so that a
        # head moving into the old tail position stays marked.
        self.grid.set(vacated, CellType.EMPTY)
        self.grid.set(head, CellType.SNAKE)
        self.ticks += 1

        # --- food check ---
        if head == self.food:
            self.snake.grow(vacated)
            self.grid.set(vacated, CellType.SNAKE)
            self.score += 1
            self.spawn_food()
            return TickResult.ATE

        return TickResult.MOVED

    def stop(self) -> None:
        """Stop ticking; periodic loops watch this flag to exit."""
        self.running = False

    def arrange(
        self,
        body: Iterable[Cell],
        food: Cell | None = None,
        heading: Heading = Heading.NONE,
    ) -> None:
        """Place an explicit board arrangement within the current episode.

        When *food* is omitted a new food cell is spawned.
        """
        snake = Snake(body)
        for cell in snake:
            if not self.grid.in_bounds(cell):
                raise ValueError(f"Snake cell {cell} lies outside the grid.")
        if food is not None:
            food = tuple(food)
            if not self.grid.in_bounds(food):
                raise ValueError(f"Food cell {food} lies outside the grid.")
            if snake.occupies(food):
                raise ValueError("Food must not overlap the snake.")

        self.grid.clear()
        self.snake = snake
        for cell in snake:
            self.grid.set(cell, CellType.SNAKE)
        self.heading = heading
        if food is None:
            self.spawn_food()
        else:
            self.food = food
            self.grid.set(food, CellType.FOOD)

    def snapshot(self) -> Snapshot:
        """Return an immutable copy of the current board."""
        return Snapshot(
            snake=tuple(self.snake.body),
            food=self.food,
            heading=self.heading,
            score=self.score,
            episode=self.episode,
        )

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "episode": self.episode,
            "ticks": self.ticks,
            "score": self.score,
            "running": self.running,
            "heading": self.heading.name.lower(),
            "grid": self.grid.to_dict(),
            "snake": self.snake.to_dict(),
            "food": list(self.food) if self.food is not None else None,
        }

    def _end_episode(self, cause: TickResult) -> None:
        logger.info(
            "Episode %d ended (%s) at length %d with score %d after %d ticks.",
            self.episode, cause.value, len(self.snake), self.score, self.ticks,
        )
        self.reset()
