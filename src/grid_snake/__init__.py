"""Grid Snake: a single-player snake game loop."""

from grid_snake.config import GameConfig, KeyBindings, Palette
from grid_snake.controls import InputTracker
from grid_snake.engine import GameEngine, Snapshot, TickResult
from grid_snake.grid import Cell, CellType, Grid
from grid_snake.render import FillRect, Renderer
from grid_snake.scheduler import GameLoop
from grid_snake.snake import Heading, Snake

__all__ = [
    "Cell",
    "CellType",
    "FillRect",
    "GameConfig",
    "GameEngine",
    "GameLoop",
    "Grid",
    "Heading",
    "InputTracker",
    "KeyBindings",
    "Palette",
    "Renderer",
    "Snake",
    "Snapshot",
    "TickResult",
]
