"""Translate a board snapshot into fill-rectangle draw calls."""

from __future__ import annotations

from dataclasses import dataclass

from grid_snake.config import (
    DEFAULT_CELL_SIZE,
    DEFAULT_PADDING,
    Color,
    GameConfig,
    Palette,
)
from grid_snake.engine import Snapshot
from grid_snake.grid import Cell


@dataclass(frozen=True)
class FillRect:
    """One filled rectangle in surface pixel coordinates."""

    color: Color
    x: int
    y: int
    width: int
    height: int

    def to_dict(self) -> dict:
        return {
            "color": list(self.color),
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
        }


class Renderer:
    """Maps snapshots of the board onto a ``width`` x ``height`` surface.

    Every cell square is inset by ``padding`` pixels on its top and left
    edges, leaving a visible gap between neighbouring segments.
    """

    def __init__(
        self,
        width: int,
        height: int,
        cell_size: int = DEFAULT_CELL_SIZE,
        padding: int = DEFAULT_PADDING,
        palette: Palette | None = None,
    ) -> None:
        if not 0 <= padding < cell_size:
            raise ValueError("padding must be in [0, cell_size).")
        self.width = width
        self.height = height
        self.cell_size = cell_size
        self.padding = padding
        self.palette = palette if palette is not None else Palette()

    @classmethod
    def from_config(cls, config: GameConfig) -> Renderer:
        return cls(
            width=config.width,
            height=config.height,
            cell_size=config.cell_size,
            padding=config.padding,
            palette=config.palette,
        )

    def cell_rect(self, cell: Cell, color: Color) -> FillRect:
        col, row = cell
        edge = self.cell_size - self.padding
        return FillRect(
            color,
            col * self.cell_size + self.padding,
            row * self.cell_size + self.padding,
            edge,
            edge,
        )

    def render(self, snapshot: Snapshot) -> list[FillRect]:
        """Return the draw calls for one frame: background, snake, food."""
        rects = [FillRect(self.palette.background, 0, 0, self.width, self.height)]
        rects.extend(self.cell_rect(cell, self.palette.snake) for cell in snapshot.snake)
        if snapshot.food is not None:
            rects.append(self.cell_rect(snapshot.food, self.palette.food))
        return rects
