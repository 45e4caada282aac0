"""Food placement logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from grid_snake.grid import Cell, CellType

if TYPE_CHECKING:
    from grid_snake.grid import Grid

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 64


class FoodSpawner:
    """Places food uniformly at random on cells the snake does not occupy.

    Placement first tries a bounded number of random draws over the whole
    board, then falls back to sampling from the full list of free cells, so
    it never loops longer than one board scan.
    """

    def __init__(
        self,
        grid: Grid,
        rng: np.random.Generator | None = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        if max_attempts < 0:
            raise ValueError("max_attempts must be >= 0.")
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_attempts = max_attempts

    def spawn(self) -> Cell | None:
        """Pick a free cell, mark it as food, and return it.

        Returns ``None`` when the snake fills the whole board.
        """
        cell = self._sample()
        if cell is None:
            logger.warning(
                "No free cell left for food on a %d-cell board.", self.grid.size,
            )
            return None
        self.grid.set(cell, CellType.FOOD)
        logger.debug("Food placed at %s.", cell)
        return cell

    def _sample(self) -> Cell | None:
        for _ in range(self.max_attempts):
            cell = self.grid.random_cell(self.rng)
            if self.grid.get(cell) != CellType.SNAKE:
                return cell

        free = self.grid.free_cells()
        if not free:
            return None
        return free[int(self.rng.integers(len(free)))]
