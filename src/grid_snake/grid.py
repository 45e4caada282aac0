"""Occupancy grid for the snake board."""

from __future__ import annotations

import enum

import numpy as np

# A grid square as (column, row).
Cell = tuple[int, int]


class CellType(enum.IntEnum):
    """Integer codes stored in the grid array."""

    EMPTY = 0
    SNAKE = 1
    FOOD = 2


class Grid:
    """NumPy-backed board of ``columns`` x ``rows`` cells.

    Coordinates are ``(col, row)`` pairs; the backing array is indexed
    ``[row, col]`` so that it reads like the screen.
    """

    def __init__(self, columns: int, rows: int) -> None:
        if columns < 1 or rows < 1:
            raise ValueError("Grid must be at least 1×1 cells.")
        self.columns = columns
        self.rows = rows
        self.cells = np.zeros((rows, columns), dtype=np.int8)

    @classmethod
    def from_pixels(cls, width: int, height: int, cell_size: int) -> Grid:
        """Build the grid that fits a ``width`` x ``height`` pixel surface."""
        if cell_size < 1:
            raise ValueError("cell_size must be positive.")
        if width < 1 or height < 1:
            raise ValueError("Surface width and height must be positive.")
        return cls(width // cell_size, height // cell_size)

    @property
    def size(self) -> int:
        return self.columns * self.rows

    def clear(self) -> None:
        """Reset all cells to empty."""
        self.cells[:] = CellType.EMPTY

    def in_bounds(self, cell: Cell) -> bool:
        """Check whether a cell lies on the board."""
        col, row = cell
        return 0 <= col < self.columns and 0 <= row < self.rows

    def get(self, cell: Cell) -> CellType:
        col, row = cell
        return CellType(self.cells[row, col])

    def set(self, cell: Cell, cell_type: CellType) -> None:
        col, row = cell
        self.cells[row, col] = cell_type

    def random_cell(self, rng: np.random.Generator) -> Cell:
        """Return a cell drawn uniformly over the whole board."""
        return int(rng.integers(self.columns)), int(rng.integers(self.rows))

    def free_cells(self) -> list[Cell]:
        """Return every cell not occupied by the snake."""
        rows, cols = np.where(self.cells != CellType.SNAKE)
        return list(zip(cols.tolist(), rows.tolist(), strict=True))

    def to_dict(self) -> dict:
        """Serialize grid geometry to a dictionary."""
        return {"columns": self.columns, "rows": self.rows}
