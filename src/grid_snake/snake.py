"""Snake body and heading."""

from __future__ import annotations

import enum
from collections.abc import Iterable

from grid_snake.grid import Cell


class Heading(enum.Enum):
    """Direction of travel with (col_delta, row_delta) values."""

    NONE = (0, 0)
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Heading:
        dc, dr = self.value
        return Heading((-dc, -dr))


class Snake:
    """A snake represented as an ordered list of (col, row) segments.

    The head is ``body[0]``; the tail is ``body[-1]``.
    """

    def __init__(self, body: Iterable[Cell]) -> None:
        self.body: list[Cell] = [tuple(cell) for cell in body]
        if not self.body:
            raise ValueError("Snake length must be at least 1.")
        if len(set(self.body)) != len(self.body):
            raise ValueError("Snake segments must not overlap.")

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self):
        return iter(self.body)

    @property
    def head(self) -> Cell:
        """Return the head coordinate."""
        return self.body[0]

    @property
    def tail(self) -> Cell:
        return self.body[-1]

    def next_head(self, heading: Heading) -> Cell:
        """Compute the next head position without moving."""
        dc, dr = heading.value
        col, row = self.head
        return col + dc, row + dr

    def advance(self, heading: Heading) -> Cell:
        """Move one step in *heading*, shifting every segment up by one.

        Each trailing segment takes the position its predecessor held
        before the move. Returns the cell the tail left behind.
        """
        old = self.head
        self.body[0] = self.next_head(heading)
        for i in range(1, len(self.body)):
            self.body[i], old = old, self.body[i]
        return old

    def grow(self, cell: Cell) -> None:
        """Append a new tail segment at *cell*."""
        self.body.append(cell)

    def occupies(self, cell: Cell) -> bool:
        """Check whether the snake occupies a given cell."""
        return cell in self.body

    def self_collision(self) -> bool:
        """Check whether the head overlaps any other body segment."""
        head = self.head
        return any(seg == head for seg in self.body[1:])

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {"body": [list(seg) for seg in self.body]}
