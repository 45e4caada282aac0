"""Tests for the Snake module."""

import pytest

from grid_snake.snake import Heading, Snake


class TestHeading:
    def test_opposites(self):
        assert Heading.UP.opposite is Heading.DOWN
        assert Heading.DOWN.opposite is Heading.UP
        assert Heading.LEFT.opposite is Heading.RIGHT
        assert Heading.RIGHT.opposite is Heading.LEFT

    def test_none_is_its_own_opposite(self):
        assert Heading.NONE.opposite is Heading.NONE

    def test_screen_coordinates(self):
        # Rows grow downwards.
        assert Heading.UP.value == (0, -1)
        assert Heading.DOWN.value == (0, 1)


class TestSnakeInit:
    def test_single_cell(self):
        snake = Snake([(5, 5)])
        assert snake.head == (5, 5)
        assert snake.tail == (5, 5)
        assert len(snake) == 1

    def test_minimum_length(self):
        with pytest.raises(ValueError, match="at least 1"):
            Snake([])

    def test_overlapping_segments_rejected(self):
        with pytest.raises(ValueError, match="overlap"):
            Snake([(1, 1), (1, 1)])


class TestSnakeMovement:
    def test_next_head(self):
        snake = Snake([(5, 5)])
        assert snake.next_head(Heading.RIGHT) == (6, 5)
        assert snake.next_head(Heading.UP) == (5, 4)
        assert snake.next_head(Heading.NONE) == (5, 5)

    def test_advance_single_cell(self):
        snake = Snake([(10, 10)])
        vacated = snake.advance(Heading.RIGHT)
        assert snake.body == [(11, 10)]
        assert vacated == (10, 10)

    def test_advance_shifts_every_segment(self):
        snake = Snake([(5, 5), (4, 5), (3, 5)])
        before = list(snake.body)
        vacated = snake.advance(Heading.DOWN)
        assert snake.body == [(5, 6), (5, 5), (4, 5)]
        assert vacated == (3, 5)
        # Each trailing segment sits where its predecessor was.
        for i in range(1, len(snake)):
            assert snake.body[i] == before[i - 1]

    def test_advance_none_keeps_head(self):
        snake = Snake([(2, 2)])
        snake.advance(Heading.NONE)
        assert snake.head == (2, 2)

    def test_grow(self):
        snake = Snake([(5, 5), (4, 5)])
        vacated = snake.advance(Heading.RIGHT)
        snake.grow(vacated)
        assert snake.body == [(6, 5), (5, 5), (4, 5)]


class TestSnakeCollision:
    def test_occupies(self):
        snake = Snake([(5, 5), (4, 5), (3, 5)])
        assert snake.occupies((5, 5))
        assert snake.occupies((3, 5))
        assert not snake.occupies((0, 0))

    def test_self_collision(self):
        snake = Snake([(1, 1), (2, 1), (2, 2), (1, 2), (0, 2)])
        assert not snake.self_collision()
        snake.advance(Heading.DOWN)
        assert snake.self_collision()

    def test_moving_into_old_tail_is_safe(self):
        snake = Snake([(1, 1), (2, 1), (2, 2), (1, 2)])
        snake.advance(Heading.DOWN)
        assert snake.head == (1, 2)
        assert not snake.self_collision()


class TestSnakeSerialization:
    def test_to_dict(self):
        snake = Snake([(5, 5), (4, 5)])
        assert snake.to_dict() == {"body": [[5, 5], [4, 5]]}
