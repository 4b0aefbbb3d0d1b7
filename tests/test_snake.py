"""Tests for the Snake module."""

from collections import deque

import pytest

from gridsnake.snake import Direction, Snake, can_move


class TestDirection:
    def test_axes(self):
        assert Direction.UP.is_vertical
        assert Direction.DOWN.is_vertical
        assert Direction.LEFT.is_horizontal
        assert Direction.RIGHT.is_horizontal
        assert not Direction.NONE.is_vertical
        assert not Direction.NONE.is_horizontal

    @pytest.mark.parametrize(
        ("current", "requested"),
        [
            (Direction.UP, Direction.DOWN),
            (Direction.DOWN, Direction.UP),
            (Direction.LEFT, Direction.RIGHT),
            (Direction.RIGHT, Direction.LEFT),
        ],
    )
    def test_reversal_rejected(self, current, requested):
        assert not can_move(current, requested)

    @pytest.mark.parametrize(
        ("current", "requested"),
        [
            (Direction.UP, Direction.LEFT),
            (Direction.UP, Direction.RIGHT),
            (Direction.LEFT, Direction.UP),
            (Direction.RIGHT, Direction.DOWN),
            (Direction.UP, Direction.UP),
        ],
    )
    def test_turn_or_same_heading_allowed(self, current, requested):
        assert can_move(current, requested)

    def test_any_heading_allowed_from_none(self):
        for d in (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT):
            assert can_move(Direction.NONE, d)

    def test_cannot_return_to_none(self):
        assert not can_move(Direction.UP, Direction.NONE)
        assert not can_move(Direction.NONE, Direction.NONE)


class TestSnakeInit:
    def test_default_creation(self):
        snake = Snake(4, 4)
        assert snake.head == (4, 4)
        assert snake.tail == (4, 4)
        assert len(snake) == 1
        assert snake.direction == Direction.NONE
        assert snake.growing == 0

    def test_initial_growth(self):
        snake = Snake(4, 4, growth=4)
        assert snake.growing == 4

    def test_negative_growth(self):
        with pytest.raises(ValueError, match="non-negative"):
            Snake(0, 0, growth=-1)


class TestSnakeMovement:
    def test_next_head(self):
        snake = Snake(4, 4)
        snake.direction = Direction.UP
        assert snake.next_head() == (4, 3)
        snake.direction = Direction.RIGHT
        assert snake.next_head() == (5, 4)

    def test_advance_without_growth(self):
        snake = Snake(4, 4)
        vacated = snake.advance((5, 4))
        assert snake.head == (5, 4)
        assert len(snake) == 1
        assert vacated == (4, 4)

    def test_advance_with_growth(self):
        snake = Snake(4, 4, growth=2)
        assert snake.advance((5, 4)) is None
        assert snake.advance((6, 4)) is None
        assert list(snake.body) == [(4, 4), (5, 4), (6, 4)]
        assert snake.advance((7, 4)) == (4, 4)
        assert len(snake) == 3

    def test_schedule_growth(self):
        snake = Snake(4, 4)
        snake.schedule_growth(3)
        assert snake.growing == 3
        with pytest.raises(ValueError, match="non-negative"):
            snake.schedule_growth(-1)


class TestSnakeCollision:
    def test_occupies(self):
        snake = Snake(4, 4, growth=1)
        snake.advance((5, 4))
        assert snake.occupies(4, 4)
        assert snake.occupies(5, 4)
        assert not snake.occupies(0, 0)

    def test_vacating_tail(self):
        snake = Snake(4, 4)
        snake.body = deque([(3, 3), (4, 3), (4, 4)])
        assert snake.vacating() == (3, 3)
        snake.schedule_growth(1)
        assert snake.vacating() is None

    def test_tail_blocks_only_while_growing(self):
        snake = Snake(4, 4)
        snake.body = deque([(3, 3), (4, 3), (4, 4), (3, 4)])
        assert not snake.blocks((3, 3))
        assert snake.blocks((4, 3))
        snake.schedule_growth(1)
        assert snake.blocks((3, 3))


class TestSnakeSerialization:
    def test_to_dict(self):
        snake = Snake(4, 4, growth=1)
        snake.direction = Direction.RIGHT
        snake.advance((5, 4))
        d = snake.to_dict()
        assert d["body"] == [[4, 4], [5, 4]]
        assert d["direction"] == "right"
        assert d["growing"] == 0
