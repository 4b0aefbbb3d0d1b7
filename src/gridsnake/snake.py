"""Snake representation and direction rules."""

from __future__ import annotations

import enum
from collections import deque


class Direction(enum.Enum):
    """Movement directions with (dx, dy) values.

    ``NONE`` is the heading of a snake that has not received any input yet.
    """

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    NONE = (0, 0)

    @property
    def is_vertical(self) -> bool:
        return self in (Direction.UP, Direction.DOWN)

    @property
    def is_horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def can_move(current: Direction, requested: Direction) -> bool:
    """Return True if a snake heading *current* may turn to *requested*.

    Keeping the same heading or turning 90° is allowed; reversing along the
    same axis is not. Nothing can switch back to ``NONE``.
    """
    if requested is Direction.NONE:
        return False
    return _OPPOSITES.get(requested) is not current


class Snake:
    """A snake stored as a deque of (x, y) cells, oldest first.

    The head is ``body[-1]``; the tail is ``body[0]``.
    """

    def __init__(self, x: int, y: int, growth: int = 0) -> None:
        if growth < 0:
            raise ValueError("growth must be non-negative.")
        self.body: deque[tuple[int, int]] = deque([(x, y)])
        self.direction = Direction.NONE
        self.growing = growth

    def __len__(self) -> int:
        return len(self.body)

    @property
    def head(self) -> tuple[int, int]:
        """Return the head coordinate."""
        return self.body[-1]

    @property
    def tail(self) -> tuple[int, int]:
        return self.body[0]

    def next_head(self) -> tuple[int, int]:
        """Compute the next head position without moving."""
        dx, dy = self.direction.value
        x, y = self.head
        return x + dx, y + dy

    def schedule_growth(self, segments: int = 1) -> None:
        """Queue growth for the next *segments* ticks."""
        if segments < 0:
            raise ValueError("segments must be non-negative.")
        self.growing += segments

    def vacating(self) -> tuple[int, int] | None:
        """Return the tail cell freed by the next move, or None if growing."""
        if self.growing > 0:
            return None
        return self.tail

    def blocks(self, cell: tuple[int, int]) -> bool:
        """Check whether moving into *cell* this tick hits the body.

        The tail does not block when it is about to move away.
        """
        return cell in self.body and cell != self.vacating()

    def advance(self, cell: tuple[int, int]) -> tuple[int, int] | None:
        """Push *cell* as the new head, consuming pending growth.

        Returns the vacated tail cell, or ``None`` if the snake grew.
        """
        vacated = None
        if self.growing > 0:
            self.growing -= 1
        else:
            vacated = self.body.popleft()
        self.body.append(cell)
        return vacated

    def occupies(self, x: int, y: int) -> bool:
        """Check whether the snake occupies a given cell."""
        return (x, y) in self.body

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [list(seg) for seg in self.body],
            "direction": self.direction.name.lower(),
            "growing": self.growing,
        }
