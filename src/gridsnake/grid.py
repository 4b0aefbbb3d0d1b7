"""Grid geometry for the snake game."""

from __future__ import annotations

import enum
from collections.abc import Iterable

import numpy as np


class CellType(enum.IntEnum):
    """Integer codes stored in rendered grid arrays."""

    EMPTY = 0
    SNAKE = 1
    FOOD = 2


class Grid:
    """Fixed-size board of ``width`` x ``height`` cells.

    Coordinates use (x, y) ordering; rendered arrays are indexed
    ``[y, x]`` so that rows match NumPy's layout.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ValueError("Grid dimensions must be positive.")
        if width * height < 2:
            raise ValueError("Grid must contain at least 2 cells.")
        self._width = width
        self._height = height

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> int:
        return self._width * self._height

    @property
    def center(self) -> tuple[int, int]:
        return self._width // 2, self._height // 2

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= x < self._width and 0 <= y < self._height

    def random_cell(self, rng: np.random.Generator) -> tuple[int, int]:
        """Draw a cell uniformly at random."""
        x = int(rng.integers(self._width))
        y = int(rng.integers(self._height))
        return x, y

    def render(
        self,
        body: Iterable[tuple[int, int]],
        food: tuple[int, int] | None,
    ) -> np.ndarray:
        """Paint *body* and *food* onto a fresh ``(height, width)`` array."""
        cells = np.zeros((self._height, self._width), dtype=np.int8)
        if food is not None:
            fx, fy = food
            cells[fy, fx] = CellType.FOOD
        for x, y in body:
            cells[y, x] = CellType.SNAKE
        return cells

    def to_dict(self) -> dict:
        """Serialize grid dimensions to a dictionary."""
        return {"width": self._width, "height": self._height}
