"""Food placement logic."""

from __future__ import annotations

import logging
from collections.abc import Container
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from gridsnake.grid import Grid

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Places the single food cell on the grid by rejection sampling.

    Uses an injectable NumPy generator for reproducible placement. Sampling
    only terminates while some cell is free; a full board is not handled.
    """

    def __init__(
        self,
        grid: Grid,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()

    def resample(self, occupied: Container[tuple[int, int]]) -> tuple[int, int]:
        """Return a uniformly random cell not contained in *occupied*."""
        attempts = 1
        cell = self.grid.random_cell(self.rng)
        while cell in occupied:
            cell = self.grid.random_cell(self.rng)
            attempts += 1
        logger.debug("Food placed at %s after %d draw(s).", cell, attempts)
        return cell

    def initial(self) -> tuple[int, int]:
        """Sample the first food cell, avoiding the grid centre."""
        return self.resample({self.grid.center})
