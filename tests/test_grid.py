"""Tests for the Grid module."""

import numpy as np
import pytest

from gridsnake.grid import CellType, Grid


class TestGridInit:
    def test_dimensions(self):
        grid = Grid(width=10, height=8)
        assert grid.width == 10
        assert grid.height == 8
        assert grid.size == 80

    def test_positive_dimensions_enforced(self):
        with pytest.raises(ValueError, match="positive"):
            Grid(width=0, height=4)
        with pytest.raises(ValueError, match="positive"):
            Grid(width=4, height=-1)

    def test_single_cell_rejected(self):
        with pytest.raises(ValueError, match="at least 2"):
            Grid(width=1, height=1)

    def test_thin_grid_allowed(self):
        grid = Grid(width=2, height=1)
        assert grid.size == 2

    def test_center(self):
        assert Grid(8, 8).center == (4, 4)
        assert Grid(7, 5).center == (3, 2)


class TestGridOperations:
    def test_in_bounds(self):
        grid = Grid(width=5, height=4)
        assert grid.in_bounds(0, 0)
        assert grid.in_bounds(4, 3)
        assert not grid.in_bounds(-1, 0)
        assert not grid.in_bounds(0, -1)
        assert not grid.in_bounds(5, 0)
        assert not grid.in_bounds(0, 4)

    def test_random_cell_in_bounds(self):
        grid = Grid(width=3, height=7)
        rng = np.random.default_rng(0)
        cells = {grid.random_cell(rng) for _ in range(500)}
        assert all(grid.in_bounds(x, y) for x, y in cells)
        # Every cell of a tiny grid shows up eventually.
        assert len(cells) == 21

    def test_render(self):
        grid = Grid(width=6, height=4)
        cells = grid.render([(3, 2), (4, 2)], (0, 1))
        assert cells.shape == (4, 6)
        assert cells[2, 3] == CellType.SNAKE
        assert cells[2, 4] == CellType.SNAKE
        assert cells[1, 0] == CellType.FOOD
        assert np.count_nonzero(cells) == 3

    def test_render_without_food(self):
        grid = Grid(width=4, height=4)
        cells = grid.render([(0, 0)], None)
        assert np.count_nonzero(cells == CellType.FOOD) == 0


class TestGridSerialization:
    def test_to_dict(self):
        assert Grid(5, 6).to_dict() == {"width": 5, "height": 6}
