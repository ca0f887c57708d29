"""Tests for the bounds-checked 2D view."""

import numpy as np
import pytest

from zero_slic.core.grid import Grid


class TestGrid:
    def test_row_major_layout(self):
        grid = Grid(np.arange(6), width=3, height=2)
        assert grid.shape == (2, 3)
        assert grid[0, 2] == 2
        assert grid[1, 0] == 3
        assert list(grid.flat()) == [0, 1, 2, 3, 4, 5]

    @pytest.mark.parametrize("key", [(-1, 0), (0, -1), (2, 0), (0, 3)])
    def test_out_of_range_raises(self, key):
        grid = Grid(np.arange(6), width=3, height=2)
        with pytest.raises(IndexError):
            grid[key]
        with pytest.raises(IndexError):
            grid[key] = 1

    def test_contains(self):
        grid = Grid.full(3, 2, -1)
        assert grid.contains(1, 2)
        assert not grid.contains(2, 2)
        assert not grid.contains(0, -1)

    def test_size_mismatch(self):
        with pytest.raises(ValueError):
            Grid(np.arange(5), width=3, height=2)

    def test_copies_buffer(self):
        data = np.zeros(4, dtype=int)
        grid = Grid(data, 2, 2)
        grid[0, 0] = 9
        assert data[0] == 0
