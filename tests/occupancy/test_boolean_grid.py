"""Tests for the flat-buffer boolean grid."""

import numpy as np
import pytest

from occupancy.boolean_grid import BooleanGrid3D


class TestIndexing:
    """Flat index layout and bounds checks."""

    def test_index_matches_c_order(self):
        grid = BooleanGrid3D((4, 3, 2))
        n, m, l = grid.shape
        expected = np.arange(n * m * l).reshape(grid.shape)
        for i in range(n):
            for j in range(m):
                for k in range(l):
                    assert grid.index(i, j, k) == i * m * l + j * l + k
                    assert grid.index(i, j, k) == expected[i, j, k]

    def test_set_then_get(self):
        grid = BooleanGrid3D((4, 3, 2))
        grid.set(2, 1, 1, True)
        assert grid.get(2, 1, 1) is True
        assert grid.view()[2, 1, 1]
        assert grid.count() == 1

    @pytest.mark.parametrize("ijk", [(-1, 0, 0), (0, -1, 0), (0, 0, -1), (4, 0, 0), (0, 3, 0), (0, 0, 2)])
    def test_out_of_bounds_raises(self, ijk):
        grid = BooleanGrid3D((4, 3, 2))
        assert not grid.in_bounds(*ijk)
        with pytest.raises(IndexError):
            grid.get(*ijk)
        with pytest.raises(IndexError):
            grid.set(*ijk, True)


class TestBulkOperations:
    """Whole-grid writes and comparisons."""

    def test_view_writes_through(self):
        grid = BooleanGrid3D((2, 2, 2))
        grid.view()[1, 0, 1] = True
        assert grid.get(1, 0, 1)

    def test_assign_and_fill(self):
        grid = BooleanGrid3D((2, 3, 4))
        mask = np.zeros((2, 3, 4), dtype=bool)
        mask[0, 2, 3] = True
        mask[1, 0, 0] = True
        grid.assign(mask)
        assert grid.count() == 2
        grid.fill(True)
        assert grid.count() == grid.size == 24

    def test_assign_wrong_shape(self):
        grid = BooleanGrid3D((2, 3, 4))
        with pytest.raises(ValueError):
            grid.assign(np.zeros((4, 3, 2), dtype=bool))

    def test_copy_and_equality(self):
        grid = BooleanGrid3D((3, 3, 3))
        grid.set(1, 1, 1, True)
        other = grid.copy()
        assert other == grid
        other.set(0, 0, 0, True)
        assert other != grid
        assert grid.count() == 1
