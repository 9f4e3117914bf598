"""Tests for the plain-text grid dump."""

import numpy as np
import pytest

from occupancy.boolean_grid import BooleanGrid3D
from utilities.formatting import core_matrix_to_string


def test_one_block_per_plane():
    arr = np.zeros((2, 3, 2), dtype=bool)
    arr[1, 2, 0] = True
    arr[0, 0, 1] = True
    text = core_matrix_to_string(arr)
    assert text == "0\t0\t0\n0\t0\t1\n\n1\t0\t0\n0\t0\t0\n"


def test_accepts_boolean_grid():
    grid = BooleanGrid3D((1, 2, 1))
    grid.set(0, 1, 0, True)
    assert core_matrix_to_string(grid) == "0\t1\n"


def test_rejects_non_3d():
    with pytest.raises(ValueError):
        core_matrix_to_string(np.zeros((2, 2)))
