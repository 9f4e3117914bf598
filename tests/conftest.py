"""Pytest configuration and fixtures for occupancy grid tests."""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


def _grid_from_occupied(occupied, order=1):
    """Refreshed OccupancyGrid whose carrier is exactly `occupied`."""
    from occupancy import GridConfig, MaskCarrier, OccupancyGrid

    occupied = np.asarray(occupied, dtype=bool)
    config = GridConfig(shape=occupied.shape, order=order, carrier=MaskCarrier(occupied))
    grid = OccupancyGrid(config)
    grid.refresh([])
    return grid


@pytest.fixture
def make_grid():
    """Factory: refreshed grid from an occupied boolean array."""
    return _grid_from_occupied


@pytest.fixture
def make_plane_grid():
    """Factory: refreshed (n, m, 3) grid with (i, j) cells occupied on plane k = 1."""

    def _make(cells, n, m):
        occupied = np.zeros((n, m, 3), dtype=bool)
        for i, j in cells:
            occupied[i, j, 1] = True
        return _grid_from_occupied(occupied)

    return _make


@pytest.fixture
def shell_grid():
    """3x3x3 carrier everywhere except the centre voxel (1, 1, 1)."""
    carrier = np.ones((3, 3, 3), dtype=bool)
    carrier[1, 1, 1] = False
    return _grid_from_occupied(carrier)


@pytest.fixture
def single_biomass_grid():
    """5x5x5 grid, one species positive only at (2, 2, 2), no carrier."""
    from occupancy import GridConfig, OccupancyGrid, ParticulateSpecies

    conc = np.zeros((5, 5, 5))
    conc[2, 2, 2] = 0.3
    grid = OccupancyGrid(GridConfig(shape=(5, 5, 5), order=1))
    grid.refresh([ParticulateSpecies(name="a", levels=[conc])])
    return grid
