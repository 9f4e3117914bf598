"""Simple particulate species inputs for runs and tests."""

from typing import Sequence, Tuple

import numpy as np

from .datastructures import ParticulateSpecies


def level_shapes(shape: Tuple[int, int, int], order: int):
    """Grid shape of every multigrid level, coarsest first.

    Each coarser level halves the finer one (at least one voxel per axis).
    """
    shapes = [tuple(shape)]
    for _ in range(order - 1):
        shapes.append(tuple(max(1, s // 2) for s in shapes[-1]))
    return shapes[::-1]


def make_colony_species(
    name: str,
    shape: Tuple[int, int, int],
    order: int,
    centers: Sequence[Sequence[float]],
    radius: float,
    concentration: float = 1.0,
) -> ParticulateSpecies:
    """Species with spherical colonies on the finest level.

    Parameters
    ----------
    name : str
        Species name
    shape : tuple
        Finest grid shape (N, M, L)
    order : int
        Number of multigrid levels
    centers : sequence of (i, j, k)
        Colony centres in voxel coordinates
    radius : float
        Colony radius in voxels (a voxel is inside when its centre distance
        is <= radius)
    concentration : float
        Value inside colonies; 0 elsewhere

    Returns
    -------
    ParticulateSpecies
        Coarser levels are zero-filled.
    """
    I, J, K = np.indices(shape)
    finest = np.zeros(shape, dtype=np.float64)
    for c in centers:
        ci, cj, ck = c
        inside = (I - ci) ** 2 + (J - cj) ** 2 + (K - ck) ** 2 <= radius**2
        finest[inside] = concentration

    levels = [np.zeros(s, dtype=np.float64) for s in level_shapes(shape, order)[:-1]]
    levels.append(finest)
    return ParticulateSpecies(name=name, levels=levels)
