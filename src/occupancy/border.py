"""Border classification on the combined (biomass or carrier) grid.

A voxel is a border point when it is occupied and at least one voxel of its
3x3x3 neighbourhood *inside the grid* is unoccupied. Neighbours that fall
outside the grid are skipped, so a voxel on the domain edge is only a border
point if one of its in-grid neighbours is empty.
"""

import numpy as np
from numba import njit

from .boolean_grid import BooleanGrid3D

# Plane used by the 2D test geometry.
PLANE_2D = 1


@njit(cache=True, nogil=True)
def _border_mask_kernel(occupied):
    """Border classification of every voxel of a 3D boolean array."""
    n, m, l = occupied.shape
    out = np.zeros((n, m, l), dtype=np.bool_)

    for i in range(n):
        for j in range(m):
            for k in range(l):
                if not occupied[i, j, k]:
                    continue
                found = False
                for di in range(-1, 2):
                    ii = i + di
                    if ii < 0 or ii >= n:
                        continue
                    for dj in range(-1, 2):
                        jj = j + dj
                        if jj < 0 or jj >= m:
                            continue
                        for dk in range(-1, 2):
                            kk = k + dk
                            if kk < 0 or kk >= l:
                                continue
                            if not occupied[ii, jj, kk]:
                                found = True
                                break
                        if found:
                            break
                    if found:
                        break
                out[i, j, k] = found

    return out


class BorderClassifier:
    """Read-only border queries over an occupancy grid.

    Parameters
    ----------
    occupied : BooleanGrid3D
        Combined biomass-or-carrier grid. The classifier keeps a reference,
        so queries always see the latest refresh.
    """

    def __init__(self, occupied: BooleanGrid3D):
        self.occupied = occupied

    def is_border_point(self, i: int, j: int, k: int) -> bool:
        """True if (i, j, k) is occupied and touches an in-grid empty voxel.

        Raises
        ------
        IndexError
            If (i, j, k) itself is outside the grid.
        """
        if not self.occupied.get(i, j, k):
            return False
        occ = self.occupied.view()
        for di in (-1, 0, 1):
            for dj in (-1, 0, 1):
                for dk in (-1, 0, 1):
                    ii, jj, kk = i + di, j + dj, k + dk
                    if not self.occupied.in_bounds(ii, jj, kk):
                        continue
                    if not occ[ii, jj, kk]:
                        return True
        return False

    def is_border_point_2d(self, i: int, j: int) -> bool:
        """Border test on the fixed plane k = 1."""
        return self.is_border_point(i, j, PLANE_2D)

    def border_mask(self) -> np.ndarray:
        """Border classification of the whole grid as an (N, M, L) array."""
        return _border_mask_kernel(self.occupied.view())

    def border_points(self) -> np.ndarray:
        """Coordinates of all border voxels, shape (n_border, 3)."""
        return np.argwhere(self.border_mask())
