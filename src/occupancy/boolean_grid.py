"""Flat-buffer 3D boolean grid.

Voxel (i, j, k) of an (N, M, L) grid lives at flat position

    index(i, j, k) = i*M*L + j*L + k

which is numpy's C-order ravel, so view() can expose the buffer as an
(N, M, L) array without copying.
"""

from typing import Tuple

import numpy as np


class BooleanGrid3D:
    """Bounds-checked boolean grid backed by one contiguous numpy buffer."""

    __slots__ = ("shape", "_data")

    def __init__(self, shape: Tuple[int, int, int]):
        n, m, l = (int(s) for s in shape)
        self.shape = (n, m, l)
        self._data = np.zeros(n * m * l, dtype=np.bool_)

    @property
    def size(self) -> int:
        return self._data.size

    def in_bounds(self, i: int, j: int, k: int) -> bool:
        n, m, l = self.shape
        return 0 <= i < n and 0 <= j < m and 0 <= k < l

    def index(self, i: int, j: int, k: int) -> int:
        _, m, l = self.shape
        return i * m * l + j * l + k

    def _checked_index(self, i: int, j: int, k: int) -> int:
        if not self.in_bounds(i, j, k):
            raise IndexError(f"Voxel ({i}, {j}, {k}) outside grid of shape {self.shape}")
        return self.index(i, j, k)

    def get(self, i: int, j: int, k: int) -> bool:
        return bool(self._data[self._checked_index(i, j, k)])

    def set(self, i: int, j: int, k: int, value: bool) -> None:
        self._data[self._checked_index(i, j, k)] = bool(value)

    def view(self) -> np.ndarray:
        """(N, M, L) view of the buffer. Writes through to the grid."""
        return self._data.reshape(self.shape)

    def fill(self, value: bool) -> None:
        self._data.fill(bool(value))

    def assign(self, mask: np.ndarray) -> None:
        """Overwrite every voxel from a same-shaped array."""
        mask = np.asarray(mask)
        if mask.shape != self.shape:
            raise ValueError(f"Mask shape {mask.shape} does not match grid shape {self.shape}")
        self._data[:] = mask.astype(np.bool_, copy=False).ravel()

    def count(self) -> int:
        """Number of true voxels."""
        return int(np.count_nonzero(self._data))

    def copy(self) -> "BooleanGrid3D":
        other = BooleanGrid3D(self.shape)
        other._data[:] = self._data
        return other

    def __eq__(self, other):
        if not isinstance(other, BooleanGrid3D):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def __repr__(self):
        return f"BooleanGrid3D(shape={self.shape}, true={self.count()})"
