"""Substratum (carrier) oracles.

The oracle answers one question per voxel of the finest grid: is this
position solid substratum? It must be a pure, deterministic function of
position for the duration of a simulation step.

Three reference oracles are provided:

1. NoCarrier: empty domain, nothing is substratum.
2. FlatCarrier: the first `thickness` layers along one axis are substratum
   (flat-bottom reactor).
3. MaskCarrier: explicit boolean array, e.g. a carrier imported from a
   geometry tool.
"""

from abc import ABC, abstractmethod
from typing import Tuple

import numpy as np


# =============================================================================
# Abstract Base Class
# =============================================================================


class CarrierOracle(ABC):
    """Abstract base class for substratum position queries."""

    @abstractmethod
    def is_carrier(self, i: int, j: int, k: int) -> bool:
        """Return True if voxel (i, j, k) is solid substratum."""
        pass

    def mask(self, shape: Tuple[int, int, int]) -> np.ndarray:
        """Evaluate the oracle on every voxel of a grid.

        Subclasses with a closed-form geometry should override this with a
        vectorised version; the default queries is_carrier() per voxel.

        Returns
        -------
        np.ndarray
            Boolean array of the given shape.
        """
        n, m, l = shape
        out = np.zeros(shape, dtype=np.bool_)
        for i in range(n):
            for j in range(m):
                for k in range(l):
                    out[i, j, k] = self.is_carrier(i, j, k)
        return out


# =============================================================================
# Reference Oracles
# =============================================================================


class NoCarrier(CarrierOracle):
    """Domain without substratum."""

    def is_carrier(self, i: int, j: int, k: int) -> bool:
        return False

    def mask(self, shape: Tuple[int, int, int]) -> np.ndarray:
        return np.zeros(shape, dtype=np.bool_)


class FlatCarrier(CarrierOracle):
    """Substratum filling the lowest `thickness` layers along `axis`."""

    def __init__(self, thickness: int = 1, axis: int = 0):
        if thickness < 0:
            raise ValueError(f"Carrier thickness must be >= 0, got {thickness}")
        if axis not in (0, 1, 2):
            raise ValueError(f"Carrier axis must be 0, 1 or 2, got {axis}")
        self.thickness = int(thickness)
        self.axis = int(axis)

    def is_carrier(self, i: int, j: int, k: int) -> bool:
        return (i, j, k)[self.axis] < self.thickness

    def mask(self, shape: Tuple[int, int, int]) -> np.ndarray:
        coord = np.arange(shape[self.axis]) < self.thickness
        bcast = [1, 1, 1]
        bcast[self.axis] = shape[self.axis]
        return np.broadcast_to(coord.reshape(bcast), shape).copy()


class MaskCarrier(CarrierOracle):
    """Substratum given as an explicit boolean array.

    Positions outside the array are never substratum.
    """

    def __init__(self, carrier: np.ndarray):
        carrier = np.asarray(carrier, dtype=np.bool_)
        if carrier.ndim != 3:
            raise ValueError(f"Carrier mask must be 3D, got {carrier.ndim}D")
        self.carrier = carrier

    def is_carrier(self, i: int, j: int, k: int) -> bool:
        n, m, l = self.carrier.shape
        if 0 <= i < n and 0 <= j < m and 0 <= k < l:
            return bool(self.carrier[i, j, k])
        return False

    def mask(self, shape: Tuple[int, int, int]) -> np.ndarray:
        if tuple(shape) == self.carrier.shape:
            return self.carrier.copy()
        return super().mask(shape)


# =============================================================================
# Factory Function
# =============================================================================


def create_carrier_oracle(method: str = "none", **kwargs) -> CarrierOracle:
    """Create a carrier oracle from configuration.

    Parameters
    ----------
    method : str
        "none", "flat" or "mask"
    **kwargs
        Passed to the oracle constructor (thickness/axis for "flat",
        carrier for "mask").

    Returns
    -------
    CarrierOracle
        Configured oracle
    """
    if method == "none":
        return NoCarrier()
    elif method == "flat":
        return FlatCarrier(
            thickness=kwargs.get("thickness", 1),
            axis=kwargs.get("axis", 0),
        )
    elif method == "mask":
        if "carrier" not in kwargs:
            raise ValueError("Mask carrier requires a 'carrier' array")
        return MaskCarrier(kwargs["carrier"])
    else:
        raise ValueError(f"Unknown carrier method: {method}")
