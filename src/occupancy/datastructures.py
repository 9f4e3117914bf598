"""Data structures for occupancy grid configuration and results.

Structure:
- GridConfig: Input configuration (finest grid shape, multigrid order, carrier)
- ParticulateSpecies: Multilevel concentration field of one species
- OccupancySummary: Output counts (logged to MLflow at end of a run)
"""

from dataclasses import dataclass, field, asdict
from typing import List, Tuple

import numpy as np
import pandas as pd

from .substratum import CarrierOracle, NoCarrier


class GridConfigurationError(ValueError):
    """Raised when a grid is configured with an invalid shape or order."""


# ========================================================
# Configuration (Input)
# ========================================================


@dataclass
class GridConfig:
    """Finest-grid configuration shared by one simulation run.

    Attributes
    ----------
    shape : tuple of int
        Finest grid shape (N, M, L)
    order : int
        Number of multigrid resolution levels; the finest is order - 1
    carrier : CarrierOracle
        Substratum oracle queried on every refresh
    """

    shape: Tuple[int, int, int]
    order: int = 1
    carrier: CarrierOracle = field(default_factory=NoCarrier)

    def __post_init__(self):
        shape = tuple(self.shape)
        if len(shape) != 3:
            raise GridConfigurationError(f"Grid shape must have 3 dimensions, got {shape}")
        for s in shape:
            if isinstance(s, bool) or not isinstance(s, (int, np.integer)) or s <= 0:
                raise GridConfigurationError(
                    f"Grid dimensions must be positive integers, got {shape}"
                )
        if isinstance(self.order, bool) or not isinstance(self.order, (int, np.integer)) or self.order < 1:
            raise GridConfigurationError(f"Multigrid order must be >= 1, got {self.order}")
        if not isinstance(self.carrier, CarrierOracle):
            raise GridConfigurationError(
                f"carrier must be a CarrierOracle, got {type(self.carrier).__name__}"
            )
        self.shape = tuple(int(s) for s in shape)
        self.order = int(self.order)

    @property
    def finest_level(self) -> int:
        return self.order - 1


# ========================================================
# Species (Collaborator Data)
# ========================================================


@dataclass
class ParticulateSpecies:
    """One particulate species with a concentration field per multigrid level.

    levels[0] is the coarsest grid, levels[order - 1] the finest.
    """

    name: str
    levels: List[np.ndarray]

    def finest(self, order: int) -> np.ndarray:
        if len(self.levels) < order:
            raise ValueError(
                f"Species '{self.name}' has {len(self.levels)} levels, "
                f"finest level {order - 1} requested"
            )
        return np.asarray(self.levels[order - 1])


# ========================================================
# Summary (Output)
# ========================================================


@dataclass
class OccupancySummary:
    """Voxel counts after a refresh."""

    n: int
    m: int
    l: int
    n_biomass: int = 0
    n_carrier: int = 0
    n_occupied: int = 0
    n_border: int = 0

    @property
    def n_voxels(self) -> int:
        return self.n * self.m * self.l

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame([asdict(self)])

    def to_mlflow(self) -> dict:
        """Flat metrics dict for mlflow.log_metrics."""
        metrics = asdict(self)
        metrics["occupied_fraction"] = self.n_occupied / self.n_voxels
        return metrics
