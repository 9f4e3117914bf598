"""Biofilm occupancy grid framework.

Classifies every voxel of the finest multigrid grid as biomass, carrier or
either, finds voxels on the occupied/empty interface and traces 2D contours.

Component Hierarchy:
--------------------
OccupancyGrid (biomass, carrier, occupied grids; refreshed once per step)
├── BooleanGrid3D (flat bounds-checked storage)
├── CarrierOracle (substratum position queries)
└── BorderClassifier (occupied/empty interface queries)
    └── ContourWalker (Moore-neighbour tracing on plane k = 1)
        ├── GridNode2D
        └── Direction
"""

from .boolean_grid import BooleanGrid3D
from .border import BorderClassifier
from .contour import ContourTrace, ContourWalker, GridNode2D
from .datastructures import (
    GridConfig,
    GridConfigurationError,
    OccupancySummary,
    ParticulateSpecies,
)
from .direction import Direction
from .occupancy_grid import OccupancyGrid
from .species import make_colony_species
from .substratum import (
    CarrierOracle,
    FlatCarrier,
    MaskCarrier,
    NoCarrier,
    create_carrier_oracle,
)

__all__ = [
    # Configuration
    "GridConfig",
    "GridConfigurationError",
    # Data structures
    "BooleanGrid3D",
    "ParticulateSpecies",
    "OccupancySummary",
    "ContourTrace",
    # Substratum
    "CarrierOracle",
    "NoCarrier",
    "FlatCarrier",
    "MaskCarrier",
    "create_carrier_oracle",
    # Occupancy and queries
    "OccupancyGrid",
    "BorderClassifier",
    # 2D contour tracing
    "Direction",
    "GridNode2D",
    "ContourWalker",
    # Inputs
    "make_colony_species",
]
