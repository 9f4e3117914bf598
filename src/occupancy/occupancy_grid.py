"""Occupancy of the finest multigrid grid by biomass and carrier.

OccupancyGrid owns three same-shaped boolean grids:

- biomass:  any particulate species has positive concentration (and the
            voxel is not carrier)
- carrier:  the substratum oracle reports solid substratum
- occupied: biomass or carrier

The grids are rebuilt by refresh() once per simulation step; every other
method is a read-only query.
"""

import logging
from typing import Sequence

import numpy as np

from utilities.formatting import core_matrix_to_string

from .boolean_grid import BooleanGrid3D
from .border import BorderClassifier, PLANE_2D
from .datastructures import GridConfig, OccupancySummary

log = logging.getLogger(__name__)


def _finest_level(species, order: int) -> np.ndarray:
    """Finest-level concentration of one species.

    Accepts objects exposing finest(order) (ParticulateSpecies) or a plain
    sequence of per-level arrays.
    """
    if hasattr(species, "finest"):
        return np.asarray(species.finest(order))
    if len(species) < order:
        raise ValueError(f"Species field has {len(species)} levels, finest level {order - 1} requested")
    return np.asarray(species[order - 1])


class OccupancyGrid:
    """Biomass/carrier occupancy at the finest grid resolution.

    Parameters
    ----------
    config : GridConfig
        Finest grid shape, multigrid order and carrier oracle.
    """

    def __init__(self, config: GridConfig):
        self.config = config
        self.shape = config.shape
        self.biomass = BooleanGrid3D(self.shape)
        self.carrier = BooleanGrid3D(self.shape)
        self.occupied = BooleanGrid3D(self.shape)
        self.border = BorderClassifier(self.occupied)

    # =========================================================================
    # Update
    # =========================================================================

    def refresh(self, species: Sequence) -> None:
        """Recompute biomass, carrier and occupied from the current species.

        Every voxel is evaluated into temporaries before any grid is written,
        so on error the previous state is kept intact.

        Parameters
        ----------
        species : sequence
            Particulate species; only the finest level (order - 1) is read.

        Raises
        ------
        ValueError
            If a species lacks the finest level or its shape differs from
            the grid shape.
        """
        shape = self.shape
        order = self.config.order

        carrier = np.asarray(self.config.carrier.mask(shape), dtype=np.bool_)
        if carrier.shape != shape:
            raise ValueError(f"Carrier mask shape {carrier.shape} does not match grid shape {shape}")

        biomass = np.zeros(shape, dtype=np.bool_)
        for sp in species:
            conc = _finest_level(sp, order)
            if conc.shape != shape:
                name = getattr(sp, "name", "?")
                raise ValueError(
                    f"Species '{name}' finest level has shape {conc.shape}, expected {shape}"
                )
            biomass |= conc > 0

        # carrier excludes biomass at the same voxel
        biomass &= ~carrier

        self.biomass.assign(biomass)
        self.carrier.assign(carrier)
        self.occupied.assign(biomass | carrier)

        log.debug(
            f"Refreshed occupancy {shape}: biomass={self.biomass.count()}, "
            f"carrier={self.carrier.count()}, occupied={self.occupied.count()}"
        )

    # =========================================================================
    # Queries
    # =========================================================================

    def is_biomass(self, i: int, j: int, k: int) -> bool:
        return self.biomass.get(i, j, k)

    def is_carrier(self, i: int, j: int, k: int) -> bool:
        return self.carrier.get(i, j, k)

    def is_carrier_or_biomass(self, i: int, j: int, k: int) -> bool:
        return self.occupied.get(i, j, k)

    def is_carrier_or_biomass_2d(self, i: int, j: int) -> bool:
        """Occupancy on the plane k = 1; False for positions outside the grid."""
        if not self.occupied.in_bounds(i, j, PLANE_2D):
            return False
        return self.occupied.get(i, j, PLANE_2D)

    def is_border_point(self, i: int, j: int, k: int) -> bool:
        return self.border.is_border_point(i, j, k)

    def is_border_point_2d(self, i: int, j: int) -> bool:
        return self.border.is_border_point_2d(i, j)

    def border_mask(self) -> np.ndarray:
        return self.border.border_mask()

    def summary(self) -> OccupancySummary:
        n, m, l = self.shape
        return OccupancySummary(
            n=n,
            m=m,
            l=l,
            n_biomass=self.biomass.count(),
            n_carrier=self.carrier.count(),
            n_occupied=self.occupied.count(),
            n_border=int(np.count_nonzero(self.border_mask())),
        )

    def __str__(self):
        return core_matrix_to_string(self.occupied)
