"""Moore-neighbour contour tracing on the 2D test plane (k = 1).

The walker starts on a border node facing a given direction and repeats:

- neighbour in the current direction occupied -> step onto it, record it,
  rotate_cw() (three octants back) to resume scanning behind the new node
- neighbour empty -> rotate_ccw() (one octant) and test again

The walk stops when it steps back onto the start node (closed contour) or
after max_steps neighbour tests (open or degenerate region, reported as an
incomplete trace).
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

import numpy as np

from .border import PLANE_2D
from .direction import Direction
from .occupancy_grid import OccupancyGrid

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class GridNode2D:
    """Lattice node (i, j) on the plane k = 1."""

    i: int
    j: int

    @property
    def k(self) -> int:
        return PLANE_2D

    def next(self, direction: Direction) -> "GridNode2D":
        """The neighbouring node one step along `direction`."""
        return GridNode2D(self.i + direction.next_i(), self.j + direction.next_j())

    def next_is_carrier_or_biomass(
        self, direction: Direction, is_occupied: Callable[[int, int], bool]
    ) -> bool:
        """Occupancy of the neighbour along `direction`.

        Parameters
        ----------
        direction : Direction
            Moving direction
        is_occupied : callable
            2D occupancy query (i, j) -> bool, e.g.
            OccupancyGrid.is_carrier_or_biomass_2d
        """
        return is_occupied(self.i + direction.next_i(), self.j + direction.next_j())

    def __str__(self):
        return f"({self.i}, {self.j})"


@dataclass
class ContourTrace:
    """Ordered border nodes produced by one contour walk."""

    nodes: Tuple[GridNode2D, ...]
    closed: bool
    steps: int

    @property
    def incomplete(self) -> bool:
        return not self.closed

    def __len__(self):
        return len(self.nodes)

    def to_array(self) -> np.ndarray:
        """Node coordinates as an (n_nodes, 2) integer array."""
        return np.array([(n.i, n.j) for n in self.nodes], dtype=np.int64).reshape(-1, 2)


class ContourWalker:
    """Traces the outline of one occupied region on the 2D test plane.

    Parameters
    ----------
    grid : OccupancyGrid
        Refreshed occupancy grid
    max_steps : int, optional
        Bound on neighbour tests per trace. Default 8 * N * M + 8.
    """

    def __init__(self, grid: OccupancyGrid, max_steps: Optional[int] = None):
        if max_steps is None:
            n, m, _ = grid.shape
            max_steps = 8 * n * m + 8
        if max_steps < 1:
            raise ValueError(f"max_steps must be >= 1, got {max_steps}")
        self.grid = grid
        self.max_steps = int(max_steps)

    def trace(self, start: GridNode2D, direction: Optional[Direction] = None) -> ContourTrace:
        """Walk the contour from `start`.

        Parameters
        ----------
        start : GridNode2D
            A border node of the region to trace
        direction : Direction, optional
            Initial scanning direction (default West). Not modified.

        Returns
        -------
        ContourTrace
            Ordered nodes beginning with `start`

        Raises
        ------
        ValueError
            If `start` is not a 2D border point.
        """
        if not (
            self.grid.is_carrier_or_biomass_2d(start.i, start.j)
            and self.grid.is_border_point_2d(start.i, start.j)
        ):
            raise ValueError(f"Start node {start} is not a border point")

        direction = Direction() if direction is None else direction.copy()
        is_occupied = self.grid.is_carrier_or_biomass_2d

        border_nodes = [start]
        current = start
        steps = 0
        closed = False

        while steps < self.max_steps:
            steps += 1
            if current.next_is_carrier_or_biomass(direction, is_occupied):
                current = current.next(direction)
                if current == start:
                    closed = True
                    break
                border_nodes.append(current)
                direction.rotate_cw()
            else:
                direction.rotate_ccw()

        if not closed:
            log.warning(
                f"Contour trace from {start} incomplete after {steps} steps "
                f"({len(border_nodes)} nodes)"
            )
        else:
            log.debug(f"Closed contour from {start}: {len(border_nodes)} nodes, {steps} steps")

        return ContourTrace(nodes=tuple(border_nodes), closed=closed, steps=steps)

    def find_start(self) -> Optional[GridNode2D]:
        """First border node of the 2D plane in raster order (i outer, j inner)."""
        n, m, l = self.grid.shape
        if l <= PLANE_2D:
            return None
        border = self.grid.border_mask()[:, :, PLANE_2D]
        hits = np.argwhere(border)
        if hits.size == 0:
            return None
        i, j = hits[0]
        return GridNode2D(int(i), int(j))

    def trace_region(self, direction: Optional[Direction] = None) -> Optional[ContourTrace]:
        """Trace the region holding the first border node, or None if there is none."""
        start = self.find_start()
        if start is None:
            return None
        return self.trace(start, direction)
