"""Eight-way compass direction used by the 2D contour walker.

The eight octants are stored in counter-clockwise order starting at East:

    index:  0   1   2   3   4   5   6   7
    name :  E   NE  N   NW  W   SW  S   SE

Two rotations are provided and they are deliberately not inverses:

- rotate_ccw(): one octant (45 deg), used after a failed step
- rotate_cw():  three octants back (135 deg), used after a successful step
"""

from typing import Tuple

DIRECTION_NAMES: Tuple[str, ...] = ("E", "NE", "N", "NW", "W", "SW", "S", "SE")
DIRECTION_DI: Tuple[int, ...] = (1, 1, 0, -1, -1, -1, 0, 1)
DIRECTION_DJ: Tuple[int, ...] = (0, 1, 1, 1, 0, -1, -1, -1)

N_DIRECTIONS = len(DIRECTION_NAMES)
WEST = DIRECTION_NAMES.index("W")


class Direction:
    """Mutable compass orientation (initially West)."""

    __slots__ = ("_current",)

    def __init__(self, orientation=WEST):
        """Create a direction.

        Parameters
        ----------
        orientation : int or str, optional
            Octant index (0..7) or compass name ("E", "NE", ...). Default W.
        """
        if isinstance(orientation, str):
            try:
                orientation = DIRECTION_NAMES.index(orientation.upper())
            except ValueError:
                raise ValueError(f"Unknown direction name: {orientation}") from None
        if not 0 <= int(orientation) < N_DIRECTIONS:
            raise ValueError(f"Direction index must be in [0, 8), got {orientation}")
        self._current = int(orientation)

    @property
    def index(self) -> int:
        return self._current

    @property
    def name(self) -> str:
        return DIRECTION_NAMES[self._current]

    def rotate_ccw(self) -> None:
        """Rotate one octant counter-clockwise (1/8 of a full turn)."""
        self._current = (self._current + 1) % N_DIRECTIONS

    def rotate_cw(self) -> None:
        """Rotate three octants clockwise (3/8 of a full turn)."""
        self._current = (self._current + N_DIRECTIONS - 3) % N_DIRECTIONS

    def next_i(self) -> int:
        """The i component of a unit move in this direction."""
        return DIRECTION_DI[self._current]

    def next_j(self) -> int:
        """The j component of a unit move in this direction."""
        return DIRECTION_DJ[self._current]

    def copy(self) -> "Direction":
        return Direction(self._current)

    def __eq__(self, other):
        if not isinstance(other, Direction):
            return NotImplemented
        return self._current == other._current

    def __repr__(self):
        return f"Direction({self.name!r})"
