"""Grid orientation labels and the six neighbour directions."""

from __future__ import annotations

from enum import Enum, IntEnum


class Tilt(str, Enum):
    """Whether the top of a hex is an edge (flat) or a corner (sharp)."""

    FLAT = "flat"
    SHARP = "sharp"


class Parity(str, Enum):
    """Which rows or columns of an offset grid are shoved outward."""

    EVEN = "even"
    ODD = "odd"


class CoordSys(str, Enum):
    """Labels for the four supported coordinate systems."""

    AXIAL = "axial"
    CUBE = "cube"
    DOUBLE = "double"
    OFFSET = "offset"


_FLAT_COMPASS = ("NE", "SE", "S", "SW", "NW", "N")
_SHARP_COMPASS = ("NE", "E", "SE", "SW", "W", "NW")


class Direction(IntEnum):
    """Neighbour slot of a hex, Northeast first and then clockwise.

    Member names follow the flat-topped layout. The value is the index used by
    :meth:`Cube.neighbor`, so ``Direction(i)`` labels the ``i``-th neighbour of
    any coordinate regardless of the representation it was written in.
    """

    NORTHEAST = 0
    SOUTHEAST = 1
    SOUTH = 2
    SOUTHWEST = 3
    NORTHWEST = 4
    NORTH = 5

    @property
    def opposite(self) -> "Direction":
        return Direction((self.value + 3) % 6)

    def clockwise(self, turns: int = 1) -> "Direction":
        return Direction((self.value + turns) % 6)

    def counterclockwise(self, turns: int = 1) -> "Direction":
        return Direction((self.value - turns) % 6)

    def compass(self, tilt: Tilt = Tilt.FLAT) -> str:
        """Return the compass abbreviation of this slot under ``tilt``."""

        table = _FLAT_COMPASS if Tilt(tilt) is Tilt.FLAT else _SHARP_COMPASS
        return table[self.value]


__all__ = ["CoordSys", "Direction", "Parity", "Tilt"]
