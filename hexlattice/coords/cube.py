"""Cube coordinates, the canonical representation of a hex tile.

Cube coordinates treat hexes as diagonal cross-sections of a cube, so every
coordinate satisfies ``x + y + z == 0``. Arithmetic, neighbours, diagonals,
rotation, rings and spirals are all defined here; the other representations
convert through :class:`Cube` to reuse them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterator, Tuple

from ..errors import DivisionByZero, InvalidCoordinate
from .layout import CoordSys

CubeTuple = Tuple[int, int, int]

_NEIGHBOR_OFFSETS: Tuple[CubeTuple, ...] = (
    (+1, 0, -1),  # NE
    (+1, -1, 0),
    (0, -1, +1),
    (-1, 0, +1),  # SW
    (-1, +1, 0),
    (0, +1, -1),
)

_DIAGONAL_OFFSETS: Tuple[CubeTuple, ...] = (
    (+1, -2, +1),  # SE
    (-1, -1, +2),
    (-2, +1, +1),
    (-1, +2, -1),  # NW
    (+1, +1, -2),
    (+2, -1, -1),
)


def _trunc_div(value: int, divisor: int) -> tuple[int, int]:
    quotient = abs(value) // abs(divisor)
    if (value < 0) != (divisor < 0):
        quotient = -quotient
    return quotient, abs(value - quotient * divisor)


@dataclass(frozen=True, slots=True, order=True)
class Cube:
    """Three-axis hex coordinate with ``x + y + z == 0``.

    Instances are immutable; use :meth:`with_coords` to obtain a replacement.
    """

    x: int
    y: int
    z: int

    sys: ClassVar[CoordSys] = CoordSys.CUBE
    ORIGIN: ClassVar["Cube"]

    def __post_init__(self) -> None:
        if self.x + self.y + self.z != 0:
            raise InvalidCoordinate(
                f"({self.x}, {self.y}, {self.z}) is an invalid cube coordinate: "
                "x + y + z must be 0"
            )

    # ------------------------------------------------------------------
    @classmethod
    def from_axes(cls, x: int, y: int) -> "Cube":
        """Build a coordinate from ``x`` and ``y``, deriving ``z``."""

        return cls(x, y, -x - y)

    @classmethod
    def from_tuple(cls, values: CubeTuple) -> "Cube":
        x, y, z = values
        return cls(x, y, z)

    def to_tuple(self) -> CubeTuple:
        return self.x, self.y, self.z

    def with_coords(self, x: int, y: int) -> "Cube":
        """Return a new coordinate at ``(x, y)`` with ``z`` re-derived."""

        return Cube.from_axes(x, y)

    # ------------------------------------------------------------------
    def __add__(self, other: object) -> "Cube":
        if not isinstance(other, Cube):
            return NotImplemented
        return Cube(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> "Cube":
        if not isinstance(other, Cube):
            return NotImplemented
        return Cube(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Cube":
        return Cube(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: object) -> "Cube":
        if not isinstance(scalar, int) or isinstance(scalar, bool):
            return NotImplemented
        return Cube(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> "Cube":
        """Divide each axis by ``scalar``, truncating toward zero.

        If truncation breaks the zero-sum constraint, the axis that lost the
        largest remainder is recomputed from the other two.
        """

        if not isinstance(scalar, int) or isinstance(scalar, bool):
            return NotImplemented
        if scalar == 0:
            raise DivisionByZero(f"cannot divide {self!r} by zero")

        x, x_rem = _trunc_div(self.x, scalar)
        y, y_rem = _trunc_div(self.y, scalar)
        z, z_rem = _trunc_div(self.z, scalar)
        if x + y + z != 0:
            if x_rem > y_rem and x_rem > z_rem:
                x = -y - z
            elif y_rem > z_rem:
                y = -x - z
            else:
                z = -x - y
        return Cube(x, y, z)

    # ------------------------------------------------------------------
    def neighbor(self, index: int) -> "Cube":
        """Return the adjacent coordinate in slot ``index`` (0 is Northeast)."""

        dx, dy, dz = _NEIGHBOR_OFFSETS[index % 6]
        return Cube(self.x + dx, self.y + dy, self.z + dz)

    def neighbors(self) -> list["Cube"]:
        return [self.neighbor(index) for index in range(6)]

    def diagonal(self, index: int) -> "Cube":
        """Return the diagonal coordinate in slot ``index`` (0 is Southeast)."""

        dx, dy, dz = _DIAGONAL_OFFSETS[index % 6]
        return Cube(self.x + dx, self.y + dy, self.z + dz)

    def diagonals(self) -> list["Cube"]:
        return [self.diagonal(index) for index in range(6)]

    def distance(self, other: "Cube") -> int:
        return max(
            abs(self.x - other.x), abs(self.y - other.y), abs(self.z - other.z)
        )

    # ------------------------------------------------------------------
    def rotate_cw(self, pivot: "Cube", turns: int = 1) -> "Cube":
        """Rotate around ``pivot`` clockwise by ``turns`` sixths of a circle."""

        x, y, z = (self - pivot).to_tuple()
        for _ in range(turns % 6):
            x, y, z = -z, -x, -y
        return Cube(x, y, z) + pivot

    def rotate_ccw(self, pivot: "Cube", turns: int = 1) -> "Cube":
        """Rotate around ``pivot`` counterclockwise by ``turns`` sixths."""

        x, y, z = (self - pivot).to_tuple()
        for _ in range(turns % 6):
            x, y, z = -y, -z, -x
        return Cube(x, y, z) + pivot

    # ------------------------------------------------------------------
    def iter_ring(self, radius: int) -> Iterator["Cube"]:
        if radius < 0:
            raise ValueError("radius must be non-negative")
        if radius == 0:
            yield self
            return
        for side in range(6):
            step = (side + 2) % 6
            current = self + radius * Cube.from_tuple(_NEIGHBOR_OFFSETS[side])
            for _ in range(radius):
                yield current
                current = current.neighbor(step)

    def ring(self, radius: int) -> list["Cube"]:
        """Return the coordinates exactly ``radius`` steps away, clockwise.

        The walk starts ``radius`` steps toward the Northeast neighbour and
        proceeds clockwise around the centre.
        """

        return list(self.iter_ring(radius))

    def spiral(self, radius: int) -> list["Cube"]:
        """Return rings ``0`` through ``radius`` concatenated, innermost first."""

        if radius < 0:
            raise ValueError("radius must be non-negative")
        coords: list[Cube] = []
        for step in range(radius + 1):
            coords.extend(self.iter_ring(step))
        return coords


Cube.ORIGIN = Cube(0, 0, 0)


__all__ = ["Cube", "CubeTuple"]
