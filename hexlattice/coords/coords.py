from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Tuple

from ..errors import DivisionByZero, InvalidCoordinate
from .layout import CoordSys


@dataclass(frozen=True, slots=True, order=True)
class Axial:
    """Two-axis projection of :class:`~hexlattice.coords.cube.Cube` (q = x, r = z)."""

    q: int
    r: int

    sys: ClassVar[CoordSys] = CoordSys.AXIAL
    ORIGIN: ClassVar["Axial"]

    @property
    def s(self) -> int:
        return -self.q - self.r

    @classmethod
    def from_tuple(cls, values: Tuple[int, int]) -> "Axial":
        q, r = values
        return cls(q, r)

    def to_tuple(self) -> Tuple[int, int]:
        return self.q, self.r

    def __add__(self, other: object) -> "Axial":
        if not isinstance(other, Axial):
            return NotImplemented
        return Axial(self.q + other.q, self.r + other.r)

    def __sub__(self, other: object) -> "Axial":
        if not isinstance(other, Axial):
            return NotImplemented
        return Axial(self.q - other.q, self.r - other.r)

    def __neg__(self) -> "Axial":
        return Axial(-self.q, -self.r)

    def __mul__(self, scalar: object) -> "Axial":
        if not isinstance(scalar, int) or isinstance(scalar, bool):
            return NotImplemented
        return Axial(self.q * scalar, self.r * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> "Axial":
        if not isinstance(scalar, int) or isinstance(scalar, bool):
            return NotImplemented
        if scalar == 0:
            raise DivisionByZero(f"cannot divide {self!r} by zero")
        return Axial(_trunc(self.q, scalar), _trunc(self.r, scalar))


@dataclass(frozen=True, slots=True, order=True)
class Offset:
    """Rectangular-grid coordinate.

    The tilt and parity needed to interpret it belong to the grid, not to the
    coordinate.
    """

    col: int
    row: int

    sys: ClassVar[CoordSys] = CoordSys.OFFSET
    ORIGIN: ClassVar["Offset"]

    @classmethod
    def from_tuple(cls, values: Tuple[int, int]) -> "Offset":
        col, row = values
        return cls(col, row)

    def to_tuple(self) -> Tuple[int, int]:
        return self.col, self.row


@dataclass(frozen=True, slots=True, order=True)
class Double:
    """Interlaced rectangular coordinate with ``col + row`` always even."""

    col: int
    row: int

    sys: ClassVar[CoordSys] = CoordSys.DOUBLE
    ORIGIN: ClassVar["Double"]

    def __post_init__(self) -> None:
        if (self.col + self.row) % 2 != 0:
            raise InvalidCoordinate(
                f"({self.col}, {self.row}) is an invalid double coordinate: "
                "col + row must be even"
            )

    @classmethod
    def from_tuple(cls, values: Tuple[int, int]) -> "Double":
        col, row = values
        return cls(col, row)

    def to_tuple(self) -> Tuple[int, int]:
        return self.col, self.row


def _trunc(value: int, divisor: int) -> int:
    quotient = abs(value) // abs(divisor)
    return -quotient if (value < 0) != (divisor < 0) else quotient


Axial.ORIGIN = Axial(0, 0)
Offset.ORIGIN = Offset(0, 0)
Double.ORIGIN = Double(0, 0)


__all__ = ["Axial", "Double", "Offset"]
