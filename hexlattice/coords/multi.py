"""The coordinate union and conversions between any two representations.

``Coordinate`` is a closed union of the four concrete types. Each type carries
its :class:`CoordSys` tag, so code that accepts a ``Coordinate`` can dispatch
on the tag without probing fields. Reading a union value as a specific type
is partial: Axial and Cube are interchangeable, Offset and Double are only
accepted as themselves, and anything else raises
:class:`~hexlattice.errors.CoordinateSystemMismatch`.
"""

from __future__ import annotations

from typing import TypeAlias, Union

from ..errors import CoordinateSystemMismatch
from .conversions import (
    axial_to_cube,
    cube_to_axial,
    cube_to_double,
    cube_to_offset,
    double_to_cube,
    offset_to_cube,
)
from .coords import Axial, Double, Offset
from .cube import Cube
from .layout import CoordSys, Parity, Tilt

Coordinate: TypeAlias = Union[Axial, Cube, Double, Offset]

_COORDINATE_TYPES = (Axial, Cube, Double, Offset)


def coord_sys(value: object) -> CoordSys:
    """Return the system tag of ``value``."""

    if isinstance(value, _COORDINATE_TYPES):
        return value.sys
    raise CoordinateSystemMismatch(f"{value!r} is not a hex coordinate")


def as_cube(value: Coordinate) -> Cube:
    if isinstance(value, Cube):
        return value
    if isinstance(value, Axial):
        return axial_to_cube(value)
    raise CoordinateSystemMismatch(f"{value!r} is not a Cube or Axial coordinate")


def as_axial(value: Coordinate) -> Axial:
    if isinstance(value, Axial):
        return value
    if isinstance(value, Cube):
        return cube_to_axial(value)
    raise CoordinateSystemMismatch(f"{value!r} is not an Axial or Cube coordinate")


def as_offset(value: Coordinate) -> Offset:
    if isinstance(value, Offset):
        return value
    raise CoordinateSystemMismatch(f"{value!r} is not an Offset coordinate")


def as_double(value: Coordinate) -> Double:
    if isinstance(value, Double):
        return value
    raise CoordinateSystemMismatch(f"{value!r} is not a Double coordinate")


def to_cube(value: Coordinate, tilt: Tilt, parity: Parity) -> Cube:
    """Normalise any coordinate to Cube using the supplied grid layout."""

    system = coord_sys(value)
    if system is CoordSys.OFFSET:
        return offset_to_cube(as_offset(value), tilt, parity)
    if system is CoordSys.DOUBLE:
        return double_to_cube(as_double(value), tilt)
    return as_cube(value)


def from_cube(cube: Cube, system: CoordSys, tilt: Tilt, parity: Parity) -> Coordinate:
    """Express ``cube`` in ``system`` using the supplied grid layout."""

    system = CoordSys(system)
    if system is CoordSys.CUBE:
        return cube
    if system is CoordSys.AXIAL:
        return cube_to_axial(cube)
    if system is CoordSys.OFFSET:
        return cube_to_offset(cube, tilt, parity)
    return cube_to_double(cube, tilt)


def convert(value: Coordinate, system: CoordSys, tilt: Tilt, parity: Parity) -> Coordinate:
    return from_cube(to_cube(value, tilt, parity), system, tilt, parity)


__all__ = [
    "Coordinate",
    "as_axial",
    "as_cube",
    "as_double",
    "as_offset",
    "convert",
    "coord_sys",
    "from_cube",
    "to_cube",
]
