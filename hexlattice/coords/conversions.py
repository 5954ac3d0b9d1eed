from __future__ import annotations

from .coords import Axial, Double, Offset
from .cube import Cube
from .layout import Parity, Tilt


def axial_to_cube(a: Axial) -> Cube:
    x = a.q
    z = a.r
    y = -x - z
    return Cube(x, y, z)


def cube_to_axial(c: Cube) -> Axial:
    return Axial(c.x, c.z)


def offset_to_cube(o: Offset, tilt: Tilt, parity: Parity) -> Cube:
    col, row = o.col, o.row
    if tilt == Tilt.FLAT and parity == Parity.ODD:
        x = col
        z = row - (col - (col & 1)) // 2
    elif tilt == Tilt.FLAT and parity == Parity.EVEN:
        x = col
        z = row - (col + (col & 1)) // 2
    elif tilt == Tilt.SHARP and parity == Parity.ODD:
        x = col - (row - (row & 1)) // 2
        z = row
    elif tilt == Tilt.SHARP and parity == Parity.EVEN:
        x = col - (row + (row & 1)) // 2
        z = row
    else:
        raise ValueError(f"Unknown layout: {tilt!r}, {parity!r}")
    return Cube(x, -x - z, z)


def cube_to_offset(c: Cube, tilt: Tilt, parity: Parity) -> Offset:
    x, z = c.x, c.z
    if tilt == Tilt.FLAT and parity == Parity.ODD:
        col = x
        row = z + (x - (x & 1)) // 2
    elif tilt == Tilt.FLAT and parity == Parity.EVEN:
        col = x
        row = z + (x + (x & 1)) // 2
    elif tilt == Tilt.SHARP and parity == Parity.ODD:
        col = x + (z - (z & 1)) // 2
        row = z
    elif tilt == Tilt.SHARP and parity == Parity.EVEN:
        col = x + (z + (z & 1)) // 2
        row = z
    else:
        raise ValueError(f"Unknown layout: {tilt!r}, {parity!r}")
    return Offset(col, row)


def double_to_cube(d: Double, tilt: Tilt) -> Cube:
    # col + row is even, so both halvings are exact
    if tilt == Tilt.FLAT:
        x = d.col
        z = (d.row - d.col) // 2
    elif tilt == Tilt.SHARP:
        x = (d.col - d.row) // 2
        z = d.row
    else:
        raise ValueError(f"Unknown tilt: {tilt!r}")
    return Cube(x, -x - z, z)


def cube_to_double(c: Cube, tilt: Tilt) -> Double:
    if tilt == Tilt.FLAT:
        return Double(c.x, 2 * c.z + c.x)
    if tilt == Tilt.SHARP:
        return Double(2 * c.x + c.z, c.z)
    raise ValueError(f"Unknown tilt: {tilt!r}")


def axial_to_offset(a: Axial, tilt: Tilt, parity: Parity) -> Offset:
    return cube_to_offset(axial_to_cube(a), tilt, parity)


def offset_to_axial(o: Offset, tilt: Tilt, parity: Parity) -> Axial:
    return cube_to_axial(offset_to_cube(o, tilt, parity))
