from __future__ import annotations

from .conversions import offset_to_cube
from .coords import Axial, Double, Offset
from .cube import Cube
from .layout import Parity, Tilt


def hex_distance_cube(a: Cube, b: Cube) -> int:
    return max(abs(a.x - b.x), abs(a.y - b.y), abs(a.z - b.z))


def hex_distance_axial(a: Axial, b: Axial) -> int:
    ax, ay, az = a.q, -a.q - a.r, a.r
    bx, by, bz = b.q, -b.q - b.r, b.r
    return max(abs(ax - bx), abs(ay - by), abs(az - bz))


def hex_distance_offset(a: Offset, b: Offset, tilt: Tilt, parity: Parity) -> int:
    return hex_distance_cube(offset_to_cube(a, tilt, parity), offset_to_cube(b, tilt, parity))


def hex_distance_double(a: Double, b: Double, tilt: Tilt) -> int:
    d_col = abs(a.col - b.col)
    d_row = abs(a.row - b.row)
    if tilt == Tilt.FLAT:
        return d_col + max(0, (d_row - d_col) // 2)
    if tilt == Tilt.SHARP:
        return d_row + max(0, (d_col - d_row) // 2)
    raise ValueError(f"Unknown tilt: {tilt!r}")
