from __future__ import annotations

from typing import Iterable, Tuple

from .coords import Axial, Double, Offset
from .layout import Parity, Tilt

Delta = Tuple[int, int]

# Every table lists neighbours in Cube order: Northeast first, then clockwise.

_AXIAL_DIRS: Tuple[Delta, ...] = (
    (+1, -1),
    (+1, 0),
    (0, +1),
    (-1, +1),
    (-1, 0),
    (0, -1),
)

# Flat tilt: columns alternate. Index by ``col & 1``.
_FLAT_UNSHIFTED: Tuple[Delta, ...] = (
    (+1, -1),
    (+1, 0),
    (0, +1),
    (-1, 0),
    (-1, -1),
    (0, -1),
)
_FLAT_SHIFTED: Tuple[Delta, ...] = (
    (+1, 0),
    (+1, +1),
    (0, +1),
    (-1, +1),
    (-1, 0),
    (0, -1),
)

# Sharp tilt: rows alternate. Index by ``row & 1``.
_SHARP_UNSHIFTED: Tuple[Delta, ...] = (
    (0, -1),
    (+1, 0),
    (0, +1),
    (-1, +1),
    (-1, 0),
    (-1, -1),
)
_SHARP_SHIFTED: Tuple[Delta, ...] = (
    (+1, -1),
    (+1, 0),
    (+1, +1),
    (0, +1),
    (-1, 0),
    (0, -1),
)

_OFFSET_DIRS: dict[tuple[Tilt, Parity], Tuple[Tuple[Delta, ...], Tuple[Delta, ...]]] = {
    (Tilt.FLAT, Parity.ODD): (_FLAT_UNSHIFTED, _FLAT_SHIFTED),
    (Tilt.FLAT, Parity.EVEN): (_FLAT_SHIFTED, _FLAT_UNSHIFTED),
    (Tilt.SHARP, Parity.ODD): (_SHARP_UNSHIFTED, _SHARP_SHIFTED),
    (Tilt.SHARP, Parity.EVEN): (_SHARP_SHIFTED, _SHARP_UNSHIFTED),
}

_DOUBLE_DIRS: dict[Tilt, Tuple[Delta, ...]] = {
    Tilt.FLAT: (
        (+1, -1),
        (+1, +1),
        (0, +2),
        (-1, +1),
        (-1, -1),
        (0, -2),
    ),
    Tilt.SHARP: (
        (+1, -1),
        (+2, 0),
        (+1, +1),
        (-1, +1),
        (-2, 0),
        (-1, -1),
    ),
}


def neighbors_axial(a: Axial) -> Iterable[Axial]:
    for dq, dr in _AXIAL_DIRS:
        yield Axial(a.q + dq, a.r + dr)


def neighbors_offset(o: Offset, tilt: Tilt, parity: Parity) -> Iterable[Offset]:
    try:
        tables = _OFFSET_DIRS[(Tilt(tilt), Parity(parity))]
    except ValueError:
        raise ValueError(f"Unknown layout: {tilt!r}, {parity!r}") from None

    alternating = o.col if Tilt(tilt) is Tilt.FLAT else o.row
    for dc, dr in tables[alternating & 1]:
        yield Offset(o.col + dc, o.row + dr)


def neighbors_double(d: Double, tilt: Tilt) -> Iterable[Double]:
    try:
        deltas = _DOUBLE_DIRS[Tilt(tilt)]
    except ValueError:
        raise ValueError(f"Unknown tilt: {tilt!r}") from None

    for dc, dr in deltas:
        yield Double(d.col + dc, d.row + dr)


def neighbors_offset_bounded(
    o: Offset, tilt: Tilt, parity: Parity, columns: int, rows: int
) -> Iterable[Offset]:
    for n in neighbors_offset(o, tilt, parity):
        if 0 <= n.col < columns and 0 <= n.row < rows:
            yield n
