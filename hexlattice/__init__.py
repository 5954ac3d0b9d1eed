"""Hexagonal grid coordinates and an adjacency-aware tile container."""

from .coords import (
    Axial,
    Coordinate,
    CoordSys,
    Cube,
    Direction,
    Double,
    Offset,
    Parity,
    Tilt,
)
from .config import GridSettings, GridShape
from .errors import (
    AlreadyOccupied,
    CoordinateSystemMismatch,
    DivisionByZero,
    HexLatticeError,
    InvalidCoordinate,
    NotOccupied,
)
from .grid import HexGrid

__version__ = "0.1.0"

__all__ = [
    "AlreadyOccupied",
    "Axial",
    "CoordSys",
    "Coordinate",
    "CoordinateSystemMismatch",
    "Cube",
    "Direction",
    "DivisionByZero",
    "Double",
    "GridSettings",
    "GridShape",
    "HexGrid",
    "HexLatticeError",
    "InvalidCoordinate",
    "NotOccupied",
    "Offset",
    "Parity",
    "Tilt",
    "__version__",
]
