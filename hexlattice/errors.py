"""Exception hierarchy shared by the coordinate algebra and the grid."""

from __future__ import annotations

from typing import Any


class HexLatticeError(Exception):
    """Base class for every error raised by :mod:`hexlattice`."""


class InvalidCoordinate(HexLatticeError, ValueError):
    """Raised when a coordinate violates its algebraic invariant."""


class DivisionByZero(HexLatticeError, ZeroDivisionError):
    """Raised when a coordinate is divided by a zero scalar."""


class CoordinateSystemMismatch(HexLatticeError, TypeError):
    """Raised when a coordinate cannot be read as the requested system."""


class OccupancyError(HexLatticeError, KeyError):
    """Base class for grid slot precondition failures."""

    def __init__(self, coordinate: Any, message: str) -> None:
        super().__init__(message)
        self.coordinate = coordinate
        self.message = message

    def __str__(self) -> str:
        return self.message


class AlreadyOccupied(OccupancyError):
    """Raised by :meth:`HexGrid.add` when the slot already holds a value."""

    def __init__(self, coordinate: Any) -> None:
        super().__init__(coordinate, f"{coordinate!r} is already occupied")


class NotOccupied(OccupancyError):
    """Raised when an operation requires an occupied slot."""

    def __init__(self, coordinate: Any) -> None:
        super().__init__(coordinate, f"{coordinate!r} is not occupied")


__all__ = [
    "AlreadyOccupied",
    "CoordinateSystemMismatch",
    "DivisionByZero",
    "HexLatticeError",
    "InvalidCoordinate",
    "NotOccupied",
    "OccupancyError",
]
