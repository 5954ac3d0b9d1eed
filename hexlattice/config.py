"""Validated configuration models for building grids."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .coords import CoordSys, Parity, Tilt

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .grid import HexGrid


class GridShape(str, Enum):
    """Enumerates the bulk layouts a grid can be created with."""

    EMPTY = "empty"
    RADIAL = "radial"
    RECTANGULAR = "rectangular"


class GridSettings(BaseModel):
    """Layout and shape parameters for a :class:`~hexlattice.grid.HexGrid`.

    ``system`` is ignored for the radial and rectangular shapes, which always
    present Cube and Offset coordinates respectively.
    """

    model_config = ConfigDict(extra="forbid")

    tilt: Tilt = Field(default=Tilt.FLAT)
    parity: Parity = Field(default=Parity.EVEN)
    system: CoordSys = Field(default=CoordSys.CUBE)
    shape: GridShape = Field(default=GridShape.EMPTY)
    radius: int = Field(default=0, ge=0)
    columns: int = Field(default=0, ge=0)
    rows: int = Field(default=0, ge=0)

    @field_validator("tilt", "parity", "system", "shape", mode="before")
    @classmethod
    def _lowercase_labels(cls, value: object) -> object:
        if isinstance(value, str) and not isinstance(value, Enum):
            return value.strip().lower()
        return value

    @model_validator(mode="after")
    def _check_shape_dimensions(self) -> "GridSettings":
        if self.shape is GridShape.RECTANGULAR and (self.columns == 0 or self.rows == 0):
            raise ValueError("rectangular grids need positive columns and rows")
        return self

    @property
    def tile_count(self) -> int:
        """Number of tiles :meth:`build` will create."""

        if self.shape is GridShape.RADIAL:
            return 1 + 3 * self.radius * (self.radius + 1)
        if self.shape is GridShape.RECTANGULAR:
            return self.columns * self.rows
        return 0

    def build(self, fill: Any = None, *, grid_type: type[HexGrid[Any]] | None = None) -> HexGrid[Any]:
        """Create the grid described by these settings, filled with ``fill``."""

        if grid_type is None:
            from .grid import HexGrid as grid_type

        if self.shape is GridShape.RADIAL:
            return grid_type.radial(self.radius, fill, tilt=self.tilt, parity=self.parity)
        if self.shape is GridShape.RECTANGULAR:
            return grid_type.rectangular(
                self.columns, self.rows, fill, tilt=self.tilt, parity=self.parity
            )
        return grid_type(self.tilt, self.parity, self.system)


__all__ = ["GridSettings", "GridShape"]
