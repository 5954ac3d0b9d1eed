"""Polars views over a grid's tiles and adjacency links."""

from __future__ import annotations

from typing import Any, Dict

import polars as pl

from .grid import HexGrid

_TILE_AXES_SCHEMA: Dict[str, pl.datatypes.DataType] = {
    "x": pl.Int64,
    "y": pl.Int64,
    "z": pl.Int64,
}

_LINK_FRAME_SCHEMA: Dict[str, pl.datatypes.DataType] = {
    "source_x": pl.Int64,
    "source_y": pl.Int64,
    "source_z": pl.Int64,
    "target_x": pl.Int64,
    "target_y": pl.Int64,
    "target_z": pl.Int64,
    "direction": pl.String,
}


def tile_frame(grid: HexGrid[Any]) -> pl.DataFrame:
    """Return one row per occupied tile with its Cube axes and stored value."""

    rows = [
        {"x": cube.x, "y": cube.y, "z": cube.z, "value": value}
        for cube, value in grid.cube_items()
    ]
    if not rows:
        return pl.DataFrame(schema={**_TILE_AXES_SCHEMA, "value": pl.Null})
    frame = pl.DataFrame(rows, strict=False)
    return frame.with_columns([pl.col(name).cast(dtype) for name, dtype in _TILE_AXES_SCHEMA.items()])


def edge_frame(grid: HexGrid[Any]) -> pl.DataFrame:
    """Return one row per directed adjacency link, labelled by compass name."""

    rows = [
        {
            "source_x": source.x,
            "source_y": source.y,
            "source_z": source.z,
            "target_x": target.x,
            "target_y": target.y,
            "target_z": target.z,
            "direction": direction.compass(grid.tilt),
        }
        for source, target, direction in grid.links()
    ]
    return pl.DataFrame(rows, schema=_LINK_FRAME_SCHEMA)


__all__ = ["edge_frame", "tile_frame"]
