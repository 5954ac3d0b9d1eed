from .coords import Axial, Double, Offset
from .cube import Cube
from .layout import CoordSys, Direction, Parity, Tilt
from .conversions import (
    axial_to_cube,
    cube_to_axial,
    axial_to_offset,
    offset_to_axial,
    offset_to_cube,
    cube_to_offset,
    double_to_cube,
    cube_to_double,
)
from .heuristics import (
    hex_distance_axial,
    hex_distance_cube,
    hex_distance_double,
    hex_distance_offset,
)
from .neighbors import (
    neighbors_axial,
    neighbors_double,
    neighbors_offset,
    neighbors_offset_bounded,
)
from .multi import (
    Coordinate,
    as_axial,
    as_cube,
    as_double,
    as_offset,
    convert,
    coord_sys,
    from_cube,
    to_cube,
)

__all__ = [
    "Axial",
    "Cube",
    "Double",
    "Offset",
    "CoordSys",
    "Direction",
    "Parity",
    "Tilt",
    "Coordinate",
    "axial_to_cube",
    "cube_to_axial",
    "axial_to_offset",
    "offset_to_axial",
    "offset_to_cube",
    "cube_to_offset",
    "double_to_cube",
    "cube_to_double",
    "hex_distance_axial",
    "hex_distance_cube",
    "hex_distance_double",
    "hex_distance_offset",
    "neighbors_axial",
    "neighbors_double",
    "neighbors_offset",
    "neighbors_offset_bounded",
    "as_axial",
    "as_cube",
    "as_double",
    "as_offset",
    "convert",
    "coord_sys",
    "from_cube",
    "to_cube",
]
