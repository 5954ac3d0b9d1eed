"""Adjacency-aware hex container.

A :class:`HexGrid` stores one value per occupied coordinate. Coordinates are
normalised to :class:`~hexlattice.coords.Cube` and mapped to node handles in a
``networkx`` directed graph; every pair of occupied neighbours is joined by two
edges whose ``direction`` attributes name the neighbour slot from each side.
The index and the graph are only ever mutated together through
:meth:`HexGrid._insert` and :meth:`HexGrid._evict`.
"""

from __future__ import annotations

import copy
import logging
from itertools import count
from typing import (
    TYPE_CHECKING,
    Any,
    Generic,
    Iterator,
    TypeAlias,
    TypeVar,
)

import networkx as nx

from .coords import (
    CoordSys,
    Coordinate,
    Cube,
    Direction,
    Offset,
    Parity,
    Tilt,
    from_cube,
    offset_to_cube,
    to_cube,
)
from .errors import AlreadyOccupied, CoordinateSystemMismatch, NotOccupied

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .config import GridSettings

    AdjacencyGraph: TypeAlias = nx.DiGraph[int]
else:  # pragma: no cover - runtime alias without subscripting
    AdjacencyGraph: TypeAlias = nx.DiGraph

logger = logging.getLogger(__name__)

T = TypeVar("T")


class HexGrid(Generic[T]):
    """Map from hex coordinates to values with maintained adjacency.

    ``tilt`` and ``parity`` interpret Offset and Double keys; ``system`` is the
    representation used when coordinates are handed back to the caller.
    """

    def __init__(
        self,
        tilt: Tilt = Tilt.FLAT,
        parity: Parity = Parity.EVEN,
        system: CoordSys = CoordSys.CUBE,
    ) -> None:
        self._tilt = Tilt(tilt)
        self._parity = Parity(parity)
        self._system = CoordSys(system)
        self._graph: AdjacencyGraph = nx.DiGraph()
        self._index: dict[Cube, int] = {}
        self._handles = count()

    # ------------------------------------------------------------------
    @classmethod
    def radial(
        cls,
        radius: int,
        fill: T,
        *,
        tilt: Tilt = Tilt.FLAT,
        parity: Parity = Parity.EVEN,
    ) -> "HexGrid[T]":
        """Return a hexagon-shaped grid of ``radius`` rings around the origin."""

        if radius < 0:
            raise ValueError("radius must be non-negative")
        grid: HexGrid[T] = cls(tilt, parity, CoordSys.CUBE)
        for cube in Cube.ORIGIN.spiral(radius):
            grid._insert(cube, copy.copy(fill))
        logger.debug(
            "built radial grid: radius=%d tiles=%d links=%d",
            radius,
            len(grid),
            grid.edge_count(),
        )
        return grid

    @classmethod
    def rectangular(
        cls,
        columns: int,
        rows: int,
        fill: T,
        *,
        tilt: Tilt = Tilt.FLAT,
        parity: Parity = Parity.ODD,
    ) -> "HexGrid[T]":
        """Return a grid covering Offset ``[0, columns) x [0, rows)``."""

        if columns < 0 or rows < 0:
            raise ValueError("columns and rows must be non-negative")
        grid: HexGrid[T] = cls(tilt, parity, CoordSys.OFFSET)
        for col in range(columns):
            for row in range(rows):
                cube = offset_to_cube(Offset(col, row), grid.tilt, grid.parity)
                grid._insert(cube, copy.copy(fill))
        logger.debug(
            "built rectangular grid: %dx%d tiles=%d links=%d",
            columns,
            rows,
            len(grid),
            grid.edge_count(),
        )
        return grid

    @classmethod
    def from_settings(cls, settings: GridSettings, fill: Any = None) -> "HexGrid[Any]":
        """Instantiate a grid described by a :class:`~hexlattice.config.GridSettings`."""

        return settings.build(fill, grid_type=cls)

    # ------------------------------------------------------------------
    @property
    def tilt(self) -> Tilt:
        return self._tilt

    @property
    def parity(self) -> Parity:
        return self._parity

    @property
    def system(self) -> CoordSys:
        return self._system

    def normalize(self, coord: Coordinate) -> Cube:
        """Return the canonical Cube for ``coord`` under this grid's layout."""

        return to_cube(coord, self._tilt, self._parity)

    def present(self, cube: Cube) -> Coordinate:
        """Express ``cube`` in the grid's preferred coordinate system."""

        return from_cube(cube, self._system, self._tilt, self._parity)

    # ------------------------------------------------------------------
    def contains_coordinate(self, coord: Coordinate) -> bool:
        return self.normalize(coord) in self._index

    def contains_value(self, value: object) -> bool:
        return any(stored == value for _, stored in self._graph.nodes(data="value"))

    def get(self, coord: Coordinate, default: T | None = None) -> T | None:
        handle = self._index.get(self.normalize(coord))
        if handle is None:
            return default
        return self._graph.nodes[handle]["value"]

    def get_mut(self, coord: Coordinate) -> T | None:
        """Return the stored object itself so mutable values can be edited in place."""

        return self.get(coord)

    def add(self, coord: Coordinate, value: T) -> None:
        """Insert ``value`` at a vacant ``coord``.

        Raises :class:`~hexlattice.errors.AlreadyOccupied` without touching the
        grid if ``coord`` already holds a value.
        """

        cube = self.normalize(coord)
        if cube in self._index:
            raise AlreadyOccupied(coord)
        self._insert(cube, value)

    def update(self, coord: Coordinate, value: T) -> None:
        """Replace the value at an occupied ``coord``; adjacency is unchanged.

        Raises :class:`~hexlattice.errors.NotOccupied` if ``coord`` is vacant.
        """

        cube = self.normalize(coord)
        handle = self._index.get(cube)
        if handle is None:
            raise NotOccupied(coord)
        self._graph.nodes[handle]["value"] = value
        logger.debug("updated %r", cube)

    def set(self, coord: Coordinate, value: T) -> None:
        """Insert or overwrite the value at ``coord``."""

        cube = self.normalize(coord)
        handle = self._index.get(cube)
        if handle is None:
            self._insert(cube, value)
        else:
            self._graph.nodes[handle]["value"] = value
            logger.debug("updated %r", cube)

    def remove(self, coord: Coordinate) -> T | None:
        """Evict ``coord`` and its links, returning the value it held, if any."""

        cube = self.normalize(coord)
        if cube not in self._index:
            return None
        return self._evict(cube)

    # ------------------------------------------------------------------
    def __contains__(self, coord: object) -> bool:
        try:
            return self.contains_coordinate(coord)  # type: ignore[arg-type]
        except CoordinateSystemMismatch:
            return False

    def __getitem__(self, coord: Coordinate) -> T:
        handle = self._index.get(self.normalize(coord))
        if handle is None:
            raise NotOccupied(coord)
        return self._graph.nodes[handle]["value"]

    def __setitem__(self, coord: Coordinate, value: T) -> None:
        self.set(coord, value)

    def __delitem__(self, coord: Coordinate) -> None:
        cube = self.normalize(coord)
        if cube not in self._index:
            raise NotOccupied(coord)
        self._evict(cube)

    def __len__(self) -> int:
        return len(self._index)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.coordinates())

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(tilt={self._tilt.value}, "
            f"parity={self._parity.value}, system={self._system.value}, "
            f"tiles={len(self)})"
        )

    # ------------------------------------------------------------------
    def cubes(self) -> list[Cube]:
        return list(self._index)

    def coordinates(self) -> list[Coordinate]:
        return [self.present(cube) for cube in self._index]

    def values(self) -> list[T]:
        return [self._graph.nodes[handle]["value"] for handle in self._index.values()]

    def items(self) -> list[tuple[Coordinate, T]]:
        return [(self.present(cube), value) for cube, value in self.cube_items()]

    def cube_items(self) -> Iterator[tuple[Cube, T]]:
        for cube, handle in self._index.items():
            yield cube, self._graph.nodes[handle]["value"]

    def links(self) -> Iterator[tuple[Cube, Cube, Direction]]:
        """Yield every directed adjacency edge as ``(source, target, direction)``."""

        nodes = self._graph.nodes
        for source, target, direction in self._graph.edges(data="direction"):
            yield nodes[source]["coord"], nodes[target]["coord"], direction

    def edge_count(self) -> int:
        """Number of adjacent tile pairs (each pair is stored as two edges)."""

        return self._graph.number_of_edges() // 2

    def adjacent(self, coord: Coordinate) -> dict[Direction, Coordinate]:
        """Return the occupied neighbours of ``coord`` keyed by direction."""

        handle = self._index.get(self.normalize(coord))
        if handle is None:
            raise NotOccupied(coord)
        found = {
            direction: self.present(self._graph.nodes[target]["coord"])
            for _, target, direction in self._graph.out_edges(handle, data="direction")
        }
        return dict(sorted(found.items()))

    def direction_between(self, source: Coordinate, target: Coordinate) -> Direction | None:
        """Return the slot of ``source`` that links to ``target``, if they are linked."""

        source_handle = self._index.get(self.normalize(source))
        target_handle = self._index.get(self.normalize(target))
        if source_handle is None or target_handle is None:
            return None
        data = self._graph.get_edge_data(source_handle, target_handle)
        if data is None:
            return None
        return data["direction"]

    # ------------------------------------------------------------------
    def _insert(self, cube: Cube, value: T) -> None:
        handle = next(self._handles)
        self._graph.add_node(handle, coord=cube, value=value)
        self._index[cube] = handle
        linked = self._link(cube, handle)
        logger.debug("inserted %r with %d neighbour link(s)", cube, linked)

    def _link(self, cube: Cube, handle: int) -> int:
        linked = 0
        for index, neighbor in enumerate(cube.neighbors()):
            other = self._index.get(neighbor)
            if other is None:
                continue
            direction = Direction(index)
            self._graph.add_edge(handle, other, direction=direction)
            self._graph.add_edge(other, handle, direction=direction.opposite)
            linked += 1
        return linked

    def _evict(self, cube: Cube) -> T:
        handle = self._index.pop(cube)
        value = self._graph.nodes[handle]["value"]
        # removing the node drops every edge that touches it
        self._graph.remove_node(handle)
        logger.debug("removed %r", cube)
        return value


__all__ = ["AdjacencyGraph", "HexGrid"]
