"""Maze model contract consumed by the view, plus an in-memory reference model."""
from __future__ import annotations

import logging
from typing import Iterable, Iterator, Protocol, Set, Tuple

from grid_mechanics.cells import Cell, GridSize, WallDirection

logger = logging.getLogger(__name__)

# ("h", x, line) is the horizontal edge above row ``line + 1``;
# ("v", line, y) is the vertical edge left of column ``line + 1``.
WallKey = Tuple[str, int, int]


class WallHandle(Protocol):
    def is_set(self) -> bool: ...

    def set(self, value: bool) -> None: ...


class MazeModel(Protocol):
    """What the view needs from the authoritative maze topology."""

    def get_grid_size(self) -> GridSize: ...

    def get_wall(self, cell: Cell, direction: WallDirection) -> WallHandle: ...


class GridWall:
    """Handle onto one stored wall of a `GridMaze`."""

    def __init__(self, maze: "GridMaze", key: WallKey) -> None:
        self._maze = maze
        self.key = key

    def is_set(self) -> bool:
        return self._maze._is_set(self.key)

    def set(self, value: bool) -> None:
        self._maze._set(self.key, bool(value))

    def __repr__(self) -> str:
        return f"GridWall({self.key}, set={self.is_set()})"


class GridMaze:
    """Rectangular maze storing each shared wall once.

    The outer boundary is always walled; ``set(False)`` on a boundary wall
    is ignored.
    """

    def __init__(self, grid_size: GridSize) -> None:
        self.grid_size = grid_size
        self._walls: Set[WallKey] = set()

    @classmethod
    def from_walls(
        cls, grid_size: GridSize, walls: Iterable[Tuple[Cell, WallDirection]]
    ) -> "GridMaze":
        maze = cls(grid_size)
        for cell, direction in walls:
            maze.get_wall(cell, direction).set(True)
        return maze

    def get_grid_size(self) -> GridSize:
        return self.grid_size

    def get_wall(self, cell: Cell, direction: WallDirection) -> GridWall:
        if not cell.in_range(self.grid_size):
            raise ValueError(f"Cell {cell.as_tuple()} is outside the {self.grid_size.width}x{self.grid_size.height} maze")
        return GridWall(self, self._key(cell, direction))

    def is_boundary(self, cell: Cell, direction: WallDirection) -> bool:
        return self._is_boundary(self._key(cell, direction))

    def clear(self) -> None:
        self._walls.clear()

    def wall_count(self) -> int:
        """Set interior walls (boundary walls are implicit)."""
        return len(self._walls)

    def iter_set_walls(self) -> Iterator[Tuple[Cell, WallDirection]]:
        """Every set interior wall, named from the cell north or west of it."""
        for kind, a, b in sorted(self._walls):
            if kind == "h":
                yield Cell(a, b), WallDirection.SOUTH
            else:
                yield Cell(a, b), WallDirection.EAST

    @staticmethod
    def _key(cell: Cell, direction: WallDirection) -> WallKey:
        if direction is WallDirection.NORTH:
            return ("h", cell.x, cell.y - 1)
        if direction is WallDirection.SOUTH:
            return ("h", cell.x, cell.y)
        if direction is WallDirection.WEST:
            return ("v", cell.x - 1, cell.y)
        return ("v", cell.x, cell.y)

    def _is_boundary(self, key: WallKey) -> bool:
        kind, a, b = key
        if kind == "h":
            return b in (0, self.grid_size.height)
        return a in (0, self.grid_size.width)

    def _is_set(self, key: WallKey) -> bool:
        return self._is_boundary(key) or key in self._walls

    def _set(self, key: WallKey, value: bool) -> None:
        if self._is_boundary(key):
            return
        if value:
            self._walls.add(key)
        else:
            self._walls.discard(key)
        logger.debug("wall %s -> %s", key, value)


__all__ = ["WallHandle", "MazeModel", "GridWall", "GridMaze"]
