"""Grid-level value types: cells, grid sizes, wall directions and corners."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple


class WallDirection(Enum):
    """Side of a cell. Declaration order is the hit-test order."""

    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"

    @property
    def opposite(self) -> "WallDirection":
        return _OPPOSITES[self]

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTAS[self]


_OPPOSITES = {
    WallDirection.NORTH: WallDirection.SOUTH,
    WallDirection.SOUTH: WallDirection.NORTH,
    WallDirection.EAST: WallDirection.WEST,
    WallDirection.WEST: WallDirection.EAST,
}

# Screen axes: y grows downward, so north is -1.
_DELTAS = {
    WallDirection.NORTH: (0, -1),
    WallDirection.SOUTH: (0, 1),
    WallDirection.EAST: (1, 0),
    WallDirection.WEST: (-1, 0),
}


class CornerLocation(Enum):
    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_RIGHT = "bottom_right"
    BOTTOM_LEFT = "bottom_left"


@dataclass(frozen=True)
class GridSize:
    """Number of cells along each axis."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Grid needs at least one cell per axis, got {self.width}x{self.height}")

    def cells(self) -> Iterator["Cell"]:
        """Every cell in row-major order."""
        for y in range(1, self.height + 1):
            for x in range(1, self.width + 1):
                yield Cell(x, y)

    def __len__(self) -> int:
        return self.width * self.height


@dataclass(frozen=True)
class Cell:
    """A grid square addressed by 1-based ``(x, y)``.

    Out-of-range cells are allowed to exist; peg placement sweeps one past
    the last column and row.
    """

    x: int
    y: int

    @property
    def x_zero_based(self) -> int:
        return self.x - 1

    @property
    def y_zero_based(self) -> int:
        return self.y - 1

    def in_range(self, size: GridSize) -> bool:
        return 1 <= self.x <= size.width and 1 <= self.y <= size.height

    def neighbor(self, direction: WallDirection) -> "Cell":
        dx, dy = direction.delta
        return Cell(self.x + dx, self.y + dy)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)


__all__ = ["WallDirection", "CornerLocation", "GridSize", "Cell"]
