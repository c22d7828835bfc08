"""Mapping between grid cells, walls and pegs and pixel rectangles."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from .cells import Cell, CornerLocation, GridSize, WallDirection

Point = Tuple[float, float]

MIN_CELL_SIZE = 2
MIN_WALL_SIZE = 2


@dataclass(frozen=True)
class PixelRect:
    """Axis-aligned pixel rectangle.

    ``contains`` follows ``pygame.Rect.collidepoint``: the left and top
    edges are inside, the right and bottom edges are not.
    """

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def center(self) -> Tuple[int, int]:
        return (self.x + self.width // 2, self.y + self.height // 2)

    def contains(self, point: Point) -> bool:
        px, py = point
        return self.x <= px < self.right and self.y <= py < self.bottom

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.x, self.y, self.width, self.height)


def _even_down(value: int) -> int:
    return value - 1 if value & 1 else value


def _even_up(value: int) -> int:
    return value + 1 if value & 1 else value


@dataclass(frozen=True)
class SizingParameters:
    """Pixel sizes of cells and wall strips. All four values are even."""

    cell_width: int = 40
    cell_height: int = 40
    wall_width: int = 10
    wall_height: int = 10

    def __post_init__(self) -> None:
        for name in ("cell_width", "cell_height", "wall_width", "wall_height"):
            value = getattr(self, name)
            if value <= 0 or value & 1:
                raise ValueError(f"{name} must be a positive even number, got {value}")

    @classmethod
    def from_viewport(cls, viewport_size: Tuple[int, int], grid_size: GridSize) -> "SizingParameters":
        """Fit cells into the viewport.

        Cell sizes are floored and then rounded down to even; wall sizes are a
        quarter of the cell size rounded up to even.
        """
        view_w, view_h = viewport_size
        cell_w = max(MIN_CELL_SIZE, _even_down(int(view_w) // grid_size.width))
        cell_h = max(MIN_CELL_SIZE, _even_down(int(view_h) // grid_size.height))
        wall_w = max(MIN_WALL_SIZE, _even_up(cell_w // 4))
        wall_h = max(MIN_WALL_SIZE, _even_up(cell_h // 4))
        return cls(cell_w, cell_h, wall_w, wall_h)

    @property
    def cell_width_half(self) -> int:
        return self.cell_width // 2

    @property
    def cell_height_half(self) -> int:
        return self.cell_height // 2

    @property
    def wall_width_half(self) -> int:
        return self.wall_width // 2

    @property
    def wall_height_half(self) -> int:
        return self.wall_height // 2


class HitError(Enum):
    """Routine reasons a pointer position maps to no grid element."""

    OUT_OF_RANGE = "out_of_range"
    NOT_ON_WALL = "not_on_wall"


@dataclass(frozen=True)
class WallHit:
    cell: Cell
    direction: WallDirection


class GridGeometry:
    """Pure conversions for one grid size and one set of sizing parameters."""

    def __init__(self, grid_size: GridSize, sizing: SizingParameters | None = None) -> None:
        self.grid_size = grid_size
        self.sizing = sizing or SizingParameters()

    def maze_extent(self) -> Tuple[int, int]:
        return (
            self.grid_size.width * self.sizing.cell_width,
            self.grid_size.height * self.sizing.cell_height,
        )

    def cell_center(self, cell: Cell) -> Tuple[int, int]:
        s = self.sizing
        return (
            cell.x_zero_based * s.cell_width + s.cell_width_half,
            cell.y_zero_based * s.cell_height + s.cell_height_half,
        )

    def cell_rect(self, cell: Cell) -> PixelRect:
        s = self.sizing
        return PixelRect(cell.x_zero_based * s.cell_width, cell.y_zero_based * s.cell_height, s.cell_width, s.cell_height)

    def cell_interior(self, cell: Cell) -> PixelRect:
        """Cell area not covered by any wall strip."""
        s = self.sizing
        return PixelRect(
            cell.x_zero_based * s.cell_width + s.wall_width_half,
            cell.y_zero_based * s.cell_height + s.wall_height_half,
            s.cell_width - s.wall_width,
            s.cell_height - s.wall_height,
        )

    def wall_rect(self, cell: Cell, direction: WallDirection) -> PixelRect:
        """Strip centred on the edge shared with the neighbour in ``direction``.

        Strips are shortened by a wall thickness so they never overlap pegs.
        """
        s = self.sizing
        cx, cy = self.cell_center(cell)
        if direction is WallDirection.NORTH:
            return PixelRect(
                cx - (s.cell_width_half - s.wall_width_half),
                cy - (s.cell_height_half + s.wall_height_half),
                s.cell_width - s.wall_width,
                s.wall_height,
            )
        if direction is WallDirection.SOUTH:
            return PixelRect(
                cx - (s.cell_width_half - s.wall_width_half),
                cy + (s.cell_height_half - s.wall_height_half),
                s.cell_width - s.wall_width,
                s.wall_height,
            )
        if direction is WallDirection.EAST:
            return PixelRect(
                cx + (s.cell_width_half - s.wall_width_half),
                cy - (s.cell_height_half - s.wall_height_half),
                s.wall_width,
                s.cell_height - s.wall_height,
            )
        return PixelRect(
            cx - (s.cell_width_half + s.wall_width_half),
            cy - (s.cell_height_half - s.wall_height_half),
            s.wall_width,
            s.cell_height - s.wall_height,
        )

    def wall_center(self, cell: Cell, direction: WallDirection) -> Tuple[int, int]:
        return self.wall_rect(cell, direction).center

    def peg_rect(self, cell: Cell, corner: CornerLocation) -> PixelRect:
        """Marker at the grid-line crossing nearest ``corner`` of ``cell``."""
        s = self.sizing
        left = cell.x_zero_based * s.cell_width - s.wall_width_half
        right = cell.x * s.cell_width - s.wall_width_half
        top = cell.y_zero_based * s.cell_height - s.wall_height_half
        bottom = cell.y * s.cell_height - s.wall_height_half
        x, y = {
            CornerLocation.TOP_LEFT: (left, top),
            CornerLocation.TOP_RIGHT: (right, top),
            CornerLocation.BOTTOM_RIGHT: (right, bottom),
            CornerLocation.BOTTOM_LEFT: (left, bottom),
        }[corner]
        return PixelRect(x, y, s.wall_width, s.wall_height)

    def cell_at(self, point: Point) -> Union[Cell, HitError]:
        px, py = point
        cell = Cell(int(px // self.sizing.cell_width) + 1, int(py // self.sizing.cell_height) + 1)
        if not cell.in_range(self.grid_size):
            return HitError.OUT_OF_RANGE
        return cell

    def wall_at(self, cell: Cell, point: Point) -> Union[WallDirection, HitError]:
        for direction in WallDirection:
            if self.wall_rect(cell, direction).contains(point):
                return direction
        return HitError.NOT_ON_WALL


__all__ = [
    "Point",
    "PixelRect",
    "SizingParameters",
    "HitError",
    "WallHit",
    "GridGeometry",
]
