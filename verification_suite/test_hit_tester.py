"""Pointer-to-wall resolution and the wall ownership rule used for painting."""
from __future__ import annotations

import os
import sys
from collections import Counter
from pathlib import Path

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

BASE = Path(__file__).resolve().parents[1]
if str(BASE) not in sys.path:
    sys.path.insert(0, str(BASE))

from grid_mechanics import Cell, GridGeometry, GridSize, HitError, HitTester, SizingParameters, WallDirection, WallHit  # noqa: E402
from maze_view.compositor import walls_to_paint  # noqa: E402

GRID = GridSize(4, 3)


def _tester() -> HitTester:
    return HitTester(GridGeometry(GRID, SizingParameters.from_viewport((400, 300), GRID)))


def test_point_on_shared_wall_resolves_from_the_owning_side() -> None:
    tester = _tester()
    # Same horizontal wall, either side of the grid line.
    assert tester.resolve_wall((150, 100)) == WallHit(Cell(2, 2), WallDirection.NORTH)
    assert tester.resolve_wall((150, 95)) == WallHit(Cell(2, 1), WallDirection.SOUTH)


def test_boundary_walls_are_hittable() -> None:
    tester = _tester()
    assert tester.resolve_wall((5, 150)) == WallHit(Cell(1, 2), WallDirection.WEST)
    assert tester.resolve_wall((395, 150)) == WallHit(Cell(4, 2), WallDirection.EAST)
    assert tester.resolve_wall((250, 2)) == WallHit(Cell(3, 1), WallDirection.NORTH)


def test_open_interior_and_pegs_are_not_walls() -> None:
    tester = _tester()
    assert tester.resolve_wall((150, 150)) is HitError.NOT_ON_WALL
    assert tester.resolve_wall((100, 100)) is HitError.NOT_ON_WALL


def test_outside_grid_is_out_of_range() -> None:
    tester = _tester()
    assert tester.resolve_wall((450, 10)) is HitError.OUT_OF_RANGE
    assert tester.resolve_cell((450, 10)) is HitError.OUT_OF_RANGE
    assert tester.resolve_cell((10, 10)) == Cell(1, 1)


def test_resolver_follows_replaced_geometry() -> None:
    tester = _tester()
    tester.geometry = GridGeometry(GRID, SizingParameters.from_viewport((800, 600), GRID))
    assert tester.resolve_cell((399, 299)) == Cell(2, 2)


def _canonical(cell: Cell, direction: WallDirection):
    if direction is WallDirection.NORTH:
        return ("h", cell.x, cell.y - 1)
    if direction is WallDirection.SOUTH:
        return ("h", cell.x, cell.y)
    if direction is WallDirection.WEST:
        return ("v", cell.x - 1, cell.y)
    return ("v", cell.x, cell.y)


def test_every_wall_is_painted_exactly_once() -> None:
    for width in range(1, 6):
        for height in range(1, 6):
            size = GridSize(width, height)
            painted = Counter(
                _canonical(cell, direction) for cell in size.cells() for direction in walls_to_paint(cell, size)
            )
            expected = {("h", x, line) for x in range(1, width + 1) for line in range(0, height + 1)}
            expected |= {("v", line, y) for y in range(1, height + 1) for line in range(0, width + 1)}
            assert set(painted) == expected
            assert all(count == 1 for count in painted.values())


def test_first_row_and_column_own_the_outer_edges() -> None:
    size = GridSize(3, 3)
    assert walls_to_paint(Cell(1, 1), size) == (
        WallDirection.NORTH,
        WallDirection.SOUTH,
        WallDirection.EAST,
        WallDirection.WEST,
    )
    assert walls_to_paint(Cell(2, 2), size) == (WallDirection.SOUTH, WallDirection.EAST)
    assert walls_to_paint(Cell(3, 1), size) == (WallDirection.NORTH, WallDirection.SOUTH, WallDirection.EAST)
