"""File I/O helpers for maze documents."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Tuple

from grid_mechanics.cells import Cell, GridSize, WallDirection

from .config import MazeDocument, load_json, save_json
from .maze_model import GridMaze

logger = logging.getLogger(__name__)

_DIRECTIONS = {d.value: d for d in WallDirection}


def _as_int(value, what: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{what} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{what} must be an integer, got {value!r}") from exc


def _parse_wall(entry, size: GridSize) -> Tuple[Cell, WallDirection]:
    if not isinstance(entry, (list, tuple)) or len(entry) != 3:
        raise ValueError(f"wall entry must be [x, y, direction], got {entry}")
    x, y, code = entry
    direction = _DIRECTIONS.get(str(code).upper())
    if direction is None:
        raise ValueError(f"unknown wall direction {code!r}; expected one of {sorted(_DIRECTIONS)}")
    cell = Cell(_as_int(x, "wall x"), _as_int(y, "wall y"))
    if not cell.in_range(size):
        raise ValueError(f"wall cell {cell.as_tuple()} lies outside the {size.width}x{size.height} maze")
    return cell, direction


def maze_to_document(maze: GridMaze, name: str = "maze") -> MazeDocument:
    size = maze.get_grid_size()
    walls = [[cell.x, cell.y, direction.value] for cell, direction in maze.iter_set_walls()]
    return MazeDocument(width=size.width, height=size.height, walls=walls, name=name)


def maze_from_document(doc: MazeDocument) -> GridMaze:
    size = GridSize(_as_int(doc.width, "width"), _as_int(doc.height, "height"))
    if not isinstance(doc.walls, list):
        raise ValueError(f"walls must be a list, got {type(doc.walls).__name__}")
    return GridMaze.from_walls(size, (_parse_wall(entry, size) for entry in doc.walls))


def save_maze(path: Path, maze: GridMaze, name: str | None = None) -> None:
    save_json(path, maze_to_document(maze, name or path.stem))
    logger.info("Saved %d walls to %s", maze.wall_count(), path)


def load_maze(path: Path) -> GridMaze:
    if not path.exists():
        raise FileNotFoundError(f"No maze file at {path}")
    maze = maze_from_document(load_json(path, MazeDocument))
    logger.info("Loaded %dx%d maze from %s", maze.grid_size.width, maze.grid_size.height, path)
    return maze


__all__ = [
    "maze_to_document",
    "maze_from_document",
    "save_maze",
    "load_maze",
]
