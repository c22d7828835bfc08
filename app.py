"""Maze editor launcher."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from core import GridMaze, load_maze, load_view_config, setup_logger
from grid_mechanics import GridSize

logger = logging.getLogger("maze_editor")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Edit a grid maze and watch a robot tour it.")
    parser.add_argument("--maze", type=Path, help="maze JSON to open (created on save if missing)")
    parser.add_argument("--config", type=Path, help="view config JSON")
    parser.add_argument("--width", type=int, help="cells per row for a new maze")
    parser.add_argument("--height", type=int, help="cells per column for a new maze")
    parser.add_argument("--log-file", type=Path, help="also write logs to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    setup_logger("", args.log_file, logging.DEBUG if args.verbose else logging.INFO)
    try:
        config = load_view_config(args.config)
        if args.maze and args.maze.exists():
            maze = load_maze(args.maze)
        else:
            width = args.width or config.default_grid[0]
            height = args.height or config.default_grid[1]
            maze = GridMaze(GridSize(width, height))
    except (FileNotFoundError, ValueError) as exc:
        logger.error("%s", exc)
        return 2

    from apps.maze_editor import MazeEditorApp

    MazeEditorApp(maze, config, maze_path=args.maze).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
