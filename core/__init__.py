"""Maze editor framework (config, maze model, persistence)."""

from .config import (  # noqa: F401
    ThemeConfig,
    SizingConfig,
    EditorConfig,
    RobotSpriteConfig,
    ViewConfig,
    MazeDocument,
    load_json,
    save_json,
    load_view_config,
    validate_view_config,
)
from .maze_model import GridMaze, GridWall, MazeModel, WallHandle  # noqa: F401
from .persistence import (  # noqa: F401
    maze_to_document,
    maze_from_document,
    save_maze,
    load_maze,
)
from .logging_setup import setup_logger  # noqa: F401
