"""Data models and JSON helpers for the maze view and maze documents."""
from __future__ import annotations

from dataclasses import asdict, dataclass, field, is_dataclass
import json
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union, get_args, get_origin, get_type_hints

from grid_mechanics.cells import GridSize
from grid_mechanics.geometry import SizingParameters

Color = Tuple[int, int, int]


@dataclass
class ThemeConfig:
    canvas: Color = (255, 255, 255)
    gradient_start: Color = (255, 255, 255)
    gradient_end: Color = (229, 236, 255)
    wall_empty: Color = (204, 218, 255)
    wall_set: Color = (0, 94, 189)
    boundary: Color = (0, 56, 112)
    peg: Color = (0, 0, 0)
    hover: Color = (255, 255, 0)
    hover_alpha: int = 255


@dataclass
class SizingConfig:
    """Sizes used before the first resize event arrives."""

    cell_width: int = 40
    cell_height: int = 40
    wall_width: int = 10
    wall_height: int = 10


@dataclass
class EditorConfig:
    clear_hover_outside_grid: bool = True
    start_editable: bool = False


@dataclass
class RobotSpriteConfig:
    image_path: Optional[str] = None
    size: int = 32


@dataclass
class ViewConfig:
    window_size: Tuple[int, int] = (900, 720)
    default_grid: Tuple[int, int] = (16, 16)
    theme: ThemeConfig = field(default_factory=ThemeConfig)
    sizing: SizingConfig = field(default_factory=SizingConfig)
    editor: EditorConfig = field(default_factory=EditorConfig)
    robot: RobotSpriteConfig = field(default_factory=RobotSpriteConfig)
    metadata: Dict[str, object] = field(default_factory=dict)


@dataclass
class MazeDocument:
    """On-disk maze: grid size plus every set wall as ``[x, y, "N"|"S"|"E"|"W"]``."""

    width: int
    height: int
    walls: List[List[object]] = field(default_factory=list)
    name: str = "maze"
    metadata: Dict[str, object] = field(default_factory=dict)


def _coerce(expected, value):
    """Convert one decoded JSON value to the annotated field type."""
    if is_dataclass(expected):
        return _dataclass_from_dict(expected, value)
    origin = get_origin(expected)
    if origin is tuple:
        return tuple(value) if isinstance(value, list) else value
    if origin is list:
        (inner,) = get_args(expected)
        if is_dataclass(inner):
            return [_dataclass_from_dict(inner, item) for item in value]
        return value
    if origin is Union:
        # Optional[SomeConfig]
        members = [a for a in get_args(expected) if a is not type(None)]
        if value is not None and len(members) == 1 and is_dataclass(members[0]):
            return _dataclass_from_dict(members[0], value)
    return value


def _dataclass_from_dict(cls, data: Dict) -> object:
    if not isinstance(data, dict):
        raise ValueError(f"Expected an object for {cls.__name__}, got {type(data).__name__}")
    hints = get_type_hints(cls)
    unknown = sorted(set(data) - set(hints))
    if unknown:
        raise ValueError(f"Unknown field(s) for {cls.__name__}: {', '.join(unknown)}")
    try:
        return cls(**{key: _coerce(hints[key], value) for key, value in data.items()})
    except TypeError as exc:
        raise ValueError(f"Invalid {cls.__name__} data: {exc}") from exc


def load_json(path: Path, cls):
    with path.open("r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise ValueError(f"{path} is not valid JSON: {exc}") from exc
    return _dataclass_from_dict(cls, data)


def save_json(path: Path, obj) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(asdict(obj), f, indent=2)


def _check_channel(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not 0 <= value <= 255:
        raise ValueError(f"{name} must be a number in 0..255, got {value!r}")


def _check_color(name: str, value) -> None:
    if not isinstance(value, tuple) or len(value) != 3:
        raise ValueError(f"{name} must be an [r, g, b] triple, got {value!r}")
    for channel in value:
        _check_channel(name, channel)


def validate_view_config(cfg: ViewConfig) -> ViewConfig:
    """Raise ValueError for anything the view would reject later."""
    for name, value in asdict(cfg.theme).items():
        if name == "hover_alpha":
            _check_channel(name, value)
        else:
            _check_color(f"theme.{name}", value)
    try:
        SizingParameters(**asdict(cfg.sizing))
        GridSize(*cfg.default_grid)
    except TypeError as exc:
        raise ValueError(f"Invalid view config: {exc}") from exc
    size = cfg.window_size
    if not isinstance(size, tuple) or len(size) != 2 or not all(isinstance(v, int) and v > 0 for v in size):
        raise ValueError(f"window_size must be two positive integers, got {cfg.window_size!r}")
    if not isinstance(cfg.robot.size, int) or cfg.robot.size <= 0:
        raise ValueError(f"robot.size must be a positive integer, got {cfg.robot.size!r}")
    return cfg


def load_view_config(path: Optional[Path] = None) -> ViewConfig:
    if path is None:
        return ViewConfig()
    return validate_view_config(load_json(path, ViewConfig))
