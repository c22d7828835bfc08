"""Pygame maze view: cached background, wall editing and robot overlay."""

from .background import BackgroundCache
from .compositor import FrameCompositor, walls_to_paint
from .editing import EditController, PointerButton, PointerEvent, PointerKind, pointer_event_from_pygame
from .paint import MazeTheme
from .sprites import default_robot_sprite, load_robot_sprite
from .view import MazeView

__all__ = [
    "BackgroundCache",
    "FrameCompositor",
    "walls_to_paint",
    "EditController",
    "PointerButton",
    "PointerEvent",
    "PointerKind",
    "pointer_event_from_pygame",
    "MazeTheme",
    "default_robot_sprite",
    "load_robot_sprite",
    "MazeView",
]
