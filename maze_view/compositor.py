"""Per-frame drawing: background, set walls, hover highlight and robot."""
from __future__ import annotations

import math
from typing import Optional, Tuple

import pygame

from core.maze_model import MazeModel
from grid_mechanics.cells import Cell, GridSize, WallDirection
from grid_mechanics.geometry import GridGeometry
from grid_mechanics.pose import RobotPose

from .paint import MazeTheme, surface_clip

# Sprites face up, poses measure rotation from +x.
SPRITE_FORWARD_OFFSET = math.pi / 2


def walls_to_paint(cell: Cell, grid_size: GridSize) -> Tuple[WallDirection, ...]:
    """Walls ``cell`` is responsible for drawing.

    Every cell owns its south and east walls; the first column also owns
    west and the first row owns north, so each wall is drawn exactly once.
    """
    owned = {WallDirection.SOUTH, WallDirection.EAST}
    if cell.x == 1:
        owned.add(WallDirection.WEST)
    if cell.y == 1:
        owned.add(WallDirection.NORTH)
    return tuple(d for d in WallDirection if d in owned)


class FrameCompositor:
    def __init__(self, theme: MazeTheme, sprite: pygame.Surface) -> None:
        self.theme = theme
        self.sprite = sprite

    def render(
        self,
        target: pygame.Surface,
        *,
        model: MazeModel,
        geometry: GridGeometry,
        background: pygame.Surface,
        hover: Optional[Cell] = None,
        pose: Optional[RobotPose] = None,
        editable: bool = False,
    ) -> None:
        target.blit(background, (0, 0))
        self._draw_walls(target, model, geometry)
        if hover is not None:
            self._draw_hover(target, geometry, hover)
        if pose is not None and not editable:
            self._draw_robot(target, geometry, pose)

    def _draw_walls(self, target: pygame.Surface, model: MazeModel, geometry: GridGeometry) -> None:
        size = geometry.grid_size
        for cell in size.cells():
            for direction in walls_to_paint(cell, size):
                if not model.get_wall(cell, direction).is_set():
                    continue
                on_boundary = not cell.neighbor(direction).in_range(size)
                color = self.theme.boundary if on_boundary else self.theme.wall_set
                target.fill(color, pygame.Rect(geometry.wall_rect(cell, direction).as_tuple()))

    def _draw_hover(self, target: pygame.Surface, geometry: GridGeometry, cell: Cell) -> None:
        rect = pygame.Rect(geometry.cell_interior(cell).as_tuple())
        if rect.width <= 0 or rect.height <= 0:
            return
        if self.theme.hover_alpha >= 255:
            target.fill(self.theme.hover, rect)
            return
        overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
        overlay.fill((*self.theme.hover, self.theme.hover_alpha))
        target.blit(overlay, rect.topleft)

    def _draw_robot(self, target: pygame.Surface, geometry: GridGeometry, pose: RobotPose) -> None:
        # pygame rotates counter-clockwise on a y-down surface.
        angle = -math.degrees(pose.rotation + SPRITE_FORWARD_OFFSET)
        rotated = pygame.transform.rotate(self.sprite, angle)
        dest = rotated.get_rect(center=pose.position)
        maze_area = pygame.Rect((0, 0), geometry.maze_extent())
        with surface_clip(target, maze_area):
            target.blit(rotated, dest)


__all__ = ["FrameCompositor", "walls_to_paint", "SPRITE_FORWARD_OFFSET"]
