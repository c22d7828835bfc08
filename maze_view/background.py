"""Pre-rendered static layer: gradient, empty wall strips, boundary and pegs."""
from __future__ import annotations

import logging
from typing import Optional, Tuple

import pygame

from grid_mechanics.cells import Cell, CornerLocation
from grid_mechanics.geometry import GridGeometry

from .paint import MazeTheme, gradient_surface

logger = logging.getLogger(__name__)


class BackgroundCache:
    """Owns the background raster and the flag that says it must be rebuilt.

    The owner calls `configure` (or `invalidate`) on every viewport resize or
    maze swap; `get_background` rebuilds lazily on the next request. There is
    no partial invalidation.
    """

    def __init__(self, theme: MazeTheme) -> None:
        self.theme = theme
        self.dirty = True
        self.rebuilds = 0
        self._surface: Optional[pygame.Surface] = None
        self._viewport_size: Tuple[int, int] = (0, 0)
        self._geometry: Optional[GridGeometry] = None

    def configure(self, viewport_size: Tuple[int, int], geometry: GridGeometry) -> None:
        self._viewport_size = (int(viewport_size[0]), int(viewport_size[1]))
        self._geometry = geometry
        self.invalidate()

    def invalidate(self) -> None:
        self.dirty = True
        self._surface = None

    def get_background(self) -> pygame.Surface:
        if self._geometry is None:
            raise RuntimeError("BackgroundCache.configure() must be called before get_background()")
        if self.dirty or self._surface is None:
            self._surface = self._build(self._geometry)
            self.dirty = False
            self.rebuilds += 1
            logger.debug(
                "Rebuilt maze background %dx%d (rebuild #%d)",
                self._surface.get_width(),
                self._surface.get_height(),
                self.rebuilds,
            )
        return self._surface

    def _build(self, geometry: GridGeometry) -> pygame.Surface:
        maze_w, maze_h = geometry.maze_extent()
        view_w, view_h = self._viewport_size
        size = (view_w if view_w > 0 else maze_w, view_h if view_h > 0 else maze_h)
        theme = self.theme
        s = geometry.sizing
        grid = geometry.grid_size

        surface = pygame.Surface(size)
        surface.fill(theme.canvas)
        surface.blit(gradient_surface((maze_w, maze_h), theme.gradient_start, theme.gradient_end), (0, 0))

        # Empty wall strips on every grid line, including the closing ones.
        for i in range(grid.width + 1):
            surface.fill(theme.wall_empty, pygame.Rect(i * s.cell_width - s.wall_width_half, 0, s.wall_width, maze_h))
        for i in range(grid.height + 1):
            surface.fill(theme.wall_empty, pygame.Rect(0, i * s.cell_height - s.wall_height_half, maze_w, s.wall_height))

        # Outer boundary.
        surface.fill(theme.boundary, pygame.Rect(-s.wall_width_half, -s.wall_height_half, maze_w, s.wall_height))
        surface.fill(theme.boundary, pygame.Rect(-s.wall_width_half, -s.wall_height_half, s.wall_width, maze_h))
        surface.fill(theme.boundary, pygame.Rect(0, maze_h - s.wall_height_half, maze_w, s.wall_height))
        surface.fill(theme.boundary, pygame.Rect(maze_w - s.wall_width_half, 0, s.wall_width, maze_h))

        for x in range(1, grid.width + 2):
            for y in range(1, grid.height + 2):
                peg = geometry.peg_rect(Cell(x, y), CornerLocation.TOP_LEFT)
                surface.fill(theme.peg, pygame.Rect(peg.as_tuple()))
        return surface


__all__ = ["BackgroundCache"]
