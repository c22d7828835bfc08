"""Maze view facade used by the hosting window."""
from __future__ import annotations

from dataclasses import asdict
import logging
from pathlib import Path
from typing import Callable, Optional, Tuple

import pygame

from core.config import ViewConfig
from core.maze_model import MazeModel
from grid_mechanics.cells import Cell
from grid_mechanics.geometry import GridGeometry, SizingParameters
from grid_mechanics.hit_test import HitTester
from grid_mechanics.pose import PoseHolder, RobotPose

from .background import BackgroundCache
from .compositor import FrameCompositor
from .editing import EditController, PointerEvent, pointer_event_from_pygame
from .paint import MazeTheme
from .sprites import load_robot_sprite

logger = logging.getLogger(__name__)


class MazeView:
    """Renders a maze model, edits its walls and overlays the robot pose.

    All methods except `set_pose` / `clear_pose` are meant to be called from
    the render thread. Poses may be published from any thread.
    """

    def __init__(
        self,
        model: MazeModel,
        config: Optional[ViewConfig] = None,
        *,
        sprite: Optional[pygame.Surface] = None,
        on_redraw: Optional[Callable[[], None]] = None,
    ) -> None:
        self.config = config or ViewConfig()
        self.theme = MazeTheme.from_config(self.config.theme)
        self._model = model
        self._viewport_size: Optional[Tuple[int, int]] = None
        self._needs_redraw = True
        self._on_redraw = on_redraw

        sizing = SizingParameters(**asdict(self.config.sizing))
        self.geometry = GridGeometry(model.get_grid_size(), sizing)
        self.hit_tester = HitTester(self.geometry)
        self.background = BackgroundCache(self.theme)
        self.background.configure((0, 0), self.geometry)
        self.poses = PoseHolder()

        if sprite is None:
            image_path = self.config.robot.image_path
            sprite = load_robot_sprite(Path(image_path) if image_path else None, self.config.robot.size)
        self.compositor = FrameCompositor(self.theme, sprite)
        self.editor = EditController(
            model,
            self.hit_tester,
            self.request_redraw,
            clear_hover_outside_grid=self.config.editor.clear_hover_outside_grid,
        )
        if self.config.editor.start_editable:
            self.editor.enable()

    # --- model & sizing ----------------------------------------------------

    @property
    def model(self) -> MazeModel:
        return self._model

    def set_model(self, model: MazeModel) -> None:
        self._model = model
        self.editor.model = model
        self.editor.clear_hover()
        if self._viewport_size is not None:
            self.on_resize(self._viewport_size)
        else:
            self._rebind(GridGeometry(model.get_grid_size(), self.geometry.sizing))
        self.request_redraw()

    def on_resize(self, viewport_size: Tuple[int, int]) -> None:
        size = (int(viewport_size[0]), int(viewport_size[1]))
        self._viewport_size = size
        sizing = SizingParameters.from_viewport(size, self._model.get_grid_size())
        self._rebind(GridGeometry(self._model.get_grid_size(), sizing), size)
        logger.debug(
            "Viewport %dx%d -> cell %dx%d, wall %dx%d",
            size[0],
            size[1],
            sizing.cell_width,
            sizing.cell_height,
            sizing.wall_width,
            sizing.wall_height,
        )
        self.request_redraw()

    def _rebind(self, geometry: GridGeometry, viewport_size: Optional[Tuple[int, int]] = None) -> None:
        self.geometry = geometry
        self.hit_tester.geometry = geometry
        self.background.configure(viewport_size or self._viewport_size or (0, 0), geometry)

    def cell_center(self, cell: Cell) -> Tuple[int, int]:
        return self.geometry.cell_center(cell)

    # --- redraw bookkeeping -------------------------------------------------

    def request_redraw(self) -> None:
        self._needs_redraw = True
        if self._on_redraw is not None:
            self._on_redraw()

    @property
    def needs_redraw(self) -> bool:
        return self._needs_redraw

    def consume_redraw(self) -> bool:
        pending = self._needs_redraw
        self._needs_redraw = False
        return pending

    # --- editing -------------------------------------------------------------

    @property
    def editable(self) -> bool:
        return self.editor.enabled

    def set_editable(self, editable: bool) -> None:
        self.editor.set_enabled(bool(editable))

    @property
    def hover(self) -> Optional[Cell]:
        return self.editor.hover

    def on_pointer_event(self, event: PointerEvent) -> bool:
        return self.editor.handle(event)

    def handle_pygame_event(self, event: pygame.event.Event, origin: Tuple[int, int] = (0, 0)) -> bool:
        pointer = pointer_event_from_pygame(event, origin)
        if pointer is None:
            return False
        return self.on_pointer_event(pointer)

    # --- robot overlay -------------------------------------------------------

    @property
    def pose(self) -> Optional[RobotPose]:
        return self.poses.snapshot()

    def set_pose(self, position: Tuple[int, int], rotation: float) -> RobotPose:
        pose = self.poses.publish(position, rotation)
        self.request_redraw()
        return pose

    def clear_pose(self) -> None:
        self.poses.clear()
        self.request_redraw()

    # --- painting -------------------------------------------------------------

    def render(self, target: pygame.Surface) -> None:
        self.compositor.render(
            target,
            model=self._model,
            geometry=self.geometry,
            background=self.background.get_background(),
            hover=self.editor.hover,
            pose=self.poses.snapshot(),
            editable=self.editor.enabled,
        )


__all__ = ["MazeView"]
