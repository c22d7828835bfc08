"""Pointer-driven wall editing and hover tracking."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging
from typing import Callable, Optional, Tuple

import pygame

from core.maze_model import MazeModel
from grid_mechanics.cells import Cell
from grid_mechanics.geometry import HitError, Point
from grid_mechanics.hit_test import HitTester

logger = logging.getLogger(__name__)


class PointerKind(Enum):
    MOVE = "move"
    DRAG = "drag"
    PRESS = "press"


class PointerButton(Enum):
    PRIMARY = 1
    MIDDLE = 2
    SECONDARY = 3


@dataclass(frozen=True)
class PointerEvent:
    kind: PointerKind
    point: Point
    button: Optional[PointerButton] = None

    @classmethod
    def move(cls, point: Point) -> "PointerEvent":
        return cls(PointerKind.MOVE, point)

    @classmethod
    def drag(cls, point: Point, button: PointerButton = PointerButton.PRIMARY) -> "PointerEvent":
        return cls(PointerKind.DRAG, point, button)

    @classmethod
    def press(cls, point: Point, button: PointerButton = PointerButton.PRIMARY) -> "PointerEvent":
        return cls(PointerKind.PRESS, point, button)


_PYGAME_BUTTONS = {1: PointerButton.PRIMARY, 2: PointerButton.MIDDLE, 3: PointerButton.SECONDARY}


def pointer_event_from_pygame(
    event: pygame.event.Event, origin: Tuple[int, int] = (0, 0)
) -> Optional[PointerEvent]:
    """Translate a pygame mouse event into view coordinates.

    Returns None for events that carry no pointer action (keys, wheel, ...).
    """
    if event.type == pygame.MOUSEMOTION:
        point = (event.pos[0] - origin[0], event.pos[1] - origin[1])
        left, middle, right = event.buttons[:3]
        if left:
            return PointerEvent.drag(point, PointerButton.PRIMARY)
        if right:
            return PointerEvent.drag(point, PointerButton.SECONDARY)
        if middle:
            return PointerEvent.drag(point, PointerButton.MIDDLE)
        return PointerEvent.move(point)
    if event.type == pygame.MOUSEBUTTONDOWN:
        button = _PYGAME_BUTTONS.get(event.button)
        if button is None:
            return None
        return PointerEvent.press((event.pos[0] - origin[0], event.pos[1] - origin[1]), button)
    return None


class EditController:
    """Enabled/disabled state machine routing pointer events into wall edits.

    While disabled every event is ignored. Moves update the hover cell, drags
    paint walls (primary sets, secondary clears) and presses toggle the wall
    under the pointer. Misses never raise. A move outside the grid clears the
    hover cell when `clear_hover_outside_grid` is set (the default) and keeps
    it otherwise; every other miss leaves walls and hover untouched.
    """

    def __init__(
        self,
        model: MazeModel,
        hit_tester: HitTester,
        request_redraw: Callable[[], None],
        *,
        clear_hover_outside_grid: bool = True,
    ) -> None:
        self.model = model
        self.hit_tester = hit_tester
        self.request_redraw = request_redraw
        self.clear_hover_outside_grid = clear_hover_outside_grid
        self._enabled = False
        self._hover: Optional[Cell] = None

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def hover(self) -> Optional[Cell]:
        return self._hover

    def set_enabled(self, enabled: bool) -> None:
        if enabled == self._enabled:
            return
        self._enabled = enabled
        self._hover = None
        logger.debug("Wall editing %s", "enabled" if enabled else "disabled")
        self.request_redraw()

    def enable(self) -> None:
        self.set_enabled(True)

    def disable(self) -> None:
        self.set_enabled(False)

    def clear_hover(self) -> None:
        self._hover = None

    def handle(self, event: PointerEvent) -> bool:
        """Apply one pointer event. Returns True when a redraw was requested."""
        if not self._enabled:
            return False
        if event.kind is PointerKind.MOVE:
            return self._on_move(event.point)
        if event.kind is PointerKind.DRAG:
            return self._on_drag(event.point, event.button)
        return self._on_press(event.point)

    def _on_move(self, point: Point) -> bool:
        cell = self.hit_tester.resolve_cell(point)
        if isinstance(cell, HitError):
            if self.clear_hover_outside_grid and self._hover is not None:
                self._hover = None
                self.request_redraw()
                return True
            return False
        self._hover = cell
        self.request_redraw()
        return True

    def _on_drag(self, point: Point, button: Optional[PointerButton]) -> bool:
        hit = self.hit_tester.resolve_wall(point)
        if isinstance(hit, HitError):
            return False
        self._hover = hit.cell
        wall = self.model.get_wall(hit.cell, hit.direction)
        if button is PointerButton.PRIMARY:
            wall.set(True)
        elif button is PointerButton.SECONDARY:
            wall.set(False)
        self.request_redraw()
        return True

    def _on_press(self, point: Point) -> bool:
        hit = self.hit_tester.resolve_wall(point)
        if isinstance(hit, HitError):
            return False
        wall = self.model.get_wall(hit.cell, hit.direction)
        wall.set(not wall.is_set())
        logger.debug("Toggled %s wall of cell %s", hit.direction.name, hit.cell.as_tuple())
        self.request_redraw()
        return True


__all__ = [
    "PointerKind",
    "PointerButton",
    "PointerEvent",
    "pointer_event_from_pygame",
    "EditController",
]
