"""Wall editing state machine and pygame pointer translation."""
from __future__ import annotations

import os
import sys
from pathlib import Path

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

BASE = Path(__file__).resolve().parents[1]
if str(BASE) not in sys.path:
    sys.path.insert(0, str(BASE))

import pygame  # noqa: E402

from core.maze_model import GridMaze  # noqa: E402
from grid_mechanics import Cell, GridGeometry, GridSize, HitTester, SizingParameters, WallDirection  # noqa: E402
from maze_view.editing import (  # noqa: E402
    EditController,
    PointerButton,
    PointerEvent,
    PointerKind,
    pointer_event_from_pygame,
)

GRID = GridSize(4, 3)
SHARED_WALL = (150, 100)  # north wall of (2, 2)


class RedrawCounter:
    def __init__(self) -> None:
        self.calls = 0

    def __call__(self) -> None:
        self.calls += 1


def _controller(**kwargs):
    maze = GridMaze(GRID)
    tester = HitTester(GridGeometry(GRID, SizingParameters.from_viewport((400, 300), GRID)))
    redraws = RedrawCounter()
    return EditController(maze, tester, redraws, **kwargs), maze, redraws


def _north_of_center(maze: GridMaze) -> bool:
    return maze.get_wall(Cell(2, 2), WallDirection.NORTH).is_set()


def test_disabled_controller_ignores_everything() -> None:
    ctrl, maze, redraws = _controller()
    assert not ctrl.handle(PointerEvent.press(SHARED_WALL))
    assert not ctrl.handle(PointerEvent.drag(SHARED_WALL))
    assert not ctrl.handle(PointerEvent.move((10, 10)))
    assert not _north_of_center(maze)
    assert ctrl.hover is None
    assert redraws.calls == 0


def test_press_toggles_wall_under_pointer() -> None:
    ctrl, maze, redraws = _controller()
    ctrl.enable()
    assert ctrl.handle(PointerEvent.press(SHARED_WALL))
    assert _north_of_center(maze)
    assert maze.get_wall(Cell(2, 1), WallDirection.SOUTH).is_set()
    assert ctrl.handle(PointerEvent.press(SHARED_WALL))
    assert not _north_of_center(maze)
    # enable + two presses
    assert redraws.calls == 3


def test_drag_sets_with_primary_and_clears_with_secondary() -> None:
    ctrl, maze, _ = _controller()
    ctrl.enable()
    assert ctrl.handle(PointerEvent.drag(SHARED_WALL, PointerButton.PRIMARY))
    assert _north_of_center(maze)
    assert ctrl.hover == Cell(2, 2)
    # Dragging again with the primary button keeps the wall set.
    ctrl.handle(PointerEvent.drag(SHARED_WALL, PointerButton.PRIMARY))
    assert _north_of_center(maze)
    assert ctrl.handle(PointerEvent.drag(SHARED_WALL, PointerButton.SECONDARY))
    assert not _north_of_center(maze)


def test_drag_over_cell_interior_keeps_previous_hover() -> None:
    ctrl, maze, _ = _controller()
    ctrl.enable()
    ctrl.handle(PointerEvent.drag(SHARED_WALL))
    assert not ctrl.handle(PointerEvent.drag((250, 150)))
    assert ctrl.hover == Cell(2, 2)
    assert maze.wall_count() == 1


def test_move_tracks_hover_and_clears_outside_grid() -> None:
    ctrl, _, _ = _controller()
    ctrl.enable()
    assert ctrl.handle(PointerEvent.move((250, 150)))
    assert ctrl.hover == Cell(3, 2)
    assert ctrl.handle(PointerEvent.move((450, 10)))
    assert ctrl.hover is None
    # Nothing left to clear.
    assert not ctrl.handle(PointerEvent.move((450, 10)))


def test_move_outside_grid_can_keep_hover() -> None:
    ctrl, _, _ = _controller(clear_hover_outside_grid=False)
    ctrl.enable()
    ctrl.handle(PointerEvent.move((250, 150)))
    assert not ctrl.handle(PointerEvent.move((450, 10)))
    assert ctrl.hover == Cell(3, 2)


def test_disable_clears_hover_and_stops_edits() -> None:
    ctrl, maze, redraws = _controller()
    ctrl.enable()
    ctrl.handle(PointerEvent.drag(SHARED_WALL))
    ctrl.disable()
    assert not ctrl.enabled
    assert ctrl.hover is None
    calls = redraws.calls
    assert not ctrl.handle(PointerEvent.drag(SHARED_WALL, PointerButton.SECONDARY))
    assert not ctrl.handle(PointerEvent.move((50, 50)))
    assert _north_of_center(maze)
    assert redraws.calls == calls


def test_set_enabled_to_same_state_is_a_no_op() -> None:
    ctrl, _, redraws = _controller()
    ctrl.set_enabled(False)
    assert redraws.calls == 0
    ctrl.set_enabled(True)
    ctrl.set_enabled(True)
    assert redraws.calls == 1


def test_boundary_press_leaves_wall_set() -> None:
    ctrl, maze, _ = _controller()
    ctrl.enable()
    assert ctrl.handle(PointerEvent.press((5, 150)))
    assert maze.get_wall(Cell(1, 2), WallDirection.WEST).is_set()
    assert maze.wall_count() == 0


def test_presses_on_pegs_and_outside_are_ignored() -> None:
    ctrl, maze, _ = _controller()
    ctrl.enable()
    assert not ctrl.handle(PointerEvent.press((100, 100)))
    assert not ctrl.handle(PointerEvent.press((500, 500)))
    assert maze.wall_count() == 0


def test_pygame_motion_translation() -> None:
    moved = pointer_event_from_pygame(
        pygame.event.Event(pygame.MOUSEMOTION, pos=(120, 90), rel=(1, 1), buttons=(0, 0, 0)), origin=(20, 10)
    )
    assert moved == PointerEvent(PointerKind.MOVE, (100, 80))

    dragged = pointer_event_from_pygame(
        pygame.event.Event(pygame.MOUSEMOTION, pos=(120, 90), rel=(1, 1), buttons=(1, 0, 0)), origin=(20, 10)
    )
    assert dragged == PointerEvent.drag((100, 80), PointerButton.PRIMARY)

    erased = pointer_event_from_pygame(
        pygame.event.Event(pygame.MOUSEMOTION, pos=(120, 90), rel=(1, 1), buttons=(0, 0, 1))
    )
    assert erased == PointerEvent.drag((120, 90), PointerButton.SECONDARY)


def test_pygame_button_translation() -> None:
    pressed = pointer_event_from_pygame(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(30, 40), button=3))
    assert pressed == PointerEvent.press((30, 40), PointerButton.SECONDARY)
    wheel = pointer_event_from_pygame(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(30, 40), button=4))
    assert wheel is None
    key = pointer_event_from_pygame(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_e))
    assert key is None
