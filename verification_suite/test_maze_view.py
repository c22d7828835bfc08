"""End-to-end frames from MazeView: walls, hover, robot overlay and resizing."""
from __future__ import annotations

import os
import sys
import threading
from pathlib import Path

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

BASE = Path(__file__).resolve().parents[1]
if str(BASE) not in sys.path:
    sys.path.insert(0, str(BASE))

import pygame  # noqa: E402

from core.config import EditorConfig, ViewConfig  # noqa: E402
from core.maze_model import GridMaze  # noqa: E402
from grid_mechanics import Cell, GridSize, WallDirection  # noqa: E402
from maze_view import MazeView, PointerEvent  # noqa: E402

VIEWPORT = (400, 300)


def _view(**kwargs) -> MazeView:
    view = MazeView(GridMaze(GridSize(4, 3)), **kwargs)
    view.on_resize(VIEWPORT)
    return view


def _frame(view: MazeView) -> pygame.Surface:
    target = pygame.Surface(VIEWPORT)
    view.render(target)
    return target


def _rgb(surface: pygame.Surface, point) -> tuple:
    return tuple(surface.get_at(point))[:3]


def test_set_and_unset_walls_are_painted() -> None:
    view = _view()
    view.model.get_wall(Cell(2, 2), WallDirection.NORTH).set(True)
    frame = _frame(view)
    assert _rgb(frame, (150, 100)) == view.theme.wall_set
    assert _rgb(frame, (250, 100)) == view.theme.wall_empty
    assert _rgb(frame, (5, 150)) == view.theme.boundary


def test_hover_cell_is_highlighted_while_editing() -> None:
    view = _view()
    view.set_editable(True)
    view.on_pointer_event(PointerEvent.move((50, 50)))
    assert view.hover == Cell(1, 1)
    frame = _frame(view)
    assert _rgb(frame, (50, 50)) == view.theme.hover
    assert _rgb(frame, (250, 150)) != view.theme.hover


def test_robot_is_drawn_at_pose_and_hidden_while_editing() -> None:
    view = _view()
    background = view.background.get_background()
    view.set_pose((250, 150), 0.0)
    frame = _frame(view)
    assert _rgb(frame, (250, 150)) != _rgb(background, (250, 150))

    view.set_editable(True)
    frame = _frame(view)
    assert _rgb(frame, (250, 150)) == _rgb(background, (250, 150))


def test_clear_pose_removes_robot() -> None:
    view = _view()
    background = view.background.get_background()
    view.set_pose((250, 150), 1.0)
    view.clear_pose()
    assert view.pose is None
    assert _rgb(_frame(view), (250, 150)) == _rgb(background, (250, 150))


def test_render_restores_clip_region() -> None:
    view = _view()
    view.set_pose((395, 295), 0.3)
    target = pygame.Surface((500, 400))
    view.render(target)
    assert target.get_clip() == target.get_rect()


def test_pose_snapshots_are_never_torn() -> None:
    view = _view()
    stop = threading.Event()

    def writer() -> None:
        i = 0
        while not stop.is_set():
            i = (i + 1) % 10000
            view.set_pose((i, i), float(i))

    thread = threading.Thread(target=writer, daemon=True)
    thread.start()
    try:
        for _ in range(5000):
            pose = view.pose
            if pose is not None:
                assert pose.x == pose.y == int(pose.rotation)
    finally:
        stop.set()
        thread.join(1.0)


def test_resize_rebuilds_background_once() -> None:
    view = _view()
    _frame(view)
    _frame(view)
    assert view.background.rebuilds == 1
    view.on_resize((800, 600))
    assert view.background.dirty
    assert view.hit_tester.geometry is view.geometry
    view.render(pygame.Surface((800, 600)))
    assert view.background.rebuilds == 2
    assert view.background.get_background().get_size() == (800, 600)


def test_set_model_resizes_for_new_grid() -> None:
    view = _view()
    view.set_editable(True)
    view.on_pointer_event(PointerEvent.move((50, 50)))
    view.set_model(GridMaze(GridSize(8, 6)))
    sizing = view.geometry.sizing
    assert (sizing.cell_width, sizing.cell_height, sizing.wall_width, sizing.wall_height) == (50, 50, 12, 12)
    assert view.hover is None
    assert view.cell_center(Cell(8, 6)) == (375, 275)


def test_redraw_requests_reach_the_host() -> None:
    calls = []
    view = MazeView(GridMaze(GridSize(4, 3)), on_redraw=lambda: calls.append(1))
    view.on_resize(VIEWPORT)
    assert view.consume_redraw()
    assert not view.needs_redraw
    before = len(calls)
    view.set_pose((10, 10), 0.0)
    assert len(calls) == before + 1
    assert view.consume_redraw()
    # Rendering does not reset the flag by itself.
    view.set_pose((20, 20), 0.0)
    _frame(view)
    assert view.needs_redraw


def test_start_editable_from_config() -> None:
    view = _view(config=ViewConfig(editor=EditorConfig(start_editable=True)))
    assert view.editable
    view.set_editable(False)
    assert not view.editable


def test_pygame_click_edits_through_view() -> None:
    view = _view()
    view.set_editable(True)
    event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(166, 124), button=1)
    assert view.handle_pygame_event(event, origin=(16, 24))
    assert view.model.get_wall(Cell(2, 2), WallDirection.NORTH).is_set()
    assert not view.handle_pygame_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a))
