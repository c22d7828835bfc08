"""Maze editor window: pygame + pygame_gui host for `MazeView`."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple

import pygame
import pygame_gui

from core import GridMaze, ViewConfig, save_maze
from maze_view import MazeView

from .help_content import help_lines
from .pose_feed import DemoPoseFeed
from .shared_ui import EDITOR_THEME, darken_color, draw_help_overlay

logger = logging.getLogger(__name__)

TOOLBAR_HEIGHT = 48
STATUS_HEIGHT = 28
MARGIN = 16
DEFAULT_MAZE_PATH = Path("mazes") / "maze.json"


def viewport_for_window(window_size: Tuple[int, int]) -> pygame.Rect:
    """Area of the window given to the maze, leaving room for toolbar and status."""
    width = max(1, window_size[0] - 2 * MARGIN)
    height = max(1, window_size[1] - TOOLBAR_HEIGHT - STATUS_HEIGHT - 2 * MARGIN)
    return pygame.Rect(MARGIN, TOOLBAR_HEIGHT + MARGIN, width, height)


class MazeEditorApp:
    def __init__(self, maze: GridMaze, config: Optional[ViewConfig] = None, maze_path: Optional[Path] = None) -> None:
        pygame.init()
        pygame.display.set_caption("Maze Editor")
        self.config = config or ViewConfig()
        self.window_size: Tuple[int, int] = tuple(self.config.window_size)  # type: ignore[assignment]
        self.window_surface = pygame.display.set_mode(self.window_size, pygame.RESIZABLE)
        self.manager = pygame_gui.UIManager(self.window_size)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(pygame.font.get_default_font(), 14)
        self.running = True
        self.show_help = False
        self.maze = maze
        self.maze_path = maze_path or DEFAULT_MAZE_PATH

        self.view = MazeView(maze, self.config)
        self.feed = DemoPoseFeed(self.view)
        self._build_ui()
        self._apply_layout()

    def _build_ui(self) -> None:
        self.btn_edit = pygame_gui.elements.UIButton(
            relative_rect=pygame.Rect((MARGIN, 10), (130, 30)), text="Edit walls", manager=self.manager
        )
        self.btn_save = pygame_gui.elements.UIButton(
            relative_rect=pygame.Rect((MARGIN + 140, 10), (100, 30)), text="Save", manager=self.manager
        )
        self.btn_help = pygame_gui.elements.UIButton(
            relative_rect=pygame.Rect((MARGIN + 250, 10), (80, 30)), text="Help", manager=self.manager
        )
        self.status_label = pygame_gui.elements.UILabel(
            relative_rect=pygame.Rect((MARGIN, self.window_size[1] - STATUS_HEIGHT), (self.window_size[0] - 2 * MARGIN, 24)),
            text=" ",
            manager=self.manager,
        )
        self._set_status(f"{self.maze.grid_size.width}x{self.maze.grid_size.height} maze - press H for help")

    def _apply_layout(self) -> None:
        self.viewport_rect = viewport_for_window(self.window_size)
        self._maze_canvas = pygame.Surface(self.viewport_rect.size)
        self.status_label.set_relative_position((MARGIN, self.window_size[1] - STATUS_HEIGHT))
        self.status_label.set_dimensions((self.window_size[0] - 2 * MARGIN, 24))
        self.view.on_resize(self.viewport_rect.size)

    def _set_status(self, text: str) -> None:
        self.status_label.set_text(text)

    def _toggle_edit(self) -> None:
        self.view.set_editable(not self.view.editable)
        self.btn_edit.set_text("Done editing" if self.view.editable else "Edit walls")
        self._set_status("Editing walls" if self.view.editable else "Viewing")

    def _save(self) -> None:
        try:
            save_maze(self.maze_path, self.maze)
        except OSError as exc:
            logger.error("Failed to save maze to %s: %s", self.maze_path, exc)
            self._set_status(f"Save failed: {exc}")
            return
        self._set_status(f"Saved {self.maze.wall_count()} walls to {self.maze_path}")

    def _clear_walls(self) -> None:
        self.maze.clear()
        self.view.request_redraw()
        self._set_status("Cleared interior walls")

    def _toggle_feed(self) -> None:
        self.feed.paused = not self.feed.paused
        self._set_status("Robot paused" if self.feed.paused else "Robot touring")

    def run(self) -> None:
        self.feed.start()
        try:
            while self.running:
                dt = self.clock.tick(60) / 1000.0
                for event in pygame.event.get():
                    self._handle_event(event)
                self.manager.update(dt)
                self._draw()
        finally:
            self.feed.stop()
            pygame.quit()

    def _handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
            return
        if event.type == pygame.VIDEORESIZE:
            self.window_size = (event.w, event.h)
            self.window_surface = pygame.display.set_mode(self.window_size, pygame.RESIZABLE)
            self.manager.set_window_resolution(self.window_size)
            self._apply_layout()
        if event.type == pygame.KEYDOWN:
            self._handle_key(event.key)
        if event.type == pygame_gui.UI_BUTTON_PRESSED:
            if event.ui_element == self.btn_edit:
                self._toggle_edit()
            elif event.ui_element == self.btn_save:
                self._save()
            elif event.ui_element == self.btn_help:
                self.show_help = not self.show_help
        consumed = self.manager.process_events(event)
        if not consumed:
            self.view.handle_pygame_event(event, self.viewport_rect.topleft)

    def _handle_key(self, key: int) -> None:
        if key == pygame.K_ESCAPE:
            self.running = False
        elif key == pygame.K_e:
            self._toggle_edit()
        elif key == pygame.K_s:
            self._save()
        elif key == pygame.K_c:
            self._clear_walls()
        elif key == pygame.K_p:
            self._toggle_feed()
        elif key == pygame.K_r:
            self.feed.reset()
            self._set_status("Robot tour restarted")
        elif key == pygame.K_h:
            self.show_help = not self.show_help

    def _draw(self) -> None:
        self.window_surface.fill(EDITOR_THEME["bg"])
        if self.view.consume_redraw():
            self.view.render(self._maze_canvas)
        self.window_surface.blit(self._maze_canvas, self.viewport_rect.topleft)
        border = EDITOR_THEME["viewport_border"]
        if not self.view.editable:
            border = darken_color(border, 0.35)
        pygame.draw.rect(self.window_surface, border, self.viewport_rect.inflate(2, 2), 1)
        if self.show_help:
            draw_help_overlay(self.window_surface, self.font, help_lines())
        self.manager.draw_ui(self.window_surface)
        pygame.display.update()


__all__ = ["MazeEditorApp", "viewport_for_window"]
