"""Background producer that drives the robot overlay around the maze."""
from __future__ import annotations

import logging
import math
import threading
from typing import List, Optional

from grid_mechanics.cells import Cell, GridSize
from grid_mechanics.pose import RobotPose
from maze_view.view import MazeView

logger = logging.getLogger(__name__)


def perimeter_route(size: GridSize) -> List[Cell]:
    """Cells of the outer ring, clockwise from the top-left corner."""
    route = [Cell(x, 1) for x in range(1, size.width + 1)]
    route += [Cell(size.width, y) for y in range(2, size.height + 1)]
    if size.height > 1:
        route += [Cell(x, size.height) for x in range(size.width - 1, 0, -1)]
    if size.width > 1:
        route += [Cell(1, y) for y in range(size.height - 1, 1, -1)]
    return route


class DemoPoseFeed:
    """Moves the robot between cell centres at a fixed speed (cells/second).

    `advance` is the step used by the thread loop; it reads geometry on
    every call so the tour follows viewport resizes. `advance` and `reset`
    hold the same lock, so a reset from the UI thread never lands mid-step.
    """

    def __init__(self, view: MazeView, *, cells_per_second: float = 2.0, rate_hz: float = 60.0) -> None:
        self.view = view
        self.cells_per_second = cells_per_second
        self.rate_hz = rate_hz
        self.paused = False
        self._route = perimeter_route(view.model.get_grid_size())
        self._leg = 0
        self._progress = 0.0
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def reset(self) -> None:
        route = perimeter_route(self.view.model.get_grid_size())
        with self._lock:
            self._route = route
            self._leg = 0
            self._progress = 0.0

    def advance(self, dt: float) -> RobotPose:
        with self._lock:
            if len(self._route) < 2:
                x, y = self.view.cell_center(self._route[0])
                return self.view.set_pose((x, y), 0.0)
            self._progress += dt * self.cells_per_second
            while self._progress >= 1.0:
                self._progress -= 1.0
                self._leg = (self._leg + 1) % len(self._route)
            start = self.view.cell_center(self._route[self._leg])
            end = self.view.cell_center(self._route[(self._leg + 1) % len(self._route)])
            x = start[0] + (end[0] - start[0]) * self._progress
            y = start[1] + (end[1] - start[1]) * self._progress
            heading = math.atan2(end[1] - start[1], end[0] - start[0])
            return self.view.set_pose((round(x), round(y)), heading)

    def start(self) -> None:
        if self._thread and self._thread.is_alive():
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="demo-pose-feed", daemon=True)
        self._thread.start()
        logger.debug("Demo pose feed started")

    def stop(self, timeout: float = 1.0) -> None:
        self._stop.set()
        if self._thread:
            self._thread.join(timeout)
            self._thread = None

    def _run(self) -> None:
        dt = 1.0 / self.rate_hz
        while not self._stop.wait(dt):
            if not self.paused:
                self.advance(dt)


__all__ = ["DemoPoseFeed", "perimeter_route"]
