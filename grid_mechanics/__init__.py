"""Pure grid geometry for the maze view: cells, walls, pegs and poses."""

from .cells import Cell, CornerLocation, GridSize, WallDirection
from .geometry import GridGeometry, HitError, PixelRect, SizingParameters, WallHit
from .hit_test import HitTester
from .pose import PoseHolder, RobotPose

__all__ = [
    "Cell",
    "CornerLocation",
    "GridSize",
    "WallDirection",
    "GridGeometry",
    "HitError",
    "PixelRect",
    "SizingParameters",
    "WallHit",
    "HitTester",
    "PoseHolder",
    "RobotPose",
]
