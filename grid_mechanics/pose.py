"""Robot overlay pose in view pixels, published as immutable snapshots."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class RobotPose:
    """Pixel position plus rotation (radians, 0 = facing +x)."""

    x: int
    y: int
    rotation: float = 0.0

    @property
    def position(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def as_tuple(self) -> Tuple[int, int, float]:
        return (self.x, self.y, self.rotation)


class PoseHolder:
    """Latest pose written by a producer thread and read by the renderer.

    Position and rotation travel together in one frozen object and the holder
    swaps a single reference, so readers never see a mix of two updates.
    """

    def __init__(self) -> None:
        self._pose: Optional[RobotPose] = None

    def publish(self, position: Tuple[int, int], rotation: float) -> RobotPose:
        pose = RobotPose(int(position[0]), int(position[1]), float(rotation))
        self._pose = pose
        return pose

    def snapshot(self) -> Optional[RobotPose]:
        return self._pose

    def clear(self) -> None:
        self._pose = None


__all__ = ["RobotPose", "PoseHolder"]
