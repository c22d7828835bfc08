"""Small pygame drawing helpers shared by the background and frame renderers."""
from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
import math
from typing import Iterator, Tuple

import pygame

from core.config import ThemeConfig

Color = Tuple[int, int, int]

# Pixels per gradient sample before smooth scaling.
GRADIENT_SAMPLE_STEP = 8


def _clamp_channel(x: float) -> int:
    return max(0, min(255, int(round(x))))


def blend_color(color: Color, target: Color, t: float) -> Color:
    t = max(0.0, min(1.0, t))
    return tuple(_clamp_channel(c + (target[i] - c) * t) for i, c in enumerate(color))  # type: ignore[return-value]


def _as_color(value) -> Color:
    return (_clamp_channel(value[0]), _clamp_channel(value[1]), _clamp_channel(value[2]))


@dataclass(frozen=True)
class MazeTheme:
    canvas: Color
    gradient_start: Color
    gradient_end: Color
    wall_empty: Color
    wall_set: Color
    boundary: Color
    peg: Color
    hover: Color
    hover_alpha: int = 255

    @classmethod
    def from_config(cls, cfg: ThemeConfig) -> "MazeTheme":
        return cls(
            canvas=_as_color(cfg.canvas),
            gradient_start=_as_color(cfg.gradient_start),
            gradient_end=_as_color(cfg.gradient_end),
            wall_empty=_as_color(cfg.wall_empty),
            wall_set=_as_color(cfg.wall_set),
            boundary=_as_color(cfg.boundary),
            peg=_as_color(cfg.peg),
            hover=_as_color(cfg.hover),
            hover_alpha=_clamp_channel(cfg.hover_alpha),
        )


def cyclic_gradient_weight(point: Tuple[float, float], period: Tuple[float, float]) -> float:
    """Blend weight of a diagonal gradient that runs start->end->start.

    ``period`` is the vector from the start colour to the end colour.
    """
    gx, gy = period
    length_sq = gx * gx + gy * gy
    if length_sq <= 0:
        return 0.0
    t = (point[0] * gx + point[1] * gy) / length_sq
    t = math.fmod(abs(t), 2.0)
    return 2.0 - t if t > 1.0 else t


def gradient_surface(size: Tuple[int, int], start: Color, end: Color) -> pygame.Surface:
    """Diagonal cyclic gradient peaking at the centre of ``size``.

    Sampled on a coarse grid then smooth-scaled; the gradient is piecewise
    linear so bilinear filtering reproduces it closely.
    """
    width, height = max(1, int(size[0])), max(1, int(size[1]))
    period = (width / 2.0, height / 2.0)
    cols = max(2, math.ceil(width / GRADIENT_SAMPLE_STEP) + 1)
    rows = max(2, math.ceil(height / GRADIENT_SAMPLE_STEP) + 1)
    samples = pygame.Surface((cols, rows), pygame.SRCALPHA)
    for j in range(rows):
        py = j * height / (rows - 1)
        for i in range(cols):
            px = i * width / (cols - 1)
            color = blend_color(start, end, cyclic_gradient_weight((px, py), period))
            samples.set_at((i, j), (*color, 255))
    return pygame.transform.smoothscale(samples, (width, height))


@contextmanager
def surface_clip(surface: pygame.Surface, rect: pygame.Rect) -> Iterator[pygame.Surface]:
    """Narrow the clip region of ``surface`` and always restore the previous one."""
    previous = surface.get_clip()
    surface.set_clip(previous.clip(rect))
    try:
        yield surface
    finally:
        surface.set_clip(previous)


__all__ = [
    "MazeTheme",
    "blend_color",
    "cyclic_gradient_weight",
    "gradient_surface",
    "surface_clip",
]
