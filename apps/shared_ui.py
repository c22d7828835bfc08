"""Shared UI palette and overlay helpers for the maze editor."""
from __future__ import annotations

from typing import Sequence, Tuple

import pygame

from maze_view.paint import blend_color


def lighten_color(color: Tuple[int, int, int], amount: float = 0.15) -> Tuple[int, int, int]:
    return blend_color(color, (255, 255, 255), amount)


def darken_color(color: Tuple[int, int, int], amount: float = 0.15) -> Tuple[int, int, int]:
    return blend_color(color, (0, 0, 0), amount)


def with_alpha(color: Tuple[int, int, int], alpha: int) -> Tuple[int, int, int, int]:
    return (color[0], color[1], color[2], max(0, min(255, alpha)))


EDITOR_THEME: dict[str, Tuple[int, int, int]] = {
    "bg": (20, 24, 28),
    "viewport_border": (92, 108, 132),
    "text_primary": (230, 234, 240),
    "text_muted": (190, 205, 220),
    "help_bg": (14, 16, 22),
}


def draw_help_overlay(
    surface: pygame.Surface,
    font: pygame.font.Font,
    lines: Sequence[str],
    anchor: Tuple[int, int] = (24, 72),
) -> pygame.Rect:
    """Draw a translucent panel listing ``lines``; returns the panel rect."""
    line_h = font.get_height() + 4
    width = max((font.size(line)[0] for line in lines), default=0) + 24
    rect = pygame.Rect(anchor, (width, line_h * len(lines) + 16))
    panel = pygame.Surface(rect.size, pygame.SRCALPHA)
    panel.fill(with_alpha(EDITOR_THEME["help_bg"], 220))
    pygame.draw.rect(panel, lighten_color(EDITOR_THEME["viewport_border"], 0.1), panel.get_rect(), 1, border_radius=6)
    surface.blit(panel, rect.topleft)
    y = rect.y + 8
    for line in lines:
        color = EDITOR_THEME["text_muted"] if line.startswith(" ") else EDITOR_THEME["text_primary"]
        surface.blit(font.render(line, True, color), (rect.x + 12, y))
        y += line_h
    return rect
