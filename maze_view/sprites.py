"""Robot sprite creation. Sprites face up: the top edge is the robot's front."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import pygame

logger = logging.getLogger(__name__)

BODY_COLOR = (150, 150, 160)
EAR_COLOR = (235, 170, 180)
EYE_COLOR = (20, 20, 20)
TAIL_COLOR = (110, 110, 120)


def default_robot_sprite(size: int = 32) -> pygame.Surface:
    """Procedural top-down mouse, nose pointing to the top edge."""
    size = max(8, int(size))
    sprite = pygame.Surface((size, size), pygame.SRCALPHA)
    unit = size / 16.0
    body = pygame.Rect(0, 0, int(8 * unit), int(12 * unit))
    body.center = (size // 2, int(8.5 * unit))
    pygame.draw.line(sprite, TAIL_COLOR, (size // 2, body.bottom - 1), (size // 2, size - 1), max(1, int(unit)))
    pygame.draw.ellipse(sprite, BODY_COLOR, body)
    nose = [(size // 2, int(1 * unit)), (int(5 * unit), int(6 * unit)), (int(11 * unit), int(6 * unit))]
    pygame.draw.polygon(sprite, BODY_COLOR, nose)
    ear_radius = max(1, int(2 * unit))
    pygame.draw.circle(sprite, EAR_COLOR, (int(4.5 * unit), int(5 * unit)), ear_radius)
    pygame.draw.circle(sprite, EAR_COLOR, (int(11.5 * unit), int(5 * unit)), ear_radius)
    eye_radius = max(1, int(0.8 * unit))
    pygame.draw.circle(sprite, EYE_COLOR, (int(6.8 * unit), int(4.2 * unit)), eye_radius)
    pygame.draw.circle(sprite, EYE_COLOR, (int(9.2 * unit), int(4.2 * unit)), eye_radius)
    return sprite


def load_robot_sprite(path: Optional[Path], size: int = 32) -> pygame.Surface:
    """Load an image sprite scaled to ``size``; fall back to the built-in one."""
    if path is None:
        return default_robot_sprite(size)
    try:
        image = pygame.image.load(str(path))
    except (FileNotFoundError, pygame.error) as exc:
        logger.warning("Could not load robot sprite %s (%s); using built-in sprite", path, exc)
        return default_robot_sprite(size)
    if size > 0 and image.get_size() != (size, size):
        image = pygame.transform.scale(image, (size, size))
    return image


__all__ = ["default_robot_sprite", "load_robot_sprite"]
