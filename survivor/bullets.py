"""Bullets that orbit the player."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

import pygame

PI = 3.1415926
RADIAL_SPEED = 0.0045
TANGENT_SPEED = 0.0055
BASE_RADIUS = 100
RADIUS_SWING = 25


@dataclass
class Bullet:
    """A round bullet with its centre at (x, y)."""

    x: int = 0
    y: int = 0

    RADIUS = 10
    OUTLINE_COLOR = (255, 155, 50)
    FILL_COLOR = (200, 75, 10)

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    def draw(self, target: pygame.Surface) -> pygame.Rect:
        """Draw a filled, outlined circle at the bullet's position."""
        pygame.draw.circle(target, self.FILL_COLOR, self.position, self.RADIUS)
        return pygame.draw.circle(target, self.OUTLINE_COLOR, self.position, self.RADIUS, 1)


def update_bullets(
    bullets: Sequence[Bullet],
    player_position: tuple[int, int],
    player_bbox: tuple[int, int],
    tick_ms: int,
) -> None:
    """Place the bullets evenly on a pulsing ring around the player's centre."""
    if not bullets:
        return
    spacing = 2 * PI / len(bullets)
    radius = BASE_RADIUS + RADIUS_SWING * math.sin(tick_ms * RADIAL_SPEED)
    centre_x = player_position[0] + player_bbox[0] // 2
    centre_y = player_position[1] + player_bbox[1] // 2
    base_angle = tick_ms * TANGENT_SPEED
    for index, bullet in enumerate(bullets):
        angle = base_angle + spacing * index
        bullet.x = centre_x + int(radius * math.sin(angle))
        bullet.y = centre_y + int(radius * math.cos(angle))