"""The player-controlled character."""

from __future__ import annotations

import math

import pygame

from survivor.animation import Animation
from survivor.atlas import Atlas, ProcessType
from survivor.drawing import blit_alpha

WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720

SHADOW_IMAGE_PATH = "assets/imgs/shadow_player.png"
FRAME_PATTERN = "assets/imgs/Demon/Demon_IDLE_Left_%d.png"

_SHADOW_OFFSET = 16


class Player:
    """A character steered with the arrow keys that flashes white when hurt."""

    SPEED = 13
    FRAME_WIDTH = 81
    FRAME_HEIGHT = 71
    SHADOW_WIDTH = 32
    FRAME_NUM = 4
    HURT_FLICK = 15
    ANIMATION_INTERVAL_MS = 45

    def __init__(self, frames: Atlas | None = None, shadow: pygame.Surface | None = None):
        """Build the player from left-facing ``frames`` and a ``shadow`` image.

        Missing images are loaded from the game's asset directory.
        """
        if frames is None:
            frames = Atlas.load(FRAME_PATTERN, self.FRAME_NUM)
        if shadow is None:
            shadow = pygame.image.load(SHADOW_IMAGE_PATH)
        self.shadow = shadow

        atlas_left = frames
        atlas_right = Atlas.derive(atlas_left, ProcessType.FLIP)
        atlas_left_white = Atlas.derive(atlas_left, ProcessType.WHITE)
        atlas_right_white = Atlas.derive(atlas_right, ProcessType.WHITE)

        interval = self.ANIMATION_INTERVAL_MS
        # Keyed by "facing left": (normal animation, white animation).
        self._animations = {
            True: (Animation(atlas_left, interval), Animation(atlas_left_white, interval)),
            False: (Animation(atlas_right, interval), Animation(atlas_right_white, interval)),
        }
        self._countdowns = {True: self.HURT_FLICK, False: self.HURT_FLICK}

        self.x = WINDOW_WIDTH // 2 - self.FRAME_WIDTH // 2
        self.y = WINDOW_HEIGHT // 2 - self.FRAME_HEIGHT // 2
        self.hurt = False
        self.facing_left = True
        self.moving_up = False
        self.moving_down = False
        self.moving_left = False
        self.moving_right = False

    @property
    def position(self) -> tuple[int, int]:
        """Top-left corner of the player's frame."""
        return (self.x, self.y)

    def bbox(self) -> tuple[int, int]:
        """Width and height of the player's frame."""
        return (self.FRAME_WIDTH, self.FRAME_HEIGHT)

    def process_event(self, event) -> None:
        """Track which arrow keys are held."""
        if event.type == pygame.KEYDOWN:
            pressed = True
        elif event.type == pygame.KEYUP:
            pressed = False
        else:
            return
        if event.key == pygame.K_UP:
            self.moving_up = pressed
        elif event.key == pygame.K_DOWN:
            self.moving_down = pressed
        elif event.key == pygame.K_LEFT:
            self.moving_left = pressed
        elif event.key == pygame.K_RIGHT:
            self.moving_right = pressed

    def _horizontal_direction(self) -> int:
        return int(self.moving_right) - int(self.moving_left)

    def move(self) -> None:
        """Step one frame in the held direction and stay inside the window."""
        dir_x = self._horizontal_direction()
        dir_y = int(self.moving_down) - int(self.moving_up)
        length = math.hypot(dir_x, dir_y)
        if length:
            self.x += int(self.SPEED * dir_x / length)
            self.y += int(self.SPEED * dir_y / length)

        self.x = max(self.x, 0)
        self.y = max(self.y, 0)
        if self.x + self.FRAME_WIDTH > WINDOW_WIDTH:
            self.x = WINDOW_WIDTH - self.FRAME_WIDTH
        if self.y + self.FRAME_HEIGHT > WINDOW_HEIGHT:
            self.y = WINDOW_HEIGHT - self.FRAME_HEIGHT

    def draw(self, target: pygame.Surface, delta: int) -> None:
        """Draw the shadow and the current frame, flickering while hurt."""
        dir_x = self._horizontal_direction()
        if dir_x < 0:
            self.facing_left = True
        elif dir_x > 0:
            self.facing_left = False

        facing_left = self.facing_left
        if facing_left:
            shadow_x = self.x + _SHADOW_OFFSET
        else:
            shadow_x = self.x + (self.FRAME_WIDTH - self.SHADOW_WIDTH) - _SHADOW_OFFSET
        blit_alpha(target, shadow_x, self.y + self.FRAME_HEIGHT, self.shadow)

        normal, white = self._animations[facing_left]
        if self.hurt:
            countdown = self._countdowns[facing_left]
            if countdown:
                chosen = white if countdown % 2 else normal
                chosen.play(target, self.x, self.y, delta)
            countdown -= 1
            if countdown == 0:
                countdown = self.HURT_FLICK
                self.hurt = False
            self._countdowns[facing_left] = countdown
        if not self.hurt:
            normal.play(target, self.x, self.y, delta)