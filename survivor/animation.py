"""Frame-by-frame playback of an atlas."""

from __future__ import annotations

import pygame

from survivor.atlas import Atlas
from survivor.drawing import blit_alpha


class Animation:
    """Cycles through the frames of an atlas, one step per elapsed interval."""

    def __init__(self, atlas: Atlas, interval_ms: int):
        if len(atlas) == 0:
            raise ValueError("an animation needs at least one frame")
        self.atlas = atlas
        self.interval_ms = interval_ms
        self.timer = 0
        self.frame_index = 0

    def advance(self, delta: int) -> pygame.Surface:
        """Add ``delta`` milliseconds and return the frame to show."""
        self.timer += delta
        if self.timer >= self.interval_ms:
            self.frame_index = (self.frame_index + 1) % len(self.atlas)
            self.timer = 0
        return self.atlas[self.frame_index]

    def play(self, target: pygame.Surface, x: int, y: int, delta: int) -> pygame.Rect:
        """Advance by ``delta`` and draw the current frame at (x, y)."""
        return blit_alpha(target, x, y, self.advance(delta))