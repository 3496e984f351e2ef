"""Collections of animation frames, loaded from files or derived from another atlas."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator

import pygame

_WHITE = (255, 255, 255, 255)
_CLEAR = (0, 0, 0, 0)


class ProcessType(enum.Enum):
    """How a derived atlas is produced from its source."""

    FLIP = 0
    WHITE = 1


class Atlas:
    """An ordered list of frame images."""

    def __init__(self, frames: Iterable[pygame.Surface] = ()):
        self.frames: list[pygame.Surface] = list(frames)

    @classmethod
    def load(cls, pattern: str, count: int) -> "Atlas":
        """Load ``count`` frames from files named by ``pattern % n`` for n from 1."""
        if count < 0:
            raise ValueError("frame count must not be negative")
        return cls(pygame.image.load(pattern % number) for number in range(1, count + 1))

    @classmethod
    def derive(cls, source: "Atlas", process_type: ProcessType) -> "Atlas":
        """Build a new atlas by mirroring or whitening every frame of ``source``."""
        if not source.frames:
            raise ValueError("cannot derive from an empty atlas")
        if process_type is ProcessType.FLIP:
            return cls(pygame.transform.flip(frame, True, False) for frame in source)
        if process_type is ProcessType.WHITE:
            return cls(_silhouette(frame) for frame in source)
        raise ValueError(f"unknown process type: {process_type!r}")

    def __len__(self) -> int:
        return len(self.frames)

    def __getitem__(self, index: int) -> pygame.Surface:
        return self.frames[index]

    def __iter__(self) -> Iterator[pygame.Surface]:
        return iter(self.frames)


def _silhouette(frame: pygame.Surface) -> pygame.Surface:
    """Opaque white wherever ``frame`` has any alpha, transparent elsewhere."""
    mask = pygame.mask.from_surface(frame, 0)
    return mask.to_surface(setcolor=_WHITE, unsetcolor=_CLEAR)