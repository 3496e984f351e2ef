"""Small drawing helpers shared by the game objects."""

from __future__ import annotations

import pygame

BBOX_COLOR = (255, 255, 255)
TIP_TEXT_COLOR = (255, 175, 45)
TIP_TEXT_POSITION = (10, 10)


def blit_alpha(target: pygame.Surface, x: int, y: int, image: pygame.Surface) -> pygame.Rect:
    """Draw ``image`` at (x, y), blending it over ``target`` by its alpha channel."""
    return target.blit(image, (x, y))


def draw_bbox(target: pygame.Surface, x: int, y: int, width: int, height: int) -> pygame.Rect:
    """Outline the box with its top-left corner at (x, y)."""
    left, top = x, y
    right, bottom = x + width, y + height
    edges = (
        ((left, top), (right, top)),
        ((left, top), (left, bottom)),
        ((left, bottom), (right, bottom)),
        ((right, top), (right, bottom)),
    )
    for start, end in edges:
        pygame.draw.line(target, BBOX_COLOR, start, end)
    return pygame.Rect(left, top, width + 1, height + 1)


def draw_tip_text(target: pygame.Surface, value: int, font) -> pygame.Rect:
    """Write ``value`` as a whole number in the top-left corner of ``target``."""
    text = f"{int(value):d}"
    rendered = font.render(text, True, TIP_TEXT_COLOR)
    return target.blit(rendered, TIP_TEXT_POSITION)