"""Menu buttons that react to the mouse."""

from __future__ import annotations

import abc
import enum
import os

import pygame

LEFT_MOUSE_BUTTON = 1


class ButtonStatus(enum.Enum):
    IDLE = 0
    HOVERED = 1
    PUSHED = 2


def _as_image(image) -> pygame.Surface:
    if isinstance(image, pygame.Surface):
        return image
    return pygame.image.load(os.fspath(image))


class Button(abc.ABC):
    """A rectangular button drawn with one image per status."""

    def __init__(self, region, idle, hovered, pushed):
        self.region = pygame.Rect(region)
        self.images = {
            ButtonStatus.IDLE: _as_image(idle),
            ButtonStatus.HOVERED: _as_image(hovered),
            ButtonStatus.PUSHED: _as_image(pushed),
        }
        self.status = ButtonStatus.IDLE

    def hit(self, x: int, y: int) -> bool:
        """Whether (x, y) lies in the region, its right and bottom edges included."""
        region = self.region
        return region.left <= x <= region.right and region.top <= y <= region.bottom

    def draw(self, target: pygame.Surface) -> pygame.Rect:
        return target.blit(self.images[self.status], self.region.topleft)

    def process_event(self, event) -> None:
        """Update the status from a mouse event and fire ``on_click`` on release."""
        if event.type == pygame.MOUSEMOTION:
            inside = self.hit(*event.pos)
            if self.status is ButtonStatus.IDLE and inside:
                self.status = ButtonStatus.HOVERED
            elif self.status is ButtonStatus.HOVERED and not inside:
                self.status = ButtonStatus.IDLE
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == LEFT_MOUSE_BUTTON:
            if self.hit(*event.pos):
                self.status = ButtonStatus.PUSHED
        elif event.type == pygame.MOUSEBUTTONUP and event.button == LEFT_MOUSE_BUTTON:
            if self.status is ButtonStatus.PUSHED:
                self.on_click()

    @abc.abstractmethod
    def on_click(self) -> None:
        """Called when the button is released after being pushed."""


class StartButton(Button):
    def __init__(self, region, idle, hovered, pushed):
        super().__init__(region, idle, hovered, pushed)
        self.clicked = False

    def on_click(self) -> None:
        self.clicked = True


class QuitButton(Button):
    def __init__(self, region, idle, hovered, pushed):
        super().__init__(region, idle, hovered, pushed)
        self.clicked = False

    def on_click(self) -> None:
        self.clicked = True