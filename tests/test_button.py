import pygame
import pytest

from survivor.button import Button, ButtonStatus, QuitButton, StartButton

IDLE = (10, 10, 10, 255)
HOVERED = (20, 20, 20, 255)
PUSHED = (30, 30, 30, 255)
REGION = (544, 430, 192, 75)


def _image(color):
    surface = pygame.Surface((4, 4), pygame.SRCALPHA)
    surface.fill(color)
    return surface


def _images():
    return _image(IDLE), _image(HOVERED), _image(PUSHED)


def _move(x, y):
    return pygame.event.Event(pygame.MOUSEMOTION, pos=(x, y))


def _down(x, y, button=1):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(x, y), button=button)


def _up(x, y, button=1):
    return pygame.event.Event(pygame.MOUSEBUTTONUP, pos=(x, y), button=button)


def test_hit_includes_edges():
    button = StartButton(REGION, *_images())
    assert button.hit(544, 430)
    assert button.hit(736, 505)
    assert not button.hit(543, 430)
    assert not button.hit(736, 506)


def test_hover_and_leave():
    button = StartButton(REGION, *_images())
    button.process_event(_move(600, 450))
    assert button.status is ButtonStatus.HOVERED
    button.process_event(_move(10, 10))
    assert button.status is ButtonStatus.IDLE


def test_click_sets_flag():
    button = StartButton(REGION, *_images())
    button.process_event(_move(600, 450))
    button.process_event(_down(600, 450))
    assert button.status is ButtonStatus.PUSHED
    assert button.clicked is False
    button.process_event(_up(600, 450))
    assert button.clicked is True


def test_press_outside_does_not_push():
    button = QuitButton(REGION, *_images())
    button.process_event(_down(10, 10))
    button.process_event(_up(10, 10))
    assert button.status is ButtonStatus.IDLE
    assert button.clicked is False


def test_pushed_button_ignores_motion():
    button = StartButton(REGION, *_images())
    button.process_event(_down(600, 450))
    button.process_event(_move(10, 10))
    assert button.status is ButtonStatus.PUSHED


def test_right_button_ignored():
    button = StartButton(REGION, *_images())
    button.process_event(_down(600, 450, button=3))
    assert button.status is ButtonStatus.IDLE


def test_draw_uses_image_for_status():
    button = StartButton(REGION, *_images())
    target = pygame.Surface((800, 600), pygame.SRCALPHA)
    button.draw(target)
    assert tuple(target.get_at((544, 430))) == IDLE
    button.process_event(_move(544, 430))
    button.draw(target)
    assert tuple(target.get_at((544, 430))) == HOVERED
    button.process_event(_down(544, 430))
    button.draw(target)
    assert tuple(target.get_at((544, 430))) == PUSHED


def test_base_button_is_abstract():
    with pytest.raises(TypeError):
        Button(REGION, *_images())