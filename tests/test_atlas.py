import pygame
import pytest

from survivor.atlas import Atlas, ProcessType


def _strip(colors):
    surface = pygame.Surface((len(colors), 1), pygame.SRCALPHA)
    for x, color in enumerate(colors):
        surface.set_at((x, 0), color)
    return surface


def _pixels(surface):
    return [tuple(surface.get_at((x, 0))) for x in range(surface.get_width())]


def test_load_reads_numbered_files_from_one(tmp_path):
    colors = [(10, 0, 0, 255), (0, 20, 0, 255), (0, 0, 30, 255)]
    for number, color in enumerate(colors, start=1):
        pygame.image.save(_strip([color, color]), str(tmp_path / f"frame_{number}.png"))
    atlas = Atlas.load(str(tmp_path / "frame_%d.png"), 3)
    assert len(atlas) == 3
    assert [tuple(frame.get_at((0, 0))) for frame in atlas] == colors


def test_load_missing_file_raises(tmp_path):
    with pytest.raises((FileNotFoundError, pygame.error)):
        Atlas.load(str(tmp_path / "missing_%d.png"), 1)


def test_load_negative_count_raises(tmp_path):
    with pytest.raises(ValueError):
        Atlas.load(str(tmp_path / "frame_%d.png"), -1)


def test_flip_mirrors_each_frame_horizontally():
    colors = [(1, 2, 3, 255), (4, 5, 6, 128), (7, 8, 9, 0)]
    source = Atlas([_strip(colors), _strip(list(reversed(colors)))])
    flipped = Atlas.derive(source, ProcessType.FLIP)
    assert len(flipped) == len(source)
    assert _pixels(flipped[0]) == _pixels(source[1])
    assert _pixels(flipped[1]) == _pixels(source[0])


def test_flip_twice_restores_frames():
    source = Atlas([_strip([(1, 2, 3, 255), (9, 9, 9, 255)])])
    twice = Atlas.derive(Atlas.derive(source, ProcessType.FLIP), ProcessType.FLIP)
    assert _pixels(twice[0]) == _pixels(source[0])


def test_white_turns_visible_pixels_opaque_white():
    source = Atlas([_strip([(0, 0, 0, 0), (40, 50, 60, 1), (90, 10, 10, 255)])])
    white = Atlas.derive(source, ProcessType.WHITE)
    assert _pixels(white[0]) == [(0, 0, 0, 0), (255, 255, 255, 255), (255, 255, 255, 255)]
    assert white[0].get_size() == source[0].get_size()


def test_derive_from_empty_atlas_raises():
    with pytest.raises(ValueError):
        Atlas.derive(Atlas(), ProcessType.FLIP)


def test_index_out_of_range_raises():
    atlas = Atlas([_strip([(0, 0, 0, 255)])])
    assert len(atlas) == 1
    assert _pixels(atlas[0]) == [(0, 0, 0, 255)]
    with pytest.raises(IndexError):
        atlas[1]