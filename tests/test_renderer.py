import pygame
import pytest

from gridquest.renderer import Renderer

MAGENTA = (255, 0, 255)
WHITE = (255, 255, 255)


@pytest.fixture
def texture_path(tmp_path):
    image = pygame.Surface((10, 10))
    image.fill(MAGENTA, pygame.Rect(0, 0, 5, 10))
    image.fill(WHITE, pygame.Rect(5, 0, 5, 10))
    path = tmp_path / "tile.bmp"
    pygame.image.save(image, str(path))
    return path


@pytest.fixture
def renderer():
    return Renderer(pygame.Surface((60, 60)))


def test_clear_fills_black(renderer):
    renderer.surface.fill((200, 10, 10))
    renderer.clear()
    assert tuple(renderer.surface.get_at((5, 5)))[:3] == (0, 0, 0)
    assert tuple(renderer.surface.get_at((59, 59)))[:3] == (0, 0, 0)


def test_load_texture_sets_color_key(renderer, texture_path):
    texture = renderer.load_texture(texture_path, (255, 0, 255, 255))
    assert tuple(texture.get_colorkey())[:3] == MAGENTA
    assert texture.get_size() == (10, 10)


def test_load_missing_texture_raises(renderer, tmp_path):
    with pytest.raises(FileNotFoundError):
        renderer.load_texture(tmp_path / "missing.bmp", (255, 255, 255, 255))


def test_draw_whole_texture_skips_keyed_pixels(renderer, texture_path):
    texture = renderer.load_texture(texture_path, (255, 0, 255, 255))
    renderer.clear()
    renderer.draw(texture, None, (0, 0, 30, 30))
    assert tuple(renderer.surface.get_at((5, 15)))[:3] == (0, 0, 0)
    assert tuple(renderer.surface.get_at((25, 15)))[:3] == WHITE
    assert tuple(renderer.surface.get_at((45, 15)))[:3] == (0, 0, 0)


def test_draw_source_region_only(renderer, texture_path):
    texture = renderer.load_texture(texture_path, (0, 0, 0, 255))
    renderer.clear()
    renderer.draw(texture, (0, 0, 5, 10), (30, 30, 30, 30))
    assert tuple(renderer.surface.get_at((31, 31)))[:3] == MAGENTA
    assert tuple(renderer.surface.get_at((58, 58)))[:3] == MAGENTA
    assert tuple(renderer.surface.get_at((10, 10)))[:3] == (0, 0, 0)


def test_present_alternates_screen_index(renderer):
    assert renderer.screen_index == 0
    renderer.present()
    assert renderer.screen_index == 1
    renderer.present()
    assert renderer.screen_index == 0