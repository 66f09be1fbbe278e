"""
test_draw_manager.py
--------------------
Tests for the pygame DrawManager adapter (headless, no window).
"""

import pygame
import pytest

from lanerunner.graphics.draw_manager import DrawManager


@pytest.fixture
def target():
    return pygame.Surface((505, 606))


@pytest.fixture
def asset_root(tmp_path):
    images = tmp_path / "images"
    images.mkdir()
    tile = pygame.Surface((20, 30))
    tile.fill((0, 200, 0))
    pygame.image.save(tile, str(images / "tile.bmp"))
    return str(tmp_path)


class TestImages:
    def test_loads_and_caches(self, target, asset_root):
        dm = DrawManager(target, asset_root)
        first = dm.load_image("images/tile.bmp")
        assert dm.load_image("images/tile.bmp") is first
        assert dm.get_size("images/tile.bmp") == (20, 30)

    def test_missing_image_uses_placeholder(self, target, tmp_path):
        dm = DrawManager(target, str(tmp_path))
        assert dm.get_size("images/missing.png") == DrawManager.FALLBACK_SIZE


class TestDrawing:
    def test_blits_at_position(self, target, asset_root):
        dm = DrawManager(target, asset_root)
        dm.clear((0, 0, 0))
        dm.draw_image("images/tile.bmp", 10, 20)
        assert target.get_at((15, 25))[:3] == (0, 200, 0)
        assert target.get_at((5, 5))[:3] == (0, 0, 0)

    def test_scaled_blit(self, target, asset_root):
        dm = DrawManager(target, asset_root)
        dm.clear((0, 0, 0))
        dm.draw_image("images/tile.bmp", 0, 0, size=(6.06, 9.0))
        assert target.get_at((3, 4))[:3] == (0, 200, 0)
        assert target.get_at((10, 4))[:3] == (0, 0, 0)
