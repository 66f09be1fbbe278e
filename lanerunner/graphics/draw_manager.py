"""
draw_manager.py
---------------
Rendering adapter between entities and a pygame surface.

Responsibilities:
- Load and cache sprite images by identifier
- Report sprite sizes for layout math
- Blit sprites (optionally scaled) onto the target surface
"""

import os

import pygame

from lanerunner.core.debug.debug_logger import DebugLogger


class DrawManager:
    """Draws sprites by identifier onto one target surface."""

    FALLBACK_SIZE = (101, 171)
    FALLBACK_COLOR = (255, 0, 255)

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, surface, asset_root="."):
        """
        Args:
            surface: pygame.Surface to draw on
            asset_root: Directory that sprite identifiers are relative to
        """
        self.surface = surface
        self.asset_root = asset_root
        self.images = {}
        self._scaled = {}
        DebugLogger.init_entry("DrawManager")

    # ===========================================================
    # Image Loading
    # ===========================================================

    def load_image(self, sprite):
        """
        Load and cache the image for a sprite identifier.

        Missing files are replaced by a magenta placeholder.

        Returns:
            pygame.Surface
        """
        if sprite in self.images:
            return self.images[sprite]

        path = os.path.join(self.asset_root, sprite)
        try:
            img = pygame.image.load(path)
            if pygame.display.get_surface() is not None:
                img = img.convert_alpha()
        except (FileNotFoundError, pygame.error):
            DebugLogger.warn(f"Missing image at {path}", category="render")
            img = pygame.Surface(self.FALLBACK_SIZE, pygame.SRCALPHA)
            img.fill(self.FALLBACK_COLOR)

        self.images[sprite] = img
        return img

    def get_size(self, sprite):
        """(width, height) of a sprite in pixels."""
        return self.load_image(sprite).get_size()

    # ===========================================================
    # Drawing
    # ===========================================================

    def clear(self, color=(0, 0, 0)):
        self.surface.fill(color)

    def draw_image(self, sprite, x, y, size=None):
        """
        Blit a sprite with its top-left corner at (x, y).

        Args:
            size: Optional (width, height) to scale to
        """
        image = self.load_image(sprite)
        if size is not None:
            size = (int(size[0]), int(size[1]))
            key = (sprite, size)
            if key not in self._scaled:
                self._scaled[key] = pygame.transform.scale(image, size)
            image = self._scaled[key]

        self.surface.blit(image, (int(x), int(y)))
