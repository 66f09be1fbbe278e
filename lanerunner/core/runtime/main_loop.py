"""
main_loop.py
------------
Core game loop orchestrating timing, events, updates, and rendering.

Responsibilities:
- Initialize pygame and the window
- Feed key-up events to the GameSession
- Update once per frame with a clamped delta time, then render
"""

import pygame

from lanerunner.core.debug.debug_logger import DebugLogger
from lanerunner.core.runtime.game_session import GameSession
from lanerunner.core.runtime.game_settings import Display, Physics
from lanerunner.graphics.draw_manager import DrawManager


class MainLoop:
    """Runtime controller owning the window, clock and session."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, asset_root=".", seed=None):
        """
        Args:
            asset_root: Directory containing the images/ sprite folder
            seed: Optional seed for reproducible spawns
        """
        DebugLogger.section("Initializing MainLoop")

        pygame.init()
        pygame.display.set_caption(Display.CAPTION)
        self.screen = pygame.display.set_mode((Display.WIDTH, Display.HEIGHT))
        DebugLogger.init_entry("Pygame")
        DebugLogger.init_sub(f"Window {Display.WIDTH}x{Display.HEIGHT}")

        self.draw_manager = DrawManager(self.screen, asset_root)
        self.session = GameSession(seed=seed)

        self.clock = pygame.time.Clock()
        self.running = True

    # ===========================================================
    # Main Loop
    # ===========================================================

    def run(self):
        """Execute the frame loop until the window is closed."""
        DebugLogger.section("Game Loop")

        while self.running:
            dt = self.clock.tick(Display.FPS) / 1000.0
            dt = min(dt, Physics.MAX_FRAME_TIME)

            self._handle_events()
            self.session.update(dt)
            self._draw()

        pygame.quit()
        DebugLogger.system("Pygame terminated")

    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                DebugLogger.action("Quit signal received")
                break

            self.session.dispatcher.handle_event(event)

    def _draw(self):
        self.draw_manager.clear(Display.BACKGROUND_COLOR)
        self.session.render(self.draw_manager)
        pygame.display.flip()
