"""
game_session.py
---------------
Owns all state for one run: input routing, character selection, live
entities and the systems that act on them.

Responsibilities
----------------
- Build the dispatcher and selector before any key can arrive.
- Drive per-frame updates once a character has been chosen.
- Render the selector or the play field depending on state.
"""

import random

from lanerunner.core.debug.debug_logger import DebugLogger
from lanerunner.core.services.config_manager import load_config
from lanerunner.core.services.input_manager import InputDispatcher
from lanerunner.entities.player.player_selector import PlayerSelector
from lanerunner.systems.collision_manager import CollisionManager
from lanerunner.systems.spawn_manager import SpawnManager


DEFAULT_CONFIG = {
    "spawning": {},
    "roster": None,
}


class GameSession:
    """Game-state context passed between the main loop and the entities."""

    # ===========================================================
    # Initialization
    # ===========================================================
    def __init__(self, seed=None, config=None):
        """
        Args:
            seed: Seed for the session's random source (None = nondeterministic).
            config (dict, optional): Parsed game config; game.yaml if omitted.
        """
        if config is None:
            config = load_config("game.yaml", DEFAULT_CONFIG)

        self.rng = random.Random(seed)
        self.enemies = []
        self.bonuses = []

        self.dispatcher = InputDispatcher()
        self.selector = PlayerSelector(
            self.dispatcher,
            sprites=config.get("roster"),
            on_commit=self._on_selection_commit,
        )

        self.spawn_manager = SpawnManager(
            self.enemies, self.bonuses,
            rng=self.rng,
            config=config.get("spawning"),
        )
        self.collision_manager = CollisionManager()

        DebugLogger.init_entry("GameSession")

    # ===========================================================
    # State
    # ===========================================================
    @property
    def player(self):
        """Chosen Player, or None while selecting."""
        return self.selector.player

    @property
    def selecting(self) -> bool:
        return not self.selector.selected

    @property
    def game_over(self) -> bool:
        return self.player is not None and not self.player.alive

    def _on_selection_commit(self, player):
        self.spawn_manager.start()
        DebugLogger.state(f"Game started with {player.sprite}", category="game_state")

    # ===========================================================
    # Input
    # ===========================================================
    def handle_key(self, key_code) -> bool:
        return self.dispatcher.on_key_up(key_code)

    # ===========================================================
    # Update
    # ===========================================================
    def update(self, dt: float):
        """
        Advance one frame. Nothing moves until a character is chosen.

        Rocks are moved here; Player.update only prunes the ones that left
        the field, so it runs after them.
        """
        if self.selecting:
            return

        player = self.player
        self.spawn_manager.update(dt)

        for enemy in self.enemies:
            enemy.update(dt)
        for rock in player.attacks:
            rock.update(dt)
        player.update(dt)

        self.collision_manager.detect(player, self.enemies, self.bonuses)

        if player.dead and self.spawn_manager.active:
            self.spawn_manager.stop()
            DebugLogger.state("GAME OVER", category="game_state")

    # ===========================================================
    # Rendering
    # ===========================================================
    def render(self, draw_manager):
        if self.selecting:
            self.selector.render(draw_manager)
            return

        for bonus in self.bonuses:
            bonus.render(draw_manager)
        for enemy in self.enemies:
            enemy.render(draw_manager)
        for rock in self.player.attacks:
            rock.render(draw_manager)
        self.player.render(draw_manager)
