"""
spawn_manager.py
----------------
Timed spawner for enemies and bonuses during play.

Responsibilities
----------------
- Add an EnemyBug every enemy interval, up to a cap.
- Add a Gem or Life every bonus interval, up to a cap.
- Start when play begins and stop when the game ends.
"""

import random

from lanerunner.core.debug.debug_logger import DebugLogger
from lanerunner.core.runtime.game_settings import Spawning
from lanerunner.entities.enemies.enemy_bug import EnemyBug
from lanerunner.entities.items.gem import Gem
from lanerunner.entities.items.life import Life


class SpawnManager:
    """Spawns into the `enemies` and `bonuses` lists it is given."""

    # ===========================================================
    # Initialization
    # ===========================================================
    def __init__(self, enemies, bonuses, rng=None, config=None):
        """
        Args:
            enemies (list): Live enemy list (appended to).
            bonuses (list): Live bonus list (appended to).
            rng: Random source shared with spawned entities.
            config (dict, optional): 'spawning' section of game.yaml.
        """
        config = config or {}
        self.enemies = enemies
        self.bonuses = bonuses
        self.rng = rng or random.Random()

        self.enemy_interval = float(config.get("enemy_interval", Spawning.ENEMY_INTERVAL))
        self.bonus_interval = float(config.get("bonus_interval", Spawning.BONUS_INTERVAL))
        self.max_enemies = int(config.get("max_enemies", Spawning.MAX_ENEMIES))
        self.max_bonuses = int(config.get("max_bonuses", Spawning.MAX_BONUSES))
        self.life_chance = float(config.get("life_chance", Spawning.LIFE_CHANCE))

        if self.enemy_interval <= 0 or self.bonus_interval <= 0:
            DebugLogger.fail("Spawn intervals must be positive", category="spawn")
            raise ValueError("Spawn intervals must be positive")

        self.active = False
        self._enemy_timer = 0.0
        self._bonus_timer = 0.0

        DebugLogger.init_entry("SpawnManager")

    # ===========================================================
    # Control
    # ===========================================================
    def start(self):
        self.active = True
        self._enemy_timer = 0.0
        self._bonus_timer = 0.0
        DebugLogger.state("Spawning started", category="spawn")

    def stop(self):
        if self.active:
            DebugLogger.state("Spawning stopped", category="spawn")
        self.active = False

    # ===========================================================
    # Update
    # ===========================================================
    def update(self, dt: float):
        """Advance timers and spawn whatever came due this frame."""
        if not self.active:
            return

        self._enemy_timer += dt
        while self._enemy_timer >= self.enemy_interval:
            self._enemy_timer -= self.enemy_interval
            if len(self.enemies) < self.max_enemies:
                self.spawn_enemy()

        self._bonus_timer += dt
        while self._bonus_timer >= self.bonus_interval:
            self._bonus_timer -= self.bonus_interval
            if len(self.bonuses) < self.max_bonuses:
                self.spawn_bonus()

    def spawn_enemy(self):
        enemy = EnemyBug(rng=self.rng)
        self.enemies.append(enemy)
        DebugLogger.trace(f"Spawned {enemy!r} speed={enemy.speed:.2f}", category="spawn")
        return enemy

    def spawn_bonus(self):
        if self.rng.random() < self.life_chance:
            bonus = Life(rng=self.rng)
        else:
            bonus = Gem(rng=self.rng)
        self.bonuses.append(bonus)
        DebugLogger.trace(f"Spawned {bonus!r}", category="spawn")
        return bonus
