"""
collision_manager.py
--------------------
Overlap checks between the player, its rocks, enemies and bonuses.

Responsibilities
----------------
- Rock vs enemy: both are removed.
- Player vs bonus: bonus is applied through Player.add_bonus() and removed.
- Player vs enemy: Player.die(), at most once per frame.
"""

from lanerunner.core.debug.debug_logger import DebugLogger


class CollisionManager:
    """Detects overlaps and applies their effects to the session lists."""

    def __init__(self):
        self.stats = {"enemies_cleared": 0, "bonuses_collected": 0, "hits": 0}
        DebugLogger.init_entry("CollisionManager")

    def detect(self, player, enemies, bonuses):
        """
        Resolve this frame's collisions.

        Args:
            player: The active Player (skipped if None or dead).
            enemies (list): Live enemies; cleared enemies are removed in place.
            bonuses (list): Live bonuses; collected bonuses are removed in place.
        """
        if player is None or not player.alive:
            return

        self._rocks_vs_enemies(player, enemies)
        self._player_vs_bonuses(player, bonuses)
        self._player_vs_enemies(player, enemies)

    # ===========================================================
    # Pairs
    # ===========================================================

    def _rocks_vs_enemies(self, player, enemies):
        spent = []
        for rock in player.attacks:
            rock_box = rock.hitbox()
            for enemy in enemies:
                if rock_box.colliderect(enemy.hitbox()):
                    enemies.remove(enemy)
                    spent.append(rock)
                    self.stats["enemies_cleared"] += 1
                    DebugLogger.action(f"Rock cleared {enemy!r}", category="collision")
                    break

        if spent:
            player.attacks = [rock for rock in player.attacks if rock not in spent]

    def _player_vs_bonuses(self, player, bonuses):
        player_box = player.hitbox()
        for bonus in list(bonuses):
            if player_box.colliderect(bonus.hitbox()):
                player.add_bonus(bonus)
                bonuses.remove(bonus)
                self.stats["bonuses_collected"] += 1

    def _player_vs_enemies(self, player, enemies):
        player_box = player.hitbox()
        for enemy in enemies:
            if player_box.colliderect(enemy.hitbox()):
                self.stats["hits"] += 1
                DebugLogger.action(f"Player hit by {enemy!r}", category="collision")
                player.die()
                return
