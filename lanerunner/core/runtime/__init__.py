"""
Runtime configuration exports.

Provides game-wide constants and settings. All exports are lightweight
class constants with no initialization overhead.
"""

from lanerunner.core.runtime.game_settings import (
    Display,
    Physics,
    Field,
    Lanes,
    PlayerDefaults,
    Projectile,
    EnemyDefaults,
    Spawning,
    Collision,
    Sprites,
    Hud,
)

__all__ = [
    'Display',
    'Physics',
    'Field',
    'Lanes',
    'PlayerDefaults',
    'Projectile',
    'EnemyDefaults',
    'Spawning',
    'Collision',
    'Sprites',
    'Hud',
]
