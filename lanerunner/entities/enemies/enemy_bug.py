"""
enemy_bug.py
------------
Defines the lane-crossing enemy bug.

Responsibilities
----------------
- Pick a speed and lane once at spawn.
- Move right along its lane, wrapping around past the field edge.
- Never remove itself; the SpawnManager and CollisionManager own its lifetime.
"""

import random

from lanerunner.core.runtime.game_settings import EnemyDefaults, Field, Lanes, Sprites
from lanerunner.entities.base_entity import BaseEntity


class EnemyBug(BaseEntity):
    """Enemy that crawls along one lane at a fixed speed."""

    __slots__ = ('_speed',)

    # ===========================================================
    # Initialization
    # ===========================================================
    def __init__(self, rng=None):
        """
        Args:
            rng: Random source (random.Random); module-level random if omitted.
        """
        rng = rng or random
        self._speed = rng.uniform(EnemyDefaults.MIN_SPEED, EnemyDefaults.MAX_SPEED)
        # uniform() may return the upper bound on rounding
        if self._speed >= EnemyDefaults.MAX_SPEED:
            self._speed = EnemyDefaults.MIN_SPEED

        super().__init__(0, rng.choice(Lanes.ROWS), Sprites.ENEMY)

    @property
    def speed(self) -> float:
        """Cells per second; fixed at spawn."""
        return self._speed

    # ===========================================================
    # Update Logic
    # ===========================================================
    def update(self, dt: float):
        """
        Advance along the lane and wrap at the field's wrap width.

        Args:
            dt (float): Delta time (in seconds) since last frame.
        """
        self.pos.x = (self.pos.x + Field.CELL_WIDTH * dt * self._speed) % Field.WRAP_WIDTH
