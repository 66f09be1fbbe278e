"""
base_item.py
------------
Base class for the collectible bonuses.

Responsibilities
----------------
- Pick a random cell on the lane grid at spawn.
- Stay put; collection is handled by the CollisionManager and
  Player.add_bonus().
"""

import random

from lanerunner.core.runtime.game_settings import Lanes
from lanerunner.entities.base_entity import BaseEntity


class BaseItem(BaseEntity):
    """Static pickup placed on a random lane cell."""

    __slots__ = ()

    def __init__(self, sprite: str, rng=None):
        """
        Args:
            sprite: Sprite identifier for this pickup.
            rng: Random source (random.Random); module-level random if omitted.
        """
        rng = rng or random
        x = rng.choice(Lanes.COLUMNS)
        y = rng.choice(Lanes.ROWS)
        super().__init__(x, y, sprite)
