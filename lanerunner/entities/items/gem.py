"""
gem.py
------
Gem pickup. Each held gem pays for one thrown rock.
"""

import random

from lanerunner.core.runtime.game_settings import Sprites
from .base_item import BaseItem


class Gem(BaseItem):
    """Gem in one of three colors."""

    __slots__ = ()

    SPRITES = Sprites.GEMS

    def __init__(self, rng=None):
        rng = rng or random
        super().__init__(rng.choice(self.SPRITES), rng=rng)
