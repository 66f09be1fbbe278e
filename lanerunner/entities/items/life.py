"""
life.py
-------
Extra life pickup.
"""

from lanerunner.core.runtime.game_settings import Sprites
from .base_item import BaseItem


class Life(BaseItem):
    """Adds one life when collected."""

    __slots__ = ()

    def __init__(self, rng=None):
        super().__init__(Sprites.HEART, rng=rng)
