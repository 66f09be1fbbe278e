"""
lanerunner/entities/player/__init__.py
--------------------------------------
Player entity and character selection.
"""

from .player_core import Player
from .player_selector import PlayerSelector

__all__ = ['Player', 'PlayerSelector']
