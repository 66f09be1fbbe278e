"""
lanerunner/entities/items/__init__.py
-------------------------------------
Collectible bonus exports.
"""

from .base_item import BaseItem
from .gem import Gem
from .life import Life

__all__ = ['BaseItem', 'Gem', 'Life']
