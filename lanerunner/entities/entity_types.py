"""
entity_types.py
---------------
Enumerations shared by entities and the input layer.

Both enums inherit from `str` so members compare equal to their plain
string values (e.g. config files and logs use "throw_left").
"""

from enum import Enum


class Direction(str, Enum):
    """Travel direction of a thrown rock."""
    UP = "up"
    LEFT = "left"
    RIGHT = "right"


class InputAction(str, Enum):
    """Named actions the input dispatcher can route to an entity."""

    # --- Movement / cursor ---
    LEFT = "left"
    UP = "up"
    RIGHT = "right"
    DOWN = "down"

    # --- Combat ---
    THROW_LEFT = "throw_left"
    THROW_RIGHT = "throw_right"
    THROW_UP = "throw_up"

    # --- Selection ---
    START = "start"
