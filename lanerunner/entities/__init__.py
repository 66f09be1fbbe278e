"""
lanerunner/entities/__init__.py
-------------------------------
Entity module exports.

Provides the lightweight enums shared by all entities and the input layer.

Exports:
    Direction    - Rock travel directions (UP, LEFT, RIGHT)
    InputAction  - Named actions routed by the InputDispatcher
"""

from lanerunner.entities.entity_types import Direction, InputAction

__all__ = [
    'Direction',
    'InputAction',
]
