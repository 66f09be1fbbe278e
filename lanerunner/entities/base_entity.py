"""
base_entity.py
--------------
Foundational classes for everything drawn on the field.

Coordinate System
-----------------
Entities use top-left coordinates in world units, matching the tile
sprites: `pos` is where the sprite's top-left corner is drawn.

Input
-----
`InputEntity` adds keyed-action dispatch. Each subclass lists the actions
it supports in `input_actions()`; anything else is ignored.
"""

from typing import Callable, Dict, Optional

import pygame

from lanerunner.core.debug.debug_logger import DebugLogger
from lanerunner.core.runtime.game_settings import Collision
from lanerunner.entities.entity_types import InputAction


class BaseEntity:
    """
    Base class for all game entities.

    Subclassed by Player, PlayerSelector, EnemyBug, Rock and the bonus items.
    """

    __slots__ = ('pos', 'sprite')

    # ===================================================================
    # Initialization
    # ===================================================================

    def __init__(self, x: float, y: float, sprite: str):
        """
        Args:
            x: Top-left X position
            y: Top-left Y position
            sprite: Sprite identifier resolved by the DrawManager
        """
        if not sprite:
            DebugLogger.fail(f"{type(self).__name__}: empty sprite id", category="entity")
            raise ValueError(f"{type(self).__name__}: sprite id must be non-empty")

        self.pos = pygame.Vector2(x, y)
        self.sprite = sprite

    # ===================================================================
    # Properties
    # ===================================================================

    @property
    def x(self) -> float:
        return self.pos.x

    @x.setter
    def x(self, value: float):
        self.pos.x = value

    @property
    def y(self) -> float:
        return self.pos.y

    @y.setter
    def y(self, value: float):
        self.pos.y = value

    # ===================================================================
    # Core Update Loop
    # ===================================================================

    def update(self, dt: float):
        """
        Per-frame update. Override in subclasses.

        Args:
            dt: Delta time in seconds
        """
        pass

    # ===================================================================
    # Rendering
    # ===================================================================

    def render(self, draw_manager):
        """Draw the sprite at the current position."""
        draw_manager.draw_image(self.sprite, self.pos.x, self.pos.y)

    # ===================================================================
    # Collision
    # ===================================================================

    def hitbox(self) -> pygame.Rect:
        """Overlap rectangle used by the CollisionManager."""
        off_x, off_y = Collision.HITBOX_OFFSET
        w, h = Collision.HITBOX_SIZE
        return pygame.Rect(int(self.pos.x) + off_x, int(self.pos.y) + off_y, w, h)

    def __repr__(self):
        return f"{type(self).__name__}(x={self.pos.x:g}, y={self.pos.y:g})"


class InputEntity(BaseEntity):
    """Entity that can receive named actions from the InputDispatcher."""

    __slots__ = ('_actions',)

    def __init__(self, x: float, y: float, sprite: str):
        super().__init__(x, y, sprite)
        self._actions: Dict[InputAction, Callable[[], None]] = self.input_actions()

    def input_actions(self) -> Dict[InputAction, Callable[[], None]]:
        """Map of supported actions to zero-argument handlers. Override in subclasses."""
        return {}

    def supports(self, action) -> bool:
        try:
            return InputAction(action) in self._actions
        except ValueError:
            return False

    def handle_input(self, action: Optional[InputAction]) -> bool:
        """
        Run the handler bound to `action`.

        Unknown or unsupported actions are ignored.

        Returns:
            bool: True if a handler ran.
        """
        try:
            action = InputAction(action)
        except ValueError:
            action = None

        handler = self._actions.get(action)
        if handler is None:
            DebugLogger.trace(f"{type(self).__name__} ignored action {action!r}")
            return False

        handler()
        return True
