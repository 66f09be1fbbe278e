"""
input_manager.py
----------------
Key-up dispatch from raw key codes to the entity that owns input.

Provides:
- Fixed key-code -> action bindings
- A single, reseatable input owner (selector first, then the chosen player)
- Translation from pygame key constants to the bound key codes
"""

import pygame

from lanerunner.core.debug.debug_logger import DebugLogger
from lanerunner.entities.entity_types import InputAction


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    37: InputAction.LEFT,
    38: InputAction.UP,
    39: InputAction.RIGHT,
    40: InputAction.DOWN,
    65: InputAction.THROW_LEFT,   # A
    68: InputAction.THROW_RIGHT,  # D
    83: InputAction.THROW_UP,     # S
    13: InputAction.START,        # Enter
}

PYGAME_KEY_CODES = {
    pygame.K_LEFT: 37,
    pygame.K_UP: 38,
    pygame.K_RIGHT: 39,
    pygame.K_DOWN: 40,
    pygame.K_a: 65,
    pygame.K_d: 68,
    pygame.K_s: 83,
    pygame.K_RETURN: 13,
    pygame.K_KP_ENTER: 13,
}


class InputDispatcher:
    """
    Routes key-up events to the current input owner.

    Usage:
        dispatcher = InputDispatcher()
        selector = PlayerSelector(dispatcher)   # selector becomes owner
        dispatcher.on_key_up(39)                # selector.right()
        dispatcher.on_key_up(13)                # start(): owner -> player
    """

    __slots__ = ('bindings', '_owner')

    def __init__(self, bindings=None):
        self.bindings = dict(bindings or DEFAULT_KEY_BINDINGS)
        self._owner = None
        DebugLogger.init_entry("InputDispatcher")

    # ===========================================================
    # Owner
    # ===========================================================

    @property
    def owner(self):
        return self._owner

    def set_owner(self, entity):
        """Reseat the input owner."""
        assert entity is not None, "input owner cannot be None"
        previous = self._owner
        self._owner = entity
        DebugLogger.state(
            f"Input owner {type(previous).__name__} -> {type(entity).__name__}",
            category="input"
        )

    # ===========================================================
    # Dispatch
    # ===========================================================

    def resolve(self, key_code):
        """Action bound to `key_code`, or None."""
        return self.bindings.get(key_code)

    def on_key_up(self, key_code) -> bool:
        """
        Forward the action bound to `key_code` to the owner.

        Unbound key codes are dropped without reaching the owner.

        Returns:
            bool: True if the owner ran a handler.
        """
        action = self.resolve(key_code)
        if action is None:
            DebugLogger.trace(f"Unbound key code {key_code}")
            return False

        assert self._owner is not None, "key event received before an input owner was set"
        DebugLogger.trace(f"Key {key_code} -> {action.value} ({type(self._owner).__name__})")
        return self._owner.handle_input(action)

    def handle_event(self, event) -> bool:
        """Dispatch a pygame KEYUP event; other events are ignored."""
        if event.type != pygame.KEYUP:
            return False
        key_code = PYGAME_KEY_CODES.get(event.key)
        if key_code is None:
            return False
        return self.on_key_up(key_code)
