"""
player_core.py
--------------
Defines the Player entity core used to coordinate its components.

States
------
selecting (held by PlayerSelector) -> alive -> dead (terminal)
"""

from lanerunner.core.runtime.game_settings import Hud, PlayerDefaults, Sprites
from lanerunner.entities.base_entity import InputEntity
from lanerunner.entities.entity_types import Direction, InputAction
from . import player_movement
from .player_combat import throw_rock, prune_attacks
from .player_logic import add_bonus, die


class Player(InputEntity):
    """Represents the controllable player entity."""

    __slots__ = ('lives', 'gems', 'attacks', 'dead')

    def __init__(self, sprite: str, x: float, y: float):
        """
        Args:
            sprite: Character sprite identifier
            x: Starting X position
            y: Starting Y position
        """
        self.lives = PlayerDefaults.LIVES
        self.gems = []
        self.attacks = []
        self.dead = False
        super().__init__(x, y, sprite)

    def input_actions(self):
        return {
            InputAction.UP: self.up,
            InputAction.DOWN: self.down,
            InputAction.LEFT: self.left,
            InputAction.RIGHT: self.right,
            InputAction.THROW_UP: self.throw_up,
            InputAction.THROW_LEFT: self.throw_left,
            InputAction.THROW_RIGHT: self.throw_right,
        }

    @property
    def alive(self) -> bool:
        return not self.dead

    # ===========================================================
    # Movement
    # ===========================================================

    def up(self):
        if not self.dead:
            player_movement.move_up(self)

    def down(self):
        if not self.dead:
            player_movement.move_down(self)

    def left(self):
        if not self.dead:
            player_movement.move_left(self)

    def right(self):
        if not self.dead:
            player_movement.move_right(self)

    # ===========================================================
    # Combat
    # ===========================================================

    def throw_up(self):
        return self._throw(Direction.UP)

    def throw_left(self):
        return self._throw(Direction.LEFT)

    def throw_right(self):
        return self._throw(Direction.RIGHT)

    def _throw(self, direction: Direction):
        if self.dead:
            return None
        return throw_rock(self, direction)

    # ===========================================================
    # Lives & Bonuses
    # ===========================================================

    def add_bonus(self, bonus):
        add_bonus(self, bonus)

    def die(self):
        die(self)
        assert self.lives >= 0
        assert not self.dead or self.lives == 0

    # ===========================================================
    # Update & Render
    # ===========================================================

    def update(self, dt: float):
        """Drop rocks that have left the field."""
        prune_attacks(self)

    def render(self, draw_manager):
        """Draw the character, then the gem and life counters."""
        super().render(draw_manager)
        self._render_counter(draw_manager, Sprites.GEM_ICON, len(self.gems), Hud.GEMS_Y)
        self._render_counter(draw_manager, Sprites.HEART, self.lives, Hud.LIVES_Y)

    @staticmethod
    def _render_counter(draw_manager, sprite, count, y):
        if count <= 0:
            return
        width, height = draw_manager.get_size(sprite)
        icon_w = width * Hud.ICON_SCALE
        icon_h = height * Hud.ICON_SCALE
        for i in range(count):
            draw_manager.draw_image(sprite, Hud.MARGIN_X + i * icon_w, y, size=(icon_w, icon_h))
