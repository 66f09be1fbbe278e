"""
player_selector.py
------------------
Character selection shown before play starts.

Responsibilities
----------------
- Seat one Player per character sprite along the bottom row.
- Move a highlight cursor left/right, clamped to the roster.
- On start, hand input focus to the chosen Player exactly once.
"""

from lanerunner.core.debug.debug_logger import DebugLogger
from lanerunner.core.runtime.game_settings import Field, PlayerDefaults, Sprites
from lanerunner.entities.base_entity import BaseEntity, InputEntity
from lanerunner.entities.entity_types import InputAction
from .player_core import Player


class PlayerSelector(InputEntity):
    """Pre-game roster with a moving highlight."""

    __slots__ = ('players', 'selector_idx', 'selected', 'player', '_dispatcher', '_on_commit')

    def __init__(self, dispatcher=None, sprites=None, on_commit=None):
        """
        Args:
            dispatcher: InputDispatcher whose owner becomes this selector,
                then the chosen player on start().
            sprites: Character sprites, one per seat (defaults to Sprites.PLAYERS).
            on_commit: Optional callback receiving the chosen Player.
        """
        sprites = tuple(sprites or Sprites.PLAYERS)
        if len(sprites) != len(PlayerDefaults.SEATS_X):
            raise ValueError(
                f"PlayerSelector needs {len(PlayerDefaults.SEATS_X)} sprites, got {len(sprites)}"
            )

        self.players = [
            Player(sprite, seat_x, PlayerDefaults.SEAT_Y)
            for sprite, seat_x in zip(sprites, PlayerDefaults.SEATS_X)
        ]
        self.selector_idx = PlayerDefaults.DEFAULT_SEAT
        self.selected = False
        self.player = None
        self._dispatcher = dispatcher
        self._on_commit = on_commit

        super().__init__(*self._highlight_position(), Sprites.SELECTOR)

        if dispatcher is not None:
            dispatcher.set_owner(self)

        DebugLogger.init(f"PlayerSelector ready | {len(self.players)} characters", category="selector")

    def input_actions(self):
        return {
            InputAction.LEFT: self.left,
            InputAction.RIGHT: self.right,
            InputAction.START: self.start,
        }

    def _highlight_position(self):
        return 2 + Field.CELL_WIDTH * self.selector_idx, PlayerDefaults.SEAT_Y

    def _check_cursor(self):
        assert 0 <= self.selector_idx < len(self.players), \
            f"selector cursor {self.selector_idx} outside roster"

    # ===========================================================
    # Cursor
    # ===========================================================

    def left(self):
        if self.selector_idx > 0:
            self.selector_idx -= 1
        self._check_cursor()

    def right(self):
        if self.selector_idx < len(self.players) - 1:
            self.selector_idx += 1
        self._check_cursor()

    # ===========================================================
    # Selection
    # ===========================================================

    def start(self):
        """Commit the highlighted character. Later calls are ignored."""
        if self.selected:
            DebugLogger.warn("Selection already committed; start ignored", category="selector")
            return

        self._check_cursor()
        self.player = self.players[self.selector_idx]
        self.selected = True

        if self._dispatcher is not None:
            self._dispatcher.set_owner(self.player)

        DebugLogger.state(
            f"Selected {self.player.sprite} (seat {self.selector_idx}) -> PLAY",
            category="selector"
        )

        if self._on_commit is not None:
            self._on_commit(self.player)

    # ===========================================================
    # Rendering
    # ===========================================================

    def render(self, draw_manager):
        """Draw the highlight under the cursor, then every seated character."""
        self.pos.update(*self._highlight_position())
        super().render(draw_manager)
        for player in self.players:
            BaseEntity.render(player, draw_manager)
