"""
rock.py
-------
Defines the rock thrown by the player.

Responsibilities
----------------
- Start at the thrower's position at the moment of the throw.
- Travel in one fixed direction at three grid cells per second.
- Report whether it is still inside the field; pruning is done by the Player.
"""

from lanerunner.core.debug.debug_logger import DebugLogger
from lanerunner.core.runtime.game_settings import Field, Projectile, Sprites
from lanerunner.entities.base_entity import BaseEntity
from lanerunner.entities.entity_types import Direction


class Rock(BaseEntity):
    """Straight-line projectile spawned by Player.throw_*()."""

    __slots__ = ('_direction',)

    # Unit step per direction, in grid cells
    _STEPS = {
        Direction.UP: (0, -Field.CELL_HEIGHT),
        Direction.LEFT: (-Field.CELL_WIDTH, 0),
        Direction.RIGHT: (Field.CELL_WIDTH, 0),
    }

    # ===========================================================
    # Initialization
    # ===========================================================
    def __init__(self, thrower, direction):
        """
        Args:
            thrower: Entity whose current position becomes the origin.
            direction (Direction | str): 'up', 'left' or 'right'.
        """
        try:
            direction = Direction(direction)
        except ValueError:
            DebugLogger.fail(f"Rock: unknown direction {direction!r}", category="entity")
            raise ValueError(f"Unknown rock direction: {direction!r}") from None

        super().__init__(thrower.pos.x, thrower.pos.y, Sprites.ROCK)
        self._direction = direction

    @property
    def direction(self) -> Direction:
        return self._direction

    # ===========================================================
    # Update Logic
    # ===========================================================
    def update(self, dt: float):
        step_x, step_y = self._STEPS[self._direction]
        scale = dt * Projectile.SPEED_MULTIPLIER
        self.pos.x += step_x * scale
        self.pos.y += step_y * scale

    def in_bounds(self) -> bool:
        """True while strictly inside the playfield."""
        return 0 < self.pos.x < Field.WIDTH and 0 < self.pos.y < Field.HEIGHT
