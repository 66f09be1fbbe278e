"""
player_movement.py
------------------
Handles grid-step player movement and field-boundary checks.

Responsibilities
----------------
- Move the player one grid cell per action.
- Commit a step only when the new coordinate stays strictly inside the
  field on that axis.
- Moving up is never bounds-checked: the player can step off the top row.
"""

from lanerunner.core.runtime.game_settings import Field


def _inside(value: float, extent: float) -> bool:
    return 0 < value < extent


def move_up(player):
    """Step one row up. No boundary check."""
    player.pos.y -= Field.CELL_HEIGHT


def move_down(player):
    """Step one row down if the new row is inside the field."""
    candidate = player.pos.y + Field.CELL_HEIGHT
    if _inside(candidate, Field.HEIGHT):
        player.pos.y = candidate


def move_left(player):
    """Step one column left if the new column is inside the field."""
    candidate = player.pos.x - Field.CELL_WIDTH
    if _inside(candidate, Field.WIDTH):
        player.pos.x = candidate


def move_right(player):
    """Step one column right if the new column is inside the field."""
    candidate = player.pos.x + Field.CELL_WIDTH
    if _inside(candidate, Field.WIDTH):
        player.pos.x = candidate
