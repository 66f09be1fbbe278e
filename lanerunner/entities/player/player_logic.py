"""
player_logic.py
---------------
Life and bonus bookkeeping for the player.

Responsibilities
----------------
- Apply collected bonuses (extra life, gem).
- Handle a death: respawn while lives remain, otherwise move the player
  off the field for good.
"""

from lanerunner.core.debug.debug_logger import DebugLogger
from lanerunner.core.runtime.game_settings import Field, PlayerDefaults
from lanerunner.entities.items.gem import Gem
from lanerunner.entities.items.life import Life


def add_bonus(player, bonus):
    """
    Fold a collected bonus into the player's state.

    Life adds one life, Gem is pushed onto the gem stack, anything else is
    ignored. A dead player collects nothing.
    """
    if player.dead:
        DebugLogger.trace(f"Dead player ignored bonus {bonus!r}", category="player")
        return

    if isinstance(bonus, Life):
        player.lives += 1
        DebugLogger.action(f"Collected life | lives={player.lives}", category="player")
    elif isinstance(bonus, Gem):
        player.gems.append(bonus)
        DebugLogger.action(f"Collected gem | gems={len(player.gems)}", category="player")
    else:
        DebugLogger.trace(f"Ignored bonus {bonus!r}", category="player")


def die(player):
    """
    Lose one life.

    A dead player is terminal: further calls do nothing.
    """
    if player.dead:
        return

    assert player.lives > 0, f"live player with {player.lives} lives"
    player.lives -= 1

    if player.lives > 0:
        player.pos.update(*PlayerDefaults.RESPAWN)
        DebugLogger.state(f"Player hit | lives={player.lives}", category="player")
    else:
        player.dead = True
        player.pos.update(*Field.OFFSCREEN)
        DebugLogger.state("Player out of lives -> DEAD", category="player")
