"""
player_combat.py
----------------
Rock throwing and active-rock housekeeping for the player.

Responsibilities
----------------
- Spend the most recently collected gem on each throw.
- Spawn a Rock at the player's position in the requested direction.
- Drop rocks that have left the field (the only place rocks are removed).
"""

from lanerunner.core.debug.debug_logger import DebugLogger
from lanerunner.entities.bullets.rock import Rock


def throw_rock(player, direction):
    """
    Throw a rock if the player holds a gem.

    Args:
        player: Thrower; its gem stack is popped.
        direction (Direction): Travel direction of the new rock.

    Returns:
        Rock or None: The spawned rock, or None with an empty inventory.
    """
    if not player.gems:
        return None

    player.gems.pop()
    rock = Rock(player, direction)
    player.attacks.append(rock)

    DebugLogger.action(
        f"Threw rock {direction.value} from ({player.x:g}, {player.y:g}) | gems left={len(player.gems)}",
        category="player"
    )
    return rock


def prune_attacks(player):
    """Keep only rocks still inside the field."""
    player.attacks = [rock for rock in player.attacks if rock.in_bounds()]
