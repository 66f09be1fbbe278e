"""
test_player_combat.py
---------------------
Tests for rock throwing and rock pruning.
"""

import pytest

from lanerunner.entities.entity_types import Direction
from lanerunner.entities.items import Gem
from lanerunner.entities.player.player_core import Player


@pytest.fixture
def armed_player(rng):
    p = Player("images/char-boy.png", 205, 321)
    p.add_bonus(Gem(rng=rng))
    p.add_bonus(Gem(rng=rng))
    return p


class TestThrow:
    @pytest.mark.parametrize("method, direction", [
        ("throw_up", Direction.UP),
        ("throw_left", Direction.LEFT),
        ("throw_right", Direction.RIGHT),
    ])
    def test_throw_spends_gem_and_spawns_rock(self, armed_player, method, direction):
        gems_before = len(armed_player.gems)
        getattr(armed_player, method)()

        assert len(armed_player.gems) == gems_before - 1
        assert len(armed_player.attacks) == 1
        rock = armed_player.attacks[0]
        assert rock.direction is direction
        assert (rock.x, rock.y) == (205, 321)

    def test_last_collected_gem_is_spent_first(self, armed_player):
        first = armed_player.gems[0]
        armed_player.throw_up()
        assert armed_player.gems == [first]

    def test_throw_with_empty_inventory_is_noop(self, player):
        assert player.throw_left() is None
        assert player.gems == []
        assert player.attacks == []

    def test_rock_starts_at_current_position(self, armed_player):
        armed_player.right()
        armed_player.throw_right()
        assert (armed_player.attacks[0].x, armed_player.attacks[0].y) == (306, 321)

    def test_dead_player_cannot_throw(self, armed_player):
        armed_player.lives = 1
        armed_player.die()
        armed_player.throw_up()
        assert len(armed_player.gems) == 2
        assert armed_player.attacks == []


class TestPruning:
    def test_update_drops_rocks_outside_field(self, armed_player):
        armed_player.throw_up()
        armed_player.throw_right()
        up_rock, right_rock = armed_player.attacks

        right_rock.update(1.0)   # x = 205 + 303 = 508
        armed_player.update(1.0)

        assert armed_player.attacks == [up_rock]

    def test_update_keeps_rocks_in_field(self, armed_player):
        armed_player.throw_left()
        armed_player.attacks[0].update(0.1)
        armed_player.update(0.1)
        assert len(armed_player.attacks) == 1

    def test_zero_dt_update_keeps_inventory_and_lives(self, armed_player):
        armed_player.update(0)
        assert len(armed_player.gems) == 2
        assert armed_player.lives == 3
