"""
test_items.py
-------------
Tests for Gem and Life bonus placement.
"""

import random
from collections import Counter

import pytest

from lanerunner.core.runtime.game_settings import Lanes, Sprites
from lanerunner.entities.items import Gem, Life


class TestPlacement:
    @pytest.mark.parametrize("item_cls", [Gem, Life])
    def test_spawns_on_lane_grid(self, item_cls, rng):
        for _ in range(50):
            item = item_cls(rng=rng)
            assert item.x in Lanes.COLUMNS
            assert item.y in Lanes.ROWS

    @pytest.mark.parametrize("item_cls", [Gem, Life])
    def test_static(self, item_cls, rng):
        item = item_cls(rng=rng)
        before = (item.x, item.y)
        item.update(3.0)
        assert (item.x, item.y) == before

    @pytest.mark.slow
    def test_grid_coverage_is_uniform(self):
        rng = random.Random(99)
        cells = Counter((g.x, g.y) for g in (Gem(rng=rng) for _ in range(7500)))
        assert len(cells) == len(Lanes.COLUMNS) * len(Lanes.ROWS)
        for count in cells.values():
            assert count / 7500 == pytest.approx(1 / 15, abs=0.02)


class TestSprites:
    def test_gem_sprite_from_palette(self, rng):
        seen = {Gem(rng=rng).sprite for _ in range(100)}
        assert seen == set(Sprites.GEMS)

    def test_life_sprite_fixed(self, rng):
        assert {Life(rng=rng).sprite for _ in range(10)} == {"images/Heart.png"}
