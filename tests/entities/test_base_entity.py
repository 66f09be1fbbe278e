"""
test_base_entity.py
-------------------
Tests for BaseEntity and InputEntity.

Covers:
- Construction validation
- Default update / render behavior
- Explicit action-table dispatch
"""

import pytest

from lanerunner.entities.base_entity import BaseEntity, InputEntity
from lanerunner.entities.entity_types import InputAction


class Counter(InputEntity):
    """InputEntity supporting only LEFT."""

    def __init__(self):
        self.calls = []
        super().__init__(0, 0, "images/Selector.png")

    def input_actions(self):
        return {InputAction.LEFT: lambda: self.calls.append("left")}


class TestBaseEntity:
    def test_position_and_sprite(self):
        entity = BaseEntity(3, 4.5, "images/Rock.png")
        assert (entity.x, entity.y) == (3, 4.5)
        assert entity.sprite == "images/Rock.png"

    def test_empty_sprite_rejected(self):
        with pytest.raises(ValueError):
            BaseEntity(0, 0, "")

    def test_update_is_noop(self):
        entity = BaseEntity(10, 20, "images/Rock.png")
        entity.update(1.0)
        assert (entity.x, entity.y) == (10, 20)

    def test_render_draws_sprite_at_position(self, mock_draw_manager):
        entity = BaseEntity(10, 20, "images/Rock.png")
        entity.render(mock_draw_manager)
        mock_draw_manager.draw_image.assert_called_once_with("images/Rock.png", 10, 20)
        assert (entity.x, entity.y) == (10, 20)

    def test_hitbox_follows_position(self):
        entity = BaseEntity(100, 50, "images/Rock.png")
        before = entity.hitbox()
        entity.x += 101
        assert entity.hitbox().x == before.x + 101


class TestInputEntity:
    def test_supported_action_runs(self):
        entity = Counter()
        assert entity.handle_input(InputAction.LEFT) is True
        assert entity.calls == ["left"]

    def test_plain_string_action_runs(self):
        entity = Counter()
        assert entity.handle_input("left") is True
        assert entity.calls == ["left"]

    @pytest.mark.parametrize("action", [InputAction.RIGHT, "fly", None])
    def test_unsupported_action_is_ignored(self, action):
        entity = Counter()
        assert entity.handle_input(action) is False
        assert entity.calls == []

    def test_supports(self):
        entity = Counter()
        assert entity.supports("left")
        assert not entity.supports(InputAction.START)
        assert not entity.supports("nonsense")

    def test_base_input_entity_supports_nothing(self):
        entity = InputEntity(0, 0, "images/Selector.png")
        assert entity.handle_input(InputAction.START) is False
