"""
test_input_dispatcher.py
------------------------
Tests for key-code resolution and routing to the input owner.
"""

from unittest.mock import MagicMock

import pygame
import pytest

from lanerunner.core.services.input_manager import (
    DEFAULT_KEY_BINDINGS,
    PYGAME_KEY_CODES,
    InputDispatcher,
)
from lanerunner.entities.entity_types import InputAction


class TestBindings:
    @pytest.mark.parametrize("code, action", [
        (37, InputAction.LEFT),
        (38, InputAction.UP),
        (39, InputAction.RIGHT),
        (40, InputAction.DOWN),
        (65, InputAction.THROW_LEFT),
        (68, InputAction.THROW_RIGHT),
        (83, InputAction.THROW_UP),
        (13, InputAction.START),
    ])
    def test_resolve(self, dispatcher, code, action):
        assert dispatcher.resolve(code) is action

    def test_unbound_resolves_to_none(self, dispatcher):
        assert dispatcher.resolve(999) is None

    def test_pygame_keys_map_to_bound_codes(self):
        assert set(PYGAME_KEY_CODES.values()) == set(DEFAULT_KEY_BINDINGS)


class TestDispatch:
    def test_forwards_to_owner(self, dispatcher):
        owner = MagicMock()
        dispatcher.set_owner(owner)
        dispatcher.on_key_up(39)
        owner.handle_input.assert_called_once_with(InputAction.RIGHT)

    def test_unbound_key_never_reaches_owner(self, dispatcher):
        owner = MagicMock()
        dispatcher.set_owner(owner)
        assert dispatcher.on_key_up(999) is False
        owner.handle_input.assert_not_called()

    def test_missing_owner_is_an_invariant_violation(self, dispatcher):
        with pytest.raises(AssertionError):
            dispatcher.on_key_up(37)

    def test_owner_cannot_be_none(self, dispatcher):
        with pytest.raises(AssertionError):
            dispatcher.set_owner(None)

    def test_start_hands_focus_to_selected_player(self, dispatcher, selector):
        assert selector.selector_idx == 2
        dispatcher.on_key_up(13)

        chosen = selector.players[2]
        assert dispatcher.owner is chosen

        dispatcher.on_key_up(39)
        assert chosen.x == 306
        assert selector.selector_idx == 2

    def test_player_ignores_start(self, dispatcher, selector):
        dispatcher.on_key_up(13)
        assert dispatcher.on_key_up(13) is False


class TestPygameEvents:
    def test_keyup_event_dispatched(self, dispatcher, selector):
        event = pygame.event.Event(pygame.KEYUP, key=pygame.K_RIGHT)
        assert dispatcher.handle_event(event) is True
        assert selector.selector_idx == 3

    def test_keydown_ignored(self, dispatcher, selector):
        event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RIGHT)
        assert dispatcher.handle_event(event) is False
        assert selector.selector_idx == 2

    def test_unmapped_pygame_key_ignored(self, dispatcher, selector):
        event = pygame.event.Event(pygame.KEYUP, key=pygame.K_q)
        assert dispatcher.handle_event(event) is False
