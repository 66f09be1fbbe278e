"""
conftest.py
-----------
Shared pytest configuration and fixtures for lanerunner tests.

Contains:
- Headless SDL setup so pygame never opens a window
- Seeded random sources and recording draw-manager mocks
- Pytest markers
"""

import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pytest
from unittest.mock import MagicMock

from lanerunner.core.debug.debug_logger import LoggerConfig
from lanerunner.core.services.input_manager import InputDispatcher
from lanerunner.entities.player.player_core import Player
from lanerunner.entities.player.player_selector import PlayerSelector


# ===========================================================
# Session setup
# ===========================================================

@pytest.fixture(autouse=True)
def quiet_logger():
    """Silence console logging during tests."""
    previous = LoggerConfig.ENABLE_LOGGING, LoggerConfig.LOG_LEVEL
    LoggerConfig.ENABLE_LOGGING = False
    yield
    LoggerConfig.ENABLE_LOGGING, LoggerConfig.LOG_LEVEL = previous


# ===========================================================
# Common fixtures
# ===========================================================

@pytest.fixture
def rng():
    """Deterministic random source."""
    return random.Random(1234)


@pytest.fixture
def mock_draw_manager():
    """DrawManager stand-in that records draw calls; every sprite is 101x171."""
    draw_manager = MagicMock()
    draw_manager.get_size.return_value = (101, 171)
    return draw_manager


@pytest.fixture
def player():
    """Player on the start seat with default stats."""
    return Player("images/char-boy.png", 205, 404)


@pytest.fixture
def dispatcher():
    return InputDispatcher()


@pytest.fixture
def selector(dispatcher):
    """Selector registered as the dispatcher's input owner."""
    return PlayerSelector(dispatcher)


# ===========================================================
# Pytest configuration
# ===========================================================

def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Tag everything outside integration modules as a unit test."""
    for item in items:
        if "integration" not in item.nodeid:
            item.add_marker(pytest.mark.unit)
