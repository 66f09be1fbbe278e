"""
Core services exports.

Provides configuration loading and key-up input dispatch.
"""

from lanerunner.core.services.config_manager import load_config
from lanerunner.core.services.input_manager import InputDispatcher, DEFAULT_KEY_BINDINGS

__all__ = [
    'load_config',
    'InputDispatcher',
    'DEFAULT_KEY_BINDINGS',
]
