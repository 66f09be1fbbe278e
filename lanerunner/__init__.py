"""Entity and game-state core for a lane-crossing arcade game."""

__version__ = "1.0.0"
