"""
game_settings.py
----------------
Centralized constants for all game systems.

Field geometry follows the tile grid: one column is 101 units wide and one
row is 83 units tall.
"""


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Screen and window configuration."""
    WIDTH: int = 505
    HEIGHT: int = 606
    FPS: int = 60
    CAPTION: str = "Lane Runner"
    BACKGROUND_COLOR = (255, 255, 255)


# ===========================================================
# Physics & Timing
# ===========================================================

class Physics:
    """Frame timing."""
    MAX_FRAME_TIME: float = 0.1


# ===========================================================
# Field Geometry
# ===========================================================

class Field:
    """Playfield extents and grid cell size."""
    WIDTH: int = 505
    HEIGHT: int = 475
    CELL_WIDTH: int = 101
    CELL_HEIGHT: int = 83

    # Enemies wrap around twice the visible width
    WRAP_WIDTH: int = 1010

    # Far outside the field; used for players out of lives
    OFFSCREEN = (-2000, -2000)


class Lanes:
    """Discrete spawn rows and columns."""
    ROWS = (60, 143, 226)
    COLUMNS = (0, 101, 202, 303, 404)


# ===========================================================
# Player Defaults
# ===========================================================

class PlayerDefaults:
    """Player configuration defaults."""
    LIVES: int = 3
    RESPAWN = (205, 404)
    SEAT_Y: int = 404
    SEATS_X = (2, 103, 205, 306, 407)
    DEFAULT_SEAT: int = 2


class Projectile:
    """Rock travel speed, in grid cells per second."""
    SPEED_MULTIPLIER: int = 3


class EnemyDefaults:
    """Enemy speed range, in grid cells per second."""
    MIN_SPEED: float = 1.0
    MAX_SPEED: float = 2.0


# ===========================================================
# Spawning
# ===========================================================

class Spawning:
    """Defaults for the spawn manager (overridable from game.yaml)."""
    ENEMY_INTERVAL: float = 1.5
    BONUS_INTERVAL: float = 4.0
    MAX_ENEMIES: int = 6
    MAX_BONUSES: int = 3
    LIFE_CHANCE: float = 0.2


# ===========================================================
# Collision
# ===========================================================

class Collision:
    """
    Hitbox inset inside a 101x171 tile sprite.

    The visible part of every tile sprite sits in the lower half of the
    image, so all entities share the same inset rectangle.
    """
    HITBOX_OFFSET = (10, 77)
    HITBOX_SIZE = (81, 66)


# ===========================================================
# Sprites & HUD
# ===========================================================

class Sprites:
    """Sprite identifiers resolved by the DrawManager."""
    SELECTOR: str = "images/Selector.png"
    ENEMY: str = "images/enemy-bug.png"
    ROCK: str = "images/Rock.png"
    HEART: str = "images/Heart.png"
    GEMS = ("images/GemBlue.png", "images/GemGreen.png", "images/GemOrange.png")
    GEM_ICON: str = "images/GemGreen.png"
    PLAYERS = (
        "images/char-cat-girl.png",
        "images/char-horn-girl.png",
        "images/char-boy.png",
        "images/char-pink-girl.png",
        "images/char-princess-girl.png",
    )


class Hud:
    """Inventory overlay layout."""
    ICON_SCALE: float = 0.3
    MARGIN_X: int = 5
    GEMS_Y: int = 35
    LIVES_Y: int = 540
