"""
game_settings.py
----------------
Centralized constants for all game systems.
"""


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Screen and window configuration."""
    WIDTH: int = 960
    HEIGHT: int = 640
    FPS: int = 60
    CAPTION: str = "Pushball"
    BACKGROUND_COLOR = (28, 32, 40)


# ===========================================================
# Font Configuration
# ===========================================================

class Fonts:
    DEFAULT: str = None  # pygame's built-in font
    SIZE: int = 24


# ===========================================================
# Physics & Timing
# ===========================================================

class Physics:
    """Physics and update timing."""
    UPDATE_RATE: int = 60
    FIXED_DT: float = 1 / UPDATE_RATE
    MAX_FRAME_TIME: float = 0.1
    ITERATIONS: int = 20
    DAMPING: float = 0.35  # Fraction of velocity kept per second (top-down friction)
    WALL_THICKNESS: int = 16


# ===========================================================
# Rendering Layers
# ===========================================================

class Layers:
    """Z-order for rendering."""
    BACKGROUND: int = 0
    GOAL: int = 100
    PROPS: int = 200
    PLAYER: int = 300
    UI: int = 600
    DEBUG: int = 900


# ===========================================================
# Player Defaults
# ===========================================================

class Player:
    """Player configuration defaults (overridden by player.json)."""
    SPEED: float = 200.0
    RADIUS: float = 14.0
    SPIN_RANGE: tuple = (2.0, 4.0)
    IDLE_VELOCITY_EPSILON: float = 1e-3


# ===========================================================
# Sprite Sheet Layout
# ===========================================================

class Sprites:
    """Character sheet geometry. One row per facing direction."""
    FRAME_SIZE: tuple = (32, 32)
    DIRECTIONS: int = 4
    FRAMES_PER_ROW: int = 4


# ===========================================================
# Goal
# ===========================================================

class Goal:
    """Goal region defaults."""
    TARGET_BODY: str = "Ball"
    REGION_NAME: str = "Goal"


# ===========================================================
# Debug Display
# ===========================================================

class Debug:
    """Visual debug toggles -- not related to logging."""
    DRAW_PHYSICS_SHAPES: bool = True
    SHOW_FPS: bool = False
