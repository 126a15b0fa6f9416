"""
game_settings.py
----------------
Centralized constants for all game systems.

Values here are the built-in defaults. flappy_clone/config/game.json may
override them once at startup (see apply_overrides).
"""

from flappy_clone.core.debug.debug_logger import DebugLogger


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Screen and window configuration."""
    WIDTH: int = 400
    HEIGHT: int = 600
    FPS: int = 60
    CAPTION: str = "Flappy Bird Clone"

    # Smallest viewport the simulation accepts (resize/clamp floor)
    MIN_WIDTH: int = 100
    MIN_HEIGHT: int = 300  # >= 2 * ObstacleConfig.GAP


# ===========================================================
# Avatar
# ===========================================================

class AvatarConfig:
    """Avatar geometry and per-frame physics constants."""
    X: float = 50
    WIDTH: int = 34
    HEIGHT: int = 24

    # Fixed per-tick increments, tuned for Display.FPS
    GRAVITY: float = 0.5
    FLAP_STRENGTH: float = -10

    SPRITE_PATH: str = "assets/images/Finn.PNG"


# ===========================================================
# Obstacles
# ===========================================================

class ObstacleConfig:
    """Obstacle geometry, speed and spawn cadence."""
    WIDTH: int = 60
    GAP: int = 150
    SPEED: float = 2
    SPAWN_INTERVAL_MS: int = 1500


# ===========================================================
# Colors & Fonts
# ===========================================================

class Colors:
    """RGB / RGBA colors used by the renderer."""
    BACKGROUND = (112, 197, 206)
    OBSTACLE = (0, 128, 0)
    TEXT = (255, 255, 255)
    OVERLAY = (0, 0, 0, 128)
    DEBUG = (255, 255, 0)


class Fonts:
    """Font family and sizes (pixels)."""
    FAMILY: str = "arial"
    SCORE: int = 24
    TITLE: int = 36
    PROMPT: int = 20
    DEBUG: int = 14


# ===========================================================
# Debug Display
# ===========================================================

class Debug:
    """Visual debug toggles -- not related to logging."""
    SHOW_OVERLAY: bool = False
    FRAME_TIME_WARNING: float = 16.67


# ===========================================================
# Config Overrides
# ===========================================================

SETTINGS_SECTIONS = {
    "display": Display,
    "avatar": AvatarConfig,
    "obstacles": ObstacleConfig,
    "debug": Debug,
}


def settings_defaults() -> dict:
    """Snapshot current constants as a nested dict keyed like game.json."""
    defaults = {}
    for section, cls in SETTINGS_SECTIONS.items():
        defaults[section] = {
            name.lower(): value
            for name, value in vars(cls).items()
            if name.isupper()
        }
    return defaults


def apply_overrides(config: dict) -> None:
    """
    Push loaded config values onto the constant classes.

    Unknown sections or keys are reported and skipped.

    Args:
        config: Nested dict, e.g. {"obstacles": {"gap": 160}}
    """
    for section, values in config.items():
        cls = SETTINGS_SECTIONS.get(section)
        if cls is None or not isinstance(values, dict):
            DebugLogger.warn(f"Unknown settings section '{section}'", category="loading")
            continue

        for key, value in values.items():
            attr = key.upper()
            if not hasattr(cls, attr):
                DebugLogger.warn(f"Unknown setting '{section}.{key}'", category="loading")
                continue
            setattr(cls, attr, value)
