"""
Runtime configuration and game flow exports.

Settings are lightweight class constants with no initialization overhead.
"""

from flappy_clone.core.runtime.game_settings import (
    Display,
    AvatarConfig,
    ObstacleConfig,
    Colors,
    Fonts,
    Debug,
)
from flappy_clone.core.runtime.game_state import GameState, GameEvent, SideEffect

__all__ = [
    # Configuration
    'Display',
    'AvatarConfig',
    'ObstacleConfig',
    'Colors',
    'Fonts',
    'Debug',
    # Game flow
    'GameState',
    'GameEvent',
    'SideEffect',
]
