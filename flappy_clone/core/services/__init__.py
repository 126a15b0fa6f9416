"""
Core services exports.

Only the pygame-free services are re-exported here; import the display,
input and asset services from their modules directly.
"""

from flappy_clone.core.services.config_manager import load_config
from flappy_clone.core.services.event_manager import (
    EventManager,
    BaseEvent,
    StateChangedEvent,
    FlapEvent,
    ObstaclePassedEvent,
    GameOverEvent,
)

__all__ = [
    # Config
    'load_config',
    # Events
    'EventManager',
    'BaseEvent',
    'StateChangedEvent',
    'FlapEvent',
    'ObstaclePassedEvent',
    'GameOverEvent',
]
