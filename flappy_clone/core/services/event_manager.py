"""
event_manager.py
----------------
Event-driven system for decoupled game component communication.
Lets stats, logging and the renderer react to gameplay without the
session knowing about them.

One EventManager instance is owned by each GameSession; there is no
module-level singleton.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Type

from flappy_clone.core.debug.debug_logger import DebugLogger


# ===========================================================
# Event Definitions
# ===========================================================

@dataclass(frozen=True)
class BaseEvent:
    """Base class for all events."""
    pass


@dataclass(frozen=True)
class StateChangedEvent(BaseEvent):
    """Dispatched after every legal state transition."""
    previous: object
    current: object
    trigger: object


@dataclass(frozen=True)
class FlapEvent(BaseEvent):
    """Dispatched when the avatar receives a flap impulse."""
    velocity: float


@dataclass(frozen=True)
class ObstaclePassedEvent(BaseEvent):
    """Dispatched when one or more obstacles were scored this tick."""
    passed: int
    score: int


@dataclass(frozen=True)
class GameOverEvent(BaseEvent):
    """Dispatched when a run ends on a collision."""
    score: int
    cause: str
    ticks: int


# ===========================================================
# Event Manager
# ===========================================================

class EventManager:
    """Central event dispatcher using pub-sub pattern."""

    def __init__(self):
        self._subscribers: Dict[Type[BaseEvent], List[Callable]] = {}

    # ===========================================================
    # Subscription
    # ===========================================================

    def subscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        """
        Register a callback for an event type.

        Args:
            event_type: Event class to listen for
            callback: Function to call when event fires
        """
        subscribers = self._subscribers.setdefault(event_type, [])
        if callback in subscribers:
            return

        subscribers.append(callback)
        callback_name = getattr(callback, '__name__', repr(callback))
        DebugLogger.system(
            f"Subscribed '{callback_name}' to '{event_type.__name__}'",
            category="event_manager"
        )

    # ===========================================================
    # Dispatch
    # ===========================================================

    def dispatch(self, event: BaseEvent) -> None:
        """
        Send event to all registered callbacks.

        A failing callback is logged and does not stop the others.

        Args:
            event: Event instance to dispatch
        """
        for callback in list(self._subscribers.get(type(event), ())):
            try:
                callback(event)
            except Exception as e:
                callback_name = getattr(callback, '__name__', repr(callback))
                DebugLogger.warn(f"Error in event callback {callback_name}: {e}")
