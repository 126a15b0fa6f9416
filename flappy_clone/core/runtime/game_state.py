"""
game_state.py
-------------
Game flow state machine.

States
------
LOADING   initial; waiting for the asset loader's completion signal
READY     assets loaded; waiting for the first input
PLAYING   simulation active
GAMEOVER  simulation frozen; waiting for input to restart

Every legal move is listed in TRANSITIONS as
(state, event) -> (next state, side effect). Pairs missing from the table
are ignored, e.g. input received while LOADING.

If the completion signal never arrives the machine stays in LOADING;
there is no timeout.
"""

from enum import Enum

from flappy_clone.core.debug.debug_logger import DebugLogger


class GameState(Enum):
    """High-level game flow states."""
    LOADING = "loading"
    READY = "ready"
    PLAYING = "playing"
    GAMEOVER = "gameover"


class GameEvent(Enum):
    """Inputs to the state machine."""
    ASSETS_READY = "assets_ready"
    INPUT = "input"
    COLLISION = "collision"


class SideEffect(Enum):
    """Action the session performs after a transition."""
    NONE = "none"
    RESET = "reset"
    FLAP = "flap"


TRANSITIONS = {
    (GameState.LOADING, GameEvent.ASSETS_READY): (GameState.READY, SideEffect.NONE),
    (GameState.READY, GameEvent.INPUT): (GameState.PLAYING, SideEffect.RESET),
    (GameState.PLAYING, GameEvent.INPUT): (GameState.PLAYING, SideEffect.FLAP),
    (GameState.PLAYING, GameEvent.COLLISION): (GameState.GAMEOVER, SideEffect.NONE),
    (GameState.GAMEOVER, GameEvent.INPUT): (GameState.PLAYING, SideEffect.RESET),
}


class GameStateMachine:
    """Table-driven state holder. Exactly one state at a time."""

    def __init__(self, initial=GameState.LOADING, transitions=None):
        self._state = initial
        self.transitions = TRANSITIONS if transitions is None else transitions
        self._listeners = []

    # ===========================================================
    # Queries
    # ===========================================================

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def is_playing(self) -> bool:
        return self._state is GameState.PLAYING

    def can_fire(self, event: GameEvent) -> bool:
        """Check whether event is legal in the current state."""
        return (self._state, event) in self.transitions

    # ===========================================================
    # Transitions
    # ===========================================================

    def fire(self, event: GameEvent):
        """
        Apply the transition for (current state, event).

        Args:
            event: GameEvent to feed the machine

        Returns:
            SideEffect | None: The side effect to perform, or None if the
            event is not legal in the current state (no-op).
        """
        entry = self.transitions.get((self._state, event))
        if entry is None:
            DebugLogger.trace(
                f"Ignored {event.name} in {self._state.name}", category="game_state"
            )
            return None

        previous = self._state
        self._state, effect = entry

        if previous is not self._state:
            DebugLogger.state(f"[{previous.name}] → [{self._state.name}] on {event.name}")

        for listener in list(self._listeners):
            listener(previous, self._state, event)

        return effect

    def add_listener(self, callback):
        """Register callback(previous, current, event) for every legal transition."""
        if callback not in self._listeners:
            self._listeners.append(callback)
