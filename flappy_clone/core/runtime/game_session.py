"""
game_session.py
---------------
Single owner of all mutable game state for one process: the avatar, the
obstacle field, the state machine, cross-run stats and the viewport size.

Responsibilities
----------------
- Translate the abstract input signal into start / restart / flap through
  the state machine's transition table.
- Run the per-tick simulation step while PLAYING.
- Detect collisions after each step and end the run.
- Broadcast gameplay events for stats and logging.

All methods run on the loop thread. Input handlers apply their effects
synchronously, so a reset is always complete before the next tick.
"""

import random
import time

from flappy_clone.core.debug.debug_logger import DebugLogger
from flappy_clone.core.runtime.game_settings import Debug, Display, ObstacleConfig
from flappy_clone.core.runtime.game_state import (
    GameEvent, GameState, GameStateMachine, SideEffect
)
from flappy_clone.core.runtime.session_stats import SessionStats
from flappy_clone.core.services.event_manager import (
    EventManager, FlapEvent, GameOverEvent, ObstaclePassedEvent, StateChangedEvent
)
from flappy_clone.entities.avatar import Avatar
from flappy_clone.systems.collision_detector import CollisionDetector
from flappy_clone.systems.obstacle_field import ObstacleField


def min_viewport_height():
    """
    Smallest height that keeps spawned obstacles well-formed.

    top_height can approach height / 2, so the bottom block only stays
    non-negative while height >= 2 * gap.
    """
    return max(Display.MIN_HEIGHT, 2 * ObstacleConfig.GAP)


def clamp_viewport(width, height):
    """Clamp viewport dimensions to the smallest size the game supports."""
    return max(int(width), Display.MIN_WIDTH), max(int(height), min_viewport_height())


def _default_time_ms():
    return time.perf_counter() * 1000.0


class GameSession:
    """Explicit game session passed to the loop, renderer and input layer."""

    def __init__(self, width=None, height=None, time_source=None, rng=None,
                 avatar=None, field=None, events=None, spawn_interval_ms=None):
        """
        Args:
            width, height: Initial viewport (defaults from Display)
            time_source: Callable returning the current time in ms
            rng: random.Random used for obstacle openings
            avatar: Pre-built Avatar (tests)
            field: Pre-built ObstacleField (tests)
            events: EventManager to publish on (new one if None)
            spawn_interval_ms: Spawn interval override
        """
        self.time_source = time_source or _default_time_ms
        self.rng = rng or random.Random()

        self.width, self.height = clamp_viewport(
            Display.WIDTH if width is None else width,
            Display.HEIGHT if height is None else height,
        )
        self.events = events if events is not None else EventManager()
        self.state_machine = GameStateMachine()
        self.state_machine.add_listener(self._on_transition)

        self.avatar = avatar if avatar is not None else Avatar()
        self.avatar.reset_position(self.height)

        # An empty ObstacleField is falsy (__len__), so test against None
        if field is None:
            field = ObstacleField(
                now=self.time_source(),
                spawn_interval_ms=spawn_interval_ms,
                rng=self.rng,
            )
        elif spawn_interval_ms is not None:
            field.spawn_interval_ms = spawn_interval_ms
        self.field = field

        self.stats = SessionStats()
        self.stats.bind(self.events)

        self.ticks_played = 0
        self.last_collision = None
        self.show_debug_overlay = Debug.SHOW_OVERLAY

        DebugLogger.init_entry("GameSession")
        DebugLogger.init_sub(f"Viewport {self.width}x{self.height}", level=1)

    # ===========================================================
    # Queries
    # ===========================================================

    @property
    def state(self) -> GameState:
        return self.state_machine.state

    @property
    def score(self) -> int:
        return self.field.score

    @property
    def obstacles(self):
        return self.field.obstacles

    # ===========================================================
    # External Signals
    # ===========================================================

    def assets_ready(self):
        """Completion signal from the asset loader."""
        self.state_machine.fire(GameEvent.ASSETS_READY)

    def handle_input(self):
        """
        The single activate signal from every input channel.

        READY/GAMEOVER -> start a fresh run; PLAYING -> flap;
        LOADING -> ignored.
        """
        effect = self.state_machine.fire(GameEvent.INPUT)

        if effect is SideEffect.RESET:
            self.reset()
        elif effect is SideEffect.FLAP:
            self.avatar.flap()
            self.events.dispatch(FlapEvent(velocity=self.avatar.velocity))

    def set_viewport(self, width, height):
        """Update the viewport, clamping degenerate sizes."""
        clamped = clamp_viewport(width, height)
        if clamped[0] > width or clamped[1] > height:
            DebugLogger.warn(
                f"Viewport {width}x{height} clamped to {clamped[0]}x{clamped[1]}",
                category="display"
            )
        self.width, self.height = clamped

    def toggle_debug_overlay(self) -> bool:
        """Flip the debug overlay for this session. Returns the new value."""
        self.show_debug_overlay = not self.show_debug_overlay
        return self.show_debug_overlay

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def reset(self):
        """Full reset of avatar, obstacles and score."""
        self.avatar.reset_position(self.height)
        self.field.reset(self.time_source())
        self.ticks_played = 0
        self.last_collision = None
        DebugLogger.action("Run reset", category="game_state")

    # ===========================================================
    # Simulation Step
    # ===========================================================

    def update(self) -> bool:
        """
        One simulation step. Does nothing unless PLAYING.

        Returns:
            bool: True if the run ended on this tick
        """
        if not self.state_machine.is_playing:
            return False

        self.ticks_played += 1
        self.avatar.update()

        passed = self.field.tick(self.time_source(), self.width, self.height, self.avatar)
        if passed:
            DebugLogger.action(f"Score {self.field.score}", category="score")
            self.events.dispatch(ObstaclePassedEvent(passed=passed, score=self.field.score))

        cause = CollisionDetector.find_collision(self.avatar, self.field.obstacles, self.height)
        if cause is None:
            return False

        self.last_collision = cause
        self.state_machine.fire(GameEvent.COLLISION)
        DebugLogger.state(
            f"Run over ({cause}) after {self.ticks_played} ticks, score {self.field.score}"
        )
        self.events.dispatch(
            GameOverEvent(score=self.field.score, cause=cause, ticks=self.ticks_played)
        )
        return True

    # ===========================================================
    # Internal
    # ===========================================================

    def _on_transition(self, previous, current, event):
        self.events.dispatch(StateChangedEvent(previous=previous, current=current, trigger=event))
