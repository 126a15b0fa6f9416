"""
game_loop.py
------------
Defines the GameLoop that drives the fixed-cadence update/render cycle.

Responsibilities
----------------
- Poll the asset loader until the session leaves LOADING
- Drain pending input events before each step
- Run exactly one simulation step per tick, then render
- Pace ticks with pygame.time.Clock at Display.FPS
- Warn (throttled) about frames slower than Debug.FRAME_TIME_WARNING

Timing
------
The physics constants are per-tick, not per-second: one tick is one
simulation step regardless of how long the frame actually took. Ticks never
overlap; everything runs on the calling thread.
"""

import time

import pygame

from flappy_clone.core.debug.debug_logger import DebugLogger
from flappy_clone.core.runtime.game_settings import Debug, Display
from flappy_clone.core.runtime.game_state import GameState


class GameLoop:
    """Composes session, input, assets and renderer into ticks."""

    def __init__(self, session, renderer, input_manager, asset_loader,
                 display=None, clock=None, event_source=None, fps=None):
        """
        Args:
            session: GameSession being simulated
            renderer: GameRenderer drawing the session
            input_manager: InputManager routing events
            asset_loader: AssetLoader polled while LOADING
            display: DisplayManager (resize handling), optional
            clock: pygame.time.Clock-like pacing object
            event_source: Callable returning pending events (pygame.event.get)
            fps: Target tick rate (Display.FPS if None)
        """
        self.session = session
        self.renderer = renderer
        self.input_manager = input_manager
        self.asset_loader = asset_loader
        self.display = display

        self.clock = clock or pygame.time.Clock()
        self.event_source = event_source or pygame.event.get
        self.fps = fps or Display.FPS

        self.running = True
        self.tick_count = 0
        self._last_perf_warn_time = 0.0

        DebugLogger.init_entry("GameLoop Runtime")

    # ===========================================================
    # Core Runtime Loop
    # ===========================================================

    def run(self, max_ticks=None):
        """
        Tick until quit is requested or max_ticks ticks have run.

        Args:
            max_ticks: Stop after this many ticks (None = unbounded)
        """
        DebugLogger.section("Game Loop")

        while self.running:
            self.clock.tick(self.fps)
            self.tick()

            if max_ticks is not None and self.tick_count >= max_ticks:
                break

        DebugLogger.system(f"Loop stopped after {self.tick_count} ticks")

    def tick(self):
        """One update-then-render iteration."""
        start = time.perf_counter()

        if self.session.state is GameState.LOADING and self.asset_loader.poll():
            self.renderer.sprite = self.asset_loader.sprite
            self.session.assets_ready()

        self.input_manager.process_events(self.event_source(), self.session, self.display)
        if self.input_manager.quit_requested:
            self.running = False

        self.session.update()

        t_render = time.perf_counter()
        self.renderer.render(self.session, fps=self.clock.get_fps())
        render_ms = (time.perf_counter() - t_render) * 1000

        self.tick_count += 1
        self._check_frame_time((time.perf_counter() - start) * 1000, render_ms)

    def stop(self):
        """Request the loop to exit after the current tick."""
        self.running = False

    # ===========================================================
    # Profiling
    # ===========================================================

    def _check_frame_time(self, frame_ms, render_ms):
        if frame_ms <= Debug.FRAME_TIME_WARNING:
            return

        now = time.perf_counter()
        if now - self._last_perf_warn_time > 1.0:  # Throttle to 1/sec
            self._last_perf_warn_time = now
            DebugLogger.warn(
                f"SLOW FRAME: {frame_ms:.2f} ms (Render={render_ms:.2f})",
                category="performance"
            )
