"""
session_stats.py
----------------
Tracks statistics across runs for the lifetime of the process.
Nothing here is written to disk; a new process starts from zero.
"""

from flappy_clone.core.debug.debug_logger import DebugLogger
from flappy_clone.core.services.event_manager import GameOverEvent


# ===========================================================
# Session Stats
# ===========================================================

class SessionStats:
    """Container for cross-run statistics. Owned by a GameSession."""

    def __init__(self):
        self.best_score = 0
        self.last_score = 0
        self.runs_played = 0
        self.total_obstacles_passed = 0

    def bind(self, events):
        """Subscribe to the session's event bus."""
        events.subscribe(GameOverEvent, self.on_game_over)

    # ===========================================================
    # Event Handlers
    # ===========================================================

    def on_game_over(self, event: GameOverEvent):
        """Record a finished run."""
        self.runs_played += 1
        self.last_score = event.score
        self.total_obstacles_passed += event.score

        if event.score > self.best_score:
            self.best_score = event.score
            DebugLogger.action(f"New best score: {event.score}", category="score")
