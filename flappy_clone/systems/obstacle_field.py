"""
obstacle_field.py
-----------------
Owns the live obstacles of a run: spawns them on a timer, moves them,
evicts the ones that left the screen and scores the ones the avatar passed.

Responsibilities
----------------
- Keep obstacles in spawn order, which is also left-to-right order.
- Spawn a new obstacle whenever the spawn interval has elapsed.
- Drop off-screen obstacles without reordering the rest.
- Score each obstacle at most once, via its `passed` flag.
"""

from flappy_clone.core.debug.debug_logger import DebugLogger
from flappy_clone.core.runtime.game_settings import ObstacleConfig
from flappy_clone.entities.obstacle import Obstacle


class ObstacleField:
    """Ordered collection of live obstacles plus spawn timer and score."""

    # ===========================================================
    # Initialization
    # ===========================================================
    def __init__(self, now=0.0, spawn_interval_ms=None, gap=None, speed=None,
                 width=None, rng=None):
        """
        Args:
            now: Current time (ms) used as the first spawn reference
            spawn_interval_ms: Default interval between spawns
            gap: Opening height for spawned obstacles
            speed: Pixels per tick for spawned obstacles
            width: Column width for spawned obstacles
            rng: random.Random-like source passed to Obstacle.spawn
        """
        self.obstacles = []
        self.score = 0
        self.last_spawn = now

        self.spawn_interval_ms = (
            ObstacleConfig.SPAWN_INTERVAL_MS if spawn_interval_ms is None else spawn_interval_ms
        )
        self.gap = gap
        self.speed = speed
        self.width = width
        self.rng = rng

        self._spawn_count = 0

    # ===========================================================
    # Per-Tick Update
    # ===========================================================
    def tick(self, now, screen_width, screen_height, avatar, spawn_interval_ms=None) -> int:
        """
        Run one simulation step for all obstacles.

        Order: spawn (if due) -> advance -> evict -> score.

        Args:
            now: Current time in ms
            screen_width: Viewport width (spawn x)
            screen_height: Viewport height
            avatar: Avatar whose x decides scoring
            spawn_interval_ms: Override for this tick's spawn interval

        Returns:
            int: Number of obstacles scored on this tick
        """
        interval = self.spawn_interval_ms if spawn_interval_ms is None else spawn_interval_ms

        if now - self.last_spawn > interval:
            self._spawn(screen_width, screen_height)
            self.last_spawn = now

        for obstacle in self.obstacles:
            obstacle.advance()

        self._evict_offscreen()
        return self._score_passed(avatar)

    def reset(self, now):
        """Empty the field, zero the score and restart the spawn timer."""
        self.obstacles = []
        self.score = 0
        self.last_spawn = now
        DebugLogger.trace("Obstacle field reset", category="entity_spawn")

    # ===========================================================
    # Internal Steps
    # ===========================================================
    def _spawn(self, screen_width, screen_height):
        obstacle = Obstacle.spawn(
            screen_width, screen_height,
            gap_size=self.gap, speed=self.speed, width=self.width, rng=self.rng
        )
        self.obstacles.append(obstacle)
        self._spawn_count += 1
        DebugLogger.trace(f"Spawned #{self._spawn_count} {obstacle}", category="entity_spawn")

    def _evict_offscreen(self):
        before = len(self.obstacles)
        self.obstacles = [o for o in self.obstacles if not o.is_offscreen()]

        removed = before - len(self.obstacles)
        if removed:
            DebugLogger.trace(f"Removed {removed} off-screen obstacle(s)", category="entity_cleanup")

    def _score_passed(self, avatar) -> int:
        passed = 0
        for obstacle in self.obstacles:
            if not obstacle.passed and obstacle.x + obstacle.width < avatar.x:
                obstacle.passed = True
                passed += 1

        self.score += passed
        return passed

    # ===========================================================
    # Queries
    # ===========================================================
    def __iter__(self):
        return iter(self.obstacles)

    def __len__(self):
        return len(self.obstacles)
