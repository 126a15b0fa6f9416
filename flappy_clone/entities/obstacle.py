"""
obstacle.py
-----------
A single obstacle: a solid top block and a solid bottom block with a
passable opening between them, moving right-to-left at constant speed.

Geometry
--------
    top block:    (x, 0, width, top_height)
    opening:      top_height .. top_height + gap
    bottom block: (x, screen_height - bottom_height, width, bottom_height)

bottom_height is derived at spawn time as screen_height - top_height - gap,
so the two blocks and the opening always tile the full column. The obstacle
remembers the screen height it was spawned for; a later window resize does
not reshape obstacles already on screen.
"""

import random

from flappy_clone.core.runtime.game_settings import ObstacleConfig


class Obstacle:
    """Gap obstacle with spawn-time randomized opening."""

    __slots__ = (
        'x', 'width', 'gap', 'speed', 'screen_height',
        'top_height', 'bottom_height', 'passed'
    )

    def __init__(self, x, top_height, screen_height, width=None, gap=None, speed=None):
        """
        Build an obstacle with an explicit opening.

        Args:
            x: Left edge
            top_height: Height of the top block (opening's top edge)
            screen_height: Viewport height the obstacle spans
            width: Column width (default ObstacleConfig.WIDTH)
            gap: Opening height (default ObstacleConfig.GAP)
            speed: Pixels moved left per tick (default ObstacleConfig.SPEED)
        """
        self.width = ObstacleConfig.WIDTH if width is None else width
        self.gap = ObstacleConfig.GAP if gap is None else gap
        self.speed = ObstacleConfig.SPEED if speed is None else speed

        if self.width <= 0:
            raise ValueError(f"Obstacle width must be positive, got {self.width}")
        if self.gap <= 0:
            raise ValueError(f"Obstacle gap must be positive, got {self.gap}")
        if self.speed <= 0:
            raise ValueError(f"Obstacle speed must be positive, got {self.speed}")

        self.x = float(x)
        self.screen_height = screen_height
        self.top_height = top_height
        self.bottom_height = screen_height - (top_height + self.gap)
        self.passed = False

    @classmethod
    def spawn(cls, screen_width, screen_height, gap_size=None, speed=None,
              width=None, rng=None):
        """
        Create a new obstacle at the right edge of the screen.

        The opening's top edge is drawn uniformly from [0, screen_height / 2).

        Args:
            screen_width: Spawn x (just off the right edge)
            screen_height: Viewport height
            gap_size: Opening height
            speed: Pixels per tick
            width: Column width
            rng: random.Random-like source (module random if None)
        """
        rng = rng or random
        top_height = rng.random() * (screen_height / 2)
        return cls(screen_width, top_height, screen_height,
                   width=width, gap=gap_size, speed=speed)

    # ===========================================================
    # Movement
    # ===========================================================

    def advance(self):
        """Move left by speed."""
        self.x -= self.speed

    def is_offscreen(self) -> bool:
        """True once the trailing edge has left the screen."""
        return self.x + self.width < 0

    # ===========================================================
    # Geometry
    # ===========================================================

    @property
    def left(self):
        return self.x

    @property
    def right(self):
        return self.x + self.width

    @property
    def opening_bottom(self):
        """y where the bottom block starts."""
        return self.screen_height - self.bottom_height

    def bounds_top(self):
        """Top block as (x, y, width, height)."""
        return self.x, 0, self.width, self.top_height

    def bounds_bottom(self):
        """Bottom block as (x, y, width, height)."""
        return self.x, self.screen_height - self.bottom_height, self.width, self.bottom_height

    def __repr__(self) -> str:
        return (
            f"<Obstacle x={self.x:.1f} top={self.top_height:.1f} "
            f"bottom={self.bottom_height:.1f} passed={self.passed}>"
        )
