"""
avatar.py
---------
The player-controlled falling entity.

Coordinate System
-----------------
Unlike sprite entities centered on their position, the avatar uses its
top-left corner: (x, y) is the top edge / left edge of the bounding box.
x never changes after creation; obstacles move instead.

Physics
-------
update() applies a fixed per-tick gravity increment and is NOT scaled by
elapsed time. Constants are tuned for Display.FPS, so the fall speed follows
the real tick rate of the host.
"""

from flappy_clone.core.runtime.game_settings import AvatarConfig


class Avatar:
    """Bounding-box avatar with gravity integration and a flap impulse."""

    __slots__ = ('x', 'y', 'width', 'height', 'velocity', 'gravity', 'flap_strength')

    def __init__(self, x=None, y=0.0, width=None, height=None,
                 gravity=None, flap_strength=None):
        """
        Create the avatar. Omitted values come from AvatarConfig.

        Args:
            x: Fixed left edge
            y: Initial top edge
            width, height: Bounding box size (must be positive)
            gravity: Velocity added every tick
            flap_strength: Velocity set by flap() (negative = upwards)
        """
        self.x = float(AvatarConfig.X if x is None else x)
        self.y = float(y)
        self.width = AvatarConfig.WIDTH if width is None else width
        self.height = AvatarConfig.HEIGHT if height is None else height
        self.velocity = 0.0
        self.gravity = AvatarConfig.GRAVITY if gravity is None else gravity
        self.flap_strength = AvatarConfig.FLAP_STRENGTH if flap_strength is None else flap_strength

        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Avatar size must be positive, got {self.width}x{self.height}")

    # ===========================================================
    # Physics
    # ===========================================================

    def flap(self):
        """Overwrite velocity with the flap impulse (never accumulates)."""
        self.velocity = self.flap_strength

    def update(self):
        """Advance one tick: velocity += gravity, then y += velocity."""
        self.velocity += self.gravity
        self.y += self.velocity

    def reset_position(self, screen_height):
        """Center vertically and stop."""
        self.y = screen_height / 2
        self.velocity = 0.0

    # ===========================================================
    # Bounds
    # ===========================================================

    @property
    def left(self):
        return self.x

    @property
    def right(self):
        return self.x + self.width

    @property
    def top(self):
        return self.y

    @property
    def bottom(self):
        return self.y + self.height

    def rect(self):
        """Bounding box as (x, y, width, height)."""
        return self.x, self.y, self.width, self.height

    def __repr__(self) -> str:
        return f"<Avatar pos=({self.x:.1f}, {self.y:.1f}) v={self.velocity:.2f}>"
