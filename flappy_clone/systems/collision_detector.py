"""
collision_detector.py
---------------------
Pure geometry checks between the avatar, obstacles and the screen edges.

Nothing here mutates state; the session decides what a hit means.
All comparisons are strict, so an avatar exactly touching an edge of the
opening (or of the screen) does not collide.
"""

from flappy_clone.core.debug.debug_logger import DebugLogger


class CollisionTags:
    """Tags returned by CollisionDetector.find_collision."""
    BOUNDARY = "boundary"
    OBSTACLE = "obstacle"


class CollisionDetector:
    """Stateless collision predicates."""

    @staticmethod
    def collides_with_obstacle(avatar, obstacle) -> bool:
        """
        True if the avatar overlaps the obstacle's column and is outside
        the opening (above its top edge or below its bottom edge).
        """
        overlaps_column = avatar.right > obstacle.left and avatar.left < obstacle.right
        if not overlaps_column:
            return False

        return avatar.top < obstacle.top_height or avatar.bottom > obstacle.opening_bottom

    @staticmethod
    def collides_with_boundary(avatar, screen_height) -> bool:
        """True if the avatar left the screen through the top or bottom."""
        return avatar.top < 0 or avatar.bottom > screen_height

    @classmethod
    def find_collision(cls, avatar, obstacles, screen_height):
        """
        Check the boundary, then every live obstacle.

        Returns:
            str | None: CollisionTags.BOUNDARY, CollisionTags.OBSTACLE, or None
        """
        if cls.collides_with_boundary(avatar, screen_height):
            DebugLogger.trace(f"{avatar} hit screen boundary")
            return CollisionTags.BOUNDARY

        for obstacle in obstacles:
            if cls.collides_with_obstacle(avatar, obstacle):
                DebugLogger.trace(f"{avatar} hit {obstacle}")
                return CollisionTags.OBSTACLE

        return None
