"""
asset_loader.py
---------------
Loads the avatar sprite and reports completion.

The game loop polls the loader while the session is LOADING and sends the
session its assets-ready signal once poll() returns True. A missing or
undecodable image does not block the game: a solid placeholder of the
avatar's size is used instead and a warning is logged.
"""

import pygame

from flappy_clone.core.debug.debug_logger import DebugLogger
from flappy_clone.core.runtime.game_settings import AvatarConfig


class AssetLoader:
    """Avatar sprite handle plus a one-shot completion flag."""

    PLACEHOLDER_COLOR = (255, 0, 255)

    def __init__(self, sprite_path=None, size=None):
        """
        Args:
            sprite_path: Image file for the avatar (AvatarConfig.SPRITE_PATH if None)
            size: Placeholder size (avatar box if None)
        """
        self.sprite_path = sprite_path or AvatarConfig.SPRITE_PATH
        self.size = size or (AvatarConfig.WIDTH, AvatarConfig.HEIGHT)
        self.sprite = None
        self.is_ready = False
        self.used_placeholder = False

    def poll(self) -> bool:
        """Load on first call; afterwards just report readiness."""
        if not self.is_ready:
            self.sprite = self._load_sprite()
            self.is_ready = True
            DebugLogger.system("Assets ready", category="loading")
        return self.is_ready

    # ===========================================================
    # Loading
    # ===========================================================

    def _load_sprite(self):
        try:
            image = pygame.image.load(self.sprite_path)
        except (FileNotFoundError, pygame.error) as e:
            DebugLogger.warn(f"Missing avatar sprite at {self.sprite_path}: {e}", category="loading")
            return self._placeholder()

        # convert_alpha() needs an open display
        if pygame.display.get_surface() is not None:
            image = image.convert_alpha()

        DebugLogger.action(f"Loaded avatar sprite {self.sprite_path}", category="loading")
        return image

    def _placeholder(self):
        self.used_placeholder = True
        surface = pygame.Surface(self.size, pygame.SRCALPHA)
        surface.fill(self.PLACEHOLDER_COLOR)
        return surface
