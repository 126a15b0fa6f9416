"""
display_manager.py
------------------
Window management for a resizable play area.

Responsibilities:
- Window creation
- Tracking the current viewport size, clamped to Display.MIN_WIDTH/HEIGHT
- Recreating the window surface on resize
"""

import pygame

from flappy_clone.core.debug.debug_logger import DebugLogger
from flappy_clone.core.runtime.game_settings import Display
from flappy_clone.core.runtime.game_session import clamp_viewport


class DisplayManager:
    """Owns the pygame window and reports the usable viewport."""

    def __init__(self, width=None, height=None, caption=None):
        """
        Create the window.

        Args:
            width: Initial window width (Display.WIDTH if None)
            height: Initial window height (Display.HEIGHT if None)
            caption: Window title (Display.CAPTION if None)
        """
        DebugLogger.init_entry("DisplayManager")

        self.width, self.height = self._clamp(
            Display.WIDTH if width is None else width,
            Display.HEIGHT if height is None else height,
        )
        self.window = None
        self._resize_listeners = []
        self._create_window()
        pygame.display.set_caption(caption or Display.CAPTION)

        DebugLogger.init_sub(f"Display Mode: Windowed ({self.width}x{self.height})", level=1)

    # ===========================================================
    # Window Management
    # ===========================================================

    def resize(self, width, height):
        """
        Apply a new window size.

        Degenerate sizes are clamped to the minimum viewport instead of
        being rejected.
        """
        new_size = self._clamp(width, height)
        if new_size == (self.width, self.height):
            return

        self.width, self.height = new_size
        self._create_window()
        for listener in list(self._resize_listeners):
            listener(self.window)
        DebugLogger.state(f"Window resized to {self.width}x{self.height}", category="display")

    def add_resize_listener(self, callback):
        """Register callback(window_surface) invoked after every resize."""
        if callback not in self._resize_listeners:
            self._resize_listeners.append(callback)

    def get_viewport(self) -> tuple:
        """Current (width, height) of the play area."""
        return self.width, self.height

    def get_surface(self) -> pygame.Surface:
        """The window surface the renderer draws on."""
        return self.window

    # ===========================================================
    # Internal
    # ===========================================================

    def _create_window(self):
        self.window = pygame.display.set_mode((self.width, self.height), pygame.RESIZABLE)

    @staticmethod
    def _clamp(width, height):
        clamped = clamp_viewport(width, height)
        if clamped[0] > width or clamped[1] > height:
            DebugLogger.warn(
                f"Viewport {width}x{height} below minimum, using {clamped[0]}x{clamped[1]}",
                category="display"
            )
        return clamped
