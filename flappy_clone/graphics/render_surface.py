"""
render_surface.py
-----------------
Drawing capabilities the game needs from a 2D backend.

The renderer only ever calls the RenderSurface interface and never reads
pixels back. PygameRenderSurface implements it on top of a pygame.Surface.

Text Positioning
----------------
draw_text() takes y as the text baseline and x according to align
("left", "center" or "right").
"""

from abc import ABC, abstractmethod

import pygame

from flappy_clone.core.debug.debug_logger import DebugLogger
from flappy_clone.core.runtime.game_settings import Colors


class RenderSurface(ABC):
    """Abstract 2D drawing surface."""

    @abstractmethod
    def clear(self):
        """Erase the whole surface."""
        pass

    @abstractmethod
    def fill_rect(self, x, y, w, h, color):
        """Fill a rectangle with an RGB or RGBA color."""
        pass

    @abstractmethod
    def draw_sprite(self, image, x, y, w, h):
        """Draw image stretched to (w, h) with its top-left corner at (x, y)."""
        pass

    @abstractmethod
    def draw_text(self, text, x, y, font, align="left", color=Colors.TEXT):
        """
        Draw a line of text.

        Args:
            text: String to draw
            x, y: Anchor position (y is the baseline)
            font: (family, size_px) tuple
            align: "left", "center" or "right"
            color: RGB color
        """
        pass

    def present(self):
        """Show the finished frame. Optional for offscreen surfaces."""
        pass


class PygameRenderSurface(RenderSurface):
    """RenderSurface backed by a pygame.Surface (usually the window)."""

    _ALIGN_ANCHORS = ("left", "center", "right")

    def __init__(self, target, background=Colors.BACKGROUND):
        """
        Args:
            target: pygame.Surface to draw on
            background: Fill color used by clear()
        """
        self.target = target
        self.background = background
        self._fonts = {}
        self._sprite_cache = {}

    def set_target(self, target):
        """Swap the destination surface (window recreated on resize)."""
        self.target = target

    # ===========================================================
    # Drawing
    # ===========================================================

    def clear(self):
        self.target.fill(self.background)

    def fill_rect(self, x, y, w, h, color):
        if w <= 0 or h <= 0:
            return

        rect = pygame.Rect(round(x), round(y), round(w), round(h))
        if len(color) == 4:
            band = pygame.Surface(rect.size, pygame.SRCALPHA)
            band.fill(color)
            self.target.blit(band, rect.topleft)
        else:
            pygame.draw.rect(self.target, color, rect)

    def draw_sprite(self, image, x, y, w, h):
        size = (max(round(w), 1), max(round(h), 1))
        key = (id(image), size)

        scaled = self._sprite_cache.get(key)
        if scaled is None:
            scaled = image if image.get_size() == size else pygame.transform.scale(image, size)
            self._sprite_cache[key] = scaled

        self.target.blit(scaled, (round(x), round(y)))

    def draw_text(self, text, x, y, font, align="left", color=Colors.TEXT):
        if align not in self._ALIGN_ANCHORS:
            DebugLogger.warn(f"Unknown text align '{align}', using left", category="render")
            align = "left"

        surf = self._get_font(font).render(text, True, color)
        rect = surf.get_rect()
        rect.bottom = round(y)
        if align == "center":
            rect.centerx = round(x)
        elif align == "right":
            rect.right = round(x)
        else:
            rect.left = round(x)

        self.target.blit(surf, rect)

    def present(self):
        pygame.display.flip()

    # ===========================================================
    # Caches
    # ===========================================================

    def _get_font(self, font):
        """SysFont lookup, cached per (family, size)."""
        cached = self._fonts.get(font)
        if cached is None:
            family, size = font
            cached = pygame.font.SysFont(family, size)
            self._fonts[font] = cached
        return cached
