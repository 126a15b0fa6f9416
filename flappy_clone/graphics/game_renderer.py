"""
game_renderer.py
----------------
Turns the current GameSession into draw calls on a RenderSurface.

Rendering is a pure read of the session: nothing here changes game state.

Draw Order
----------
1. Background (clear)
2. Avatar (every state except LOADING)
3. Obstacles
4. Score (PLAYING and GAMEOVER)
5. Phase overlay (loading / start / game over)
6. Debug overlay (toggled with F3)
"""

from flappy_clone.core.runtime.game_settings import Colors, Fonts
from flappy_clone.core.runtime.game_state import GameState


class GameRenderer:
    """Draws one frame per call to render()."""

    def __init__(self, surface, sprite=None):
        """
        Args:
            surface: RenderSurface to draw on
            sprite: Avatar image handle (solid box when None)
        """
        self.surface = surface
        self.sprite = sprite

    # ===========================================================
    # Frame
    # ===========================================================

    def render(self, session, fps=None):
        """Draw the full frame for session and present it."""
        surface = self.surface
        surface.clear()

        state = session.state

        if state is not GameState.LOADING:
            self._draw_avatar(session.avatar)

        for obstacle in session.obstacles:
            surface.fill_rect(*obstacle.bounds_top(), Colors.OBSTACLE)
            surface.fill_rect(*obstacle.bounds_bottom(), Colors.OBSTACLE)

        if state in (GameState.PLAYING, GameState.GAMEOVER):
            surface.draw_text(f"Score: {session.score}", 10, 30, (Fonts.FAMILY, Fonts.SCORE))

        if state is GameState.LOADING:
            self._draw_loading_screen(session)
        elif state is GameState.READY:
            self._draw_start_screen(session)
        elif state is GameState.GAMEOVER:
            self._draw_game_over_screen(session)

        if session.show_debug_overlay:
            self._draw_debug_overlay(session, fps)

        surface.present()

    # ===========================================================
    # Entities
    # ===========================================================

    def _draw_avatar(self, avatar):
        if self.sprite is None:
            self.surface.fill_rect(*avatar.rect(), Colors.TEXT)
        else:
            self.surface.draw_sprite(self.sprite, *avatar.rect())

    # ===========================================================
    # Phase Overlays
    # ===========================================================

    def _draw_loading_screen(self, session):
        mid_x, mid_y = session.width / 2, session.height / 2
        self.surface.fill_rect(0, mid_y - 25, session.width, 50, Colors.OVERLAY)
        self.surface.draw_text("Loading...", mid_x, mid_y + 5,
                               (Fonts.FAMILY, Fonts.SCORE), align="center")

    def _draw_start_screen(self, session):
        mid_x, mid_y = session.width / 2, session.height / 2
        self.surface.fill_rect(0, mid_y - 50, session.width, 100, Colors.OVERLAY)
        self.surface.draw_text("Flappy Bird Clone", mid_x, mid_y - 10,
                               (Fonts.FAMILY, Fonts.TITLE), align="center")
        self.surface.draw_text("Press SPACE or CLICK to Start", mid_x, mid_y + 20,
                               (Fonts.FAMILY, Fonts.PROMPT), align="center")

    def _draw_game_over_screen(self, session):
        mid_x, mid_y = session.width / 2, session.height / 2
        self.surface.fill_rect(0, mid_y - 50, session.width, 100, Colors.OVERLAY)
        self.surface.draw_text("Game Over", mid_x, mid_y - 10,
                               (Fonts.FAMILY, Fonts.TITLE), align="center")
        self.surface.draw_text(f"Score: {session.score}", mid_x, mid_y + 25,
                               (Fonts.FAMILY, Fonts.SCORE), align="center")
        self.surface.draw_text("Press SPACE or CLICK to Restart", mid_x, mid_y + 50,
                               (Fonts.FAMILY, Fonts.PROMPT), align="center")

    # ===========================================================
    # Debug
    # ===========================================================

    def _draw_debug_overlay(self, session, fps):
        font = (Fonts.FAMILY, Fonts.DEBUG)
        fps_text = "--" if fps is None else f"{fps:.0f}"
        lines = [
            f"FPS {fps_text} | {session.state.name}",
            f"y={session.avatar.y:.1f} v={session.avatar.velocity:.2f}",
            f"obstacles={len(session.obstacles)} best={session.stats.best_score}",
        ]
        x = session.width - 10
        for i, line in enumerate(lines):
            self.surface.draw_text(line, x, 20 + i * 16, font, align="right", color=Colors.DEBUG)
