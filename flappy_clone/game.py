"""
game.py
-------
Process entry point: wires pygame collaborators to a GameSession and runs
the loop until the window is closed.
"""

import pygame

from flappy_clone.core.debug.debug_logger import DebugLogger
from flappy_clone.core.runtime.game_loop import GameLoop
from flappy_clone.core.runtime.game_session import GameSession
from flappy_clone.core.runtime.game_settings import apply_overrides, settings_defaults
from flappy_clone.core.services.asset_loader import AssetLoader
from flappy_clone.core.services.config_manager import load_config
from flappy_clone.core.services.display_manager import DisplayManager
from flappy_clone.core.services.input_manager import InputManager
from flappy_clone.graphics.game_renderer import GameRenderer
from flappy_clone.graphics.render_surface import PygameRenderSurface


def build_game():
    """Initialize pygame and assemble the loop with all collaborators."""
    DebugLogger.section("Initializing Game")

    apply_overrides(load_config("game.json", settings_defaults()))

    pygame.init()
    pygame.font.init()
    DebugLogger.init_entry("Pygame")

    display = DisplayManager()
    surface = PygameRenderSurface(display.get_surface())
    display.add_resize_listener(surface.set_target)

    session = GameSession(*display.get_viewport())
    renderer = GameRenderer(surface)

    return GameLoop(
        session,
        renderer,
        InputManager(),
        AssetLoader(),
        display=display,
    )


def main():
    """Run the game until quit."""
    try:
        build_game().run()
    except KeyboardInterrupt:
        DebugLogger.action("Interrupted")
    except pygame.error as e:
        DebugLogger.fail(f"Pygame error: {e}")
        raise
    finally:
        pygame.quit()
        DebugLogger.system("Pygame terminated")


if __name__ == "__main__":
    main()
