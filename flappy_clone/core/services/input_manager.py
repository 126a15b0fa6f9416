"""
input_manager.py
----------------
Maps raw pygame events onto the game's abstract signals.

Every physical "activate" channel (flap key, mouse click, touch start) fans
in to GameSession.handle_input(); the session decides whether that means
start, restart or flap. Events are drained on the loop thread at the start
of each tick, so input never races the simulation step.
"""

import pygame

from flappy_clone.core.debug.debug_logger import DebugLogger


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    "activate": [pygame.K_SPACE],
    "quit": [pygame.K_ESCAPE],
    "toggle_debug": [pygame.K_F3],
}


class InputManager:
    """
    Translates pygame events into session signals.

    Usage:
        for event in pygame.event.get():
            input_manager.handle_event(event, session, display)
        if input_manager.quit_requested:
            ...
    """

    def __init__(self, key_bindings=None):
        """
        Args:
            key_bindings: {action: [key codes]} (DEFAULT_KEY_BINDINGS if None)
        """
        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS
        self.quit_requested = False
        self._key_to_action = {}

        for action, keys in self.key_bindings.items():
            for key in keys:
                if key in self._key_to_action:
                    DebugLogger.warn(
                        f"Key {key} bound to both '{self._key_to_action[key]}' and '{action}'",
                        category="input"
                    )
                self._key_to_action[key] = action

        DebugLogger.init_entry("InputManager")

    # ===========================================================
    # Event Handling
    # ===========================================================

    def process_events(self, events, session, display=None) -> int:
        """
        Handle a batch of events.

        Returns:
            int: Number of activate signals delivered to the session
        """
        activations = 0
        for event in events:
            if self.handle_event(event, session, display) == "activate":
                activations += 1
        return activations

    def handle_event(self, event, session, display=None):
        """
        Route one pygame event.

        Args:
            event: pygame.event.Event
            session: GameSession receiving handle_input() / set_viewport()
            display: DisplayManager to resize on VIDEORESIZE (optional)

        Returns:
            str | None: The action triggered, if any
        """
        if event.type == pygame.QUIT:
            self.quit_requested = True
            DebugLogger.action("Quit signal received")
            return "quit"

        if event.type == pygame.KEYDOWN:
            action = self._key_to_action.get(event.key)
            if action is not None:
                self._apply_action(action, session)
            return action

        if event.type == pygame.MOUSEBUTTONDOWN:
            # Touch input also produces FINGERDOWN; don't count it twice
            if getattr(event, "touch", False):
                return None
            self._apply_action("activate", session)
            return "activate"

        if event.type == pygame.FINGERDOWN:
            self._apply_action("activate", session)
            return "activate"

        if event.type == pygame.VIDEORESIZE:
            if display is not None:
                display.resize(event.w, event.h)
                session.set_viewport(*display.get_viewport())
            else:
                session.set_viewport(event.w, event.h)
            return "resize"

        return None

    def _apply_action(self, action, session):
        if action == "activate":
            DebugLogger.trace(f"Activate in {session.state.name}", category="input")
            session.handle_input()
        elif action == "quit":
            self.quit_requested = True
            DebugLogger.action("Quit key pressed")
        elif action == "toggle_debug":
            state = "ON" if session.toggle_debug_overlay() else "OFF"
            DebugLogger.state(f"Debug overlay → {state}", category="input")
