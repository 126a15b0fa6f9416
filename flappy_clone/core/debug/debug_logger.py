"""
debug_logger.py
---------------
Console diagnostics for the game runtime.

Every runtime module logs through DebugLogger instead of print():
state transitions, spawns, score changes, load failures and slow frames.
Lines look like:

    [12:04:31] [GameSession][STATE] Run over (obstacle) after 412 ticks, score 3
"""

import sys
from datetime import datetime


# ===========================================================
# Logger Configuration
# ===========================================================

class LoggerConfig:
    """Global switch, verbosity and per-category filters."""

    ENABLE_LOGGING = True
    LOG_LEVEL = "INFO"  # NONE, ERROR, WARN, INFO, VERBOSE

    CATEGORIES = {
        # Startup and platform
        "loading": True,
        "system": True,
        "display": True,
        "input": False,
        "event_manager": False,

        # Run lifecycle
        "game_state": True,
        "score": True,
        "collision": True,

        # Obstacle field churn, noisy at 60 Hz
        "entity_spawn": False,
        "entity_cleanup": False,

        "render": True,
        "performance": True,
    }


_RESET = "\033[0m"
_WHITE = "\033[97m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_RED = "\033[91m"

_LEVELS = {"NONE": 0, "ERROR": 1, "WARN": 2, "INFO": 3, "VERBOSE": 4}

# tag -> (ANSI color, minimum level)
_KINDS = {
    "SYSTEM": ("\033[95m", "INFO"),
    "STATE": (_CYAN, "INFO"),
    "ACTION": (_GREEN, "INFO"),
    "TRACE": ("\033[94m", "VERBOSE"),
    "WARN": ("\033[93m", "WARN"),
    "FAIL": (_RED, "ERROR"),
}

_STATUS_COLORS = {"OK": _GREEN, "LOADING": _CYAN, "FAIL": _RED}


def _caller_name(depth):
    """Class of the calling method, or the CamelCased module name."""
    try:
        frame = sys._getframe(depth + 1)
    except ValueError:
        return "Unknown"

    owner = frame.f_locals.get("self")
    if owner is not None:
        return type(owner).__name__
    cls = frame.f_locals.get("cls")
    if isinstance(cls, type):
        return cls.__name__

    module = frame.f_globals.get("__name__", "unknown").rsplit(".", 1)[-1]
    return "".join(part.capitalize() for part in module.split("_"))


class DebugLogger:
    """Static logger; call sites pick a kind and an optional category."""

    LINE_LENGTH = 59

    @staticmethod
    def enabled(category="system", level="INFO") -> bool:
        if not LoggerConfig.ENABLE_LOGGING:
            return False
        if not LoggerConfig.CATEGORIES.get(category, False):
            return False
        return _LEVELS.get(level, 3) <= _LEVELS.get(LoggerConfig.LOG_LEVEL, 3)

    @staticmethod
    def _emit(tag, message, category):
        color, level = _KINDS[tag]
        if not DebugLogger.enabled(category, level):
            return
        # _emit <- public method <- call site
        source = _caller_name(2)
        stamp = datetime.now().strftime("%H:%M:%S")
        print(f"{color}[{stamp}] [{source}][{tag}] {message}{_RESET}")

    # ===========================================================
    # Message Kinds
    # ===========================================================

    @staticmethod
    def system(msg, category="system"):
        DebugLogger._emit("SYSTEM", msg, category)

    @staticmethod
    def state(msg, category="game_state"):
        DebugLogger._emit("STATE", msg, category)

    @staticmethod
    def action(msg, category="system"):
        DebugLogger._emit("ACTION", msg, category)

    @staticmethod
    def trace(msg, category="collision"):
        """Per-tick detail; only shown at VERBOSE."""
        DebugLogger._emit("TRACE", msg, category)

    @staticmethod
    def warn(msg, category="system"):
        DebugLogger._emit("WARN", msg, category)

    @staticmethod
    def fail(msg, category="system"):
        DebugLogger._emit("FAIL", msg, category)

    # ===========================================================
    # Startup Report
    # ===========================================================

    @staticmethod
    def section(title):
        """Banner separating startup phases."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        rule = "─" * DebugLogger.LINE_LENGTH
        print(f"\n{_WHITE}{rule}\n{f'[{title}]'.center(DebugLogger.LINE_LENGTH)}{_RESET}\n")

    @staticmethod
    def init_entry(module, status="OK"):
        """One subsystem per line, status right-aligned after a dot leader."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        label = f"> {module}".ljust(30)
        badge = f"[{status}]"
        leader = "." * max(DebugLogger.LINE_LENGTH - len(label) - len(badge) - 1, 1)
        color = _STATUS_COLORS.get(status.upper(), _WHITE)
        print(f"{_WHITE}{label}{leader} {color}{badge}{_RESET}")

    @staticmethod
    def init_sub(detail, level=1):
        if not LoggerConfig.ENABLE_LOGGING:
            return
        print(f"{'    ' * level}• {_WHITE}{detail}{_RESET}")
