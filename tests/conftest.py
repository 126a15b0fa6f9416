"""
conftest.py
-----------
Shared pytest configuration and fixtures for Flappy Clone tests.

Contains:
- Headless SDL configuration (dummy video/audio drivers)
- Deterministic time and randomness sources
- A RenderSurface that records draw calls instead of drawing
- Session factories for the common game phases
"""

import os
import sys
import random

# Headless pygame; must be set before pygame is first imported
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Project root on sys.path so tests run without an editable install
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from flappy_clone.core.debug.debug_logger import LoggerConfig
from flappy_clone.core.runtime.game_session import GameSession
from flappy_clone.graphics.render_surface import RenderSurface


# ===========================================================
# Test Doubles
# ===========================================================

class FakeClock:
    """Millisecond time source advanced manually by tests."""

    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms


class FixedRandom:
    """random.Random stand-in that always returns the same value."""

    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


class RecordingSurface(RenderSurface):
    """RenderSurface that stores every call as a tuple."""

    def __init__(self):
        self.calls = []
        self.frames = 0

    def clear(self):
        self.calls.append(("clear",))

    def fill_rect(self, x, y, w, h, color):
        self.calls.append(("fill_rect", x, y, w, h, color))

    def draw_sprite(self, image, x, y, w, h):
        self.calls.append(("draw_sprite", image, x, y, w, h))

    def draw_text(self, text, x, y, font, align="left", color=(255, 255, 255)):
        self.calls.append(("draw_text", text, x, y, font, align))

    def present(self):
        self.frames += 1

    def texts(self):
        return [c[1] for c in self.calls if c[0] == "draw_text"]

    def of_kind(self, kind):
        return [c for c in self.calls if c[0] == kind]

    def reset(self):
        self.calls.clear()


# ===========================================================
# Global Fixtures
# ===========================================================

@pytest.fixture(autouse=True)
def quiet_logger():
    """Silence console logging for each test."""
    enabled = LoggerConfig.ENABLE_LOGGING
    LoggerConfig.ENABLE_LOGGING = False
    yield
    LoggerConfig.ENABLE_LOGGING = enabled


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def fixed_rng():
    """Factory for an rng whose random() always returns the given value."""
    return FixedRandom


@pytest.fixture
def recording_surface():
    return RecordingSurface()


@pytest.fixture
def make_session(clock, rng):
    """Factory for a 400x600 session; extra kwargs go to GameSession."""
    def _make(**kwargs):
        kwargs.setdefault("width", 400)
        kwargs.setdefault("height", 600)
        kwargs.setdefault("time_source", clock)
        kwargs.setdefault("rng", rng)
        return GameSession(**kwargs)
    return _make


@pytest.fixture
def ready_session(make_session):
    """Session whose assets finished loading (READY)."""
    session = make_session()
    session.assets_ready()
    return session


@pytest.fixture
def playing_session(ready_session):
    """Session that has just started a run (PLAYING)."""
    ready_session.handle_input()
    return ready_session


# ===========================================================
# Pytest configuration
# ===========================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')")
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "regression: marks tests as regression tests")


def pytest_collection_modifyitems(config, items):
    """Tag everything not marked integration as a unit test."""
    for item in items:
        if "integration" not in item.keywords:
            item.add_marker(pytest.mark.unit)
