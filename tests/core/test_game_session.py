"""
test_game_session.py
--------------------
Integration tests for GameSession: state flow, simulation step,
collision handling, events and stats.

Responsibilities
----------------
- Verify start / flap / restart through the single input signal.
- Verify the deterministic free-fall run ends on the expected tick.
- Verify restart from GAMEOVER matches a fresh start.
- Verify events dispatched to subscribers and cross-run stats.
"""

import pytest
from unittest.mock import MagicMock

from flappy_clone.core.runtime.game_settings import Display, ObstacleConfig
from flappy_clone.core.runtime.game_state import GameState
from flappy_clone.core.services.event_manager import (
    EventManager, FlapEvent, GameOverEvent, ObstaclePassedEvent, StateChangedEvent
)
from flappy_clone.entities.avatar import Avatar
from flappy_clone.entities.obstacle import Obstacle
from flappy_clone.systems.collision_detector import CollisionTags
from flappy_clone.systems.obstacle_field import ObstacleField


pytestmark = pytest.mark.integration


# ===========================================================
# Startup
# ===========================================================

class TestStartup:

    def test_starts_loading_centered(self, make_session):
        session = make_session()
        assert session.state is GameState.LOADING
        assert session.avatar.y == 300
        assert session.avatar.velocity == 0.0
        assert session.score == 0
        assert session.obstacles == []

    def test_input_ignored_while_loading(self, make_session):
        session = make_session()
        session.handle_input()
        assert session.state is GameState.LOADING
        assert session.avatar.velocity == 0.0

    def test_update_ignored_outside_playing(self, ready_session, clock):
        clock.advance(5000)
        for _ in range(10):
            assert ready_session.update() is False
        assert ready_session.avatar.y == 300
        assert ready_session.obstacles == []
        assert ready_session.ticks_played == 0

    def test_assets_ready_moves_to_ready(self, make_session):
        session = make_session()
        session.assets_ready()
        assert session.state is GameState.READY

    def test_start_resets_run(self, ready_session, clock):
        ready_session.avatar.y = 10
        clock.advance(800)
        ready_session.handle_input()

        assert ready_session.state is GameState.PLAYING
        assert ready_session.avatar.y == 300
        assert ready_session.avatar.velocity == 0.0
        assert ready_session.score == 0
        assert ready_session.field.last_spawn == 800


# ===========================================================
# Playing
# ===========================================================

class TestPlaying:

    def test_free_fall_ends_on_tick_33(self, playing_session):
        for tick in range(1, 33):
            assert playing_session.update() is False, f"ended early on tick {tick}"
        assert playing_session.state is GameState.PLAYING

        assert playing_session.update() is True
        assert playing_session.state is GameState.GAMEOVER
        assert playing_session.ticks_played == 33
        assert playing_session.last_collision == CollisionTags.BOUNDARY

    def test_velocity_grows_by_gravity_each_tick(self, playing_session):
        for n in range(1, 6):
            playing_session.update()
            assert playing_session.avatar.velocity == pytest.approx(0.5 * n)

    def test_flap_during_play(self, playing_session):
        playing_session.update()
        playing_session.handle_input()
        assert playing_session.state is GameState.PLAYING
        assert playing_session.avatar.velocity == -10
        playing_session.update()
        assert playing_session.avatar.velocity == -9.5

    def test_flap_keeps_avatar_alive(self, playing_session):
        for tick in range(1, 200):
            if playing_session.avatar.velocity > 9:
                playing_session.handle_input()
            assert playing_session.update() is False, f"collided on tick {tick}"

    def test_ceiling_ends_run(self, playing_session):
        playing_session.handle_input()
        playing_session.avatar.y = 1
        playing_session.update()
        assert playing_session.state is GameState.GAMEOVER
        assert playing_session.last_collision == CollisionTags.BOUNDARY

    def test_spawns_after_interval(self, playing_session, clock):
        clock.advance(1500)
        playing_session.update()
        assert playing_session.obstacles == []
        clock.advance(1)
        playing_session.update()
        assert len(playing_session.obstacles) == 1

    def test_obstacle_collision(self, playing_session):
        playing_session.field.obstacles.append(Obstacle(40, 0, 600, width=60, gap=150))
        playing_session.update()
        assert playing_session.state is GameState.GAMEOVER
        assert playing_session.last_collision == CollisionTags.OBSTACLE

    def test_simulation_frozen_after_gameover(self, playing_session):
        playing_session.avatar.y = -50
        playing_session.update()
        y = playing_session.avatar.y
        playing_session.update()
        assert playing_session.avatar.y == y


# ===========================================================
# Scoring Scenario
# ===========================================================

def test_one_obstacle_scores_exactly_once(make_session, clock, fixed_rng):
    """Weightless avatar hovering inside a fixed opening (180..330)."""
    session = make_session(avatar=Avatar(gravity=0), rng=fixed_rng(0.6))
    session.assets_ready()
    session.handle_input()

    clock.advance(1501)
    passed_events = []
    session.events.subscribe(ObstaclePassedEvent, passed_events.append)

    for _ in range(260):
        assert session.update() is False

    assert session.score == 1
    assert session.obstacles == []
    assert passed_events == [ObstaclePassedEvent(passed=1, score=1)]


# ===========================================================
# Restart
# ===========================================================

def test_restart_matches_fresh_start(make_session, clock):
    session = make_session()
    session.assets_ready()
    session.handle_input()

    clock.advance(2000)
    session.update()
    session.field.score = 4
    session.avatar.y = 700
    session.update()
    assert session.state is GameState.GAMEOVER

    clock.advance(300)
    session.handle_input()

    fresh = make_session()
    fresh.assets_ready()
    fresh.handle_input()

    assert session.state is fresh.state is GameState.PLAYING
    assert session.score == fresh.score == 0
    assert session.obstacles == fresh.obstacles == []
    assert session.avatar.y == fresh.avatar.y
    assert session.avatar.velocity == fresh.avatar.velocity == 0.0
    assert session.ticks_played == 0
    assert session.last_collision is None
    assert session.field.last_spawn == clock.now


# ===========================================================
# Events & Stats
# ===========================================================

class TestEvents:

    def test_state_changes_dispatched(self, make_session):
        session = make_session()
        seen = []
        session.events.subscribe(StateChangedEvent, lambda e: seen.append((e.previous, e.current)))

        session.assets_ready()
        session.handle_input()
        session.handle_input()

        assert seen == [
            (GameState.LOADING, GameState.READY),
            (GameState.READY, GameState.PLAYING),
            (GameState.PLAYING, GameState.PLAYING),
        ]

    def test_flap_event(self, playing_session):
        callback = MagicMock()
        playing_session.events.subscribe(FlapEvent, callback)
        playing_session.handle_input()
        callback.assert_called_once_with(FlapEvent(velocity=-10))

    def test_game_over_event_and_stats(self, playing_session):
        callback = MagicMock()
        playing_session.events.subscribe(GameOverEvent, callback)

        playing_session.field.score = 3
        playing_session.avatar.y = 590
        playing_session.update()

        callback.assert_called_once_with(GameOverEvent(score=3, cause="boundary", ticks=1))
        stats = playing_session.stats
        assert stats.runs_played == 1
        assert stats.best_score == 3
        assert stats.last_score == 3

    def test_best_score_kept_across_runs(self, playing_session):
        playing_session.field.score = 5
        playing_session.avatar.y = 590
        playing_session.update()

        playing_session.handle_input()
        playing_session.field.score = 2
        playing_session.avatar.y = 590
        playing_session.update()

        stats = playing_session.stats
        assert stats.runs_played == 2
        assert stats.best_score == 5
        assert stats.last_score == 2
        assert stats.total_obstacles_passed == 7


# ===========================================================
# Viewport
# ===========================================================

@pytest.mark.parametrize("size, expected", [
    ((800, 900), (800, 900)),
    ((0, 0), (Display.MIN_WIDTH, Display.MIN_HEIGHT)),
    ((-5, 50), (Display.MIN_WIDTH, Display.MIN_HEIGHT)),
    ((640.7, 480.2), (640, 480)),
])
def test_set_viewport_clamps(make_session, size, expected):
    session = make_session()
    session.set_viewport(*size)
    assert (session.width, session.height) == expected


def test_constructor_clamps_viewport(make_session):
    session = make_session(width=0, height=10)
    assert (session.width, session.height) == (Display.MIN_WIDTH, Display.MIN_HEIGHT)


def test_reset_uses_current_height(ready_session):
    ready_session.set_viewport(400, 800)
    ready_session.handle_input()
    assert ready_session.avatar.y == 400


@pytest.mark.regression
def test_min_height_follows_obstacle_gap(make_session, monkeypatch):
    monkeypatch.setattr(ObstacleConfig, "GAP", 220)
    session = make_session()
    session.set_viewport(0, 0)
    assert session.height == 440


@pytest.mark.regression
@pytest.mark.parametrize("roll", [0.0, 0.5, 0.9999])
def test_spawns_at_minimum_viewport_stay_on_screen(make_session, fixed_rng, roll):
    session = make_session()
    session.set_viewport(0, 0)

    ob = Obstacle.spawn(session.width, session.height, rng=fixed_rng(roll))

    assert ob.bottom_height >= 0
    assert ob.top_height + ob.gap <= session.height


# ===========================================================
# Injected Collaborators
# ===========================================================

@pytest.mark.regression
def test_injected_empty_field_is_used(make_session, clock, fixed_rng):
    field = ObstacleField(now=0.0, spawn_interval_ms=10, gap=100, rng=fixed_rng(0.5))
    session = make_session(field=field)
    assert session.field is field

    session.assets_ready()
    session.handle_input()
    clock.advance(11)
    session.update()

    assert len(field) == 1
    assert field.obstacles[0].gap == 100
    assert field.obstacles[0].top_height == 150


def test_spawn_interval_override_applies_to_injected_field(make_session):
    field = ObstacleField(spawn_interval_ms=10)
    session = make_session(field=field, spawn_interval_ms=2500)
    assert session.field.spawn_interval_ms == 2500


def test_injected_events_bus_is_used(make_session):
    events = EventManager()
    session = make_session(events=events)
    seen = []
    events.subscribe(StateChangedEvent, seen.append)

    session.assets_ready()

    assert session.events is events
    assert len(seen) == 1
