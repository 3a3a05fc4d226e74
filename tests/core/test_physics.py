"""
Unit tests for physics engine

Tests physics engine functionality including:
- Initial layout and reset
- Launch from the idle state
- Integration, wall bounces and computer tracking
- Scoring and the return to idle
"""

import random

import pytest

from pixel_pong.core.entities import Ball
from pixel_pong.core.physics import (
    COMPUTER,
    HUMAN,
    INITIAL_SPEED,
    PhysicsEngine,
    scoring_side,
)


@pytest.fixture
def engine(rng):
    return PhysicsEngine(800, 600, rng)


class TestPhysicsEngine:
    """Test the main physics engine"""

    def test_engine_initialization(self, engine):
        """Test that physics engine initializes correctly"""
        assert engine.field_width == 800
        assert engine.field_height == 600
        assert engine.initial_speed == INITIAL_SPEED == 250
        assert engine.ball.position.to_tuple() == (400, 300)
        assert engine.ball.velocity.is_zero()
        assert engine.players[HUMAN].position.to_tuple() == (40, 300)
        assert engine.players[COMPUTER].position.to_tuple() == (760, 300)
        assert engine.score == [0, 0]
        assert not engine.is_playing()

    def test_reset_keeps_paddles_and_score(self, engine):
        """reset() only recenters the ball"""
        engine.players[HUMAN].score = 3
        engine.players[HUMAN].move_to(100)
        engine.ball.position.x = 20
        engine.ball.velocity.x = -300

        engine.reset()

        assert engine.ball.position.to_tuple() == (400, 300)
        assert engine.ball.velocity.is_zero()
        assert engine.score == [3, 0]
        assert engine.players[HUMAN].position.y == 100

    def test_reset_game(self, engine):
        """A new match clears scores and recenters everything"""
        engine.players[HUMAN].score = 2
        engine.players[COMPUTER].score = 5
        engine.players[HUMAN].move_to(80)
        engine.launch()

        engine.reset_game()

        assert engine.score == [0, 0]
        assert engine.players[HUMAN].position.y == 300
        assert not engine.is_playing()
        assert engine.game_time == 0.0


class TestLaunch:
    """Test serving the ball"""

    def test_launch_speed(self, engine):
        assert engine.launch() is True
        assert engine.is_playing()
        assert engine.ball.velocity.magnitude() == pytest.approx(250.0)

    @pytest.mark.parametrize("seed", range(20))
    def test_launch_direction_bounds(self, seed):
        """Horizontal component dominates: |vy| <= |vx| before normalisation"""
        engine = PhysicsEngine(800, 600, random.Random(seed))
        engine.launch()
        vx, vy = engine.ball.velocity.to_tuple()
        assert abs(vx) >= abs(vy)
        assert abs(vx) == pytest.approx(250.0 / (1 + (vy / vx) ** 2) ** 0.5)

    def test_second_launch_is_ignored(self, engine):
        engine.launch()
        velocity = engine.ball.velocity.copy()

        assert engine.launch() is False
        assert engine.ball.velocity == velocity

    def test_launch_is_deterministic_with_seeded_rng(self):
        first = PhysicsEngine(800, 600, random.Random(7))
        second = PhysicsEngine(800, 600, random.Random(7))
        first.launch()
        second.launch()
        assert first.ball.velocity == second.ball.velocity

    def test_both_directions_happen(self):
        rng = random.Random(42)
        signs = set()
        for _ in range(50):
            engine = PhysicsEngine(800, 600, rng)
            engine.launch()
            signs.add(engine.ball.velocity.x > 0)
        assert signs == {True, False}


class TestUpdate:
    """Test one simulation step"""

    def test_idle_ball_stays_put(self, engine):
        events = engine.update(0.016)

        assert engine.ball.position.to_tuple() == (400, 300)
        assert engine.ball.velocity.is_zero()
        assert engine.score == [0, 0]
        assert events == {"goals": [], "wall_bounces": [], "paddle_hits": []}

    def test_integration(self, engine):
        engine.ball.velocity.x = 100
        engine.ball.velocity.y = 50

        engine.update(0.1)

        assert engine.ball.position.x == pytest.approx(410)
        assert engine.ball.position.y == pytest.approx(305)
        assert engine.game_time == pytest.approx(0.1)

    def test_computer_tracks_ball(self, engine):
        engine.ball.position.y = 200
        engine.ball.velocity.x = 100
        engine.ball.velocity.y = 50

        engine.update(0.1)

        assert engine.players[COMPUTER].position.y == pytest.approx(engine.ball.position.y)
        assert engine.players[COMPUTER].position.y == pytest.approx(205)

    def test_human_paddle_velocity_estimate(self, engine):
        engine.players[HUMAN].move_to(350)
        engine.update(0.1)
        assert engine.players[HUMAN].velocity.y == pytest.approx(500)

    def test_top_wall_bounce(self, engine):
        engine.ball.position.y = 4
        engine.ball.velocity.x = 50
        engine.ball.velocity.y = -100

        events = engine.update(0.01)

        assert engine.ball.velocity.y == pytest.approx(100)
        assert engine.ball.velocity.x == pytest.approx(50)
        assert events["wall_bounces"] == ["top"]

    def test_bottom_wall_bounce(self, engine):
        engine.ball.position.y = 597
        engine.ball.velocity.x = 50
        engine.ball.velocity.y = 100

        events = engine.update(0.01)

        assert engine.ball.velocity.y == pytest.approx(-100)
        assert events["wall_bounces"] == ["bottom"]

    def test_paddle_hit(self, engine):
        engine.ball.position.x = 55
        engine.ball.velocity.x = -100

        events = engine.update(0.1)

        assert engine.ball.velocity.x == pytest.approx(105)
        assert events["paddle_hits"] == [{"player": HUMAN}]

    def test_paddle_hit_carries_paddle_motion(self, engine):
        """A moving paddle steers the ball without adding speed"""
        engine.players[HUMAN].move_to(310)
        engine.ball.position.x = 55
        engine.ball.velocity.x = -100

        engine.update(0.1)

        assert engine.players[HUMAN].velocity.y == pytest.approx(100)
        assert engine.ball.velocity.x > 0
        assert engine.ball.velocity.y > 0
        assert engine.ball.velocity.magnitude() == pytest.approx(105)


class TestScoring:
    """Test goals"""

    def test_ball_leaving_left_scores_for_computer(self, engine):
        engine.ball.position.x = -4
        engine.ball.velocity.x = -100

        events = engine.update(0.1)

        assert engine.score == [0, 1]
        assert events["goals"] == [{"player": COMPUTER, "score": [0, 1]}]
        assert engine.ball.position.to_tuple() == (400, 300)
        assert engine.ball.velocity.is_zero()
        assert not engine.is_playing()

    def test_ball_leaving_right_scores_for_human(self, engine):
        engine.ball.position.x = 804
        engine.ball.velocity.x = 100

        engine.update(0.1)

        assert engine.score == [1, 0]
        assert engine.ball.position.to_tuple() == (400, 300)

    def test_goal_counted_once(self, engine):
        engine.ball.position.x = -4
        engine.ball.velocity.x = -100

        engine.update(0.1)
        engine.update(0.1)
        engine.update(0.1)

        assert engine.score == [0, 1]

    def test_relaunch_after_goal(self, engine):
        engine.ball.position.x = -4
        engine.ball.velocity.x = -100
        engine.update(0.1)

        assert engine.launch() is True
        assert engine.ball.velocity.magnitude() == pytest.approx(250)

    @pytest.mark.parametrize(
        "vx,goal,expected",
        [
            (-100, "left_goal", COMPUTER),
            (100, "right_goal", HUMAN),
            (0, "left_goal", COMPUTER),
            (0, "right_goal", HUMAN),
        ],
    )
    def test_scoring_side(self, vx, goal, expected):
        assert scoring_side(Ball(0, 0, vx, 0), goal) == expected


def test_get_game_state(engine):
    state = engine.get_game_state()
    assert state["ball_position"] == (400, 300)
    assert state["ball_velocity"] == (0, 0)
    assert state["player1_position"] == (40, 300)
    assert state["player2_position"] == (760, 300)
    assert state["score"] == [0, 0]
    assert state["playing"] is False
    assert state["field_bounds"] == (0, 800, 0, 600)
