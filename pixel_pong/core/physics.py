"""
Physics system for Pixel Pong
"""

import logging
import random
from typing import Any

from pixel_pong.core.collision import CollisionDetector, resolve_paddle_collision
from pixel_pong.core.entities import Ball, Paddle, Vector2D

logger = logging.getLogger(__name__)

# Ball speed at the start of every rally, in units per second
INITIAL_SPEED = 250.0
# Launch components before normalisation: x is +/- LAUNCH_SPREAD, y in [-LAUNCH_SPREAD, LAUNCH_SPREAD]
LAUNCH_SPREAD = 200.0
# Distance between the arena edges and the paddle centers
PADDLE_MARGIN = 40.0

HUMAN = 0
COMPUTER = 1


def scoring_side(ball: Ball, goal: str) -> int:
    """
    Index of the paddle that wins the point when the ball leaves the arena

    The ball travelling left means the right paddle scores and vice versa.
    A ball with no horizontal velocity is attributed from the side it left by.
    """
    if ball.velocity.x < 0:
        return COMPUTER
    if ball.velocity.x > 0:
        return HUMAN
    return COMPUTER if goal == "left_goal" else HUMAN


class PhysicsEngine:
    """
    Main physics engine

    The engine is either idle (ball at rest in the center, waiting for
    launch()) or playing (ball moving). A goal sends it back to idle.
    All state is mutated from a single thread: the frame callback and the
    input handlers are expected to run on the same event loop.
    """

    def __init__(
        self,
        field_width: float,
        field_height: float,
        rng: random.Random | None = None,
    ):
        self.field_width = field_width
        self.field_height = field_height
        self.initial_speed = INITIAL_SPEED
        self.rng = rng or random.Random()
        self.collision_detector = CollisionDetector()

        self.ball = Ball()
        self.players = [
            Paddle(PADDLE_MARGIN, field_height / 2, HUMAN),
            Paddle(field_width - PADDLE_MARGIN, field_height / 2, COMPUTER),
        ]
        self.game_time = 0.0

        self.reset()

    @property
    def score(self) -> list[int]:
        return [player.score for player in self.players]

    def is_playing(self) -> bool:
        return not self.ball.velocity.is_zero()

    def launch(self) -> bool:
        """
        Serves the ball in a random direction if it is waiting in the center

        Returns:
            bool: True if the ball was launched, False if a rally is in progress
        """
        if self.is_playing():
            return False

        direction = self.rng.choice((-1.0, 1.0))
        velocity = Vector2D(
            LAUNCH_SPREAD * direction,
            self.rng.uniform(-LAUNCH_SPREAD, LAUNCH_SPREAD),
        )
        self.ball.velocity = velocity.with_magnitude(self.initial_speed)
        logger.debug("Ball launched with velocity %s", self.ball.velocity.to_tuple())
        return True

    def reset(self) -> None:
        """Puts the ball back in the center at rest; paddles and score are untouched"""
        self.ball.stop_at(self.field_width / 2, self.field_height / 2)

    def reset_game(self) -> None:
        """Resets the match: scores, paddle positions and ball"""
        for player in self.players:
            player.score = 0
            player.reset_position(self.field_height / 2)
        self.game_time = 0.0
        self.reset()

    def update(self, dt: float) -> dict[str, list]:
        """
        Advances the simulation by dt seconds

        Returns:
            Dictionary with the events of this step:
            {"goals": [...], "wall_bounces": [...], "paddle_hits": [...]}
        """
        events: dict[str, list] = {"goals": [], "wall_bounces": [], "paddle_hits": []}
        ball = self.ball
        self.game_time += dt

        ball.update(dt)

        goal = self.collision_detector.check_ball_out(ball, self.field_width)
        if goal is not None:
            side = scoring_side(ball, goal)
            self.players[side].score += 1
            events["goals"].append({"player": side, "score": self.score})
            logger.info("Point for player %d, score is now %s", side, self.score)
            self.reset()

        wall = self.collision_detector.check_ball_walls(ball, self.field_height)
        if wall is not None:
            ball.bounce_vertical()
            events["wall_bounces"].append(wall)
            logger.debug("Ball bounced on the %s wall", wall)

        # The computer paddle follows the ball perfectly
        self.players[COMPUTER].move_to(ball.position.y)

        for player in self.players:
            player.update(dt)
            if resolve_paddle_collision(player, ball):
                events["paddle_hits"].append({"player": player.player_id})

        return events

    def get_game_state(self) -> dict[str, Any]:
        """Returns a snapshot of the game state"""
        human, computer = self.players
        return {
            "ball_position": self.ball.position.to_tuple(),
            "ball_velocity": self.ball.velocity.to_tuple(),
            "player1_position": human.position.to_tuple(),
            "player2_position": computer.position.to_tuple(),
            "player1_velocity": human.velocity.to_tuple(),
            "player2_velocity": computer.velocity.to_tuple(),
            "score": self.score,
            "playing": self.is_playing(),
            "time_elapsed": self.game_time,
            "field_bounds": (0, self.field_width, 0, self.field_height),
        }
