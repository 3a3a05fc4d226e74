"""
Collision detection system for Pixel Pong
"""

import logging

from pixel_pong.core.entities import AxisAlignedBox, Ball, Paddle

logger = logging.getLogger(__name__)

# Horizontal speed gain applied on every paddle hit
SPEED_UP_FACTOR = 1.05
# Share of the paddle's vertical speed transferred to the ball
SPIN_TRANSFER = 0.2


def boxes_overlap(a: AxisAlignedBox, b: AxisAlignedBox) -> bool:
    """Strict overlap test; boxes that only share an edge do not collide"""
    return a.left < b.right and a.right > b.left and a.top < b.bottom and a.bottom > b.top


def resolve_paddle_collision(paddle: Paddle, ball: Ball) -> bool:
    """
    Bounces the ball off the paddle if they overlap

    The horizontal component is reflected and sped up by SPEED_UP_FACTOR.
    Part of the paddle's vertical speed is then added to the ball, and the
    velocity is scaled back to the speed it had right after the reflection,
    so the paddle movement only steers the ball.

    Returns:
        bool: True if the ball was deflected
    """
    if not boxes_overlap(paddle.box, ball.box):
        return False

    # A ball waiting for launch stays put
    if ball.velocity.is_zero():
        return False

    ball.velocity.x = -ball.velocity.x * SPEED_UP_FACTOR
    speed = ball.velocity.magnitude()

    ball.velocity.y += paddle.velocity.y * SPIN_TRANSFER
    ball.velocity.set_magnitude(speed)

    logger.debug(
        "Paddle %d hit, ball velocity now (%.1f, %.1f)",
        paddle.player_id,
        ball.velocity.x,
        ball.velocity.y,
    )
    return True


class CollisionDetector:
    """Collision checks between the ball and the arena"""

    def check_ball_out(self, ball: Ball, field_width: float) -> str | None:
        """Returns "left_goal" or "right_goal" once the ball fully left the arena"""
        if ball.box.right < 0:
            return "left_goal"
        if ball.box.left > field_width:
            return "right_goal"
        return None

    def check_ball_walls(self, ball: Ball, field_height: float) -> str | None:
        """Returns the wall the ball is moving into, if it crossed it"""
        if ball.velocity.y < 0 and ball.box.top < 0:
            return "top"
        if ball.velocity.y > 0 and ball.box.bottom > field_height:
            return "bottom"
        return None
