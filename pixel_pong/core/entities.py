"""
Pixel Pong game entities: vectors, boxes, ball and paddles
"""

from dataclasses import dataclass
from dataclasses import field

import numpy as np

BALL_SIZE = 10.0
PADDLE_WIDTH = 20.0
PADDLE_HEIGHT = 100.0


class DegenerateVectorError(ZeroDivisionError):
    """Raised when rescaling a vector whose magnitude is zero"""


@dataclass
class Vector2D:
    """Simple 2D vector for positions and velocities"""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __iadd__(self, other: "Vector2D") -> "Vector2D":
        self.x += other.x
        self.y += other.y
        return self

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y * scalar)

    def magnitude(self) -> float:
        return float(np.linalg.norm([self.x, self.y]))

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0

    def with_magnitude(self, target: float) -> "Vector2D":
        """
        Returns a copy pointing in the same direction with the given magnitude

        Raises:
            DegenerateVectorError: if the vector has no direction (magnitude 0)
        """
        current = self.magnitude()
        if current == 0:
            raise DegenerateVectorError(
                f"Cannot set magnitude {target} on a zero-length vector"
            )
        scale = target / current
        return Vector2D(self.x * scale, self.y * scale)

    def set_magnitude(self, target: float) -> None:
        """In-place variant of with_magnitude()"""
        scaled = self.with_magnitude(target)
        self.x = scaled.x
        self.y = scaled.y

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def copy(self) -> "Vector2D":
        return Vector2D(self.x, self.y)


@dataclass
class AxisAlignedBox:
    """Rectangle anchored on its center; extents hold the full width and height"""

    center: Vector2D = field(default_factory=Vector2D)
    extents: Vector2D = field(default_factory=Vector2D)

    def __post_init__(self) -> None:
        if self.extents.x < 0 or self.extents.y < 0:
            raise ValueError(f"Box extents must be non-negative, got {self.extents}")

    @property
    def left(self) -> float:
        return self.center.x - self.extents.x / 2

    @property
    def right(self) -> float:
        return self.center.x + self.extents.x / 2

    @property
    def top(self) -> float:
        return self.center.y - self.extents.y / 2

    @property
    def bottom(self) -> float:
        return self.center.y + self.extents.y / 2

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the rectangle as (x, y, width, height) from its top-left corner"""
        return (self.left, self.top, self.extents.x, self.extents.y)


class Ball:
    """Game ball"""

    def __init__(self, x: float = 0.0, y: float = 0.0, vx: float = 0.0, vy: float = 0.0):
        self.box = AxisAlignedBox(Vector2D(x, y), Vector2D(BALL_SIZE, BALL_SIZE))
        self.velocity = Vector2D(vx, vy)

    @property
    def position(self) -> Vector2D:
        return self.box.center

    def update(self, dt: float) -> None:
        """Integrates the position over dt seconds"""
        self.box.center += self.velocity * dt

    def stop_at(self, x: float, y: float) -> None:
        """Places the ball at (x, y) and removes all velocity"""
        self.velocity = Vector2D(0.0, 0.0)
        self.box.center.x = x
        self.box.center.y = y

    def bounce_vertical(self) -> None:
        """Vertical bounce (top/bottom walls)"""
        self.velocity.y = -self.velocity.y


class Paddle:
    """
    Player paddle

    The velocity is never set directly: update() derives it from how far the
    paddle moved since the previous frame, so it reflects how fast the player
    (or the computer) is dragging the paddle.
    """

    def __init__(self, x: float = 0.0, y: float = 0.0, player_id: int = 0):
        self.box = AxisAlignedBox(Vector2D(x, y), Vector2D(PADDLE_WIDTH, PADDLE_HEIGHT))
        self.player_id = player_id
        self.velocity = Vector2D(0.0, 0.0)
        self.score = 0
        self.prev_position = Vector2D(x, y)

    @property
    def position(self) -> Vector2D:
        return self.box.center

    def update(self, dt: float) -> None:
        """Recomputes the finite-difference velocity and refreshes the position cache"""
        if dt <= 0:
            return
        self.velocity.y = (self.box.center - self.prev_position).y / dt
        self.prev_position.y = self.box.center.y

    def move_to(self, y: float) -> None:
        self.box.center.y = y

    def reset_position(self, y: float) -> None:
        """Moves the paddle without producing a velocity spike on the next frame"""
        self.box.center.y = y
        self.prev_position.y = y
        self.velocity = Vector2D(0.0, 0.0)
