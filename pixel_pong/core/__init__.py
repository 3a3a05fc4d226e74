"""
Core module of Pixel Pong game
"""

from pixel_pong.core.entities import AxisAlignedBox
from pixel_pong.core.entities import Ball
from pixel_pong.core.entities import DegenerateVectorError
from pixel_pong.core.entities import Paddle
from pixel_pong.core.entities import Vector2D
from pixel_pong.core.game_engine import GameController
from pixel_pong.core.physics import PhysicsEngine
from pixel_pong.core.timing import FrameTimer

__all__ = [
    "AxisAlignedBox",
    "Ball",
    "Paddle",
    "Vector2D",
    "DegenerateVectorError",
    "PhysicsEngine",
    "GameController",
    "FrameTimer",
]
