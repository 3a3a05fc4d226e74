"""
Utilities of the Pixel Pong game
"""

from pixel_pong.utils.config import GameConfig
from pixel_pong.utils.config import game_config

__all__ = ["game_config", "GameConfig"]
