"""
Pixel Pong example with a custom window and a reproducible serve sequence
"""

import random

from pixel_pong.gui.game_app import PixelPongApp
from pixel_pong.utils.config import GameConfig


def run_small_game():
    """Launch a game in a small window with chunky score digits"""
    print("Launching a Pixel Pong game (click to serve, ESC to quit)...")

    config = GameConfig(FIELD_WIDTH=640, FIELD_HEIGHT=480, CHAR_PIXEL=12, FPS=60)
    app = PixelPongApp(config, rng=random.Random(2024))
    app.run()


if __name__ == "__main__":
    run_small_game()
