"""
Run the simulation without a display and print what happens
"""

import random

from pixel_pong.core.physics import PhysicsEngine


def run_headless(seconds: float = 20.0, dt: float = 1 / 60) -> None:
    engine = PhysicsEngine(800, 600, random.Random(0))
    engine.launch()

    elapsed = 0.0
    while elapsed < seconds:
        events = engine.update(dt)
        for hit in events["paddle_hits"]:
            speed = engine.ball.velocity.magnitude()
            print(f"{elapsed:6.2f}s paddle {hit['player']} hit, speed {speed:.0f}")
        for goal in events["goals"]:
            print(f"{elapsed:6.2f}s point for paddle {goal['player']}, score {goal['score']}")
            engine.launch()
        elapsed += dt


if __name__ == "__main__":
    run_headless()
