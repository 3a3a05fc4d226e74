"""
Shared fixtures: in-memory stand-ins for the drawing surface, frame clock and input
"""

import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")


class RecordingSurface:
    """Drawing surface that records every call instead of painting"""

    def __init__(self, width: int = 800, height: int = 600):
        self.width = width
        self.height = height
        self.calls: list[tuple] = []

    def clear(self, color):
        self.calls.append(("clear", color))

    def fill_rect(self, x, y, width, height, color):
        self.calls.append(("fill_rect", x, y, width, height, color))

    def draw_image(self, bitmap, x, y):
        self.calls.append(("draw_image", bitmap, x, y))

    def calls_named(self, name: str) -> list[tuple]:
        return [call for call in self.calls if call[0] == name]


class ManualScheduler:
    """Frame clock driven by the test"""

    def __init__(self):
        self.pending = []

    def request_frame(self, callback):
        self.pending.append(callback)

    def fire(self, timestamp_ms: float) -> None:
        callbacks, self.pending = self.pending, []
        for callback in callbacks:
            callback(timestamp_ms)


class FakeInput:
    """Input source whose events are triggered by the test"""

    def __init__(self):
        self.on_pointer_move = None
        self.on_activate = None

    def bind(self, on_pointer_move, on_activate):
        self.on_pointer_move = on_pointer_move
        self.on_activate = on_activate


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def fake_input():
    return FakeInput()


@pytest.fixture
def rng():
    return random.Random(1234)
