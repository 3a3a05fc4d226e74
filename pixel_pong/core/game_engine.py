"""
Pixel Pong game controller
"""

import logging
import random
from typing import TYPE_CHECKING
from typing import Any

from pixel_pong.core.interfaces.input import InputSource
from pixel_pong.core.interfaces.scheduler import FrameScheduler
from pixel_pong.core.interfaces.surface import DrawingSurface
from pixel_pong.core.physics import HUMAN, PhysicsEngine
from pixel_pong.core.timing import FrameTimer

if TYPE_CHECKING:
    from pixel_pong.gui.renderer import Renderer

logger = logging.getLogger(__name__)


class GameController:
    """
    Orchestrates one session: frame clock -> physics -> renderer, plus input

    Everything runs on the thread that delivers frames and input events;
    there is no locking, so a backend must not call into the controller
    from another thread.
    """

    def __init__(
        self,
        surface: DrawingSurface,
        scheduler: FrameScheduler,
        renderer: "Renderer",
        rng: random.Random | None = None,
    ):
        self.surface = surface
        self.scheduler = scheduler
        self.renderer = renderer
        self.physics_engine = PhysicsEngine(surface.width, surface.height, rng)
        self.timer = FrameTimer()

        self.running = False
        self.frame_count = 0
        # True while an on_frame callback is queued with the scheduler
        self._frame_requested = False

    def attach_input(self, source: InputSource) -> None:
        """Routes pointer moves to the human paddle and activations to launch()"""
        source.bind(self.on_pointer_move, self.on_activate)

    def start(self) -> None:
        """Starts the frame loop"""
        if self.running:
            return
        self.running = True
        self.timer.reset()
        self._request_frame()
        logger.info("Game started on a %dx%d arena", self.surface.width, self.surface.height)

    def stop(self) -> None:
        """Stops the frame loop after the current frame"""
        self.running = False

    def _request_frame(self) -> None:
        if self._frame_requested:
            return
        self._frame_requested = True
        self.scheduler.request_frame(self.on_frame)

    def on_frame(self, timestamp_ms: float) -> None:
        """Frame callback: one update then one draw, then schedule the next frame"""
        self._frame_requested = False
        if not self.running:
            return

        dt = self.timer.advance(timestamp_ms)
        if dt is not None:
            self.update(dt)
            self.draw()

        self._request_frame()

    def update(self, dt: float) -> dict[str, list]:
        self.frame_count += 1
        return self.physics_engine.update(dt)

    def draw(self) -> None:
        self.renderer.draw(self.physics_engine)

    def on_pointer_move(self, normalized_y: float) -> None:
        """Moves the human paddle; normalized_y is 0 at the top of the surface, 1 at the bottom"""
        scale = min(max(normalized_y, 0.0), 1.0)
        self.physics_engine.players[HUMAN].move_to(self.physics_engine.field_height * scale)

    def on_activate(self) -> None:
        self.physics_engine.launch()

    def reset_game(self) -> None:
        """Starts a new match with both scores at zero"""
        self.physics_engine.reset_game()
        logger.info("Match reset")

    def get_game_state(self) -> dict[str, Any]:
        """Returns the complete game state"""
        return self.physics_engine.get_game_state()

    def is_running(self) -> bool:
        return self.running
