"""
PyGame implementations of the drawing surface, frame clock and input source
"""

import pygame

from pixel_pong.core.interfaces.input import ActivateHandler, PointerMoveHandler
from pixel_pong.core.interfaces.scheduler import FrameCallback
from pixel_pong.core.interfaces.surface import Color
from pixel_pong.gui.scoreboard import Glyph


class PygameSurface:
    """Drawing surface backed by a pygame.Surface (usually the display)"""

    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self.width, self.height = screen.get_size()
        self._image_cache: dict[Glyph, pygame.Surface] = {}

    def clear(self, color: Color) -> None:
        self.screen.fill(color)

    def fill_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        rect = pygame.Rect(round(x), round(y), round(width), round(height))
        pygame.draw.rect(self.screen, color, rect)

    def draw_image(self, bitmap: Glyph, x: float, y: float) -> None:
        self.screen.blit(self._to_surface(bitmap), (round(x), round(y)))

    def _to_surface(self, bitmap: Glyph) -> pygame.Surface:
        """Converts a glyph mask to a transparent pygame surface, once per glyph"""
        image = self._image_cache.get(bitmap)
        if image is None:
            image = pygame.Surface((bitmap.width, bitmap.height), pygame.SRCALPHA)
            image.fill((*bitmap.color, 0))
            # surfarray is indexed (x, y), the mask is (row, column)
            alpha = pygame.surfarray.pixels_alpha(image)
            alpha[:] = bitmap.pixels.T * 255
            del alpha  # unlocks the surface
            self._image_cache[bitmap] = image
        return image


class PygameFrameScheduler:
    """
    requestAnimationFrame-style clock for a pygame main loop

    Callbacks queued with request_frame() run on the next dispatch(); the
    ones they queue while running wait for the following frame.
    """

    def __init__(self) -> None:
        self._pending: list[FrameCallback] = []

    def request_frame(self, callback: FrameCallback) -> None:
        self._pending.append(callback)

    def dispatch(self, timestamp_ms: float | None = None) -> int:
        """Runs the callbacks queued so far; returns how many ran"""
        if timestamp_ms is None:
            timestamp_ms = float(pygame.time.get_ticks())
        callbacks, self._pending = self._pending, []
        for callback in callbacks:
            callback(timestamp_ms)
        return len(callbacks)

    def has_pending(self) -> bool:
        return bool(self._pending)


class PygameInput:
    """Mouse input: motion moves the paddle, left click (or SPACE) launches the ball"""

    def __init__(self, surface_height: int):
        self.surface_height = surface_height
        self._on_pointer_move: PointerMoveHandler | None = None
        self._on_activate: ActivateHandler | None = None

    def bind(self, on_pointer_move: PointerMoveHandler, on_activate: ActivateHandler) -> None:
        self._on_pointer_move = on_pointer_move
        self._on_activate = on_activate

    def process_event(self, event: pygame.event.Event) -> bool:
        """Forwards a pygame event to the bound handlers; returns True if it was used"""
        if event.type == pygame.MOUSEMOTION and self._on_pointer_move is not None:
            self._on_pointer_move(event.pos[1] / self.surface_height)
            return True
        if self._on_activate is not None and (
            (event.type == pygame.MOUSEBUTTONDOWN and event.button == 1)
            or (event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE)
        ):
            self._on_activate()
            return True
        return False
