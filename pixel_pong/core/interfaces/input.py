"""
Input source protocol - pointer and activation events
"""

from collections.abc import Callable
from typing import Protocol

PointerMoveHandler = Callable[[float], None]
ActivateHandler = Callable[[], None]


class InputSource(Protocol):
    """
    Protocol for input sources (mouse, touch, test doubles, etc.).

    Events must be delivered on the same thread as the frame callbacks.
    """

    def bind(self, on_pointer_move: PointerMoveHandler, on_activate: ActivateHandler) -> None:
        """
        Register the event handlers.

        Args:
            on_pointer_move: Called with the pointer's vertical position,
                normalized to 0..1 relative to the drawing surface height
            on_activate: Called on a discrete activation (click, key press)
        """
        ...
