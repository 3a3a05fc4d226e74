"""
Frame scheduler protocol - the host's per-frame clock
"""

from collections.abc import Callable
from typing import Protocol

FrameCallback = Callable[[float], None]


class FrameScheduler(Protocol):
    """
    Protocol for frame clocks.

    A callback registered with request_frame() is called once, on the next
    display refresh, with a monotonically increasing timestamp in
    milliseconds. Callbacks re-register themselves to keep running; there
    is no fixed time step.
    """

    def request_frame(self, callback: FrameCallback) -> None:
        """Schedule callback for the next frame"""
        ...
