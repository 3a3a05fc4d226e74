"""
Frame timing for variable-rate frame callbacks
"""

from dataclasses import dataclass


@dataclass
class FrameTimer:
    """Turns the timestamps handed out by a frame scheduler into time steps"""

    last_timestamp: float | None = None

    def advance(self, timestamp_ms: float) -> float | None:
        """
        Records a frame timestamp (in milliseconds)

        Returns:
            The elapsed time since the previous frame in seconds, or None on
            the first frame and when the clock did not move forward.
        """
        previous = self.last_timestamp
        self.last_timestamp = timestamp_ms
        if previous is None or timestamp_ms <= previous:
            return None
        return (timestamp_ms - previous) / 1000

    def reset(self) -> None:
        self.last_timestamp = None
