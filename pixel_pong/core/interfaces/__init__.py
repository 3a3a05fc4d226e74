"""
Core interfaces and protocols for Pixel Pong

This module defines the collaborators the game drives but does not
implement: a drawing surface, a frame clock and an input source.
"""

from pixel_pong.core.interfaces.input import InputSource
from pixel_pong.core.interfaces.scheduler import FrameScheduler
from pixel_pong.core.interfaces.surface import DrawingSurface

__all__ = ["DrawingSurface", "FrameScheduler", "InputSource"]
