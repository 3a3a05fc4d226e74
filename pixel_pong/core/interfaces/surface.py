"""
Drawing surface protocol - defines what the renderer needs from a display backend
"""

from typing import TYPE_CHECKING
from typing import Protocol

if TYPE_CHECKING:
    from pixel_pong.gui.scoreboard import Glyph

Color = tuple[int, int, int]


class DrawingSurface(Protocol):
    """
    Protocol for 2D drawing surfaces.

    The surface owns the pixels and its dimensions; the arena is sized after
    width and height. Coordinates are in surface pixels, origin top-left.
    """

    width: int
    height: int

    def clear(self, color: Color) -> None:
        """Fill the whole surface with a color"""
        ...

    def fill_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        """Fill an axis-aligned rectangle given by its top-left corner and size"""
        ...

    def draw_image(self, bitmap: "Glyph", x: float, y: float) -> None:
        """Copy a prerendered bitmap with its top-left corner at (x, y)"""
        ...
