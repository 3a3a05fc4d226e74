"""
Bitmap font for the scoreboard digits
"""

from dataclasses import dataclass

import numpy as np

GLYPH_COLUMNS = 3
GLYPH_ROWS = 5

# 3x5 digit patterns, row-major, "1" is a filled pixel
DIGIT_PATTERNS = (
    "111101101101111",  # 0
    "010010010010010",  # 1
    "111001111100111",  # 2
    "111001111001111",  # 3
    "101101111001001",  # 4
    "111100111001111",  # 5
    "111100111101111",  # 6
    "111001001001001",  # 7
    "111101111101111",  # 8
    "111101111001111",  # 9
)


@dataclass(frozen=True, eq=False)
class Glyph:
    """A prerendered digit: a boolean pixel mask and the color to paint it with"""

    digit: int
    pixels: np.ndarray  # shape (height, width), True where filled
    color: tuple[int, int, int]

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])


def rasterize_pattern(pattern: str, pixel_size: int) -> np.ndarray:
    """Scales a 15-character pattern up to a (5 * pixel_size, 3 * pixel_size) mask"""
    if len(pattern) != GLYPH_COLUMNS * GLYPH_ROWS or set(pattern) - {"0", "1"}:
        raise ValueError(f"Invalid glyph pattern: {pattern!r}")
    if pixel_size <= 0:
        raise ValueError(f"Pixel size must be positive, got {pixel_size}")

    cells = np.array([char == "1" for char in pattern]).reshape(GLYPH_ROWS, GLYPH_COLUMNS)
    return np.kron(cells, np.ones((pixel_size, pixel_size), dtype=bool))


def build_glyphs(pixel_size: int, color: tuple[int, int, int] = (255, 255, 255)) -> list[Glyph]:
    """Builds the ten digit glyphs, indexed by digit"""
    return [
        Glyph(digit, rasterize_pattern(pattern, pixel_size), color)
        for digit, pattern in enumerate(DIGIT_PATTERNS)
    ]


def score_layout(
    score: int, slot: int, field_width: float, pixel_size: int
) -> list[tuple[int, float]]:
    """
    Places the digits of a score on the scoreboard

    The field is split in thirds; the digits of slot 0 are centered on the
    first third line, slot 1 on the second. Each character advances by the
    glyph width plus a one pixel-unit gap.

    Returns:
        List of (digit, x) pairs, left to right
    """
    if score < 0:
        raise ValueError(f"Score must be non-negative, got {score}")

    digits = [int(char) for char in str(score)]
    align = field_width / 3
    char_width = pixel_size * (GLYPH_COLUMNS + 1)
    offset = align * (slot + 1) - char_width * len(digits) / 2 + pixel_size / 2
    return [(digit, offset + position * char_width) for position, digit in enumerate(digits)]
