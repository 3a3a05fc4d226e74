"""
GUI module for Pixel Pong - renderer, scoreboard font and PyGame backend
"""

from pixel_pong.gui.renderer import Renderer
from pixel_pong.gui.scoreboard import Glyph, build_glyphs, score_layout

__all__ = ["Renderer", "Glyph", "build_glyphs", "score_layout"]
