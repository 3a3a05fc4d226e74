"""
Surface renderer for Pixel Pong
"""

from pixel_pong.core.entities import AxisAlignedBox
from pixel_pong.core.interfaces.surface import Color, DrawingSurface
from pixel_pong.core.physics import PhysicsEngine
from pixel_pong.gui.scoreboard import build_glyphs, score_layout
from pixel_pong.utils.config import game_config


class Renderer:
    """Paints the game state on a drawing surface; it never modifies the engine"""

    def __init__(
        self,
        surface: DrawingSurface,
        char_pixel: int | None = None,
        score_top: float | None = None,
        background_color: Color | None = None,
        foreground_color: Color | None = None,
    ):
        self.surface = surface
        self.char_pixel = game_config.CHAR_PIXEL if char_pixel is None else char_pixel
        self.score_top = game_config.SCORE_TOP if score_top is None else score_top
        self.background_color = background_color or game_config.BACKGROUND_COLOR
        self.foreground_color = foreground_color or game_config.FOREGROUND_COLOR
        self.glyphs = build_glyphs(self.char_pixel, self.foreground_color)

    def draw(self, engine: PhysicsEngine) -> None:
        """Draws a full frame"""
        self.surface.clear(self.background_color)
        self.draw_box(engine.ball.box)
        for player in engine.players:
            self.draw_box(player.box)
        self.draw_score(engine.score, engine.field_width)

    def draw_box(self, box: AxisAlignedBox) -> None:
        left, top, width, height = box.get_rect()
        self.surface.fill_rect(left, top, width, height, self.foreground_color)

    def draw_score(self, score: list[int], field_width: float) -> None:
        for slot, points in enumerate(score):
            for digit, x in score_layout(points, slot, field_width, self.char_pixel):
                self.surface.draw_image(self.glyphs[digit], x, self.score_top)
