"""
Main game application with PyGame GUI
"""

import argparse
import logging
import random

import pygame

from pixel_pong.core.game_engine import GameController
from pixel_pong.gui.pygame_backend import PygameFrameScheduler, PygameInput, PygameSurface
from pixel_pong.gui.renderer import Renderer
from pixel_pong.utils.config import GameConfig, game_config, load_config_from_file

CONTROLS = (
    ("Mouse", "Move the left paddle"),
    ("Click / SPACE", "Serve the ball"),
    ("R", "New match"),
    ("ESC", "Quit"),
)


class PixelPongApp:
    """Main application class for Pixel Pong with PyGame GUI"""

    def __init__(self, config: GameConfig | None = None, rng: random.Random | None = None):
        """Initialize the application"""
        self.config = config or game_config

        pygame.init()
        screen = pygame.display.set_mode((self.config.FIELD_WIDTH, self.config.FIELD_HEIGHT))
        pygame.display.set_caption(self.config.WINDOW_TITLE)
        self.clock = pygame.time.Clock()

        self.surface = PygameSurface(screen)
        self.scheduler = PygameFrameScheduler()
        self.input = PygameInput(self.surface.height)
        self.renderer = Renderer(
            self.surface,
            char_pixel=self.config.CHAR_PIXEL,
            score_top=self.config.SCORE_TOP,
            background_color=self.config.BACKGROUND_COLOR,
            foreground_color=self.config.FOREGROUND_COLOR,
        )
        self.controller = GameController(self.surface, self.scheduler, self.renderer, rng)
        self.controller.attach_input(self.input)

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.controller.stop()
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.controller.stop()
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_r:
            self.controller.reset_game()
        else:
            self.input.process_event(event)

    def run(self) -> None:
        """Main loop: events, then the frame callbacks, then flip"""
        self.controller.start()
        try:
            while self.controller.is_running():
                for event in pygame.event.get():
                    self.handle_event(event)

                self.scheduler.dispatch()
                pygame.display.flip()
                self.clock.tick(self.config.FPS)
        finally:
            self.cleanup()

    def cleanup(self) -> None:
        pygame.quit()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Two-player Pong against the computer")
    parser.add_argument("--config", type=str, help="JSON configuration file")
    parser.add_argument("--width", type=int, help="Field width in pixels")
    parser.add_argument("--height", type=int, help="Field height in pixels")
    parser.add_argument("--char-pixel", type=int, help="Scoreboard pixel size")
    parser.add_argument("--fps", type=int, help="Frame rate cap")
    parser.add_argument("--log-level", type=str, help="Logging level (DEBUG, INFO, ...)")
    return parser.parse_args(argv)


def apply_args(config: GameConfig, args: argparse.Namespace) -> None:
    """Applies command-line overrides on top of the configuration (validated)"""
    overrides = {
        "FIELD_WIDTH": args.width,
        "FIELD_HEIGHT": args.height,
        "CHAR_PIXEL": args.char_pixel,
        "FPS": args.fps,
        "LOG_LEVEL": args.log_level,
    }
    for name, value in overrides.items():
        if value is not None:
            setattr(config, name, value)


def main(argv: list[str] | None = None) -> None:
    """Entry point of the pixel-pong command"""
    args = parse_args(argv)

    if args.config and not load_config_from_file(args.config):
        print(f"Could not load {args.config}, using default configuration")
    apply_args(game_config, args)

    logging.basicConfig(
        level=game_config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print("=== PIXEL PONG ===")
    print()
    print("CONTROLS:")
    for key, action in CONTROLS:
        print(f"  {key}: {action}")
    print()

    PixelPongApp(game_config).run()


if __name__ == "__main__":
    main()
