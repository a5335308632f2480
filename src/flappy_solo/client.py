#!/usr/bin/env python3
"""
client.py

pygame host loop: window, input delivery, frame clock and rendering.
Uses the modular structure: constants, data_models, game_engine, renderer.
"""

import argparse
import logging
import random
from dataclasses import dataclass
from typing import List, Optional

import pygame

from .assets import AssetStore
from .constants import (
    ASSETS_DIR, DEFAULT_SCREEN_HEIGHT, DEFAULT_SCREEN_WIDTH, RENDER_FPS, WINDOW_TITLE
)
from .game_engine import GameEngine
from .renderer import Renderer

logger = logging.getLogger(__name__)


@dataclass
class GameConfig:
    width: int = DEFAULT_SCREEN_WIDTH
    height: int = DEFAULT_SCREEN_HEIGHT
    fps: int = RENDER_FPS
    assets_dir: str = ASSETS_DIR
    fullscreen: bool = False
    seed: Optional[int] = None
    debug: bool = False

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"window size must be positive, got {self.width}x{self.height}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")


class FlappyClient:
    def __init__(self, config: GameConfig):
        pygame.init()
        self.config = config
        self.screen = self._open_window(config.width, config.height)
        pygame.display.set_caption(WINDOW_TITLE)

        width, height = self.screen.get_size()
        self.engine = GameEngine.for_viewport(width, height, rng=random.Random(config.seed))
        self.assets = AssetStore().load(config.assets_dir)
        self.renderer = Renderer(self.assets)

        self.clock = pygame.time.Clock()
        self.running = False

    def _open_window(self, width: int, height: int) -> pygame.Surface:
        if self.config.fullscreen:
            return pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        return pygame.display.set_mode((width, height), pygame.RESIZABLE)

    def handle_event(self, event: pygame.event.Event):
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.running = False
        elif event.type in (pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN):
            self.engine.activate()
        elif event.type == pygame.VIDEORESIZE:
            self.screen = self._open_window(event.w, event.h)
            self.engine.resize(*self.screen.get_size())

    def tick(self):
        """One display refresh: drain input, step the world, draw."""
        self.clock.tick(self.config.fps)
        for event in pygame.event.get():
            self.handle_event(event)
        if not self.running:
            return

        self.engine.step(pygame.time.get_ticks())
        self.renderer.draw(self.screen, self.engine.state)
        pygame.display.flip()

    def run(self):
        """The main client execution loop."""
        self.running = True
        logger.info("Starting %dx%d at %d fps", *self.screen.get_size(), self.config.fps)
        try:
            while self.running:
                self.tick()
        finally:
            pygame.quit()


def parse_args(argv: Optional[List[str]] = None) -> GameConfig:
    parser = argparse.ArgumentParser(prog="flappy-solo", description="Endless pipe-dodging arcade game")
    parser.add_argument("--width", type=int, default=DEFAULT_SCREEN_WIDTH, help="Initial window width")
    parser.add_argument("--height", type=int, default=DEFAULT_SCREEN_HEIGHT, help="Initial window height")
    parser.add_argument("--fps", type=int, default=RENDER_FPS, help="Frame rate cap")
    parser.add_argument("--assets", dest="assets_dir", default=ASSETS_DIR, help="Directory holding the sprites")
    parser.add_argument("--fullscreen", action="store_true", help="Use the whole display")
    parser.add_argument("--seed", type=int, default=None, help="Seed for pipe placement")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    args = parser.parse_args(argv)
    try:
        return GameConfig(**vars(args))
    except ValueError as e:
        parser.error(str(e))


def main(argv: Optional[List[str]] = None):
    config = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if config.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    FlappyClient(config).run()


if __name__ == "__main__":
    main()
