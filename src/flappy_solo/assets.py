"""
assets.py: Sprite loading with plain-colour fallbacks.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional, Tuple

import pygame

from .constants import (
    BACKGROUND_IMAGE, BIRD_COLOR, BIRD_IMAGE, BIRD_SIZE, DEFAULT_SCREEN_HEIGHT,
    DEFAULT_SCREEN_WIDTH, FALLBACK_PIPE_HEIGHT, PIPE_COLOR, PIPE_IMAGE,
    PIPE_WIDTH, SKY_COLOR, START_IMAGE
)

logger = logging.getLogger(__name__)


def _solid(size: Tuple[int, int], color) -> pygame.Surface:
    surface = pygame.Surface(size)
    surface.fill(color)
    return surface


@dataclass
class AssetStore:
    """
    Sprites used by the renderer. pipe_flipped stays None until the pipe
    sprite has finished loading; the renderer skips the upper pipe until then.
    """
    bird: Optional[pygame.Surface] = None
    pipe: Optional[pygame.Surface] = None
    pipe_flipped: Optional[pygame.Surface] = None
    background: Optional[pygame.Surface] = None
    start_screen: Optional[pygame.Surface] = None

    def load(self, directory: str):
        """Loads every sprite from directory, falling back per file on failure."""
        self.bird = self._load_image(directory, BIRD_IMAGE,
                                     lambda: _solid((BIRD_SIZE, BIRD_SIZE), BIRD_COLOR))
        self.background = self._load_image(
            directory, BACKGROUND_IMAGE,
            lambda: _solid((DEFAULT_SCREEN_WIDTH, DEFAULT_SCREEN_HEIGHT), SKY_COLOR))
        # No fallback overlay: the prompt text is drawn straight onto the background
        self.start_screen = self._load_image(directory, START_IMAGE, lambda: None)
        pipe = self._load_image(directory, PIPE_IMAGE,
                                lambda: _solid((PIPE_WIDTH, FALLBACK_PIPE_HEIGHT), PIPE_COLOR))
        self.on_pipe_loaded(pipe)
        return self

    def on_pipe_loaded(self, surface: pygame.Surface):
        """Completion hook for the pipe sprite; builds the mirrored upper variant."""
        self.pipe = surface
        self.pipe_flipped = pygame.transform.flip(surface, False, True)

    def _load_image(self, directory: str, name: str, fallback):
        path = os.path.join(directory, name)
        try:
            image = pygame.image.load(path)
        except (pygame.error, FileNotFoundError) as e:
            logger.warning("Could not load %s (%s), using fallback", path, e)
            return fallback()

        if pygame.display.get_surface() is not None:
            image = image.convert_alpha()
        logger.debug("Loaded %s (%dx%d)", path, image.get_width(), image.get_height())
        return image
