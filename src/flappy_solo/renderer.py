"""
renderer.py: Draws one frame of the game state. Never mutates it.
"""

from typing import Dict

import pygame

from .assets import AssetStore
from .constants import (
    PROMPT_COLOR, PROMPT_FONT_RATIO, PROMPT_TEXT, SCORE_COLOR, SCORE_FONT_RATIO, SKY_COLOR
)
from .data_models import GameState
from .physics_core import tilt_angle


def _size(width: float, height: float):
    return max(1, int(width)), max(1, int(height))


class Renderer:
    def __init__(self, assets: AssetStore):
        self.assets = assets
        self._fonts: Dict[int, pygame.font.Font] = {}

    def _font(self, size: int) -> pygame.font.Font:
        size = max(1, size)
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def draw(self, screen: pygame.Surface, state: GameState):
        viewport = state.viewport
        size = _size(viewport.width, viewport.height)

        if self.assets.background is not None:
            screen.blit(pygame.transform.scale(self.assets.background, size), (0, 0))
        else:
            screen.fill(SKY_COLOR)

        if not state.session.started:
            self._draw_start_overlay(screen, state)
            return

        self._draw_pipes(screen, state)
        self._draw_bird(screen, state)
        self._draw_score(screen, state)

    def _draw_start_overlay(self, screen: pygame.Surface, state: GameState):
        viewport = state.viewport
        scale = viewport.scale
        if self.assets.start_screen is not None:
            overlay = pygame.transform.scale(self.assets.start_screen,
                                             _size(viewport.width, viewport.height))
            screen.blit(overlay, (0, 0))

        font = self._font(int(viewport.height * PROMPT_FONT_RATIO))
        prompt = font.render(PROMPT_TEXT, True, PROMPT_COLOR)
        prompt_pos = (viewport.width / 2 - 150 * scale, viewport.height / 2 + 60 * scale)
        screen.blit(prompt, prompt_pos)

        if state.best_score:
            best = font.render(f"Best: {state.best_score}", True, PROMPT_COLOR)
            screen.blit(best, (prompt_pos[0], prompt_pos[1] + prompt.get_height() * 1.5))

    def _draw_pipes(self, screen: pygame.Surface, state: GameState):
        scale = state.viewport.scale
        flipped = self.assets.pipe_flipped
        lower = self.assets.pipe

        for pipe in state.pipes:
            # Upper segment only once its mirrored sprite exists
            if flipped is not None:
                height = flipped.get_height() * scale
                sprite = pygame.transform.scale(flipped, _size(pipe.width, height))
                screen.blit(sprite, (pipe.x, pipe.top_height - height))

            if lower is not None:
                height = lower.get_height() * scale
                sprite = pygame.transform.scale(lower, _size(pipe.width, height))
                screen.blit(sprite, (pipe.x, pipe.bottom_y))

    def _draw_bird(self, screen: pygame.Surface, state: GameState):
        bird = state.bird
        if self.assets.bird is None:
            return
        sprite = pygame.transform.scale(self.assets.bird, _size(bird.width, bird.height))
        # pygame rotates counter-clockwise for positive angles
        sprite = pygame.transform.rotate(sprite, -tilt_angle(bird.velocity))
        center = (round(bird.x + bird.width / 2), round(bird.y + bird.height / 2))
        screen.blit(sprite, sprite.get_rect(center=center))

    def _draw_score(self, screen: pygame.Surface, state: GameState):
        viewport = state.viewport
        font = self._font(int(viewport.height * SCORE_FONT_RATIO))
        score_text = font.render(f"Score: {state.session.score}", True, SCORE_COLOR)
        screen.blit(score_text, (20 * viewport.scale, 40 * viewport.scale))
