import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from flappy_solo.data_models import Bird, Viewport
from flappy_solo.game_engine import GameEngine


@pytest.fixture
def viewport():
    return Viewport(1280, 720)


@pytest.fixture
def bird(viewport):
    return Bird.spawn(viewport)


@pytest.fixture
def engine():
    return GameEngine.for_viewport(1280, 720, rng=random.Random(7))


@pytest.fixture
def pygame_session():
    pygame.init()
    yield
    pygame.quit()
