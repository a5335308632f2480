import pygame
import pytest

from flappy_solo.assets import AssetStore
from flappy_solo.constants import BIRD_IMAGE, BIRD_SIZE, PIPE_WIDTH


@pytest.fixture
def store(pygame_session):
    return AssetStore()


def test_missing_files_fall_back(store, tmp_path):
    store.load(str(tmp_path))
    assert store.bird.get_size() == (BIRD_SIZE, BIRD_SIZE)
    assert store.pipe.get_width() == PIPE_WIDTH
    assert store.pipe_flipped is not None
    assert store.pipe_flipped.get_size() == store.pipe.get_size()
    assert store.background is not None
    assert store.start_screen is None


def test_mirrored_pipe_waits_for_load(store):
    assert store.pipe is None
    assert store.pipe_flipped is None


def test_pipe_is_mirrored_vertically(store):
    pipe = pygame.Surface((2, 2))
    pipe.fill((255, 0, 0), pygame.Rect(0, 0, 2, 1))
    pipe.fill((0, 0, 255), pygame.Rect(0, 1, 2, 1))
    store.on_pipe_loaded(pipe)
    assert store.pipe is pipe
    assert tuple(store.pipe_flipped.get_at((0, 0)))[:3] == (0, 0, 255)
    assert tuple(store.pipe_flipped.get_at((0, 1)))[:3] == (255, 0, 0)


def test_loads_existing_image(store, tmp_path):
    sprite = pygame.Surface((64, 32))
    sprite.fill((10, 20, 30))
    pygame.image.save(sprite, str(tmp_path / BIRD_IMAGE))
    store.load(str(tmp_path))
    assert store.bird.get_size() == (64, 32)
