import pygame
import pytest

from flappy_solo.assets import AssetStore
from flappy_solo.data_models import GameState, Pipe, Viewport
from flappy_solo.renderer import Renderer

RED = (255, 0, 0, 255)
GREEN = (0, 200, 0, 255)
BLUE = (0, 0, 255, 255)


def solid(size, color):
    surface = pygame.Surface(size)
    surface.fill(color)
    return surface


@pytest.fixture
def assets(pygame_session):
    store = AssetStore(
        bird=solid((40, 40), (255, 255, 0)),
        background=solid((100, 100), RED[:3]),
    )
    store.pipe = solid((80, 720), GREEN[:3])
    return store


@pytest.fixture
def state():
    state = GameState.fresh(Viewport(1280, 720))
    state.pipes.append(Pipe(x=100, top_height=300, bottom_y=500, width=80))
    return state


@pytest.fixture
def screen(pygame_session):
    return pygame.Surface((1280, 720))


def test_start_overlay_hides_pipes(assets, state, screen):
    assets.on_pipe_loaded(assets.pipe)
    Renderer(assets).draw(screen, state)
    assert tuple(screen.get_at((120, 600))) == RED
    assert tuple(screen.get_at((120, 200))) == RED


def test_start_overlay_image_covers_background(assets, state, screen):
    assets.start_screen = solid((10, 10), BLUE[:3])
    Renderer(assets).draw(screen, state)
    assert tuple(screen.get_at((5, 700))) == BLUE


def test_upper_pipe_skipped_without_mirrored_sprite(assets, state, screen):
    state.session.started = True
    assert assets.pipe_flipped is None
    Renderer(assets).draw(screen, state)
    assert tuple(screen.get_at((120, 600))) == GREEN
    assert tuple(screen.get_at((120, 200))) == RED


def test_upper_pipe_drawn_once_mirrored(assets, state, screen):
    state.session.started = True
    assets.on_pipe_loaded(assets.pipe)
    Renderer(assets).draw(screen, state)
    assert tuple(screen.get_at((120, 200))) == GREEN
    assert tuple(screen.get_at((120, 400))) == RED
    assert tuple(screen.get_at((120, 600))) == GREEN


def test_bird_drawn_at_its_position(assets, state, screen):
    state.session.started = True
    Renderer(assets).draw(screen, state)
    bird = state.bird
    center = (int(bird.x + bird.width / 2), int(bird.y + bird.height / 2))
    assert tuple(screen.get_at(center)) == (255, 255, 0, 255)


def test_draw_does_not_mutate_state(assets, state, screen):
    state.session.started = True
    state.bird.velocity = 250.0
    before = repr(state)
    Renderer(assets).draw(screen, state)
    assert repr(state) == before


def test_missing_background_fills_sky(state, screen, pygame_session):
    Renderer(AssetStore()).draw(screen, state)
    assert tuple(screen.get_at((1270, 5)))[:3] == (0, 191, 255)
