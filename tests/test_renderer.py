import copy

import pygame
import pytest

from flappy.data_models import GamePhase, Hero, Pipe, Size, Vector2
from flappy.renderer import Renderer, hero_tilt


@pytest.fixture
def renderer(engine, screens):
    return Renderer(engine.scaling, screens)


@pytest.fixture
def surface(scaling):
    return pygame.Surface((int(scaling.width), int(scaling.height)))


def test_hero_tilt_is_clamped():
    assert hero_tilt(Hero(vel=Vector2(80, 0))) == 0
    assert hero_tilt(Hero(vel=Vector2(80, 150))) == pytest.approx(0.4)
    assert hero_tilt(Hero(vel=Vector2(80, 10000))) == 0.8
    assert hero_tilt(Hero(vel=Vector2(80, -10000))) == -0.5


def test_title_screen_renders(game, engine, renderer, surface):
    engine.reset_game_state(game)
    game.state = GamePhase.TITLE
    before = copy.deepcopy(game)

    renderer.render(game, surface)

    assert game == before


def test_instructions_render(game, screens, renderer, surface):
    screens.show_instructions(game)
    renderer.render(game, surface)
    assert game.state == GamePhase.INSTRUCTIONS


def test_rendering_play_does_not_change_game(game, engine, screens, renderer, surface):
    screens.start_game(game)
    for _ in range(10):
        engine.tick(game, 1 / 60)
    game.hero.vel.y = 500
    before = copy.deepcopy(game)

    renderer.render(game, surface)
    renderer.render(game, surface)

    assert game == before


def test_paused_banner_renders(game, engine, screens, renderer, surface):
    screens.start_game(game)
    engine.tick(game, 1 / 60)
    engine.toggle_pause(game)
    renderer.render(game, surface)
    assert game.pause


def test_game_over_overlays_render(game, engine, screens, renderer, surface):
    screens.start_game(game)
    game.score = 30
    game.hero.pos.y = 1000
    engine.tick(game, 1 / 60)
    assert screens.awaiting_initials
    screens.type_initial("q")
    renderer.render(game, surface)

    screens.submit_initials(game)
    renderer.render(game, surface)
    assert game.state == GamePhase.GAMEOVER


def test_renders_after_resize(game, engine, screens, renderer):
    screens.start_game(game)
    engine.tick(game, 1 / 60)
    engine.resize(game, 1000, 400)
    renderer.render(game, pygame.Surface((1000, 400)))
    assert renderer.scaling.scale_x == 2


def test_pipe_casts_translucent_shadow(renderer):
    surface = pygame.Surface((500, 200))
    surface.fill((255, 255, 255))
    pipe = Pipe(pos=Vector2(200, 140), size=Size(50, 60))

    # Hero at RENDER_X leaves the pipe unshifted
    renderer._draw_pipe(surface, pipe, 60)

    # Right of the body, below the cap: only the shadow covers this pixel
    shaded = surface.get_at((248, 180))
    assert 150 < shaded.r < 230
    assert shaded.r == shaded.g == shaded.b
    assert surface.get_at((249, 180)).r == 255
