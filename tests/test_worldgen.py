import random

import pytest

from flappy.constants import BUILDING_COLORS, CLOUD_COLORS, FOREGROUND_CLOUD_COLORS
from flappy.data_models import Building, GamePhase, Size, Vector2
from flappy.scaling import ScalingContext
from flappy.worldgen import (
    generate_clouds, generate_foreground_clouds, generate_skyline, populate_world,
    update_clouds, update_foreground_clouds, update_skyline, update_world
)


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def playing(game):
    game.state = GamePhase.PLAYING
    return game


def test_generate_clouds_stay_in_upper_half(scaling, rng):
    clouds = generate_clouds(scaling, rng)
    assert len(clouds) == 8
    for cloud in clouds:
        assert 10 <= cloud.pos.y < scaling.height * 0.5 + 10
        assert -100 <= cloud.pos.x < scaling.width + 100
        assert 8 <= cloud.size < 125
        assert 0.05 <= cloud.speed < 0.45
        assert 0.25 <= cloud.opacity < 0.75
        assert 0.5 <= cloud.puffiness < 1.0
        assert 0.8 <= cloud.stretch < 1.2
        assert cloud.color in CLOUD_COLORS


def test_generate_foreground_clouds_are_large_slow_and_faint(scaling, rng):
    clouds = generate_foreground_clouds(scaling, rng)
    assert len(clouds) == 4
    for cloud in clouds:
        assert 0 <= cloud.pos.y < scaling.height
        assert 40 <= cloud.size < 180
        assert 0.1 <= cloud.speed < 0.3
        assert 0.05 <= cloud.opacity < 0.15
        assert 0.7 <= cloud.puffiness < 1.0
        assert cloud.color in FOREGROUND_CLOUD_COLORS


def test_cloud_size_scales_with_smaller_axis():
    scaling = ScalingContext(1000, 300)
    clouds = generate_clouds(scaling, random.Random(7))
    unscaled = generate_clouds(ScalingContext(500, 200), random.Random(7))
    for big, small in zip(clouds, unscaled):
        assert big.size == pytest.approx(small.size * 1.5)


def test_generate_skyline_tiles_left_to_right(scaling, rng):
    skyline = generate_skyline(scaling, rng)

    assert skyline[0].pos.x == pytest.approx(-50)
    assert len(skyline) >= 14
    for prev, nxt in zip(skyline, skyline[1:]):
        gap = nxt.pos.x - (prev.pos.x + prev.size.width)
        assert 5 <= gap < 25
    last = skyline[-1]
    assert last.pos.x + last.size.width > scaling.width

    for building in skyline:
        assert building.pos.y + building.size.height == pytest.approx(scaling.bottom)
        assert 20 <= building.size.height < 350
        assert 0.4 <= building.speed < 0.6
        assert building.color in BUILDING_COLORS


def test_world_is_frozen_outside_active_play(game, scaling, rng):
    populate_world(game, scaling, rng)
    before = [c.pos.x for c in game.clouds] + [b.pos.x for b in game.skyline]

    for state, pause, over in [
        (GamePhase.TITLE, False, False),
        (GamePhase.INSTRUCTIONS, False, False),
        (GamePhase.PLAYING, True, False),
        (GamePhase.PLAYING, False, True),
    ]:
        game.state, game.pause, game.is_game_over = state, pause, over
        update_world(game, 1.0, scaling, rng)

    after = [c.pos.x for c in game.clouds] + [b.pos.x for b in game.skyline]
    assert after == before


def test_update_clouds_scrolls_by_parallax_speed(playing, scaling, rng):
    playing.clouds = generate_clouds(scaling, rng)
    for cloud in playing.clouds:
        cloud.pos.x = 300
    speeds = [c.speed for c in playing.clouds]

    update_clouds(playing, 0.5, scaling, rng)

    for cloud, speed in zip(playing.clouds, speeds):
        assert cloud.pos.x == pytest.approx(300 - 80 * 0.5 * speed)


def test_offscreen_cloud_is_regenerated_right_of_viewport(playing, scaling):
    playing.clouds = generate_clouds(scaling, random.Random(1))
    cloud = playing.clouds[0]
    cloud.pos.x = -cloud.size - 51
    cloud.color = "stale"

    update_clouds(playing, 0.0, scaling, random.Random(2))

    assert cloud.pos.x >= scaling.width
    assert cloud.pos.y < scaling.height * 0.5 + 10
    assert cloud.color in CLOUD_COLORS


def test_offscreen_foreground_cloud_is_regenerated(playing, scaling):
    playing.foreground_clouds = generate_foreground_clouds(scaling, random.Random(1))
    cloud = playing.foreground_clouds[0]
    cloud.pos.x = -cloud.size - 101
    cloud.opacity = 1.0

    update_foreground_clouds(playing, 0.0, scaling, random.Random(2))

    assert scaling.width <= cloud.pos.x < scaling.width + 200
    assert 0.05 <= cloud.opacity < 0.15


def _building(x, width):
    return Building(pos=Vector2(x, 150), size=Size(width, 50), color="#3F4147",
                    windows=False, antenna=False, speed=0.5)


def test_recycled_building_follows_rightmost_building(playing, scaling):
    # Rightmost building deliberately not last in the list
    playing.skyline = [_building(-500, 10), _building(300, 50), _building(100, 20)]

    update_skyline(playing, 0.0, scaling, random.Random(3))

    recycled = playing.skyline[0]
    assert 350 + 5 <= recycled.pos.x < 350 + 25
    assert recycled.pos.y + recycled.size.height == pytest.approx(scaling.bottom)
    assert playing.skyline[1].pos.x == 300
    assert playing.skyline[2].pos.x == 100
