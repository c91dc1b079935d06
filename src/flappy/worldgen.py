"""
worldgen.py: Procedural clouds and skyline with per-frame parallax scrolling.

Nothing here affects collisions or score. Every generator takes the
ScalingContext it sizes against and an optional ``rng`` (anything with
``random()`` and ``choice()``, defaulting to the ``random`` module).
"""

import math
import random
from typing import List

from .constants import (
    NUM_CLOUDS, NUM_FOREGROUND_CLOUDS,
    CLOUD_COLORS, FOREGROUND_CLOUD_COLORS, BUILDING_COLORS
)
from .data_models import Building, Cloud, GamePhase, GameState, Size, Vector2
from .scaling import ScalingContext


def _cloud_base_size(rng) -> float:
    tier = rng.random()
    if tier < 0.3:
        return rng.random() * 20 + 8      # small
    if tier < 0.7:
        return rng.random() * 40 + 25     # medium
    return rng.random() * 80 + 45         # large


def _foreground_base_size(rng) -> float:
    if rng.random() < 0.4:
        return rng.random() * 60 + 40     # medium
    return rng.random() * 120 + 60        # large


def _shape_cloud(cloud: Cloud, scaling: ScalingContext, rng):
    cloud.size = _cloud_base_size(rng) * scaling.min_scale
    cloud.speed = rng.random() * 0.4 + 0.05
    cloud.opacity = rng.random() * 0.5 + 0.25
    cloud.color = rng.choice(CLOUD_COLORS)
    cloud.puffiness = rng.random() * 0.5 + 0.5
    cloud.stretch = rng.random() * 0.4 + 0.8


def _shape_foreground_cloud(cloud: Cloud, scaling: ScalingContext, rng):
    cloud.size = _foreground_base_size(rng) * scaling.min_scale
    cloud.speed = rng.random() * 0.2 + 0.1
    cloud.opacity = rng.random() * 0.1 + 0.05
    cloud.color = rng.choice(FOREGROUND_CLOUD_COLORS)
    cloud.puffiness = rng.random() * 0.3 + 0.7
    cloud.stretch = rng.random() * 0.6 + 0.8


def _blank_cloud(x: float, y: float) -> Cloud:
    return Cloud(pos=Vector2(x, y), size=0.0, speed=0.0, opacity=0.0,
                 color="", puffiness=0.0, stretch=0.0)


def _shape_building(building: Building, x: float, scaling: ScalingContext, rng):
    width = (rng.random() * 60 + 30) * scaling.scale_x

    tier = rng.random()
    if tier < 0.6:
        height = (rng.random() * 60 + 20) * scaling.scale_y
    elif tier < 0.85:
        height = (rng.random() * 120 + 80) * scaling.scale_y
    else:
        height = (rng.random() * 200 + 150) * scaling.scale_y
        # skyscrapers are narrower
        width *= rng.random() * 0.4 + 0.6

    building.pos = Vector2(x, scaling.bottom - height)
    building.size = Size(width, height)
    building.color = rng.choice(BUILDING_COLORS)
    building.windows = rng.random() > 0.3
    building.antenna = rng.random() > 0.7
    building.speed = 0.4 + rng.random() * 0.2


def _building_gap(scaling: ScalingContext, rng) -> float:
    return (rng.random() * 20 + 5) * scaling.scale_x


# ---------- Generation ----------

def generate_clouds(scaling: ScalingContext, rng=random) -> List[Cloud]:
    clouds = []
    for _ in range(NUM_CLOUDS):
        cloud = _blank_cloud(
            rng.random() * (scaling.width + 200 * scaling.scale_x) - 100 * scaling.scale_x,
            rng.random() * (scaling.height * 0.5) + 10 * scaling.scale_y,
        )
        _shape_cloud(cloud, scaling, rng)
        clouds.append(cloud)
    return clouds


def generate_foreground_clouds(scaling: ScalingContext, rng=random) -> List[Cloud]:
    """Fewer, larger, slower and nearly transparent; anywhere vertically."""
    clouds = []
    for _ in range(NUM_FOREGROUND_CLOUDS):
        cloud = _blank_cloud(
            rng.random() * (scaling.width + 300 * scaling.scale_x) - 150 * scaling.scale_x,
            rng.random() * scaling.height,
        )
        _shape_foreground_cloud(cloud, scaling, rng)
        clouds.append(cloud)
    return clouds


def generate_skyline(scaling: ScalingContext, rng=random) -> List[Building]:
    """Tiles buildings left to right from slightly off-screen until the viewport is covered."""
    buildings = []
    min_count = math.floor(scaling.width / (40 * scaling.scale_x)) + 2
    margin = 100 * scaling.scale_x
    current_x = -50 * scaling.scale_x

    while len(buildings) < min_count or current_x < scaling.width + margin:
        building = Building(pos=Vector2(), size=Size(), color="",
                            windows=False, antenna=False, speed=0.0)
        _shape_building(building, current_x, scaling, rng)
        buildings.append(building)
        current_x += building.size.width + _building_gap(scaling, rng)

    return buildings


def populate_world(game: GameState, scaling: ScalingContext, rng=random):
    game.clouds = generate_clouds(scaling, rng)
    game.foreground_clouds = generate_foreground_clouds(scaling, rng)
    game.skyline = generate_skyline(scaling, rng)


# ---------- Per-frame scrolling ----------

def _is_frozen(game: GameState) -> bool:
    return game.state != GamePhase.PLAYING or game.pause or game.is_game_over


def update_clouds(game: GameState, delta: float, scaling: ScalingContext, rng=random):
    if _is_frozen(game):
        return

    hero_shift = game.hero.vel.x * delta
    for cloud in game.clouds:
        cloud.pos.x -= hero_shift * cloud.speed

        if cloud.pos.x < -cloud.size - 50 * scaling.scale_x:
            cloud.pos.x = scaling.width + rng.random() * 100 * scaling.scale_x
            cloud.pos.y = rng.random() * (scaling.height * 0.5) + 10 * scaling.scale_y
            _shape_cloud(cloud, scaling, rng)


def update_foreground_clouds(game: GameState, delta: float, scaling: ScalingContext, rng=random):
    if _is_frozen(game):
        return

    hero_shift = game.hero.vel.x * delta
    for cloud in game.foreground_clouds:
        cloud.pos.x -= hero_shift * cloud.speed

        if cloud.pos.x < -cloud.size - 100 * scaling.scale_x:
            cloud.pos.x = scaling.width + rng.random() * 200 * scaling.scale_x
            cloud.pos.y = rng.random() * scaling.height
            _shape_foreground_cloud(cloud, scaling, rng)


def update_skyline(game: GameState, delta: float, scaling: ScalingContext, rng=random):
    if _is_frozen(game):
        return

    hero_shift = game.hero.vel.x * delta
    for building in game.skyline:
        building.pos.x -= hero_shift * building.speed

        if building.pos.x + building.size.width < -100 * scaling.scale_x:
            # List order is not position order once buildings start recycling
            rightmost = max(
                [building.pos.x] + [b.pos.x + b.size.width for b in game.skyline]
            )
            _shape_building(building, rightmost + _building_gap(scaling, rng), scaling, rng)


def update_world(game: GameState, delta: float, scaling: ScalingContext, rng=random):
    update_clouds(game, delta, scaling, rng)
    update_foreground_clouds(game, delta, scaling, rng)
    update_skyline(game, delta, scaling, rng)
