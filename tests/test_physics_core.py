import pytest

from flappy.data_models import Entity, Hero, Size, Vector2
from flappy.physics_core import (
    PhysicsCore, add, add_to, any_corner_within, between, collides, corners_of,
    far_corner, hero_collision_bounds, is_out_of_bounds, kinematic_step, within
)
from flappy.scaling import ScalingContext


def box(x, y, w, h):
    return Entity(pos=Vector2(x, y), size=Size(w, h))


def test_add_to_mutates_and_returns_first_argument():
    a = Vector2(1, 2)
    result = add_to(a, Vector2(3, 4))
    assert result is a
    assert a == Vector2(4, 6)


def test_add_returns_new_vector():
    a = Vector2(1, 2)
    result = add(a, Vector2(3, 4))
    assert result == Vector2(4, 6)
    assert result is not a
    assert a == Vector2(1, 2)


def test_vector_distance_and_magnitude():
    assert Vector2(3, 4).magnitude() == 5
    assert Vector2(1, 1).distance(Vector2(4, 5)) == 5


def test_between_ascending_is_inclusive_only_on_far_bound():
    assert between(1, 0, 1)
    assert between(0.5, 0, 1)
    assert not between(0, 0, 1)
    assert not between(1.5, 0, 1)


def test_between_descending_is_inclusive_only_on_near_bound():
    assert between(1, 1, 0)
    assert between(0.5, 1, 0)
    assert not between(0, 1, 0)
    assert not between(-0.5, 1, 0)


def test_within_edges_and_corners():
    entity = box(0, 0, 10, 10)
    assert not within(Vector2(0, 0), entity)
    assert not within(Vector2(10, 0), entity)
    assert not within(Vector2(0, 10), entity)
    assert within(Vector2(10, 10), entity)
    assert within(Vector2(5, 5), entity)
    assert not within(Vector2(11, 5), entity)


def test_corners_and_far_corner():
    entity = box(2, 3, 10, 20)
    assert corners_of(entity) == [
        Vector2(2, 3), Vector2(12, 3), Vector2(2, 23), Vector2(12, 23)
    ]
    assert far_corner(entity) == Vector2(12, 23)


def test_any_corner_within():
    assert any_corner_within(box(5, 5, 10, 10), box(0, 0, 10, 10))
    assert not any_corner_within(box(20, 20, 5, 5), box(0, 0, 10, 10))


def test_hero_collision_bounds_is_centered_sixty_percent():
    bounds = hero_collision_bounds(box(10, 20, 30, 20))
    assert bounds.size.width == pytest.approx(18)
    assert bounds.size.height == pytest.approx(12)
    assert bounds.pos.x == pytest.approx(16)
    assert bounds.pos.y == pytest.approx(24)


def test_collides_ignores_visual_corner_outside_hitbox():
    hero = box(0, 0, 100, 100)
    assert not collides(hero, box(0, 0, 1, 1))
    assert collides(hero, box(50, 50, 100, 100))


def test_collides_detects_obstacle_inside_hitbox():
    hero = box(0, 0, 100, 100)
    assert collides(hero, box(30, 30, 10, 10))


def test_collides_detects_hitbox_inside_obstacle():
    hero = box(10, 10, 20, 20)
    assert collides(hero, box(0, 0, 100, 100))


def test_is_out_of_bounds_checks_floor_only():
    assert not is_out_of_bounds(box(0, 200, 1, 1), 200)
    assert is_out_of_bounds(box(0, 200.1, 1, 1), 200)
    assert not is_out_of_bounds(box(0, -10000, 1, 1), 200)


def test_kinematic_step_uses_half_step_gravity():
    d_pos, d_vel = kinematic_step(Vector2(50, -100), 300, 1.0)
    assert d_vel == Vector2(0, 300)
    assert d_pos == Vector2(50, 50)


def test_integrate_moves_then_accelerates_and_restores_horizontal_speed():
    core = PhysicsCore(scaling=ScalingContext(1000, 400), gravity=300)
    hero = Hero(pos=Vector2(0, 0), size=Size(30, 20), vel=Vector2(50, -100))

    core.integrate(hero, 1.0)

    assert hero.pos == Vector2(50, 50)
    assert hero.vel.y == 200
    assert hero.vel.x == 80 * 2


def test_flap_sets_jump_velocity():
    core = PhysicsCore()
    hero = Hero(vel=Vector2(80, 123))
    core.flap(hero)
    assert hero.vel.y == core.jump_velocity == -240
