"""
physics_core.py: The shared, deterministic kinematic functions and collision logic.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from .constants import GRAVITY, JUMP_VEL, HERO_SPEED, HERO_COLLISION_SCALE
from .data_models import Entity, Hero, Size, Vector2
from .scaling import ScalingContext


# ---------- Vectors ----------

def add_to(a: Vector2, b: Vector2) -> Vector2:
    """Adds b into a in place and returns a."""
    a.x += b.x
    a.y += b.y
    return a


def add(a: Vector2, b: Vector2) -> Vector2:
    return Vector2(a.x + b.x, a.y + b.y)


# ---------- Geometry ----------

def between(value: float, bound1: float, bound2: float) -> bool:
    """
    Range test accepting either bound ordering.

    Only the far bound is inclusive: (bound1, bound2] when ascending,
    [bound1, bound2) when descending. Collision results depend on this
    exact edge policy.
    """
    return (bound1 < value <= bound2) or (bound1 >= value > bound2)


def within(point: Vector2, entity: Entity) -> bool:
    return (
        between(point.x, entity.pos.x, entity.pos.x + entity.size.width)
        and between(point.y, entity.pos.y, entity.pos.y + entity.size.height)
    )


def far_corner(entity: Entity) -> Vector2:
    return Vector2(entity.pos.x + entity.size.width, entity.pos.y + entity.size.height)


def corners_of(entity: Entity) -> List[Vector2]:
    offsets = [
        Vector2(0, 0),
        Vector2(entity.size.width, 0),
        Vector2(0, entity.size.height),
        Vector2(entity.size.width, entity.size.height),
    ]
    return [add(entity.pos, d) for d in offsets]


def any_corner_within(a: Entity, b: Entity) -> bool:
    return any(within(corner, b) for corner in corners_of(a))


def hero_collision_bounds(hero: Entity) -> Entity:
    """The forgiving hitbox: 60% of the visual box, centered inside it."""
    visual_w = hero.size.width
    visual_h = hero.size.height
    collision_w = visual_w * HERO_COLLISION_SCALE
    collision_h = visual_h * HERO_COLLISION_SCALE
    return Entity(
        pos=Vector2(
            hero.pos.x + (visual_w - collision_w) / 2,
            hero.pos.y + (visual_h - collision_h) / 2,
        ),
        size=Size(collision_w, collision_h),
    )


def collides(hero: Entity, other: Entity) -> bool:
    # Checked both ways so that containment of one box in the other counts.
    bounds = hero_collision_bounds(hero)
    return any_corner_within(bounds, other) or any_corner_within(other, bounds)


def is_out_of_bounds(entity: Entity, lower_bound_y: float) -> bool:
    """Only the floor is checked; there is no ceiling."""
    return entity.pos.y > lower_bound_y


def kinematic_step(vel: Vector2, gravity: float, delta: float) -> Tuple[Vector2, Vector2]:
    """
    Returns (position delta, velocity delta) for one step of constant
    acceleration, using the velocity at the start of the step.
    """
    d_vel = Vector2(0, gravity * delta)
    d_pos = Vector2(
        vel.x * delta,
        vel.y * delta + 0.5 * gravity * delta * delta,
    )
    return d_pos, d_vel


@dataclass
class PhysicsCore:
    """
    Shared deterministic hero physics. Subclassed by the game engine.
    """
    scaling: ScalingContext = field(default_factory=ScalingContext)
    gravity: float = GRAVITY
    jump_velocity: float = JUMP_VEL
    hero_speed: float = HERO_SPEED

    @property
    def scaled_hero_speed(self) -> float:
        return self.hero_speed * self.scaling.scale_x

    def integrate(self, hero: Hero, delta: float):
        """Advances the hero by delta seconds. Position first, then velocity."""
        d_pos, d_vel = kinematic_step(hero.vel, self.gravity, delta)
        add_to(hero.pos, d_pos)
        add_to(hero.vel, d_vel)

        # Horizontal motion is never affected by gravity or jumps
        hero.vel.x = self.scaled_hero_speed

    def flap(self, hero: Hero):
        hero.vel.y = self.jump_velocity
