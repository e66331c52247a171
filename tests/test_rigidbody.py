import math

import pytest

from raycer.collidable import Collidable
from raycer.rigidbody import Rigidbody
from raycer.vector import Vector2, Vector3
from raycer.world import World

SQUARE = [Vector2(-1.0, -1.0), Vector2(-1.0, 1.0), Vector2(1.0, 1.0), Vector2(1.0, -1.0)]


def test_rigidbody_in_world_stays_at_rest():
    rb = Rigidbody(None, Vector3(0, 0, 0), 0.0, [], 1.0, 1.0)
    world = World()
    world.spawn_entity(rb)
    for _ in range(100):
        world.update(1.0 / 60.0)
    assert rb.position == Vector3(0, 0, 0)
    assert rb.heading == 0.0
    assert rb.velocity() == Vector3(0, 0, 0)


def test_apply_force_accumulates_momentum():
    rb = Rigidbody(None, Vector3(), 0.0, [], 2.0, 1.0)
    rb.apply_force(Vector3(4.0, 0.0, 2.0), 0.5)
    rb.apply_force(Vector3(4.0, 0.0, 2.0), 0.5)
    assert rb.momentum == Vector3(4.0, 0.0, 2.0)
    assert rb.velocity() == Vector3(2.0, 0.0, 1.0)


def test_update_moves_by_velocity():
    rb = Rigidbody(None, Vector3(1.0, 0.0, 1.0), 0.0, [], 2.0, 1.0)
    rb.apply_force(Vector3(2.0, 0.0, -4.0), 1.0)
    start = rb.position
    rb.update(0.1)
    assert rb.position == start + rb.velocity()


def test_torque_turns_heading():
    rb = Rigidbody(None, Vector3(), 0.0, [], 1.0, 4.0)
    rb.apply_torque(2.0, 1.0)
    assert rb.angular_momentum == pytest.approx(2.0)
    rb.update(0.1)
    assert rb.heading == pytest.approx(rb.angular_momentum / rb.moment_of_inertia)


def test_heading_wraps_within_full_turn():
    rb = Rigidbody(None, Vector3(), 0.0, [], 1.0, 1.0)
    rb.apply_torque(2.5, 1.0)
    for _ in range(20):
        rb.update(0.1)
        assert -2 * math.pi < rb.heading < 2 * math.pi


def test_update_among_collidables_keeps_moving():
    world = World()
    world.spawn_entity(Collidable(None, Vector3(), 0.0, SQUARE))
    rb = Rigidbody(None, Vector3(0.5, 0.0, 0.0), 0.0, SQUARE, 1.0, 1.0)
    world.spawn_entity(rb)
    rb.apply_force(Vector3(1.0, 0.0, 0.0), 1.0)
    world.update(0.1)
    assert rb.position == Vector3(1.5, 0.0, 0.0)


def test_update_without_world():
    rb = Rigidbody(None, Vector3(), 0.0, SQUARE, 1.0, 1.0)
    rb.apply_force(Vector3(0.0, 0.0, 3.0), 1.0)
    rb.update(0.1)
    assert rb.position == Vector3(0.0, 0.0, 3.0)