import math

import pytest

from raycer.ai import StraightGuy, follow_point
from raycer.debug import debug_values
from raycer.entity import Entity
from raycer.vector import Vector2, Vector3
from raycer.world import World


def test_follow_point_full_throttle_top_gear():
    controls = follow_point(Vector2(3.0, 4.0), Vector2(-2.0, 7.0), 0.3)
    assert controls.accelerator == 1
    assert controls.gear == 5


def test_follow_point_aligned_gives_zero_steering():
    controls = follow_point(Vector2(0.0, 0.0), Vector2(1.0, 0.0), 0.0)
    assert controls.steering == pytest.approx(0.0)


def test_follow_point_quarter_turn():
    controls = follow_point(Vector2(0.0, 0.0), Vector2(0.0, 1.0), 0.0)
    assert controls.steering == pytest.approx(math.pi / 2)


@pytest.mark.parametrize("orientation", [0.5, -1.2, 3.0])
def test_orientation_shifts_steering(orientation):
    point, position = Vector2(2.0, -1.0), Vector2(5.0, 3.0)
    base = follow_point(point, position, 0.0).steering
    shifted = follow_point(point, position, orientation).steering
    assert shifted == pytest.approx(base - orientation)


def test_follow_point_records_debug_values():
    controls = follow_point(Vector2(0.0, 0.0), Vector2(2.0, 0.0), 0.0)
    assert controls.steering == pytest.approx(0.0)
    assert debug_values["ai_x_del"] == "2.000000"
    assert debug_values["ai_y_del"] == "0.000000"
    assert debug_values["ai_desired_angle"] == "0.000000"


def test_straight_guy_targets_origin():
    world = World()
    entity = Entity(None, Vector3(4.0, 9.0, -3.0), 0.7)
    eid = world.spawn_entity(entity)
    controls = StraightGuy().compute_controls(world, eid)
    expected = follow_point(Vector2(0.0, 0.0), Vector2(4.0, -3.0), 0.7)
    assert controls == expected