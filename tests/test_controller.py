from types import SimpleNamespace

import pytest

from raycer.controller import (
    MAX_GEAR,
    MIN_GEAR,
    Controller,
    Controls,
    KeyState,
    PlayerController,
)
from raycer.world import World


def make_world(gear):
    world = World()
    world.entities[0] = SimpleNamespace(gear=gear)
    return world


def test_controller_is_abstract():
    with pytest.raises(TypeError):
        Controller()


def test_key_state_press_and_release():
    keys = KeyState()
    keys.press("w")
    assert keys.is_down("w")
    assert keys.was_pressed("w")
    keys.end_frame()
    assert keys.is_down("w")
    assert not keys.was_pressed("w")
    keys.release("w")
    assert not keys.is_down("w")


def test_key_state_held_key_not_pressed_again():
    keys = KeyState()
    keys.press("e")
    keys.end_frame()
    keys.press("e")
    assert not keys.was_pressed("e")


def test_no_keys_gives_neutral_controls():
    controller = PlayerController()
    controls = controller.compute_controls(make_world(3), 0)
    assert controls == Controls(0.0, 0.0, 3)


def test_forward_and_backward():
    controller = PlayerController()
    controller.keys.press("w")
    assert controller.compute_controls(make_world(2), 0).accelerator == 1.0
    controller.keys.release("w")
    controller.keys.press("s")
    assert controller.compute_controls(make_world(2), 0).accelerator == -1.0


def test_forward_wins_over_backward():
    controller = PlayerController()
    controller.keys.press("w")
    controller.keys.press("s")
    assert controller.compute_controls(make_world(2), 0).accelerator == 1.0


def test_steering_keys():
    controller = PlayerController()
    controller.keys.press("a")
    assert controller.compute_controls(make_world(2), 0).steering == -1.0
    controller.keys.press("d")
    assert controller.compute_controls(make_world(2), 0).steering == 1.0


def test_gear_change_only_on_press_frame():
    controller = PlayerController()
    world = make_world(2)
    controller.keys.press("e")
    assert controller.compute_controls(world, 0).gear == 3
    controller.keys.end_frame()
    assert controller.compute_controls(world, 0).gear == 2


def test_lower_gear():
    controller = PlayerController()
    controller.keys.press("q")
    assert controller.compute_controls(make_world(3), 0).gear == 2


@pytest.mark.parametrize("gear, key", [(MAX_GEAR, "e"), (MIN_GEAR, "q")])
def test_gear_is_capped(gear, key):
    controller = PlayerController()
    controller.keys.press(key)
    assert controller.compute_controls(make_world(gear), 0).gear == gear


def test_gear_zero_raised_to_minimum():
    controller = PlayerController()
    assert controller.compute_controls(make_world(0), 0).gear == MIN_GEAR


def test_custom_key_bindings():
    controller = PlayerController(key_forward="up")
    controller.keys.press("w")
    assert controller.compute_controls(make_world(1), 0).accelerator == 0.0
    controller.keys.press("up")
    assert controller.compute_controls(make_world(1), 0).accelerator == 1.0


def test_missing_player_raises():
    with pytest.raises(KeyError):
        PlayerController().compute_controls(World(), 42)