"""Turning input into driving controls for vehicles."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from raycer.common import EntityId

if TYPE_CHECKING:
    from raycer.world import World

MIN_GEAR = 1
MAX_GEAR = 5


@dataclass(frozen=True)
class Controls:
    """Driving inputs for one frame.

    ``accelerator`` and ``steering`` are meant to lie in [-1, 1].
    """

    accelerator: float
    steering: float
    gear: int


class Controller(ABC):
    """Decides how a vehicle is driven each frame."""

    @abstractmethod
    def compute_controls(self, world: World, player_id: EntityId) -> Controls:
        """Return the controls for the vehicle ``player_id`` in ``world``."""


class KeyState:
    """Keys currently held down and keys pressed during the current frame."""

    def __init__(self) -> None:
        self._down: set[Hashable] = set()
        self._pressed: set[Hashable] = set()

    def press(self, key: Hashable) -> None:
        """Record that ``key`` went down."""
        if key not in self._down:
            self._pressed.add(key)
        self._down.add(key)

    def release(self, key: Hashable) -> None:
        """Record that ``key`` went up."""
        self._down.discard(key)

    def is_down(self, key: Hashable) -> bool:
        return key in self._down

    def was_pressed(self, key: Hashable) -> bool:
        """Whether ``key`` went down during the current frame."""
        return key in self._pressed

    def end_frame(self) -> None:
        """Forget which keys were pressed this frame; held keys stay held."""
        self._pressed.clear()


@dataclass
class PlayerController(Controller):
    """Drives a vehicle from the keyboard."""

    keys: KeyState = field(default_factory=KeyState)
    key_forward: Hashable = "w"
    key_backward: Hashable = "s"
    key_right: Hashable = "d"
    key_left: Hashable = "a"
    key_lower_gear: Hashable = "q"
    key_rise_gear: Hashable = "e"

    def compute_controls(self, world: World, player_id: EntityId) -> Controls:
        player = world.entities[player_id]

        accelerator = 0.0
        if self.keys.is_down(self.key_forward):
            accelerator = 1.0
        elif self.keys.is_down(self.key_backward):
            accelerator = -1.0

        steering = 0.0
        if self.keys.is_down(self.key_right):
            steering = 1.0
        elif self.keys.is_down(self.key_left):
            steering = -1.0

        gear = player.gear
        if self.keys.was_pressed(self.key_lower_gear):
            gear -= 1
        elif self.keys.was_pressed(self.key_rise_gear):
            gear += 1
        gear = max(min(MAX_GEAR, gear), MIN_GEAR)

        return Controls(accelerator, steering, gear)