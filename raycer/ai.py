"""Computer-driven controllers."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from raycer.common import EntityId
from raycer.controller import Controller, Controls
from raycer.debug import debug_values
from raycer.vector import Vector2

if TYPE_CHECKING:
    from raycer.world import World


def follow_point(point: Vector2, position: Vector2, orientation: float) -> Controls:
    """Full throttle in top gear, steering by the angle towards ``point``."""
    dx = position.x - point.x
    dy = position.y - point.y
    desired_angle = math.atan2(dy, dx)

    debug_values["ai_y_del"] = f"{dy:f}"
    debug_values["ai_x_del"] = f"{dx:f}"
    debug_values["ai_desired_angle"] = f"{desired_angle:f}"

    return Controls(1.0, desired_angle - orientation, 5)


class StraightGuy(Controller):
    """Heads for the world origin."""

    def compute_controls(self, world: World, player_id: EntityId) -> Controls:
        player = world.entities[player_id]
        return follow_point(Vector2(0.0, 0.0), player.position.xz, player.heading)