"""Collidable entities that move under forces and torques."""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Any

from raycer.collidable import Collidable
from raycer.vector import Vector2, Vector3


class Rigidbody(Collidable):
    """A collidable body with linear and angular momentum."""

    def __init__(
        self,
        model: Any,
        position: Vector3,
        heading: float,
        collider_vertices: Iterable[Vector2],
        mass: float,
        moment_of_inertia: float,
    ) -> None:
        super().__init__(model, position, heading, collider_vertices)
        self.momentum = Vector3()
        self.mass = mass
        self.angular_momentum = 0.0
        self.moment_of_inertia = moment_of_inertia

    def update(self, delta_time: float) -> None:
        super().update(delta_time)

        if self.world is not None:
            for entity in list(self.world.entities.values()):
                if entity is self or not isinstance(entity, Collidable):
                    continue
                self.check_collision(entity)

        self.position = self.position + self.velocity()
        self.heading = math.fmod(
            self.heading + self.angular_momentum / self.moment_of_inertia, 2 * math.pi
        )

    def apply_force(self, force: Vector3, time: float) -> None:
        self.momentum = self.momentum + force * time

    def apply_torque(self, torque: float, time: float) -> None:
        self.angular_momentum += torque * time

    def velocity(self) -> Vector3:
        return self.momentum * (1.0 / self.mass)