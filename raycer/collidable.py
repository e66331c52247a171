"""Entities with a convex polygon collider."""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Any

from raycer.entity import Entity
from raycer.vector import Vector2, Vector3, line_angle


class Collidable(Entity):
    """An entity that can test overlap with other collidables (separating axes)."""

    def __init__(
        self,
        model: Any,
        position: Vector3,
        heading: float,
        collider_vertices: Iterable[Vector2],
    ) -> None:
        super().__init__(model, position, heading)
        self.collider_vertices = list(collider_vertices)

    def _cast_at_angle(self, angle: float) -> list[float]:
        origin = self.position.xz
        return [(vert.rotate(self.heading) + origin).rotate(-angle).x for vert in self.collider_vertices]

    def _check_at_angle(self, other: Collidable, angle: float) -> bool:
        mine = self._cast_at_angle(angle)
        theirs = other._cast_at_angle(angle)
        if not mine or not theirs:
            return False
        return not (max(mine) < min(theirs) or min(mine) > max(theirs))

    @staticmethod
    def _edges(vertices: list[Vector2]):
        return zip(vertices, vertices[1:] + vertices[:1])

    def check_collision(self, other: Collidable) -> bool:
        """Whether the two colliders overlap on every tested axis."""
        for start, end in self._edges(self.collider_vertices):
            angle = line_angle(start, end) + math.pi / 2 + self.heading
            if not self._check_at_angle(other, angle):
                return False
        for start, end in self._edges(other.collider_vertices):
            angle = line_angle(start, end) + math.pi / 2 + self.heading
            if not self._check_at_angle(other, angle):
                return False
        return True