"""Base class for everything placed in the world."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from raycer.common import EntityId
from raycer.vector import Vector3

if TYPE_CHECKING:
    from raycer.world import World


class Entity:
    """A model placed at a position with a heading around the vertical axis."""

    def __init__(self, model: Any, position: Vector3, heading: float = 0.0) -> None:
        self.world: World | None = None
        self.eid: EntityId = 0
        self.model = model
        self.position = position
        self.heading = heading
        self.elapsed = 0.0

    def update(self, delta_time: float) -> None:
        """Advance the entity by ``delta_time`` seconds.

        A plain entity does not move; it only keeps track of how long it has
        been simulated.
        """
        self.elapsed += delta_time