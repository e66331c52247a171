"""The world: entities, ground materials and checkpoint zones."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from raycer.common import EntityId
from raycer.vector import Vector2

if TYPE_CHECKING:
    from raycer.entity import Entity

GRID_CELL_SIZE = 5.0

Color = tuple[int, int, int, int]


@dataclass(frozen=True)
class GroundMaterial:
    """Friction properties and display colour of a ground cell."""

    static_friction_coef: float
    kinetic_friction_coef: float
    color: Color


GRASS = GroundMaterial(0.3, 0.20, (0, 255, 0, 255))
ASPHALT = GroundMaterial(0.9, 0.7, (32, 32, 32, 255))
SAND = GroundMaterial(0.2, 0.15, (255, 192, 0, 255))

_MATERIALS_BY_CHAR = {".": GRASS, "x": ASPHALT}


def triangle_area(a: Vector2, b: Vector2, c: Vector2) -> float:
    """Area of the triangle ``abc``."""
    return abs(a.x * (b.y - c.y) + b.x * (c.y - a.y) + c.x * (a.y - b.y)) / 2


def is_point_in_triangle(a: Vector2, b: Vector2, c: Vector2, p: Vector2) -> bool:
    """Whether ``p`` lies (approximately) inside triangle ``abc``."""
    area_abc = triangle_area(a, b, c)
    if area_abc == 0:
        return False
    total = triangle_area(a, b, p) + triangle_area(a, c, p) + triangle_area(b, c, p)
    quotient = total / area_abc
    return 0.975 < quotient < 1.125


@dataclass(frozen=True)
class CheckpointZone:
    """A quadrilateral split into triangles (0, 1, 2) and (1, 2, 3)."""

    vertices: tuple[Vector2, Vector2, Vector2, Vector2]

    def contains(self, point: Vector2) -> bool:
        v = self.vertices
        return is_point_in_triangle(v[0], v[1], v[2], point) or is_point_in_triangle(
            v[1], v[2], v[3], point
        )


@dataclass
class World:
    """Holds every entity together with the terrain and checkpoints."""

    entities: dict[EntityId, Entity] = field(default_factory=dict)
    ai_line: list[Vector2] = field(default_factory=lambda: [Vector2(1.0, 2.0)])
    materials: list[list[str]] = field(default_factory=list)
    checkpoints: dict[int, CheckpointZone] = field(default_factory=dict)
    _next_eid: EntityId = field(default=0, repr=False)

    def _new_entity_id(self) -> EntityId:
        eid = self._next_eid
        self._next_eid += 1
        return eid

    def spawn_entity(self, entity: Entity) -> EntityId:
        """Register ``entity``, give it an id and return that id."""
        entity.eid = self._new_entity_id()
        entity.world = self
        self.entities[entity.eid] = entity
        return entity.eid

    def update(self, delta_time: float) -> None:
        for entity in list(self.entities.values()):
            entity.update(delta_time)

    def material_at_cell(self, ix: int, iy: int) -> GroundMaterial:
        size = len(self.materials)
        if not (0 <= ix < size and 0 <= iy < size):
            return SAND
        return _MATERIALS_BY_CHAR.get(self.materials[ix][iy], SAND)

    def material_at_position(self, pos: Vector2) -> GroundMaterial:
        return self.material_at_cell(int(pos.x / GRID_CELL_SIZE), int(pos.y / GRID_CELL_SIZE))