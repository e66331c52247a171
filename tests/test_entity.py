from raycer.entity import Entity
from raycer.vector import Vector3


def test_new_entity_defaults():
    entity = Entity("car.glb", Vector3(1.0, 2.0, 3.0))
    assert entity.world is None
    assert entity.eid == 0
    assert entity.heading == 0.0
    assert entity.model == "car.glb"
    assert entity.position == Vector3(1.0, 2.0, 3.0)


def test_update_leaves_static_entity_in_place():
    entity = Entity(None, Vector3(4.0, 0.0, -2.0), 1.25)
    for _ in range(10):
        entity.update(0.5)
    assert entity.position == Vector3(4.0, 0.0, -2.0)
    assert entity.heading == 1.25