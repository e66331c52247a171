from pathlib import Path

import pytest

from raycer.collidable import Collidable
from raycer.entity import Entity
from raycer.model_manager import Model, ModelManager, find_assets_location
from raycer.vector import Vector2, Vector3
from raycer.world import ASPHALT, GRASS, World

ENTITIES = """\
# sample map
collider 1 4 -1 -1 -1 1 1 1 1 -1
entity model tree.glb position 1 2 3 heading 0.5 collider 1
entity model rock.glb position 4 0 5
entity model tree.glb
checkpoint 3 0 0 10 0 0 10 10 10
"""


@pytest.fixture
def assets(tmp_path):
    directory = tmp_path / "assets"
    directory.mkdir()
    return directory


@pytest.fixture
def manager(tmp_path, assets):
    return ModelManager(tmp_path)


def write_map(assets: Path, entities: str = ENTITIES, materials: str = "2\nxx\n..\n"):
    (assets / "track_entities.txt").write_text(entities)
    (assets / "track_materials.txt").write_text(materials)


def test_find_assets_next_to_base(tmp_path, assets):
    assert find_assets_location(tmp_path).resolve() == assets.resolve()


def test_find_assets_in_parent(tmp_path, assets):
    base = tmp_path / "bin"
    base.mkdir()
    assert find_assets_location(base).resolve() == assets.resolve()


def test_find_assets_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        find_assets_location(tmp_path)


def test_manager_without_assets_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        ModelManager(tmp_path)


def test_get_model_is_cached_while_alive(manager):
    first = manager.get_model("car.glb")
    assert manager.get_model("car.glb") is first
    assert isinstance(first, Model)


def test_get_model_reloads_after_release(manager):
    first_id = id(manager.get_model("car.glb"))
    keep = manager.get_model("other.glb")
    again = manager.get_model("car.glb")
    assert again.path == keep.path.parent / "car.glb"
    assert first_id is not None and again is manager.get_model("car.glb")


def test_get_model_normalizes_path(manager, assets):
    model = manager.get_model("sub/../car.glb")
    assert model.path == assets / "car.glb"


def test_load_map_spawns_entities(manager, assets):
    write_map(assets)
    world = World()
    manager.load_map("track", world)
    assert len(world.entities) == 3

    tree = world.entities[0]
    assert isinstance(tree, Collidable)
    assert tree.collider_vertices == [
        Vector2(-1, -1),
        Vector2(-1, 1),
        Vector2(1, 1),
        Vector2(1, -1),
    ]
    assert tree.position == Vector3(1, 2, 3)
    assert tree.heading == 0.5
    assert tree.model.path == assets / "tree.glb"

    rock = world.entities[1]
    assert type(rock) is Entity
    assert rock.position == Vector3(4, 0, 5)
    assert rock.heading == 0.0

    assert world.entities[2].model is tree.model


def test_load_map_reads_checkpoints(manager, assets):
    write_map(assets)
    world = World()
    manager.load_map("track", world)
    zone = world.checkpoints[3]
    assert zone.vertices == (Vector2(0, 0), Vector2(10, 0), Vector2(0, 10), Vector2(10, 10))
    assert zone.contains(Vector2(5, 2))
    assert not zone.contains(Vector2(20, 20))


def test_load_map_materials_are_column_major(manager, assets):
    write_map(assets)
    world = World()
    manager.load_map("track", world)
    assert world.materials == [["x", "."], ["x", "."]]
    assert world.material_at_cell(1, 0) is ASPHALT
    assert world.material_at_cell(0, 1) is GRASS


def test_repeated_collider_id_extends_vertices(manager, assets):
    entities = "collider 2 1 0 0\ncollider 2 1 1 1\nentity model a.glb collider 2\n"
    write_map(assets, entities, "0\n")
    world = World()
    manager.load_map("track", world)
    assert world.entities[0].collider_vertices == [Vector2(0, 0), Vector2(1, 1)]
    assert world.materials == []


def test_missing_entities_file_raises(manager):
    with pytest.raises(FileNotFoundError):
        manager.load_map("nowhere", World())


def test_missing_materials_file_raises(manager, assets):
    (assets / "track_entities.txt").write_text("entity model a.glb\n")
    world = World()
    with pytest.raises(FileNotFoundError):
        manager.load_map("track", world)
    assert len(world.entities) == 1


def test_incomplete_materials_raises(manager, assets):
    write_map(assets, "", "3\nxx\n")
    with pytest.raises(ValueError):
        manager.load_map("track", World())


def test_truncated_checkpoint_raises(manager, assets):
    write_map(assets, "checkpoint 1 0 0 1\n")
    with pytest.raises(ValueError):
        manager.load_map("track", World())