"""Locating assets, caching models and loading map files."""

from __future__ import annotations

import os
import sys
import weakref
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from raycer.collidable import Collidable
from raycer.debug import debug_log
from raycer.entity import Entity
from raycer.vector import Vector2, Vector3
from raycer.world import CheckpointZone, World


@dataclass(eq=False)
class Model:
    """A handle to a 3D model file inside the assets directory."""

    path: Path


def find_assets_location(base: str | os.PathLike[str]) -> Path:
    """Return ``base/assets`` or ``base/../assets``, whichever is a directory first."""
    base = Path(base)
    for candidate in (base / "assets", base / ".." / "assets"):
        if candidate.is_dir():
            return candidate
    raise FileNotFoundError("Assets directory not found!")


def _take(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of line in map file") from None


def _floats(tokens: Iterator[str], count: int) -> list[float]:
    return [float(_take(tokens)) for _ in range(count)]


class ModelManager:
    """Loads models from the assets directory and shares them while in use."""

    def __init__(self, base: str | os.PathLike[str] | None = None) -> None:
        if base is None:
            self.exe_location = Path(sys.argv[0]).resolve().parent
        else:
            self.exe_location = Path(base)
        print(f"executable location = {self.exe_location}", file=sys.stderr)
        self.assets_location = find_assets_location(self.exe_location)
        print(f"assets_location = {self.assets_location}", file=sys.stderr)
        self._models: weakref.WeakValueDictionary[str, Model] = weakref.WeakValueDictionary()

    def get_model(self, model_path: str) -> Model:
        """Return the model at ``model_path``, reusing one that is still alive."""
        cached = self._models.get(model_path)
        if cached is not None:
            return cached
        resolved = Path(os.path.normpath(self.assets_location / model_path))
        print(f"resolved_path = {resolved}", file=sys.stderr)
        model = Model(resolved)
        self._models[model_path] = model
        return model

    def load_map(self, map_path: str, world: World) -> None:
        """Fill ``world`` from ``<map_path>_entities.txt`` and ``<map_path>_materials.txt``."""
        debug_log("MENU", f"loading map '{map_path}'")

        entities_path = self.assets_location / f"{map_path}_entities.txt"
        try:
            entities_text = entities_path.read_text()
        except OSError as exc:
            raise FileNotFoundError(f"Couldn't load map: {entities_path}") from exc

        colliders: dict[int, list[Vector2]] = {}
        for line in entities_text.splitlines():
            tokens = iter(line.split())
            command = next(tokens, "")
            if command == "entity":
                self._spawn_entity(tokens, colliders, world)
            elif command == "collider":
                collider_id = int(_take(tokens))
                count = int(_take(tokens))
                vertices = colliders.setdefault(collider_id, [])
                for _ in range(count):
                    x, y = _floats(tokens, 2)
                    vertices.append(Vector2(x, y))
            elif command == "checkpoint":
                checkpoint_id = int(_take(tokens))
                print(f"checkpoint {checkpoint_id}", file=sys.stderr)
                coords = _floats(tokens, 8)
                corners = tuple(Vector2(x, y) for x, y in zip(coords[::2], coords[1::2]))
                world.checkpoints[checkpoint_id] = CheckpointZone(corners)

        materials_path = self.assets_location / f"{map_path}_materials.txt"
        try:
            materials_text = materials_path.read_text()
        except OSError as exc:
            raise FileNotFoundError(f"Couldn't load map: {materials_path}") from exc
        world.materials = self._parse_materials(materials_text)

    def _spawn_entity(
        self, tokens: Iterator[str], colliders: dict[int, list[Vector2]], world: World
    ) -> None:
        model_name = ""
        position = Vector3()
        heading = 0.0
        collider: int | None = None
        for name in tokens:
            if name == "model":
                model_name = _take(tokens)
            elif name == "position":
                position = Vector3(*_floats(tokens, 3))
            elif name == "heading":
                heading = float(_take(tokens))
            elif name == "collider":
                collider = int(_take(tokens))

        model = self.get_model(model_name)
        if collider is not None:
            entity: Entity = Collidable(model, position, heading, colliders.get(collider, []))
        else:
            entity = Entity(model, position, heading)
        world.spawn_entity(entity)

    @staticmethod
    def _parse_materials(text: str) -> list[list[str]]:
        parts = text.split(maxsplit=1)
        if not parts:
            raise ValueError("materials file is empty")
        size = int(parts[0])
        if size < 0:
            raise ValueError(f"invalid materials grid size {size}")
        body = parts[1] if len(parts) > 1 else ""
        cells = [char for char in body if not char.isspace()]
        if len(cells) < size * size:
            raise ValueError("materials grid is incomplete")
        rows = [cells[row * size:(row + 1) * size] for row in range(size)]
        return [list(column) for column in zip(*rows)]