"""The game loop: screens, level loading and the program entry point."""

from __future__ import annotations

import argparse
import math
import os
import sys
from dataclasses import dataclass

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame

from raycer.ai import StraightGuy
from raycer.collidable import Collidable
from raycer.common import EntityId, GameState
from raycer.controller import Controller, KeyState, PlayerController
from raycer.debug import debug_log
from raycer.model_manager import ModelManager
from raycer.ui import KEY_ESCAPE, UiManager
from raycer.vector import Vector2, Vector3
from raycer.vehicle import Vehicle, Wheel
from raycer.world import GRID_CELL_SIZE, World

SCREEN_WIDTH = 1000
SCREEN_HEIGHT = 840
BACKGROUND = (0x18, 0x18, 0x18)
TARGET_FPS = 60

KEY_SPACE = "space"

DEFAULT_LEVEL = "map_test"
CAR_MODEL = "car_prototype.glb"

GRID_SLICES = 25
GRID_SPACING = 2.0
GRID_COLOR = (80, 80, 80)
CHECKPOINT_COLOR = (128, 255, 128)
ENTITY_COLOR = (200, 200, 200)


@dataclass
class _Camera:
    position: Vector3
    target: Vector3
    up: Vector3
    fovy: float

    def project(self, surface: pygame.Surface, point: Vector2) -> tuple[float, float]:
        """Map a ground-plane point to surface pixels (top-down orthographic view)."""
        width, height = surface.get_size()
        scale = height / self.fovy
        return (
            width / 2 + (point.x - self.target.x) * scale,
            height / 2 + (point.y - self.target.z) * scale,
        )

    def scale(self, surface: pygame.Surface) -> float:
        return surface.get_size()[1] / self.fovy


def _car_collider() -> list[Vector2]:
    return [Vector2(-1.0, -1.0), Vector2(-1.0, 1.0), Vector2(1.0, 1.0), Vector2(1.0, -1.0)]


def _car_wheels() -> list[Wheel]:
    offsets = ((0.5, 1.0), (0.5, -1.0), (-0.5, 1.0), (-0.5, -1.0))
    return [Wheel(1.0, 0.0, 0.2, 0.0, Vector2(x, y)) for x, y in offsets]


class Game:
    """Owns the world and the UI and switches between the game's screens."""

    def __init__(
        self,
        model_manager: ModelManager | None = None,
        width: int = SCREEN_WIDTH,
        height: int = SCREEN_HEIGHT,
    ) -> None:
        self.model_manager = model_manager if model_manager is not None else ModelManager()
        self.camera = _Camera(
            Vector3(30.0, 30.0, 30.0), Vector3(0.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0), 60.0
        )
        self.player_id: EntityId | None = None
        self.world: World | None = None
        self.ui = UiManager(width, height)
        self.keys = KeyState()
        self.state = GameState.MAIN_MENU
        self.fullscreen = False
        self._previous_state = GameState.MAIN_MENU

    def update(self, delta_time: float) -> None:
        """React to keys for the current screen and advance the world while playing."""
        if self.state is GameState.MAIN_MENU:
            if self.keys.was_pressed(KEY_SPACE):
                self.state = GameState.IN_GAME
        elif self.state is GameState.IN_GAME:
            if self.world is None:
                self.load_level(DEFAULT_LEVEL)
            if self.keys.was_pressed(KEY_ESCAPE):
                self.state = GameState.IN_PAUSE
            if self.state is GameState.IN_GAME and self.world is not None:
                self.world.update(delta_time)
        elif self.state is GameState.IN_PAUSE:
            if self.keys.was_pressed(KEY_ESCAPE):
                self.state = GameState.IN_GAME
        self._sync_fullscreen()

    def _sync_fullscreen(self) -> None:
        if self.ui.is_fullscreen == self.fullscreen:
            return
        self.fullscreen = self.ui.is_fullscreen
        surface = pygame.display.get_surface() if pygame.display.get_init() else None
        if surface is None:
            if self.fullscreen:
                size = (self.ui.menu_width, self.ui.menu_height)
            else:
                size = (SCREEN_WIDTH, SCREEN_HEIGHT)
        elif self.fullscreen:
            size = pygame.display.set_mode((0, 0), pygame.FULLSCREEN).get_size()
        else:
            size = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT)).get_size()
        self.ui.update_sizes(*size)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the current screen onto ``surface``."""
        if self.state not in (GameState.IN_GAME, GameState.IN_SETTINGS):
            self._previous_state = self.state

        if self.state is GameState.MAIN_MENU:
            self.ui.draw_menu(surface, self.keys)
            self.state = self.ui.state
            return
        if self.state is GameState.IN_GAME:
            if self.world is None or self.player_id is None:
                return
            self._draw_world(surface, self.world)
            self.ui.draw_ui(surface, self.world, self.player_id, self.keys)
        if self.state is GameState.IN_PAUSE:
            self.ui.draw_pause_menu(surface, self.keys)
            self.state = self.ui.state
            return
        if self.state is GameState.IN_SETTINGS:
            self.ui.draw_settings(surface, self._previous_state, self.keys)
            self.state = self.ui.state

    def _draw_world(self, surface: pygame.Surface, world: World) -> None:
        camera = self.camera
        scale = camera.scale(surface)

        cell_pixels = max(1, math.ceil(GRID_CELL_SIZE * scale))
        for ix, column in enumerate(world.materials):
            for iy in range(len(column)):
                x, y = camera.project(
                    surface,
                    Vector2((ix - 0.5) * GRID_CELL_SIZE, (iy - 0.5) * GRID_CELL_SIZE),
                )
                color = world.material_at_cell(ix, iy).color
                pygame.draw.rect(surface, color[:3], pygame.Rect(int(x), int(y), cell_pixels, cell_pixels))

        half = GRID_SLICES / 2 * GRID_SPACING
        for step in range(GRID_SLICES + 1):
            offset = -half + step * GRID_SPACING
            pygame.draw.line(
                surface,
                GRID_COLOR,
                camera.project(surface, Vector2(offset, -half)),
                camera.project(surface, Vector2(offset, half)),
            )
            pygame.draw.line(
                surface,
                GRID_COLOR,
                camera.project(surface, Vector2(-half, offset)),
                camera.project(surface, Vector2(half, offset)),
            )

        for entity in world.entities.values():
            origin = entity.position.xz
            if isinstance(entity, Collidable) and len(entity.collider_vertices) >= 3:
                points = [
                    camera.project(surface, vertex.rotate(entity.heading) + origin)
                    for vertex in entity.collider_vertices
                ]
                pygame.draw.polygon(surface, ENTITY_COLOR, points, width=2)
            else:
                pygame.draw.circle(
                    surface, ENTITY_COLOR, camera.project(surface, origin), max(2, int(scale / 2))
                )

        marker = max(2, int(0.1 * scale))
        for zone in world.checkpoints.values():
            for vertex in zone.vertices:
                x, y = camera.project(surface, vertex)
                pygame.draw.rect(
                    surface,
                    CHECKPOINT_COLOR,
                    pygame.Rect(int(x) - marker // 2, int(y) - marker // 2, marker, marker),
                )

    def _spawn_car(self, world: World, controller: Controller) -> EntityId:
        vehicle = Vehicle(
            self.model_manager.get_model(CAR_MODEL),
            Vector3(0.0, 0.0, 0.0),
            0.0,
            _car_collider(),
            10.0,
            10.0,
            _car_wheels(),
            controller,
        )
        return world.spawn_entity(vehicle)

    def load_level(self, level: str) -> None:
        """Create a new world with the player's car, a computer car and the map ``level``.

        The level named ``test`` has no map files.
        """
        debug_log("MENU", f"loading level '{level}'")
        world = World()
        self.world = world
        self.player_id = self._spawn_car(world, PlayerController(keys=self.keys))
        self._spawn_car(world, StraightGuy())
        if level != "test":
            self.model_manager.load_map(level, world)


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="raycer", description="A small top-down racing game.")
    parser.add_argument(
        "--base",
        default=None,
        help="directory that holds (or sits next to) the assets directory; "
        "defaults to the program's directory",
    )
    args = parser.parse_args(argv)

    try:
        model_manager = ModelManager(args.base)
    except FileNotFoundError as exc:
        print(exc, file=sys.stderr)
        return 1

    pygame.display.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("RAYCER")
        clock = pygame.time.Clock()
        game = Game(model_manager, SCREEN_WIDTH, SCREEN_HEIGHT)

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    game.keys.press(pygame.key.name(event.key))
                elif event.type == pygame.KEYUP:
                    game.keys.release(pygame.key.name(event.key))
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    game.ui.clicks.append(event.pos)
            if not running:
                break

            delta_time = clock.tick(TARGET_FPS) / 1000.0
            game.update(delta_time)

            surface = pygame.display.get_surface()
            surface.fill(BACKGROUND)
            game.draw(surface)
            pygame.display.flip()
            game.keys.end_frame()
    finally:
        pygame.display.quit()
    return 0