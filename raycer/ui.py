"""Menus, dials and overlays drawn on top of the game."""

from __future__ import annotations

import math
import os
from collections.abc import Sequence
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame

from raycer.common import EntityId, GameState
from raycer.controller import KeyState
from raycer.debug import debug_values

if TYPE_CHECKING:
    from raycer.world import World

SPEED_VALUES = (0, 20, 40, 60, 80, 100, 120)
RPM_VALUES = (0, 1, 2, 3, 4, 5, 6)
START_ANGLE = -200.0
END_ANGLE = 20.0
DIAL_RADIUS = 80.0
SPEED_DIAL_OFFSET = (100, 100)
RPM_DIAL_OFFSET = (300, 100)

KEY_ESCAPE = "escape"
KEY_F3 = "f3"

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (230, 41, 55)
VIOLET = (135, 60, 190)


@dataclass
class PlayerInfo:
    """One row of the leaderboard."""

    player_id: EntityId
    place: int
    seconds: float
    checkpoint: int


@dataclass(frozen=True)
class Styles:
    """Menu colours as 0xRRGGBBAA integers."""

    border_color: int = 0x00FF00FF
    base_color: int = 0x00000000
    text_color: int = 0x00FF00FF
    focused_text_color: int = 0x000000FF
    focused_base_color: int = 0x00CC00FF
    clicked_base_color: int = 0x008000FF


def needle_angle(value: float, values: Sequence[int]) -> float:
    """Angle in degrees of a dial needle showing ``value`` on a scale of ``values``."""
    if len(values) < 2:
        raise ValueError("a dial needs at least two scale values")
    v_max = values[-1]
    angle_step = (END_ANGLE - START_ANGLE) / (len(values) - 1)
    if value > v_max:
        return END_ANGLE + (value - v_max) / 20.0 * angle_step
    for index, (low, high) in enumerate(zip(values, values[1:])):
        if low <= value <= high:
            return START_ANGLE + (index + (value - low) / (high - low)) * angle_step
    full_angle = abs(START_ANGLE) + abs(END_ANGLE)
    return full_angle * (v_max * value)


@lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, max(1, size))


def _measure(text: str, size: int) -> int:
    return _font(size).size(text)[0]


def _draw_text(surface: pygame.Surface, text: str, x: float, y: float, size: int, color) -> None:
    surface.blit(_font(size).render(text, True, color), (int(x), int(y)))


class UiManager:
    """Draws menus and the driving HUD and tracks which screen should be shown.

    Mouse clicks for the next drawn screen are queued in ``clicks`` as
    ``(x, y)`` positions; each menu consumes them when it is drawn.
    """

    def __init__(self, width: int = 1000, height: int = 840) -> None:
        self.styles = Styles()
        self.state = GameState.MAIN_MENU
        self.is_fullscreen = False
        self.show_exit_message = False
        self.show_debug = False
        self.clicks: list[tuple[int, int]] = []
        self.update_sizes(width, height)
        self._text_size = height // 35

    def update_sizes(self, width: int, height: int) -> None:
        self.menu_width = width
        self.menu_height = height
        self.gap = height // 5

    def _take_clicks(self) -> list[tuple[int, int]]:
        clicks, self.clicks = self.clicks, []
        return clicks

    def _button_rect(self, row: int) -> pygame.Rect:
        return pygame.Rect(
            self.menu_width // 2 - 100, self.menu_height // 2 + row * self.gap, 200, 80
        )

    def _checkbox_rect(self) -> pygame.Rect:
        return pygame.Rect(self.menu_width // 2 - 100, self.menu_height // 2 - self.gap, 80, 80)

    def _button(
        self, surface: pygame.Surface, rect: pygame.Rect, label: str, clicks
    ) -> bool:
        clicked = any(rect.collidepoint(point) for point in clicks)
        base = self.styles.clicked_base_color if clicked else self.styles.base_color
        fill = pygame.Surface(rect.size, pygame.SRCALPHA)
        fill.fill(pygame.Color(base))
        surface.blit(fill, rect.topleft)
        pygame.draw.rect(surface, pygame.Color(self.styles.border_color), rect, width=2)
        text_width = _measure(label, self._text_size)
        _draw_text(
            surface,
            label,
            rect.centerx - text_width / 2,
            rect.centery - self._text_size / 3,
            self._text_size,
            pygame.Color(self.styles.text_color),
        )
        return clicked

    def _message_box_rects(self, surface: pygame.Surface):
        width, height = surface.get_size()
        box = pygame.Rect(width // 2 - 275, height // 2 - 125, 550, 250)
        close = pygame.Rect(box.right - 24, box.y + 4, 18, 18)
        button_width = (box.width - 36) // 2
        yes = pygame.Rect(box.x + 12, box.bottom - 52, button_width, 40)
        no = pygame.Rect(yes.right + 12, box.bottom - 52, button_width, 40)
        return box, close, yes, no

    def _message_box(self, surface: pygame.Surface, clicks) -> int | None:
        box, close, yes, no = self._message_box_rects(surface)
        pygame.draw.rect(surface, pygame.Color(self.styles.border_color), box, width=2)
        _draw_text(surface, "Close Window", box.x + 10, box.y + 6, self._text_size, WHITE)
        message = "Do you really want to exit?"
        _draw_text(
            surface,
            message,
            box.centerx - _measure(message, self._text_size) / 2,
            box.centery - 20,
            self._text_size,
            WHITE,
        )
        if self._button(surface, close, "x", clicks):
            return 0
        if self._button(surface, yes, "Yes", clicks):
            return 1
        if self._button(surface, no, "No", clicks):
            return 2
        return None

    def draw_menu(self, surface: pygame.Surface, keys: KeyState) -> None:
        """Draw the main menu and act on clicks; "Yes" on the exit prompt exits."""
        clicks = self._take_clicks()
        _draw_text(surface, "RAYCER", 20, 20, 20, WHITE)

        if self._button(surface, self._button_rect(-1), "PLAY", clicks) and not self.show_exit_message:
            self.state = GameState.IN_GAME
        if (
            self._button(surface, self._button_rect(0), "SETTINGS", clicks)
            and not self.show_exit_message
        ):
            self.state = GameState.IN_SETTINGS
        if self._button(surface, self._button_rect(1), "EXIT", clicks) and not self.show_exit_message:
            self.show_exit_message = True

        if self.show_exit_message:
            surface.fill(BLACK)
            result = self._message_box(surface, clicks)
            if result in (0, 2):
                self.show_exit_message = False
            elif result == 1:
                raise SystemExit(0)

    def draw_ui(
        self, surface: pygame.Surface, world: World, player_id: EntityId, keys: KeyState
    ) -> None:
        """Draw the speed and RPM dials of the player's vehicle and, if enabled, debug values."""
        player = world.entities[player_id]
        speed = player.velocity().length()
        rpm = 0.0
        if player.gear:
            rpm = player.compute_rpm(speed, player.gear, player.wheels[0].radius, player.engine_torque)
        self.draw_speedometer(surface, speed * 100, player.gear)
        self.draw_rpm_meter(surface, rpm)

        if keys.was_pressed(KEY_F3):
            self.show_debug = not self.show_debug
        if not self.show_debug:
            return
        line_height = 15
        for offset, (name, value) in enumerate(sorted(debug_values.items())):
            _draw_text(surface, f"{name}: {value}", 0, offset * line_height, line_height, VIOLET)

    def draw_leaderboard(
        self, surface: pygame.Surface, players: Sequence[PlayerInfo]
    ) -> list[tuple[str, str, str]]:
        """Draw the leaderboard and return its rows as (place, id, time) strings."""
        if not players:
            raise ValueError("leaderboard needs at least one player")
        background_width = 170 + _measure("TIME", 16)
        background = pygame.Surface((background_width, 80 + 30 * len(players)), pygame.SRCALPHA)
        background.fill(pygame.Color(0x00000088))
        surface.blit(background, (0, 0))

        title_x = (background_width - _measure("Leaderboard", 20)) // 2
        _draw_text(surface, "Leaderboard", title_x, 20, 20, WHITE)
        _draw_text(surface, "POS", 20, 60, 16, WHITE)
        _draw_text(surface, "ID", 70, 60, 16, WHITE)
        _draw_text(surface, "TIME", 140, 60, 16, WHITE)

        first_time = players[0].seconds
        rows = []
        for index, player in enumerate(players):
            y = 80 + index * 30
            if index == 0:
                time_text, color = f"{player.seconds:.2f} s", WHITE
            else:
                time_text, color = f"+{player.seconds - first_time:.2f} s", RED
            row = (f"{player.place}.", f"{player.player_id}", time_text)
            _draw_text(surface, row[0], 20, y, 16, WHITE)
            _draw_text(surface, row[1], 70, y, 16, WHITE)
            _draw_text(surface, row[2], 140, y, 16, color)
            rows.append(row)
        return rows

    def _draw_dial(
        self,
        surface: pygame.Surface,
        value: float,
        values: Sequence[int],
        offset: tuple[int, int],
        label: str | None = None,
    ) -> float:
        width, height = surface.get_size()
        cx, cy = width - offset[0], height - offset[1]
        pygame.draw.circle(surface, WHITE, (cx, cy), int(DIAL_RADIUS), width=1)

        if label is not None:
            size = height // 30
            _draw_text(surface, label, cx - _measure(label, size) // 2, cy + 30, size, WHITE)

        angle_step = (END_ANGLE - START_ANGLE) / (len(values) - 1)
        for index, scale_value in enumerate(values):
            radian = math.radians(START_ANGLE + index * angle_step)
            text_x = int(cx + math.cos(radian) * (DIAL_RADIUS - 25.0))
            text_y = int(cy + math.sin(radian) * (DIAL_RADIUS - 25.0) - 10)
            text = str(scale_value)
            _draw_text(surface, text, text_x - _measure(text, 20) // 2, text_y, 20, WHITE)

        angle = needle_angle(value, values)
        radian = math.radians(angle)
        length = DIAL_RADIUS - 20.0
        end = (cx + math.cos(radian) * length, cy + math.sin(radian) * length)
        pygame.draw.line(surface, RED, (cx, cy), end, 5)
        return angle

    def draw_speedometer(self, surface: pygame.Surface, value: float, gear: float) -> float:
        """Draw the speed dial with the gear number; return the needle angle in degrees."""
        return self._draw_dial(surface, value, SPEED_VALUES, SPEED_DIAL_OFFSET, str(int(gear)))

    def draw_rpm_meter(self, surface: pygame.Surface, value: float) -> float:
        """Draw the RPM dial (in thousands); return the needle angle in degrees."""
        return self._draw_dial(surface, value / 1000, RPM_VALUES, RPM_DIAL_OFFSET)

    def draw_settings(
        self, surface: pygame.Surface, previous_state: GameState, keys: KeyState
    ) -> None:
        """Draw the settings screen; leaving returns to the menu or pause screen it came from."""
        self.state = GameState.IN_SETTINGS
        clicks = self._take_clicks()
        _draw_text(surface, "RAYCER SETTINGS", 20, 20, 20, WHITE)

        checkbox = self._checkbox_rect()
        if any(checkbox.collidepoint(point) for point in clicks):
            self.is_fullscreen = not self.is_fullscreen
        border = pygame.Color(self.styles.border_color)
        pygame.draw.rect(surface, border, checkbox, width=2)
        if self.is_fullscreen:
            pygame.draw.rect(surface, border, checkbox.inflate(-16, -16))
        _draw_text(
            surface,
            "FULLSCREEN",
            checkbox.right + 8,
            checkbox.centery - self._text_size / 3,
            self._text_size,
            pygame.Color(self.styles.text_color),
        )

        leave = self._button(surface, self._button_rect(1), "EXIT", clicks)
        if leave or keys.was_pressed(KEY_ESCAPE):
            if previous_state in (GameState.MAIN_MENU, GameState.IN_PAUSE):
                self.state = previous_state
            else:
                self.state = GameState.IN_GAME

    def draw_pause_menu(self, surface: pygame.Surface, keys: KeyState) -> None:
        """Draw the pause menu and act on clicks."""
        self.state = GameState.IN_PAUSE
        clicks = self._take_clicks()
        _draw_text(surface, "RAYCER PAUSE", 20, 20, 20, WHITE)

        if self._button(surface, self._button_rect(-1), "CONTINUE", clicks):
            self.state = GameState.IN_GAME
        if self._button(surface, self._button_rect(0), "SETTINGS", clicks):
            self.state = GameState.IN_SETTINGS
        if self._button(surface, self._button_rect(1), "EXIT TO MENU", clicks):
            self.state = GameState.MAIN_MENU