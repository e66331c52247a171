"""Shared types and constants for the game."""

from __future__ import annotations

from enum import Enum, auto

EntityId = int

GRAVITY_ACCELERATION = 10.0


class GameState(Enum):
    """Which screen the game is currently showing."""

    MAIN_MENU = auto()
    IN_GAME = auto()
    IN_PAUSE = auto()
    IN_SETTINGS = auto()