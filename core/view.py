#!/usr/bin/env python3
"""
Frame description for the renderer.

build_frame turns a GameState into plain shapes in map coordinates. The pygame
viewport only has to project and draw them, which keeps the drawing thread free
of game logic and makes the view testable without a display.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from .constants import (
    ASTEROID_COLOR,
    ASTEROID_MARKER_RADIUS,
    BACKGROUND_COLOR,
    BANNER_COLOR,
    MAP_SIZE,
    PLAYER_COLOR,
    PLAYER_MARKER_RADIUS,
)
from .data_models import Coordinates, GameState

Color = Tuple[int, int, int]

GAME_OVER_TEXT = "Game Over"
RESTART_HINT = "Press Enter to restart"


@dataclass(frozen=True)
class Rect:
    origin: Coordinates
    size: float
    color: Color


@dataclass(frozen=True)
class Circle:
    center: Coordinates
    radius: float
    color: Color


@dataclass(frozen=True)
class Banner:
    title: str
    subtitle: str
    color: Color


@dataclass(frozen=True)
class Frame:
    background: Rect
    asteroids: Tuple[Circle, ...] = ()
    player: Optional[Circle] = None
    banner: Optional[Banner] = None


def build_frame(state: GameState, map_size: float = MAP_SIZE) -> Frame:
    background = Rect(origin=(0.0, 0.0), size=map_size, color=BACKGROUND_COLOR)
    if state.is_game_over:
        return Frame(background=background, banner=Banner(GAME_OVER_TEXT, RESTART_HINT, BANNER_COLOR))
    return Frame(
        background=background,
        asteroids=tuple(Circle(a.position, ASTEROID_MARKER_RADIUS, ASTEROID_COLOR) for a in state.asteroids),
        player=Circle(state.player.position, PLAYER_MARKER_RADIUS, PLAYER_COLOR),
    )
