#!/usr/bin/env python3
"""
Data models for Asteroid Dodge.

This module defines the immutable value types shared between the reducer,
the renderer and the controls window.

Units and usage
- positions are in map units on the square [0, MAP_SIZE] torus; velocities in
  map units per second.
- every type is a frozen dataclass. Updates go through the ``with_*`` helpers,
  which return a new instance and leave the original untouched.
- the single current GameState is owned by GameController.
"""
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Tuple

from .constants import DEFAULT_ASTEROIDS, PLAYER_START, PLAYER_START_VELOCITY

Coordinates = Tuple[float, float]


class KeyState(Enum):
    PRESSED = "pressed"
    UNPRESSED = "unpressed"

    @property
    def is_pressed(self) -> bool:
        return self is KeyState.PRESSED


@dataclass(frozen=True)
class Player:
    """
    The player-controlled dot.

    Fields:
    - position: (x, y) in map units
    - velocity: (vx, vy) in map units per second
    """
    position: Coordinates = PLAYER_START
    velocity: Coordinates = PLAYER_START_VELOCITY

    def with_motion(self, position: Coordinates, velocity: Coordinates) -> "Player":
        return replace(self, position=position, velocity=velocity)


@dataclass(frozen=True)
class Asteroid:
    """A stationary obstacle; never moved or destroyed during play."""
    position: Coordinates


@dataclass(frozen=True)
class Keys:
    """Held state of the four direction keys."""
    up: KeyState = KeyState.UNPRESSED
    down: KeyState = KeyState.UNPRESSED
    left: KeyState = KeyState.UNPRESSED
    right: KeyState = KeyState.UNPRESSED

    def with_key(self, name: str, state: KeyState) -> "Keys":
        return replace(self, **{name: state})

    def pressed(self) -> Tuple[str, ...]:
        return tuple(n for n in ("up", "down", "left", "right") if getattr(self, n).is_pressed)


def default_asteroids() -> Tuple[Asteroid, ...]:
    return tuple(Asteroid(position=p) for p in DEFAULT_ASTEROIDS)


@dataclass(frozen=True)
class GameState:
    """
    Everything the reducer needs for one frame.

    Fields:
    - player: the Player
    - keys: current Keys held by the host keyboard
    - asteroids: the fixed obstacle set
    - is_game_over: sticky terminal flag; cleared only by building a new state
    """
    player: Player = field(default_factory=Player)
    keys: Keys = field(default_factory=Keys)
    asteroids: Tuple[Asteroid, ...] = field(default_factory=default_asteroids)
    is_game_over: bool = False

    def with_player(self, player: Player) -> "GameState":
        return replace(self, player=player)

    def with_keys(self, keys: Keys) -> "GameState":
        return replace(self, keys=keys)

    def with_game_over(self, is_game_over: bool) -> "GameState":
        return replace(self, is_game_over=is_game_over)


@dataclass(frozen=True)
class Scene:
    """Startup description used to (re)create a GameState."""
    name: str = "Classic"
    description: str = ""
    player_start: Coordinates = PLAYER_START
    asteroids: Tuple[Coordinates, ...] = DEFAULT_ASTEROIDS
    time_scale: float = 1.0
    collision_uses_wrapped_position: bool = False
