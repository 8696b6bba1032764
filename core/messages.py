#!/usr/bin/env python3
"""
Messages accepted by the game reducer.

A message is one of:
- KeyChanged: a direction key went down or up
- TimeStep: the frame clock advanced by ``dt`` seconds
- Reset: the restart key was pressed
- NoOp: an input with no meaning to the game
"""
from dataclasses import dataclass
from enum import Enum
from typing import Union

from .data_models import KeyState


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class KeyChanged:
    direction: Direction
    state: KeyState


@dataclass(frozen=True)
class TimeStep:
    dt: float  # seconds, non-negative


@dataclass(frozen=True)
class Reset:
    pass


@dataclass(frozen=True)
class NoOp:
    pass


Message = Union[KeyChanged, TimeStep, Reset, NoOp]
