#!/usr/bin/env python3
"""
Keyboard translation: raw key codes to reducer messages.

Codes follow the browser ``keyCode`` convention so the mapping is independent
of the windowing library; the host converts its own key constants first.
"""
import logging
from typing import Dict

from .constants import KEY_DOWN, KEY_ENTER, KEY_LEFT, KEY_RIGHT, KEY_UP
from .data_models import KeyState
from .messages import Direction, KeyChanged, Message, NoOp, Reset

logger = logging.getLogger(__name__)

DIRECTION_KEYS: Dict[int, Direction] = {
    KEY_UP: Direction.UP,
    KEY_DOWN: Direction.DOWN,
    KEY_LEFT: Direction.LEFT,
    KEY_RIGHT: Direction.RIGHT,
}


def translate(code: int, pressed: bool) -> Message:
    """
    Map a key code and its press/release edge to a message.

    Direction keys yield KeyChanged on both edges. Enter yields Reset on
    key-down only; its release is ignored. Any other code is a NoOp.
    """
    logger.debug("key %s code=%s", "down" if pressed else "up", code)
    direction = DIRECTION_KEYS.get(code)
    if direction is not None:
        return KeyChanged(direction, KeyState.PRESSED if pressed else KeyState.UNPRESSED)
    if code == KEY_ENTER and pressed:
        return Reset()
    return NoOp()
