#!/usr/bin/env python3
"""
Vector helper functions for 2D operations on (x, y) tuples.

These are small, fast functions for vector math used throughout the game.
"""
import math
from typing import Tuple


def clamp(x: float, a: float, b: float) -> float:
    """Clamp x to the inclusive range [a, b]."""
    return max(a, min(b, x))


def sign(x: float) -> float:
    if x > 0:
        return 1.0
    if x < 0:
        return -1.0
    return 0.0


def wrap(x: float, size: float) -> float:
    """
    Bring x back onto [0, size] with a single correction.

    Values exactly at 0 or size are left alone; anything within one map width
    outside the range reappears on the opposite edge.
    """
    if x > size:
        return x - size
    if x < 0:
        return x + size
    return x


def vec_sub(a: Tuple[float, float], b: Tuple[float, float]) -> Tuple[float, float]:
    return (a[0] - b[0], a[1] - b[1])


def vec_len(a: Tuple[float, float]) -> float:
    return math.hypot(a[0], a[1])


def vec_dist(a: Tuple[float, float], b: Tuple[float, float]) -> float:
    """Euclidean distance between two points."""
    return vec_len(vec_sub(a, b))


def vec_wrap(a: Tuple[float, float], size: float) -> Tuple[float, float]:
    return (wrap(a[0], size), wrap(a[1], size))
