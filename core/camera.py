#!/usr/bin/env python3
"""
Camera utilities for mapping the square game map onto the window.
"""
from typing import Tuple

from .constants import MAP_SIZE, VIEW_HEIGHT, VIEW_WIDTH


class ViewBoxCamera:
    """
    Fits the square map [0, map_size]^2 into the viewport, like an SVG viewBox
    with preserveAspectRatio "xMidYMid meet": uniform scale, centred, with
    letterbox bars on the longer side.
    """

    def __init__(self, map_size: float = MAP_SIZE):
        self.map_size = float(map_size)
        self.viewport_size = (VIEW_WIDTH, VIEW_HEIGHT)

    def set_viewport_size(self, w: int, h: int) -> None:
        self.viewport_size = (max(1, w), max(1, h))

    @property
    def pixels_per_unit(self) -> float:
        return min(self.viewport_size) / self.map_size

    @property
    def offset(self) -> Tuple[float, float]:
        side = self.map_size * self.pixels_per_unit
        return ((self.viewport_size[0] - side) / 2, (self.viewport_size[1] - side) / 2)

    def world_to_screen(self, pos: Tuple[float, float]) -> Tuple[int, int]:
        ox, oy = self.offset
        ppu = self.pixels_per_unit
        return (int(round(ox + pos[0] * ppu)), int(round(oy + pos[1] * ppu)))

    def length_to_screen(self, length: float) -> int:
        return int(round(length * self.pixels_per_unit))
