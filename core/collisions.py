#!/usr/bin/env python3
"""
Collision detection for Asteroid Dodge.

The player is a point; each asteroid is a disc of radius COLLISION_RADIUS.
A hit is strict: a player exactly on the rim is still safe.

Distances are plain Euclidean distances in map coordinates. They do not wrap
around the torus, so an asteroid near one edge cannot be hit from across the
opposite edge.
"""
from typing import Iterable, Optional

from .constants import COLLISION_RADIUS
from .data_models import Asteroid, Coordinates
from .vector_utils import vec_dist


class CollisionSettings:
    """Container for collision-related settings."""
    def __init__(self, radius: float = COLLISION_RADIUS, check_wrapped_position: bool = False):
        self.radius = max(0.0, float(radius))
        # False: test the freshly integrated position before it wraps onto the map
        self.check_wrapped_position = bool(check_wrapped_position)


def find_collision(position: Coordinates, asteroids: Iterable[Asteroid],
                   settings: CollisionSettings) -> Optional[Asteroid]:
    """Return the first asteroid closer than settings.radius to position, if any."""
    for asteroid in asteroids:
        if vec_dist(asteroid.position, position) < settings.radius:
            return asteroid
    return None


def collides(position: Coordinates, asteroids: Iterable[Asteroid], settings: CollisionSettings) -> bool:
    return find_collision(position, asteroids, settings) is not None
