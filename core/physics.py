#!/usr/bin/env python3
"""
Core Physics Engine for Asteroid Dodge

Responsibilities
- Turn the held direction keys into a per-axis acceleration (thrust or damping).
- Advance the player with a semi-implicit Euler step and a per-axis speed limit.
- Wrap the result back onto the toroidal map.

Units and conventions
- Positions are in map units on [0, MAP_SIZE]; screen y grows downward, so
  "up" is the negative y direction.
- Velocities are in map units per second, accelerations in map units per s^2.
- Time steps are in seconds and may vary from frame to frame.

Numerical notes
- Semi-implicit Euler: velocity is updated first and the *new* velocity moves
  the position. It is cheap and stable for a constant-thrust toy model.
- The speed limit equals the map size, so with frame-sized dt a position can
  never overshoot the map by more than one width; one wrap correction suffices.
- Damping stops at zero rather than reversing direction, so coasting speed
  decreases monotonically for any dt.

Threading
- Pure compute. The engine holds only tuning parameters and never mutates
  its inputs.
"""

from typing import Tuple

from .constants import DAMPING, MAP_SIZE, THRUST
from .data_models import Coordinates, Keys, KeyState, Player
from .vector_utils import clamp, sign, vec_wrap


class ArcadePhysics:
    """
    Keyboard-driven point-mass physics on a square torus.

    Each axis is driven by a pair of opposing keys (up/down for y, left/right
    for x). With exactly one key of a pair held the axis gets full thrust
    towards that key; with both held the pushes cancel; with neither held a
    small damping acceleration opposes the current velocity.
    """

    def __init__(self, thrust: float = THRUST, damping: float = DAMPING, map_size: float = MAP_SIZE):
        """
        Initialize the physics engine.

        Args:
            thrust: acceleration applied while one key of a pair is held
            damping: deceleration applied while neither key of a pair is held
            map_size: side of the square map; also the per-axis speed limit
        """
        self.thrust = float(thrust)
        self.damping = float(damping)
        self.map_size = float(map_size)

    def axis_acceleration(self, negative: KeyState, positive: KeyState, velocity: float) -> float:
        """
        Acceleration on one axis from its pair of opposing keys.

        Args:
            negative: key pushing towards -axis (up or left)
            positive: key pushing towards +axis (down or right)
            velocity: current velocity on this axis, used for damping

        Returns:
            -thrust, +thrust, 0.0 (both held), or -sign(velocity) * damping
            (neither held).
        """
        if negative.is_pressed and positive.is_pressed:
            return 0.0
        if negative.is_pressed:
            return -self.thrust
        if positive.is_pressed:
            return self.thrust
        return -sign(velocity) * self.damping

    def accelerations(self, keys: Keys, velocity: Coordinates) -> Coordinates:
        return (
            self.axis_acceleration(keys.left, keys.right, velocity[0]),
            self.axis_acceleration(keys.up, keys.down, velocity[1]),
        )

    def integrate_axis(self, position: float, velocity: float, acceleration: float,
                       dt: float, coasting: bool = False) -> Tuple[float, float]:
        """
        One semi-implicit Euler step on a single axis.

        Args:
            position: current position
            velocity: current velocity
            acceleration: acceleration for this step
            dt: elapsed seconds (>= 0)
            coasting: True when the acceleration is damping; the velocity is
                then stopped at zero instead of reversing

        Returns:
            (new_position, new_velocity); the position is not wrapped.
        """
        new_velocity = velocity + acceleration * dt
        if coasting and velocity * new_velocity < 0:
            new_velocity = 0.0
        new_velocity = clamp(new_velocity, -self.map_size, self.map_size)
        return position + new_velocity * dt, new_velocity

    def integrate(self, player: Player, keys: Keys, dt: float) -> Tuple[Coordinates, Coordinates]:
        """
        Advance the player by dt without wrapping.

        Returns:
            (unwrapped_position, new_velocity)
        """
        ax, ay = self.accelerations(keys, player.velocity)
        coast_x = not (keys.left.is_pressed or keys.right.is_pressed)
        coast_y = not (keys.up.is_pressed or keys.down.is_pressed)
        px, vx = self.integrate_axis(player.position[0], player.velocity[0], ax, dt, coast_x)
        py, vy = self.integrate_axis(player.position[1], player.velocity[1], ay, dt, coast_y)
        return (px, py), (vx, vy)

    def wrap(self, position: Coordinates) -> Coordinates:
        return vec_wrap(position, self.map_size)

    def step_player(self, player: Player, keys: Keys, dt: float) -> Tuple[Player, Coordinates]:
        """
        Advance the player by dt and wrap it onto the map.

        Returns:
            (new_player, unwrapped_position). The unwrapped position is what
            the collision check sees by default.
        """
        unwrapped, velocity = self.integrate(player, keys, dt)
        return player.with_motion(self.wrap(unwrapped), velocity), unwrapped
