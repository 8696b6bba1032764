#!/usr/bin/env python3
"""
Shared constants for Asteroid Dodge (map units unless stated otherwise).

Keeping constants in one place helps ensure values are consistent across the
codebase and makes tuning easier.
"""

# Map and motion
MAP_SIZE = 100.0  # side of the square toroidal map; also the speed limit per axis
THRUST = 100.0  # acceleration while a direction key is held (units/s^2)
DAMPING = THRUST / 10  # coasting deceleration when no key on an axis is held
COLLISION_RADIUS = 10.0  # strict: distance < radius ends the game

# Startup scene
PLAYER_START = (10.0, 10.0)
PLAYER_START_VELOCITY = (0.0, 0.0)
DEFAULT_ASTEROIDS = ((70.0, 30.0), (20.0, 50.0))

# Key codes (browser keyCode values)
KEY_ENTER = 13
KEY_LEFT = 37
KEY_UP = 38
KEY_RIGHT = 39
KEY_DOWN = 40

# Frame clock
TARGET_FPS = 60
MAX_FRAME_DT = 0.1  # seconds; caps a single tick after a stall

# Rendering (viewport)
VIEW_WIDTH = 600
VIEW_HEIGHT = 600
WINDOW_COLOR = (0, 0, 0)
BACKGROUND_COLOR = (10, 12, 18)
ASTEROID_COLOR = (150, 130, 110)
PLAYER_COLOR = (120, 220, 255)
BANNER_COLOR = (255, 90, 90)
HUD_COLOR = (200, 200, 200)
ASTEROID_MARKER_RADIUS = 5.0  # map units
PLAYER_MARKER_RADIUS = 1.5  # map units

# Safety: avoid drawing outside reasonable integer pixel ranges
SAFE_COORD_LIMIT = 30000
