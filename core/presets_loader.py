#!/usr/bin/env python3
"""
Scene preset JSON loading utilities.

Schema
======
Scene JSON (scenes/*.json):
{
  "name": "Human-friendly scene name",
  "description": "Optional description",
  "player_start": [10.0, 10.0],            # optional, default (10, 10)
  "asteroids": [[70.0, 30.0], [20.0, 50.0]],
  "time_scale": 1.0,                       # optional, default 1.0
  "collision_uses_wrapped_position": false # optional, default false
}

Users can add their own JSON files into the scenes folder and they'll be picked
up by the loader. A missing or unreadable file falls back to the built-in scene;
a malformed asteroid entry (including NaN or Infinity
coordinates) is skipped, and other malformed fields fall back to their defaults.
"""
import json
import logging
import math
import os
from typing import List, Optional, Tuple

from .constants import DEFAULT_ASTEROIDS, PLAYER_START
from .data_models import Coordinates, Scene

logger = logging.getLogger(__name__)

SCENES_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "scenes")
DEFAULT_SCENE_FILE = "classic.json"


def _read_json(path: str) -> Optional[dict]:
  try:
    with open(path, "r", encoding="utf-8") as f:
      data = json.load(f)
  except (OSError, ValueError) as exc:
    logger.warning("Could not read scene file %s: %s", path, exc)
    return None
  if not isinstance(data, dict):
    logger.warning("Scene file %s does not hold a JSON object", path)
    return None
  return data


def _finite_float(v) -> float:
  x = float(v)
  if not math.isfinite(x):
    raise ValueError(f"non-finite value {v!r}")
  return x


def _coerce_point(p) -> Coordinates:
  return (_finite_float(p[0]), _finite_float(p[1]))


def _coerce_text(v, default: str) -> str:
  if v is None or v == "":
    return default
  return str(v)


def list_scenes(scenes_dir: str = SCENES_DIR) -> List[Tuple[str, str]]:
  """Return list of (file_name, display_name) for available scenes."""
  items: List[Tuple[str, str]] = []
  if not os.path.isdir(scenes_dir):
    return items
  for fn in sorted(os.listdir(scenes_dir)):
    if not fn.lower().endswith(".json"):
      continue
    data = _read_json(os.path.join(scenes_dir, fn)) or {}
    display = _coerce_text(data.get("name"), os.path.splitext(fn)[0])
    items.append((fn, display))
  return items


def scene_from_dict(data: dict, fallback_name: str = "Scene") -> Scene:
  """Build a Scene from a parsed JSON object, filling in defaults."""
  try:
    player_start = _coerce_point(data.get("player_start", PLAYER_START))
  except (TypeError, ValueError, IndexError):
    logger.warning("Invalid player_start %r; using default", data.get("player_start"))
    player_start = PLAYER_START

  raw_asteroids = data.get("asteroids", DEFAULT_ASTEROIDS)
  if not isinstance(raw_asteroids, (list, tuple)):
    logger.warning("Invalid asteroids %r; using defaults", raw_asteroids)
    raw_asteroids = DEFAULT_ASTEROIDS
  asteroids: List[Coordinates] = []
  for p in raw_asteroids:
    try:
      asteroids.append(_coerce_point(p))
    except (TypeError, ValueError, IndexError):
      logger.warning("Skipping invalid asteroid entry %r", p)
      continue

  try:
    time_scale = _finite_float(data.get("time_scale", 1.0))
  except (TypeError, ValueError):
    logger.warning("Invalid time_scale %r; using 1.0", data.get("time_scale"))
    time_scale = 1.0

  wrapped = data.get("collision_uses_wrapped_position", False)
  if not isinstance(wrapped, bool):
    logger.warning("Invalid collision_uses_wrapped_position %r; using false", wrapped)
    wrapped = False

  return Scene(
    name=_coerce_text(data.get("name"), fallback_name),
    description=_coerce_text(data.get("description"), ""),
    player_start=player_start,
    asteroids=tuple(asteroids),
    time_scale=max(0.0, time_scale),
    collision_uses_wrapped_position=wrapped,
  )


def load_scene(file_name: str = DEFAULT_SCENE_FILE, scenes_dir: str = SCENES_DIR) -> Scene:
  """
  Load a scene JSON by file name.
  Returns the built-in Scene if the file cannot be read.
  """
  path = os.path.join(scenes_dir, file_name)
  data = _read_json(path)
  if data is None:
    logger.warning("Falling back to the built-in scene")
    return Scene()
  scene = scene_from_dict(data, os.path.splitext(file_name)[0])
  logger.info("Loaded scene %r with %d asteroids", scene.name, len(scene.asteroids))
  return scene
