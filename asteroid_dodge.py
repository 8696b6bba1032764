#!/usr/bin/env python3
"""
Asteroid Dodge application entry point and UI/renderer coordination.

What this module does
- Starts two event loops: a Pygame rendering thread (the game viewport) and the
  Dear PyGui controls window (running on the main thread).
- Maintains a shared GameController that owns the single GameState; all access
  is guarded by a re-entrant lock and every change goes through its message queue.
- Translates keyboard input into game messages, projects the map onto the
  window, and draws the current frame.

Threading model
- PygameRenderer runs in a background thread and performs: keyboard handling,
  ticking the game clock, and drawing. It only talks to the game through
  GameController, which serialises messages.
- The UI class runs in the main thread via Dear PyGui. It posts restart and
  scene changes and refreshes its readouts on a periodic frame callback.
- With --no-controls the viewport runs alone on the main thread.

Controls
- Arrow keys: thrust. Release all keys on an axis to coast.
- Enter: restart after game over. Space: pause/resume.

Running
1) Install dependencies: `pip install pygame dearpygui`
2) Run this module: `python asteroid_dodge.py [--scene crowded.json] [--no-controls]`
"""

import argparse
import logging
import threading
import time
from typing import List, Optional

# GUI and Rendering libs
import pygame
from pygame import gfxdraw
import dearpygui.dearpygui as dpg

from core.camera import ViewBoxCamera
from core.constants import (
    HUD_COLOR,
    KEY_DOWN,
    KEY_ENTER,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_UP,
    SAFE_COORD_LIMIT,
    TARGET_FPS,
    VIEW_HEIGHT,
    VIEW_WIDTH,
    WINDOW_COLOR,
)
from core.controller import GameController
from core.input_map import translate
from core.presets_loader import DEFAULT_SCENE_FILE, list_scenes, load_scene
from core.view import Frame, build_frame

logger = logging.getLogger("asteroid_dodge")

# Pygame key constants to the key codes understood by core.input_map
PYGAME_KEY_CODES = {
    pygame.K_UP: KEY_UP,
    pygame.K_DOWN: KEY_DOWN,
    pygame.K_LEFT: KEY_LEFT,
    pygame.K_RIGHT: KEY_RIGHT,
    pygame.K_RETURN: KEY_ENTER,
    pygame.K_KP_ENTER: KEY_ENTER,
}

# ============================================================
# Pygame Renderer Thread
# ============================================================

class PygameRenderer(threading.Thread):
    """
    Pygame loop: keyboard input, frame clock, drawing.
    """
    def __init__(self, game: GameController):
        super().__init__(daemon=True)
        self.game = game
        self.camera = ViewBoxCamera()
        self.surface = None
        self.clock = None
        self.running = True

    def run(self):
        pygame.init()
        pygame.display.set_caption("Asteroid Dodge")
        self.surface = pygame.display.set_mode((VIEW_WIDTH, VIEW_HEIGHT), pygame.RESIZABLE)
        self.camera.set_viewport_size(VIEW_WIDTH, VIEW_HEIGHT)
        self.clock = pygame.time.Clock()

        last_time = time.perf_counter()
        while self.running and self.game.running:
            now = time.perf_counter()
            real_dt = now - last_time
            last_time = now

            self.handle_events()
            state = self.game.tick(real_dt)
            self.draw(build_frame(state, self.camera.map_size))

            self.clock.tick(TARGET_FPS)

        pygame.quit()

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.game.running = False
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.surface = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
                self.camera.set_viewport_size(event.w, event.h)

            elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                if event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE:
                    playing = self.game.toggle_play()
                    logger.info("Playback %s", "resumed" if playing else "paused")
                    continue
                # 0 is the browser's "unidentified" key code
                code = PYGAME_KEY_CODES.get(event.key, 0)
                self.game.post(translate(code, event.type == pygame.KEYDOWN))

    def draw(self, frame: Frame):
        surf = self.surface
        cam = self.camera
        surf.fill(WINDOW_COLOR)

        bg = frame.background
        x0, y0 = cam.world_to_screen(bg.origin)
        side = cam.length_to_screen(bg.size)
        pygame.draw.rect(surf, bg.color, pygame.Rect(x0, y0, side, side))

        for shape in frame.asteroids + ((frame.player,) if frame.player else ()):
            center = _safe_point(cam.world_to_screen(shape.center))
            r = max(1, cam.length_to_screen(shape.radius))
            if center:
                gfxdraw.filled_circle(surf, center[0], center[1], r, shape.color)
                gfxdraw.aacircle(surf, center[0], center[1], r, shape.color)

        if frame.banner:
            cx, cy = cam.world_to_screen((bg.size / 2, bg.size / 2))
            draw_text_centered(surf, frame.banner.title, cx, cy - 14, frame.banner.color, size=32)
            draw_text_centered(surf, frame.banner.subtitle, cx, cy + 18, HUD_COLOR)

        with self.game.lock:
            playing = self.game.playing
        if not playing:
            draw_text(surf, "Paused (Space to resume)", 10, 10, HUD_COLOR)

        pygame.display.flip()

_cached_fonts = {}

def _font(size):
    if not pygame.font.get_init():
        pygame.font.init()
    if size not in _cached_fonts:
        try:
            _cached_fonts[size] = pygame.font.SysFont("consolas", size)
        except (pygame.error, OSError):
            _cached_fonts[size] = pygame.font.Font(None, size)
    return _cached_fonts[size]

def draw_text(surface, text, x, y, color, size=16):
    img = _font(size).render(text, True, color)
    surface.blit(img, (x, y))

def draw_text_centered(surface, text, cx, cy, color, size=16):
    img = _font(size).render(text, True, color)
    surface.blit(img, img.get_rect(center=(cx, cy)))

def _safe_point(pt):
    x, y = int(pt[0]), int(pt[1])
    if -SAFE_COORD_LIMIT <= x <= SAFE_COORD_LIMIT and -SAFE_COORD_LIMIT <= y <= SAFE_COORD_LIMIT:
        return (x, y)
    return None

# ============================================================
# Dear PyGui UI
# ============================================================

class UI:
    """
    Controls window: scene selection, playback, restart and live readouts.
    """
    def __init__(self, game: GameController):
        self.game = game
        self._scene_files: List[str] = []
        self._build_ui()
        dpg.set_frame_callback(1, self._schedule_sync)

    def _schedule_sync(self):
        current = dpg.get_frame_count()
        dpg.set_frame_callback(current + 6, self._sync_ui_with_game)

    def _build_ui(self):
        dpg.create_context()
        dpg.create_viewport(title='Asteroid Dodge - Controls', width=420, height=360)

        scenes = list_scenes()
        self._scene_files = [fn for fn, _ in scenes]
        scene_items = [f"{name} ({fn})" for fn, name in scenes]

        with dpg.window(label="Controls", width=400, height=340, pos=(10, 10), tag="main_window"):
            with dpg.group(horizontal=True):
                dpg.add_text("Scene:")
                self.scene_combo_id = dpg.add_combo(scene_items,
                                                    default_value=scene_items[0] if scene_items else "",
                                                    width=220)
                dpg.add_button(label="Load", callback=self._on_load_scene)

            dpg.add_separator()

            with dpg.group(horizontal=True):
                dpg.add_button(label="Play/Pause", callback=self._toggle_play)
                dpg.add_button(label="Restart", callback=self._restart)
            with dpg.group(horizontal=True):
                dpg.add_text("Speed (x real-time):")
                self.time_scale_id = dpg.add_slider_float(min_value=0.0, max_value=3.0,
                                                          default_value=self.game.time_scale, width=180,
                                                          callback=lambda s, a, u: self.game.set_time_scale(a))

            dpg.add_separator()

            dpg.add_text("Player")
            self.pos_text_id = dpg.add_text("Position: ")
            self.vel_text_id = dpg.add_text("Velocity: ")
            self.keys_text_id = dpg.add_text("Keys: ")
            self.status_msg_id = dpg.add_text("")

        dpg.setup_dearpygui()
        dpg.show_viewport()
        dpg.set_primary_window("main_window", True)

    def _set_status(self, msg: str, color=(180, 220, 180)):
        dpg.set_value(self.status_msg_id, msg)
        dpg.configure_item(self.status_msg_id, color=color)

    def _on_load_scene(self):
        label = dpg.get_value(self.scene_combo_id)
        match = [fn for fn in self._scene_files if label.endswith(f"({fn})")]
        if not match:
            self._set_status("No scene selected.", color=(255, 120, 120))
            return
        scene = load_scene(match[0])
        self.game.load_scene(scene)
        dpg.set_value(self.time_scale_id, self.game.time_scale)

    def _toggle_play(self):
        self.game.toggle_play()

    def _restart(self):
        self.game.restart()

    def _sync_ui_with_game(self):
        state = self.game.snapshot()
        with self.game.lock:
            playing = self.game.playing
            scene_name = self.game.scene.name
        p = state.player
        dpg.set_value(self.pos_text_id, f"Position: ({p.position[0]:7.2f}, {p.position[1]:7.2f})")
        dpg.set_value(self.vel_text_id, f"Velocity: ({p.velocity[0]:7.2f}, {p.velocity[1]:7.2f})")
        dpg.set_value(self.keys_text_id, "Keys: " + (", ".join(state.keys.pressed()) or "none"))
        if state.is_game_over:
            self._set_status(f"{scene_name}: game over. Press Enter or Restart.", color=(255, 120, 120))
        else:
            self._set_status(f"{scene_name}: {'playing' if playing else 'paused'}")
        self._schedule_sync()

# ============================================================
# Application Entry
# ============================================================

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Dodge the asteroids on a wrap-around map.")
    parser.add_argument("--scene", default=DEFAULT_SCENE_FILE, help="scene JSON file name in scenes/")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="logging verbosity")
    parser.add_argument("--no-controls", action="store_true", help="run without the Dear PyGui controls window")
    return parser.parse_args(argv)

def main(argv: Optional[List[str]] = None):
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    game = GameController(load_scene(args.scene))
    renderer = PygameRenderer(game)

    if args.no_controls:
        renderer.run()
        return

    # Start Pygame renderer thread
    renderer.start()

    UI(game)

    # Run Dear PyGui event loop
    try:
        dpg.start_dearpygui()
    finally:
        game.running = False
        renderer.running = False
        renderer.join(timeout=2.0)
        dpg.destroy_context()

if __name__ == "__main__":
    main()
