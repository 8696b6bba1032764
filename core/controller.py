#!/usr/bin/env python3
"""
Game controller: the single owner of the current GameState.

Shared between the UI thread (Dear PyGui) and the rendering thread (Pygame).
Both threads only post messages or flip playback settings; messages are
reduced one at a time, in arrival order, under a re-entrant lock.
"""
import logging
import threading
from collections import deque
from typing import Deque, Optional

from .constants import MAX_FRAME_DT
from .data_models import GameState, Scene
from .messages import Message, Reset, TimeStep
from .update import GameRules
from .vector_utils import clamp

logger = logging.getLogger(__name__)


class GameController:
    def __init__(self, scene: Optional[Scene] = None):
        self.lock = threading.RLock()
        self.running = True  # app running
        self.playing = True  # clock advancing
        self.rules = GameRules(scene)
        self.time_scale = self.rules.scene.time_scale
        self.state: GameState = self.rules.initial_state()
        self._queue: Deque[Message] = deque()

    @property
    def scene(self) -> Scene:
        return self.rules.scene

    def post(self, message: Message) -> None:
        with self.lock:
            self._queue.append(message)

    def pump(self) -> GameState:
        """Apply every queued message in order and return the resulting state."""
        with self.lock:
            while self._queue:
                self._apply(self._queue.popleft())
            return self.state

    def dispatch(self, message: Message) -> GameState:
        """Queue one message and apply everything pending."""
        with self.lock:
            self.post(message)
            return self.pump()

    def tick(self, dt_real_seconds: float) -> GameState:
        """
        Advance the clock by one frame.

        The frame delta is scaled by time_scale and capped at MAX_FRAME_DT so a
        stalled window cannot throw the player across the map in one step.
        """
        with self.lock:
            if self.playing:
                dt = clamp(dt_real_seconds * self.time_scale, 0.0, MAX_FRAME_DT)
                self.post(TimeStep(dt))
            return self.pump()

    def snapshot(self) -> GameState:
        with self.lock:
            return self.state

    def set_time_scale(self, s: float) -> None:
        with self.lock:
            self.time_scale = max(0.0, float(s))

    def toggle_play(self) -> bool:
        with self.lock:
            self.playing = not self.playing
            return self.playing

    def load_scene(self, scene: Scene) -> None:
        """Switch to a new scene and start it from scratch."""
        with self.lock:
            self.rules = GameRules(scene)
            self.time_scale = scene.time_scale
            self._queue.clear()
            self.state = self.rules.initial_state()
        logger.info("Started scene %r", scene.name)

    def restart(self) -> None:
        """Start the current scene over, whether or not the game has ended."""
        with self.lock:
            self._queue.clear()
            self.state = self.rules.initial_state()
        logger.info("Restarted scene %r", self.scene.name)

    def _apply(self, message: Message) -> None:
        before = self.state
        self.state = self.rules.update(before, message)
        if self.state.is_game_over and not before.is_game_over:
            p = self.state.player.position
            logger.info("Game over at (%.2f, %.2f)", p[0], p[1])
        elif isinstance(message, Reset) and self.state is not before:
            logger.info("Reset to scene %r", self.scene.name)
