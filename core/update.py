#!/usr/bin/env python3
"""
Game reducer: ``update(state, message) -> state``.

Every input the game reacts to arrives as a message (see core.messages) and is
folded into a new immutable GameState. Nothing here keeps mutable state between
calls; GameRules only carries the tuning and the scene used for restarts.
"""
from typing import Callable, Dict, Optional, Type

from .collisions import CollisionSettings, collides
from .data_models import Asteroid, GameState, Player, Scene
from .messages import KeyChanged, Message, NoOp, Reset, TimeStep
from .physics import ArcadePhysics


def initial_state(scene: Optional[Scene] = None) -> GameState:
    """Build the startup GameState for a scene (the built-in one by default)."""
    scene = scene or Scene()
    return GameState(
        player=Player(position=tuple(scene.player_start)),
        asteroids=tuple(Asteroid(position=tuple(p)) for p in scene.asteroids),
    )


class GameRules:
    """
    Applies messages to a GameState.

    Messages are dispatched on their type through a handler table; an
    unsupported message type is a programming error and raises TypeError.
    """

    def __init__(self, scene: Optional[Scene] = None, physics: Optional[ArcadePhysics] = None,
                 collision: Optional[CollisionSettings] = None):
        self.scene = scene or Scene()
        self.physics = physics or ArcadePhysics()
        if collision is None:
            collision = CollisionSettings(check_wrapped_position=self.scene.collision_uses_wrapped_position)
        self.collision = collision
        self._handlers: Dict[Type, Callable[[GameState, Message], GameState]] = {
            KeyChanged: self._on_key_changed,
            TimeStep: self._on_time_step,
            Reset: self._on_reset,
            NoOp: self._on_noop,
        }

    def initial_state(self) -> GameState:
        return initial_state(self.scene)

    def update(self, state: GameState, message: Message) -> GameState:
        handler = self._handlers.get(type(message))
        if handler is None:
            raise TypeError(f"Unsupported message: {message!r}")
        return handler(state, message)

    def _on_key_changed(self, state: GameState, message: KeyChanged) -> GameState:
        return state.with_keys(state.keys.with_key(message.direction.value, message.state))

    def _on_time_step(self, state: GameState, message: TimeStep) -> GameState:
        if state.is_game_over:
            return state
        player, unwrapped = self.physics.step_player(state.player, state.keys, message.dt)
        probe = player.position if self.collision.check_wrapped_position else unwrapped
        hit = collides(probe, state.asteroids, self.collision)
        return state.with_player(player).with_game_over(state.is_game_over or hit)

    def _on_reset(self, state: GameState, message: Reset) -> GameState:
        if not state.is_game_over:
            return state
        return self.initial_state()

    def _on_noop(self, state: GameState, message: NoOp) -> GameState:
        return state


_default_rules = GameRules()


def update(state: GameState, message: Message) -> GameState:
    """Apply one message with the built-in scene and tuning."""
    return _default_rules.update(state, message)
