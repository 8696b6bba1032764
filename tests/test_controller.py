import logging

import pytest

from core.controller import GameController
from core.data_models import Keys, KeyState, Scene
from core.input_map import translate
from core.messages import Direction, KeyChanged, TimeStep


def test_messages_are_applied_in_arrival_order() -> None:
    game = GameController()
    game.post(KeyChanged(Direction.DOWN, KeyState.PRESSED))
    game.post(KeyChanged(Direction.DOWN, KeyState.UNPRESSED))
    game.post(KeyChanged(Direction.RIGHT, KeyState.PRESSED))
    state = game.pump()
    assert state.keys == Keys(right=KeyState.PRESSED)
    assert game.snapshot() is state


def test_tick_caps_frame_delta() -> None:
    game = GameController()
    game.dispatch(translate(38, True))
    state = game.tick(5.0)
    assert state.player.velocity[1] == pytest.approx(-10.0)
    assert state.player.position[1] == pytest.approx(9.0)


def test_tick_scales_by_time_scale() -> None:
    game = GameController()
    game.set_time_scale(0.5)
    game.dispatch(translate(39, True))
    state = game.tick(0.1)
    assert state.player.velocity[0] == pytest.approx(5.0)


def test_paused_game_does_not_advance() -> None:
    game = GameController()
    game.dispatch(translate(39, True))
    assert game.toggle_play() is False
    before = game.snapshot()
    assert game.tick(0.05) is before


def test_game_over_is_logged_and_enter_restarts(caplog: pytest.LogCaptureFixture) -> None:
    game = GameController(Scene(player_start=(62.0, 30.0)))
    with caplog.at_level(logging.INFO, logger="core.controller"):
        state = game.dispatch(TimeStep(0.0))
        assert state.is_game_over
        state = game.dispatch(translate(13, True))
    assert "Game over" in caplog.text
    assert "Reset" in caplog.text
    assert state.is_game_over is False
    assert state.player.position == (62.0, 30.0)


def test_restart_works_mid_game() -> None:
    game = GameController()
    game.dispatch(translate(40, True))
    game.tick(0.05)
    game.restart()
    assert game.snapshot() == game.rules.initial_state()


def test_load_scene_replaces_state_and_time_scale() -> None:
    game = GameController()
    scene = Scene(name="Solo", asteroids=((50.0, 50.0),), time_scale=2.0)
    game.load_scene(scene)
    assert game.scene is scene
    assert game.time_scale == 2.0
    assert [a.position for a in game.snapshot().asteroids] == [(50.0, 50.0)]
