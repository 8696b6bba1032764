from core.camera import ViewBoxCamera
from core.data_models import GameState, Player
from core.view import GAME_OVER_TEXT, build_frame


def test_frame_has_background_asteroids_and_player() -> None:
    frame = build_frame(GameState(player=Player(position=(42.0, 7.0))))
    assert frame.background.origin == (0.0, 0.0)
    assert frame.background.size == 100.0
    assert [c.center for c in frame.asteroids] == [(70.0, 30.0), (20.0, 50.0)]
    assert frame.player.center == (42.0, 7.0)
    assert frame.banner is None


def test_game_over_frame_shows_only_banner() -> None:
    frame = build_frame(GameState(is_game_over=True))
    assert frame.banner.title == GAME_OVER_TEXT
    assert frame.player is None
    assert frame.asteroids == ()


def test_camera_letterboxes_square_map() -> None:
    camera = ViewBoxCamera(map_size=100.0)
    camera.set_viewport_size(800, 600)
    assert camera.pixels_per_unit == 6.0
    assert camera.offset == (100.0, 0.0)
    assert camera.world_to_screen((0.0, 0.0)) == (100, 0)
    assert camera.world_to_screen((50.0, 50.0)) == (400, 300)
    assert camera.length_to_screen(100.0) == 600


def test_camera_rounds_positions_like_lengths() -> None:
    camera = ViewBoxCamera(map_size=100.0)
    camera.set_viewport_size(600, 600)
    assert camera.world_to_screen((0.1, 0.1)) == (1, 1)
    assert camera.length_to_screen(0.1) == 1
