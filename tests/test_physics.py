import pytest

from core.data_models import Keys, KeyState, Player
from core.physics import ArcadePhysics
from core.vector_utils import vec_len, wrap

P = KeyState.PRESSED
U = KeyState.UNPRESSED


def test_single_key_gives_full_thrust_towards_it() -> None:
    physics = ArcadePhysics()
    assert physics.axis_acceleration(P, U, 0.0) == -100.0
    assert physics.axis_acceleration(U, P, 0.0) == 100.0


def test_opposing_keys_cancel_instead_of_damping() -> None:
    physics = ArcadePhysics()
    assert physics.axis_acceleration(P, P, 50.0) == 0.0
    assert physics.axis_acceleration(U, U, 50.0) == -10.0
    assert physics.axis_acceleration(U, U, -50.0) == 10.0


def test_no_damping_at_rest() -> None:
    assert ArcadePhysics().axis_acceleration(U, U, 0.0) == 0.0


def test_thrust_up_for_one_second_wraps_back_to_start() -> None:
    player, unwrapped = ArcadePhysics().step_player(Player(), Keys(up=P), 1.0)

    assert player.velocity == (0.0, -100.0)
    assert unwrapped == (10.0, -90.0)
    assert player.position == pytest.approx((10.0, 10.0))


@pytest.mark.parametrize("dt", [1 / 60, 0.1, 1.0, 5.0])
def test_coasting_speed_strictly_decreases(dt: float) -> None:
    physics = ArcadePhysics()
    player = Player(position=(50.0, 50.0), velocity=(30.0, -20.0))
    for _ in range(500):
        speed = vec_len(player.velocity)
        if speed == 0:
            break
        player, _ = physics.step_player(player, Keys(), dt)
        assert vec_len(player.velocity) < speed
    assert player.velocity == (0.0, 0.0)


def test_velocity_is_clamped_to_map_size() -> None:
    physics = ArcadePhysics()
    player = Player(position=(50.0, 50.0), velocity=(95.0, -95.0))
    player, _ = physics.step_player(player, Keys(right=P, up=P), 1.0)
    assert player.velocity == (100.0, -100.0)


def test_semi_implicit_euler_moves_with_new_velocity() -> None:
    (px, py), (vx, vy) = ArcadePhysics().integrate(Player(position=(50.0, 50.0)), Keys(right=P), 0.5)
    assert vx == 50.0
    assert px == 75.0
    assert (py, vy) == (50.0, 0.0)


def test_wrap_keeps_boundaries_and_moves_overshoot_across() -> None:
    assert wrap(0.0, 100.0) == 0.0
    assert wrap(100.0, 100.0) == 100.0
    assert wrap(100.25, 100.0) == pytest.approx(0.25)
    assert wrap(-0.25, 100.0) == pytest.approx(99.75)
