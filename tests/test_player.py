import math

import pytest

from stlscene.player import ANGLE_STEP, Buttons, Player, stick_to_axes


def test_centered_stick_is_still():
    assert stick_to_axes(128, 128) == (0.0, 0.0)


def test_deadzone_ignored():
    assert stick_to_axes(140, 128) == (0.0, 0.0)


def test_full_right_is_unit_strafe():
    ax, ay = stick_to_axes(255, 128)
    assert ax == pytest.approx(1.0)
    assert ay == pytest.approx(0.0)


def test_stick_up_moves_forward():
    ax, ay = stick_to_axes(128, 0)
    assert ay > 0
    assert ax == pytest.approx(0.0)


def test_forward_at_zero_yaw_moves_along_z():
    player = Player()
    z0 = player.z
    player.update(128, 0, Buttons.NONE)
    assert player.z > z0
    assert player.x == pytest.approx(0.0)


def test_buttons_change_angles():
    player = Player()
    player.update(128, 128, Buttons.TRIANGLE | Buttons.SQUARE)
    assert player.pitch == pytest.approx(ANGLE_STEP)
    assert player.yaw == pytest.approx(ANGLE_STEP)
    player.update(128, 128, Buttons.CROSS | Buttons.CIRCLE)
    assert player.pitch == pytest.approx(0.0)
    assert player.yaw == pytest.approx(0.0)


def test_eye_is_raised():
    player = Player(x=1, y=2, z=3)
    assert player.eye() == (1, 52, 3)


@pytest.mark.parametrize("yaw,pitch", [(0, 0), (0.7, -0.3), (2.0, 1.1)])
def test_center_is_unit_distance_from_eye(yaw, pitch):
    player = Player(yaw=yaw, pitch=pitch)
    assert math.dist(player.eye(), player.center()) == pytest.approx(1.0)