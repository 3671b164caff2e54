import pytest

from rectbox.modes.rivals import RivalsOfAether
from rectbox.socd import SocdType
from rectbox.state import InputState, OutputState


@pytest.fixture
def neutral_mode():
    return RivalsOfAether(SocdType.NEUTRAL)


def press(mode, **held):
    result = OutputState()
    mode.update_outputs(InputState(**held), result)
    return result


def test_is_not_melee(neutral_mode):
    assert neutral_mode.is_melee() is False


@pytest.mark.parametrize(
    "held, field, value",
    [
        ("right", "left_stick_x", 228),
        ("left", "left_stick_x", 28),
        ("c_down", "right_stick_y", 28),
    ],
)
def test_full_directions(neutral_mode, held, field, value):
    assert getattr(press(neutral_mode, **{held: True}), field) == value


def test_second_input_priority_keeps_state_between_scans():
    mode = RivalsOfAether(SocdType.SECOND_INPUT_PRIORITY)
    assert press(mode, left=True).left_stick_x == 28
    assert press(mode, left=True, right=True).left_stick_x == 228


def test_neutral_socd_cancels(neutral_mode):
    assert press(neutral_mode, up=True, down=True).left_stick_y == 128


def test_digital_mapping(neutral_mode):
    out = press(
        neutral_mode, lightshield=True, midshield=True, select=True, home=True, z=True
    )
    assert out.left_stick_click and out.right_stick_click
    assert out.select and out.home and out.button_r


def test_nunchuk_triggers_and_stick(neutral_mode):
    out = press(
        neutral_mode,
        l=True,
        right=True,
        nunchuk_connected=True,
        nunchuk_c=True,
        nunchuk_z=True,
        nunchuk_x=100,
        nunchuk_y=60,
    )
    assert out.trigger_l_analog == 49
    assert out.trigger_l_digital is True
    assert (out.left_stick_x, out.left_stick_y) == (100, 60)


def test_nunchuk_replaces_l(neutral_mode):
    assert press(neutral_mode, l=True, nunchuk_connected=True).trigger_l_digital is False


def test_mod_x_tilt_is_shorter_horizontally(neutral_mode):
    walk = press(neutral_mode, right=True, mod_x=True).left_stick_x
    tilt = press(neutral_mode, right=True, mod_x=True, a=True).left_stick_x
    assert 128 < tilt < walk < 228


@pytest.mark.parametrize("mod", ["mod_x", "mod_y"])
@pytest.mark.parametrize("c_button", [None, "c_down", "c_left", "c_up", "c_right"])
def test_diagonals_are_mirrored(neutral_mode, mod, c_button):
    held = {mod: True}
    if c_button:
        held[c_button] = True
    q1 = press(neutral_mode, right=True, up=True, **held)
    q3 = press(neutral_mode, left=True, down=True, **held)
    assert (q1.left_stick_x - 128, q1.left_stick_y - 128) == (
        128 - q3.left_stick_x,
        128 - q3.left_stick_y,
    )
    assert q1.left_stick_x > 128 and q1.left_stick_y > 128


def test_dpad_layer(neutral_mode):
    out = press(neutral_mode, mod_x=True, mod_y=True, c_right=True)
    assert out.dpad_right is True
    assert out.right_stick_x == 128