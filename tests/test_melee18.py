import itertools

import pytest

from rectbox.modes.melee18 import Melee18Button, Melee18ButtonOptions
from rectbox.socd import SocdType
from rectbox.state import InputState, OutputState

C_BUTTONS = ["c_down", "c_left", "c_up", "c_right"]


def build(**options):
    return Melee18Button(SocdType.NEUTRAL, Melee18ButtonOptions(**options))


def run(mode, **buttons):
    outputs = OutputState()
    mode.update_outputs(InputState(**buttons), outputs)
    return outputs


def left_stick(out):
    return out.left_stick_x, out.left_stick_y


@pytest.fixture
def mode():
    return build()


def test_is_melee(mode):
    assert mode.is_melee() is True


@pytest.mark.parametrize(
    "button, axis, expected",
    [
        ("right", "left_stick_x", 208),
        ("left", "left_stick_x", 48),
        ("down", "left_stick_y", 48),
        ("up", "left_stick_y", 208),
    ],
)
def test_full_directions(mode, button, axis, expected):
    assert getattr(run(mode, **{button: True}), axis) == expected


def test_socd_type_is_forced_to_neutral():
    forced = Melee18Button(SocdType.DIR1_PRIORITY)
    inputs = InputState(left=True, right=True)
    forced.handle_socd(inputs)
    assert (inputs.left, inputs.right) == (False, False)
    assert run(forced, left=True, right=True).left_stick_x == 128


def test_digital_passthrough(mode):
    out = run(mode, a=True, z=True, l=True, start=True)
    assert out.a and out.button_r and out.trigger_l_digital and out.start
    assert not out.b


def test_select_and_home_press_dpad(mode):
    out = run(mode, select=True, home=True)
    assert out.dpad_left and out.dpad_right


def test_dpad_layer_shuts_off_c_stick(mode):
    out = run(mode, mod_x=True, mod_y=True, c_up=True, c_left=True)
    assert out.dpad_up and out.dpad_left
    assert (out.right_stick_x, out.right_stick_y) == (128, 128)


@pytest.mark.parametrize("mod, level", [("mod_x", 94), ("mod_y", 49)])
def test_l_with_modifier_is_analog_shield(mode, mod, level):
    out = run(mode, l=True, **{mod: True})
    assert out.trigger_r_analog == level
    assert out.trigger_l_digital is False


@pytest.mark.parametrize("mods", [{"mod_x": True}, {"mod_y": True}, {}])
def test_horizontal_is_mirrored(mode, mods):
    right = run(mode, right=True, **mods).left_stick_x
    left = run(mode, left=True, **mods).left_stick_x
    assert right - 128 == 128 - left
    assert right > 128


def test_modifier_shortens_horizontal(mode):
    full, mx, my = (
        run(mode, right=True, **mods).left_stick_x
        for mods in ({}, {"mod_x": True}, {"mod_y": True})
    )
    assert 128 < my < mx < full


@pytest.mark.parametrize("teleport", [False, True])
@pytest.mark.parametrize("mod", ["mod_x", "mod_y"])
@pytest.mark.parametrize("b", [False, True])
@pytest.mark.parametrize("c_button", [None, *C_BUTTONS])
def test_up_b_angles_stay_inside_circle(teleport, mod, b, c_button):
    buttons = {"right": True, "up": True, mod: True, "b": b}
    if c_button:
        buttons[c_button] = True
    x, y = left_stick(run(build(teleport_coords=teleport), **buttons))
    dx, dy = x - 128, y - 128
    assert dx > 0 and dy > 0
    assert dx * dx + dy * dy <= 80 * 80


def test_teleport_option_changes_angle():
    buttons = {"right": True, "up": True, "mod_x": True, "c_left": True}
    plain = left_stick(run(build(), **buttons))
    tele = left_stick(run(build(teleport_coords=True), **buttons))
    assert plain != tele


def test_crouch_walk_option_only_affects_lower_diagonals():
    plain, cw = build(), build(crouch_walk_os=True)
    assert left_stick(run(plain, right=True, down=True)) == (208, 48)
    x, y = left_stick(run(cw, right=True, down=True))
    assert x < 208 and y > 48
    assert left_stick(run(plain, right=True, up=True)) == left_stick(run(cw, right=True, up=True))


@pytest.mark.parametrize("cx, cy", list(itertools.product(["c_left", "c_right"], ["c_down", "c_up"])))
def test_c_stick_diagonal_is_symmetric(mode, cx, cy):
    out = run(mode, **{cx: True, cy: True})
    ref = run(mode, c_right=True, c_up=True)
    assert abs(out.right_stick_x - 128) == ref.right_stick_x - 128
    assert abs(out.right_stick_y - 128) == ref.right_stick_y - 128
    assert ref.right_stick_y - 128 > ref.right_stick_x - 128


def test_nunchuk_c_shuts_off_c_stick(mode):
    assert run(mode, c_right=True, nunchuk_c=True).right_stick_x == 128