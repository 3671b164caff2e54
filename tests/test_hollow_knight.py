from rectbox.modes.hollow_knight import HollowKnight
from rectbox.socd import SocdType
from rectbox.state import InputState, OutputState


def run(mode, **buttons):
    inputs = InputState(**buttons)
    outputs = OutputState()
    mode.update_outputs(inputs, outputs)
    return outputs


def test_is_not_melee():
    assert HollowKnight(SocdType.NEUTRAL).is_melee() is False


def test_stick_extremes():
    mode = HollowKnight(SocdType.NEUTRAL)
    assert run(mode, left=True).left_stick_x == 1
    assert run(mode, right=True).left_stick_x == 255
    assert run(mode, down=True).left_stick_y == 1


def test_mod_x_is_up():
    mode = HollowKnight(SocdType.NEUTRAL)
    assert run(mode, mod_x=True).left_stick_y == 255
    assert run(mode, up=True).left_stick_y == 128


def test_down_and_mod_x_neutralise():
    mode = HollowKnight(SocdType.NEUTRAL)
    assert run(mode, down=True, mod_x=True).left_stick_y == 128


def test_c_stick():
    mode = HollowKnight(SocdType.NEUTRAL)
    out = run(mode, c_left=True, c_up=True)
    assert (out.right_stick_x, out.right_stick_y) == (1, 255)


def test_button_mapping():
    mode = HollowKnight(SocdType.NEUTRAL)
    out = run(
        mode,
        mod_y=True,
        r=True,
        z=True,
        up=True,
        lightshield=True,
        midshield=True,
        start=True,
    )
    assert out.y and out.trigger_l_digital and out.trigger_r_digital
    assert out.button_r and out.button_l and out.select and out.start
    assert not out.a and not out.x


def test_unpressed_gives_neutral_outputs():
    mode = HollowKnight(SocdType.NEUTRAL)
    out = run(mode)
    assert out == OutputState()