import pytest

from rectbox.controller_mode import ControllerMode
from rectbox.socd import SocdPair, SocdType
from rectbox.state import InputState, OutputState

MIN, NEUTRAL, MAX = 48, 128, 208


class SimpleMode(ControllerMode):
    def __init__(self):
        super().__init__([SocdPair("left", "right", SocdType.NEUTRAL)])

    def is_melee(self):
        return False

    def update_digital_outputs(self, inputs, outputs):
        outputs.a = inputs.a

    def update_analog_outputs(self, inputs, outputs):
        self.update_directions(
            inputs.left, inputs.right, inputs.down, inputs.up,
            inputs.c_left, inputs.c_right, inputs.c_down, inputs.c_up,
            MIN, NEUTRAL, MAX, outputs,
        )


def directions_for(**pressed):
    mode = SimpleMode()
    outputs = OutputState()
    mode.update_outputs(InputState(**pressed), outputs)
    return mode.directions, outputs


def test_abstract_mode_cannot_be_created():
    with pytest.raises(TypeError):
        ControllerMode()


def test_no_input_is_neutral():
    d, out = directions_for()
    assert (d.x, d.y, d.cx, d.cy) == (0, 0, 0, 0)
    assert (out.left_stick_x, out.left_stick_y) == (NEUTRAL, NEUTRAL)


def test_left_down_is_diagonal():
    d, out = directions_for(left=True, down=True)
    assert (d.x, d.y) == (-1, -1)
    assert d.horizontal and d.vertical and d.diagonal
    assert (out.left_stick_x, out.left_stick_y) == (MIN, MIN)


def test_right_only_is_not_diagonal():
    d, out = directions_for(right=True)
    assert d.x == 1 and not d.diagonal and not d.vertical
    assert out.left_stick_x == MAX


def test_c_stick_directions():
    d, out = directions_for(c_right=True, c_up=True)
    assert (d.cx, d.cy) == (1, 1)
    assert (out.right_stick_x, out.right_stick_y) == (MAX, MAX)
    assert not d.horizontal


def test_socd_applied_before_outputs():
    d, out = directions_for(left=True, right=True, a=True)
    assert d.x == 0
    assert out.left_stick_x == NEUTRAL
    assert out.a is True


def test_update_directions_left_wins_without_socd():
    mode = SimpleMode()
    out = OutputState()
    mode.update_directions(True, True, False, False, False, False, False, False, 1, 128, 255, out)
    assert mode.directions.x == -1
    assert out.left_stick_x == 1


def test_reset_directions():
    mode = SimpleMode()
    mode.update_outputs(InputState(up=True, c_left=True), OutputState())
    mode.reset_directions()
    assert (mode.directions.y, mode.directions.cx) == (0, 0)