from rectbox.input_mode import InputMode
from rectbox.socd import SocdPair, SocdType
from rectbox.state import InputState


def test_no_pairs_leaves_inputs_alone():
    inputs = InputState(left=True, right=True)
    InputMode().handle_socd(inputs)
    assert inputs.left and inputs.right


def test_neutral_pair_cancels():
    mode = InputMode([SocdPair("left", "right", SocdType.NEUTRAL)])
    inputs = InputState(left=True, right=True, up=True)
    mode.handle_socd(inputs)
    assert (inputs.left, inputs.right, inputs.up) == (False, False, True)


def test_dir1_and_dir2_priority():
    mode = InputMode(
        [
            SocdPair("left", "right", SocdType.DIR1_PRIORITY),
            SocdPair("down", "up", SocdType.DIR2_PRIORITY),
        ]
    )
    inputs = InputState(left=True, right=True, down=True, up=True)
    mode.handle_socd(inputs)
    assert (inputs.left, inputs.right) == (True, False)
    assert (inputs.down, inputs.up) == (False, True)


def test_none_pair_keeps_both():
    mode = InputMode([SocdPair("c_left", "c_right", SocdType.NONE)])
    inputs = InputState(c_left=True, c_right=True)
    mode.handle_socd(inputs)
    assert inputs.c_left and inputs.c_right


def test_second_input_priority_state_persists_across_scans():
    mode = InputMode([SocdPair("left", "right", SocdType.SECOND_INPUT_PRIORITY)])
    first = InputState(left=True)
    mode.handle_socd(first)
    assert first.left
    second = InputState(left=True, right=True)
    mode.handle_socd(second)
    assert (second.left, second.right) == (False, True)


def test_pairs_keep_separate_state():
    mode = InputMode(
        [
            SocdPair("left", "right", SocdType.SECOND_INPUT_PRIORITY_NO_REACTIVATION),
            SocdPair("down", "up", SocdType.SECOND_INPUT_PRIORITY_NO_REACTIVATION),
        ]
    )
    mode.handle_socd(InputState(left=True, up=True))
    inputs = InputState(left=True, right=True, down=True, up=True)
    mode.handle_socd(inputs)
    assert (inputs.left, inputs.right) == (False, True)
    assert (inputs.down, inputs.up) == (True, False)