import pytest

from rectbox.backend import CommunicationBackend
from rectbox.controller_mode import ControllerMode
from rectbox.input_source import InputScanSpeed, InputSource
from rectbox.state import InputState, OutputState


class FlagSource(InputSource):
    def __init__(self, speed, button):
        self.speed = speed
        self.button = button

    def scan_speed(self):
        return self.speed

    def update_inputs(self, inputs):
        setattr(inputs, self.button, True)


class RecordingBackend(CommunicationBackend):
    def __init__(self, sources=()):
        super().__init__(sources)
        self.sent = []

    def send_report(self):
        self.sent.append(self.outputs)


class CopyA(ControllerMode):
    def is_melee(self):
        return False

    def update_digital_outputs(self, inputs, outputs):
        outputs.b = inputs.a

    def update_analog_outputs(self, inputs, outputs):
        outputs.trigger_l_analog = 140 if inputs.a else 0


class CopyAToX(CopyA):
    def update_digital_outputs(self, inputs, outputs):
        outputs.x = inputs.a


@pytest.fixture
def backend():
    return RecordingBackend(
        [
            FlagSource(InputScanSpeed.FAST, "a"),
            FlagSource(InputScanSpeed.SLOW, "b"),
        ]
    )


def test_abstract_backend_cannot_be_created():
    with pytest.raises(TypeError):
        CommunicationBackend()


def test_scan_all_sources(backend):
    backend.scan_inputs()
    assert backend.inputs == InputState(a=True, b=True)


def test_scan_filtered_by_speed(backend):
    backend.scan_inputs(InputScanSpeed.FAST)
    assert backend.inputs == InputState(a=True)


def test_update_outputs_without_mode_resets(backend):
    backend.outputs.a = True
    backend.outputs.left_stick_x = 10
    backend.update_outputs()
    assert backend.outputs == OutputState()


def test_update_outputs_runs_game_mode(backend):
    backend.set_game_mode(CopyA())
    backend.scan_inputs()
    backend.update_outputs()
    assert backend.outputs == OutputState(b=True, trigger_l_analog=140)


def test_set_game_mode_replaces_mode(backend):
    second = CopyAToX()
    backend.set_game_mode(CopyA())
    backend.set_game_mode(second)
    backend.scan_inputs()
    backend.update_outputs()
    assert backend.gamemode is second
    assert backend.outputs == OutputState(x=True, trigger_l_analog=140)


def test_send_report_subclass(backend):
    backend.update_outputs()
    backend.send_report()
    assert backend.sent == [OutputState()]