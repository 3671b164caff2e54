import io

from rectbox.input_source import InputScanSpeed, InputSource
from rectbox.input_viewer import REPORT_LENGTH, B0XXInputViewer, ReportState, encode_report
from rectbox.state import InputState


class FlagSource(InputSource):
    def __init__(self, speed, button):
        self.speed = speed
        self.button = button

    def scan_speed(self):
        return self.speed

    def update_inputs(self, inputs):
        setattr(inputs, self.button, True)


def test_empty_report_bytes():
    assert encode_report(InputState()) == b"0" * 23 + b"1\n"


def test_report_length_and_terminator():
    report = encode_report(InputState(a=True, midshield=True))
    assert len(report) == REPORT_LENGTH
    assert report[-1] == ReportState.END


def test_report_field_positions():
    report = encode_report(InputState(start=True, a=True, midshield=True))
    assert report[0] == ReportState.ON
    assert report[4] == ReportState.ON
    assert report[19] == ReportState.ON
    assert report[1] == ReportState.OFF


def viewer(stream, capacity=None):
    sources = [FlagSource(InputScanSpeed.FAST, "a"), FlagSource(InputScanSpeed.SLOW, "b")]
    return B0XXInputViewer(sources, stream, capacity)


def test_report_sent_on_sixth_call_with_fast_sources_only():
    stream = io.BytesIO()
    v = viewer(stream)
    results = [v.send_report() for _ in range(6)]
    assert results == [False] * 5 + [True]
    data = stream.getvalue()
    assert data == encode_report(InputState(a=True))
    assert data[3] == ReportState.OFF


def test_low_write_capacity_blocks_and_does_not_advance_clock():
    stream = io.BytesIO()
    room = {"free": 0}
    v = viewer(stream, lambda: room["free"])
    for _ in range(10):
        assert v.send_report() is False
    room["free"] = 64
    results = [v.send_report() for _ in range(6)]
    assert results[-1] is True and not any(results[:-1])
    assert len(stream.getvalue()) == REPORT_LENGTH


def test_context_manager_closes_stream():
    stream = io.BytesIO()
    with viewer(stream):
        pass
    assert stream.closed