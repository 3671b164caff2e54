"""Serial input viewer backend sending ASCII button reports."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable
from typing import BinaryIO

from rectbox.backend import CommunicationBackend
from rectbox.input_source import InputScanSpeed, InputSource
from rectbox.state import InputState

REPORT_LENGTH = 25
_MIN_WRITE_CAPACITY = 32
_REPORT_INTERVAL = 5


class ReportState(enum.IntEnum):
    """Byte values used in input viewer reports."""

    OFF = 0x30
    ON = 0x31
    END = 0x0A
    INVALID = 0x00


_REPORT_FIELDS = (
    "start", "y", "x", "b", "a", "l", "r", "z",
    "up", "down", "right", "left", "mod_x", "mod_y",
    "c_left", "c_right", "c_up", "c_down", "lightshield", "midshield",
)


def _bit(pressed: bool) -> int:
    return ReportState.ON if pressed else ReportState.OFF


def encode_report(inputs: InputState) -> bytes:
    """Encode inputs as the 25-byte ASCII report line."""
    bits = [_bit(getattr(inputs, name)) for name in _REPORT_FIELDS]
    bits += [_bit(False), _bit(False), _bit(False), _bit(True), ReportState.END]
    return bytes(bits)


class B0XXInputViewer(CommunicationBackend):
    """Writes a report to a stream on every sixth call with room to write."""

    def __init__(
        self,
        input_sources: Iterable[InputSource],
        stream: BinaryIO,
        write_capacity: Callable[[], int] | None = None,
    ) -> None:
        super().__init__(input_sources)
        self.stream = stream
        self._write_capacity = write_capacity
        self._clock = 0

    def send_report(self) -> bool:
        """Send a report if due; return whether one was written."""
        if self._write_capacity is not None and self._write_capacity() < _MIN_WRITE_CAPACITY:
            return False
        if self._clock < _REPORT_INTERVAL:
            self._clock += 1
            return False
        self._clock = 0
        # Only fast sources: slow ones must not be read a second time per cycle.
        self.scan_inputs(InputScanSpeed.FAST)
        self.stream.write(encode_report(self.inputs))
        return True

    def close(self) -> None:
        """Close the underlying stream."""
        self.stream.close()

    def __enter__(self) -> B0XXInputViewer:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()