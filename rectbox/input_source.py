"""Sources that fill in an InputState."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod

from rectbox.state import InputState


class InputScanSpeed(enum.Enum):
    """How quickly an input source can be read."""

    SLOW = enum.auto()
    MEDIUM = enum.auto()
    FAST = enum.auto()


class InputSource(ABC):
    """Something that reads buttons and writes them into an InputState."""

    @abstractmethod
    def scan_speed(self) -> InputScanSpeed:
        """How fast this source is to read."""

    @abstractmethod
    def update_inputs(self, inputs: InputState) -> None:
        """Write the current readings into inputs."""