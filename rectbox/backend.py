"""Communication backends that scan inputs and report outputs."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from rectbox.controller_mode import ControllerMode
from rectbox.input_source import InputScanSpeed, InputSource
from rectbox.state import InputState, OutputState


class CommunicationBackend(ABC):
    """Scans input sources, runs the game mode and sends reports."""

    def __init__(self, input_sources: Iterable[InputSource] = ()) -> None:
        self.input_sources: tuple[InputSource, ...] = tuple(input_sources)
        self.inputs = InputState()
        self.outputs = OutputState()
        self.gamemode: ControllerMode | None = None

    def scan_inputs(self, speed: InputScanSpeed | None = None) -> None:
        """Update inputs from every source, or only those of the given speed."""
        for source in self.input_sources:
            if speed is None or source.scan_speed() == speed:
                source.update_inputs(self.inputs)

    def update_outputs(self) -> None:
        """Reset the outputs and let the game mode fill them in."""
        self.outputs = OutputState()
        if self.gamemode is not None:
            self.gamemode.update_outputs(self.inputs, self.outputs)

    def set_game_mode(self, gamemode: ControllerMode | None) -> None:
        """Replace the active game mode."""
        self.gamemode = gamemode

    @abstractmethod
    def send_report(self):
        """Send the current state to the host."""