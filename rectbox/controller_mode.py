"""Game modes that turn button inputs into controller outputs."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from rectbox.input_mode import InputMode
from rectbox.socd import SocdPair
from rectbox.state import InputState, OutputState, StickDirections


class ControllerMode(InputMode, ABC):
    """A mode producing a controller OutputState from an InputState."""

    def __init__(self, socd_pairs: Iterable[SocdPair] = ()) -> None:
        super().__init__(socd_pairs)
        self.directions = StickDirections()

    def update_outputs(self, inputs: InputState, outputs: OutputState) -> None:
        """Resolve SOCD, then fill in digital and analog outputs."""
        self.handle_socd(inputs)
        self.update_digital_outputs(inputs, outputs)
        self.update_analog_outputs(inputs, outputs)

    def reset_directions(self) -> None:
        """Return both sticks to the centre."""
        self.directions = StickDirections()

    def update_directions(
        self,
        ls_left: bool,
        ls_right: bool,
        ls_down: bool,
        ls_up: bool,
        rs_left: bool,
        rs_right: bool,
        rs_down: bool,
        rs_up: bool,
        stick_min: int,
        stick_neutral: int,
        stick_max: int,
        outputs: OutputState,
    ) -> None:
        """Set stick directions and the matching full-travel stick outputs."""
        self.reset_directions()
        d = self.directions

        outputs.left_stick_x = stick_neutral
        outputs.left_stick_y = stick_neutral
        outputs.right_stick_x = stick_neutral
        outputs.right_stick_y = stick_neutral

        if ls_left or ls_right:
            d.horizontal = True
            if ls_left:
                d.x = -1
                outputs.left_stick_x = stick_min
            else:
                d.x = 1
                outputs.left_stick_x = stick_max
        if ls_down or ls_up:
            d.vertical = True
            if ls_down:
                d.y = -1
                outputs.left_stick_y = stick_min
            else:
                d.y = 1
                outputs.left_stick_y = stick_max
        d.diagonal = d.horizontal and d.vertical

        if rs_left or rs_right:
            if rs_left:
                d.cx = -1
                outputs.right_stick_x = stick_min
            else:
                d.cx = 1
                outputs.right_stick_x = stick_max
        if rs_down or rs_up:
            if rs_down:
                d.cy = -1
                outputs.right_stick_y = stick_min
            else:
                d.cy = 1
                outputs.right_stick_y = stick_max

    @abstractmethod
    def is_melee(self) -> bool:
        """Whether this mode targets Melee."""

    @abstractmethod
    def update_digital_outputs(self, inputs: InputState, outputs: OutputState) -> None:
        """Fill in button outputs."""

    @abstractmethod
    def update_analog_outputs(self, inputs: InputState, outputs: OutputState) -> None:
        """Fill in stick and trigger outputs."""