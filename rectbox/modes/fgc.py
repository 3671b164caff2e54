"""Fighting-game mode mapping directions to the D-pad."""

from __future__ import annotations

from rectbox.controller_mode import ControllerMode
from rectbox.socd import SocdPair, SocdType
from rectbox.state import InputState, OutputState

# (output field, input field) pairs copied straight across.
_DIGITAL = (
    ("dpad_left", "left"),
    ("dpad_right", "right"),
    ("dpad_down", "down"),
    ("start", "start"),
    ("select", "c_left"),
    ("home", "c_down"),
    ("a", "b"),
    ("b", "x"),
    ("trigger_r_digital", "z"),
    ("trigger_l_digital", "up"),
    ("x", "r"),
    ("y", "y"),
    ("button_r", "lightshield"),
    ("button_l", "midshield"),
)
_STICK_AXES = ("left_stick_x", "left_stick_y", "right_stick_x", "right_stick_y")


class FgcMode(ControllerMode):
    """Hitbox-style layout with Mod X and C-Up as up."""

    def __init__(self, horizontal_socd: SocdType, vertical_socd: SocdType) -> None:
        super().__init__(
            [
                SocdPair("left", "right", horizontal_socd),
                # Mod X overrides C-Up so neutral SOCD with Down behaves with both ups held.
                SocdPair("mod_x", "c_up", SocdType.DIR1_PRIORITY),
                SocdPair("down", "mod_x", vertical_socd),
                SocdPair("down", "c_up", vertical_socd),
            ]
        )

    def is_melee(self) -> bool:
        return False

    def update_digital_outputs(self, inputs: InputState, outputs: OutputState) -> None:
        for out_name, in_name in _DIGITAL:
            setattr(outputs, out_name, getattr(inputs, in_name))
        outputs.dpad_up = inputs.mod_x or inputs.c_up

    def update_analog_outputs(self, inputs: InputState, outputs: OutputState) -> None:
        for axis in _STICK_AXES:
            setattr(outputs, axis, 128)
        outputs.trigger_l_analog = 255 if outputs.trigger_l_digital else 0
        outputs.trigger_r_analog = 255 if outputs.trigger_r_digital else 0