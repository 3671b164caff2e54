"""Mario Kart Wii mode."""

from __future__ import annotations

from rectbox.controller_mode import ControllerMode
from rectbox.socd import SocdPair, SocdType
from rectbox.state import InputState, OutputState

ANALOG_STICK_MIN = 1
ANALOG_STICK_NEUTRAL = 128
ANALOG_STICK_MAX = 255


class MKWii(ControllerMode):
    """Layout with L as stick down and Down, Mod X or Mod Y as stick up."""

    def __init__(self, socd_type: SocdType) -> None:
        super().__init__(
            [
                SocdPair("left", "right", socd_type),
                SocdPair("l", "down", socd_type),
                SocdPair("l", "mod_x", socd_type),
                SocdPair("l", "mod_y", socd_type),
            ]
        )

    def is_melee(self) -> bool:
        return False

    def update_digital_outputs(self, inputs: InputState, outputs: OutputState) -> None:
        outputs.a = inputs.b
        outputs.b = inputs.x
        outputs.trigger_l_digital = inputs.z
        outputs.button_r = inputs.up
        outputs.dpad_up = inputs.a
        outputs.start = inputs.start

    def update_analog_outputs(self, inputs: InputState, outputs: OutputState) -> None:
        up = inputs.down or inputs.mod_x or inputs.mod_y

        self.update_directions(
            inputs.left,
            inputs.right,
            inputs.l,
            up,
            False,
            False,
            False,
            False,
            ANALOG_STICK_MIN,
            ANALOG_STICK_NEUTRAL,
            ANALOG_STICK_MAX,
            outputs,
        )

        if inputs.z:
            outputs.trigger_l_analog = 140

        # Nunchuk overrides left stick.
        if inputs.nunchuk_connected:
            outputs.left_stick_x = inputs.nunchuk_x
            outputs.left_stick_y = inputs.nunchuk_y