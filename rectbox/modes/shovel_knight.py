"""Shovel Knight mode."""

from __future__ import annotations

from rectbox.controller_mode import ControllerMode
from rectbox.socd import SocdPair, SocdType
from rectbox.state import InputState, OutputState

ANALOG_STICK_MIN = 1
ANALOG_STICK_NEUTRAL = 128
ANALOG_STICK_MAX = 255


class ShovelKnight(ControllerMode):
    """Layout with directions on both the D-pad and the stick, Mod X as up."""

    def __init__(self, socd_type: SocdType) -> None:
        super().__init__(
            [
                SocdPair("left", "right", socd_type),
                SocdPair("down", "mod_x", socd_type),
                SocdPair("c_left", "c_right", socd_type),
                SocdPair("c_down", "c_up", socd_type),
            ]
        )

    def is_melee(self) -> bool:
        return False

    def update_digital_outputs(self, inputs: InputState, outputs: OutputState) -> None:
        outputs.dpad_left = inputs.left
        outputs.dpad_right = inputs.right
        outputs.dpad_down = inputs.down
        outputs.dpad_up = inputs.mod_x

        outputs.b = inputs.x  # Jump
        outputs.a = inputs.a  # Attack
        outputs.y = inputs.b  # Attack
        outputs.x = inputs.z  # Subweapon
        outputs.button_l = inputs.r  # Previous subweapon
        outputs.button_r = inputs.y  # Next subweapon

        outputs.select = inputs.lightshield  # Inventory
        outputs.start = inputs.start  # Pause

    def update_analog_outputs(self, inputs: InputState, outputs: OutputState) -> None:
        self.update_directions(
            inputs.left,
            inputs.right,
            inputs.down,
            inputs.mod_x,
            inputs.c_left,
            inputs.c_right,
            inputs.c_down,
            inputs.c_up,
            ANALOG_STICK_MIN,
            ANALOG_STICK_NEUTRAL,
            ANALOG_STICK_MAX,
            outputs,
        )