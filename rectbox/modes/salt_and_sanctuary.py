"""Salt and Sanctuary mode."""

from __future__ import annotations

from rectbox.controller_mode import ControllerMode
from rectbox.socd import SocdPair, SocdType
from rectbox.state import InputState, OutputState

ANALOG_STICK_MIN = 1
ANALOG_STICK_NEUTRAL = 128
ANALOG_STICK_MAX = 255


class SaltAndSanctuary(ControllerMode):
    """Layout with Mod X as up and game actions on the right hand."""

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
        outputs.dpad_right = inputs.l  # Block
        outputs.b = inputs.b  # Roll
        outputs.a = inputs.a  # Attack
        outputs.y = inputs.z  # Strong attack
        outputs.dpad_down = inputs.mod_y  # Use
        outputs.x = inputs.x  # Jump

        outputs.button_l = inputs.r  # Previous item
        outputs.button_r = inputs.y  # Next item
        outputs.trigger_l_digital = inputs.lightshield  # Use item
        outputs.trigger_r_digital = inputs.midshield  # Use torch

        outputs.dpad_left = inputs.up  # Switch loadout
        outputs.start = inputs.start  # Inventory

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