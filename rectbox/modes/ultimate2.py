"""Alternative Super Smash Bros. Ultimate mode."""

from __future__ import annotations

from rectbox.controller_mode import ControllerMode
from rectbox.socd import SocdPair, SocdType
from rectbox.state import InputState, OutputState, StickDirections

ANALOG_STICK_MIN = 28
ANALOG_STICK_NEUTRAL = 128
ANALOG_STICK_MAX = 228


def _set_left(outputs: OutputState, d: StickDirections, x: int, y: int) -> None:
    outputs.left_stick_x = ANALOG_STICK_NEUTRAL + d.x * x
    outputs.left_stick_y = ANALOG_STICK_NEUTRAL + d.y * y


class Ultimate2(ControllerMode):
    """Ultimate layout with a single up-B angle per modifier."""

    def __init__(self, socd_type: SocdType) -> None:
        super().__init__(
            [
                SocdPair("left", "right", socd_type),
                SocdPair("down", "up", socd_type),
                SocdPair("c_left", "c_right", socd_type),
                SocdPair("c_down", "c_up", socd_type),
            ]
        )

    def is_melee(self) -> bool:
        return False

    def update_digital_outputs(self, inputs: InputState, outputs: OutputState) -> None:
        outputs.a = inputs.a
        outputs.b = inputs.b
        outputs.x = inputs.x
        outputs.y = inputs.y
        outputs.button_r = inputs.z
        outputs.trigger_l_digital = inputs.l
        outputs.trigger_r_digital = inputs.r
        outputs.start = inputs.start

        # D-pad layer by holding Mod X + Mod Y or the Nunchuk C button.
        if (inputs.mod_x and inputs.mod_y) or inputs.nunchuk_c:
            outputs.dpad_up = inputs.c_up
            outputs.dpad_down = inputs.c_down
            outputs.dpad_left = inputs.c_left
            outputs.dpad_right = inputs.c_right

        if inputs.select:
            outputs.dpad_left = True
        if inputs.home:
            outputs.dpad_right = True

    def update_analog_outputs(self, inputs: InputState, outputs: OutputState) -> None:
        self.update_directions(
            inputs.left,
            inputs.right,
            inputs.down,
            inputs.up,
            inputs.c_left,
            inputs.c_right,
            inputs.c_down,
            inputs.c_up,
            ANALOG_STICK_MIN,
            ANALOG_STICK_NEUTRAL,
            ANALOG_STICK_MAX,
            outputs,
        )
        d = self.directions
        shield_button_pressed = inputs.l or inputs.r or inputs.lightshield or inputs.midshield

        if inputs.mod_x:
            if d.horizontal:
                outputs.left_stick_x = 128 + d.x * 53
                if shield_button_pressed:
                    outputs.left_stick_x = 128 + d.x * 51
                if inputs.a:
                    outputs.left_stick_x = 128 + d.x * 36
            if d.vertical:
                outputs.left_stick_y = 128 + d.y * 44
                if shield_button_pressed:
                    outputs.left_stick_y = 128 + d.y * 51
            if d.diagonal:
                _set_left(outputs, d, 53, 40)
                if shield_button_pressed:
                    _set_left(outputs, d, 51, 30)

            # Angled fsmash/ftilt with C-stick + Mod X.
            if d.cx != 0:
                outputs.right_stick_x = 128 + d.cx * 127
                outputs.right_stick_y = 128 + d.y * 59

            # Up-B angle.
            if d.diagonal and not shield_button_pressed:
                _set_left(outputs, d, 53, 40)
                # Angled ftilts.
                if inputs.a:
                    _set_left(outputs, d, 36, 26)

        if inputs.mod_y:
            if d.horizontal:
                outputs.left_stick_x = 128 + d.x * 41
                if inputs.a:
                    outputs.left_stick_x = 128 + d.x * 36
            if d.vertical:
                outputs.left_stick_y = 128 + d.y * 44
                if inputs.a:
                    outputs.left_stick_y = 128 + d.y * 36
            if d.diagonal:
                _set_left(outputs, d, 41, 44)
                if shield_button_pressed:
                    _set_left(outputs, d, 38, 70)
                    if d.x == -1:
                        _set_left(outputs, d, 40, 68)

            # Up-B angle.
            if d.diagonal and not shield_button_pressed:
                _set_left(outputs, d, 41, 44)
                # Pivot uptilt/dtilt.
                if inputs.a:
                    _set_left(outputs, d, 34, 38)

        # C-stick ASDI slideoff angle overrides other C-stick modifiers.
        if d.cx != 0 and d.cy != 0:
            outputs.right_stick_x = 128 + d.cx * 42
            outputs.right_stick_y = 128 + d.cy * 68

        if inputs.l:
            outputs.trigger_l_analog = 140
        if inputs.r:
            outputs.trigger_r_analog = 140

        # Shut off C-stick when using the D-pad layer.
        if (inputs.mod_x and inputs.mod_y) or inputs.nunchuk_c:
            outputs.right_stick_x = 128
            outputs.right_stick_y = 128

        # Nunchuk overrides left stick.
        if inputs.nunchuk_connected:
            outputs.left_stick_x = inputs.nunchuk_x
            outputs.left_stick_y = inputs.nunchuk_y