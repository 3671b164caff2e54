"""Melee mode for 20-button layouts."""

from __future__ import annotations

from dataclasses import dataclass

from rectbox.controller_mode import ControllerMode
from rectbox.socd import MELEE_SOCD, SocdPair, SocdType
from rectbox.state import InputState, OutputState, StickDirections

ANALOG_STICK_NEUTRAL = 128
ANALOG_STICK_MIN = ANALOG_STICK_NEUTRAL - 112
ANALOG_STICK_MAX = ANALOG_STICK_NEUTRAL + 112

# C-button angle tables for diagonal up-B; later entries override earlier ones.
_MODX_ANGLES = (("c_down", (56, 29)), ("c_left", (53, 33)), ("c_up", (51, 37)), ("c_right", (49, 41)))
_MODX_EXTENDED = (("c_down", (70, 36)), ("c_left", (68, 42)), ("c_up", (58, 42)), ("c_right", (51, 42)))
_MODY_ANGLES = (("c_down", (29, 56)), ("c_left", (35, 56)), ("c_up", (41, 56)), ("c_right", (46, 57)))
_MODY_EXTENDED = (("c_down", (37, 70)), ("c_left", (42, 68)), ("c_up", (46, 63)), ("c_right", (46, 57)))


def _set_left(outputs: OutputState, d: StickDirections, x: int, y: int) -> None:
    outputs.left_stick_x = ANALOG_STICK_NEUTRAL + d.x * x
    outputs.left_stick_y = ANALOG_STICK_NEUTRAL + d.y * y


def _apply_angles(inputs, outputs, d, base, table) -> None:
    _set_left(outputs, d, *base)
    for button, (x, y) in table:
        if getattr(inputs, button):
            _set_left(outputs, d, x, y)


@dataclass
class Melee20ButtonOptions:
    """Optional behaviour tweaks for Melee20Button."""

    crouch_walk_os: bool = False
    teleport_coords: bool = False


class Melee20Button(ControllerMode):
    """Melee layout with dedicated lightshield and midshield buttons."""

    def __init__(
        self, socd_type: SocdType, options: Melee20ButtonOptions | None = None
    ) -> None:
        # Melee always uses its own SOCD resolution, whatever was asked for.
        socd_type = MELEE_SOCD
        super().__init__(
            [
                SocdPair("left", "right", socd_type),
                SocdPair("down", "up", socd_type),
                SocdPair("c_left", "c_right", socd_type),
                SocdPair("c_down", "c_up", socd_type),
            ]
        )
        self.options = options if options is not None else Melee20ButtonOptions()
        self._horizontal_socd = False

    def is_melee(self) -> bool:
        return True

    def handle_socd(self, inputs: InputState) -> None:
        self._horizontal_socd = inputs.left and inputs.right
        super().handle_socd(inputs)

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

        if d.diagonal:
            # Slightly uneven diagonal to account for randomness.
            _set_left(outputs, d, 56, 61)
            if d.y == -1 and self.options.crouch_walk_os:
                _set_left(outputs, d, 61, 56)

        if inputs.mod_x:
            if d.horizontal:
                outputs.left_stick_x = 128 + d.x * 53
            # One below the solo Nana ice block threshold.
            if d.vertical:
                outputs.left_stick_y = 128 + d.y * 42
            if d.diagonal and shield_button_pressed:
                if not inputs.b:
                    _set_left(outputs, d, 51, 30)
                else:
                    _set_left(outputs, d, 68, 41)
            if d.diagonal and not shield_button_pressed:
                if not inputs.b:
                    _apply_angles(inputs, outputs, d, (58, 25), _MODX_ANGLES)
                else:
                    _apply_angles(inputs, outputs, d, (73, 31), _MODX_EXTENDED)
            # Angled fsmash.
            if d.cx != 0 and d.y != 0:
                outputs.right_stick_x = 128 + d.cx * 68
                outputs.right_stick_y = 128 + d.y * 42

        if inputs.mod_y:
            if d.horizontal:
                outputs.left_stick_x = 128 + d.x * 27
            # Turnaround neutral B nerf.
            if inputs.b:
                outputs.left_stick_x = 128 + d.x * 80
            if d.vertical:
                outputs.left_stick_y = 128 + d.y * 59
            if d.diagonal and shield_button_pressed:
                _set_left(outputs, d, 38, 70)
                if d.y == -1:
                    _set_left(outputs, d, 40, 68)
            if d.diagonal and not shield_button_pressed:
                if not inputs.b:
                    _apply_angles(inputs, outputs, d, (26, 61), _MODY_ANGLES)
                else:
                    _apply_angles(inputs, outputs, d, (31, 73), _MODY_EXTENDED)

        # C-stick ASDI slideoff angle overrides other C-stick modifiers.
        if d.cx != 0 and d.cy != 0:
            outputs.right_stick_x = 128 + d.cx * 42
            outputs.right_stick_y = 128 + d.cy * 68

        if inputs.lightshield:
            outputs.trigger_r_analog = 49
        if inputs.midshield:
            outputs.trigger_r_analog = 94

        if outputs.trigger_l_digital:
            outputs.trigger_l_analog = 140
        if outputs.trigger_r_digital:
            outputs.trigger_r_analog = 140

        # Shut off C-stick when using the D-pad layer.
        if (inputs.mod_x and inputs.mod_y) or inputs.nunchuk_c:
            outputs.right_stick_x = 128
            outputs.right_stick_y = 128