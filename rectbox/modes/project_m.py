"""Project M / Project+ mode."""

from __future__ import annotations

from dataclasses import dataclass

from rectbox.controller_mode import ControllerMode
from rectbox.socd import SocdPair, SocdType
from rectbox.state import InputState, OutputState, StickDirections

ANALOG_STICK_MIN = 28
ANALOG_STICK_NEUTRAL = 128
ANALOG_STICK_MAX = 228

# Diagonal overrides; later entries override earlier ones.
_MODX_DIAGONALS = (
    ("b", (85, 31)),
    ("r", (82, 35)),
    ("c_up", (77, 55)),
    ("c_down", (82, 36)),
    ("c_left", (84, 50)),
    ("c_right", (72, 61)),
)
_MODY_DIAGONALS = (
    ("b", (28, 85)),
    ("r", (51, 82)),
    ("c_up", (55, 77)),
    ("c_down", (34, 82)),
    ("c_left", (40, 84)),
    ("c_right", (62, 72)),
)


def _set_left(outputs: OutputState, d: StickDirections, x: int, y: int) -> None:
    outputs.left_stick_x = ANALOG_STICK_NEUTRAL + d.x * x
    outputs.left_stick_y = ANALOG_STICK_NEUTRAL + d.y * y


def _apply_angles(inputs, outputs, d, base, table) -> None:
    _set_left(outputs, d, *base)
    for button, (x, y) in table:
        if getattr(inputs, button):
            _set_left(outputs, d, x, y)


@dataclass
class ProjectMOptions:
    """Optional behaviour tweaks for ProjectM."""

    true_z_press: bool = False
    ledgedash_max_jump_traj: bool = True


class ProjectM(ControllerMode):
    """Project M layout with a Z = lightshield + A macro by default."""

    def __init__(self, socd_type: SocdType, options: ProjectMOptions | None = None) -> None:
        super().__init__(
            [
                SocdPair("left", "right", socd_type),
                SocdPair("down", "up", socd_type),
                SocdPair("c_left", "c_right", socd_type),
                SocdPair("c_down", "c_up", socd_type),
            ]
        )
        self.options = options if options is not None else ProjectMOptions()
        self._horizontal_socd = False

    def is_melee(self) -> bool:
        return False

    def handle_socd(self, inputs: InputState) -> None:
        self._horizontal_socd = inputs.left and inputs.right
        super().handle_socd(inputs)

    def update_digital_outputs(self, inputs: InputState, outputs: OutputState) -> None:
        outputs.a = inputs.a
        outputs.b = inputs.b
        outputs.x = inputs.x
        outputs.y = inputs.y
        # True Z press versus the lightshield + A macro.
        if self.options.true_z_press or inputs.mod_x:
            outputs.button_r = inputs.z
        else:
            outputs.a = inputs.a or inputs.z
        if inputs.nunchuk_connected:
            outputs.trigger_l_digital = inputs.nunchuk_z
        else:
            outputs.trigger_l_digital = inputs.l
        outputs.trigger_r_digital = inputs.r
        outputs.start = inputs.start

        # D-pad layer by holding Mod X + Mod Y or the Nunchuk C button.
        if (inputs.mod_x and inputs.mod_y) or inputs.nunchuk_c:
            outputs.dpad_up = inputs.c_up
            outputs.dpad_down = inputs.c_down
            outputs.dpad_left = inputs.c_left
            outputs.dpad_right = inputs.c_right

        # Keep D-pad up if the D-pad layer already pressed it.
        outputs.dpad_up = outputs.dpad_up or inputs.midshield

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
        shield_button_pressed = inputs.l or inputs.lightshield

        if d.diagonal and d.y == 1:
            _set_left(outputs, d, 83, 93)

        if inputs.mod_x:
            if d.horizontal:
                outputs.left_stick_x = 128 + d.x * 70
            if d.vertical:
                outputs.left_stick_y = 128 + d.y * 60
            if d.cx != 0:
                outputs.right_stick_x = 128 + d.cx * 65
                outputs.right_stick_y = 128 + d.y * 23
            if d.diagonal:
                _apply_angles(inputs, outputs, d, (70, 34), _MODX_DIAGONALS)

        if inputs.mod_y:
            if d.horizontal:
                outputs.left_stick_x = 128 + d.x * 35
            if d.vertical:
                outputs.left_stick_y = 128 + d.y * 70
            if d.diagonal:
                _apply_angles(inputs, outputs, d, (28, 58), _MODY_DIAGONALS)

        # C-stick ASDI slideoff, only downward so C-up diagonals stay free.
        if d.cx != 0 and d.cy == -1:
            outputs.right_stick_x = 128 + d.cx * 35
            outputs.right_stick_y = 128 + d.cy * 98

        # Horizontal SOCD overrides X-axis modifiers for ledgedash trajectory.
        if (
            self.options.ledgedash_max_jump_traj
            and self._horizontal_socd
            and not d.vertical
            and not shield_button_pressed
        ):
            outputs.left_stick_x = 128 + d.x * 100

        if inputs.lightshield:
            outputs.trigger_r_analog = 49

        # Lightshield half of the Z = lightshield + A macro.
        if inputs.z and not (inputs.mod_x or self.options.true_z_press):
            outputs.trigger_r_analog = 49

        if outputs.trigger_l_digital:
            outputs.trigger_l_analog = 140
        if outputs.trigger_r_digital:
            outputs.trigger_r_analog = 140

        # Shut off C-stick when using the D-pad layer.
        if (inputs.mod_x and inputs.mod_y) or inputs.nunchuk_c:
            outputs.right_stick_x = 128
            outputs.right_stick_y = 128

        # Nunchuk overrides left stick.
        if inputs.nunchuk_connected:
            outputs.left_stick_x = inputs.nunchuk_x
            outputs.left_stick_y = inputs.nunchuk_y