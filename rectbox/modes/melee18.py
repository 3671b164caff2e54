"""Melee mode for 18-button layouts."""

from __future__ import annotations

from dataclasses import dataclass
from operator import attrgetter

from rectbox.controller_mode import ControllerMode
from rectbox.socd import MELEE_SOCD, SocdPair, SocdType
from rectbox.state import InputState, OutputState, StickDirections

ANALOG_STICK_MIN = 48
ANALOG_STICK_NEUTRAL = 128
ANALOG_STICK_MAX = 208

_SOCD_BUTTONS = (("left", "right"), ("down", "up"), ("c_left", "c_right"), ("c_down", "c_up"))
_STICK_BUTTONS = attrgetter(
    "left", "right", "down", "up", "c_left", "c_right", "c_down", "c_up"
)
_PASSTHROUGH = (
    ("a", "a"),
    ("b", "b"),
    ("x", "x"),
    ("y", "y"),
    ("button_r", "z"),
    ("trigger_l_digital", "l"),
    ("trigger_r_digital", "r"),
    ("start", "start"),
)
_DPAD_LAYER = (
    ("dpad_up", "c_up"),
    ("dpad_down", "c_down"),
    ("dpad_left", "c_left"),
    ("dpad_right", "c_right"),
)

# C-button angle tables for diagonal up-B; later entries override earlier ones.
_MODX_ANGLES = (("c_down", (56, 29)), ("c_left", (63, 39)), ("c_up", (56, 41)), ("c_right", (49, 42)))
_MODX_TELEPORT = (("c_down", (57, 30)), ("c_left", (55, 34)), ("c_up", (52, 38)), ("c_right", (49, 42)))
_MODX_EXTENDED = (("c_down", (70, 36)), ("c_left", (68, 42)), ("c_up", (59, 43)), ("c_right", (51, 43)))
_MODY_ANGLES = (("c_down", (29, 56)), ("c_left", (39, 63)), ("c_up", (41, 56)), ("c_right", (51, 61)))
_MODY_TELEPORT = (("c_down", (30, 57)), ("c_left", (35, 57)), ("c_up", (38, 52)), ("c_right", (41, 50)))
_MODY_EXTENDED = (("c_down", (36, 70)), ("c_left", (42, 68)), ("c_up", (47, 64)), ("c_right", (47, 57)))


def _set_left(outputs: OutputState, d: StickDirections, x: int, y: int) -> None:
    outputs.left_stick_x = ANALOG_STICK_NEUTRAL + d.x * x
    outputs.left_stick_y = ANALOG_STICK_NEUTRAL + d.y * y


def _apply_angles(inputs, outputs, d, base, table) -> None:
    _set_left(outputs, d, *base)
    for button, (x, y) in table:
        if getattr(inputs, button):
            _set_left(outputs, d, x, y)


@dataclass
class Melee18ButtonOptions:
    """Optional behaviour tweaks for Melee18Button."""

    crouch_walk_os: bool = False
    teleport_coords: bool = False


class Melee18Button(ControllerMode):
    """Melee layout without dedicated lightshield and midshield buttons."""

    def __init__(
        self, socd_type: SocdType, options: Melee18ButtonOptions | None = None
    ) -> None:
        # Melee always uses its own SOCD resolution, whatever was asked for.
        socd_type = MELEE_SOCD
        super().__init__([SocdPair(a, b, socd_type) for a, b in _SOCD_BUTTONS])
        self.options = options if options is not None else Melee18ButtonOptions()
        self._horizontal_socd = False

    def is_melee(self) -> bool:
        return True

    def handle_socd(self, inputs: InputState) -> None:
        self._horizontal_socd = inputs.left and inputs.right
        super().handle_socd(inputs)

    def update_digital_outputs(self, inputs: InputState, outputs: OutputState) -> None:
        layer = _PASSTHROUGH + (_DPAD_LAYER if inputs.mod_x and inputs.mod_y else ())
        for out_name, in_name in layer:
            setattr(outputs, out_name, getattr(inputs, in_name))
        if inputs.select:
            outputs.dpad_left = True
        if inputs.home:
            outputs.dpad_right = True

    def update_analog_outputs(self, inputs: InputState, outputs: OutputState) -> None:
        self.update_directions(
            *_STICK_BUTTONS(inputs),
            ANALOG_STICK_MIN,
            ANALOG_STICK_NEUTRAL,
            ANALOG_STICK_MAX,
            outputs,
        )
        d = self.directions
        teleport = self.options.teleport_coords
        shield_button_pressed = inputs.l or inputs.r

        if d.diagonal and d.y == -1 and self.options.crouch_walk_os:
            _set_left(outputs, d, 56, 55)

        if inputs.mod_x:
            if d.horizontal:
                outputs.left_stick_x = 128 + d.x * 53
            if d.vertical:
                outputs.left_stick_y = 128 + d.y * 43
            # Angled fsmash.
            if d.cx != 0:
                outputs.right_stick_x = 128 + d.cx * 68
                outputs.right_stick_y = 128 + d.y * 42
            if d.diagonal and not shield_button_pressed:
                table = _MODX_TELEPORT if teleport else _MODX_ANGLES
                _apply_angles(inputs, outputs, d, (59, 25), table)
                if inputs.b:
                    _apply_angles(inputs, outputs, d, (73, 31), _MODX_EXTENDED)

        if inputs.mod_y:
            if d.horizontal:
                outputs.left_stick_x = 128 + d.x * 27
            if d.vertical:
                outputs.left_stick_y = 128 + d.y * 59
            if d.diagonal and not shield_button_pressed:
                table = _MODY_TELEPORT if teleport else _MODY_ANGLES
                _apply_angles(inputs, outputs, d, (25, 59), table)
                if inputs.b:
                    _apply_angles(inputs, outputs, d, (31, 73), _MODY_EXTENDED)

        if inputs.l:
            # L overrides modifiers for the wavedash nerf and for shield levels.
            if d.horizontal:
                outputs.left_stick_x = 128 + d.x * 80
                if d.y == 1:
                    outputs.left_stick_x = 128 + d.x * 43
                    outputs.left_stick_y = 128 + 43
                if d.y == -1:
                    outputs.left_stick_x = 128 + d.x * 57
                    outputs.left_stick_y = 128 - 55
            if d.vertical:
                outputs.left_stick_y = 128 + d.y * 80
            # L + Mod X = midshield, L + Mod Y = lightshield.
            for held, level, diagonal in ((inputs.mod_x, 94, (51, 30)), (inputs.mod_y, 49, (40, 68))):
                if held:
                    outputs.trigger_l_digital = False
                    outputs.trigger_r_analog = level
                    if d.diagonal:
                        _set_left(outputs, d, *diagonal)

        # R gives shield tilt and wavedash coordinates.
        if inputs.r:
            if d.horizontal:
                outputs.left_stick_x = 128 + d.x * 51
            if d.vertical:
                outputs.left_stick_y = 128 + d.y * 43
            if d.diagonal:
                outputs.left_stick_x = 128 + d.x * 43
                if inputs.mod_x:
                    _set_left(outputs, d, 51, 30)
                if inputs.mod_y:
                    _set_left(outputs, d, 40, 68)

        # C-stick ASDI slideoff angle overrides other C-stick modifiers.
        if d.cx != 0 and d.cy != 0:
            outputs.right_stick_x = 128 + d.cx * 42
            outputs.right_stick_y = 128 + d.cy * 68

        # Shut off C-stick when using the D-pad layer.
        if (inputs.mod_x and inputs.mod_y) or inputs.nunchuk_c:
            outputs.right_stick_x = outputs.right_stick_y = 128