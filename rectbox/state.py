"""Button, stick-direction and controller output state."""

from __future__ import annotations

from dataclasses import dataclass

_BYTE_FIELDS = frozenset(
    {
        "left_stick_x",
        "left_stick_y",
        "right_stick_x",
        "right_stick_y",
        "trigger_r_analog",
        "trigger_l_analog",
    }
)


@dataclass
class InputState:
    """Raw button state read from the controller's input sources."""

    left: bool = False
    right: bool = False
    down: bool = False
    up: bool = False
    c_left: bool = False
    c_right: bool = False
    c_down: bool = False
    c_up: bool = False
    a: bool = False
    b: bool = False
    x: bool = False
    y: bool = False
    l: bool = False  # noqa: E741
    r: bool = False
    z: bool = False
    lightshield: bool = False
    midshield: bool = False
    select: bool = False
    start: bool = False
    home: bool = False
    mod_x: bool = False
    mod_y: bool = False

    nunchuk_connected: bool = False
    nunchuk_x: int = 0
    nunchuk_y: int = 0
    nunchuk_c: bool = False
    nunchuk_z: bool = False


@dataclass
class StickDirections:
    """Stick direction at the quadrant level, each axis being -1, 0 or 1."""

    horizontal: bool = False
    vertical: bool = False
    diagonal: bool = False
    x: int = 0
    y: int = 0
    cx: int = 0
    cy: int = 0


@dataclass
class OutputState:
    """Controller report: digital buttons plus analog axes stored as bytes."""

    a: bool = False
    b: bool = False
    x: bool = False
    y: bool = False
    button_l: bool = False
    button_r: bool = False
    trigger_l_digital: bool = False
    trigger_r_digital: bool = False
    start: bool = False
    select: bool = False
    home: bool = False
    dpad_up: bool = False
    dpad_down: bool = False
    dpad_left: bool = False
    dpad_right: bool = False
    left_stick_click: bool = False
    right_stick_click: bool = False

    left_stick_x: int = 128
    left_stick_y: int = 128
    right_stick_x: int = 128
    right_stick_y: int = 128
    trigger_r_analog: int = 0
    trigger_l_analog: int = 0

    def __setattr__(self, name: str, value) -> None:
        # Analog axes are unsigned bytes and wrap the way a byte does.
        if name in _BYTE_FIELDS:
            value = int(value) & 0xFF
        object.__setattr__(self, name, value)