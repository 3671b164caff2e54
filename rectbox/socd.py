"""Simultaneous opposite cardinal direction (SOCD) resolution."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class SocdType(enum.Enum):
    """How a pair of opposing inputs is resolved when both are held."""

    NEUTRAL = enum.auto()
    SECOND_INPUT_PRIORITY = enum.auto()
    SECOND_INPUT_PRIORITY_NO_REACTIVATION = enum.auto()
    DIR1_PRIORITY = enum.auto()
    DIR2_PRIORITY = enum.auto()
    NONE = enum.auto()


# SOCD resolution forced on all Melee configurations.
MELEE_SOCD = SocdType.NEUTRAL

_NOTHING = (False, False)
_ONLY_DIR1 = (True, False)
_ONLY_DIR2 = (False, True)


@dataclass(frozen=True)
class SocdPair:
    """Two opposing InputState fields, named by attribute, and their resolution."""

    input_dir1: str
    input_dir2: str
    socd_type: SocdType = SocdType.NEUTRAL


@dataclass
class SocdState:
    """History kept between scans for the second-input-priority resolutions."""

    was_dir1: bool = False
    was_dir2: bool = False
    lock_dir1: bool = False
    lock_dir2: bool = False


def second_input_priority_no_reactivation(
    dir1: bool, dir2: bool, state: SocdState
) -> tuple[bool, bool]:
    """Latest input wins; the overridden one stays off until released."""
    result = _NOTHING
    if dir1 and dir2:
        if state.was_dir2:
            result = _ONLY_DIR1
            state.lock_dir2 = True
        if state.was_dir1:
            result = _ONLY_DIR2
            state.lock_dir1 = True
    if dir2 and not dir1 and not state.lock_dir2:
        result = _ONLY_DIR2
        state.was_dir1, state.was_dir2, state.lock_dir1 = False, True, False
    if dir1 and not dir2 and not state.lock_dir1:
        result = _ONLY_DIR1
        state.was_dir1, state.was_dir2, state.lock_dir2 = True, False, False
    if not (dir1 or dir2):
        state.was_dir1 = state.was_dir2 = state.lock_dir1 = state.lock_dir2 = False
    return result


def second_input_priority(dir1: bool, dir2: bool, state: SocdState) -> tuple[bool, bool]:
    """Latest input wins; releasing it reactivates the other."""
    result = _NOTHING
    if dir1 and state.was_dir2:
        result = _ONLY_DIR1
    if dir2 and state.was_dir1:
        result = _ONLY_DIR2
    if dir2 and not dir1:
        result = _ONLY_DIR2
        state.was_dir1, state.was_dir2 = False, True
    if dir1 and not dir2:
        result = _ONLY_DIR1
        state.was_dir1, state.was_dir2 = True, False
    return result


def neutral(dir1: bool, dir2: bool) -> tuple[bool, bool]:
    """Both held cancel each other out."""
    return _NOTHING if dir1 and dir2 else (dir1, dir2)


def dir1_priority(dir1: bool, dir2: bool) -> tuple[bool, bool]:
    """When both are held, the first direction wins."""
    return _ONLY_DIR1 if dir1 and dir2 else (dir1, dir2)