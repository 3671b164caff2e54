"""Travel-time and anti-exploit limits applied to Melee controller outputs."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass

from rectbox.melee_zones import (
    ANALOG_CROUCH,
    ANALOG_DEAD_MAX,
    ANALOG_DEAD_MIN,
    ANALOG_STICK_NEUTRAL,
    ANALOG_TAPJUMP,
    ANALOG_UTILT_LEFT,
    ANALOG_UTILT_RIGHT,
    BITS_SDI_TAP_CARD,
    BITS_SDI_TAP_CRDG,
    BITS_SDI_TAP_DIAG,
    BITS_SDI_WANK,
    HISTORYLEN,
    JUMP_TIME,
    TIMELIMIT_DOWNUP,
    TIMELIMIT_FRAME,
    TIMELIMIT_HALFFRAME,
    TIMELIMIT_PIVOTTILT,
    TIMELIMIT_SDI_COUNTDOWN,
    TIMELIMIT_TAPSHUTOFF,
    TRAVELTIME_EASY1,
    TRAVELTIME_EASY2,
    TRAVELTIME_EASY3,
    TRAVELTIME_INTERNAL,
    TRAVELTIME_SLOW,
    ZONE_D,
    ZONE_L,
    ZONE_R,
    ZONE_U,
    CoordinateFuzzer,
    TravelType,
    ZoneRecord,
    is_easy,
    is_tap_sdi,
    pivot_zone,
    sdi_zone,
    travel_time_calc,
)
from rectbox.state import InputState, OutputState

# Inputs that can change the stick coordinates.
_TRACKED = (
    "left", "right", "down", "up", "c_left", "c_right", "c_down", "c_up",
    "b", "l", "r", "lightshield", "midshield", "mod_x", "mod_y",
)
# Inputs other than the triggers; unchanged ones reveal a trigger-caused move.
_NON_TRIGGER = tuple(name for name in _TRACKED if name not in ("l", "r"))

_PIVOT_STALE_TIME = 15 * 16 * 125
_SDI_STALE_SAMPLES = 8 * 16 * 2


class AbTest(enum.Enum):
    """Which variant of the limits to apply."""

    A = enum.auto()
    B = enum.auto()


class _PivotDir(enum.Enum):
    NONE = enum.auto()
    LEFT_RIGHT = enum.auto()
    RIGHT_LEFT = enum.auto()


@dataclass
class _TravelEntry:
    timestamp: int = 0
    tt: int = 6
    x: int = ANALOG_STICK_NEUTRAL
    y: int = ANALOG_STICK_NEUTRAL
    x_start: int = ANALOG_STICK_NEUTRAL
    y_start: int = ANALOG_STICK_NEUTRAL
    x_end: int = ANALOG_STICK_NEUTRAL
    y_end: int = ANALOG_STICK_NEUTRAL


def _u8(value: int) -> int:
    return value & 0xFF


def _u16(value: int) -> int:
    return value & 0xFFFF


def _i8(value: int) -> int:
    value &= 0xFF
    return value - 0x100 if value & 0x80 else value


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _magnitude(value: int) -> int:
    return abs(value - ANALOG_STICK_NEUTRAL)


def _is_shallow(x_mag: int, y_mag: int) -> bool:
    # 157:80 is the closest ratio to 27 degrees.
    return bool(
        (y_mag * 157 < x_mag * 80 or x_mag * 157 < y_mag * 80) and x_mag and y_mag
    )


def _wavedash_angle(
    x_in: int, y_in: int, x_mag: int, y_mag: int, long_coord: int, short_coord: int
) -> tuple[int, int]:
    x_wd = long_coord if x_mag > y_mag else short_coord
    y_wd = long_coord if y_mag > x_mag else short_coord
    x_end = ANALOG_STICK_NEUTRAL - x_wd if x_in < ANALOG_STICK_NEUTRAL else ANALOG_STICK_NEUTRAL + x_wd
    y_end = ANALOG_STICK_NEUTRAL - y_wd if y_in < ANALOG_STICK_NEUTRAL else ANALOG_STICK_NEUTRAL + y_wd
    return x_end, y_end


class MeleeLimiter:
    """Stateful filter adding travel time and nerfs to left-stick output.

    Call limit_outputs once per sample; all history lives in the instance.
    """

    def __init__(self) -> None:
        self._done_traveling = True
        self._current_time = 0
        self._a_history = [_TravelEntry() for _ in range(HISTORYLEN)]
        self._sdi_zone_hist = [ZoneRecord() for _ in range(HISTORYLEN)]
        self._pivot_zone_hist = [ZoneRecord() for _ in range(HISTORYLEN)]
        self._prev_inputs: dict[str, bool] | None = None
        self._index_a = 0
        self._index_sdi = 0
        self._delay_type = TravelType.LINEAR
        self._wavedash_was_nerfed = False
        self._sdi_countdown = 0
        self._uptilt_samples = 0
        self._time_since_crouch = 100
        self._down_up_jumping = False
        self._time_since_jump = 100
        self._sdi_is_nerfed = False
        self._prev_x: int | None = None
        self._prev_y: int | None = None
        self._fuzzer = CoordinateFuzzer()

    def _handle_wavedash(self, inputs: InputState, raw: OutputState) -> bool:
        """Nerf shallow airdodge angles; True when a trigger-caused move is skipped."""
        prev = self._prev_inputs
        entry = self._a_history[self._index_a]
        now = self._current_time
        skip = False
        if inputs.l or inputs.r:
            x_in = raw.left_stick_x
            y_in = raw.left_stick_y
            x_mag = _magnitude(x_in)
            y_mag = _magnitude(y_in)
            rad_squared = x_mag * x_mag + y_mag * y_mag

            if entry.x != x_in or entry.y != y_in:
                if _is_shallow(x_mag, y_mag):
                    long_coord, short_coord = (70, 36) if rad_squared > 5625 else (51, 26)
                    x_end, y_end = _wavedash_angle(x_in, y_in, x_mag, y_mag, long_coord, short_coord)
                    entry.x_end, entry.y_end = self._fuzzer.randomize(x_end, y_end, now)
                    entry.x = x_in
                    entry.y = y_in
                    self._wavedash_was_nerfed = True
                else:
                    self._wavedash_was_nerfed = False
                    if not (prev["l"] or prev["r"]) and all(
                        prev[name] == getattr(inputs, name) for name in _NON_TRIGGER
                    ):
                        # The trigger press itself moved the stick: skip to it.
                        entry.x_end, entry.y_end = self._fuzzer.randomize(x_in, y_in, now)
                        entry.x = x_in
                        entry.y = y_in
                        skip = True
            # Not moved by the trigger, but now an illegal angle.
            if _is_shallow(x_mag, y_mag) and not self._wavedash_was_nerfed:
                x_end, y_end = _wavedash_angle(x_in, y_in, x_mag, y_mag, 51, 26)
                entry.x_end, entry.y_end = self._fuzzer.randomize(x_end, y_end, now)
                self._wavedash_was_nerfed = True
        elif prev["l"] or prev["r"]:
            if self._wavedash_was_nerfed:
                entry.x_end, entry.y_end = self._fuzzer.randomize(
                    raw.left_stick_x, raw.left_stick_y, now
                )
                self._wavedash_was_nerfed = False
        return skip

    def _pivot_direction(self, prelim_ax: int, sample_spacing: int) -> _PivotDir:
        hist = self._pivot_zone_hist
        now = self._current_time
        zone = pivot_zone(prelim_ax)
        if hist[0].zone != zone:
            hist.insert(0, ZoneRecord(now, zone, False))
            hist.pop()
        for record in hist:
            if (now - record.timestamp) * (sample_spacing >> 1) > _PIVOT_STALE_TIME:
                record.stale = True

        direction = _PivotDir.NONE
        if hist[0].zone == 0:
            if hist[1].zone == ZONE_L and ZONE_R in (hist[2].zone, hist[3].zone):
                direction = _PivotDir.RIGHT_LEFT
            elif hist[1].zone == ZONE_R and ZONE_L in (hist[2].zone, hist[3].zone):
                direction = _PivotDir.LEFT_RIGHT
        pivot_length = _u16((hist[0].timestamp - hist[1].timestamp) * sample_spacing)
        if pivot_length < TIMELIMIT_HALFFRAME or pivot_length > TIMELIMIT_FRAME + TIMELIMIT_HALFFRAME:
            direction = _PivotDir.NONE
        if any(record.stale for record in hist[:4]):
            direction = _PivotDir.NONE
        pivot_age = _u16((now - hist[0].timestamp) * sample_spacing)
        if pivot_age > TIMELIMIT_PIVOTTILT:
            direction = _PivotDir.NONE
        return direction

    def limit_outputs(
        self,
        sample_spacing: int,
        which_ab: AbTest,
        inputs: InputState,
        raw_output: OutputState,
    ) -> OutputState:
        """Return raw_output with the left stick limited; sample_spacing is in 4 us units."""
        self._current_time = _u16(self._current_time + 1)
        now = self._current_time

        if self._prev_inputs is None:
            self._prev_inputs = {name: getattr(inputs, name) for name in _TRACKED}

        wavedash_skip = self._handle_wavedash(inputs, raw_output)
        self._prev_inputs = {name: getattr(inputs, name) for name in _TRACKED}

        prelim_ax = raw_output.left_stick_x
        prelim_ay = raw_output.left_stick_y
        entry = self._a_history[self._index_a]

        tap_sdi = is_tap_sdi(self._sdi_zone_hist, self._index_sdi, now, sample_spacing)
        if tap_sdi & BITS_SDI_TAP_CARD:
            entry.tt = max(entry.tt, TRAVELTIME_SLOW)
            self._delay_type = TravelType.LINEAR
        # Oscillating about a diagonal slows new destinations for a while.
        if (tap_sdi & BITS_SDI_WANK) and (tap_sdi & BITS_SDI_TAP_CRDG):
            self._sdi_countdown = TIMELIMIT_SDI_COUNTDOWN
        if self._sdi_countdown > sample_spacing:
            self._sdi_countdown -= sample_spacing
            entry.tt = max(entry.tt, TRAVELTIME_SLOW)
        else:
            self._sdi_countdown = 0

        travel = travel_time_calc(
            now,
            entry.timestamp,
            sample_spacing,
            entry.tt,
            entry.x_start,
            entry.y_start,
            entry.x_end,
            entry.y_end,
            self._delay_type,
            self._done_traveling,
        )
        self._done_traveling = travel.done_traveling
        if travel.x is not None:
            prelim_ax = travel.x
        if travel.y is not None:
            prelim_ay = travel.y

        direction = self._pivot_direction(prelim_ax, sample_spacing)

        # Tap jump shutoff.
        if prelim_ay > ANALOG_DEAD_MAX:
            self._uptilt_samples = min(self._uptilt_samples + 1, 254)
        else:
            self._uptilt_samples = 0
        time_since_not_uptilt = _u16(self._uptilt_samples * sample_spacing)

        pivot_tilt = False
        up_tilt = False
        if direction is not _PivotDir.NONE and entry.y_end < ANALOG_DEAD_MIN:
            pivot_tilt = True
        if direction is not _PivotDir.NONE and entry.y_end > ANALOG_DEAD_MAX:
            pivot_tilt = True
            up_tilt = True
        if pivot_tilt:
            x_coord = _i8(prelim_ax - ANALOG_STICK_NEUTRAL)
            y_coord = _i8(prelim_ay - ANALOG_STICK_NEUTRAL)
            x_abs = abs(x_coord)
            y_abs = abs(y_coord)
            if up_tilt and x_abs > y_abs:
                # Force upward angles to at least 45 degrees.
                prelim_ax = _u8(ANALOG_STICK_NEUTRAL + (127 if x_coord >= 0 else -127))
                prelim_ay = _u8(ANALOG_STICK_NEUTRAL + 127)
            elif max(x_abs, y_abs):
                # Stretch the radius as close to 127 as halves allow.
                stretch = _u8(254 // max(x_abs, y_abs))
                prelim_ax = _u8(ANALOG_STICK_NEUTRAL + _trunc_div(x_coord * stretch, 2))
                prelim_ay = _u8(ANALOG_STICK_NEUTRAL + _trunc_div(y_coord * stretch, 2))
            if up_tilt and time_since_not_uptilt > TIMELIMIT_TAPSHUTOFF:
                if direction is _PivotDir.LEFT_RIGHT:
                    prelim_ax = ANALOG_STICK_NEUTRAL + 56
                elif direction is _PivotDir.RIGHT_LEFT:
                    prelim_ax = ANALOG_STICK_NEUTRAL - 56
                prelim_ay = ANALOG_STICK_NEUTRAL + 56

        # A quick crouch to upward coordinate becomes a jump.
        self._time_since_crouch = min(self._time_since_crouch + 1, 100)
        if prelim_ay < ANALOG_CROUCH:
            self._time_since_crouch = 0
        self._time_since_jump = min(self._time_since_jump + 1, 100)
        if (
            self._time_since_crouch * sample_spacing < TIMELIMIT_DOWNUP
            and ANALOG_DEAD_MAX < prelim_ay < ANALOG_TAPJUMP
            and ANALOG_UTILT_LEFT < prelim_ax < ANALOG_UTILT_RIGHT
            and not self._down_up_jumping
        ):
            self._down_up_jumping = True
            self._time_since_jump = 0
        if self._time_since_jump * sample_spacing < JUMP_TIME and self._down_up_jumping:
            prelim_ay = 255
            self._time_since_crouch = 100
        else:
            self._down_up_jumping = False

        # Diagonal tap SDI or wank SDI locks out the cross axis.
        if tap_sdi & (BITS_SDI_TAP_DIAG | BITS_SDI_TAP_CRDG | BITS_SDI_WANK):
            if tap_sdi & (ZONE_L | ZONE_R):
                prelim_ay = ANALOG_STICK_NEUTRAL
                entry.y_end = prelim_ay
                self._sdi_is_nerfed = True
            elif tap_sdi & (ZONE_U | ZONE_D):
                prelim_ax = ANALOG_STICK_NEUTRAL
                entry.x_end = prelim_ax
                self._sdi_is_nerfed = True
        elif self._sdi_is_nerfed:
            entry.x_end = entry.x
            entry.y_end = entry.y
            if prelim_ax == ANALOG_STICK_NEUTRAL and prelim_ay == ANALOG_STICK_NEUTRAL:
                self._sdi_is_nerfed = False

        # Record a newly entered SDI zone.
        x_in = raw_output.left_stick_x
        y_in = raw_output.left_stick_y
        zone = sdi_zone(x_in, y_in)
        if self._sdi_zone_hist[self._index_sdi].zone != zone:
            self._index_sdi = (self._index_sdi + 1) % HISTORYLEN
            self._sdi_zone_hist[self._index_sdi] = ZoneRecord(now, zone, False)
        for record in self._sdi_zone_hist:
            if now - record.timestamp > _SDI_STALE_SAMPLES:
                record.stale = True

        # A new coordinate starts a new travel.
        if self._prev_x is None:
            self._prev_x, self._prev_y = x_in, y_in
        if (self._prev_x != x_in or self._prev_y != y_in) and not wavedash_skip:
            self._done_traveling = False
            self._index_a = (self._index_a + 1) % HISTORYLEN
            self._prev_x, self._prev_y = x_in, y_in
            x_rand, y_rand = self._fuzzer.randomize(x_in, y_in, now)
            new_entry = _TravelEntry(
                timestamp=now,
                x=x_in,
                y=y_in,
                x_start=prelim_ax,
                y_start=prelim_ay,
                x_end=x_rand,
                y_end=y_rand,
            )
            # Begin travel one unit towards the destination.
            if prelim_ax == self._prev_x:
                if x_rand > self._prev_x:
                    new_entry.x_start = _u8(new_entry.x_start + 1)
                if x_rand < self._prev_x:
                    new_entry.x_start = _u8(new_entry.x_start - 1)
            if prelim_ay == self._prev_y:
                if y_rand > self._prev_y:
                    new_entry.y_start = _u8(new_entry.y_start + 1)
                if y_rand < self._prev_y:
                    new_entry.y_start = _u8(new_entry.y_start - 1)
            new_entry.tt = {
                1: TRAVELTIME_EASY1,
                2: TRAVELTIME_EASY2,
                3: TRAVELTIME_EASY3,
            }.get(is_easy(x_in, y_in), TRAVELTIME_INTERNAL)
            self._delay_type = TravelType.LINEAR
            self._a_history[self._index_a] = new_entry

        return dataclasses.replace(
            raw_output,
            left_stick_x=prelim_ax,
            left_stick_y=prelim_ay,
            right_stick_x=raw_output.right_stick_x,
            right_stick_y=raw_output.right_stick_y,
        )