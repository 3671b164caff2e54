"""Stick zones, tap-SDI detection and travel-time helpers for Melee limits."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass
from typing import NamedTuple

HISTORYLEN = 5

ANALOG_STICK_MIN = 48
ANALOG_DEAD_MIN = 128 - 22
ANALOG_STICK_NEUTRAL = 128
ANALOG_DEAD_MAX = 128 + 22
ANALOG_STICK_MAX = 208
ANALOG_CROUCH = 128 - 50
ANALOG_TAPJUMP = 128 + 53
ANALOG_DASH_LEFT = 128 - 64
ANALOG_DASH_RIGHT = 128 + 64
ANALOG_SDI_LEFT = 128 - 56
ANALOG_SDI_RIGHT = 128 + 56
ANALOG_UTILT_LEFT = 128 - 44
ANALOG_UTILT_RIGHT = 128 + 44
MELEE_SDI_RAD = 3136
MELEE_RIM_RAD1 = 6185
MELEE_RIM_RAD2 = 6858
MELEE_RIM_RAD3 = 8979

# Travel times in milliseconds.
TRAVELTIME_EASY1 = 6
TRAVELTIME_EASY2 = 7
TRAVELTIME_EASY3 = 8
TRAVELTIME_CROSS = 12
TRAVELTIME_INTERNAL = 12
TRAVELTIME_SLOW = 88

# Time limits in units of 4 microseconds.
TIMELIMIT_DOWNUP = 16 * 3 * 250
JUMP_TIME = 16 * 2 * 250
TIMELIMIT_FRAME = 4167
TIMELIMIT_HALFFRAME = 2083
TIMELIMIT_DEBOUNCE = 1500
TIMELIMIT_SIMUL = 500
TIMELIMIT_TAPSHUTOFF = 16000
TIMELIMIT_TAP = 22000
TIMELIMIT_TAP_PLUS = 34000
TIMELIMIT_CARDIAG = 32000
TIMELIMIT_WANK = 22000
TIMELIMIT_PIVOTTILT = 32000
TIMELIMIT_SDI_COUNTDOWN = 16000

ZONE_DIR = 0b0000_1111
ZONE_U = 0b0000_0001
ZONE_D = 0b0000_0010
ZONE_L = 0b0000_0100
ZONE_R = 0b0000_1000

BITS_SDI = 0b1111_0000
BITS_SDI_WANK = 0b0001_0000
BITS_SDI_TAP_CARD = 0b0010_0000
BITS_SDI_TAP_DIAG = 0b0100_0000
BITS_SDI_TAP_CRDG = 0b1000_0000


class TravelType(enum.Enum):
    """Shape of the stick's travel from start to destination."""

    LINEAR = enum.auto()
    QUADRATIC = enum.auto()
    CUBIC = enum.auto()
    QUARTIC = enum.auto()
    DELAY = enum.auto()


@dataclass
class ZoneRecord:
    """Entry of a zone history: when a zone was entered and whether it is old."""

    timestamp: int = 0
    zone: int = 0
    stale: bool = True


class TravelResult(NamedTuple):
    """Stick position after travel; x and y are None when left unchanged."""

    x: int | None
    y: int | None
    done_traveling: bool


def _u8(value: int) -> int:
    return value & 0xFF


def _u16(value: int) -> int:
    return value & 0xFFFF


def _i16(value: int) -> int:
    value &= 0xFFFF
    return value - 0x10000 if value & 0x8000 else value


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _magnitude(value: int) -> int:
    return abs(value - ANALOG_STICK_NEUTRAL)


class CoordinateFuzzer:
    """Pseudo-random jitter seeded by the time of its first use."""

    def __init__(self) -> None:
        self._state: int | None = None

    def next_random(self, current_time: int) -> int:
        """Next value from 0 to 15; the first call's time seeds the generator."""
        if self._state is None:
            self._state = _u16(current_time)
        self._state = _u16(0xD9F5 * self._state + 1)
        xor1 = _u8(self._state ^ (self._state >> 8))
        xor2 = _u8(xor1 ^ (xor1 >> 4))
        return xor2 % 16

    def randomize(self, x: int, y: int, current_time: int) -> tuple[int, int]:
        """Nudge non-neutral axes by at most one unit, weighted 1:2:1."""
        rand = self.next_random(current_time)
        left = (rand & 0b11) == 0
        right = ((rand ^ 0b11) & 0b11) == 0
        up = (rand & 0b1100) == 0
        down = ((rand ^ 0b1100) & 0b1100) == 0
        if x != ANALOG_STICK_NEUTRAL:
            x = _u8(x - left + right)
        if y != ANALOG_STICK_NEUTRAL:
            y = _u8(y - down + up)
        return x, y


def is_easy(x: int, y: int) -> int:
    """Rim level (1 to 3) of a cardinal or near-diagonal rim coordinate, else 0."""
    xnorm = _magnitude(x)
    ynorm = _magnitude(y)
    rad_squared = _u16(xnorm * xnorm + ynorm * ynorm)
    if rad_squared < MELEE_RIM_RAD1:
        return 0
    diff = max(xnorm, ynorm) - min(xnorm, ynorm)
    if diff <= 6 or xnorm == 0 or ynorm == 0:
        if rad_squared >= MELEE_RIM_RAD3:
            return 3
        if rad_squared >= MELEE_RIM_RAD2:
            return 2
        return 1
    return 0


def lookback(current_index: int, samples_back: int) -> int:
    """Index of the entry samples_back before current_index in a ring buffer."""
    if samples_back > current_index:
        return HISTORYLEN - samples_back + current_index
    return current_index - samples_back


def sdi_zone(x: int, y: int) -> int:
    """SDI zone bits: dash threshold for cardinals, deadzone for diagonals."""
    xnorm = _magnitude(x)
    ynorm = _magnitude(y)
    rad_squared = _u16(xnorm * xnorm + ynorm * ynorm)
    if ANALOG_DEAD_MIN <= x <= ANALOG_DEAD_MAX:
        if y < ANALOG_SDI_LEFT:
            return ZONE_D
        if y > ANALOG_SDI_RIGHT:
            return ZONE_U
        return 0
    side = ZONE_L if x < ANALOG_DEAD_MIN else ZONE_R
    if y < ANALOG_DEAD_MIN and rad_squared >= MELEE_SDI_RAD:
        return ZONE_D | side
    if y > ANALOG_DEAD_MAX and rad_squared >= MELEE_SDI_RAD:
        return ZONE_U | side
    if side == ZONE_L and x <= ANALOG_SDI_LEFT:
        return ZONE_L
    if side == ZONE_R and x >= ANALOG_SDI_RIGHT:
        return ZONE_R
    return 0


def pivot_zone(x: int) -> int:
    """Dash zone bits of the x coordinate."""
    if x <= ANALOG_DASH_LEFT:
        return ZONE_L
    if x >= ANALOG_DASH_RIGHT:
        return ZONE_R
    return 0


def uptilt_shutoff_zone(y: int) -> int:
    """ZONE_U when y is above the deadzone but below tap-jump, else 0."""
    if ANALOG_DEAD_MAX < y < ANALOG_TAPJUMP:
        return ZONE_U
    return 0


def popcount_zone(bits: int) -> int:
    """Number of direction bits set among the low four."""
    return bin(bits & ZONE_DIR).count("1")


def is_tap_sdi(
    zone_history: Sequence[ZoneRecord],
    current_index: int,
    current_time: int,
    sample_spacing: int,
) -> int:
    """Detect tap and wank SDI in a zone history.

    Returns BITS_SDI_* flags plus the zone bits of the last cardinal seen
    before the last diagonal.
    """
    output = 0
    history_length = min(5, HISTORYLEN)
    recent = [zone_history[lookback(current_index, i)] for i in range(history_length)]
    zones = [record.zone for record in recent]
    times = [record.timestamp for record in recent]
    stale = [record.stale for record in recent]

    # Repeated centre-cardinal or cardinal-diagonal alternation.
    if zones[0] != zones[1] and zones[0] == zones[2] and zones[1] == zones[3]:
        time_diff0 = _u16((current_time - times[2]) * sample_spacing)
        time_diff1 = _u16((times[0] - times[2]) * sample_spacing)
        if not stale[2] and (
            time_diff0 < TIMELIMIT_TAP_PLUS
            and time_diff1 < TIMELIMIT_TAP
            and time_diff0 > TIMELIMIT_DEBOUNCE
        ):
            if zones[0] == 0 or zones[1] == 0:
                output |= BITS_SDI_TAP_CARD
            else:
                output |= BITS_SDI_TAP_DIAG

    # Origin, cardinal and the same diagonal twice, all recently.
    diag_zone = 0xFF
    orig_count = card_count = diag_count = 0
    for zone in zones:
        count = popcount_zone(zone)
        if count == 0:
            orig_count += 1
        elif count == 1:
            card_count += 1
        else:
            diag_count += 1
            diag_zone &= zone
    diag_match = popcount_zone(diag_zone) == 2
    short_time = (
        (times[0] - times[4]) * sample_spacing < TIMELIMIT_CARDIAG
        and (times[0] - times[1]) * sample_spacing > TIMELIMIT_SIMUL
        and not stale[4]
    )
    if diag_match and orig_count and card_count and diag_count > 1 and short_time:
        output |= BITS_SDI_TAP_CRDG

    # Three-input SDI: centre, one cardinal and two diagonals around it.
    card_zone = 0xFF
    diag_zone = 0xFF
    orig_count = card_count = diag_count = 0
    for zone in zones:
        count = popcount_zone(zone)
        if count == 0:
            orig_count += 1
            break
        if count == 1:
            card_count += 1
            card_zone &= zone
        else:
            diag_count += 1
            diag_zone &= zone
    adjacent_diag = popcount_zone(diag_zone & card_zone) == 1
    short_time = (times[0] - times[3]) * sample_spacing < TIMELIMIT_WANK and not stale[3]
    if adjacent_diag and orig_count and card_count and diag_count > 1 and short_time:
        output |= BITS_SDI_WANK

    # Wank SDI around a diagonal.
    if not output and zones[0] == zones[2] and popcount_zone(zones[0]) == 2:
        if (times[0] - times[2]) * sample_spacing < TIMELIMIT_WANK and not stale[2]:
            output |= BITS_SDI_WANK | BITS_SDI_TAP_CRDG

    # Last cardinal before the last diagonal.
    look_now = False
    for zone in zones:
        count = popcount_zone(zone)
        if count == 2:
            look_now = True
        if count == 1 and look_now:
            output |= zone
            break
    return output


def travel_time_calc(
    current_time: int,
    input_time: int,
    sample_spacing: int,
    ms_travel: int,
    start_x: int,
    start_y: int,
    dest_x: int,
    dest_y: int,
    travel_type: TravelType,
    done_traveling: bool,
) -> TravelResult:
    """Stick position partway from start to destination.

    Only linear and delay travel move the stick; for other types the
    coordinates are None until travel is done.
    """
    samples_elapsed = _u16(current_time - input_time)
    time_elapsed = _u16(samples_elapsed * sample_spacing)
    out_x: int | None = None
    out_y: int | None = None

    if travel_type is TravelType.LINEAR:
        travel_elapsed = time_elapsed // ms_travel
        capped = min(256, travel_elapsed)
        dx = _i16(_trunc_div((dest_x - start_x) * capped, 256))
        dy = _i16(_trunc_div((dest_y - start_y) * capped, 256))
        out_x = _u8(start_x + dx)
        out_y = _u8(start_y + dy)
    elif travel_type is TravelType.DELAY:
        if time_elapsed <= ms_travel * 250:
            out_x, out_y = start_x, start_y
        else:
            out_x, out_y = dest_x, dest_y

    if time_elapsed > ms_travel * 250:
        done_traveling = True
    if done_traveling:
        out_x, out_y = dest_x, dest_y
    return TravelResult(out_x, out_y, done_traveling)