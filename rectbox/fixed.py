"""Signed 8.8 fixed-point arithmetic on 16-bit values."""

from __future__ import annotations

import math

FIXED_MAX = 0x7FFF
FIXED_MIN = -0x8000


def _int16(value: int) -> int:
    value &= 0xFFFF
    return value - 0x10000 if value & 0x8000 else value


def _int8(value: int) -> int:
    value &= 0xFF
    return value - 0x100 if value & 0x80 else value


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def float_to_fixed(value: float) -> int:
    """Convert a float to 8.8 fixed point, rounding by adding one half."""
    return _int16(int(value * 256 + 0.5))


def fixed_to_float(fixed: int) -> float:
    """Convert an 8.8 fixed-point value to a float."""
    return fixed / 256


FIXED_PI = float_to_fixed(math.pi)


def int_to_fixed(n: int) -> int:
    """Convert a signed byte to 8.8 fixed point."""
    return _int16(_int8(n) << 8)


def fixed_to_int(n: int) -> int:
    """Integer part of an 8.8 fixed-point value, as a signed byte."""
    return _int8(_int16(n) >> 8)


def fixed_add(n: int, j: int) -> int:
    """Sum of two fixed-point values."""
    return _int16(n + j)


def fixed_sub(n: int, j: int) -> int:
    """Difference of two fixed-point values."""
    return _int16(n - j)


def fixed_mul(n: int, j: int) -> int:
    """Product of two fixed-point values."""
    return _int16((n * j) >> 8)


def _saturate_by_sign(n: int) -> int:
    if n > 0:
        return FIXED_MAX
    if n < 0:
        return FIXED_MIN
    return 0


def fixed_div(n: int, j: int) -> int:
    """Full-precision quotient; division by zero saturates by sign."""
    if j == 0:
        return _saturate_by_sign(n)
    return _int16(_trunc_div(n << 8, j))


def fast_div(n: int, j: int) -> int:
    """Low-precision quotient using a 16-bit divide.

    Raises ZeroDivisionError when the shortened divisor is zero.
    """
    if j == 0:
        return _saturate_by_sign(n)
    return _int16(_trunc_div(n, j >> 4) << 4)


def lerp(start: int, end: int, time: int) -> int:
    """Linear interpolation from start to end at fixed-point time."""
    return fixed_add(start, fixed_mul(fixed_sub(end, start), time))