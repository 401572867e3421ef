"""Decomposition of floating point numbers for JSON output."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from typing import Callable

POSITIVE_EXPONENTIATION_THRESHOLD = 1e7
NEGATIVE_EXPONENTIATION_THRESHOLD = 1e-5


def _forge(msb: int, lsb: int) -> float:
    return struct.unpack(">d", struct.pack(">Q", (msb << 32) | lsb))[0]


def _to_single(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _rounding(double: bool) -> Callable[[float], float]:
    """Return the function that rounds a result to the working precision."""
    return float if double else _to_single


_DOUBLE_POSITIVE = (
    1e1, 1e2, 1e4, 1e8, 1e16, 1e32,
    _forge(0x4D384F03, 0xE93FF9F5),
    _forge(0x5A827748, 0xF9301D32),
    _forge(0x75154FDD, 0x7F73BF3C),
)
_DOUBLE_NEGATIVE = (
    1e-1, 1e-2, 1e-4, 1e-8, 1e-16, 1e-32,
    _forge(0x32A50FFD, 0x44F4A73D),
    _forge(0x255BBA08, 0xCF8C979D),
    _forge(0x0AC80628, 0x64AC6F43),
)
_DOUBLE_NEGATIVE_PLUS_ONE = (
    1e0, 1e-1, 1e-3, 1e-7, 1e-15, 1e-31,
    _forge(0x32DA53FC, 0x9631D10D),
    _forge(0x25915445, 0x81B7DEC2),
    _forge(0x0AFE07B2, 0x7DD78B14),
)
_SINGLE_POSITIVE = tuple(_to_single(x) for x in (1e1, 1e2, 1e4, 1e8, 1e16, 1e32))
_SINGLE_NEGATIVE = tuple(
    _to_single(x) for x in (1e-1, 1e-2, 1e-4, 1e-8, 1e-16, 1e-32)
)
_SINGLE_NEGATIVE_PLUS_ONE = tuple(
    _to_single(x) for x in (1e0, 1e-1, 1e-3, 1e-7, 1e-15, 1e-31)
)


def _lookup(table: tuple[float, ...], index: int) -> float:
    if not 0 <= index < len(table):
        raise IndexError(f"power of ten index out of range: {index}")
    return table[index]


def positive_binary_power_of_ten(index: int, double: bool = True) -> float:
    """Return 10 ** (2 ** index)."""
    return _lookup(_DOUBLE_POSITIVE if double else _SINGLE_POSITIVE, index)


def negative_binary_power_of_ten(index: int, double: bool = True) -> float:
    """Return 10 ** -(2 ** index)."""
    return _lookup(_DOUBLE_NEGATIVE if double else _SINGLE_NEGATIVE, index)


def negative_binary_power_of_ten_plus_one(index: int, double: bool = True) -> float:
    """Return 10 ** (1 - 2 ** index)."""
    table = _DOUBLE_NEGATIVE_PLUS_ONE if double else _SINGLE_NEGATIVE_PLUS_ONE
    return _lookup(table, index)


def make_float(mantissa: float, exponent: int, double: bool = True) -> float:
    """Return mantissa * 10 ** exponent using binary powers of ten."""
    rnd = _rounding(double)
    result = rnd(mantissa)
    if exponent > 0:
        table = positive_binary_power_of_ten
    else:
        table = negative_binary_power_of_ten
        exponent = -exponent
    index = 0
    while exponent:
        if exponent & 1:
            result = rnd(result * table(index, double))
        exponent >>= 1
        index += 1
    return result


def normalize(value: float, double: bool = True) -> tuple[float, int]:
    """Scale ``value`` towards [1, 10) and return it with its power of ten."""
    rnd = _rounding(double)
    value = rnd(value)
    powers_of_10 = 0
    index = 8 if double else 5
    bit = 1 << index

    if value >= POSITIVE_EXPONENTIATION_THRESHOLD:
        while index >= 0:
            if value >= positive_binary_power_of_ten(index, double):
                value = rnd(value * negative_binary_power_of_ten(index, double))
                powers_of_10 += bit
            bit >>= 1
            index -= 1

    if 0 < value <= NEGATIVE_EXPONENTIATION_THRESHOLD:
        while index >= 0:
            if value < negative_binary_power_of_ten_plus_one(index, double):
                value = rnd(value * positive_binary_power_of_ten(index, double))
                powers_of_10 -= bit
            bit >>= 1
            index -= 1

    return value, powers_of_10


@dataclass(frozen=True)
class FloatParts:
    """Integral part, decimals and exponent of a non-negative finite number."""

    integral: int
    decimal: int
    exponent: int
    decimal_places: int

    @classmethod
    def from_value(cls, value: float, double: bool = True) -> "FloatParts":
        if math.isnan(value) or math.isinf(value) or value < 0:
            raise ValueError("value must be finite and non-negative")
        rnd = _rounding(double)
        max_decimal_part = 1_000_000_000 if double else 1_000_000
        decimal_places = 9 if double else 6

        value, exponent = normalize(value, double)
        integral = int(value)

        tmp = integral
        while tmp >= 10:
            max_decimal_part //= 10
            decimal_places -= 1
            tmp //= 10

        remainder = rnd(rnd(value - integral) * max_decimal_part)
        decimal = int(remainder)
        remainder = rnd(remainder - decimal)

        decimal += int(remainder * 2)
        if decimal >= max_decimal_part:
            decimal = 0
            integral += 1
            if exponent and integral >= 10:
                exponent += 1
                integral = 1

        while decimal % 10 == 0 and decimal_places > 0:
            decimal //= 10
            decimal_places -= 1

        return cls(integral, decimal, exponent, decimal_places)