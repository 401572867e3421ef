import math

import pytest

from marqueekit.floatparts import (
    FloatParts,
    make_float,
    negative_binary_power_of_ten,
    negative_binary_power_of_ten_plus_one,
    normalize,
    positive_binary_power_of_ten,
)


def _rebuild(parts):
    mantissa = parts.integral + parts.decimal / 10 ** parts.decimal_places
    return mantissa * 10.0 ** parts.exponent


@pytest.mark.parametrize("index", range(9))
def test_double_power_tables(index):
    power = 2 ** index
    assert math.isclose(positive_binary_power_of_ten(index), float(f"1e{power}"), rel_tol=1e-15)
    assert math.isclose(negative_binary_power_of_ten(index), float(f"1e-{power}"), rel_tol=1e-15)
    assert math.isclose(
        negative_binary_power_of_ten_plus_one(index), float(f"1e{1 - power}"), rel_tol=1e-15
    )


def test_single_tables_are_shorter():
    assert math.isclose(positive_binary_power_of_ten(5, double=False), 1e32, rel_tol=1e-6)
    with pytest.raises(IndexError):
        positive_binary_power_of_ten(6, double=False)
    with pytest.raises(IndexError):
        negative_binary_power_of_ten(-1)


@pytest.mark.parametrize("mantissa,exponent", [(1.5, 3), (2.0, -4), (7.25, 0), (1.0, 100)])
def test_make_float(mantissa, exponent):
    assert math.isclose(make_float(mantissa, exponent), mantissa * 10.0 ** exponent, rel_tol=1e-12)


@pytest.mark.parametrize("value", [1e20, 123456789.0, 1e300, 3e-7, 1e-300])
def test_normalize_keeps_value(value):
    scaled, powers = normalize(value)
    assert 0.9 <= scaled < 10.0 + 1e-9
    assert math.isclose(scaled * 10.0 ** powers, value, rel_tol=1e-9)


def test_normalize_leaves_ordinary_values():
    assert normalize(42.5) == (42.5, 0)


def test_from_value_simple():
    parts = FloatParts.from_value(3.14)
    assert (parts.integral, parts.decimal, parts.decimal_places, parts.exponent) == (3, 14, 2, 0)


def test_from_value_zero():
    parts = FloatParts.from_value(0.0)
    assert (parts.integral, parts.decimal, parts.decimal_places) == (0, 0, 0)


@pytest.mark.parametrize("value", [0.5, 1.25, 99.999, 12345.678, 1e20, 6.02e23, 2.5e-8, 1e-100])
def test_from_value_reconstructs(value):
    parts = FloatParts.from_value(value)
    assert math.isclose(_rebuild(parts), value, rel_tol=1e-8)
    assert parts.decimal_places == 0 or parts.decimal % 10 != 0


@pytest.mark.parametrize("value", [0.5, 3.25, 1234.5])
def test_from_value_single_precision(value):
    parts = FloatParts.from_value(value, double=False)
    assert parts.decimal_places <= 6
    assert math.isclose(_rebuild(parts), value, rel_tol=1e-6)


def test_from_value_rejects_negative():
    with pytest.raises(ValueError):
        FloatParts.from_value(-1.0)