import math
import warnings
from decimal import Decimal

import pytest

from prismatic.dec import Dec


def test_epsilon_and_bounds():
    assert Dec.EPSILON == Dec(Decimal("1e-28"))
    assert Dec.MAX == Dec(79228162514264337593543950335)
    assert Dec.MIN == -Dec.MAX


def test_decimal_addition_is_exact():
    assert Dec("0.1") + Dec("0.2") == Dec("0.3")


def test_arithmetic_round_trip():
    a, b = Dec("12.75"), Dec("3.5")
    assert (a + b) - b == a
    assert (a * b) / b == a
    assert a - a == Dec(0)


def test_mixing_with_ints():
    a = Dec("2.5")
    assert a + 1 == Dec("2.5") + Dec(1)
    assert 2 * a == a + a
    assert 1 - a == -(a - 1)


def test_sum_of_decs():
    values = [Dec("1.5"), Dec("2.5"), Dec("-1")]
    assert sum(values) == values[0] + values[1] + values[2]


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Dec(1) / Dec(0)
    with pytest.raises(ZeroDivisionError):
        Dec(1) / 0


def test_sqrt_squares_back():
    root = Dec(2).sqrt()
    assert (root * root).round_dp(20) == Dec(2)
    assert Dec(9).sqrt() == Dec(3)


def test_sqrt_of_negative_raises():
    with pytest.raises(ValueError):
        Dec(-4).sqrt()


def test_sin_cos_of_zero():
    assert Dec(0).sin() == Dec(0)
    assert Dec(0).cos() == Dec(1)


@pytest.mark.parametrize("angle", ["0.3", "1.2", "-2.7", "10"])
def test_pythagorean_identity(angle):
    x = Dec(angle)
    s, c = x.sin(), x.cos()
    assert (s * s + c * c).round_dp(20) == Dec(1)
    assert float(s) == pytest.approx(math.sin(float(x)), abs=1e-12)
    assert float(c) == pytest.approx(math.cos(float(x)), abs=1e-12)


def test_atan2_matches_float():
    result = Dec(1).atan2(Dec(-2))
    assert float(result) == pytest.approx(math.atan2(1.0, -2.0))


def test_round_is_bankers():
    assert Dec("2.5").round() == Dec(2)
    assert Dec("3.5").round() == Dec(4)
    assert Dec("-2.5").round() == Dec(-2)


def test_round_dp_keeps_short_values():
    assert Dec("1.25").round_dp(4) == Dec("1.25")
    assert Dec("1.23456").round_dp(3) == Dec("1.235")


def test_ceil():
    assert Dec("1.1").ceil() == Dec(2)
    assert Dec("-1.9").ceil() == Dec(-1)


def test_powi_and_inverse():
    x = Dec("1.5")
    assert x.powi(3) == x * x * x
    assert (x.powi(-2) * x.powi(2)).round_dp(20) == Dec(1)
    assert x ** 0 == Dec(1)


def test_sign_queries():
    assert Dec(-3).signum() == Dec(-1)
    assert Dec("0.25").signum() == Dec(1)
    assert Dec(5).is_positive() and not Dec(5).is_negative()
    assert Dec(-5).is_negative() and not Dec(-5).is_positive()
    assert Dec(0).is_zero()
    with pytest.raises(ZeroDivisionError):
        Dec(0).signum()


def test_float_multiplication_rounds_to_eight_places():
    product = Dec(1) * 0.1
    assert product == Dec(0.1).round_dp(8)
    assert 0.1 * Dec(1) == product


def test_ordering_and_hash():
    values = [Dec(3), Dec("-1.5"), Dec("2.25")]
    assert sorted(values) == [values[1], values[2], values[0]]
    assert max(values) == values[0]
    assert hash(Dec("1.0")) == hash(Dec(1))
    assert Dec("1.0") == 1


def test_non_finite_float_becomes_zero_with_warning():
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        value = Dec(float("nan"))
    assert value.is_zero()
    assert caught


def test_conversions():
    x = Dec("7.75")
    assert float(x) == 7.75
    assert int(x) == 7
    assert str(Dec.EPSILON).endswith("1")
    assert Dec(x) == x