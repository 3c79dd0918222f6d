from decimal import Decimal

import pytest

from sanhuu.utils.money import format_amount, round_cents, round_units, to_decimal


@pytest.mark.parametrize(
    "value,expected",
    [
        ("1E+6", "1000000"),
        ("1000000.0", "1000000"),
        ("1500.50", "1500.5"),
        ("0.05", "0.05"),
        ("0.00", "0"),
        ("-0.00", "0"),
        ("-12.340", "-12.34"),
        ("1000000000000000", "1000000000000000"),
    ],
)
def test_format_amount(value, expected):
    assert format_amount(Decimal(value)) == expected


def test_format_amount_none():
    assert format_amount(None) is None


def test_rounding_is_half_away_from_zero():
    assert round_units(Decimal("0.5")) == Decimal("1")
    assert round_units(Decimal("-0.5")) == Decimal("-1")
    assert round_cents(Decimal("0.005")) == Decimal("0.01")
    assert round_cents(Decimal("-0.005")) == Decimal("-0.01")


def test_to_decimal_avoids_float_noise():
    assert to_decimal(0.1) == Decimal("0.1")
    assert to_decimal(None) == Decimal("0")
