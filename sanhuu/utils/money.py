"""Decimal rounding helpers shared by every report.

All arithmetic inside the engine stays in ``Decimal``; rounding happens only when
a figure leaves a report. Rounding is half away from zero, so ``0.5 -> 1`` and
``-0.5 -> -1``.
"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

ZERO = Decimal("0")
HUNDRED = Decimal("100")
CENT = Decimal("0.01")
UNIT = Decimal("1")


def to_decimal(value: Decimal | int | float | str | None) -> Decimal:
    """Coerce a number to ``Decimal`` without picking up binary float noise."""
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_units(value: Decimal) -> Decimal:
    """Round to whole currency units (salary and tax amounts)."""
    return value.quantize(UNIT, rounding=ROUND_HALF_UP)


def round_cents(value: Decimal) -> Decimal:
    """Round to two decimals (VAT and income breakdowns)."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def cents(value: Decimal) -> float:
    return float(round_cents(value))


def units(value: Decimal) -> int:
    return int(round_units(value))


def dsum(values: Iterable[Decimal]) -> Decimal:
    return sum(values, ZERO)


def format_amount(value: Decimal | None) -> str | None:
    """Plain positional text for a CSV cell: ``1E+3 -> "1000"``, ``12.50 -> "12.5"``."""
    if value is None:
        return None
    whole, _, fraction = f"{value:f}".partition(".")
    fraction = fraction.rstrip("0")
    text = f"{whole}.{fraction}" if fraction else whole
    return "0" if text == "-0" else text
