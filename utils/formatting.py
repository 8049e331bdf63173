# utils/formatting.py

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

Number = Union[Decimal, int]

ZERO = Decimal("0")
_MAX_FRACTION = Decimal("0.001")


def as_amount(value: Optional[Number]) -> Decimal:
    """
    Resolves an optional questionnaire number for arithmetic.
    Absent values count as zero; this is the single place that default lives.
    """
    if value is None:
        return ZERO
    return Decimal(value)


def round_half_up(value: Number) -> int:
    """Rounds to the nearest integer, halves away from zero (41 / 2 -> 21)."""
    return int(Decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _trimmed(value: Number) -> Decimal:
    # Up to three fraction digits, trailing zeros dropped
    quantized = Decimal(value).quantize(_MAX_FRACTION, rounding=ROUND_HALF_UP)
    if quantized == quantized.to_integral_value():
        return quantized.quantize(Decimal("1"))
    return quantized.normalize()


def format_number(value: Number) -> str:
    """Plain number without grouping: 500 -> '500', 12.50 -> '12.5'."""
    return format(_trimmed(value), "f")


def format_grouped(value: Number) -> str:
    """Number with thousands separators: 22800 -> '22,800', 9120.0 -> '9,120'."""
    return format(_trimmed(value), ",f")


def format_currency(value: Number) -> str:
    """Euro amount as shown in plans: Decimal('3800') -> '€3,800'."""
    return f"€{format_grouped(value)}"


def format_one_decimal(value: Number) -> str:
    """Fixed single decimal place: 1.25 -> '1.3'."""
    return format(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP), "f")
