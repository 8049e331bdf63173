from decimal import Decimal

from utils.formatting import (
    as_amount,
    format_currency,
    format_grouped,
    format_number,
    format_one_decimal,
    round_half_up,
)


def test_as_amount_treats_missing_as_zero():
    assert as_amount(None) == Decimal("0")
    assert as_amount(12) == Decimal("12")
    assert as_amount(Decimal("3.5")) == Decimal("3.5")


def test_round_half_up_rounds_halves_up():
    assert round_half_up(Decimal("20.5")) == 21
    assert round_half_up(Decimal("2.4")) == 2
    assert round_half_up(Decimal("2.5")) == 3
    assert round_half_up(15) == 15


def test_currency_uses_grouping_and_drops_trailing_zeros():
    assert format_currency(Decimal("22800")) == "€22,800"
    assert format_currency(Decimal("9120.0")) == "€9,120"
    assert format_currency(Decimal("1000")) == "€1,000"
    assert format_currency(Decimal("0")) == "€0"
    assert format_currency(Decimal("1234.5")) == "€1,234.5"


def test_currency_keeps_at_most_three_fraction_digits():
    assert format_currency(Decimal("1234.5678")) == "€1,234.568"
    assert format_grouped(Decimal("0.0004")) == "0"


def test_plain_number_has_no_grouping():
    assert format_number(Decimal("1250")) == "1250"
    assert format_number(Decimal("12.50")) == "12.5"
    assert format_number(7) == "7"


def test_one_decimal():
    assert format_one_decimal(Decimal("2.5")) == "2.5"
    assert format_one_decimal(Decimal("1.25")) == "1.3"
    assert format_one_decimal(Decimal("3")) == "3.0"
