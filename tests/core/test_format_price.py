"""Price Formatting — tests for fixed-convention price text and segment quoting.

Tests cover:
    - Two fraction digits, "," grouping, "." decimal point
    - Midpoint rounding away from zero
    - Segment quoting only when the price is grouped
    - Prices beyond the default 28-digit context, unsigned zero
"""

from decimal import Decimal

import pytest

from bookstore.core.format_price import format_price, format_price_segment


# ─── format_price ────────────────────────────────────────────────

@pytest.mark.parametrize(
    "price, expected",
    [
        (Decimal("0"), "0.00"),
        (Decimal("10.5"), "10.50"),
        (Decimal("999.999"), "1,000.00"),
        (Decimal("1234.50"), "1,234.50"),
        (Decimal("1234567.891"), "1,234,567.89"),
        (Decimal("-1234.5"), "-1,234.50"),
    ],
)
def test_format_price(price, expected):
    assert format_price(price) == expected


def test_format_price_rounds_midpoint_away_from_zero():
    assert format_price(Decimal("2.345")) == "2.35"
    assert format_price(Decimal("2.125")) == "2.13"
    assert format_price(Decimal("-2.345")) == "-2.35"


# ─── format_price_segment ────────────────────────────────────────

def test_segment_without_grouping_is_plain():
    assert format_price_segment(Decimal("999.99"), "USD") == "999.99 USD"


def test_segment_with_grouping_is_quoted():
    assert format_price_segment(Decimal("1000"), "EUR") == '"1,000.00 EUR"'


def test_segment_rounding_into_grouping_is_quoted():
    assert format_price_segment(Decimal("999.995"), "USD") == '"1,000.00 USD"'


# ─── magnitude and sign ──────────────────────────────────────────

def test_format_price_beyond_default_precision():
    price = Decimal("79228162514264337593543950335")
    assert format_price(price) == "79,228,162,514,264,337,593,543,950,335.00"


def test_format_price_large_value_with_fraction_rounds():
    price = Decimal("12345678901234567890123456789.005")
    assert format_price(price) == "12,345,678,901,234,567,890,123,456,789.01"


def test_segment_for_huge_price_is_quoted():
    segment = format_price_segment(Decimal("79228162514264337593543950335"), "USD")
    assert segment == '"79,228,162,514,264,337,593,543,950,335.00 USD"'


@pytest.mark.parametrize("price", [Decimal("-0"), Decimal("-0.00"), Decimal("-0.004")])
def test_format_price_zero_has_no_sign(price):
    assert format_price(price) == "0.00"
