"""Price Formatting — fixed-convention money text for the rendered catalog line.

Invariants:
    - Always exactly two fraction digits, "," as thousands separator, "." as decimal point
    - Midpoint values round away from zero (2.345 -> "2.35", -2.345 -> "-2.35")
    - A price that rounds to zero never carries a minus sign
    - Prices of any magnitude format without raising
    - A segment containing "," is wrapped in double quotes as a whole

Design Decisions:
    - Single fixed convention, no locale module: output must not depend on the host locale
    - Rounding runs in a private Context sized to the price, never the thread's context
    - Quoting lives here, not in CatalogItem.render: the rule is about price text,
      so consumers splitting the line on commas see one price token
"""

from decimal import Context, Decimal, ROUND_HALF_UP


GROUPING_SEPARATOR: str = ","
_CENTS = Decimal("0.01")
_MIN_PRECISION = 28


def format_price(price: Decimal) -> str:
    """Grouped, two-decimal rendering of a price: Decimal("1234.5") -> "1,234.50"."""
    context = Context(
        prec=max(_MIN_PRECISION, price.adjusted() + 3),
        rounding=ROUND_HALF_UP,
    )
    cents = price.quantize(_CENTS, context=context)
    if cents.is_zero():
        cents = cents.copy_abs()
    return f"{cents:,.2f}"


def format_price_segment(price: Decimal, currency: str) -> str:
    """Price and currency as one token, quoted when the price is grouped."""
    formatted = format_price(price)
    segment = f"{formatted} {currency}"
    if GROUPING_SEPARATOR in formatted:
        return f'"{segment}"'
    return segment
