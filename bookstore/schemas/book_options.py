"""Book Options — the optional construction parameters of a CatalogItem.

Invariants:
    - Type coercion only (str -> Decimal, str -> date); no domain rules
    - Defaults equal the CatalogItem keyword defaults

Design Decisions:
    - Pydantic BaseModel over a bare dataclass: callers can build it from
      dicts or JSON with types coerced at the boundary
    - Negative price/amount or a bad currency are accepted here on purpose;
      CatalogItem.from_options is the single place that rejects them
"""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel

from bookstore.core.domain_types import DEFAULT_CURRENCY


class BookOptions(BaseModel):
    """Optional fields bundled for CatalogItem.from_options."""
    published: date | None = None
    book_binding: str = ""
    price: Decimal = Decimal(0)
    currency: str = DEFAULT_CURRENCY
    amount: int = 0
