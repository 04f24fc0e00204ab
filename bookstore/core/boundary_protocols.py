"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from schemas/services/infrastructure — arrows point inward only
    - Shell-side shapes reach the core through Protocol types

Design Decisions:
    - Protocol over ABC: structural subtyping, so the pydantic BookOptions model
      (or any plain object with the same attributes) satisfies it without inheritance
"""

from datetime import date
from decimal import Decimal
from typing import Protocol


class BookOptionsLike(Protocol):
    """Structural contract for the optional construction parameters of a CatalogItem.

    Carries no validation of its own; CatalogItem validates on construction.
    """
    published: date | None
    book_binding: str
    price: Decimal
    currency: str
    amount: int
