"""Catalog Item — the book-store inventory record and its field-level invariants.

Invariants:
    - Construction is all-or-nothing: every check runs before any attribute is set
    - Check order is fixed: isni, isbn, author_name, title, publisher, currency, amount type
    - author_name, isni, title, publisher, isbn are read-only after construction
    - A rejected setter leaves the previous value intact (validate, then assign)
    - has_isni reflects successful ISNI validation, not mere presence

Design Decisions:
    - Keyword defaults over constructor overloads: one canonical __init__ with
      isni/published/book_binding/price/currency/amount optional
    - from_options() accepts any BookOptionsLike: core stays free of pydantic
    - price and amount are NOT range-checked at construction, only by setters;
      amount must still be an int (bool excluded) everywhere
      (matches the observed behaviour of the legacy record; see DESIGN.md)
    - Errors propagate to the caller untouched — no logging, no catching here
"""

from datetime import date
from decimal import Decimal

from bookstore.core.boundary_protocols import BookOptionsLike
from bookstore.core.domain_types import (
    DEFAULT_CURRENCY,
    ISBN_LOOKUP_BASE_URL,
    ISNI_LOOKUP_BASE_URL,
    ISNI_NOT_SET_MARKER,
)
from bookstore.core.errors import (
    ErrorContext,
    InvalidFieldError,
    InvalidIdentifierError,
    OutOfRangeError,
    PreconditionFailedError,
)
from bookstore.core.format_price import format_price_segment
from bookstore.core.validators import (
    is_blank,
    validate_currency,
    validate_isbn,
    validate_isni,
)


def to_price(value: Decimal | int | float | str) -> Decimal:
    """Coerce a price input to Decimal, keeping the scale the caller wrote.

    Floats go through str() so 10.5 becomes Decimal("10.5"), not its binary expansion.
    Negative zero is stored unsigned.
    """
    if isinstance(value, Decimal):
        price = value
    elif isinstance(value, float):
        price = Decimal(str(value))
    else:
        price = Decimal(value)
    if price.is_zero() and price.is_signed():
        return price.copy_abs()
    return price


class CatalogItem:
    """A single book in the store's stock."""

    def __init__(
        self,
        author_name: str,
        title: str,
        publisher: str,
        isbn: str,
        *,
        isni: str | None = None,
        published: date | None = None,
        book_binding: str = "",
        price: Decimal | int | float | str = 0,
        currency: str = DEFAULT_CURRENCY,
        amount: int = 0,
    ):
        has_isni = validate_isni(isni)
        if isni is not None and not has_isni:
            raise InvalidIdentifierError("isni", ErrorContext(value=isni))

        if not validate_isbn(isbn):
            raise InvalidIdentifierError("isbn", ErrorContext(value=isbn))

        for name, value in (
            ("author_name", author_name),
            ("title", title),
            ("publisher", publisher),
        ):
            if is_blank(value):
                raise InvalidFieldError(name, ErrorContext(value=value))

        _check_currency(currency)
        _check_amount_type(amount)

        self._author_name = author_name
        self._isni = isni
        self._has_isni = has_isni
        self._title = title
        self._publisher = publisher
        self._isbn = isbn
        self._published = published
        self._book_binding = book_binding
        self._price = to_price(price)
        self._currency = currency
        self._amount = amount

    @classmethod
    def from_options(
        cls,
        author_name: str,
        title: str,
        publisher: str,
        isbn: str,
        options: BookOptionsLike,
        *,
        isni: str | None = None,
    ) -> "CatalogItem":
        """Build an item from the required fields plus an options bundle."""
        return cls(
            author_name, title, publisher, isbn,
            isni=isni,
            published=options.published,
            book_binding=options.book_binding,
            price=options.price,
            currency=options.currency,
            amount=options.amount,
        )

    # ─── Read-only fields ────────────────────────────────────────

    @property
    def author_name(self) -> str:
        return self._author_name

    @property
    def isni(self) -> str | None:
        """International Standard Name Identifier of the author, if known."""
        return self._isni

    @property
    def has_isni(self) -> bool:
        return self._has_isni

    @property
    def title(self) -> str:
        return self._title

    @property
    def publisher(self) -> str:
        return self._publisher

    @property
    def isbn(self) -> str:
        return self._isbn

    # ─── Mutable fields ──────────────────────────────────────────

    @property
    def published(self) -> date | None:
        return self._published

    @published.setter
    def published(self, value: date | None) -> None:
        self._published = value

    @property
    def book_binding(self) -> str:
        """Free-text binding, e.g. "hardcover" or "paperback"."""
        return self._book_binding

    @book_binding.setter
    def book_binding(self, value: str) -> None:
        self._book_binding = value

    @property
    def price(self) -> Decimal:
        return self._price

    @price.setter
    def price(self, value: Decimal | int | float | str) -> None:
        price = to_price(value)
        if price < 0:
            raise OutOfRangeError("price", ErrorContext(value=value))
        self._price = price

    @property
    def currency(self) -> str:
        return self._currency

    @currency.setter
    def currency(self, value: str) -> None:
        _check_currency(value)
        self._currency = value

    @property
    def amount(self) -> int:
        """Number of copies in stock."""
        return self._amount

    @amount.setter
    def amount(self, value: int) -> None:
        _check_amount_type(value)
        if value < 0:
            raise OutOfRangeError("amount", ErrorContext(value=value))
        self._amount = value

    # ─── Derived ─────────────────────────────────────────────────

    def isni_lookup_uri(self) -> str:
        """Contributor page on isni.org. Requires an ISNI."""
        if is_blank(self._isni):
            raise PreconditionFailedError(
                "ISNI is not set", ErrorContext(field="isni"),
            )
        return f"{ISNI_LOOKUP_BASE_URL}{self._isni}"

    def isbn_lookup_uri(self) -> str:
        """Publication page on isbnsearch.org."""
        return f"{ISBN_LOOKUP_BASE_URL}{self._isbn}"

    def render(self) -> str:
        """One-line summary: title, author, isni-or-marker, price currency, amount."""
        isni = ISNI_NOT_SET_MARKER if is_blank(self._isni) else self._isni
        price = format_price_segment(self._price, self._currency)
        return f"{self._title}, {self._author_name}, {isni}, {price}, {self._amount}"

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"CatalogItem(isbn={self._isbn!r}, title={self._title!r})"


def _check_currency(value: str) -> None:
    if not validate_currency(value):
        raise InvalidFieldError("currency", ErrorContext(value=value))


def _check_amount_type(value: int) -> None:
    # bool is an int subclass but never a stock count
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidFieldError("amount", ErrorContext(value=value))
