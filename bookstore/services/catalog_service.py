"""Catalog Service — registers new catalog items with configured defaults and logging.

Invariants:
    - Missing options are filled with the configured default currency
    - Every rejection is logged as a warning and re-raised unchanged
    - The returned item is the one CatalogItem.from_options built — no copies

Design Decisions:
    - Logging lives in the shell, not in core: the entity stays pure and
      callers that do not want logs can construct CatalogItem directly
    - Settings injected with get_settings() fallback: tests pass their own
"""

import logging

from bookstore.config import Settings, get_settings
from bookstore.core.catalog_item import CatalogItem
from bookstore.core.errors import BookStoreError
from bookstore.schemas.book_options import BookOptions

logger = logging.getLogger(__name__)


def default_options(settings: Settings | None = None) -> BookOptions:
    """BookOptions with every field defaulted and the configured currency."""
    settings = settings or get_settings()
    return BookOptions(currency=settings.default_currency)


def register_item(
    author_name: str,
    title: str,
    publisher: str,
    isbn: str,
    options: BookOptions | None = None,
    *,
    isni: str | None = None,
    settings: Settings | None = None,
) -> CatalogItem:
    """Build a CatalogItem, logging the outcome. Raises BookStoreError on rejection."""
    options = options or default_options(settings)
    try:
        item = CatalogItem.from_options(
            author_name, title, publisher, isbn, options, isni=isni,
        )
    except BookStoreError as e:
        logger.warning(
            f"Catalog item rejected: {e.message}",
            extra={
                "isbn": isbn,
                "field": e.context.field,
                "error_code": e.code,
            },
        )
        raise

    logger.info(
        f"Catalog item registered: {item.title!r}",
        extra={"isbn": item.isbn},
    )
    return item
