"""Validators — pure predicates for identifier, currency and text-field formats.

Invariants:
    - Every function is PURE: no state, no IO, no exceptions on malformed input
    - ISBN/ISNI alphabet is ASCII digits plus uppercase X (IDENTIFIER_CHARACTERS)
    - Currency accepts any Unicode letter (str.isalpha), not only A-Z
    - validate_isbn_checksum returns False for characters outside the alphabet

Design Decisions:
    - Bool predicates over raising validators: CatalogItem decides which error
      to raise and in which order, keeping error policy in one place
    - None accepted everywhere: "not supplied" is answered, never crashes
"""

from bookstore.core.domain_types import (
    ASCII_DIGITS,
    CHECK_CHARACTER,
    CHECK_CHARACTER_VALUE,
    CURRENCY_CODE_LENGTH,
    IDENTIFIER_CHARACTERS,
    ISBN_CHECKSUM_MODULUS,
    ISBN_LENGTH,
    ISNI_LENGTH,
)


def _is_identifier(value: str | None, length: int) -> bool:
    if not isinstance(value, str) or len(value) != length:
        return False
    return all(c in IDENTIFIER_CHARACTERS for c in value)


def validate_isni(value: str | None) -> bool:
    """16 characters, each an ASCII digit or X. Empty or None is invalid."""
    return _is_identifier(value, ISNI_LENGTH)


def validate_isbn_format(value: str | None) -> bool:
    """10 characters, each an ASCII digit or X."""
    return _is_identifier(value, ISBN_LENGTH)


def validate_isbn_checksum(value: str | None) -> bool:
    """Weighted ISBN-10 sum: position i (0-based) weighs 10 - i, X counts as 10.

    Valid iff the sum is divisible by 11. Expects a format-checked value but
    reports False instead of raising when given anything else.
    """
    if not isinstance(value, str):
        return False

    checksum = 0
    for i, c in enumerate(value):
        if c == CHECK_CHARACTER:
            digit = CHECK_CHARACTER_VALUE
        elif c in ASCII_DIGITS:
            digit = int(c)
        else:
            return False
        checksum += (ISBN_LENGTH - i) * digit

    return checksum % ISBN_CHECKSUM_MODULUS == 0


def validate_isbn(value: str | None) -> bool:
    """Format and checksum together — the rule construction enforces."""
    return validate_isbn_format(value) and validate_isbn_checksum(value)


def validate_currency(value: str | None) -> bool:
    """Exactly 3 characters, each a letter in any alphabet."""
    if not isinstance(value, str) or len(value) != CURRENCY_CODE_LENGTH:
        return False
    return all(c.isalpha() for c in value)


def is_blank(value: str | None) -> bool:
    """True for None, empty, or whitespace-only text."""
    return value is None or not value.strip()
