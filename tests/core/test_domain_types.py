"""Domain Types — verifies identifier wrappers and format constants.

Tests:
    - NewType wrappers are transparent at runtime
    - Identifier alphabet is ASCII digits plus X
    - DEFAULT_CURRENCY satisfies the currency rule
"""

from bookstore.core.domain_types import (
    CurrencyCode, Isbn, Isni,
    DEFAULT_CURRENCY, IDENTIFIER_CHARACTERS,
    ISBN_LENGTH, ISNI_LENGTH, CURRENCY_CODE_LENGTH,
)
from bookstore.core.validators import validate_currency


def test_identity_types_wrap_str():
    assert Isbn("0306406152") == "0306406152"
    assert Isni("000000012146438X") == "000000012146438X"
    assert CurrencyCode("USD") == "USD"


def test_lengths():
    assert ISBN_LENGTH == 10
    assert ISNI_LENGTH == 16
    assert CURRENCY_CODE_LENGTH == 3


def test_identifier_alphabet():
    assert IDENTIFIER_CHARACTERS == frozenset("0123456789X")


def test_default_currency_is_valid():
    assert DEFAULT_CURRENCY == "USD"
    assert validate_currency(DEFAULT_CURRENCY)
