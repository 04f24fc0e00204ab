"""Domain Types — rich types that replace bare primitives across the catalog core.

Invariants:
    - Isbn, Isni, CurrencyCode wrap str — never pass a raw str where an identifier is meant
    - IDENTIFIER_CHARACTERS is the single source of truth for ISBN/ISNI alphabets
    - DEFAULT_CURRENCY satisfies the currency-format rule (3 letters)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Identifier alphabet is ASCII-only while currency accepts any Unicode letter:
      the asymmetry is intentional and mirrored in validators
"""

from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

Isbn = NewType("Isbn", str)                 # ISBN-10, e.g. "0306406152"
Isni = NewType("Isni", str)                 # 16 chars, e.g. "000000012146438X"
CurrencyCode = NewType("CurrencyCode", str)  # 3 letters, e.g. "USD"


# ─── Format Constants ────────────────────────────────────────────

ISBN_LENGTH: int = 10
ISNI_LENGTH: int = 16
CURRENCY_CODE_LENGTH: int = 3

CHECK_CHARACTER: str = "X"
CHECK_CHARACTER_VALUE: int = 10
ASCII_DIGITS: str = "0123456789"
IDENTIFIER_CHARACTERS: frozenset[str] = frozenset(ASCII_DIGITS + CHECK_CHARACTER)

ISBN_CHECKSUM_MODULUS: int = 11

DEFAULT_CURRENCY: CurrencyCode = CurrencyCode("USD")


# ─── Rendering Constants ─────────────────────────────────────────

ISNI_NOT_SET_MARKER: str = "ISNI IS NOT SET"
ISNI_LOOKUP_BASE_URL: str = "https://isni.org/isni/"
ISBN_LOOKUP_BASE_URL: str = "https://isbnsearch.org/isbn/"
