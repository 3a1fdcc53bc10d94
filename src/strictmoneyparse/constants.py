"""Shared constants for strict-money-parse.

Single source of truth for option defaults, heuristic thresholds and
candidate scoring weights. Placing them here keeps the parsing modules free
of magic numbers and avoids circular imports between options and parsing.

Python 3.13+. Zero external dependencies.
"""

from .enums import Domain

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Option defaults
    "DEFAULT_DOMAIN",
    "DEFAULT_MAX_SYMBOL_DISTANCE",
    "DEFAULT_IGNORE_PERCENTAGES",
    "DEFAULT_MAX_CANDIDATES",
    "DOMAIN_MAX_FRACTION_DIGITS",
    # Heuristics
    "ISO_CURRENCY_CODE_LENGTH",
    "PHONE_MIN_DIGITS",
    "THOUSANDS_GROUP_DIGITS",
    # Scoring
    "SCORE_BASE",
    "SCORE_CONFIRMED",
    "SCORE_AMBIGUOUS",
    "SCORE_ISO_EVIDENCE",
    "SCORE_PRICE_KEYWORD",
    "KEYWORD_WINDOW_BEFORE",
    "KEYWORD_WINDOW_AFTER",
    "PRICE_KEYWORDS",
]

# ============================================================================
# OPTION DEFAULTS
# ============================================================================

DEFAULT_DOMAIN: Domain = Domain.PRICE

# Characters searched on each side of a numeric token for currency marks.
# 6 covers "US $ " style prefixes and " грн." style suffixes.
DEFAULT_MAX_SYMBOL_DISTANCE: int = 6

DEFAULT_IGNORE_PERCENTAGES: bool = True

DEFAULT_MAX_CANDIDATES: int = 10

# Domain -> default maximum fraction digits. Advisory only: the separator
# heuristic never drops fraction digits because of this threshold.
DOMAIN_MAX_FRACTION_DIGITS: dict[Domain, int] = {
    Domain.PRICE: 2,
    Domain.FX: 4,
    Domain.CRYPTO: 8,
}

# ============================================================================
# HEURISTICS
# ============================================================================

# ISO 4217 alphabetic codes are exactly 3 uppercase ASCII letters.
ISO_CURRENCY_CODE_LENGTH: int = 3

# A token with this many digits or more is treated as a phone number.
PHONE_MIN_DIGITS: int = 10

# A single separator followed by exactly this many digits is a thousands
# separator ("1.234" -> 1234).
THOUSANDS_GROUP_DIGITS: int = 3

# ============================================================================
# CANDIDATE SCORING
# ============================================================================

SCORE_BASE: int = 10
SCORE_CONFIRMED: int = 50
SCORE_AMBIGUOUS: int = 20
SCORE_ISO_EVIDENCE: int = 30
SCORE_PRICE_KEYWORD: int = 10

# Keyword search span around a candidate start offset in the original text.
KEYWORD_WINDOW_BEFORE: int = 50
KEYWORD_WINDOW_AFTER: int = 100

PRICE_KEYWORDS: tuple[str, ...] = (
    "price",
    "cost",
    "total",
    "subtotal",
    "amount",
    "sum",
    "pay",
    "payment",
)
