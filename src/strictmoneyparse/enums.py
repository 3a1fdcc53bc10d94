"""Enumerations for strict-money-parse type-safe constants.

Uses StrEnum so members compare equal to their wire strings:
CurrencyStatus.CONFIRMED == "CONFIRMED", Domain.PRICE == "price".

Python 3.13+.
"""

from enum import StrEnum


class CurrencyStatus(StrEnum):
    """Confidence ladder for currency identification, strongest first."""

    CONFIRMED = "CONFIRMED"
    """Currency identified with certainty (ISO code or unique symbol)."""

    AMBIGUOUS = "AMBIGUOUS"
    """Currency narrowed to a hint list but not resolved (e.g. bare $)."""

    UNKNOWN = "UNKNOWN"
    """No usable currency evidence."""


class Domain(StrEnum):
    """Presentation context selecting the default fraction-digit threshold."""

    PRICE = "price"
    """Retail prices: 2 fraction digits."""

    FX = "fx"
    """Exchange rates: 4 fraction digits."""

    CRYPTO = "crypto"
    """Crypto-asset amounts: 8 fraction digits."""


class RejectionReason(StrEnum):
    """Why a parse produced no amount."""

    NO_DIGITS = "no_digits"
    PHONE_NUMBER = "phone_number"
    DATE = "date"
    YEAR = "year"
    PERCENTAGE = "percentage"
    RANGE = "range"
    DIMENSIONS = "dimensions"
    UNPARSEABLE = "unparseable"


__all__ = [
    "CurrencyStatus",
    "Domain",
    "RejectionReason",
]
