"""Separator disambiguation: which mark is the decimal point.

Rules, in order:

1. Both '.' and ',' present: the one occurring last is the decimal
   separator, the other groups thousands.
2. Exactly one kind present: count the digits after its last occurrence.
   - 1-2 digits: decimal ("45,5" -> 45.5)
   - exactly 3: thousands ("1.234" -> 1234), whatever the threshold
   - 4 or more: decimal ("1.23456" -> 1.23456); precision is never dropped
   - none: dangling noise, no fraction
   - a space, quote or underscore after it: thousands ("1,5 000" -> 15000)
3. Neither present: integer.
4. Whitespace, quotes and underscores only ever group thousands.

The three-digit rule misreads a genuine three-decimal value such as a
crypto amount "1.234"; callers depend on the documented behavior, so it
stays.

Python 3.13+. Zero external dependencies.
"""

import logging
import math

from strictmoneyparse.constants import THOUSANDS_GROUP_DIGITS

from .cursor import is_digit

__all__ = ["find_decimal_separator", "parse_amount_token"]

logger = logging.getLogger(__name__)


def _digits(text: str) -> str:
    return "".join(char for char in text if is_digit(char))


def find_decimal_separator(token: str) -> int | None:
    """Locate the decimal separator in a numeric token.

    Args:
        token: Numeric token as produced by the token extractor

    Returns:
        Index of the decimal separator, or None if every mark groups thousands
    """
    last_dot = token.rfind(".")
    last_comma = token.rfind(",")

    if last_dot != -1 and last_comma != -1:
        return max(last_dot, last_comma)
    if last_dot == -1 and last_comma == -1:
        return None

    index = max(last_dot, last_comma)
    tail = token[index + 1 :]
    # Grouping marks only occur in the integer part
    if not all(is_digit(char) for char in tail):
        return None
    fraction_length = len(tail)
    if fraction_length in (0, THOUSANDS_GROUP_DIGITS):
        return None
    return index


def parse_amount_token(token: str, max_fraction_digits: int) -> float | None:
    """Parse a numeric token to a float, deciding decimal vs thousands marks.

    Args:
        token: Numeric token, e.g. "1.234,56" or "2 499"
        max_fraction_digits: Domain fraction threshold. Advisory: longer
            fractions are kept, never truncated or reinterpreted

    Returns:
        Finite float, or None if no number can be formed

    Examples:
        >>> parse_amount_token("1,234.56", 2)
        1234.56
        >>> parse_amount_token("1.234,56", 2)
        1234.56
        >>> parse_amount_token("1.234", 2)
        1234.0
        >>> parse_amount_token("0.00005432", 2)
        5.432e-05
        >>> parse_amount_token("2 499", 2)
        2499.0
    """
    separator = find_decimal_separator(token)
    if separator is None:
        integer_part, fraction_part = _digits(token), ""
    else:
        integer_part = _digits(token[:separator])
        fraction_part = _digits(token[separator + 1 :])

    if not integer_part and not fraction_part:
        return None
    if len(fraction_part) > max_fraction_digits:
        logger.debug(
            "Token %r keeps %d fraction digits (threshold %d)",
            token,
            len(fraction_part),
            max_fraction_digits,
        )

    value = float(f"{integer_part or '0'}.{fraction_part or '0'}")
    return value if math.isfinite(value) else None
