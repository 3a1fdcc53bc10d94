"""Single-string price parsing.

parse_price_string() composes the pipeline:
normalize -> extract token -> reject false positives -> disambiguate
separators -> resolve currency evidence.

Never raises for string input: a missing token, a false positive or an
unparseable token all yield an UNKNOWN result with no amount, and the
evidence trail records how far the parse got.

Thread-safe. Pure function of (text, options).

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypedDict, Unpack

from strictmoneyparse.enums import Domain, RejectionReason
from strictmoneyparse.options import ParseOptions, resolve_options
from strictmoneyparse.results import Confirmed, Evidence, ParseResult, Unknown

from .evidence import resolve_currency_evidence
from .false_positives import classify_false_positive
from .normalize import normalize_text
from .separators import parse_amount_token
from .tokens import find_numeric_token

if TYPE_CHECKING:
    from strictmoneyparse.tables import CurrencyTables

__all__ = ["ParseSettings", "parse_price_string"]

logger = logging.getLogger(__name__)


class ParseSettings(TypedDict, total=False):
    """Keyword overrides accepted by parse_price_string()."""

    tables: CurrencyTables | None
    domain: Domain | str
    max_fraction_digits: int | None
    max_symbol_distance: int
    ignore_percentages: bool


def _unknown(evidence: Evidence) -> ParseResult:
    return ParseResult(raw_amount=None, resolution=Unknown(), evidence=evidence)


def _reject(evidence: Evidence, reason: RejectionReason) -> ParseResult:
    logger.debug("No amount in %r: %s", evidence.normalized_text, reason)
    return _unknown(
        Evidence(
            matched_text=evidence.matched_text,
            normalized_text=evidence.normalized_text,
            amount_token=evidence.amount_token,
            rejection=reason,
        )
    )


def parse_with_options(text: str, options: ParseOptions) -> ParseResult:
    """Run the parse pipeline with already-validated options."""
    normalized = normalize_text(text)
    evidence = Evidence(matched_text=text, normalized_text=normalized)

    token = find_numeric_token(normalized)
    if token is None:
        return _reject(evidence, RejectionReason.NO_DIGITS)

    evidence = Evidence(
        matched_text=text, normalized_text=normalized, amount_token=token.text
    )

    reason = classify_false_positive(
        normalized, token.text, ignore_percentages=options.ignore_percentages
    )
    if reason is not None:
        return _reject(evidence, reason)

    amount = parse_amount_token(token.text, options.fraction_digits)
    if amount is None:
        return _reject(evidence, RejectionReason.UNPARSEABLE)

    resolution = resolve_currency_evidence(
        normalized,
        token.start,
        len(token.text),
        options.effective_tables,
        options.max_symbol_distance,
    )
    evidence = Evidence(
        matched_text=text,
        normalized_text=normalized,
        amount_token=token.text,
        iso_code_found=resolution.currency if isinstance(resolution, Confirmed) else None,
        symbol_found=None if isinstance(resolution, Unknown) else resolution.symbol,
    )
    return ParseResult(raw_amount=amount, resolution=resolution, evidence=evidence)


def parse_price_string(
    text: str,
    options: ParseOptions | None = None,
    /,
    **settings: Unpack[ParseSettings],
) -> ParseResult:
    """Extract an amount and infer its currency from a text fragment.

    Args:
        text: Text fragment, e.g. "1.234,56 \\u20ac" or "US$ 1,299.00"
        options: Parse options; defaults apply when omitted
        **settings: Individual option overrides (tables, domain,
            max_fraction_digits, max_symbol_distance, ignore_percentages)

    Returns:
        ParseResult with status, amount, currency fields and evidence

    Raises:
        TypeError: If text is not a string
        InvalidOptionsError: If an option is invalid

    Examples:
        >>> result = parse_price_string("279,990 \\u062f.\\u0643")
        >>> result.status, result.raw_amount, result.currency
        (<CurrencyStatus.CONFIRMED: 'CONFIRMED'>, 279990.0, 'KWD')

        >>> result = parse_price_string("7.419,99 Lei")
        >>> result.status, result.raw_amount, result.currency_hints
        (<CurrencyStatus.AMBIGUOUS: 'AMBIGUOUS'>, 7419.99, ('RON', 'MDL'))

        >>> parse_price_string("229,-").raw_amount
        229.0

        >>> parse_price_string("").raw_amount is None
        True
    """
    if not isinstance(text, str):
        msg = f"text must be str, got {type(text).__name__}"
        raise TypeError(msg)
    return parse_with_options(text, resolve_options(options, ParseOptions, dict(settings)))
