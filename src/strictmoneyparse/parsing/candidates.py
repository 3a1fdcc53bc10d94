"""Multi-candidate price scanning and ranking.

parse_price_candidates() finds every numeric run in a longer text, re-parses
each one on its own local context (the run plus max_symbol_distance
characters on each side), keeps those that produced an amount, scores
them and returns the best ones.

Scoring:
    +10  base (every retained candidate has an amount)
    +50  CONFIRMED, or +20 AMBIGUOUS
    +30  evidence carries an ISO code
    +10  a price keyword within 50 characters before / 100 after the start

Ranking is by descending score, then ascending start offset: a total
order that does not rely on sort stability.

Thread-safe. Pure function of (text, options).

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Unpack

from strictmoneyparse.constants import (
    KEYWORD_WINDOW_AFTER,
    KEYWORD_WINDOW_BEFORE,
    PRICE_KEYWORDS,
    SCORE_AMBIGUOUS,
    SCORE_BASE,
    SCORE_CONFIRMED,
    SCORE_ISO_EVIDENCE,
    SCORE_PRICE_KEYWORD,
)
from strictmoneyparse.enums import CurrencyStatus
from strictmoneyparse.options import CandidateOptions, resolve_options
from strictmoneyparse.results import Candidate

from .price import ParseSettings, parse_with_options
from .tokens import iter_numeric_tokens

if TYPE_CHECKING:
    from strictmoneyparse.results import ParseResult

__all__ = ["CandidateSettings", "has_price_keyword", "parse_price_candidates", "score_candidate"]

logger = logging.getLogger(__name__)

_STATUS_SCORES: dict[CurrencyStatus, int] = {
    CurrencyStatus.CONFIRMED: SCORE_CONFIRMED,
    CurrencyStatus.AMBIGUOUS: SCORE_AMBIGUOUS,
    CurrencyStatus.UNKNOWN: 0,
}


class CandidateSettings(ParseSettings, total=False):
    """Keyword overrides accepted by parse_price_candidates()."""

    max_candidates: int


def has_price_keyword(text: str, start: int) -> bool:
    """Check for a price keyword near offset start (case-insensitive)."""
    context = text[max(0, start - KEYWORD_WINDOW_BEFORE) : start + KEYWORD_WINDOW_AFTER].lower()
    return any(keyword in context for keyword in PRICE_KEYWORDS)


def score_candidate(result: ParseResult, text: str, start: int) -> int:
    """Score a parse result found at offset start of text.

    Args:
        result: Parse result of the candidate's local context
        text: The full scanned text (keyword search runs here)
        start: Candidate start offset in text

    Returns:
        Integer score; higher ranks first
    """
    score = SCORE_BASE if result.raw_amount is not None else 0
    score += _STATUS_SCORES[result.status]
    if result.evidence.iso_code_found:
        score += SCORE_ISO_EVIDENCE
    if has_price_keyword(text, start):
        score += SCORE_PRICE_KEYWORD
    return score


def parse_price_candidates(
    text: str,
    options: CandidateOptions | None = None,
    /,
    **settings: Unpack[CandidateSettings],
) -> list[Candidate]:
    """Find, score and rank every price-like amount in a text.

    Each numeric run is parsed independently on its local context, so a
    false positive elsewhere in the text does not suppress it. Runs that
    yield no amount (phone numbers, dates, ranges...) are dropped.

    Args:
        text: Text to scan
        options: Candidate options; defaults apply when omitted
        **settings: Individual option overrides, including max_candidates

    Returns:
        Up to max_candidates candidates, best first

    Raises:
        TypeError: If text is not a string
        InvalidOptionsError: If an option is invalid

    Example:
        >>> ranked = parse_price_candidates("Item costs $50, shipping is \\u20ac10, total is 60 USD")
        >>> [(c.raw_amount, c.currency) for c in ranked]
        [(10.0, 'EUR'), (60.0, 'USD'), (50.0, None)]
    """
    if not isinstance(text, str):
        msg = f"text must be str, got {type(text).__name__}"
        raise TypeError(msg)
    resolved = resolve_options(options, CandidateOptions, dict(settings))
    single = resolved.for_single_parse()
    distance = resolved.max_symbol_distance

    candidates: list[Candidate] = []
    for token in iter_numeric_tokens(text):
        context = text[max(0, token.start - distance) : token.end + distance]
        result = parse_with_options(context, single)
        if result.raw_amount is None:
            continue
        candidates.append(
            Candidate(
                raw_amount=result.raw_amount,
                resolution=result.resolution,
                evidence=result.evidence,
                score=score_candidate(result, text, token.start),
                index_start=token.start,
                index_end=token.end,
            )
        )

    candidates.sort(key=lambda candidate: (-candidate.score, candidate.index_start))
    logger.debug("Scanned %d candidates, returning up to %d", len(candidates), resolved.max_candidates)
    return candidates[: resolved.max_candidates]
