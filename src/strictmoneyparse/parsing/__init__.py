"""Price parsing engine.

Public API:
    parse_price_string - Parse one text fragment into a ParseResult
    parse_price_candidates - Scan a longer text for ranked Candidates
    score_candidate - Candidate scoring function

Building blocks (usable on their own):
    normalize_text - Whitespace and apostrophe canonicalization
    find_numeric_token / iter_numeric_tokens - Numeric run extraction
    classify_false_positive - Phone/date/year/percent/range/dimension filter
    parse_amount_token - Decimal vs thousands separator disambiguation
    resolve_currency_evidence - ISO code / symbol lookup around a token

Functions never raise for string input; failures are UNKNOWN results.
"""

from .candidates import parse_price_candidates, score_candidate
from .evidence import resolve_currency_evidence
from .false_positives import classify_false_positive
from .normalize import normalize_text
from .price import parse_price_string
from .separators import parse_amount_token
from .tokens import NumericToken, find_numeric_token, iter_numeric_tokens

__all__ = [
    "NumericToken",
    "classify_false_positive",
    "find_numeric_token",
    "iter_numeric_tokens",
    "normalize_text",
    "parse_amount_token",
    "parse_price_candidates",
    "parse_price_string",
    "resolve_currency_evidence",
    "score_candidate",
]
