"""strict-money-parse - Locale-agnostic price extraction with explicit uncertainty.

Extracts a monetary amount from an unstructured text fragment (scraped
e-commerce HTML, mixed-script listings) and infers its currency without
knowing the source locale. Separator conventions are disambiguated
heuristically, non-price numerics (phones, dates, years, percentages,
ranges, dimensions) are rejected, and the currency is graded CONFIRMED,
AMBIGUOUS or UNKNOWN instead of being guessed.

Public API:
    parse_price_string - Parse one text fragment
    parse_price_candidates - Find and rank every price in a longer text
    build_currency_tables - Customize the currency tables (copy-on-write)
    default_currency_tables - Cached default tables

Types:
    ParseResult, Candidate, Evidence - Results
    Confirmed, Ambiguous, Unknown - Currency resolution variants
    CurrencyTables - Lookup tables
    ParseOptions, CandidateOptions - Configuration
    CurrencyStatus, Domain, RejectionReason - Enumerations

Exceptions:
    StrictMoneyParseError - Base exception class
    InvalidOptionsError - Invalid configuration
    CurrencyTableError - Malformed custom table entry
    BabelImportError - CLDR helper used without Babel

Example:
    >>> from strictmoneyparse import parse_price_string
    >>> result = parse_price_string("US$ 1,299.00")
    >>> result.status, result.raw_amount, result.currency
    (<CurrencyStatus.CONFIRMED: 'CONFIRMED'>, 1299.0, 'USD')
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .enums import CurrencyStatus, Domain, RejectionReason
from .errors import (
    BabelImportError,
    CurrencyTableError,
    InvalidOptionsError,
    StrictMoneyParseError,
)
from .options import CandidateOptions, ParseOptions
from .parsing import parse_price_candidates, parse_price_string
from .results import Ambiguous, Candidate, Confirmed, Evidence, ParseResult, Unknown
from .tables import CurrencyTables, build_currency_tables, default_currency_tables

# Version information - SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("strict-money-parse")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Ambiguous",
    "BabelImportError",
    "Candidate",
    "CandidateOptions",
    "Confirmed",
    "CurrencyStatus",
    "CurrencyTableError",
    "CurrencyTables",
    "Domain",
    "Evidence",
    "InvalidOptionsError",
    "ParseOptions",
    "ParseResult",
    "RejectionReason",
    "StrictMoneyParseError",
    "Unknown",
    "__version__",
    "build_currency_tables",
    "default_currency_tables",
    "parse_price_candidates",
    "parse_price_string",
]
