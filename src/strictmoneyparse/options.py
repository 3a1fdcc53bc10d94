"""Parse configuration with documented defaults, validated once.

ParseOptions configures parse_price_string(); CandidateOptions adds the
result cap for parse_price_candidates(). Both are frozen: derive variants
with dataclasses.replace() or the keyword overrides accepted by the parse
functions.

Defaults (see constants.py):
    tables: default_currency_tables()
    domain: Domain.PRICE
    max_fraction_digits: domain threshold (price=2, fx=4, crypto=8)
    max_symbol_distance: 6
    ignore_percentages: True
    max_candidates: 10

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

from .constants import (
    DEFAULT_DOMAIN,
    DEFAULT_IGNORE_PERCENTAGES,
    DEFAULT_MAX_CANDIDATES,
    DEFAULT_MAX_SYMBOL_DISTANCE,
    DOMAIN_MAX_FRACTION_DIGITS,
)
from .enums import Domain
from .errors import InvalidOptionsError
from .tables import CurrencyTables, default_currency_tables

__all__ = ["CandidateOptions", "ParseOptions", "resolve_options"]


def _check_non_negative_int(name: str, value: object) -> None:
    # bool is an int subclass; True is not a distance
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidOptionsError(name, value, "expected an integer")
    if value < 0:
        raise InvalidOptionsError(name, value, "must be >= 0")


@dataclass(frozen=True, slots=True)
class ParseOptions:
    """Options for parse_price_string().

    Attributes:
        tables: Currency tables; None selects the cached defaults
        domain: Domain (or its string value) selecting the fraction threshold
        max_fraction_digits: Explicit fraction threshold overriding the domain
        max_symbol_distance: Characters searched on each side of the amount
        ignore_percentages: Reject text containing '%'

    Raises:
        InvalidOptionsError: On an unknown domain, a negative or non-integer
            count, or a non-bool flag
    """

    tables: CurrencyTables | None = None
    domain: Domain = DEFAULT_DOMAIN
    max_fraction_digits: int | None = None
    max_symbol_distance: int = DEFAULT_MAX_SYMBOL_DISTANCE
    ignore_percentages: bool = DEFAULT_IGNORE_PERCENTAGES

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "domain", Domain(self.domain))
        except ValueError:
            valid = ", ".join(d.value for d in Domain)
            raise InvalidOptionsError("domain", self.domain, f"expected one of {valid}") from None

        if self.tables is not None and not isinstance(self.tables, CurrencyTables):
            raise InvalidOptionsError("tables", self.tables, "expected CurrencyTables")
        if self.max_fraction_digits is not None:
            _check_non_negative_int("max_fraction_digits", self.max_fraction_digits)
        _check_non_negative_int("max_symbol_distance", self.max_symbol_distance)
        if not isinstance(self.ignore_percentages, bool):
            raise InvalidOptionsError("ignore_percentages", self.ignore_percentages, "expected a bool")

    @property
    def effective_tables(self) -> CurrencyTables:
        """Tables to parse with."""
        return self.tables if self.tables is not None else default_currency_tables()

    @property
    def fraction_digits(self) -> int:
        """Fraction-digit threshold: explicit value, else the domain default."""
        if self.max_fraction_digits is not None:
            return self.max_fraction_digits
        return DOMAIN_MAX_FRACTION_DIGITS[self.domain]


@dataclass(frozen=True, slots=True)
class CandidateOptions(ParseOptions):
    """Options for parse_price_candidates().

    Attributes:
        max_candidates: Maximum number of ranked candidates returned
    """

    max_candidates: int = DEFAULT_MAX_CANDIDATES

    def __post_init__(self) -> None:
        ParseOptions.__post_init__(self)
        _check_non_negative_int("max_candidates", self.max_candidates)

    def for_single_parse(self) -> ParseOptions:
        """Project onto the options of a single parse_price_string() call."""
        return ParseOptions(
            tables=self.tables,
            domain=self.domain,
            max_fraction_digits=self.max_fraction_digits,
            max_symbol_distance=self.max_symbol_distance,
            ignore_percentages=self.ignore_percentages,
        )


def resolve_options[T: ParseOptions](
    options: T | None,
    default_cls: type[T],
    overrides: dict[str, Any],
) -> T:
    """Combine an options object with keyword overrides.

    Args:
        options: Caller options, or None for defaults
        default_cls: Options class instantiated when options is None
        overrides: Keyword settings; they win over fields of options

    Returns:
        Validated options instance

    Raises:
        InvalidOptionsError: If a setting is invalid or unknown
    """
    known = {f.name for f in dataclasses.fields(default_cls)}
    for name in overrides:
        if name not in known:
            raise InvalidOptionsError(name, overrides[name], "unknown option")
    if options is None:
        return default_cls(**overrides)
    if not isinstance(options, default_cls):
        raise InvalidOptionsError("options", options, f"expected {default_cls.__name__}")
    return dataclasses.replace(options, **overrides) if overrides else options
