"""Immutable currency tables and the copy-on-write table builder.

CurrencyTables is the lookup contract consumed by the evidence resolver.
Instances are frozen: customizing a table always builds a new instance by
merging caller entries over the curated defaults, never by mutating a
shared object. The ambiguous-symbol set is derived from the hint map keys,
so the two cannot drift apart.

Thread-safe. Tables are read-only for their whole lifetime.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from strictmoneyparse.constants import ISO_CURRENCY_CODE_LENGTH
from strictmoneyparse.errors import CurrencyTableError

from .currency_data import AMBIGUOUS_HINTS, ISO_4217_CODES, UNIQUE_SYMBOLS

__all__ = [
    "CurrencyTables",
    "build_currency_tables",
    "compact",
    "default_currency_tables",
    "is_currency_code",
]

logger = logging.getLogger(__name__)


def compact(text: str) -> str:
    """Remove every whitespace character from text."""
    return "".join(text.split())


def is_currency_code(value: object) -> bool:
    """Check for exactly three uppercase ASCII letters."""
    return (
        isinstance(value, str)
        and len(value) == ISO_CURRENCY_CODE_LENGTH
        and value.isascii()
        and value.isalpha()
        and value.isupper()
    )


def _longest_first(symbols: Iterable[str]) -> tuple[str, ...]:
    # sorted() is stable: equal lengths keep table order
    return tuple(sorted(symbols, key=lambda s: len(compact(s)), reverse=True))


def _check_symbol(symbol: object, table: str) -> None:
    if not isinstance(symbol, str) or not compact(symbol):
        msg = f"{table}: symbol must be a non-blank string, got {symbol!r}"
        raise CurrencyTableError(msg)


def _check_code(code: object, context: str) -> None:
    if not is_currency_code(code):
        msg = f"{context}: currency code must be 3 uppercase letters, got {code!r}"
        raise CurrencyTableError(msg)


@dataclass(frozen=True, slots=True)
class CurrencyTables:
    """Currency lookup tables injected into the parsing engine.

    Attributes:
        iso4217: Valid ISO 4217 alphabetic codes
        unique_symbols: Symbol -> the single currency code it denotes
        ambiguous_hints: Symbol -> ordered candidate currency codes

    The constructor freezes its inputs (frozenset, read-only mappings,
    tuples) and validates every entry, raising CurrencyTableError on
    malformed data. Symbols are pre-sorted longest-first by their
    whitespace-free length for the evidence resolver.
    """

    iso4217: frozenset[str]
    unique_symbols: Mapping[str, str]
    ambiguous_hints: Mapping[str, tuple[str, ...]]
    unique_order: tuple[str, ...] = field(init=False, repr=False, compare=False)
    ambiguous_order: tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        iso = frozenset(self.iso4217)
        for code in iso:
            _check_code(code, "iso4217")

        unique = dict(self.unique_symbols)
        for symbol, code in unique.items():
            _check_symbol(symbol, "unique_symbols")
            _check_code(code, f"unique_symbols[{symbol!r}]")

        hints: dict[str, tuple[str, ...]] = {}
        for symbol, codes in self.ambiguous_hints.items():
            _check_symbol(symbol, "ambiguous_hints")
            if isinstance(codes, str):
                msg = f"ambiguous_hints[{symbol!r}]: expected a sequence of codes, got a string"
                raise CurrencyTableError(msg)
            frozen_codes = tuple(codes)
            if not frozen_codes:
                msg = f"ambiguous_hints[{symbol!r}]: hint list must not be empty"
                raise CurrencyTableError(msg)
            for code in frozen_codes:
                _check_code(code, f"ambiguous_hints[{symbol!r}]")
            hints[symbol] = frozen_codes

        object.__setattr__(self, "iso4217", iso)
        object.__setattr__(self, "unique_symbols", MappingProxyType(unique))
        object.__setattr__(self, "ambiguous_hints", MappingProxyType(hints))
        object.__setattr__(self, "unique_order", _longest_first(unique))
        object.__setattr__(self, "ambiguous_order", _longest_first(hints))

    @property
    def ambiguous_symbols(self) -> frozenset[str]:
        """Symbols shared by several currencies (the hint map key set)."""
        return frozenset(self.ambiguous_hints)


def build_currency_tables(
    *,
    iso4217: Iterable[str] | None = None,
    unique_symbols: Mapping[str, str] | None = None,
    ambiguous_hints: Mapping[str, Iterable[str]] | None = None,
) -> CurrencyTables:
    """Build currency tables, merging custom entries over the defaults.

    Merge rules:
        - unique_symbols and ambiguous_hints are shallow-merged; custom
          entries override or extend the defaults
        - iso4217 is replaced wholesale when given
        - the ambiguous-symbol set is always derived from the merged hints

    Args:
        iso4217: Replacement ISO 4217 code set
        unique_symbols: Extra or overriding symbol -> code entries
        ambiguous_hints: Extra or overriding symbol -> hint list entries

    Returns:
        New immutable CurrencyTables. Defaults are never modified.

    Raises:
        CurrencyTableError: If any merged entry is malformed

    Examples:
        >>> tables = build_currency_tables(unique_symbols={"TEST": "TST"})
        >>> tables.unique_symbols["TEST"], tables.unique_symbols["\\u20ac"]
        ('TST', 'EUR')
        >>> "X" in build_currency_tables(ambiguous_hints={"X": ["XAA"]}).ambiguous_symbols
        True
    """
    hints: dict[str, Iterable[str]] = dict(AMBIGUOUS_HINTS)
    if ambiguous_hints:
        hints.update(ambiguous_hints)

    tables = CurrencyTables(
        iso4217=ISO_4217_CODES if iso4217 is None else frozenset(iso4217),
        unique_symbols={**UNIQUE_SYMBOLS, **(unique_symbols or {})},
        ambiguous_hints=hints,  # type: ignore[arg-type]  # frozen to tuples by CurrencyTables
    )
    logger.debug(
        "Built currency tables: %d ISO codes, %d unique symbols, %d ambiguous symbols",
        len(tables.iso4217),
        len(tables.unique_symbols),
        len(tables.ambiguous_hints),
    )
    return tables


@functools.cache
def default_currency_tables() -> CurrencyTables:
    """Get the curated default tables (built once per process).

    Safe to share: the returned instance is immutable.
    """
    return build_currency_tables()
