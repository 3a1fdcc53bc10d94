"""Currency evidence resolution around a numeric token.

The evidence window is the left slice [start - distance, start) joined with
the right slice [end, end + distance), clipped to the text; marks inside
the token itself are never considered. Precedence, first match wins:

1. ISO code: a standalone 3-uppercase-letter word found in tables.iso4217
2. Unique symbol, longest first -> Confirmed
3. Ambiguous symbol, longest first -> Ambiguous with the table's hint list
4. Nothing -> Unknown

Symbol tests ignore whitespace on both sides, so "US $" in the text matches
the "US$" entry and "R $" matches "R$".

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterator

from strictmoneyparse.results import Ambiguous, Confirmed, CurrencyResolution, Unknown
from strictmoneyparse.tables import CurrencyTables
from strictmoneyparse.tables.builder import compact, is_currency_code

from .cursor import Cursor, is_word_char

__all__ = ["evidence_window", "find_iso_code", "resolve_currency_evidence"]

_UNKNOWN = Unknown()


def evidence_window(text: str, start: int, length: int, distance: int) -> str:
    """Build the search window around text[start:start + length]."""
    end = start + length
    return text[max(0, start - distance) : start] + text[end : end + distance]


def _words(window: str) -> Iterator[str]:
    """Yield maximal runs of ASCII word characters."""
    cursor = Cursor(window)
    while True:
        cursor = cursor.skip_while(lambda char: not is_word_char(char))
        if cursor.is_eof:
            return
        end = cursor.skip_while(is_word_char)
        yield cursor.slice_to(end.pos)
        cursor = end


def find_iso_code(window: str, iso4217: frozenset[str]) -> str | None:
    """First standalone 3-letter uppercase word in window that is a known ISO code."""
    for word in _words(window):
        if is_currency_code(word) and word in iso4217:
            return word
    return None


def _first_symbol(compact_window: str, symbols: tuple[str, ...]) -> str | None:
    for symbol in symbols:
        if compact(symbol) in compact_window:
            return symbol
    return None


def resolve_currency_evidence(
    text: str,
    start: int,
    length: int,
    tables: CurrencyTables,
    max_distance: int,
) -> CurrencyResolution:
    """Determine the currency of the token at text[start:start + length].

    Args:
        text: Normalized text containing the token
        start: Token offset
        length: Token length
        tables: Currency lookup tables
        max_distance: Characters searched on each side of the token

    Returns:
        Confirmed, Ambiguous or Unknown

    Examples:
        >>> from strictmoneyparse.tables import default_currency_tables
        >>> tables = default_currency_tables()
        >>> resolve_currency_evidence("US$100", 3, 3, tables, 6)
        Confirmed(currency='USD', symbol='US$')
        >>> resolve_currency_evidence("7.419,99 Lei", 0, 8, tables, 6)
        Ambiguous(symbol='Lei', hints=('RON', 'MDL'))
    """
    window = evidence_window(text, start, length, max_distance)

    iso_code = find_iso_code(window, tables.iso4217)
    if iso_code is not None:
        return Confirmed(iso_code)

    compact_window = compact(window)
    if not compact_window:
        return _UNKNOWN

    symbol = _first_symbol(compact_window, tables.unique_order)
    if symbol is not None:
        return Confirmed(tables.unique_symbols[symbol], symbol)

    symbol = _first_symbol(compact_window, tables.ambiguous_order)
    if symbol is not None:
        return Ambiguous(symbol, tables.ambiguous_hints[symbol])

    return _UNKNOWN
