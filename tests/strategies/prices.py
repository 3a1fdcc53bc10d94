"""Hypothesis strategies for price strings.

Amounts are generated as (integer, fraction) pairs and rendered in the
grouping styles seen in the wild, so every strategy knows the exact value
the parser must recover. Integers stay below 10 million and fractions at
one or two digits, which keeps generated tokens clear of the phone-number
and three-digit-fraction rules.

Python 3.13+.
"""

from __future__ import annotations

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

from strictmoneyparse.tables.currency_data import (
    AMBIGUOUS_HINTS,
    ISO_4217_CODES,
    UNIQUE_SYMBOLS,
)

# (name, thousands separator, decimal separator)
_STYLES: tuple[tuple[str, str, str], ...] = (
    ("plain", "", "."),
    ("us", ",", "."),
    ("eu", ".", ","),
    ("space_comma", " ", ","),
    ("nbsp_comma", "\u00a0", ","),
    ("swiss", "'", "."),
    ("underscore", "_", "."),
)


def _group(integer: int, separator: str) -> str:
    digits = str(integer)
    if not separator:
        return digits
    groups: list[str] = []
    while len(digits) > 3:
        groups.insert(0, digits[-3:])
        digits = digits[:-3]
    groups.insert(0, digits)
    return separator.join(groups)


@composite
def formatted_amounts(draw: st.DrawFn) -> tuple[str, float]:
    """Generate (amount text, expected value) in a random grouping style."""
    name, thousands, decimal = draw(st.sampled_from(_STYLES))
    integer = draw(st.integers(min_value=0, max_value=9_999_999))
    fraction = draw(st.one_of(st.just(""), st.from_regex(r"\A[0-9]{1,2}\Z")))
    event(f"style={name}")

    text = _group(integer, thousands)
    if fraction:
        text = f"{text}{decimal}{fraction}"
    return text, float(f"{integer}.{fraction or '0'}")


@composite
def unique_symbol_prices(draw: st.DrawFn) -> tuple[str, float, str]:
    """Generate (price text, expected value, expected currency) with a unique symbol."""
    symbol = draw(st.sampled_from(sorted(UNIQUE_SYMBOLS)))
    amount, value = draw(formatted_amounts())
    prefix = draw(st.booleans())
    event(f"placement={'prefix' if prefix else 'suffix'}")
    text = f"{symbol} {amount}" if prefix else f"{amount} {symbol}"
    return text, value, UNIQUE_SYMBOLS[symbol]


@composite
def ambiguous_symbol_prices(draw: st.DrawFn) -> tuple[str, float, str]:
    """Generate (price text, expected value, symbol) with an ambiguous symbol."""
    symbol = draw(st.sampled_from(sorted(AMBIGUOUS_HINTS)))
    amount, value = draw(formatted_amounts())
    prefix = draw(st.booleans())
    event(f"placement={'prefix' if prefix else 'suffix'}")
    text = f"{symbol} {amount}" if prefix else f"{amount} {symbol}"
    return text, value, symbol


@composite
def iso_code_prices(draw: st.DrawFn) -> tuple[str, float, str]:
    """Generate (price text, expected value, ISO code) with a literal code."""
    code = draw(st.sampled_from(sorted(ISO_4217_CODES)))
    amount, value = draw(formatted_amounts())
    if draw(st.booleans()):
        return f"{code} {amount}", value, code
    return f"{amount} {code}", value, code


def noisy_text() -> st.SearchStrategy[str]:
    """Arbitrary text biased toward digits, separators and currency marks."""
    alphabet = st.one_of(
        st.sampled_from("0123456789"),
        st.sampled_from(" .,'-/x%  ’"),
        st.sampled_from("$€£¥₴ USDEURkrLei"),
        st.characters(),
    )
    return st.text(alphabet=alphabet, max_size=80)
