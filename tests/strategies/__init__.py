"""Hypothesis strategies for strict-money-parse property-based testing.

Usage:
    from tests.strategies import formatted_amounts, unique_symbol_prices
    from tests.strategies.prices import ambiguous_symbol_prices

Event-Emitting Strategies (HypoFuzz-Optimized):
    - formatted_amounts: emits the number format style
    - unique_symbol_prices, ambiguous_symbol_prices: emit symbol placement
"""

from .prices import (
    ambiguous_symbol_prices,
    formatted_amounts,
    iso_code_prices,
    noisy_text,
    unique_symbol_prices,
)

__all__ = [
    "ambiguous_symbol_prices",
    "formatted_amounts",
    "iso_code_prices",
    "noisy_text",
    "unique_symbol_prices",
]
