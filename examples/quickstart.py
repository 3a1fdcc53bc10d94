"""Quickstart example for strict-money-parse.

This example demonstrates extracting amounts and currencies from price text.

Note: Examples print the evidence trail for illustration. In production,
check result.status before trusting result.currency.
"""

import json

from strictmoneyparse import (
    CurrencyStatus,
    ParseOptions,
    build_currency_tables,
    parse_price_candidates,
    parse_price_string,
)

# Example 1: Confirmed currency
print("=" * 50)
print("Example 1: Confirmed Currency")
print("=" * 50)

result = parse_price_string("US$ 1,299.00")
print(result.status, result.raw_amount, result.currency)
# Output: CONFIRMED 1299.0 USD

result = parse_price_string("1.234,56 €")
print(result.status, result.raw_amount, result.currency)
# Output: CONFIRMED 1234.56 EUR

# Example 2: Ambiguous symbols never guess
print("\n" + "=" * 50)
print("Example 2: Ambiguous Symbol")
print("=" * 50)

result = parse_price_string("$100")
print(result.status, result.raw_amount, result.currency)
print("Hints:", ", ".join(result.currency_hints[:3]), "...")
# Output: AMBIGUOUS 100.0 None
# Output: Hints: USD, CAD, AUD ...

# An ISO code anywhere in the text settles it
result = parse_price_string("$100 CAD")
print(result.status, result.currency)
# Output: CONFIRMED CAD

# Example 3: Things that look like numbers but are not prices
print("\n" + "=" * 50)
print("Example 3: False Positives")
print("=" * 50)

for text in ("2024-12-25", "Call +1-234-567-8900", "Copyright 2026", "50% off"):
    result = parse_price_string(text)
    print(f"{text!r:28} -> amount={result.raw_amount} ({result.evidence.rejection})")

# Example 4: Domains and fraction digits
print("\n" + "=" * 50)
print("Example 4: Domains")
print("=" * 50)

for domain in ("price", "fx", "crypto"):
    result = parse_price_string("0.00012345 BTC", domain=domain)
    print(f"{domain:7} -> {result.raw_amount}")

# Example 5: Ranking candidates in longer text
print("\n" + "=" * 50)
print("Example 5: Candidates")
print("=" * 50)

text = "Item costs $50, shipping is €10, total is 60 USD"
for candidate in parse_price_candidates(text):
    print(f"score={candidate.score:3} amount={candidate.raw_amount} currency={candidate.currency}")
# Output: score=100 amount=10.0 currency=EUR
# Output: score=100 amount=60.0 currency=USD
# Output: score= 40 amount=50.0 currency=None

# Example 6: Custom tables
print("\n" + "=" * 50)
print("Example 6: Custom Currency Tables")
print("=" * 50)

tables = build_currency_tables(
    iso4217={"BTC", "USD"},
    unique_symbols={"₿": "BTC"},
)
options = ParseOptions(domain="crypto", tables=tables)
result = parse_price_string("₿0.00420000", options)
print(result.status, result.raw_amount, result.currency)
assert result.status is CurrencyStatus.CONFIRMED

# Example 7: Serialization
print("\n" + "=" * 50)
print("Example 7: JSON Output")
print("=" * 50)

print(json.dumps(parse_price_string("Price: 49,99 zł").to_dict(), indent=2, ensure_ascii=False))
