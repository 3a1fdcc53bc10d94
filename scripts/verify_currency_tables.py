#!/usr/bin/env python3
"""Verify the bundled currency tables against Babel CLDR data.

Checks:
    1. Structural: a symbol listed both as unique and as ambiguous (after
       whitespace removal); the resolver would never report it as ambiguous.
    2. Unknown codes: table codes CLDR does not know. Expected for local
       pound variants (GGP, IMP, JEP) and for codes newer than the
       installed CLDR release; anything else deserves a look.

Exit codes:
    0: No structural errors (unknown codes are warnings, not failures).
    1: Structural errors, or Babel is not installed.

Usage:
    verify_currency_tables.py [--verbose]

Python 3.13+. Requires Babel.
"""

from __future__ import annotations

import argparse
import sys


def _check_overlap(unique: list[str], ambiguous: list[str]) -> list[str]:
    """Find symbols whose whitespace-free forms appear in both maps."""
    from strictmoneyparse.tables.builder import compact  # noqa: PLC0415

    unique_forms = {compact(symbol): symbol for symbol in unique}
    return [
        f"  {symbol!r}: ambiguous, shadowed by unique {unique_forms[compact(symbol)]!r}"
        for symbol in ambiguous
        if compact(symbol) in unique_forms
    ]


def _print_section(header: str, explanation: str, lines: list[str]) -> None:
    """Print a report section if non-empty."""
    if not lines:
        return
    print(f"{header} ({len(lines)}):")
    print(f"  ({explanation})")
    for line in lines:
        print(line)
    print()


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Verify strict-money-parse currency tables against Babel CLDR data.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="List every table section, including those without findings.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run currency table verification checks."""
    args = _parse_args(argv)

    from strictmoneyparse.errors import BabelImportError  # noqa: PLC0415
    from strictmoneyparse.tables import default_currency_tables  # noqa: PLC0415
    from strictmoneyparse.tables.cldr import (  # noqa: PLC0415
        cldr_currency_codes,
        find_unknown_codes,
    )

    tables = default_currency_tables()
    try:
        known = cldr_currency_codes()
    except BabelImportError as e:
        print(f"[ERROR] {e}")
        return 1

    print("Currency Table Verification")
    print("=" * 50)
    print(f"ISO 4217 codes:    {len(tables.iso4217)}")
    print(f"Unique symbols:    {len(tables.unique_symbols)}")
    print(f"Ambiguous symbols: {len(tables.ambiguous_symbols)}")
    print(f"CLDR currencies:   {len(known)}")
    print()

    errors = _check_overlap(list(tables.unique_symbols), list(tables.ambiguous_hints))
    _print_section(
        "[ERROR] Structural errors",
        "Symbol is both unique and ambiguous",
        errors,
    )

    unknown = find_unknown_codes(tables)
    for section in ("iso4217", "unique_symbols", "ambiguous_hints"):
        codes = unknown.get(section, ())
        if codes or args.verbose:
            _print_section(
                f"[WARN] {section}: codes unknown to CLDR",
                "Local variants or codes newer than the installed CLDR release",
                [f"  {code}" for code in codes] or ["  (none)"],
            )

    if errors:
        print(f"[FAIL] {len(errors)} structural error(s) found.")
        print("[EXIT-CODE] 1")
        return 1

    total = sum(len(codes) for codes in unknown.values())
    if total:
        print(f"[PASS] {total} code(s) unknown to CLDR.")
    else:
        print("[PASS] All checks passed.")
    print("[EXIT-CODE] 0")
    return 0


if __name__ == "__main__":
    sys.exit(main())
