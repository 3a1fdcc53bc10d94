"""CLDR cross-checks for currency tables via Babel.

Optional helpers for auditing a CurrencyTables instance against Unicode
CLDR currency data. The parsing engine never calls these; they back the
verify_currency_tables script and let callers build tables whose ISO code
set comes from CLDR instead of the bundled list.

Requires the babel extra:
    pip install strict-money-parse[babel]

Without Babel, every helper raises BabelImportError.

Python 3.13+. Babel is optional dependency.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

from strictmoneyparse.errors import BabelImportError

from .builder import is_currency_code

if TYPE_CHECKING:
    from .builder import CurrencyTables

__all__ = [
    "cldr_currency_codes",
    "find_unknown_codes",
    "is_babel_available",
    "require_babel",
]

logger = logging.getLogger(__name__)


@functools.lru_cache(maxsize=1)
def is_babel_available() -> bool:
    """Check if Babel is installed (computed once, cached)."""
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


def require_babel(feature: str) -> None:
    """Raise BabelImportError unless Babel is installed.

    Args:
        feature: Name of the calling helper, used in the error message
    """
    if not is_babel_available():
        raise BabelImportError(feature)


@functools.cache
def cldr_currency_codes() -> frozenset[str]:
    """Get every ISO 4217 code known to CLDR, including historical ones.

    Returns:
        Frozenset of 3-letter codes from babel.numbers.list_currencies()

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("cldr_currency_codes")
    from babel.numbers import list_currencies  # noqa: PLC0415

    codes = frozenset(code for code in list_currencies() if is_currency_code(code))
    logger.debug("Loaded %d currency codes from CLDR", len(codes))
    return codes


def find_unknown_codes(tables: CurrencyTables) -> dict[str, tuple[str, ...]]:
    """List table currency codes that CLDR does not know.

    Checks the ISO code set, unique-symbol targets and every hint list.
    Unknown codes are not necessarily wrong (GGP, IMP and JEP are local
    pound variants outside ISO 4217) but deserve a look.

    Args:
        tables: Tables to audit

    Returns:
        Mapping of table section -> sorted unknown codes; sections without
        findings are omitted

    Raises:
        BabelImportError: If Babel is not installed
    """
    known = cldr_currency_codes()
    hint_codes = {code for codes in tables.ambiguous_hints.values() for code in codes}
    sections = {
        "iso4217": set(tables.iso4217),
        "unique_symbols": set(tables.unique_symbols.values()),
        "ambiguous_hints": hint_codes,
    }
    return {
        name: tuple(sorted(codes - known))
        for name, codes in sections.items()
        if codes - known
    }
