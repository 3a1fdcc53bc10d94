"""Currency tables: the data contract consumed by the parsing engine.

Public API:
    CurrencyTables - Immutable lookup tables (ISO codes, unique and ambiguous symbols)
    build_currency_tables - Copy-on-write merge of custom entries over the defaults
    default_currency_tables - Cached default instance

Optional (requires Babel):
    strictmoneyparse.tables.cldr - CLDR cross-checks
"""

from .builder import CurrencyTables, build_currency_tables, default_currency_tables

__all__ = [
    "CurrencyTables",
    "build_currency_tables",
    "default_currency_tables",
]
