"""Curated currency data consumed by the parsing engine.

Static, already-validated provider data:
- ISO_4217_CODES: current ISO 4217 alphabetic codes (SIX list one)
- UNIQUE_SYMBOLS: marks that map to exactly one currency
- AMBIGUOUS_HINTS: marks shared by several currencies, with an ordered hint
  list (the order is the canonical presentation order)

The set of ambiguous symbols is not stored here; CurrencyTables derives it
from the AMBIGUOUS_HINTS keys.

Python 3.13+. Zero external dependencies.
"""
# ruff: noqa: ERA001, RUF001 - Section comments are documentation; lookalike glyphs are data

__all__ = ["AMBIGUOUS_HINTS", "ISO_4217_CODES", "UNIQUE_SYMBOLS"]

ISO_4217_CODES: frozenset[str] = frozenset({
    "AED", "AFN", "ALL", "AMD", "ANG", "AOA", "ARS", "AUD", "AWG", "AZN",
    "BAM", "BBD", "BDT", "BGN", "BHD", "BIF", "BMD", "BND", "BOB", "BOV",
    "BRL", "BSD", "BTN", "BWP", "BYN", "BZD", "CAD", "CDF", "CHE", "CHF",
    "CHW", "CLF", "CLP", "CNY", "COP", "COU", "CRC", "CUC", "CUP", "CVE",
    "CZK", "DJF", "DKK", "DOP", "DZD", "EGP", "ERN", "ETB", "EUR", "FJD",
    "FKP", "GBP", "GEL", "GHS", "GIP", "GMD", "GNF", "GTQ", "GYD", "HKD",
    "HNL", "HTG", "HUF", "IDR", "ILS", "INR", "IQD", "IRR", "ISK", "JMD",
    "JOD", "JPY", "KES", "KGS", "KHR", "KMF", "KPW", "KRW", "KWD", "KYD",
    "KZT", "LAK", "LBP", "LKR", "LRD", "LSL", "LYD", "MAD", "MDL", "MGA",
    "MKD", "MMK", "MNT", "MOP", "MRU", "MUR", "MVR", "MWK", "MXN", "MXV",
    "MYR", "MZN", "NAD", "NGN", "NIO", "NOK", "NPR", "NZD", "OMR", "PAB",
    "PEN", "PGK", "PHP", "PKR", "PLN", "PYG", "QAR", "RON", "RSD", "RUB",
    "RWF", "SAR", "SBD", "SCR", "SDG", "SEK", "SGD", "SHP", "SLE", "SLL",
    "SOS", "SRD", "SSP", "STN", "SVC", "SYP", "SZL", "THB", "TJS", "TMT",
    "TND", "TOP", "TRY", "TTD", "TWD", "TZS", "UAH", "UGX", "USD", "USN",
    "UYI", "UYU", "UYW", "UZS", "VED", "VES", "VND", "VUV", "WST", "XAF",
    "XAG", "XAU", "XBA", "XBB", "XBC", "XBD", "XCD", "XCG", "XDR", "XOF",
    "XPD", "XPF", "XPT", "XSU", "XTS", "XUA", "XXX", "YER", "ZAR", "ZMW",
    "ZWG", "ZWL",
})

UNIQUE_SYMBOLS: dict[str, str] = {
    # Single-character currency signs
    "\u20ac": "EUR",  # Euro sign
    "\u20b4": "UAH",  # Hryvnia sign
    "\u20b8": "KZT",  # Tenge sign
    "\u20bc": "AZN",  # Manat sign
    "\u20be": "GEL",  # Lari sign
    "\u20aa": "ILS",  # New Shekel sign
    "\u058f": "AMD",  # Armenian Dram sign
    "\u0e3f": "THB",  # Thai Baht sign
    "\u20ab": "VND",  # Dong sign
    "\u20b1": "PHP",  # Peso sign
    "\u20b2": "PYG",  # Guarani sign
    "\u20a1": "CRC",  # Colon sign
    "\u20ae": "MNT",  # Tugrik sign
    "\u20a6": "NGN",  # Naira sign
    "\u20a9": "KRW",  # Won sign
    "\u20ba": "TRY",  # Turkish Lira sign
    "\u20b9": "INR",  # Indian Rupee sign
    "\u20bd": "RUB",  # Ruble sign
    "\u09f3": "BDT",  # Bengali Rupee (Taka) sign
    "\u17db": "KHR",  # Khmer Riel sign
    "\u20ad": "LAK",  # Kip sign
    "\u20b5": "GHS",  # Cedi sign
    # Arabic script
    "د.ك": "KWD",
    "ر.س.": "SAR",
    "ر.س": "SAR",
    # Letter-based marks, distinct in practice
    "Rp": "IDR",
    "RM": "MYR",
    "KSh": "KES",
    "Kč": "CZK",
    "zł": "PLN",
    "Ft": "HUF",
    "лв": "BGN",
    "лв.": "BGN",
    "грн": "UAH",
    "грн.": "UAH",
    "TL": "TRY",
    "ALL": "ALL",
    "DH": "MAD",
    "DA": "DZD",
    "DT": "TND",
    "KD": "KWD",
    "GH₵": "GHS",
    "so'm": "UZS",
    "so m": "UZS",  # apostrophe normalized to a space
    "so\u02bbm": "UZS",  # modifier letter turned comma
    "sum": "UZS",
    "Q": "GTQ",
    "RD$": "DOP",
    "RD $": "DOP",
    "S/": "PEN",
    "S /": "PEN",
    "$U": "UYU",
    "$ U": "UYU",
    "Bs": "BOB",
    "Bs.": "BOB",
    "K": "PGK",
    "VT": "VUV",
    "Rf": "MVR",
    "FJD$": "FJD",
    "FJD $": "FJD",
    "BDS$": "BBD",
    "BDS $": "BBD",
    # Disambiguated dollar forms
    "US$": "USD",
    "US $": "USD",
    "CA$": "CAD",
    "CA $": "CAD",
    "AU$": "AUD",
    "AU $": "AUD",
    "A$": "AUD",
    "A $": "AUD",
    "NZ$": "NZD",
    "NZ $": "NZD",
    "S$": "SGD",
    "S $": "SGD",
    "HK$": "HKD",
    "HK $": "HKD",
    "NT$": "TWD",
    "NT $": "TWD",
    "EC$": "XCD",
    "EC $": "XCD",
    "R$": "BRL",
    "R $": "BRL",
    # Disambiguated pound forms
    "E£": "EGP",
    "E £": "EGP",
    "£E": "EGP",
    "£ E": "EGP",
    "£S": "SYP",
    "£ S": "SYP",
    "S£": "SYP",
    "S £": "SYP",
    # Disambiguated yen/yuan forms
    "JP¥": "JPY",
    "JP ¥": "JPY",
    "CN¥": "CNY",
    "CN ¥": "CNY",
    # CJK
    "\u5186": "JPY",  # Yen ideograph
}

AMBIGUOUS_HINTS: dict[str, tuple[str, ...]] = {
    # Bare dollar sign: the practical set of dollar-sign currencies
    "$": (
        "USD", "CAD", "AUD", "NZD", "SGD", "HKD", "MXN", "ARS", "CLP",
        "COP", "BBD", "BMD", "BND", "BZD", "FJD", "GYD", "KYD", "LRD",
        "NAD", "SRD", "TTD", "XCD", "BSD", "JMD", "SBD",
    ),
    # Yen/Yuan, half- and full-width
    "¥": ("JPY", "CNY"),  # Yen sign
    "￥": ("JPY", "CNY"),  # Fullwidth yen sign
    # Pound sign family
    "£": ("GBP", "FKP", "GIP", "SHP", "LBP", "EGP", "SYP", "GGP", "IMP", "JEP"),
    # Krona/Krone
    "kr": ("DKK", "NOK", "SEK", "ISK"),
    # Romania and Moldova
    "Lei": ("RON", "MDL"),
    "Leu": ("RON", "MDL"),
    # Canada and Costa Rica in the wild
    "C$": ("CAD", "CRC"),
    # Rand (R$ is BRL, listed as unique)
    "R": ("ZAR", "ZWL"),
    # Cyrillic ruble abbreviations (Belarus/Russia)
    "р.": ("BYN", "RUB"),
    "р": ("BYN", "RUB"),
    # Franc and rupee families
    "Fr": ("CHF", "XAF", "XOF", "XPF", "DJF"),
    "\u20a8": ("INR", "PKR", "LKR", "NPR", "SCR"),  # Rupee sign
    "Rs.": ("PKR", "INR", "LKR", "NPR", "SCR", "MUR"),
    "Rs": ("PKR", "INR", "LKR", "NPR", "SCR", "MUR"),
}
