"""Exception hierarchy for strict-money-parse.

Parsing itself never raises for string input: every failure is reported as
an UNKNOWN result with an evidence trail. Exceptions are reserved for
programming errors at configuration time (bad options, malformed custom
tables) and for the optional Babel-backed helpers.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "BabelImportError",
    "CurrencyTableError",
    "InvalidOptionsError",
    "StrictMoneyParseError",
]


class StrictMoneyParseError(Exception):
    """Base exception for all strict-money-parse errors."""


class InvalidOptionsError(StrictMoneyParseError, ValueError):
    """Parse options failed validation.

    Attributes:
        option: Name of the offending option
        value: The rejected value
    """

    def __init__(self, option: str, value: object, reason: str) -> None:
        """Initialize InvalidOptionsError.

        Args:
            option: Name of the offending option
            value: The rejected value
            reason: Human-readable explanation
        """
        super().__init__(f"Invalid option {option}={value!r}: {reason}")
        self.option = option
        self.value = value


class CurrencyTableError(StrictMoneyParseError, ValueError):
    """A custom currency table entry is malformed."""


class BabelImportError(StrictMoneyParseError, ImportError):
    """Raised when a CLDR helper is called without Babel installed."""

    def __init__(self, feature: str) -> None:
        """Initialize BabelImportError.

        Args:
            feature: Name of the helper that needed Babel
        """
        super().__init__(
            f"{feature} requires Babel for CLDR currency data. "
            "Install with: pip install strict-money-parse[babel]"
        )
        self.feature = feature
