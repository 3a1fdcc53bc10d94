"""Parse result types.

Currency resolution is a tagged union: Confirmed, Ambiguous or Unknown.
ParseResult joins it with the parsed amount and the evidence trail and
exposes the flat view (status, currency, symbol, currency_hints) as derived
properties, so contradictory combinations such as CONFIRMED without a
currency cannot be constructed.

All types are frozen, slotted dataclasses. Safe to share between threads.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar

from .enums import CurrencyStatus, RejectionReason

__all__ = [
    "Ambiguous",
    "Candidate",
    "Confirmed",
    "CurrencyResolution",
    "Evidence",
    "ParseResult",
    "Unknown",
]


@dataclass(frozen=True, slots=True)
class Confirmed:
    """Currency identified with certainty.

    Attributes:
        currency: ISO 4217 code
        symbol: Matched symbol, or None when a literal ISO code was found
    """

    status: ClassVar[CurrencyStatus] = CurrencyStatus.CONFIRMED

    currency: str
    symbol: str | None = None


@dataclass(frozen=True, slots=True)
class Ambiguous:
    """Symbol found but shared by several currencies.

    Attributes:
        symbol: Matched ambiguous symbol
        hints: Candidate ISO codes in table order (never empty)
    """

    status: ClassVar[CurrencyStatus] = CurrencyStatus.AMBIGUOUS

    symbol: str
    hints: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.hints:
            msg = f"Ambiguous symbol {self.symbol!r} needs at least one hint"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Unknown:
    """No currency evidence."""

    status: ClassVar[CurrencyStatus] = CurrencyStatus.UNKNOWN


type CurrencyResolution = Confirmed | Ambiguous | Unknown


@dataclass(frozen=True, slots=True)
class Evidence:
    """Audit trail of what was matched and why.

    matched_text and normalized_text are always set; the optional fields
    are filled only when the corresponding stage succeeded.

    Attributes:
        matched_text: Verbatim input
        normalized_text: Input after whitespace/quote normalization
        amount_token: Numeric token picked from normalized_text
        iso_code_found: ISO code of a CONFIRMED currency
        symbol_found: Matched currency symbol
        rejection: Why no amount was produced, if none was
    """

    matched_text: str
    normalized_text: str
    amount_token: str | None = None
    iso_code_found: str | None = None
    symbol_found: str | None = None
    rejection: RejectionReason | None = None

    def to_dict(self) -> dict[str, Any]:
        """Render as a camelCase mapping, omitting unset optional fields."""
        data: dict[str, Any] = {
            "matchedText": self.matched_text,
            "normalizedText": self.normalized_text,
        }
        optional = (
            ("amountToken", self.amount_token),
            ("isoCodeFound", self.iso_code_found),
            ("symbolFound", self.symbol_found),
            ("rejection", None if self.rejection is None else str(self.rejection)),
        )
        data.update((key, value) for key, value in optional if value is not None)
        return data


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Outcome of parsing one text fragment.

    Attributes:
        raw_amount: Parsed amount, or None if no valid numeric token survived
        resolution: Currency resolution (Confirmed, Ambiguous or Unknown)
        evidence: Audit trail

    Raises:
        ValueError: If raw_amount is None but the resolution is not Unknown
    """

    raw_amount: float | None
    resolution: CurrencyResolution
    evidence: Evidence

    def __post_init__(self) -> None:
        if self.raw_amount is None and not isinstance(self.resolution, Unknown):
            msg = "A result without an amount must have an Unknown resolution"
            raise ValueError(msg)

    @property
    def status(self) -> CurrencyStatus:
        """Confidence level of the currency identification."""
        return self.resolution.status

    @property
    def currency(self) -> str | None:
        """ISO code when CONFIRMED, else None."""
        match self.resolution:
            case Confirmed(currency=currency):
                return currency
            case _:
                return None

    @property
    def symbol(self) -> str | None:
        """Matched symbol, if any."""
        match self.resolution:
            case Confirmed(symbol=symbol) | Ambiguous(symbol=symbol):
                return symbol
            case _:
                return None

    @property
    def currency_hints(self) -> tuple[str, ...]:
        """Candidate codes when AMBIGUOUS, else empty."""
        match self.resolution:
            case Ambiguous(hints=hints):
                return hints
            case _:
                return ()

    def to_dict(self) -> dict[str, Any]:
        """Render in the camelCase wire shape for JSON consumers."""
        return {
            "status": str(self.status),
            "rawAmount": self.raw_amount,
            "currency": self.currency,
            "symbol": self.symbol,
            "currencyHints": list(self.currency_hints),
            "evidence": self.evidence.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class Candidate(ParseResult):
    """A scored parse result located in a longer text.

    Attributes:
        score: Ranking score (higher is better)
        index_start: Start offset of the numeric token in the scanned text
        index_end: End offset (exclusive)
    """

    score: int = field(kw_only=True)
    index_start: int = field(kw_only=True)
    index_end: int = field(kw_only=True)

    def to_dict(self) -> dict[str, Any]:
        """Render in the camelCase wire shape, including position and score."""
        data = ParseResult.to_dict(self)
        data.update(score=self.score, indexStart=self.index_start, indexEnd=self.index_end)
        return data
