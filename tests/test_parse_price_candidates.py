"""Tests for parse_price_candidates(): scanning, scoring and ranking."""

from __future__ import annotations

import pytest
from hypothesis import given

from strictmoneyparse import (
    Ambiguous,
    CandidateOptions,
    Confirmed,
    CurrencyStatus,
    Evidence,
    InvalidOptionsError,
    ParseOptions,
    ParseResult,
    Unknown,
    parse_price_candidates,
)
from strictmoneyparse.parsing.candidates import has_price_keyword, score_candidate
from tests.strategies import noisy_text

SCAN = "Item costs $50, shipping is €10, total is 60 USD"


def _result(resolution: Confirmed | Ambiguous | Unknown, iso: str | None = None) -> ParseResult:
    evidence = Evidence("x", "x", "1", iso_code_found=iso)
    return ParseResult(1.0, resolution, evidence)


class TestScoreCandidate:
    """Test the scoring rules in isolation."""

    def test_components(self) -> None:
        """Base, status, ISO evidence and keyword bonuses add up."""
        text = "plain 1"
        assert score_candidate(_result(Unknown()), text, 6) == 10
        assert score_candidate(_result(Ambiguous("$", ("USD",))), text, 6) == 30
        assert score_candidate(_result(Confirmed("EUR", "€")), text, 6) == 60
        assert score_candidate(_result(Confirmed("USD"), iso="USD"), text, 6) == 90
        assert score_candidate(_result(Confirmed("USD"), iso="USD"), "Total 1", 6) == 100

    def test_unknown_without_amount_scores_zero(self) -> None:
        """The base bonus needs an amount."""
        result = ParseResult(None, Unknown(), Evidence("x", "x"))
        assert score_candidate(result, "x", 0) == 0

    def test_confirmed_outranks_ambiguous(self) -> None:
        """Same amount and context: CONFIRMED > AMBIGUOUS > UNKNOWN."""
        text = "Price: 1"
        scores = [
            score_candidate(_result(resolution), text, 7)
            for resolution in (Confirmed("EUR", "€"), Ambiguous("$", ("USD",)), Unknown())
        ]
        assert scores == sorted(scores, reverse=True)
        assert len(set(scores)) == 3


class TestHasPriceKeyword:
    """Test keyword proximity."""

    @pytest.mark.parametrize("keyword", ["price", "COST", "Total", "subtotal", "amount",
                                         "sum", "pay", "payment"])
    def test_keywords(self, keyword: str) -> None:
        """Keywords match case-insensitively."""
        assert has_price_keyword(f"{keyword}: 10", len(keyword) + 2)

    def test_window_before(self) -> None:
        """Keywords more than 50 characters before the start are ignored."""
        text = "price" + " " * 50 + "10"
        assert not has_price_keyword(text, 55)
        assert has_price_keyword("price" + " " * 44 + "10", 49)

    def test_window_after(self) -> None:
        """Keywords up to 100 characters after the start count."""
        assert has_price_keyword("10" + " " * 90 + "total", 0)
        assert not has_price_keyword("10" + " " * 100 + "total", 0)


class TestParsePriceCandidates:
    """Test end-to-end scanning."""

    def test_mixed_currencies(self) -> None:
        """EUR and USD candidates are confirmed and outrank the ambiguous $50."""
        candidates = parse_price_candidates(SCAN)
        assert [(c.raw_amount, c.currency, c.score) for c in candidates] == [
            (10.0, "EUR", 100),
            (60.0, "USD", 100),
            (50.0, None, 40),
        ]
        assert candidates[2].status is CurrencyStatus.AMBIGUOUS
        assert candidates[2].symbol == "$"

    def test_positions(self) -> None:
        """Offsets locate the numeric run in the scanned text."""
        candidates = parse_price_candidates("Item costs €50")
        assert len(candidates) == 1
        candidate = candidates[0]
        assert (candidate.index_start, candidate.index_end) == (12, 14)
        assert "Item costs €50"[candidate.index_start : candidate.index_end] == "50"

    def test_confirmed_scores_higher(self) -> None:
        """A euro price outscores a dollar price.

        The dollar run is re-parsed on its own window "0 or $100", which starts
        inside the euro amount, so its amount comes from the trailing "0".
        """
        candidates = parse_price_candidates("Price: €100 or $100")
        euro = next(c for c in candidates if c.symbol == "€")
        dollar = next(c for c in candidates if c.symbol == "$")
        assert euro.score > dollar.score
        assert candidates[0] is euro
        assert (dollar.raw_amount, dollar.index_start, dollar.index_end) == (0.0, 16, 19)
        assert dollar.score == 40

    def test_keyword_boost(self) -> None:
        """The priced amount ranks first; the phone number is dropped."""
        candidates = parse_price_candidates("Price: $100. Phone: 1234567890.")
        assert candidates[0].raw_amount == 100
        assert all(c.raw_amount != 1234567890 for c in candidates)

    def test_false_positives_dropped(self) -> None:
        """Phone numbers never become candidates, and prices beside them survive."""
        candidates = parse_price_candidates("Call +1 234 567 8900 or pay $50")
        assert [c.raw_amount for c in candidates] == [50.0]

    def test_ties_break_by_position(self) -> None:
        """Equal scores keep ascending start offsets."""
        candidates = parse_price_candidates("€1, €2, €3, €4, €5, €6", max_candidates=3)
        assert [c.index_start for c in candidates] == [1, 5, 9]
        assert len({c.score for c in candidates}) == 1

    def test_max_candidates(self) -> None:
        """Results are capped, and a cap of zero yields nothing."""
        text = "€1, €2, €3, €4, €5, €6"
        assert len(parse_price_candidates(text)) == 6
        assert len(parse_price_candidates(text, CandidateOptions(max_candidates=5))) == 5
        assert parse_price_candidates(text, max_candidates=0) == []

    @pytest.mark.parametrize("text", ["", "Hello world, this is a test."])
    def test_nothing_found(self, text: str) -> None:
        """Text without prices yields an empty list."""
        assert parse_price_candidates(text) == []

    def test_candidates_are_independent(self) -> None:
        """A false positive elsewhere does not suppress a price."""
        text = "€99.99 Call: +1-234-567-8900"
        candidates = parse_price_candidates(text)
        assert candidates[0].raw_amount == 99.99
        assert candidates[0].currency == "EUR"

    def test_wrong_options_type(self) -> None:
        """ParseOptions lacks max_candidates and is rejected."""
        with pytest.raises(InvalidOptionsError):
            parse_price_candidates("€1", ParseOptions())  # type: ignore[arg-type]

    def test_non_string(self) -> None:
        """Non-str text is a programming error."""
        with pytest.raises(TypeError):
            parse_price_candidates(None)  # type: ignore[arg-type]


class TestCandidateProperties:
    """Property-based tests for parse_price_candidates()."""

    @given(text=noisy_text())
    def test_ranked_and_bounded(self, text: str) -> None:
        """INVARIANT: candidates have amounts, lie inside text and are totally ordered."""
        candidates = parse_price_candidates(text, max_candidates=5)
        assert len(candidates) <= 5
        keys = [(-c.score, c.index_start) for c in candidates]
        assert keys == sorted(keys)
        for candidate in candidates:
            assert candidate.raw_amount is not None
            assert 0 <= candidate.index_start < candidate.index_end <= len(text)
