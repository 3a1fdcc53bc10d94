"""Tests for parsing.false_positives: numerics that are not prices."""

from __future__ import annotations

import pytest

from strictmoneyparse.enums import RejectionReason
from strictmoneyparse.parsing.false_positives import classify_false_positive


class TestClassifyFalsePositive:
    """Test each rejection rule of classify_false_positive()."""

    @pytest.mark.parametrize(
        ("text", "token", "reason"),
        [
            ("+1 234 567 8900", "1 234 567 8900", RejectionReason.PHONE_NUMBER),
            ("Phone: 1234567890", "1234567890", RejectionReason.PHONE_NUMBER),
            ("2024-12-25", "2024", RejectionReason.DATE),
            ("2024/1/5", "2024", RejectionReason.DATE),
            ("25/12/2024", "25", RejectionReason.DATE),
            ("12-25-24", "12", RejectionReason.DATE),
            ("€99.99 on 2024-12-25", "99.99", RejectionReason.DATE),
            ("2026", "2026", RejectionReason.YEAR),
            ("1900", "1900", RejectionReason.YEAR),
            ("15.5%", "15.5", RejectionReason.PERCENTAGE),
            ("€99.99 (25% off)", "99.99", RejectionReason.PERCENTAGE),
            ("100-200", "100", RejectionReason.RANGE),
            ("100 – 200", "100", RejectionReason.RANGE),
            ("100—200", "100", RejectionReason.RANGE),
            ("€99.99 Call: +1-234-567-8900", "99.99", RejectionReason.RANGE),
            ("1920x1080", "1920", RejectionReason.DIMENSIONS),
            ("1920 × 1080", "1920", RejectionReason.DIMENSIONS),
            ("10X20cm", "10", RejectionReason.DIMENSIONS),
        ],
    )
    def test_rejects(self, text: str, token: str, reason: RejectionReason) -> None:
        """Each documented false-positive shape is rejected with its reason."""
        assert classify_false_positive(text, token) is reason

    @pytest.mark.parametrize(
        ("text", "token"),
        [
            ("€99.99", "99.99"),
            ("1899", "1899"),
            ("2100", "2100"),
            ("Year 2024 price 5", "2024"),
            ("229,-", "229"),
            ("5 boxes", "5"),
            ("123456789 USD", "123456789"),
        ],
    )
    def test_accepts(self, text: str, token: str) -> None:
        """Price-like text outside every rule is not rejected."""
        assert classify_false_positive(text, token) is None

    def test_percentages_allowed_when_disabled(self) -> None:
        """ignore_percentages=False lets '%' text through."""
        assert classify_false_positive("25%", "25", ignore_percentages=False) is None

    def test_date_needs_word_boundaries(self) -> None:
        """Digits glued to letters do not form a date; the dash still reads as a range."""
        assert classify_false_positive("ID2024-12-25", "2024") is RejectionReason.RANGE

    def test_date_shapes_are_bounded(self) -> None:
        """A five-digit first run fits neither date shape."""
        assert classify_false_positive("12345-12-12", "12345") is RejectionReason.RANGE

    def test_phone_checked_before_date(self) -> None:
        """Checks run in order; the first match is reported."""
        text = "1234567890 on 2024-12-25"
        assert classify_false_positive(text, "1234567890") is RejectionReason.PHONE_NUMBER
