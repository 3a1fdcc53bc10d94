"""Tests for parsing.normalize: whitespace and apostrophe canonicalization."""

from __future__ import annotations

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from strictmoneyparse.parsing.normalize import normalize_text


class TestNormalizeText:
    """Test normalize_text() on representative inputs."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("1\u00a0234,56 €", "1 234,56 €"),
            ("1\u2009234", "1 234"),  # thin space
            ("1\u202f234", "1 234"),  # narrow no-break space
            ("Price:\n\t\t€150.00\n\t", "Price: €150.00"),
            ("  Total:  €1,234.56  ", "Total: €1,234.56"),
            ("1'234.56", "1 234.56"),
            ("1’234.56", "1 234.56"),  # right single quotation mark
            ("1‘234.56", "1 234.56"),  # left single quotation mark
            ("", ""),
            ("   ", ""),
        ],
    )
    def test_normalizes(self, raw: str, expected: str) -> None:
        """Whitespace collapses to one space, apostrophes become spaces, ends trimmed."""
        assert normalize_text(raw) == expected

    def test_double_quotes_kept(self) -> None:
        """Only apostrophe-like marks are rewritten."""
        assert normalize_text('1"234') == '1"234'


class TestNormalizeTextProperties:
    """Property-based tests for normalize_text()."""

    @given(text=st.text(max_size=100))
    def test_idempotent(self, text: str) -> None:
        """PROPERTY: normalize(normalize(s)) == normalize(s)."""
        once = normalize_text(text)
        event(f"changed={once != text}")
        assert normalize_text(once) == once

    @given(text=st.text(max_size=100))
    def test_output_shape(self, text: str) -> None:
        """PROPERTY: no leading/trailing space, no double space, no apostrophes."""
        result = normalize_text(text)
        assert result == result.strip()
        assert "  " not in result
        assert "'" not in result
        assert all(char == " " or not char.isspace() for char in result)
