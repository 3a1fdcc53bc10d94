"""Numeric token extraction.

A numeric run is a digit followed by any mixture of digits, whitespace,
commas, dots, straight or curly quotes and underscores. Trailing separator
noise is trimmed, so every token starts and ends with a digit. The
extractor does not decide what the separators mean.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from .cursor import Cursor, is_digit, is_token_char

__all__ = ["NumericToken", "find_numeric_token", "iter_numeric_tokens"]


@dataclass(frozen=True, slots=True)
class NumericToken:
    """A numeric run located in a text.

    Attributes:
        text: Token text, starting and ending with a digit
        start: Offset of the first character in the scanned text
    """

    text: str
    start: int

    @property
    def end(self) -> int:
        """Offset just past the last digit (exclusive)."""
        return self.start + len(self.text)


def _scan_run(cursor: Cursor) -> NumericToken:
    """Read the run starting at a digit under the cursor."""
    run_end = cursor.advance().skip_while(is_token_char)
    last = run_end.pos
    while not is_digit(cursor.source[last - 1]):
        last -= 1
    return NumericToken(cursor.slice_to(last), cursor.pos)


def find_numeric_token(text: str, start: int = 0) -> NumericToken | None:
    """Find the first numeric run at or after start.

    Args:
        text: Text to scan
        start: Offset to begin scanning from

    Returns:
        NumericToken, or None if no digit remains

    Examples:
        >>> find_numeric_token("Price: 1,299.00 USD")
        NumericToken(text='1,299.00', start=7)
        >>> find_numeric_token("229,-")
        NumericToken(text='229', start=0)
        >>> find_numeric_token("no digits") is None
        True
    """
    cursor = Cursor(text, start).skip_while(lambda char: not is_digit(char))
    if cursor.is_eof:
        return None
    return _scan_run(cursor)


def iter_numeric_tokens(text: str) -> Iterator[NumericToken]:
    """Yield every numeric run in text, left to right, without overlap."""
    token = find_numeric_token(text)
    while token is not None:
        yield token
        token = find_numeric_token(text, token.end)
