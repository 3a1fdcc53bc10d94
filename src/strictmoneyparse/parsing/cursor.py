"""Immutable cursor and character classes for the text scanners.

Every scanner in this package walks the input with a Cursor instead of
regular expressions, so token boundaries and window slicing are explicit
and the work per call is linear in the text length.

Design:
    - Cursor is immutable (frozen dataclass); advance() returns a new cursor
    - EOF is a state (is_eof), not a return value
    - Character classes are ASCII: only 0-9 are digits, and word characters
      are ASCII letters, digits and underscore

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable
from dataclasses import dataclass

__all__ = [
    "DASHES",
    "DIGITS",
    "DIMENSION_MARKS",
    "Cursor",
    "is_digit",
    "is_token_char",
    "is_word_char",
]

DIGITS: frozenset[str] = frozenset("0123456789")

_WORD_CHARS: frozenset[str] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_"
)

# Non-digit characters allowed inside a numeric run (whitespace is checked separately)
_TOKEN_SEPARATORS: frozenset[str] = frozenset(
    ",.'\"_"
    "‘’"  # single curly quotes
    "“”"  # double curly quotes
)

# Hyphen-minus, en dash, em dash
DASHES: frozenset[str] = frozenset("-–—")

# Latin x in both cases and the multiplication sign
DIMENSION_MARKS: frozenset[str] = frozenset("xX×")


def is_digit(char: str) -> bool:
    """ASCII digit check (str.isdigit() also accepts superscripts and other scripts)."""
    return char in DIGITS


def is_word_char(char: str) -> bool:
    """ASCII word character: letter, digit or underscore."""
    return char in _WORD_CHARS


def is_token_char(char: str) -> bool:
    """Character that may continue a numeric run."""
    return char in DIGITS or char in _TOKEN_SEPARATORS or char.isspace()


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable position in a source string.

    Example:
        >>> cursor = Cursor("ab12", 0)
        >>> cursor.skip_while(lambda c: not is_digit(c)).pos
        2
        >>> cursor.pos  # Original unchanged
        0
    """

    source: str
    pos: int = 0

    @property
    def is_eof(self) -> bool:
        """True when the position is at or past the end of the source."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Character at the current position.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def advance(self, count: int = 1) -> "Cursor":
        """New cursor moved forward by count, clamped to the end."""
        return Cursor(self.source, min(self.pos + count, len(self.source)))

    def skip_while(self, predicate: Callable[[str], bool]) -> "Cursor":
        """New cursor past every consecutive character matching predicate."""
        pos = self.pos
        source = self.source
        while pos < len(source) and predicate(source[pos]):
            pos += 1
        return Cursor(source, pos)

    def slice_to(self, end_pos: int) -> str:
        """Source text from the current position to end_pos (exclusive)."""
        return self.source[self.pos : end_pos]
