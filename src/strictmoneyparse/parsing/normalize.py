"""Text normalization ahead of token extraction.

Apostrophe-like marks become spaces (they only ever act as digit-group
separators, as in 1'234), then every whitespace run - including NBSP, thin
and narrow no-break spaces, tabs and newlines - collapses to a single
space, and the result is trimmed.

normalize_text() is idempotent and never fails.

Python 3.13+. Zero external dependencies.
"""

__all__ = ["normalize_text"]

_APOSTROPHES_TO_SPACE = str.maketrans({
    "'": " ",
    "‘": " ",  # left single quotation mark
    "’": " ",  # right single quotation mark
})


def normalize_text(text: str) -> str:
    """Canonicalize whitespace and apostrophes.

    Args:
        text: Raw input

    Returns:
        Trimmed text with single ASCII spaces and no apostrophes

    Examples:
        >>> normalize_text("  1\\u00a0234\\u2009\\u20ac ")
        '1 234 \\u20ac'
        >>> normalize_text("1'234.56")
        '1 234.56'
    """
    # str.split() with no argument splits on any Unicode whitespace run
    return " ".join(text.translate(_APOSTROPHES_TO_SPACE).split())
