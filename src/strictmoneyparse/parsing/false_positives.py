"""False-positive classification: numerics that look like, but are not, prices.

Checks run against the whole normalized text, because date, range and
dimension context spans beyond the digits of the matched token. Any single
check disqualifies the token:

    phone_number  token carries 10 or more digits
    date          YYYY-MM-DD / YYYY/M/D, or DD-MM-YYYY / D/M/YY
    year          the entire text is a bare year 1900-2099
    percentage    a '%' anywhere (unless percentages are allowed)
    range         N - N with a hyphen, en dash or em dash
    dimensions    N x N or N × N

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterator

from strictmoneyparse.constants import PHONE_MIN_DIGITS
from strictmoneyparse.enums import RejectionReason

from .cursor import DASHES, DIMENSION_MARKS, Cursor, is_digit, is_word_char

__all__ = ["classify_false_positive"]

_DATE_SEPARATORS = frozenset("-/")

# (first run lengths, middle run lengths, last run lengths)
_YEAR_FIRST = (frozenset({4}), frozenset({1, 2}), frozenset({1, 2}))
_DAY_FIRST = (frozenset({1, 2}), frozenset({1, 2}), frozenset({2, 3, 4}))

_YEAR_LENGTH = 4
_YEAR_CENTURIES = ("19", "20")


def _digit_runs(text: str) -> Iterator[tuple[int, int]]:
    """Yield (start, end) of every maximal ASCII digit run."""
    cursor = Cursor(text)
    while True:
        cursor = cursor.skip_while(lambda char: not is_digit(char))
        if cursor.is_eof:
            return
        end = cursor.skip_while(is_digit)
        yield cursor.pos, end.pos
        cursor = end


def _is_boundary(text: str, index: int) -> bool:
    """True if text[index] is outside the text or not a word character."""
    return index < 0 or index >= len(text) or not is_word_char(text[index])


def _contains_date(text: str) -> bool:
    runs = list(_digit_runs(text))
    for (s0, e0), (s1, e1), (s2, e2) in zip(runs, runs[1:], runs[2:], strict=False):
        # Runs must be joined by exactly one '-' or '/'
        if s1 != e0 + 1 or s2 != e1 + 1:
            continue
        if text[e0] not in _DATE_SEPARATORS or text[e1] not in _DATE_SEPARATORS:
            continue
        if not (_is_boundary(text, s0 - 1) and _is_boundary(text, e2)):
            continue
        lengths = (e0 - s0, e1 - s1, e2 - s2)
        for shape in (_YEAR_FIRST, _DAY_FIRST):
            if all(length in allowed for length, allowed in zip(lengths, shape, strict=True)):
                return True
    return False


def _is_bare_year(text: str) -> bool:
    stripped = text.strip()
    return (
        len(stripped) == _YEAR_LENGTH
        and all(is_digit(char) for char in stripped)
        and stripped.startswith(_YEAR_CENTURIES)
    )


def _joins_digits(text: str, connectors: frozenset[str]) -> bool:
    """True if a connector sits between two digits, allowing whitespace around it."""
    for index, char in enumerate(text):
        if char not in connectors:
            continue
        left = index - 1
        while left >= 0 and text[left].isspace():
            left -= 1
        right = Cursor(text, index + 1).skip_while(str.isspace)
        if left >= 0 and is_digit(text[left]) and not right.is_eof and is_digit(right.current):
            return True
    return False


def classify_false_positive(
    text: str,
    token: str,
    *,
    ignore_percentages: bool = True,
) -> RejectionReason | None:
    """Decide whether a numeric token is almost certainly not a price.

    Args:
        text: Whole normalized text the token was found in
        token: The extracted numeric token
        ignore_percentages: Reject text containing '%'

    Returns:
        The first matching RejectionReason, or None if the token may be a price

    Examples:
        >>> classify_false_positive("+1 234 567 8900", "1 234 567 8900")
        <RejectionReason.PHONE_NUMBER: 'phone_number'>
        >>> classify_false_positive("1920x1080", "1920")
        <RejectionReason.DIMENSIONS: 'dimensions'>
        >>> classify_false_positive("\\u20ac99.99", "99.99") is None
        True
    """
    if sum(1 for char in token if is_digit(char)) >= PHONE_MIN_DIGITS:
        return RejectionReason.PHONE_NUMBER
    if _contains_date(text):
        return RejectionReason.DATE
    if _is_bare_year(text):
        return RejectionReason.YEAR
    if ignore_percentages and "%" in text:
        return RejectionReason.PERCENTAGE
    if _joins_digits(text, DASHES):
        return RejectionReason.RANGE
    if _joins_digits(text, DIMENSION_MARKS):
        return RejectionReason.DIMENSIONS
    return None
