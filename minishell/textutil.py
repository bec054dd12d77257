"""String searching, slicing, comparing and splitting helpers."""

from __future__ import annotations

from .charclass import to_upper

_TERMINATOR = "\0"


def _is_terminator(char: str) -> bool:
    return char in ("", _TERMINATOR)


def compare(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns 0 when they match over that span, otherwise the code-point
    difference at the first mismatch. When one string ends first, the
    result is the negated code of the other's next character, or that
    character's code itself.
    """
    if n <= 0:
        return 0
    for a, b in zip(s1[:n], s2[:n]):
        if a != b:
            return ord(a) - ord(b)
    i = min(len(s1), len(s2))
    if i >= n or len(s1) == len(s2):
        return 0
    if len(s1) < len(s2):
        return -ord(s2[i])
    return ord(s1[i])


def compare_upper(s1: str, s2: str, n: int) -> int:
    """Compare the upper-cased form of ``s1`` against ``s2`` over ``n`` characters.

    On a mismatch the difference of the original characters is returned.
    """
    if n <= 0:
        return 0

    def upper_at(i: int) -> str:
        return to_upper(s1[i]) if i < len(s1) else ""

    i = 0
    upper = upper_at(0)
    while i < n and i < len(s1) and i < len(s2):
        if upper != s2[i]:
            return ord(s1[i]) - ord(s2[i])
        i += 1
        upper = upper_at(i)
    s2_ended = i >= len(s2)
    if (upper == "" and s2_ended) or i == n:
        return 0
    if upper == "":
        return -ord(s2[i])
    if s2_ended:
        return ord(upper)
    return 0


def split(text: str | None, sep: str) -> list[str] | None:
    """Split ``text`` on the separator character, dropping empty pieces."""
    if text is None:
        return None
    if _is_terminator(sep):
        return [text] if text else []
    return [piece for piece in text.split(sep) if piece]


def slice_between_char(text: str | None, char: str) -> str | None:
    """Return the non-empty text between the first two occurrences of ``char``.

    Returns None when there are fewer than two occurrences or nothing
    lies between them.
    """
    if not text:
        return None
    first = text.find(char)
    if first == -1:
        return None
    second = text.find(char, first + 1)
    if second == -1:
        return None
    return text[first + 1:second] or None


def slice_between_index(text: str | None, start: int, end: int) -> str | None:
    """Return the characters from ``start`` to ``end``, both inclusive.

    Returns None for empty text, a span longer than the text, or an end
    before ``start - 1``.
    """
    if not text or end - start > len(text):
        return None
    if start < 0:
        raise ValueError("start index must not be negative")
    length = end - start + 1
    if length < 0:
        return None
    return text[start:start + length]


def before_char(text: str | None, char: str) -> str | None:
    """Return the text before the first ``char``.

    A terminator character yields the whole text; None is returned when
    ``char`` does not occur.
    """
    if text is None:
        return None
    if _is_terminator(char):
        return text
    index = text.find(char)
    if index == -1:
        return None
    return text[:index]


def after_char(text: str, char: str) -> tuple[str | None, int]:
    """Find ``char`` and return the text after it together with its index.

    When ``char`` is absent the rest is None and the index is the text
    length; a terminator character gives an empty rest at that index.
    """
    if _is_terminator(char):
        return "", len(text)
    index = text.find(char)
    if index == -1:
        return None, len(text)
    return text[index + 1:], index


def substr(text: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``text`` beginning at ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]