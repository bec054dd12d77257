"""Character classification and integer text conversion helpers."""

from __future__ import annotations

_SIGNS = "+-"
_DIGITS = "0123456789"


def _ascii_lower(char: str) -> bool:
    return len(char) == 1 and "a" <= char <= "z"


def _ascii_upper(char: str) -> bool:
    return len(char) == 1 and "A" <= char <= "Z"


def is_alpha(char: str) -> bool:
    """Return True if ``char`` is a single ASCII letter."""
    return _ascii_lower(char) or _ascii_upper(char)


def is_digit(char: str) -> bool:
    """Return True if ``char`` is a single ASCII decimal digit."""
    return len(char) == 1 and char in _DIGITS


def is_alnum(char: str) -> bool:
    """Return True if ``char`` is a single ASCII letter or digit."""
    return is_alpha(char) or is_digit(char)


def to_upper(char: str) -> str:
    """Upper-case an ASCII lower-case letter; any other character is returned unchanged."""
    if _ascii_lower(char):
        return chr(ord(char) - 32)
    return char


def parse_long(text: str) -> int:
    """Parse an optional sign followed by leading digits.

    Parsing stops at the first character that is not a digit; no leading
    whitespace is skipped, and text without digits yields 0.
    """
    sign = 1
    rest = text
    if rest[:1] in ("+", "-") and rest:
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for char in rest:
        if not is_digit(char):
            break
        value = value * 10 + (ord(char) - ord("0"))
    return value * sign


def is_signed_digits(text: str) -> bool:
    """Return True if ``text`` is an optional sign followed only by digits.

    A bare sign and the empty string are accepted, as they contain no
    offending character.
    """
    body = text[1:] if text[:1] in ("+", "-") and text else text
    return all(is_digit(char) for char in body)


def format_int(n: int) -> str:
    """Render an integer as decimal text with a leading minus when negative."""
    if n == 0:
        return "0"
    magnitude = -n if n < 0 else n
    digits = []
    while magnitude:
        magnitude, rem = divmod(magnitude, 10)
        digits.append(_DIGITS[rem])
    if n < 0:
        digits.append("-")
    return "".join(reversed(digits))