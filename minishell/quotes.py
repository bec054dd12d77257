"""Pre-processing of a command line: quote checking and ``$`` marking."""

from __future__ import annotations

from .charclass import is_alnum

_QUOTES = "'\""
_STATUS_STOP = set("()|<>& ")


class UnclosedQuoteError(ValueError):
    """Raised when a quote in the command line has no closing partner."""


def _is_name_char(char: str) -> bool:
    return is_alnum(char) or char == "_"


def _dollar(text: str, start: int, out: list[str]) -> int:
    """Handle the ``$`` at ``start``; return the index just past what was used."""
    nxt = text[start + 1:start + 2]
    if nxt == " ":
        out.append("$")
        return start + 1
    if nxt == "*":
        return start + 2
    if nxt == "?":
        end = start + 2
        while end < len(text) and text[end] not in _STATUS_STOP:
            end += 1
        out.append('"' + text[start:end] + '"')
        return end
    end = start + 1
    while end < len(text) and _is_name_char(text[end]):
        end += 1
    out.append('"' + text[start:end] + '"')
    return end


def clean_up_quotes(text: str) -> str:
    """Validate quoting and wrap each ``$`` expansion outside quotes in double quotes.

    Quoted sections are copied unchanged, ``$*`` is dropped and a ``$``
    followed by a space stays literal.

    Raises UnclosedQuoteError if a quote is never closed.
    """
    out: list[str] = []
    i = 0
    while i < len(text):
        char = text[i]
        if char in _QUOTES:
            close = text.find(char, i + 1)
            if close == -1:
                raise UnclosedQuoteError(f"unclosed quote {char!r} at position {i}")
            out.append(text[i:close + 1])
            i = close + 1
        elif char == "$":
            i = _dollar(text, i, out)
        else:
            out.append(char)
            i += 1
    return "".join(out)