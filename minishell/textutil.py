"""Small text helpers used by the shell: number parsing, splitting and trimming."""

from __future__ import annotations

_SPACE = " \t\r\v\f"
_SPACE_NEWLINE = " \t\n\r\v\f"


def skip_space(text: str, pos: int) -> int:
    """Return the first position at or after ``pos`` that is not a blank (newline excluded)."""
    while pos < len(text) and text[pos] in _SPACE:
        pos += 1
    return pos


def skip_space_newline(text: str, pos: int) -> int:
    """Return the first position at or after ``pos`` that is not a blank or a newline."""
    while pos < len(text) and text[pos] in _SPACE_NEWLINE:
        pos += 1
    return pos


def atoi(text: str) -> int:
    """Parse a leading integer the way C ``atoi`` does.

    Leading blanks and newlines are skipped, one optional sign is accepted,
    and parsing stops at the first non-digit. No digits gives 0.
    """
    pos = skip_space_newline(text, 0)
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    while pos < len(text) and "0" <= text[pos] <= "9":
        value = value * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    return sign * value


def is_number(text: str | None) -> bool:
    """Tell whether ``text`` is an optional leading ``-`` followed only by digits.

    ``None`` is not a number; the empty string and a lone ``-`` are accepted,
    since nothing in them fails the digit check.
    """
    if text is None:
        return False
    body = text[1:] if text.startswith("-") else text
    return all("0" <= ch <= "9" for ch in body)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be exactly one character")
    return [piece for piece in text.split(sep) if piece]


def trim(text: str, charset: str) -> str:
    """Remove every leading and trailing character of ``text`` found in ``charset``."""
    return text.strip(charset) if charset else text