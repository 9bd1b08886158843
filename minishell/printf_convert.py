"""Padding and precision rules for the individual printf conversions.

Each ``pad_*`` function takes an already-fetched argument and the flags
parsed from a conversion specification, and returns the exact text the
conversion produces.
"""

from __future__ import annotations

from dataclasses import dataclass

_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF
_NULL_STRING = "(null)"


@dataclass
class FormatFlags:
    """Flags of one conversion: ``-``, ``0``, precision and field width."""

    minus: bool = False
    zero: bool = False
    dot: bool = False
    precision: int = 0
    width: int = 0


def _spaces(count: int) -> str:
    return " " * max(count, 0)


def _zeros(count: int) -> str:
    return "0" * max(count, 0)


def _around(body: str, padding: int, flags: FormatFlags) -> str:
    """Put ``padding`` spaces before ``body``, or after it with ``-``."""
    if flags.minus:
        return body + _spaces(padding)
    return _spaces(padding) + body


def pad_char(c: str, flags: FormatFlags) -> str:
    """Format a single character for ``%c``."""
    if flags.width > 0 and flags.minus:
        return c + _spaces(flags.width - 1)
    if flags.width > 0 and flags.zero:
        return _zeros(flags.width - 1) + c
    if flags.width > 0:
        return _spaces(flags.width - 1) + c
    return c


def pad_string(s: str | None, flags: FormatFlags) -> str:
    """Format a string for ``%s``; ``None`` prints as ``(null)``."""
    if s is None:
        s = _NULL_STRING
    if flags.dot:
        s = s[: max(flags.precision, 0)]
    if flags.width <= 0:
        return s
    fill = "0" if flags.zero and not flags.minus else " "
    padding = fill * max(flags.width - len(s), 0)
    if flags.minus:
        return s + padding
    return padding + s


def _pad_digits(digits: str, flags: FormatFlags) -> str:
    """Shared width/precision logic for unsigned digit strings (hex, octal)."""
    length = len(digits)
    if flags.width > 0 and flags.dot:
        count = max(flags.precision - length, 0)
        padding = max(flags.width - length - count, 0)
        return _around(_zeros(count) + digits, padding, flags)
    if flags.width > 0 and (not flags.zero or flags.minus):
        return _around(digits, flags.width - length, flags)
    if flags.dot or (flags.width > 0 and flags.zero):
        count = (flags.precision if flags.dot else flags.width) - length
        return _zeros(count) + digits
    return digits


def _empty_zero(flags: FormatFlags) -> bool:
    return flags.dot and flags.precision == 0


def pad_number(n: int, flags: FormatFlags) -> str:
    """Format a signed decimal integer for ``%d``, ``%i`` and ``%u``."""
    if _empty_zero(flags) and n == 0:
        return _spaces(flags.width)
    text = str(n)
    length = len(text)
    negative = n < 0
    magnitude = str(abs(n))
    sign = "-" if negative else ""
    if flags.width > 0 and flags.dot:
        count = max(flags.precision - length + (1 if negative else 0), 0)
        padding = max(flags.width - length - count, 0)
        return _around(sign + _zeros(count) + magnitude, padding, flags)
    if flags.width > 0 and (not flags.zero or flags.minus):
        return _around(text, flags.width - length, flags)
    if flags.dot or (flags.width > 0 and flags.zero):
        if flags.dot:
            count = flags.precision - (length - 1 if negative else length)
        else:
            count = flags.width - length
        return sign + _zeros(count) + magnitude
    return text


def pad_hex(n: int, flags: FormatFlags, upper: bool) -> str:
    """Format an unsigned 32-bit integer in hexadecimal for ``%x``/``%X``."""
    n &= _UINT_MASK
    if _empty_zero(flags) and n == 0:
        return _spaces(flags.width)
    return _pad_digits(format(n, "X" if upper else "x"), flags)


def pad_octal(n: int, flags: FormatFlags) -> str:
    """Format an unsigned 32-bit integer in octal for ``%o``."""
    n &= _UINT_MASK
    if _empty_zero(flags) and n == 0:
        return _spaces(flags.width)
    return _pad_digits(format(n, "o"), flags)


def pad_pointer(n: int, flags: FormatFlags) -> str:
    """Format an address as ``0x`` followed by lower-case hex for ``%p``."""
    n &= _ULONG_MASK
    if _empty_zero(flags) and n == 0:
        return _around("0x", flags.width - 2, flags)
    digits = format(n, "x")
    length = len(digits)
    if flags.width > 0 and flags.dot:
        count = max(flags.precision - length, 0)
        padding = max(flags.width - count - length - 2, 0)
        return _around("0x" + _zeros(count) + digits, padding, flags)
    if flags.width > 0 and not flags.zero:
        return _around("0x" + digits, flags.width - 2 - length, flags)
    if flags.dot or (flags.width > 0 and flags.zero):
        count = (flags.precision if flags.dot else flags.width - 2) - length
        return "0x" + _zeros(count) + digits
    return "0x" + digits