"""printf-style formatting: flag parsing, conversion dispatch and output."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

from minishell.printf_convert import (
    FormatFlags,
    pad_char,
    pad_hex,
    pad_number,
    pad_octal,
    pad_pointer,
    pad_string,
)

_END_FLAGS = frozenset("cspdiuxX%")
_VALID_FLAGS = _END_FLAGS | frozenset(" -.*0123456789")
_UINT_MASK = 0xFFFFFFFF


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _as_int32(value: Any) -> int:
    """Reinterpret an integer as a signed 32-bit value."""
    value = int(value) & _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _read_amount(fmt: str, pos: int, args: Iterator[Any]) -> tuple[int, int]:
    """Read a width or precision starting at ``pos``.

    Returns the amount and the position of the last character consumed.
    """
    if pos < len(fmt) and fmt[pos] == ".":
        pos += 1
    if pos < len(fmt) and fmt[pos] == "*":
        return _as_int32(_next_arg(args)), pos
    num = 0
    while pos < len(fmt) and "0" <= fmt[pos] <= "9":
        num = num * 10 + (ord(fmt[pos]) - ord("0"))
        pos += 1
    return num, pos - 1


def parse_flags(fmt: str, pos: int, args: Iterator[Any]) -> tuple[FormatFlags, int]:
    """Parse the flags of a conversion that starts at ``pos`` (just after ``%``).

    Star widths and precisions are taken from ``args``. Returns the flags and
    the position of the conversion character (``len(fmt)`` if there is none).
    """
    flags = FormatFlags()
    while pos < len(fmt) and fmt[pos] not in _END_FLAGS and fmt[pos] in _VALID_FLAGS:
        ch = fmt[pos]
        if ch == "-":
            flags.minus = True
        elif ch == "0":
            flags.zero = True
        elif ch == ".":
            flags.dot = True
            flags.precision, pos = _read_amount(fmt, pos, args)
        elif ch == "*" or "1" <= ch <= "9":
            flags.width, pos = _read_amount(fmt, pos, args)
        if flags.precision < 0:
            flags.dot = False
            flags.precision = 0
        elif flags.width < 0:
            flags.minus = True
            flags.width = -flags.width
        pos += 1
    return flags, pos


def _other(c: str, flags: FormatFlags) -> str:
    if not c:
        return ""
    padding = max(flags.width - 1, 0)
    if flags.minus:
        return c + " " * padding
    return ("0" if flags.zero else " ") * padding + c


def _char_arg(value: Any) -> str:
    if isinstance(value, str):
        return value[:1] if value else "\0"
    return chr(int(value) & 0xFF)


def _pointer_arg(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, int):
        return value
    return id(value)


def convert(spec: str, flags: FormatFlags, args: Iterator[Any]) -> str:
    """Produce the text of one conversion ``spec``, taking its argument from ``args``."""
    if spec == "c":
        return pad_char(_char_arg(_next_arg(args)), flags)
    if spec == "s":
        value = _next_arg(args)
        return pad_string(None if value is None else str(value), flags)
    if spec == "p":
        return pad_pointer(_pointer_arg(_next_arg(args)), flags)
    if spec in ("d", "i"):
        return pad_number(_as_int32(_next_arg(args)), flags)
    if spec == "u":
        return pad_number(int(_next_arg(args)) & _UINT_MASK, flags)
    if spec in ("x", "X"):
        return pad_hex(int(_next_arg(args)), flags, spec == "X")
    if spec == "o":
        return pad_octal(int(_next_arg(args)), flags)
    return _other(spec, flags)


def format_string(fmt: str, *args: Any) -> str:
    """Format ``fmt`` with ``args`` and return the resulting text."""
    arg_iter = iter(args)
    parts: list[str] = []
    pos = 0
    while pos < len(fmt):
        percent = fmt.find("%", pos)
        if percent < 0:
            parts.append(fmt[pos:])
            break
        parts.append(fmt[pos:percent])
        flags, pos = parse_flags(fmt, percent + 1, arg_iter)
        spec = fmt[pos] if pos < len(fmt) else ""
        parts.append(convert(spec, flags, arg_iter))
        if spec:
            pos += 1
    return "".join(parts)


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (standard output by default).

    Returns the number of characters written.
    """
    text = format_string(fmt, *args)
    out = sys.stdout if file is None else file
    out.write(text)
    out.flush()
    return len(text)