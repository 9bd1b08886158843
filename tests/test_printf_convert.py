import pytest

from minishell.printf_convert import (
    FormatFlags,
    pad_char,
    pad_hex,
    pad_number,
    pad_octal,
    pad_pointer,
    pad_string,
)


@pytest.mark.parametrize(
    "flags, spec",
    [
        (FormatFlags(width=3), "%3c"),
        (FormatFlags(width=3, minus=True), "%-3c"),
        (FormatFlags(), "%c"),
    ],
)
def test_pad_char_matches_printf(flags, spec):
    assert pad_char("a", flags) == spec % "a"


def test_pad_char_zero_fill():
    assert pad_char("a", FormatFlags(width=4, zero=True)) == "a".rjust(4, "0")


@pytest.mark.parametrize(
    "flags, spec",
    [
        (FormatFlags(), "%s"),
        (FormatFlags(width=6), "%6s"),
        (FormatFlags(width=6, minus=True), "%-6s"),
        (FormatFlags(dot=True, precision=2), "%.2s"),
        (FormatFlags(width=6, dot=True, precision=2), "%6.2s"),
        (FormatFlags(width=6, dot=True, precision=2, minus=True), "%-6.2s"),
        (FormatFlags(width=2), "%2s"),
    ],
)
def test_pad_string_matches_printf(flags, spec):
    assert pad_string("abc", flags) == spec % "abc"


def test_pad_string_none_is_null():
    assert pad_string(None, FormatFlags()) == "(null)"


def test_pad_string_none_with_precision_is_truncated():
    assert pad_string(None, FormatFlags(dot=True, precision=3)) == "(null)"[:3]


def test_pad_string_zero_flag_fills_with_zeros():
    assert pad_string("abc", FormatFlags(width=5, zero=True)) == "abc".rjust(5, "0")


@pytest.mark.parametrize(
    "n, flags, spec",
    [
        (42, FormatFlags(), "%d"),
        (-42, FormatFlags(), "%d"),
        (42, FormatFlags(width=5), "%5d"),
        (42, FormatFlags(width=5, minus=True), "%-5d"),
        (42, FormatFlags(width=5, zero=True), "%05d"),
        (-42, FormatFlags(width=5, zero=True), "%05d"),
        (-42, FormatFlags(dot=True, precision=4), "%.4d"),
        (42, FormatFlags(width=5, zero=True, minus=True), "%-05d"),
        (-42, FormatFlags(width=6, dot=True, precision=4), "%6.4d"),
        (-42, FormatFlags(width=6, dot=True, precision=4, minus=True), "%-6.4d"),
        (2147483647, FormatFlags(), "%d"),
        (-2147483648, FormatFlags(width=14), "%14d"),
    ],
)
def test_pad_number_matches_printf(n, flags, spec):
    assert pad_number(n, flags) == spec % n


def test_pad_number_zero_with_empty_precision_is_blank():
    assert pad_number(0, FormatFlags(width=3, dot=True, precision=0)) == " " * 3


@pytest.mark.parametrize(
    "n, flags, upper, spec",
    [
        (255, FormatFlags(), False, "%x"),
        (255, FormatFlags(), True, "%X"),
        (255, FormatFlags(width=8, dot=True, precision=3), False, "%8.3x"),
        (255, FormatFlags(width=8, zero=True), True, "%08X"),
        (255, FormatFlags(width=6, minus=True), False, "%-6x"),
        (255, FormatFlags(dot=True, precision=5), False, "%.5x"),
    ],
)
def test_pad_hex_matches_printf(n, flags, upper, spec):
    assert pad_hex(n, flags, upper) == spec % n


def test_pad_hex_wraps_negative_to_unsigned():
    assert pad_hex(-1, FormatFlags(), False) == format(2**32 - 1, "x")


def test_pad_hex_zero_with_empty_precision_is_blank():
    assert pad_hex(0, FormatFlags(width=4, dot=True), True) == " " * 4


@pytest.mark.parametrize(
    "n, flags, spec",
    [
        (8, FormatFlags(), "%o"),
        (8, FormatFlags(width=6), "%6o"),
        (8, FormatFlags(dot=True, precision=4), "%.4o"),
        (8, FormatFlags(width=6, dot=True, precision=3, minus=True), "%-6.3o"),
        (8, FormatFlags(width=6, zero=True), "%06o"),
    ],
)
def test_pad_octal_matches_printf(n, flags, spec):
    assert pad_octal(n, flags) == spec % n


def test_pad_pointer_plain():
    assert pad_pointer(255, FormatFlags()) == "0x" + format(255, "x")


def test_pad_pointer_width_right_aligns():
    result = pad_pointer(255, FormatFlags(width=10))
    assert len(result) == 10
    assert result.lstrip(" ") == "0xff"


def test_pad_pointer_width_left_aligns():
    result = pad_pointer(255, FormatFlags(width=10, minus=True))
    assert result == "0xff".ljust(10)


def test_pad_pointer_zero_fill_keeps_value():
    result = pad_pointer(255, FormatFlags(width=10, zero=True))
    assert len(result) == 10
    assert result.startswith("0x")
    assert int(result, 16) == 255


def test_pad_pointer_precision_and_width():
    result = pad_pointer(255, FormatFlags(width=12, dot=True, precision=6))
    assert len(result) == 12
    assert result.lstrip(" ") == "0x" + "ff".rjust(6, "0")


def test_pad_pointer_null_with_empty_precision():
    flags = FormatFlags(width=5, dot=True, precision=0)
    assert pad_pointer(0, flags) == "0x".rjust(5)
    flags.minus = True
    assert pad_pointer(0, flags) == "0x".ljust(5)


def test_pad_pointer_round_trips_large_address():
    address = 0x7FFDEADBEEF0
    assert int(pad_pointer(address, FormatFlags()), 16) == address