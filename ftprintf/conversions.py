"""Rendering of single conversions: %c, %s, %p, %d, %i, %u, %x, %X and %%."""

from __future__ import annotations

import operator
from collections.abc import Iterable
from typing import Any

from .flags import Flags
from .numbers import htoa, itoa, utoa
from .padding import (
    apply_precision_num,
    apply_precision_str,
    apply_width,
    padding,
)

NULL_STRING = "(null)"
NULL_POINTER = "(nil)"

_UINT_MASK = 0xFFFFFFFF
_INT_SIGN = 0x80000000


def _as_uint32(n: Any) -> int:
    return operator.index(n) & _UINT_MASK


def _as_int32(n: Any) -> int:
    value = _as_uint32(n)
    return value - (1 << 32) if value & _INT_SIGN else value


def render_char(c: str | int, flags: Flags) -> str:
    """A single character padded to the field width.

    An integer is taken as a byte value, keeping only its low eight bits.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"%c expects a single character, got {c!r}")
        char = c
    else:
        char = chr(operator.index(c) & 0xFF)
    if flags.minus:
        return char + padding(flags.width - 1, " ")
    return padding(flags.width - 1, " ") + char


def render_string(s: str | None, flags: Flags) -> str:
    """A string cut to the precision and padded to the field width.

    ``None`` is shown as "(null)".
    """
    if s is None:
        s = NULL_STRING
    elif not isinstance(s, str):
        raise TypeError(f"%s expects a string, got {type(s).__name__}")
    text = apply_precision_str(s, flags)
    if flags.minus:
        return text + padding(flags.width - len(text), " ")
    return padding(flags.width - len(text), " ") + text


def render_pointer(ptr: Any, flags: Flags) -> str:
    """An address as '0x' followed by lower-case hex digits.

    ``None`` or 0 is shown as "(nil)". An integer is used as the address;
    any other object is represented by its identity.
    """
    if ptr is None:
        return render_string(NULL_POINTER, flags)
    try:
        address = operator.index(ptr)
    except TypeError:
        address = id(ptr)
    if address == 0:
        return render_string(NULL_POINTER, flags)
    if address < 0:
        raise ValueError(f"%p expects a non-negative address, got {address}")
    return apply_width("0x" + htoa(address, "x"), flags)


def render_decimal(n: int, flags: Flags) -> str:
    """A signed 32-bit integer in decimal, with precision, sign and width."""
    text = apply_precision_num(itoa(_as_int32(n)), flags, "d")
    return apply_width(text, flags)


def render_unsigned(n: int, flags: Flags) -> str:
    """An unsigned 32-bit integer in decimal, with precision and width."""
    text = apply_precision_num(utoa(_as_uint32(n)), flags, "u")
    return apply_width(text, flags)


def render_hex(n: int, conversion: str, flags: Flags) -> str:
    """An unsigned 32-bit integer in hexadecimal; 'X' gives upper case."""
    text = apply_precision_num(htoa(_as_uint32(n), conversion), flags, conversion)
    return apply_width(text, flags)


def render_percent(flags: Flags) -> str:
    """A literal '%' padded to the field width."""
    if flags.minus:
        return "%" + padding(flags.width - 1, " ")
    pad_char = "0" if flags.zero and not flags.dot else " "
    return padding(flags.width - 1, pad_char) + "%"


def render_conversion(conversion: str, args: Iterable[Any], flags: Flags) -> str:
    """Render one conversion, taking its value from ``args`` when it needs one.

    An unknown conversion character renders nothing and consumes no argument.
    """
    if conversion == "%":
        return render_percent(flags)
    if conversion not in "cspdiuxX":
        return ""
    arg_iter = iter(args)
    try:
        value = next(arg_iter)
    except StopIteration:
        raise TypeError(
            f"not enough arguments for '%{conversion}' in format string"
        ) from None
    if conversion == "c":
        return render_char(value, flags)
    if conversion == "s":
        return render_string(value, flags)
    if conversion == "p":
        return render_pointer(value, flags)
    if conversion in "di":
        return render_decimal(value, flags)
    if conversion == "u":
        return render_unsigned(value, flags)
    return render_hex(value, conversion, flags)