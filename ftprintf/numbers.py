"""Conversion of integers to decimal and hexadecimal digit strings."""

from __future__ import annotations

import operator

_LOWER_HEX = "0123456789abcdef"
_UPPER_HEX = "0123456789ABCDEF"


def _non_negative(n: int) -> int:
    value = operator.index(n)
    if value < 0:
        raise ValueError(f"expected a non-negative integer, got {value}")
    return value


def numlen(n: int, base: int) -> int:
    """Number of characters of ``n`` in ``base``, counting a minus sign."""
    value = operator.index(n)
    length = 1 if value <= 0 else 0
    magnitude = abs(value)
    while magnitude:
        magnitude //= base
        length += 1
    return length


def unumlen(n: int, base: int) -> int:
    """Number of digits of the non-negative ``n`` in ``base``."""
    value = _non_negative(n)
    if value == 0:
        return 1
    length = 0
    while value:
        value //= base
        length += 1
    return length


def itoa(n: int) -> str:
    """Decimal representation of a signed integer."""
    return str(operator.index(n))


def utoa(n: int) -> str:
    """Decimal representation of a non-negative integer."""
    return str(_non_negative(n))


def htoa(n: int, conversion: str) -> str:
    """Hexadecimal digits of ``n``; upper case only for the 'X' conversion."""
    value = _non_negative(n)
    digits = _UPPER_HEX if conversion == "X" else _LOWER_HEX
    if value == 0:
        return digits[0]
    out = []
    while value:
        value, rest = divmod(value, 16)
        out.append(digits[rest])
    return "".join(reversed(out))