"""Conversion flags and the parsing of flags, width and precision."""

from __future__ import annotations

import operator
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

FLAG_CHARS = "-0.# +"
_DIGITS = "0123456789"


@dataclass
class Flags:
    """Options collected between a '%' and its conversion character."""

    minus: bool = False
    zero: bool = False
    dot: bool = False
    hash: bool = False
    space: bool = False
    plus: bool = False
    width: int = 0
    precision: int = 0
    has_precision: bool = False


def _star_argument(args: Iterator[Any]) -> int:
    try:
        value = next(args)
    except StopIteration:
        raise TypeError("not enough arguments for '*' in format string") from None
    return operator.index(value)


def _read_number(fmt: str, pos: int) -> tuple[int, int]:
    start = pos
    while pos < len(fmt) and fmt[pos] in _DIGITS:
        pos += 1
    return (int(fmt[start:pos]) if pos > start else 0), pos


def parse_width(fmt: str, pos: int, args: Iterator[Any]) -> tuple[int, int]:
    """Read a field width at ``pos``; return the width and the new position.

    A '*' takes the width from ``args``. Negative widths become 0.
    """
    if pos < len(fmt) and fmt[pos] == "*":
        width = _star_argument(args)
        pos += 1
    else:
        width, pos = _read_number(fmt, pos)
    return max(width, 0), pos


def parse_precision(fmt: str, pos: int, args: Iterator[Any]) -> tuple[int, int]:
    """Read a precision just after the '.'; return it and the new position.

    A '*' takes the precision from ``args``; a negative one becomes -1.
    """
    if pos < len(fmt) and fmt[pos] == "*":
        precision = _star_argument(args)
        pos += 1
        if precision < 0:
            precision = -1
        return precision, pos
    return _read_number(fmt, pos)


def parse_flags(fmt: str, pos: int, args: Iterator[Any]) -> tuple[Flags, int]:
    """Parse flag characters, precision and width starting at ``pos``.

    Returns the collected flags and the position of the first unread character.
    """
    flags = Flags()
    while pos < len(fmt) and fmt[pos] in FLAG_CHARS:
        char = fmt[pos]
        pos += 1
        if char == "-":
            flags.minus = True
        elif char == "0":
            flags.zero = True
        elif char == ".":
            flags.dot = True
            flags.precision, pos = parse_precision(fmt, pos, args)
            if flags.precision >= 0:
                flags.has_precision = True
        elif char == "#":
            flags.hash = True
        elif char == " ":
            flags.space = True
        elif char == "+":
            flags.plus = True
    flags.width, pos = parse_width(fmt, pos, args)
    return flags, pos