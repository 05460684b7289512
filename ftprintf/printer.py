"""The printf entry points: formatting to a string and writing to stdout."""

from __future__ import annotations

import sys
from typing import Any

from .conversions import render_conversion
from .flags import parse_flags

CONVERSIONS = "cspdiuxX%"


def format_text(fmt: str, *args: Any) -> str:
    """Expand every '%' directive in ``fmt`` with values taken from ``args``.

    A directive whose conversion character is not recognised produces
    nothing; the character itself is then kept as ordinary text.
    """
    if not isinstance(fmt, str):
        raise TypeError("format must be a string")
    arg_iter = iter(args)
    parts: list[str] = []
    pos = 0
    end = len(fmt)
    while pos < end:
        mark = fmt.find("%", pos)
        if mark < 0:
            parts.append(fmt[pos:])
            break
        parts.append(fmt[pos:mark])
        flags, pos = parse_flags(fmt, mark + 1, arg_iter)
        if pos < end and fmt[pos] in CONVERSIONS:
            parts.append(render_conversion(fmt[pos], arg_iter, flags))
            pos += 1
    return "".join(parts)


def ft_printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    text = format_text(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)