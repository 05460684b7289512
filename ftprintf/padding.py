"""Width, precision and prefix handling for converted values."""

from __future__ import annotations

from .flags import Flags

_SIGNED = ("d", "i")
_HEX = ("x", "X")
_ZERO_FORMS = ("0", "+0", "-0")


def padding(width: int, pad_char: str) -> str:
    """``width`` copies of ``pad_char``, or nothing if ``width`` is not positive."""
    return pad_char * max(width, 0)


def apply_width(text: str, flags: Flags) -> str:
    """Pad ``text`` to the field width according to the flags."""
    fill = flags.width - len(text)
    pad_char = "0" if flags.zero and not flags.minus and not flags.has_precision else " "
    if flags.minus:
        return text + padding(fill, " ")
    if pad_char == "0" and text.startswith("-"):
        return "-" + padding(fill, "0") + text[1:]
    return padding(fill, pad_char) + text


def apply_precision_str(text: str, flags: Flags) -> str:
    """Truncate a string to the precision, if one was given."""
    if not flags.has_precision:
        return text
    return text[: flags.precision]


def apply_precision_num(text: str, flags: Flags, conversion: str) -> str:
    """Apply the minimum digit count of the precision, then any prefix."""
    if not flags.has_precision:
        return add_prefix(text, flags, conversion)
    if flags.precision == 0 and text == "0":
        return ""
    sign, digits = ("-", text[1:]) if text.startswith("-") else ("", text)
    zeros = flags.precision - len(digits)
    if zeros <= 0:
        return add_prefix(text, flags, conversion)
    return add_prefix(sign + "0" * zeros + digits, flags, conversion)


def add_prefix(text: str, flags: Flags, conversion: str) -> str:
    """Prepend '+', ' ' or '0x'/'0X' as the flags and conversion call for.

    A hexadecimal value whose text starts with '0' gets no prefix.
    """
    lead = text[:1]
    if conversion in _SIGNED and lead != "-":
        if flags.plus:
            return "+" + text
        if flags.space:
            return " " + text
    if (
        flags.hash
        and conversion in _HEX
        and text not in _ZERO_FORMS
        and lead != "0"
    ):
        return "0" + conversion + text
    return text