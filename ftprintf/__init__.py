"""A printf-style formatter with flags, width and precision."""

__version__ = "0.1.0"
__all__ = ["flags", "numbers", "padding", "conversions", "printer"]