import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftprintf.printer import format_text, ft_printf

INT32 = st.integers(min_value=-(2**31), max_value=2**31 - 1)


def test_plain_text_is_unchanged():
    assert format_text("hello world") == "hello world"


@given(st.text(alphabet=st.characters(blacklist_characters="%")))
def test_text_without_percent_round_trips(text):
    assert format_text(text) == text


def test_mixed_conversions_match_percent_formatting():
    fmt = "%c|%s|%d|%i|%x|%X|%%"
    values = ("a", "str", -12, 34, 255, 255)
    assert format_text(fmt, *values) == fmt % values


@given(INT32, st.text(max_size=10))
def test_combined_directives(n, text):
    fmt = "[%-8s] [%+6d] [%08d]"
    assert format_text(fmt, text, n, n) == fmt % (text, n, n)


def test_star_width():
    assert format_text("%*d", 6, 42) == "%*d" % (6, 42)


def test_negative_star_width_becomes_zero():
    assert format_text("%*d|", -6, 42) == "42|"


def test_star_precision():
    assert format_text("%.*s", 2, "abcdef") == "%.*s" % (2, "abcdef")


def test_negative_star_precision_is_ignored():
    assert format_text("%.*d", -1, 7) == str(7)


def test_unknown_conversion_keeps_the_character():
    assert format_text("%5k") == "k"


def test_trailing_percent_is_dropped():
    assert format_text("abc%") == "abc"


def test_null_string_and_pointer():
    assert format_text("%s %p", None, None) == "(null) (nil)"


def test_pointer_output():
    assert format_text("%p", 0xABC) == "0x" + format(0xABC, "x")


def test_extra_arguments_are_ignored():
    assert format_text("%d", 1, 2, 3) == str(1)


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_text("%d %d", 1)


def test_missing_star_argument_raises():
    with pytest.raises(TypeError):
        format_text("%*d")


def test_non_string_format_raises():
    with pytest.raises(TypeError):
        format_text(None)


def test_ft_printf_writes_and_counts(capsys):
    count = ft_printf("%s=%5d\n", "value", 42)
    out = capsys.readouterr().out
    assert out == format_text("%s=%5d\n", "value", 42)
    assert count == len(out)


def test_ft_printf_empty_format(capsys):
    assert ft_printf("") == 0
    assert capsys.readouterr().out == ""


def test_ft_printf_rejects_none(capsys):
    with pytest.raises(TypeError):
        ft_printf(None)
    assert capsys.readouterr().out == ""