import pytest
from hypothesis import given, strategies as st

from ftprintf.numbers import htoa, itoa, numlen, unumlen, utoa

INT32 = st.integers(min_value=-(2**31), max_value=2**31 - 1)
UINT64 = st.integers(min_value=0, max_value=2**64 - 1)


@given(INT32)
def test_itoa_round_trip(n):
    text = itoa(n)
    assert int(text) == n
    assert len(text) == numlen(n, 10)


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


@given(st.integers(min_value=0, max_value=2**32 - 1))
def test_utoa_round_trip(n):
    text = utoa(n)
    assert int(text) == n
    assert len(text) == unumlen(n, 10)


def test_utoa_rejects_negative():
    with pytest.raises(ValueError):
        utoa(-1)


@given(UINT64)
def test_htoa_round_trip(n):
    text = htoa(n, "x")
    assert int(text, 16) == n
    assert len(text) == unumlen(n, 16)
    assert text == text.lower()


@given(UINT64)
def test_htoa_upper_matches_lower(n):
    assert htoa(n, "X") == htoa(n, "x").upper()


def test_htoa_upper_value():
    assert htoa(255, "X") == "FF"


def test_htoa_other_conversion_is_lower_case():
    assert htoa(3054, "p") == htoa(3054, "x")


def test_htoa_zero():
    assert htoa(0, "x") == "0"


def test_htoa_rejects_negative():
    with pytest.raises(ValueError):
        htoa(-16, "x")


@given(st.integers(min_value=1, max_value=2**40))
def test_numlen_counts_minus_sign(n):
    assert numlen(-n, 10) == numlen(n, 10) + 1
    assert numlen(n, 10) == unumlen(n, 10)


def test_zero_has_one_digit():
    assert numlen(0, 10) == unumlen(0, 16) == len(itoa(0))


def test_unumlen_rejects_negative():
    with pytest.raises(ValueError):
        unumlen(-5, 10)