import io

import pytest
from hypothesis import given, strategies as st

from pushswap.text.output import put_char, put_endl, put_nbr, put_str


def test_put_char_writes_one_character():
    out = io.StringIO()
    put_char("m", out)
    assert out.getvalue() == "m"


def test_put_char_rejects_longer_text():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str_stops_at_nul():
    out = io.StringIO()
    put_str("Maxwel\0tail", out)
    assert out.getvalue() == "Maxwel"


def test_put_endl_appends_newline():
    out = io.StringIO()
    put_endl("Error", out)
    assert out.getvalue() == "Error\n"


def test_put_nbr_int_min():
    out = io.StringIO()
    put_nbr(-2147483648, out)
    assert out.getvalue() == "-2147483648"


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_put_nbr_round_trip(n):
    out = io.StringIO()
    put_nbr(n, out)
    assert int(out.getvalue()) == n


def test_put_nbr_rejects_non_integer():
    with pytest.raises(TypeError):
        put_nbr("12", io.StringIO())


@given(st.text(alphabet=st.characters(blacklist_characters="\0")))
def test_put_str_round_trip(s):
    out = io.StringIO()
    put_str(s, out)
    assert out.getvalue() == s


def test_sequential_writes_concatenate():
    out = io.StringIO()
    put_str("ra", out)
    put_char("\n", out)
    put_endl("pb", out)
    assert out.getvalue() == "ra\npb\n"