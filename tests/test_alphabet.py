import pytest

from alphabet import ALPHA26, Alphabet
from errors import FormatError, RangeError, SymbolLookupError


def test_default_is_upper_case_letters():
    alpha = Alphabet()
    assert alpha.size() == 26
    assert alpha.symbols == ALPHA26
    assert alpha.to_char(0) == "A"
    assert alpha.to_int("Z") == 25


def test_round_trip_over_every_symbol():
    alpha = Alphabet("ABCD0123#/")
    for i in range(alpha.size()):
        assert alpha.to_int(alpha.to_char(i)) == i
    for ch in alpha.symbols:
        assert alpha.to_char(alpha.to_int(ch)) == ch


def test_contains():
    alpha = Alphabet("ABCD")
    assert alpha.contains("C")
    assert not alpha.contains("c")
    assert "D" in alpha
    assert "E" not in alpha


@pytest.mark.parametrize("chars", ["ABCA", "AB CD", "AB(D", "ABC)", "A*BC", "", "AB\tC"])
def test_bad_alphabets_rejected(chars):
    with pytest.raises(FormatError):
        Alphabet(chars)


@pytest.mark.parametrize("index", [-1, 4, 100])
def test_to_char_out_of_range(index):
    alpha = Alphabet("ABCD")
    with pytest.raises(RangeError):
        alpha.to_char(index)
    # also usable as a plain IndexError
    with pytest.raises(IndexError):
        alpha.to_char(index)


def test_to_int_unknown_symbol():
    alpha = Alphabet("ABCD")
    with pytest.raises(SymbolLookupError):
        alpha.to_int("F")
    with pytest.raises(LookupError):
        alpha.to_int("a")


def test_equality_is_by_symbols():
    assert Alphabet("ABC") == Alphabet("ABC")
    assert Alphabet("ABC") != Alphabet("ACB")
    assert len(Alphabet("ABC")) == 3
