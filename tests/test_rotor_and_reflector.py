import pytest

from alphabet import Alphabet
from errors import ConfigError, SymbolLookupError
from permutation import Permutation
from rotor_and_reflector import FixedRotor, MovingRotor, Reflector
from suites import ROTORS, wiring_to_cycles

ABCD = Alphabet("ABCD")


def rotor_i():
    wiring, notch = ROTORS["I"]
    return MovingRotor("I", Permutation(wiring_to_cycles(wiring), Alphabet()), notch)


def test_capabilities():
    refl = Reflector("R", Permutation("(AB) (CD)", ABCD))
    fixed = FixedRotor("F", Permutation("(ABC)", ABCD))
    moving = MovingRotor("M", Permutation("(ABCD)", ABCD), "C")

    assert (refl.rotates(), refl.reflects(), refl.at_notch()) == (False, True, False)
    assert (fixed.rotates(), fixed.reflects(), fixed.at_notch()) == (False, False, False)
    assert (moving.rotates(), moving.reflects()) == (True, False)


def test_reflector_needs_derangement():
    with pytest.raises(ConfigError):
        Reflector("R", Permutation("(AB)", ABCD))
    with pytest.raises(ConfigError):
        Reflector("R", Permutation("(AB) (C) (D)", ABCD))


def test_fixed_rotors_do_not_advance():
    fixed = FixedRotor("F", Permutation("(ABC)", ABCD))
    refl = Reflector("R", Permutation("(AB) (CD)", ABCD))
    fixed.set("C")
    fixed.advance()
    refl.advance()
    assert fixed.setting == 2
    assert refl.setting == 0


def test_set_by_symbol_and_index():
    rotor = rotor_i()
    rotor.set("Q")
    assert rotor.setting == 16
    rotor.set(3)
    assert rotor.setting == 3
    rotor.set(27)
    assert rotor.setting == 1
    with pytest.raises(SymbolLookupError):
        rotor.set("q")


def test_advance_wraps_and_notch():
    rotor = rotor_i()
    rotor.set("P")
    assert not rotor.at_notch()
    rotor.advance()
    assert rotor.at_notch()
    rotor.set("Z")
    rotor.advance()
    assert rotor.setting == 0


def test_historical_rotor_i_forward():
    rotor = rotor_i()
    assert rotor.convert_forward(0) == 4       # A -> E at position A
    rotor.set("B")
    assert rotor.convert_forward(0) == 9       # A -> J at position B


def test_offset_shifts_wiring():
    rotor = MovingRotor("M", Permutation("(AB)", ABCD), "")
    rotor.set(1)
    assert [rotor.convert_forward(p) for p in range(4)] == [3, 1, 2, 0]
    assert [rotor.convert_backward(p) for p in range(4)] == [3, 1, 2, 0]
    # a ring equal to the setting cancels the offset
    assert [rotor.convert_forward(p, 1) for p in range(4)] == [1, 0, 2, 3]


@pytest.mark.parametrize("setting", [0, 5, 16, 25])
@pytest.mark.parametrize("ring", [0, 1, 13])
def test_forward_and_backward_are_inverses(setting, ring):
    rotor = rotor_i()
    rotor.set(setting)
    for p in range(rotor.size()):
        assert rotor.convert_backward(rotor.convert_forward(p, ring), ring) == p
        assert rotor.convert_forward(rotor.convert_backward(p, ring), ring) == p


def test_empty_notches_never_at_notch():
    rotor = MovingRotor("M", Permutation("(ABCD)", ABCD), "")
    for _ in range(4):
        assert not rotor.at_notch()
        rotor.advance()
    assert rotor.notches() == ""


def test_notch_reset_shifts_notches():
    rotor = MovingRotor("M", rotor_i().permutation, "QA")
    rotor.notch_reset(1)
    assert rotor.notches() == "PZ"
    rotor.set("P")
    assert rotor.at_notch()


def test_notch_outside_alphabet():
    with pytest.raises(SymbolLookupError):
        MovingRotor("M", Permutation("(ABCD)", ABCD), "E")


def test_notch_reset_is_noop_for_fixed():
    fixed = FixedRotor("F", Permutation("(ABC)", ABCD))
    fixed.notch_reset(2)
    assert not fixed.at_notch()


def test_alphabet_comes_from_permutation():
    rotor = rotor_i()
    assert rotor.alphabet() == Alphabet()
    assert rotor.size() == 26
    assert repr(rotor) == "<MovingRotor I pos=0>"
