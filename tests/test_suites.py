import pytest

from config_reader import read_config
from rotor_and_reflector import FixedRotor, MovingRotor, Reflector
from suites import ROTORS, SUITES, suite_config, wiring_to_cycles


def test_wiring_to_cycles_rotor_i():
    wiring, _ = ROTORS["I"]
    assert wiring_to_cycles(wiring) == "(AELTPHQXRU) (BKNW) (CMOY) (DFG) (IV) (JZ)"


def test_wiring_to_cycles_thin_reflector():
    assert wiring_to_cycles("ENKQAUYWJICOPBLMDXZVFTHRGS") == (
        "(AE) (BN) (CK) (DQ) (FU) (GY) (HW) (IJ) (LO) (MP) (RX) (SZ) (TV)"
    )


def test_identity_wiring_has_no_cycles():
    assert wiring_to_cycles("ABCD", "ABCD") == ""


def test_wiring_must_be_a_permutation():
    with pytest.raises(ValueError):
        wiring_to_cycles("AACD", "ABCD")


@pytest.mark.parametrize("name", sorted(SUITES))
def test_every_suite_loads(name):
    machine = read_config(suite_config(name))
    suite = SUITES[name]
    assert machine.num_rotors() == suite["n_rot"]
    assert machine.num_pawls() == suite["n_pawls"]
    kinds = {type(r) for r in machine.all_rotors()}
    assert MovingRotor in kinds and Reflector in kinds


def test_suite_name_is_case_insensitive():
    assert suite_config("m4") == suite_config("M4")


def test_unknown_suite():
    with pytest.raises(ValueError):
        suite_config("M9")


def test_naval_wheels(m4):
    assert isinstance(m4.rotor("Beta"), FixedRotor)
    assert isinstance(m4.rotor("Gamma"), FixedRotor)
    assert m4.rotor("VI").notches() == "ZM"
    assert not m4.has_rotor("A")


def test_army_reflectors(m3):
    assert {r.name for r in m3.all_rotors() if r.reflects()} == {"A", "B", "C"}
    assert not m3.has_rotor("Beta")
