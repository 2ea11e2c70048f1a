# config_reader.py
"""Turn configuration text and ``*`` setting lines into machine state.

Configuration text::

    ABCDEFGHIJKLMNOPQRSTUVWXYZ
    5 3
    I MQ (AELTPHQXRU) (BKNW) (CMOY) (DFG) (IV) (JZ)
    Beta N (ALBEVFCYODJWUGNMQTZSKPR) (HIX)
    B R (AE) (BN) (CK) (DQ) (FU) (GY) (HW) (IJ) (LO) (MP)
         (RX) (SZ) (TV)

Line one is the alphabet, line two holds the number of rotor slots and
pawls, and every following record names a rotor, its kind (``R``
reflector, ``N`` fixed, ``M`` moving followed by its notches) and its
cycles. A line starting with ``(`` continues the previous record.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from alphabet import Alphabet
from debug import Debug
from errors import ConfigError, FormatError, SettingError
from machine import Machine
from permutation import Permutation
from rotor_and_reflector import FixedRotor, MovingRotor, Reflector, Rotor

debug = Debug()


# ────────────────────────────────────────────────────────────────────────
#  1. Machine description
# ────────────────────────────────────────────────────────────────────────


def read_config(text: str) -> Machine:
    """Return a machine built from configuration *text*."""
    lines = [line.strip() for line in text.splitlines()]
    lines = [line for line in lines if line]
    if not lines:
        raise ConfigError("The configuration file is empty")
    if len(lines) < 2:
        raise ConfigError("Configuration file truncated")

    alphabet = Alphabet(lines[0])
    num_rotors, num_pawls = _read_counts(lines[1])

    rotors: List[Rotor] = []
    names: set[str] = set()
    for record in _split_records(lines[2:]):
        rotor = read_rotor(record, alphabet)
        if rotor.name in names:
            raise ConfigError(f"Rotor {rotor.name} repeats in configuration")
        names.add(rotor.name)
        rotors.append(rotor)

    debug.log("config", "%d rotors, %d slots, %d pawls", len(rotors), num_rotors, num_pawls)
    return Machine(alphabet, num_rotors, num_pawls, rotors)


def _read_counts(line: str) -> tuple[int, int]:
    fields = line.split()
    if len(fields) != 2:
        raise FormatError(f"Expected rotor and pawl counts, got {line!r}")
    try:
        num_rotors, num_pawls = (int(f) for f in fields)
    except ValueError:
        raise FormatError(f"Rotor and pawl counts must be numbers: {line!r}") from None
    if not num_rotors > num_pawls >= 0:
        raise ConfigError(f"Need rotors > pawls >= 0, got {num_rotors} {num_pawls}")
    return num_rotors, num_pawls


def _split_records(lines: List[str]) -> List[str]:
    records: List[str] = []
    for line in lines:
        if line.startswith("("):
            if not records:
                raise FormatError("Cycles given before any rotor name")
            records[-1] += " " + line
        else:
            records.append(line)
    return records


def read_rotor(record: str, alphabet: Alphabet) -> Rotor:
    """Return the rotor described by one configuration *record*."""
    fields = record.split(maxsplit=2)
    if len(fields) < 2:
        raise FormatError(f"Bad rotor description: {record!r}")
    name, kind = fields[0], fields[1]
    cycles = fields[2] if len(fields) == 3 else ""

    if "(" in name or ")" in name:
        raise FormatError(f"Rotor name {name!r} may not contain parentheses")

    perm = Permutation(cycles, alphabet)
    tag, notches = kind[0], kind[1:]
    if tag == "M":
        return MovingRotor(name, perm, notches)
    if notches:
        raise FormatError(f"Only moving rotors take notches: {kind!r}")
    if tag == "N":
        return FixedRotor(name, perm)
    if tag == "R":
        return Reflector(name, perm)
    raise ConfigError(f"Unknown rotor kind {kind!r} for {name}")


# ────────────────────────────────────────────────────────────────────────
#  2. Setting lines
# ────────────────────────────────────────────────────────────────────────


@dataclass(slots=True)
class SettingLine:
    """The parts of one ``*`` line."""

    rotors: List[str]
    setting: str
    ring: Optional[str] = None
    plugboard: Optional[str] = None


def is_setting_line(line: str) -> bool:
    return line.lstrip().startswith("*")


def parse_setting(line: str, machine: Machine) -> SettingLine:
    """Split a ``*`` line into rotor names, setting, ring and plugboard.

    Leading tokens that name rotors in *machine*'s catalogue are rotor
    names; the first token that does not is the setting.
    """
    if not is_setting_line(line):
        raise SettingError(f"Not a setting line: {line!r}")
    tokens = line.lstrip()[1:].split()

    count = 0
    while count < len(tokens) and machine.has_rotor(tokens[count]):
        count += 1
    if count != machine.num_rotors():
        raise ConfigError(f"Expected {machine.num_rotors()} rotors, got {count}")
    names, rest = tokens[:count], tokens[count:]
    if not rest:
        raise SettingError("No initial setting")

    setting, rest = rest[0], rest[1:]
    ring = None
    if rest and not rest[0].startswith("("):
        ring, rest = rest[0], rest[1:]

    plugboard = " ".join(rest) or None
    if plugboard is not None and not plugboard.startswith("("):
        raise FormatError(f"Bad plugboard {plugboard!r}")
    return SettingLine(names, setting, ring, plugboard)


def apply_setting(machine: Machine, line: str) -> SettingLine:
    """Reconfigure *machine* from a ``*`` line; ring and plugboard are
    replaced, not merged."""
    parsed = parse_setting(line, machine)

    plugboard = None
    if parsed.plugboard is not None:
        plugboard = Permutation(parsed.plugboard, machine.alphabet())

    machine.insert_rotors(parsed.rotors)
    machine.set_ring(parsed.ring)
    machine.set_rotors(parsed.setting)
    machine.set_plugboard(plugboard)

    debug.log("config", "setting %s ring %s plug %s", parsed.setting, parsed.ring, parsed.plugboard)
    return parsed
