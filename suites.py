# suites.py
from __future__ import annotations

from typing import Dict, List, Tuple

from alphabet import ALPHA26

# ────────────────────────────────────────────────────────────────────────
#  Wheel database (historical wirings, read at position A)
# ────────────────────────────────────────────────────────────────────────

# name -> (wiring, turnover notches)
ROTORS: Dict[str, Tuple[str, str]] = {
    "I":    ("EKMFLGDQVZNTOWYHXUSPAIBRCJ", "Q"),
    "II":   ("AJDKSIRUXBLHWTMCQGZNPYFVOE", "E"),
    "III":  ("BDFHJLCPRTXVZNYEIWGAKMUSQO", "V"),
    "IV":   ("ESOVPZJAYQUIRHXLNFTGKDCMWB", "J"),
    "V":    ("VZBRGITYUPSDNHLXAWMJQOFECK", "Z"),
    "VI":   ("JPGVOUMFYQBENHZRDKASXLICTW", "ZM"),
    "VII":  ("NZJHGRCXMYSWBOUFAIVLPEKQDT", "ZM"),
    "VIII": ("FKQHTLXOCBJSPDZRAMEWNIUYGV", "ZM"),
}

# naval fourth wheels: never step
GREEK: Dict[str, str] = {
    "Beta":  "LEYJVCNIXWPBQMDRTAKZGFUHOS",
    "Gamma": "FSOKANUERHMBTIYCWLQPZXVGJD",
}

REFLECTORS: Dict[str, str] = {
    "A": "EJMZALYXVBWFCRQUONTSPIKHGD",
    "B": "YRUHQSLDPXNGOKMIEBFZCWVJAT",
    "C": "FVPJIAOYEDRZXWGCTKUQSBNMHL",
}

THIN_REFLECTORS: Dict[str, str] = {
    "B": "ENKQAUYWJICOPBLMDXZVFTHRGS",
    "C": "RDOBJNTKVEHMLFCWZAXGYIPSUQ",
}

SUITES: Dict[str, Dict] = {
    "M3": {  # Army / air force, three moving wheels
        "alphabet": ALPHA26,
        "n_rot": 4,
        "n_pawls": 3,
        "reflectors": REFLECTORS,
        "fixed": {},
    },
    "M4": {  # Naval, thin reflector plus a Greek wheel
        "alphabet": ALPHA26,
        "n_rot": 5,
        "n_pawls": 3,
        "reflectors": THIN_REFLECTORS,
        "fixed": GREEK,
    },
}


def wiring_to_cycles(wiring: str, alpha: str = ALPHA26) -> str:
    """Rewrite a wiring string in cycle notation, dropping fixed points.

    ``wiring[i]`` is where ``alpha[i]`` is sent.
    """
    if sorted(wiring) != sorted(alpha):
        raise ValueError("wiring must be a permutation of alphabet")

    seen: set[str] = set()
    cycles: List[str] = []
    for start in alpha:
        if start in seen:
            continue
        cycle = [start]
        seen.add(start)
        nxt = wiring[alpha.index(start)]
        while nxt != start:
            cycle.append(nxt)
            seen.add(nxt)
            nxt = wiring[alpha.index(nxt)]
        if len(cycle) > 1:
            cycles.append("(" + "".join(cycle) + ")")
    return " ".join(cycles)


def suite_config(name: str) -> str:
    """Return the configuration text for the built-in suite *name*."""
    try:
        suite = SUITES[name.upper()]
    except KeyError:
        raise ValueError(f"Unknown suite '{name}'. Expected one of {list(SUITES)}") from None

    alpha = suite["alphabet"]
    lines = [alpha, f"{suite['n_rot']} {suite['n_pawls']}"]
    for rname, (wiring, notches) in ROTORS.items():
        lines.append(f"{rname} M{notches} {wiring_to_cycles(wiring, alpha)}")
    for rname, wiring in suite["fixed"].items():
        lines.append(f"{rname} N {wiring_to_cycles(wiring, alpha)}")
    for rname, wiring in suite["reflectors"].items():
        lines.append(f"{rname} R {wiring_to_cycles(wiring, alpha)}")
    return "\n".join(lines) + "\n"


__all__ = ["SUITES", "wiring_to_cycles", "suite_config"]
