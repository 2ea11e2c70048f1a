# rotor_and_reflector.py
from __future__ import annotations

from alphabet import Alphabet
from debug import Debug
from errors import ConfigError
from permutation import Permutation

debug = Debug()


class Rotor:
    """A wheel: a permutation seen through a rotational offset.

    The base class is inert. It neither rotates nor reflects and has no
    notches. The variants below override the capabilities they have.
    """

    def __init__(self, name: str, perm: Permutation) -> None:
        self.name = name
        self.permutation = perm
        self._setting = 0

    def alphabet(self) -> Alphabet:
        return self.permutation.alphabet()

    def size(self) -> int:
        return self.permutation.size()

    # ── capabilities ─────────────────────────────────────────────
    def rotates(self) -> bool:
        return False

    def reflects(self) -> bool:
        return False

    def at_notch(self) -> bool:
        """True iff I am positioned to let the rotor to my left advance."""
        return False

    def advance(self) -> None:
        """Advance one position, if I can."""

    def notch_reset(self, ring: int) -> None:
        """Shift my notches to account for a ring setting, if I have any."""

    # ── setting ──────────────────────────────────────────────────
    @property
    def setting(self) -> int:
        return self._setting

    def set(self, posn: int | str) -> None:
        """Set my setting to an index or to the index of a symbol."""
        if isinstance(posn, str):
            posn = self.alphabet().to_int(posn)
        self._setting = self.wrap(posn)

    def wrap(self, p: int) -> int:
        return p % self.size()

    # ── signal paths ---------------------------------------------
    def convert_forward(self, p: int, ring: int = 0) -> int:
        mapped = self.permutation.permute(p + self._setting - ring)
        return self.wrap(mapped - self.wrap(self._setting - ring))

    def convert_backward(self, e: int, ring: int = 0) -> int:
        mapped = self.permutation.invert(e + self._setting - ring)
        return self.wrap(mapped - self.wrap(self._setting - ring))

    # ── niceties --------------------------------------------------
    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name} pos={self._setting}>"


class FixedRotor(Rotor):
    """A rotor with no ratchet: it stays wherever it was set."""


class Reflector(Rotor):
    """The leftmost wheel. Its wiring must leave no symbol in place."""

    def __init__(self, name: str, perm: Permutation) -> None:
        if not perm.derangement():
            raise ConfigError(f"Reflector {name} must implement a derangement")
        super().__init__(name, perm)

    def reflects(self) -> bool:
        return True


class MovingRotor(Rotor):
    """A rotor with a ratchet and a (possibly empty) set of notches."""

    def __init__(self, name: str, perm: Permutation, notches: str) -> None:
        super().__init__(name, perm)
        alpha = perm.alphabet()
        self._notches: list[int] = [alpha.to_int(ch) for ch in notches]

    def notches(self) -> str:
        return "".join(self.alphabet().to_char(n) for n in self._notches)

    def rotates(self) -> bool:
        return True

    def at_notch(self) -> bool:
        return self.setting in self._notches

    def advance(self) -> None:
        self.set(self.setting + 1)
        debug.log("rotor", "%s advanced to %d", self.name, self.setting)

    def notch_reset(self, ring: int) -> None:
        self._notches = [self.wrap(n - ring) for n in self._notches]
        debug.log("rotor", "%s notches now %s", self.name, self.notches())
