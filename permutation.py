# permutation.py
from __future__ import annotations

from alphabet import Alphabet
from debug import Debug
from errors import FormatError, SymbolLookupError

debug = Debug()


class Permutation:
    """A permutation of an alphabet written in cycle notation.

    ``"(AELT) (BK) (S)"`` sends A→E, E→L, L→T, T→A, B→K, K→B and S→S.
    Symbols that appear in no cycle map to themselves; an empty string is
    the identity.
    """

    def __init__(self, cycles: str, alphabet: Alphabet) -> None:
        self._alphabet = alphabet
        self._cycles: list[str] = _parse_cycles(cycles, alphabet)

        # symbol lookup tables, one per direction
        self.mapping: dict[str, str] = {}
        self.inverse: dict[str, str] = {}
        for cycle in self._cycles:
            for i, ch in enumerate(cycle):
                nxt = cycle[(i + 1) % len(cycle)]
                self.mapping[ch] = nxt
                self.inverse[nxt] = ch

        debug.log("permutation", "parsed %d cycles from %r", len(self._cycles), cycles)

    def alphabet(self) -> Alphabet:
        return self._alphabet

    def size(self) -> int:
        return self._alphabet.size()

    def cycles(self) -> tuple[str, ...]:
        return tuple(self._cycles)

    def wrap(self, p: int) -> int:
        """Return P modulo the size of this permutation."""
        return p % self.size()

    # ── lookups ──────────────────────────────────────────────────
    def permute(self, x: int | str) -> int | str:
        """Apply the permutation to an index (wrapped) or to a symbol."""
        if isinstance(x, str):
            return self.mapping.get(self._require(x), x)
        ch = self._alphabet.to_char(self.wrap(x))
        return self._alphabet.to_int(self.mapping.get(ch, ch))

    def invert(self, x: int | str) -> int | str:
        """Apply the inverse permutation to an index (wrapped) or a symbol."""
        if isinstance(x, str):
            return self.inverse.get(self._require(x), x)
        ch = self._alphabet.to_char(self.wrap(x))
        return self._alphabet.to_int(self.inverse.get(ch, ch))

    def derangement(self) -> bool:
        """True iff no symbol maps to itself."""
        if any(len(cycle) < 2 for cycle in self._cycles):
            return False
        return len(self.mapping) == self.size()

    def _require(self, ch: str) -> str:
        if ch not in self._alphabet:
            raise SymbolLookupError(f"Symbol {ch!r} not in alphabet")
        return ch

    # ── niceties ────────────────────────────────────────────────
    def __str__(self) -> str:
        return " ".join(f"({cycle})" for cycle in self._cycles)

    def __repr__(self) -> str:
        return f"<Permutation {self}>"


def _parse_cycles(cycles: str, alphabet: Alphabet) -> list[str]:
    """Split a cycle string into its cycles, validating as we go."""
    result: list[str] = []
    seen: set[str] = set()
    current: list[str] | None = None

    for ch in cycles:
        if ch == "(":
            if current is not None:
                raise FormatError("Previous parenthesis was not closed")
            current = []
        elif ch == ")":
            if current is None:
                raise FormatError("Missing an open parenthesis")
            if not current:
                raise FormatError("Empty cycle '()'")
            result.append("".join(current))
            current = None
        elif ch.isspace():
            if current is not None:
                raise FormatError("Whitespace is not allowed inside a cycle")
        elif ch not in alphabet:
            raise FormatError(f"Symbol {ch!r} in cycle is not in the alphabet")
        elif current is None:
            raise FormatError(f"Symbol {ch!r} is outside any cycle")
        elif ch in seen:
            raise FormatError(f"Symbol {ch!r} appears in more than one place")
        else:
            seen.add(ch)
            current.append(ch)

    if current is not None:
        raise FormatError("Unclosed parenthesis at end of cycles")
    return result
