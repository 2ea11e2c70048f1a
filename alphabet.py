# alphabet.py
from __future__ import annotations

from debug import Debug
from errors import FormatError, RangeError, SymbolLookupError

debug = Debug()

ALPHA26 = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# structural delimiters of the cycle and setting-line syntax
RESERVED = frozenset("()*")


class Alphabet:
    """An ordered set of encodable symbols, numbered from 0."""

    def __init__(self, chars: str = ALPHA26) -> None:
        if not chars:
            raise FormatError("Alphabet must contain at least one symbol")

        self.alpha_to_index: dict[str, int] = {}
        for i, ch in enumerate(chars):
            if ch.isspace() or ch in RESERVED:
                raise FormatError(f"Alphabet may not contain {ch!r}")
            if ch in self.alpha_to_index:
                raise FormatError(f"Symbol {ch!r} repeated in alphabet")
            self.alpha_to_index[ch] = i

        self._chars: str = chars
        debug.log("alphabet", "%d symbols: %s", len(chars), chars)

    @property
    def symbols(self) -> str:
        return self._chars

    def size(self) -> int:
        return len(self._chars)

    def contains(self, ch: str) -> bool:
        return ch in self.alpha_to_index

    # symbol → integer index
    def to_int(self, ch: str) -> int:
        try:
            return self.alpha_to_index[ch]
        except KeyError:
            raise SymbolLookupError(
                f"Invalid character {ch!r} for current alphabet."
            ) from None

    # integer index → symbol
    def to_char(self, index: int) -> str:
        if not (0 <= index < len(self._chars)):
            hi = len(self._chars) - 1
            raise RangeError(f"Index {index} out of range 0–{hi}")
        return self._chars[index]

    # ── niceties ────────────────────────────────────────────────
    def __len__(self) -> int:
        return len(self._chars)

    def __contains__(self, ch: object) -> bool:
        return ch in self.alpha_to_index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._chars == other._chars

    def __hash__(self) -> int:
        return hash(self._chars)

    def __repr__(self) -> str:
        return f"<Alphabet {self._chars!r}>"
