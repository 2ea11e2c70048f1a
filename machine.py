# machine.py  ──────────────────────────────────────────────────────
from __future__ import annotations

from collections.abc import Iterable, Sequence

from alphabet import Alphabet
from debug import Debug
from errors import ConfigError, SettingError
from permutation import Permutation
from rotor_and_reflector import Rotor

debug = Debug()

BLOCK = 5


def group_blocks(text: str, block: int = BLOCK) -> str:
    """Split *text* into blocks of *block* symbols separated by one space."""
    return " ".join(text[i : i + block] for i in range(0, len(text), block))


class Machine:
    """A complete rotor machine.

    Slot 0 holds the reflector, the rightmost ``num_pawls`` slots hold
    moving rotors and everything in between is fixed. Every rotor the
    machine knows about lives in one list. The catalogue and the active
    slots both refer to rotors by their position in that list.
    """

    def __init__(
        self,
        alphabet: Alphabet,
        num_rotors: int,
        num_pawls: int,
        all_rotors: Iterable[Rotor],
    ) -> None:
        rotors = list(all_rotors)
        if not rotors:
            raise ConfigError("Machine needs at least one rotor")
        if not 0 <= num_pawls < num_rotors:
            raise ConfigError(
                f"Need 0 <= pawls < rotors, got {num_rotors} rotors "
                f"and {num_pawls} pawls"
            )

        self._alphabet = alphabet
        self._num_rotors = num_rotors
        self._num_pawls = num_pawls

        self._rotors: list[Rotor] = rotors
        self._catalog: dict[str, int] = {}
        for idx, rotor in enumerate(rotors):
            if rotor.name in self._catalog:
                raise ConfigError(f"Rotor {rotor.name} named twice")
            if rotor.alphabet() != alphabet:
                raise ConfigError(f"Rotor {rotor.name} uses a different alphabet")
            self._catalog[rotor.name] = idx

        self._active: list[int] = []
        self._plugboard: Permutation | None = None
        self._ring: list[int] | None = None

    # ── accessors ───────────────────────────────────────────────

    def alphabet(self) -> Alphabet:
        return self._alphabet

    def num_rotors(self) -> int:
        return self._num_rotors

    def num_pawls(self) -> int:
        return self._num_pawls

    def all_rotors(self) -> tuple[Rotor, ...]:
        return tuple(self._rotors)

    def rotor(self, name: str) -> Rotor:
        try:
            return self._rotors[self._catalog[name]]
        except KeyError:
            raise ConfigError(f"Unknown rotor {name!r}") from None

    def has_rotor(self, name: str) -> bool:
        return name in self._catalog

    def active_rotors(self) -> list[Rotor]:
        return [self._rotors[idx] for idx in self._active]

    def plugboard(self) -> Permutation | None:
        return self._plugboard

    def positions(self) -> str:
        """Return the window letters of every slot right of the reflector."""
        return "".join(
            self._alphabet.to_char(rotor.setting) for rotor in self.active_rotors()[1:]
        )

    # ── rotor assignment & settings ─────────────────────────────

    def insert_rotors(self, names: Sequence[str]) -> None:
        """Fill my slots with the rotors called *names*, reflector first."""
        if len(names) != self._num_rotors:
            raise ConfigError(
                f"Expected {self._num_rotors} rotors, got {len(names)}"
            )

        chosen: list[int] = []
        for name in names:
            if name not in self._catalog:
                raise ConfigError(f"Unknown rotor {name!r}")
            idx = self._catalog[name]
            if idx in chosen:
                raise SettingError(f"Rotor {name} may not repeat")
            chosen.append(idx)

        first_moving = self._num_rotors - self._num_pawls
        for slot, idx in enumerate(chosen):
            rotor = self._rotors[idx]
            if slot == 0:
                if not rotor.reflects():
                    raise ConfigError(f"First rotor {rotor.name} is not a reflector")
            elif slot < first_moving:
                if rotor.reflects():
                    raise ConfigError(f"Reflector {rotor.name} in a fixed-rotor slot")
                if rotor.rotates():
                    raise ConfigError(f"Moving rotor {rotor.name} in a fixed-rotor slot")
            elif not rotor.rotates():
                raise ConfigError(f"Rotor {rotor.name} in slot {slot} must move")

        moving = sum(1 for idx in chosen if self._rotors[idx].rotates())
        if moving != self._num_pawls:
            raise ConfigError(
                f"Expected {self._num_pawls} moving rotors, got {moving}"
            )

        self._active = chosen
        debug.log("config", "inserted %s", " ".join(names))

    def set_rotors(self, setting: str) -> None:
        """Set my rotors from *setting*, one symbol per non-reflector slot,
        leftmost first."""
        self._require_rotors()
        if len(setting) != self._num_rotors - 1:
            raise SettingError(
                f"Setting {setting!r} must have {self._num_rotors - 1} symbols"
            )
        for rotor, ch in zip(self.active_rotors()[1:], setting):
            rotor.set(ch)

    def set_ring(self, ring: str | None) -> None:
        """Use *ring* as ring setting (Ringstellung); ``None`` clears it."""
        if ring is None:
            self._ring = None
            return
        self._ring = self._ring_offsets(ring)

    def set_notches(self, ring: str) -> None:
        """Shift the notches of my moving rotors by the symbols of *ring*."""
        self._require_rotors()
        offsets = self._ring_offsets(ring)
        first_moving = self._num_rotors - self._num_pawls
        for slot in range(first_moving, self._num_rotors):
            self._rotors[self._active[slot]].notch_reset(offsets[slot - 1])

    def set_plugboard(self, plugboard: Permutation | None) -> None:
        self._plugboard = plugboard

    def _ring_offsets(self, ring: str) -> list[int]:
        if len(ring) != self._num_rotors - 1:
            raise SettingError(
                f"Ring {ring!r} must have {self._num_rotors - 1} symbols"
            )
        return [self._alphabet.to_int(ch) for ch in ring]

    def _require_rotors(self) -> None:
        if not self._active:
            raise SettingError("No rotors have been inserted")

    # ── stepping logic  ─────────────────────────────────────────

    def advancing_slots(self) -> frozenset[int]:
        """Return the slots that advance on the next key-press.

        The rightmost rotor always advances. A moving rotor with a moving
        neighbour on its left that sits at a notch advances together with
        that neighbour; this is what makes a middle rotor double-step.
        """
        self._require_rotors()
        last = self._num_rotors - 1
        first_moving = self._num_rotors - self._num_pawls

        slots = {last}
        for slot in range(last, first_moving, -1):
            if self._rotors[self._active[slot]].at_notch():
                slots.update((slot, slot - 1))
        return frozenset(slots)

    def step(self) -> None:
        """Advance rotors one key-press (decide first, then move)."""
        for slot in sorted(self.advancing_slots(), reverse=True):
            self._rotors[self._active[slot]].advance()
        if debug.active("stepping"):
            debug.log("stepping", "positions %s", self.positions())

    # ── encipher  ───────────────────────────────────────────────

    def convert(self, c: int) -> int:
        """Return the conversion of index *c* after advancing the machine."""
        self.step()
        return self.convert_all(c)

    def convert_all(self, signal: int) -> int:
        """Pass *signal* through plugboard and rotors without stepping."""
        self._require_rotors()
        rotors = self.active_rotors()

        if self._plugboard is not None:
            signal = self._plugboard.permute(signal)

        for slot in range(len(rotors) - 1, -1, -1):
            signal = rotors[slot].convert_forward(signal, self._ring_at(slot))

        for slot in range(1, len(rotors)):
            signal = rotors[slot].convert_backward(signal, self._ring_at(slot))

        if self._plugboard is not None:
            signal = self._plugboard.permute(signal)
        return signal

    def _ring_at(self, slot: int) -> int:
        if self._ring is None or slot == 0:
            return 0
        return self._ring[slot - 1]

    def convert_message(self, msg: str, block: int = BLOCK) -> str:
        """Convert *msg*, skipping whitespace, and group the result in
        blocks of *block* symbols."""
        out: list[str] = []
        for ch in msg:
            if ch.isspace():
                continue
            signal = self._alphabet.to_int(ch)
            out_ch = self._alphabet.to_char(self.convert(signal))
            debug.log("encipher", "%s -> %s", ch, out_ch)
            out.append(out_ch)
        return group_blocks("".join(out), block)
