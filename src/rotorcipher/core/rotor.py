from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .alphabet import Alphabet
from .errors import InvalidConfiguration
from .permutation import Permutation
from .utils import wrap


class RotorKind(str, Enum):
    REFLECTOR = "reflector"
    FIXED = "fixed"
    MOVING = "moving"

    @classmethod
    def from_code(cls, code: str) -> "RotorKind":
        """Map the one-letter type codes used in configuration files (R, N, M)."""
        try:
            return _CODES[code.upper()]
        except KeyError:
            raise InvalidConfiguration(
                f"Unknown rotor type {code!r}. Expected one of {', '.join(_CODES)}."
            ) from None

    @property
    def code(self) -> str:
        return {RotorKind.REFLECTOR: "R", RotorKind.FIXED: "N", RotorKind.MOVING: "M"}[self]


_CODES = {"R": RotorKind.REFLECTOR, "N": RotorKind.FIXED, "M": RotorKind.MOVING}


@dataclass(eq=False)
class Rotor:
    """
    One wheel of the machine: a wiring permutation plus its rotational state.

    The behaviour of advance(), at_notch(), rotates() and reflecting() is
    selected by ``kind``. The permutation is immutable and may be shared; the
    position and ring are owned by whichever Machine built this rotor.
    Position 0 is the first symbol of the alphabet.
    """

    name: str
    kind: RotorKind
    permutation: Permutation
    notches: frozenset[str] = field(default_factory=frozenset)
    position: int = 0
    ring: int = 0

    def __post_init__(self) -> None:
        self.notches = frozenset(self.notches)
        if self.notches and self.kind is not RotorKind.MOVING:
            raise InvalidConfiguration(f"Only moving rotors have notches (rotor {self.name!r}).")
        for ch in self.notches:
            # raises NotInAlphabet for a foreign notch symbol
            self.alphabet.to_int(ch)

    @property
    def alphabet(self) -> Alphabet:
        return self.permutation.alphabet

    def size(self) -> int:
        return self.permutation.size()

    # ── capabilities ──────────────────────────────────────────────
    def rotates(self) -> bool:
        return self.kind is RotorKind.MOVING

    def reflecting(self) -> bool:
        return self.kind is RotorKind.REFLECTOR

    # ── state ─────────────────────────────────────────────────────
    @property
    def setting(self) -> int:
        return self.position

    def set(self, posn: int | str) -> None:
        if isinstance(posn, str):
            posn = self.alphabet.to_int(posn)
        self.position = wrap(posn, self.size())

    def set_ring(self, ring: int | str) -> None:
        if isinstance(ring, str):
            ring = self.alphabet.to_int(ring)
        self.ring = wrap(ring, self.size())

    def at_notch(self) -> bool:
        if self.kind is not RotorKind.MOVING:
            return False
        return self.alphabet.to_char(self.position) in self.notches

    def advance(self) -> None:
        if self.kind is RotorKind.MOVING:
            self.position = wrap(self.position + 1, self.size())

    # ── signal paths ──────────────────────────────────────────────
    def _offset(self) -> int:
        return self.position - self.ring

    def convert_forward(self, p: int) -> int:
        off = self._offset()
        return self.permutation.wrap(self.permutation.permute(p + off) - off)

    def convert_backward(self, e: int) -> int:
        off = self._offset()
        return self.permutation.wrap(self.permutation.invert(e + off) - off)

    def __repr__(self) -> str:
        sym = self.alphabet.to_char(self.position)
        return f"<Rotor {self.name} {self.kind.value} pos={sym} ring={self.alphabet.to_char(self.ring)}>"
