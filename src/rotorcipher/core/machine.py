from __future__ import annotations

from typing import Callable, Iterable, Optional, Sequence

from .alphabet import Alphabet
from .catalog import RotorCatalog
from .errors import (
    DuplicateRotorName,
    InvalidConfiguration,
    InvalidSetting,
    MissingReflector,
    TooManyMovingRotors,
)
from .permutation import Permutation, identity
from .results import ConversionStep, RotorSpec
from .rotor import Rotor

Observer = Callable[[ConversionStep], None]


class Machine:
    """
    A complete rotor machine.

    Slot 0 holds the reflector and slot num_rotors-1 the fast rotor. The
    machine is stateful: every converted symbol first steps the rotors, and
    positions carry over between convert() calls until the rotors are
    inserted again.
    """

    def __init__(
        self,
        alphabet: Alphabet,
        num_rotors: int,
        num_pawls: int,
        all_rotors: RotorCatalog | Iterable[RotorSpec],
        *,
        observer: Optional[Observer] = None,
    ) -> None:
        if num_rotors <= 1:
            raise InvalidConfiguration(f"A machine needs more than one rotor slot (got {num_rotors}).")
        if not 0 <= num_pawls < num_rotors:
            raise InvalidConfiguration(
                f"Number of pawls must be in 0..{num_rotors - 1} (got {num_pawls})."
            )
        if not isinstance(all_rotors, RotorCatalog):
            all_rotors = RotorCatalog(alphabet, all_rotors)
        elif all_rotors.alphabet != alphabet:
            raise InvalidConfiguration("Rotor catalog uses a different alphabet than the machine.")

        self._alphabet = alphabet
        self._num_rotors = num_rotors
        self._pawls = num_pawls
        self._catalog = all_rotors
        self._rotors: list[Rotor] = []
        self._plugboard: Permutation = identity(alphabet)
        self._observer = observer

    # ── accessors ─────────────────────────────────────────────────
    def alphabet(self) -> Alphabet:
        return self._alphabet

    def num_rotors(self) -> int:
        return self._num_rotors

    def num_pawls(self) -> int:
        return self._pawls

    @property
    def catalog(self) -> RotorCatalog:
        return self._catalog

    @property
    def plugboard(self) -> Permutation:
        return self._plugboard

    def get_rotor(self, k: int) -> Rotor:
        """Rotor in slot k (0 is the reflector)."""
        self._require_rotors()
        return self._rotors[k]

    def rotor_names(self) -> list[str]:
        return [r.name for r in self._rotors]

    def positions(self) -> str:
        """Current settings of slots 1..num_rotors-1, left to right."""
        return "".join(self._alphabet.to_char(r.position) for r in self._rotors[1:])

    def set_observer(self, observer: Optional[Observer]) -> None:
        self._observer = observer

    # ── configuration ─────────────────────────────────────────────
    def insert_rotors(self, rotors: Sequence[str]) -> None:
        """
        Fit the rotors named in ROTORS (rotors[0] names the reflector).

        Fresh rotor instances are built from the catalog, all at their 0
        setting and 0 ring.
        """
        if len(rotors) != self._num_rotors:
            raise InvalidConfiguration(
                f"Expected {self._num_rotors} rotor names, got {len(rotors)}."
            )
        seen: set[str] = set()
        fitted: list[Rotor] = []
        for name in rotors:
            if name in seen:
                raise DuplicateRotorName(name)
            seen.add(name)
            fitted.append(self._catalog.build(name))

        if not fitted[0].reflecting():
            raise MissingReflector(f"First rotor {fitted[0].name!r} is not a reflector.")
        moving = sum(1 for r in fitted if r.rotates())
        if moving > self._pawls:
            raise TooManyMovingRotors(
                f"{moving} moving rotors selected but the machine has only {self._pawls} pawls."
            )
        self._rotors = fitted

    def set_rotors(self, setting: str) -> None:
        """
        Set slots 1..n-1 from SETTING, one symbol per rotor, leftmost first.
        The reflector is never set this way.
        """
        self._require_rotors()
        for rotor, ch in zip(self._rotors[1:], self.check_setting(setting, "setting")):
            rotor.set(ch)

    def set_rings(self, rings: str) -> None:
        self._require_rotors()
        for rotor, ch in zip(self._rotors[1:], self.check_setting(rings, "ring setting")):
            rotor.set_ring(ch)

    def set_plugboard(self, plugboard: Permutation) -> None:
        self.check_plugboard(plugboard)
        self._plugboard = plugboard

    def check_plugboard(self, plugboard: Permutation) -> Permutation:
        if plugboard.alphabet != self._alphabet:
            raise InvalidSetting("Plugboard uses a different alphabet than the machine.")
        return plugboard

    def check_setting(self, setting: str, what: str = "setting") -> str:
        """
        Raise InvalidSetting unless SETTING has one alphabet symbol per
        non-reflector slot. Does not touch the machine.
        """
        if len(setting) != self._num_rotors - 1:
            raise InvalidSetting(
                f"Wrong {what} length: expected {self._num_rotors - 1} symbols, got {setting!r}."
            )
        for ch in setting:
            if not self._alphabet.contains(ch):
                raise InvalidSetting(f"Bad character {ch!r} in {what} {setting!r}.")
        return setting

    def _require_rotors(self) -> None:
        if not self._rotors:
            raise InvalidConfiguration("No rotors inserted.")

    # ── conversion ────────────────────────────────────────────────
    def convert(self, c: int | str) -> int | str:
        """
        Convert an index (after first advancing the machine) or a whole
        message. In a message, symbols outside the alphabet pass through
        unchanged and do not step the rotors.
        """
        if isinstance(c, str):
            return self.convert_message(c)
        return self.convert_index(c)

    def convert_index(self, c: int) -> int:
        self._require_rotors()
        c = self._plugboard.wrap(c)
        before = self.positions() if self._observer else ""

        self.advance_rotors()
        plugged = self._plugboard.permute(c)
        out = self._plugboard.permute(self._apply_rotors(plugged))

        if self._observer is not None:
            self._observer(
                ConversionStep(
                    before=before,
                    after=self.positions(),
                    symbol_in=self._alphabet.to_char(c),
                    plugged_in=self._alphabet.to_char(plugged),
                    symbol_out=self._alphabet.to_char(out),
                )
            )
        return out

    def convert_message(self, msg: str) -> str:
        out = []
        for ch in msg:
            if self._alphabet.contains(ch):
                out.append(self._alphabet.to_char(self.convert_index(self._alphabet.to_int(ch))))
            else:
                out.append(ch)
        return "".join(out)

    def advance_rotors(self) -> None:
        """
        Step the machine once. The fast rotor always steps; within the
        pawl-driven slots a rotor steps when its right neighbour is at a
        notch, and that neighbour steps with it. Notches are read before
        anything moves and each rotor moves at most once.
        """
        self._require_rotors()
        n = len(self._rotors)
        to_move = {n - 1}
        for i in range(n - 2, n - self._pawls - 1, -1):
            if self._rotors[i + 1].at_notch():
                to_move.add(i + 1)
                to_move.add(i)
        for i in sorted(to_move):
            self._rotors[i].advance()

    def _apply_rotors(self, c: int) -> int:
        for rotor in reversed(self._rotors[1:]):
            c = rotor.convert_forward(c)
        c = self._rotors[0].permutation.permute(c)
        for rotor in self._rotors[1:]:
            c = rotor.convert_backward(c)
        return c

    def __repr__(self) -> str:
        names = " ".join(self.rotor_names()) or "-"
        return f"<Machine rotors=[{names}] pos={self.positions() or '-'} plugboard={self._plugboard}>"
