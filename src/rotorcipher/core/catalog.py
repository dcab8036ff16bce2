from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from .alphabet import Alphabet
from .errors import DuplicateRotorName, InvalidConfiguration, UnknownRotor
from .permutation import Permutation
from .results import RotorSpec
from .rotor import Rotor


@dataclass(frozen=True)
class _CatalogEntry:
    spec: RotorSpec
    permutation: Permutation


class RotorCatalog:
    """
    Every rotor a machine may be fitted with, keyed by name.

    Entries are read-only templates: the wiring is compiled once and shared,
    while build() hands out a fresh Rotor with its own position and ring.
    """

    def __init__(self, alphabet: Alphabet, specs: Iterable[RotorSpec] = ()) -> None:
        self.alphabet = alphabet
        self._entries: dict[str, _CatalogEntry] = {}
        for spec in specs:
            self.register(spec)

    def register(self, spec: RotorSpec) -> None:
        name = spec.name
        if not name.strip():
            raise InvalidConfiguration("Rotor must have a non-empty name.")
        if name in self._entries:
            raise DuplicateRotorName(name)
        perm = Permutation(spec.cycles, self.alphabet)
        entry = _CatalogEntry(spec=spec, permutation=perm)
        # validate notches/kind now rather than at first use
        self._make(entry)
        self._entries[name] = entry

    def names(self) -> list[str]:
        return list(self._entries)

    def spec(self, name: str) -> RotorSpec:
        return self._entry(name).spec

    def build(self, name: str) -> Rotor:
        return self._make(self._entry(name))

    def _entry(self, name: str) -> _CatalogEntry:
        try:
            return self._entries[name]
        except KeyError:
            raise UnknownRotor(name) from None

    @staticmethod
    def _make(entry: _CatalogEntry) -> Rotor:
        return Rotor(
            name=entry.spec.name,
            kind=entry.spec.kind,
            permutation=entry.permutation,
            notches=frozenset(entry.spec.notches),
        )

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[RotorSpec]:
        return (e.spec for e in self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)
