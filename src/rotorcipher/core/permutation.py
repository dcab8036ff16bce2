from __future__ import annotations

from .alphabet import Alphabet
from .errors import DuplicateInCycle, InvalidConfiguration, MalformedCycles
from .utils import wrap


def _parse_cycles(cycles: str) -> list[str]:
    """
    Split "(ABC) (DE)" into ["ABC", "DE"].

    Whitespace is ignored everywhere; anything else outside a group, nested
    or unbalanced parentheses, and empty groups are rejected.
    """
    groups: list[str] = []
    current: list[str] | None = None
    for ch in cycles:
        if ch.isspace():
            continue
        if ch == "(":
            if current is not None:
                raise MalformedCycles(f"Nested '(' in cycles {cycles!r}.")
            current = []
        elif ch == ")":
            if current is None:
                raise MalformedCycles(f"Unbalanced ')' in cycles {cycles!r}.")
            if not current:
                raise MalformedCycles(f"Empty cycle in {cycles!r}.")
            groups.append("".join(current))
            current = None
        elif current is None:
            raise MalformedCycles(f"Symbol {ch!r} outside of a cycle in {cycles!r}.")
        else:
            current.append(ch)
    if current is not None:
        raise MalformedCycles(f"Unbalanced '(' in cycles {cycles!r}.")
    return groups


class Permutation:
    """
    A permutation of the indices of an alphabet, given in cycle notation.

    Symbols that appear in no cycle map to themselves. Integer arguments are
    taken modulo the alphabet size; symbol arguments must be in the alphabet.
    """

    def __init__(self, cycles: str, alphabet: Alphabet) -> None:
        self._alphabet = alphabet
        n = alphabet.size()
        forward = list(range(n))
        backward = list(range(n))
        covered: set[int] = set()

        for group in _parse_cycles(cycles):
            idx = []
            for ch in group:
                i = alphabet.to_int(ch)
                if i in covered:
                    raise DuplicateInCycle(ch)
                covered.add(i)
                idx.append(i)
            for a, b in zip(idx, idx[1:] + idx[:1]):
                forward[a] = b
                backward[b] = a

        self._forward = tuple(forward)
        self._backward = tuple(backward)
        self._covered = frozenset(covered)

    @classmethod
    def from_mapping(cls, mapping: str, alphabet: Alphabet) -> "Permutation":
        """
        Build from a wiring string: alphabet[i] maps to mapping[i].

        Every symbol is treated as explicitly wired, so a symbol wired to
        itself is a covered 1-cycle.
        """
        if len(mapping) != alphabet.size():
            raise InvalidConfiguration(
                f"Wiring {mapping!r} must have exactly {alphabet.size()} symbols."
            )
        targets = [alphabet.to_int(ch) for ch in mapping]
        if len(set(targets)) != len(targets):
            dup = next(ch for ch in mapping if mapping.count(ch) > 1)
            raise DuplicateInCycle(dup)

        seen: set[int] = set()
        groups = []
        for start in range(alphabet.size()):
            if start in seen:
                continue
            cycle = []
            i = start
            while i not in seen:
                seen.add(i)
                cycle.append(alphabet.to_char(i))
                i = targets[i]
            groups.append("(" + "".join(cycle) + ")")
        return cls(" ".join(groups), alphabet)

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    def size(self) -> int:
        return self._alphabet.size()

    def wrap(self, p: int) -> int:
        return wrap(p, self.size())

    def permute(self, p: int | str) -> int | str:
        if isinstance(p, str):
            return self._alphabet.to_char(self._forward[self._alphabet.to_int(p)])
        return self._forward[self.wrap(p)]

    def invert(self, c: int | str) -> int | str:
        if isinstance(c, str):
            return self._alphabet.to_char(self._backward[self._alphabet.to_int(c)])
        return self._backward[self.wrap(c)]

    def derangement(self) -> bool:
        """True iff every symbol is in some cycle and none maps to itself."""
        if len(self._covered) != self.size():
            return False
        return all(i != j for i, j in enumerate(self._forward))

    def is_involution(self) -> bool:
        """True iff applying the permutation twice is the identity (pairs and fixed points only)."""
        return self._forward == self._backward

    def cycles(self) -> list[str]:
        """Non-trivial cycles, each starting at its lowest index."""
        seen: set[int] = set()
        out: list[str] = []
        for start in range(self.size()):
            if start in seen or self._forward[start] == start:
                continue
            cycle = []
            i = start
            while i not in seen:
                seen.add(i)
                cycle.append(self._alphabet.to_char(i))
                i = self._forward[i]
            out.append("".join(cycle))
        return out

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Permutation):
            return NotImplemented
        return self._alphabet == other._alphabet and self._forward == other._forward

    def __hash__(self) -> int:
        return hash((self._alphabet, self._forward))

    def __str__(self) -> str:
        return " ".join(f"({c})" for c in self.cycles())

    def __repr__(self) -> str:
        return f"Permutation({str(self)!r}, {self._alphabet!r})"


def identity(alphabet: Alphabet) -> Permutation:
    return Permutation("", alphabet)

