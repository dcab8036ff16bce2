from __future__ import annotations

from typing import Iterator

from .errors import InvalidConfiguration, NotInAlphabet

UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Reserved by the cycle notation and the line-oriented formats.
_RESERVED = set("()*")


class Alphabet:
    """
    An ordered set of distinct symbols. The k-th symbol has index k.

    Alphabets are immutable; rotate() builds a new one.
    """

    __slots__ = ("_chars", "_index")

    def __init__(self, chars: str = UPPER) -> None:
        if not chars:
            raise InvalidConfiguration("Alphabet must contain at least one symbol.")
        index: dict[str, int] = {}
        for i, ch in enumerate(chars):
            if ch.isspace() or ch in _RESERVED:
                raise InvalidConfiguration(f"Alphabet may not contain {ch!r}.")
            if ch in index:
                raise InvalidConfiguration(f"Alphabet repeats symbol {ch!r}.")
            index[ch] = i
        self._chars = chars
        self._index = index

    def size(self) -> int:
        return len(self._chars)

    def contains(self, ch: str) -> bool:
        return ch in self._index

    def to_char(self, index: int) -> str:
        """Symbol number index, taken modulo size()."""
        return self._chars[index % len(self._chars)]

    def to_int(self, ch: str) -> int:
        try:
            return self._index[ch]
        except KeyError:
            raise NotInAlphabet(ch, self._chars) from None

    def rotate(self, ch: str) -> "Alphabet":
        """New alphabet with the same cyclic order, starting at ch."""
        start = self.to_int(ch)
        return Alphabet(self._chars[start:] + self._chars[:start])

    def __len__(self) -> int:
        return len(self._chars)

    def __contains__(self, ch: object) -> bool:
        return ch in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self._chars)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._chars == other._chars

    def __hash__(self) -> int:
        return hash(self._chars)

    def __str__(self) -> str:
        return self._chars

    def __repr__(self) -> str:
        return f"Alphabet({self._chars!r})"
