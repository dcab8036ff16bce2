from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .rotor import RotorKind


@dataclass(frozen=True)
class RotorSpec:
    """One catalog entry, as read from a configuration source."""

    name: str
    kind: RotorKind
    cycles: str
    # Moving rotors only; each symbol is a notch position
    notches: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "kind": self.kind.value,
            "cycles": self.cycles,
            "notches": self.notches,
        }


@dataclass(frozen=True)
class ConversionStep:
    """
    Trace of a single converted symbol, handed to a Machine observer.

    ``before``/``after`` are the settings of slots 1..n-1 around the step
    that precedes the conversion.
    """

    before: str
    after: str
    symbol_in: str
    plugged_in: str
    symbol_out: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "before": self.before,
            "after": self.after,
            "symbol_in": self.symbol_in,
            "plugged_in": self.plugged_in,
            "symbol_out": self.symbol_out,
        }
