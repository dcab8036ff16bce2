from __future__ import annotations

import logging
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any, Optional

from rotorcipher.core.alphabet import Alphabet
from rotorcipher.core.catalog import RotorCatalog
from rotorcipher.core.errors import InvalidConfiguration
from rotorcipher.core.machine import Machine, Observer
from rotorcipher.core.results import RotorSpec
from rotorcipher.core.rotor import RotorKind

from .common import parse_two_ints, split_cycles

log = logging.getLogger(__name__)

DEFAULT_CONFIG = "default.conf"


@dataclass(frozen=True)
class MachineConfig:
    alphabet: Alphabet
    num_rotors: int
    num_pawls: int
    rotors: tuple[RotorSpec, ...]

    def catalog(self) -> RotorCatalog:
        return RotorCatalog(self.alphabet, self.rotors)

    def build_machine(self, observer: Optional[Observer] = None) -> Machine:
        return Machine(
            self.alphabet,
            self.num_rotors,
            self.num_pawls,
            self.catalog(),
            observer=observer,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "alphabet": str(self.alphabet),
            "num_rotors": self.num_rotors,
            "num_pawls": self.num_pawls,
            "rotors": [r.to_dict() for r in self.rotors],
        }


def _parse_rotor(line: str) -> RotorSpec:
    """
    Parse "NAME TYPE (cycles)..." where TYPE is M<notches>, N or R.
    Example: "I MQ (AELTPHQXRU) (BKNW) (CMOY) (DFG) (IV) (JZ) (S)"
    """
    head, cycles = split_cycles(line)
    parts = head.split()
    if len(parts) != 2:
        raise InvalidConfiguration(f"Bad rotor description {line!r}.")
    name, type_field = parts
    kind = RotorKind.from_code(type_field[0])
    notches = type_field[1:]
    if notches and kind is not RotorKind.MOVING:
        raise InvalidConfiguration(f"Only moving rotors take notches: {line!r}.")
    return RotorSpec(name=name, kind=kind, cycles=cycles, notches=notches)


def parse_config(text: str) -> MachineConfig:
    """
    Parse a machine description:

        line 1     the alphabet
        line 2     numRotors numPawls
        then       one rotor per line; lines starting with '(' continue
                   the cycles of the rotor above

    Blank lines are ignored.
    """
    lines = [ln.strip() for ln in text.splitlines()]
    lines = [ln for ln in lines if ln]
    if len(lines) < 2:
        raise InvalidConfiguration("Configuration file truncated.")

    alpha_line = lines[0]
    if len(alpha_line.split()) != 1:
        raise InvalidConfiguration(f"Invalid alphabet {alpha_line!r}.")
    alphabet = Alphabet(alpha_line)
    num_rotors, num_pawls = parse_two_ints(lines[1])

    # gather continuation lines before parsing each rotor
    descriptions: list[str] = []
    for ln in lines[2:]:
        if ln.startswith("("):
            if not descriptions:
                raise InvalidConfiguration(f"Cycles {ln!r} do not follow a rotor description.")
            descriptions[-1] += " " + ln
        else:
            descriptions.append(ln)

    rotors = tuple(_parse_rotor(d) for d in descriptions)
    config = MachineConfig(
        alphabet=alphabet,
        num_rotors=num_rotors,
        num_pawls=num_pawls,
        rotors=rotors,
    )
    # compile wirings and run the machine-level checks up front
    config.build_machine()
    return config


def load_config(path: str | Path) -> MachineConfig:
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        raise InvalidConfiguration(f"could not open {p}") from e
    config = parse_config(text)
    log.debug("Loaded %d rotors from %s", len(config.rotors), p)
    return config


def load_default_config() -> MachineConfig:
    """Standard Enigma wheel set shipped as rotorcipher.data/default.conf."""
    text = resources.files("rotorcipher.data").joinpath(DEFAULT_CONFIG).read_text(encoding="utf-8")
    config = parse_config(text)
    log.debug("Loaded %d rotors from package data %s", len(config.rotors), DEFAULT_CONFIG)
    return config
