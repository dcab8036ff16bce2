from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from rotorcipher.core.errors import InvalidConfiguration
from rotorcipher.core.machine import Machine
from rotorcipher.core.permutation import Permutation
from rotorcipher.core.results import ConversionStep

from .common import HEADER_MARK, format_groups, is_header, split_cycles

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionHeader:
    rotors: tuple[str, ...]
    setting: str
    rings: Optional[str] = None
    plugboard: str = ""


def parse_header(line: str, num_rotors: int) -> SessionHeader:
    """
    Parse "* B BETA III IV I AXLE [RINGS] (HQ) (EX) ...".

    The first num_rotors names select the rotors (reflector first), then
    comes the setting, an optional ring setting, and the plugboard cycles.
    """
    line = line.strip()
    if not is_header(line):
        raise InvalidConfiguration(f"Session header must start with {HEADER_MARK!r}: {line!r}.")
    head, plugboard = split_cycles(line[len(HEADER_MARK):])
    tokens = head.split()

    if len(tokens) < num_rotors + 1:
        raise InvalidConfiguration(
            f"Header needs {num_rotors} rotor names and a setting: {line!r}."
        )
    if len(tokens) > num_rotors + 2:
        raise InvalidConfiguration(f"Unexpected fields in header {line!r}.")

    rings = tokens[num_rotors + 1] if len(tokens) == num_rotors + 2 else None
    return SessionHeader(
        rotors=tuple(tokens[:num_rotors]),
        setting=tokens[num_rotors],
        rings=rings,
        plugboard=plugboard.strip(),
    )


def apply_header(machine: Machine, header: SessionHeader) -> None:
    """
    Start a new session: fresh rotors, positions, rings and plugboard.

    Everything is checked before the rotors are swapped, so a rejected
    header leaves the machine in its previous session.
    """
    plugboard = machine.check_plugboard(Permutation(header.plugboard, machine.alphabet()))
    machine.check_setting(header.setting, "setting")
    if header.rings is not None:
        machine.check_setting(header.rings, "ring setting")
    machine.insert_rotors(header.rotors)
    machine.set_rotors(header.setting)
    if header.rings is not None:
        machine.set_rings(header.rings)
    machine.set_plugboard(plugboard)
    log.debug("Session: %s", machine)


def log_step(step: ConversionStep) -> None:
    """Observer that traces every converted symbol at DEBUG level."""
    log.debug("[%s] %s -> %s -> %s", step.after, step.symbol_in, step.plugged_in, step.symbol_out)


def process_lines(machine: Machine, lines: Iterable[str]) -> Iterator[str]:
    """
    Run a message file through MACHINE, one output line per input line.

    Header lines reconfigure the machine and produce no output; blank lines
    are copied; message lines are converted and printed in groups of five.
    """
    configured = False
    for raw in lines:
        line = raw.strip()
        if not line:
            yield ""
        elif is_header(line):
            apply_header(machine, parse_header(line, machine.num_rotors()))
            configured = True
        else:
            if not configured:
                raise InvalidConfiguration("Message does not start with a '*' setting line.")
            yield format_groups(machine.convert_message(line))
