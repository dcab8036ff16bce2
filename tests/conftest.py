from __future__ import annotations

import pytest

from rotorcipher.core.alphabet import Alphabet
from rotorcipher.core.catalog import RotorCatalog
from rotorcipher.core.machine import Machine
from rotorcipher.core.permutation import Permutation
from rotorcipher.core.results import RotorSpec
from rotorcipher.core.rotor import RotorKind

from wirings import REFLECTOR_B, UPPER_STRING, WIRINGS


@pytest.fixture
def upper() -> Alphabet:
    return Alphabet(UPPER_STRING)


@pytest.fixture
def enigma_i_specs(upper: Alphabet) -> list[RotorSpec]:
    specs = [
        RotorSpec("B", RotorKind.REFLECTOR, str(Permutation.from_mapping(REFLECTOR_B, upper))),
    ]
    for name, (wiring, notch) in WIRINGS.items():
        cycles = str(Permutation.from_mapping(wiring, upper))
        specs.append(RotorSpec(name, RotorKind.MOVING, cycles, notch))
    return specs


@pytest.fixture
def enigma_i(upper: Alphabet, enigma_i_specs: list[RotorSpec]) -> Machine:
    """Three-rotor Enigma I with rotors I II III and reflector B fitted."""
    machine = Machine(upper, 4, 3, RotorCatalog(upper, enigma_i_specs))
    machine.insert_rotors(["B", "I", "II", "III"])
    machine.set_rotors("AAA")
    return machine
