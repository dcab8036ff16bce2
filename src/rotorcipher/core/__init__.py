from .alphabet import Alphabet
from .catalog import RotorCatalog
from .errors import (
    DuplicateInCycle,
    DuplicateRotorName,
    EnigmaError,
    InvalidConfiguration,
    InvalidSetting,
    MalformedCycles,
    MissingReflector,
    NotInAlphabet,
    TooManyMovingRotors,
    UnknownRotor,
)
from .machine import Machine
from .permutation import Permutation
from .results import ConversionStep, RotorSpec
from .rotor import Rotor, RotorKind

__all__ = [
    "Alphabet",
    "Permutation",
    "Rotor",
    "RotorKind",
    "RotorSpec",
    "RotorCatalog",
    "Machine",
    "ConversionStep",
    "EnigmaError",
    "NotInAlphabet",
    "MalformedCycles",
    "DuplicateInCycle",
    "DuplicateRotorName",
    "UnknownRotor",
    "MissingReflector",
    "TooManyMovingRotors",
    "InvalidSetting",
    "InvalidConfiguration",
]
