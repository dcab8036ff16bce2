from .core import (
    Alphabet,
    ConversionStep,
    EnigmaError,
    Machine,
    Permutation,
    Rotor,
    RotorCatalog,
    RotorKind,
    RotorSpec,
)

__version__ = "0.1.0"

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
]
