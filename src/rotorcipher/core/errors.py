from __future__ import annotations


class EnigmaError(ValueError):
    """Base class for every configuration or usage error raised by rotorcipher."""


class NotInAlphabet(EnigmaError):
    def __init__(self, symbol: str, alphabet: str = "") -> None:
        self.symbol = symbol
        msg = f"Symbol {symbol!r} is not in the alphabet"
        if alphabet:
            msg += f" {alphabet!r}"
        super().__init__(msg + ".")


class MalformedCycles(EnigmaError):
    pass


class DuplicateInCycle(EnigmaError):
    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f"Symbol {symbol!r} appears in more than one cycle position.")


class DuplicateRotorName(EnigmaError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Rotor {name!r} used more than once.")


class UnknownRotor(EnigmaError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No rotor named {name!r} in the catalog.")


class MissingReflector(EnigmaError):
    pass


class TooManyMovingRotors(EnigmaError):
    pass


class InvalidSetting(EnigmaError):
    pass


class InvalidConfiguration(EnigmaError):
    pass
