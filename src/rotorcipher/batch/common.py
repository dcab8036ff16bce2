from __future__ import annotations

from rotorcipher.core.errors import InvalidConfiguration
from rotorcipher.core.utils import chunked, strip_whitespace

HEADER_MARK = "*"
GROUP_SIZE = 5


def is_header(line: str) -> bool:
    return line.startswith(HEADER_MARK)


def split_cycles(text: str) -> tuple[str, str]:
    """
    Split "NAME TYPE (AB) (CD)" at the first '('.
    Returns (head, cycles); cycles is "" when there are none.
    """
    cut = text.find("(")
    if cut == -1:
        return text, ""
    return text[:cut], text[cut:]


def parse_two_ints(line: str) -> tuple[int, int]:
    """Parse a "numRotors numPawls" line."""
    parts = line.split()
    if len(parts) != 2:
        raise InvalidConfiguration(f"Expected 'numRotors numPawls', got {line!r}.")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError as e:
        raise InvalidConfiguration(f"Invalid num rotors or num pawls: {line!r}.") from e


def format_groups(text: str, size: int = GROUP_SIZE) -> str:
    """Drop whitespace and print in groups of SIZE (the last group may be shorter)."""
    return " ".join("".join(group) for group in chunked(strip_whitespace(text), size))
