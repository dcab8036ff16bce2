from __future__ import annotations

import re
from typing import Iterable


_WHITESPACE_RE = re.compile(r"\s+")


def wrap(p: int, size: int) -> int:
    """Return p modulo size, always in 0..size-1 (also for negative p)."""
    return p % size


def strip_whitespace(s: str) -> str:
    return _WHITESPACE_RE.sub("", s)


def chunked(seq: Iterable, size: int):
    buf = []
    for x in seq:
        buf.append(x)
        if len(buf) == size:
            yield buf
            buf = []
    if buf:
        yield buf
