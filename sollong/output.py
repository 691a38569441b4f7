"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from .chars import itoa


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: Optional[TextIO] = None) -> None:
    """Write a single character to stream (standard output by default)."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def put_str(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write s to stream; None writes nothing."""
    if s is None:
        return
    _target(stream).write(s)


def put_endl(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write s followed by a newline; None writes nothing."""
    if s is None:
        return
    out = _target(stream)
    out.write(s)
    out.write("\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal form of n to stream."""
    _target(stream).write(itoa(n))