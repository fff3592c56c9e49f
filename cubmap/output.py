"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

from typing import Optional, TextIO


def put_char(c: str, stream: TextIO) -> None:
    """Write a single character."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    stream.write(c)


def put_str(s: Optional[str], stream: TextIO) -> None:
    """Write a string; nothing is written for None."""
    if s is not None:
        stream.write(s)


def put_endl(s: Optional[str], stream: TextIO) -> None:
    """Write a string followed by a newline; nothing is written for None."""
    if s is not None:
        stream.write(s)
        stream.write("\n")


def put_nbr(n: int, stream: TextIO) -> None:
    """Write an integer in decimal."""
    if n < 0:
        put_char("-", stream)
        n = -n
    stream.write(str(n))