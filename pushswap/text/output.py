"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

from typing import TextIO


def _c_string(s: str) -> str:
    """Return ``s`` cut at its first NUL character."""
    return s.partition("\0")[0]


def put_char(c: str, stream: TextIO) -> None:
    """Write a single character to ``stream``."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError("expected a single character")
    stream.write(c)


def put_str(s: str, stream: TextIO) -> None:
    """Write ``s`` up to its first NUL character to ``stream``."""
    stream.write(_c_string(s))


def put_endl(s: str, stream: TextIO) -> None:
    """Write ``s`` followed by a newline to ``stream``."""
    stream.write(_c_string(s) + "\n")


def put_nbr(n: int, stream: TextIO) -> None:
    """Write the decimal representation of an integer to ``stream``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    stream.write(format(n, "d"))