"""String helpers with NUL-terminated semantics and 32-bit integer parsing."""

from __future__ import annotations

import re
from itertools import zip_longest

_INT_MIN = -(2**31)
_INT_RANGE = 2**32

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)", re.ASCII)


def _c_string(s: str) -> str:
    """Return ``s`` cut at its first NUL character."""
    return s.partition("\0")[0]


def _wrap_int32(value: int) -> int:
    """Wrap ``value`` into the signed 32-bit range."""
    return (value - _INT_MIN) % _INT_RANGE + _INT_MIN


def _single_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError("expected a single character")
    return c


def _non_negative(n: int, name: str) -> int:
    if n < 0:
        raise ValueError(f"{name} must not be negative")
    return n


def atoi(text: str) -> int:
    """Parse a leading decimal integer, wrapping it to a signed 32-bit value.

    Leading whitespace and at most one sign are accepted; parsing stops at the
    first non-digit. Text without digits yields 0.
    """
    match = _LEADING_INT.match(_c_string(text))
    sign, digits = match.groups()
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    return _wrap_int32(value)


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    return format(n, "d")


def strlen(s: str) -> int:
    """Length of ``s`` up to its first NUL character."""
    return len(_c_string(s))


def strchr(s: str, c: str) -> int | None:
    """Index of the first ``c`` in ``s``; a NUL ``c`` finds the terminator."""
    body = _c_string(s)
    if _single_char(c) == "\0":
        return len(body)
    index = body.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> int | None:
    """Index of the last ``c`` in ``s``; a NUL ``c`` finds the terminator."""
    body = _c_string(s)
    if _single_char(c) == "\0":
        return len(body)
    index = body.rfind(c)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; returns the difference of the first mismatch."""
    _non_negative(n, "n")
    left = _c_string(s1)[:n]
    right = _c_string(s2)[:n]
    for a, b in zip_longest(left, right, fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of ``little`` lying wholly within the first ``length`` characters of ``big``."""
    _non_negative(length, "length")
    needle = _c_string(little)
    if not needle:
        return 0
    index = _c_string(big)[:length].find(needle)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Copy of ``s`` up to its first NUL character."""
    return _c_string(s)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text and the full length of ``src``.
    """
    _non_negative(size, "size")
    source = _c_string(src)
    copied = source[: size - 1] if size > 0 else ""
    return copied, len(source)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have had.
    """
    _non_negative(size, "size")
    dest = _c_string(dst)
    source = _c_string(src)
    dest_len = len(dest)
    result = dest
    if size > 0 and size - 1 >= dest_len:
        result = dest + source[: size - 1 - dest_len]
    return result, min(size, dest_len) + len(source)