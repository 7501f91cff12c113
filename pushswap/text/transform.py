"""String building helpers: slicing, joining, trimming, splitting and mapping."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence


def _c_string(s: str) -> str:
    """Return ``s`` cut at its first NUL character."""
    return s.partition("\0")[0]


def _single_char(c: str, name: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"{name} must be a single character")
    return c


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start at or past the end of the string yields an empty string.
    """
    if start < 0:
        raise ValueError("start must not be negative")
    if length < 0:
        raise ValueError("length must not be negative")
    body = _c_string(s)
    if start >= len(body):
        return ""
    return body[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return _c_string(s1) + _c_string(s2)


def strtrim(s: str, charset: str) -> str:
    """Remove every leading and trailing character found in ``charset``."""
    body = _c_string(s)
    trim = _c_string(charset)
    if not trim:
        return body
    return body.strip(trim)


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on ``sep``, dropping empty pieces."""
    body = _c_string(s)
    if _single_char(sep, "sep") == "\0":
        return [body] if body else []
    return [piece for piece in body.split(sep) if piece]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to every character."""
    pieces = []
    for index, char in enumerate(_c_string(s)):
        mapped = func(index, char)
        pieces.append(_single_char(mapped, "mapped value"))
    return "".join(pieces)


def striteri(chars: MutableSequence[str], func: Callable[[int, str], str]) -> None:
    """Replace each character in place with ``func(index, char)``.

    Processing stops at the first NUL character.
    """
    for index, char in enumerate(chars):
        if char == "\0":
            break
        chars[index] = _single_char(func(index, char), "mapped value")