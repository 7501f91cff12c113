"""Validation and conversion of command-line arguments into integers."""

from __future__ import annotations

import re
from collections.abc import Iterable

from pushswap.text.strings import atoi

_INT64_MIN = -(2**63)
_INT64_RANGE = 2**64

_LEADING_LONG = re.compile(r"[\t\n\v\f\r ]*([+-]*)([0-9]*)")
_ALLOWED = frozenset(" \t0123456789+-")
_SEPARATORS = re.compile(r"[ \t]+")
_NUMBER_PATTERN = re.compile(r"[+-]?[0-9]+")


class InputError(ValueError):
    """Raised when the arguments do not form a valid list of distinct integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def atol64(text: str) -> int:
    """Parse a leading decimal integer, wrapping it to a signed 64-bit value.

    Leading whitespace is skipped, then any run of signs; a single minus among
    them makes the result negative. Parsing stops at the first non-digit.
    """
    match = _LEADING_LONG.match(text.partition("\0")[0])
    signs, digits = match.groups()
    value = int(digits) if digits else 0
    if "-" in signs:
        value = -value
    return (value - _INT64_MIN) % _INT64_RANGE + _INT64_MIN


def _number_words(args: Iterable[str]) -> list[str]:
    """Return the number words of ``args``, raising InputError on bad input."""
    arguments = list(args)
    if not arguments or (len(arguments) == 1 and arguments[0] == ""):
        return []
    words: list[str] = []
    for argument in arguments:
        bad = next((ch for ch in argument if ch not in _ALLOWED), None)
        if bad is not None:
            raise InputError(f"invalid character {bad!r}")
        for word in _SEPARATORS.split(argument):
            if not word:
                continue
            if not _NUMBER_PATTERN.fullmatch(word):
                raise InputError(f"malformed number {word!r}")
            if atoi(word) != atol64(word):
                raise InputError(f"number out of range {word!r}")
            words.append(word)
    if not words:
        raise InputError("no numbers given")
    return words


def validate_arguments(args: Iterable[str]) -> int:
    """Check the arguments (program name excluded) and return how many numbers they hold.

    No arguments at all, or a single empty argument, hold zero numbers.
    """
    return len(_number_words(args))


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Validate the arguments (program name excluded) and return their numbers in order."""
    return [atoi(word) for word in _number_words(args)]


def check_duplicates(values: Iterable[int]) -> list[int]:
    """Return ``values`` as a list, raising InputError if any value repeats."""
    result = list(values)
    seen: set[int] = set()
    for value in result:
        if value in seen:
            raise InputError(f"duplicate value {value}")
        seen.add(value)
    return result