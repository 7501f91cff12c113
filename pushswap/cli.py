"""Command line entry point: print the moves that sort the given integers."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Optional

from pushswap.parsing import InputError, check_duplicates, parse_arguments
from pushswap.sorter import solve


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Sort the integers given as arguments and print one move per line.

    Invalid input prints ``Error`` to standard error and returns 1.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        moves = solve(check_duplicates(parse_arguments(args)))
    except InputError:
        print("Error", file=sys.stderr)
        return 1
    for move in moves:
        sys.stdout.write(move.value + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())