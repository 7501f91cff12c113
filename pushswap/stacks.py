"""The two stacks and the moves that rearrange them."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class Move(str, Enum):
    """The instructions that act on the stacks."""

    SA = "sa"
    SB = "sb"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


@dataclass(eq=False)
class Node:
    """One element of a stack with the bookkeeping used while sorting."""

    value: int
    index: int = 0
    cost: int = 0
    above_median: bool = False
    cheapest: bool = False
    target: Optional["Node"] = None


def _swap(stack: list[Node]) -> None:
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def _rotate(stack: list[Node]) -> None:
    if len(stack) >= 2:
        stack.append(stack.pop(0))


def _reverse_rotate(stack: list[Node]) -> None:
    if len(stack) >= 2:
        stack.insert(0, stack.pop())


class StackPair:
    """Stacks ``a`` and ``b`` (top first) and the history of applied moves.

    Swaps and rotations of a stack with fewer than two elements change nothing;
    a push from an empty stack is ignored and not recorded.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.a: list[Node] = [Node(value) for value in values]
        self.b: list[Node] = []
        self.moves: list[Move] = []

    def apply(self, move: Union[Move, str]) -> None:
        """Perform ``move`` and record it."""
        move = Move(move)
        if move in (Move.PA, Move.PB):
            source, dest = (self.b, self.a) if move is Move.PA else (self.a, self.b)
            if not source:
                return
            dest.insert(0, source.pop(0))
        elif move is Move.SA:
            _swap(self.a)
        elif move is Move.SB:
            _swap(self.b)
        elif move is Move.RA:
            _rotate(self.a)
        elif move is Move.RB:
            _rotate(self.b)
        elif move is Move.RR:
            _rotate(self.a)
            _rotate(self.b)
        elif move is Move.RRA:
            _reverse_rotate(self.a)
        elif move is Move.RRB:
            _reverse_rotate(self.b)
        else:
            _reverse_rotate(self.a)
            _reverse_rotate(self.b)
        self.moves.append(move)

    def values_a(self) -> list[int]:
        """The values of stack a, top first."""
        return [node.value for node in self.a]

    def values_b(self) -> list[int]:
        """The values of stack b, top first."""
        return [node.value for node in self.b]


def is_ascending(stack: Iterable[Node]) -> bool:
    """True if the values never decrease from top to bottom; empty counts as ascending."""
    previous: Optional[int] = None
    for node in stack:
        if previous is not None and previous > node.value:
            return False
        previous = node.value
    return True