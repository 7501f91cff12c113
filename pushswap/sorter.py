"""Sorting stack a with the help of stack b using the cheapest-move strategy."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Optional

from pushswap.parsing import check_duplicates
from pushswap.stacks import Move, Node, StackPair, is_ascending


def update_positions(stack: Sequence[Node]) -> None:
    """Record each node's index and whether it lies in the upper half of its stack."""
    median = len(stack) // 2
    for index, node in enumerate(stack):
        node.index = index
        node.above_median = index <= median


def find_min(stack: Sequence[Node]) -> Node:
    """The node with the smallest value; on ties the one nearest the bottom."""
    if not stack:
        raise ValueError("cannot find the minimum of an empty stack")
    best = stack[0]
    for node in stack:
        if node.value <= best.value:
            best = node
    return best


def find_max(stack: Sequence[Node]) -> Node:
    """The node with the largest value; on ties the one nearest the bottom."""
    if not stack:
        raise ValueError("cannot find the maximum of an empty stack")
    best = stack[0]
    for node in stack:
        if node.value >= best.value:
            best = node
    return best


def assign_targets_in_b(a: Sequence[Node], b: Sequence[Node]) -> None:
    """Give each node of a the node of b it should be pushed on top of.

    That is the largest value of b below the node's value, or the maximum of b
    when every value of b is larger.
    """
    for node in a:
        smaller = [candidate for candidate in b if candidate.value < node.value]
        if smaller:
            node.target = max(smaller, key=lambda candidate: candidate.value)
        else:
            node.target = find_max(b)


def assign_targets_in_a(a: Sequence[Node], b: Sequence[Node]) -> None:
    """Give each node of b the node of a it should be pushed above.

    That is the smallest value of a above the node's value, or the minimum of a
    when every value of a is smaller.
    """
    for node in b:
        bigger = [candidate for candidate in a if candidate.value > node.value]
        if bigger:
            node.target = min(bigger, key=lambda candidate: candidate.value)
        else:
            node.target = find_min(a)


def _distance_to_top(node: Node, size: int) -> int:
    return node.index if node.above_median else size - node.index


def compute_costs(a: Sequence[Node], b: Sequence[Node]) -> None:
    """Set each node's cost: the rotations bringing it and its target to the tops."""
    for node in a:
        if node.target is None:
            raise ValueError("every node of a needs a target before costing")
        node.cost = _distance_to_top(node, len(a)) + _distance_to_top(node.target, len(b))


def mark_cheapest(stack: Sequence[Node]) -> Optional[Node]:
    """Flag and return the first node of lowest cost; None for an empty stack."""
    if not stack:
        return None
    best = min(stack, key=lambda node: node.cost)
    for node in stack:
        node.cheapest = node is best
    return best


def sort_three(pair: StackPair) -> None:
    """Order stack a when it holds three elements (or is already in order)."""
    a = pair.a
    if len(a) < 2:
        return
    biggest = find_max(a)
    if a[0] is biggest:
        pair.apply(Move.RA)
    elif a[1] is biggest:
        pair.apply(Move.RRA)
    if a[0].value > a[1].value:
        pair.apply(Move.SA)


def _bring_to_top(pair: StackPair, node: Node, on_a: bool) -> None:
    """Rotate the stack holding ``node`` in the direction its half suggests."""
    stack = pair.a if on_a else pair.b
    if not any(member is node for member in stack):
        raise ValueError("node is not on the stack")
    if on_a:
        move = Move.RA if node.above_median else Move.RRA
    else:
        move = Move.RB if node.above_median else Move.RRB
    while stack[0] is not node:
        pair.apply(move)


def _rotate_both(pair: StackPair, cheap: Node, move: Move) -> None:
    """Rotate both stacks together until either node reaches its top."""
    target = cheap.target
    while pair.b[0] is not target and pair.a[0] is not cheap:
        pair.apply(move)
    update_positions(pair.a)
    update_positions(pair.b)


def _push_cheapest(pair: StackPair) -> None:
    update_positions(pair.a)
    update_positions(pair.b)
    assign_targets_in_b(pair.a, pair.b)
    compute_costs(pair.a, pair.b)
    cheap = mark_cheapest(pair.a)
    target = cheap.target
    if cheap.above_median and target.above_median:
        _rotate_both(pair, cheap, Move.RR)
    elif not cheap.above_median and not target.above_median:
        _rotate_both(pair, cheap, Move.RRR)
    _bring_to_top(pair, cheap, on_a=True)
    _bring_to_top(pair, target, on_a=False)
    pair.apply(Move.PB)


def _push_back(pair: StackPair) -> None:
    update_positions(pair.a)
    update_positions(pair.b)
    assign_targets_in_a(pair.a, pair.b)
    _bring_to_top(pair, pair.b[0].target, on_a=True)
    pair.apply(Move.PA)


def general_sort(pair: StackPair) -> None:
    """Sort stack a of any size, leaving stack b empty."""
    if len(pair.a) > 3 and not is_ascending(pair.a):
        pair.apply(Move.PB)
    remaining = len(pair.a) + len(pair.b) - 1
    while remaining > 3 and not is_ascending(pair.a):
        _push_cheapest(pair)
        remaining -= 1
    sort_three(pair)
    while pair.b:
        _push_back(pair)
    update_positions(pair.a)
    if pair.a:
        _bring_to_top(pair, find_min(pair.a), on_a=True)


def solve(values: Iterable[int]) -> list[Move]:
    """The moves that sort ``values`` (top first) into ascending order."""
    pair = StackPair(check_duplicates(values))
    if not is_ascending(pair.a):
        if len(pair.a) == 2:
            pair.apply(Move.SA)
        elif len(pair.a) == 3:
            sort_three(pair)
        else:
            general_sort(pair)
    return list(pair.moves)