from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.stacks import Move, Node, StackPair, is_ascending


def test_initial_state():
    pair = StackPair([1, 2, 3])
    assert pair.values_a() == [1, 2, 3]
    assert pair.values_b() == []
    assert pair.moves == []


def test_swap_a():
    pair = StackPair([1, 2, 3])
    pair.apply(Move.SA)
    assert pair.values_a() == [2, 1, 3]
    assert pair.moves == [Move.SA]


def test_push_b_and_back():
    pair = StackPair([1, 2, 3])
    pair.apply(Move.PB)
    assert pair.values_a() == [2, 3]
    assert pair.values_b() == [1]
    pair.apply(Move.PA)
    assert pair.values_a() == [1, 2, 3]
    assert pair.values_b() == []
    assert [str(m) for m in pair.moves] == ["pb", "pa"]


def test_push_moves_same_node_object():
    pair = StackPair([5, 6])
    top = pair.a[0]
    pair.apply(Move.PB)
    assert pair.b[0] is top


def test_rotations_on_a():
    pair = StackPair([1, 2, 3])
    pair.apply(Move.RA)
    assert pair.values_a() == [2, 3, 1]
    pair.apply(Move.RRA)
    pair.apply(Move.RRA)
    assert pair.values_a() == [3, 1, 2]


def test_operations_on_b():
    pair = StackPair([1, 2, 3, 4])
    for _ in range(3):
        pair.apply(Move.PB)
    assert pair.values_b() == [3, 2, 1]
    pair.apply(Move.SB)
    assert pair.values_b() == [2, 3, 1]
    pair.apply(Move.RB)
    assert pair.values_b() == [3, 1, 2]
    pair.apply(Move.RRB)
    assert pair.values_b() == [2, 3, 1]
    assert pair.values_a() == [4]


def test_double_rotations():
    pair = StackPair([1, 2, 3, 4])
    pair.apply(Move.PB)
    pair.apply(Move.PB)
    pair.apply(Move.RR)
    assert pair.values_a() == [4, 3]
    assert pair.values_b() == [1, 2]
    pair.apply(Move.RRR)
    assert pair.values_a() == [3, 4]
    assert pair.values_b() == [2, 1]
    assert pair.moves[-2:] == [Move.RR, Move.RRR]


def test_push_from_empty_is_ignored():
    pair = StackPair([1, 2])
    pair.apply(Move.PA)
    assert pair.values_a() == [1, 2]
    assert pair.moves == []


def test_string_moves_accepted():
    pair = StackPair([1, 2])
    pair.apply("sa")
    assert pair.values_a() == [2, 1]
    assert pair.moves == [Move.SA]


def test_unknown_move_raises():
    pair = StackPair([1, 2])
    with pytest.raises(ValueError):
        pair.apply("ss")


def test_small_stack_rotation_keeps_element():
    pair = StackPair([7])
    pair.apply(Move.RA)
    pair.apply(Move.RRA)
    pair.apply(Move.SA)
    assert pair.values_a() == [7]


@pytest.mark.parametrize(
    "values, expected",
    [([], True), ([1, 2, 3], True), ([1, 1], True), ([2, 1], False), ([1, 3, 2], False)],
)
def test_is_ascending(values, expected):
    assert is_ascending(StackPair(values).a) is expected


def test_is_ascending_on_plain_nodes():
    assert is_ascending([Node(-3), Node(0), Node(9)]) is True


@given(st.lists(st.integers(), min_size=1))
def test_rotate_round_trip(values):
    pair = StackPair(values)
    pair.apply(Move.RA)
    pair.apply(Move.RRA)
    assert pair.values_a() == values


@given(st.lists(st.integers(), min_size=1))
def test_swap_twice_is_identity(values):
    pair = StackPair(values)
    pair.apply(Move.SA)
    pair.apply(Move.SA)
    assert pair.values_a() == values


@given(
    st.lists(st.integers(), max_size=10),
    st.lists(st.sampled_from(list(Move)), max_size=30),
)
def test_moves_preserve_values(values, moves):
    pair = StackPair(values)
    for move in moves:
        pair.apply(move)
    assert Counter(pair.values_a() + pair.values_b()) == Counter(values)
    assert len(pair.moves) <= len(moves)