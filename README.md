# pushswap

`pushswap` sorts a list of distinct integers using two stacks, `a` and `b`,
and a small fixed set of moves. It prints the moves it used, one per line,
so that replaying them on the input leaves stack `a` sorted in ascending
order (smallest on top) and stack `b` empty.

## Moves

| Move  | Effect                                          |
|-------|-------------------------------------------------|
| `sa`  | swap the top two elements of `a`                |
| `sb`  | swap the top two elements of `b`                |
| `pa`  | move the top of `b` onto `a`                    |
| `pb`  | move the top of `a` onto `b`                    |
| `ra`  | rotate `a` up: the top goes to the bottom       |
| `rb`  | rotate `b` up                                   |
| `rr`  | `ra` and `rb` together                          |
| `rra` | rotate `a` down: the bottom goes to the top     |
| `rrb` | rotate `b` down                                 |
| `rrr` | `rra` and `rrb` together                        |

## Installing

```
pip install .
```

## Command line

The `push-swap` command takes the numbers as separate arguments or together
in one quoted argument, separated by spaces or tabs:

```
push-swap 3 2 1
push-swap "4 67 3 87 23"
```

The first number given is the top of stack `a`. Already sorted input prints
nothing. Two numbers take at most one move and three numbers at most two;
larger inputs use a cost-based strategy that, at each step, pushes to `b`
the element of `a` that is cheapest to place, then brings everything back
and rotates the smallest value to the top.

The command writes `Error` to standard error and exits with status 1 when:

- an argument holds a character other than digits, `+`, `-`, spaces or tabs;
- a word is not a single optional sign followed by digits (`+`, `1-2`, `--3`);
- a value lies outside the signed 32-bit range;
- a value appears twice;
- the arguments hold no number at all (for example, only spaces).

Running it with no arguments, or with one empty argument, prints nothing and
exits with status 0.

## Library use

```python
from pushswap.sorter import solve
from pushswap.stacks import StackPair

moves = solve([3, 1, 2])          # a list of Move members

pair = StackPair([3, 1, 2])
for move in moves:
    pair.apply(move)
assert pair.values_a() == [1, 2, 3]
assert pair.values_b() == []
```

- `pushswap.stacks` holds `Move` (a string enum of the ten moves),
  `StackPair` (stacks `a` and `b` plus the list of applied moves in
  `moves`) and `is_ascending`. Swaps and rotations of a stack with fewer
  than two elements change nothing; a push from an empty stack is ignored
  and not recorded.
- `pushswap.sorter` holds `solve`, which raises `InputError` on duplicate
  values, along with the steps it is built from: `update_positions`,
  `assign_targets_in_a`, `assign_targets_in_b`, `compute_costs`,
  `mark_cheapest`, `find_min`, `find_max`, `sort_three` and `general_sort`.
- `pushswap.parsing` checks input: `validate_arguments` returns how many
  numbers the arguments hold, `parse_arguments` returns them in order, and
  `check_duplicates` returns the values as a list; each raises `InputError`
  (a `ValueError`) on bad input. `atol64` reads a leading integer wrapped to
  64 bits.
- `pushswap.cli.main(argv=None)` is the command's entry point and returns
  its exit status.

The `pushswap.text` sub-package holds small helpers: ASCII character tests
(`chars`), NUL-terminated string functions and 32-bit `atoi` (`strings`),
slicing, joining, trimming, splitting and mapping (`transform`), byte-buffer
functions (`memory`), stream writers (`output`) and a singly linked list
(`linked`).

## What it does not do

There is no command that reads a list of moves and checks whether they sort
a given input; to verify a result, replay the moves with `StackPair.apply`
as shown above.

## Running the tests

```
pip install ".[test]"
pytest
```