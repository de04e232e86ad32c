# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a small
set of operations. The package works out a sequence of operations that leaves
the numbers in ascending order on `a`, top first, and prints each operation.

## Operations

| Move  | Effect                                         |
|-------|------------------------------------------------|
| `sa`  | swap the top two elements of `a`               |
| `sb`  | swap the top two elements of `b`               |
| `ss`  | `sa` and `sb` together                         |
| `pa`  | move the top of `b` onto `a`                   |
| `pb`  | move the top of `a` onto `b`                   |
| `ra`  | rotate `a` up (top goes to the bottom)         |
| `rb`  | rotate `b` up                                  |
| `rr`  | `ra` and `rb` together                         |
| `rra` | rotate `a` down (bottom goes to the top)       |
| `rrb` | rotate `b` down                                |
| `rrr` | `rra` and `rrb` together                       |

## Installation

```
pip install .
```

## Command line

Pass the numbers as separate arguments, or as one quoted string whose numbers
are separated by spaces:

```
push-swap 3 2 1
push-swap "4 67 3 87 23"
```

Each move is printed on its own line to standard output. With no arguments,
or with input that is already sorted, nothing is printed.

Each number may carry one leading `+` or `-` and must otherwise be digits
only. On bad input — a word that is not such a number (an empty string
included), a number outside the 32-bit signed range, or a duplicate — `Error`
is written to standard error and the exit status is 1.

## How it sorts

- two numbers: a single `sa`;
- three numbers: at most two operations;
- four or five numbers: the smallest one or two are parked on `b`, the
  remaining three are sorted, and the parked numbers are pushed back;
- more: numbers are pushed to `b` until three remain on `a` (or `a` is
  already in order), then each number of `b` is returned to its place on `a`
  by choosing the one whose rotations cost least, and finally `a` is rotated
  until its smallest number is on top.

## Library use

```python
from pushswap.sorting import solve

moves = solve([3, 2, 1])
print(moves)  # ['sa', 'rra']
```

`solve` raises `ValueError` when the numbers are not distinct.

Other parts of the package:

- `pushswap.stack.StackMachine` holds stacks `a` and `b` and performs the
  moves one at a time (`swap`, `swap_both`, `push`, `rotate`, `rotate_both`,
  `reverse_rotate`, `reverse_rotate_both`). Every move that takes effect is
  appended to its `operations` list and, when an output stream is given,
  written to it on its own line. `pushswap.stack.Stack` is a single stack of
  `Node` objects.
- `pushswap.validation.parse_arguments` checks and converts command-line
  words the same way the command does, raising
  `pushswap.validation.InputError` on bad input; `report_error` writes the
  `Error` line.
- `pushswap.sorting` has the individual strategies (`sort_three`,
  `sort_four`, `sort_five`, `sort_stack`), and `pushswap.costs` the cost
  analysis used for larger inputs.
- `pushswap.printf` is a small formatter supporting `%c %s %p %d %i %u %x %X %%`.
- `pushswap.libft` holds small helpers: character tests and integer/text
  conversion (`chars`), byte-buffer functions (`memory`), string functions
  (`strings`), stream output (`output`) and a singly linked list
  (`linked_list.LinkedList`).

## What it does not do

There is no command that reads a list of moves and checks whether it sorts a
given input; the package only produces moves.

## Tests

```
pip install ".[test]"
pytest
```