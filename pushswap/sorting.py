"""Sorting strategies for small and large stacks."""

from __future__ import annotations

from collections.abc import Iterable

from pushswap.costs import init_values, move_cheapest, smallest_to_top
from pushswap.stack import Stack, StackMachine


def min_position(stack: Stack) -> int:
    """Index of the slot holding the smallest number; ValueError when empty."""
    if not len(stack):
        raise ValueError("cannot search an empty stack")
    return min(stack, key=lambda node: node.number).index


def sort_three(machine: StackMachine) -> None:
    """Order the top three numbers of stack a with at most two operations."""
    a = machine.a
    if len(a) < 3:
        raise ValueError(f"sort_three needs three numbers, stack a holds {len(a)}")
    first, second, third = a[0].number, a[1].number, a[2].number
    if first > second and second < third and first < third:
        machine.swap("a")
    elif first > second and second > third:
        machine.swap("a")
        machine.reverse_rotate("a")
    elif first > second and second < third and first > third:
        machine.rotate("a")
    elif first < second and second > third and first < third:
        machine.swap("a")
        machine.rotate("a")
    elif first < second and second > third and first > third:
        machine.reverse_rotate("a")


def _push_minimum_to_b(machine: StackMachine) -> None:
    while (position := min_position(machine.a)) != 0:
        if position <= 2:
            machine.rotate("a")
        else:
            machine.reverse_rotate("a")
    machine.push("b")


def sort_four(machine: StackMachine) -> None:
    """Park the smallest number on b, sort the other three, and bring it back."""
    _push_minimum_to_b(machine)
    sort_three(machine)
    machine.push("a")


def sort_five(machine: StackMachine) -> None:
    """Park the two smallest numbers on b, sort the rest, and bring them back."""
    _push_minimum_to_b(machine)
    _push_minimum_to_b(machine)
    sort_three(machine)
    machine.push("a")
    machine.push("a")


def sort_stack(machine: StackMachine) -> None:
    """Sort stack a of four or more numbers, using b as scratch space."""
    a = machine.a
    length = len(a)
    if length <= 5:
        if length == 5:
            sort_five(machine)
        else:
            sort_four(machine)
        return
    while len(a) > 3 and not a.is_sorted():
        machine.push("b")
    if len(a) == 3:
        sort_three(machine)
    while len(machine.b):
        init_values(machine.a, machine.b)
        move_cheapest(machine)
    smallest_to_top(machine)


def solve(numbers: Iterable[int]) -> list[str]:
    """The operations that sort ``numbers`` into ascending order on stack a."""
    values = list(numbers)
    if len(set(values)) != len(values):
        raise ValueError("numbers must be distinct")
    machine = StackMachine(values)
    if not machine.a.is_sorted():
        if len(values) == 3:
            sort_three(machine)
        elif len(values) == 2:
            machine.swap("a")
        else:
            sort_stack(machine)
    return machine.operations