"""Cost analysis and moves for sending the numbers of stack b back into stack a."""

from __future__ import annotations

from pushswap.stack import Node, Stack, StackMachine


def set_median(stack: Stack) -> None:
    """Flag every slot whose index lies in the upper half of ``stack``."""
    half = len(stack) // 2
    for node in stack:
        node.above_median = node.index <= half


def minimum_node(stack: Stack) -> Node:
    """The node holding the smallest number; ValueError when ``stack`` is empty."""
    if not len(stack):
        raise ValueError("cannot take the minimum of an empty stack")
    return min(stack, key=lambda node: node.number)


def assign_targets(stack_a: Stack, stack_b: Stack) -> None:
    """Point each node of b at the node of a holding the next larger number.

    When a holds nothing larger, the target is the smallest node of a.
    """
    for node in stack_b:
        larger = [candidate for candidate in stack_a if candidate.number > node.number]
        if larger:
            node.target = min(larger, key=lambda candidate: candidate.number)
        else:
            node.target = minimum_node(stack_a)


def set_push_costs(stack_a: Stack, stack_b: Stack) -> None:
    """Count the rotations needed to bring each node of b and its target to the top."""
    len_a = len(stack_a)
    len_b = len(stack_b)
    for node in stack_b:
        target = node.target
        if target is None:
            raise ValueError(f"node {node.number} has no target")
        cost = node.index if node.above_median else len_b - node.index
        cost += target.index if target.above_median else len_a - target.index
        node.push_cost = cost


def mark_cheapest(stack: Stack) -> None:
    """Flag the first node with the lowest push cost as the cheapest."""
    if not len(stack):
        return
    min(stack, key=lambda node: node.push_cost).cheapest = True


def init_values(stack_a: Stack, stack_b: Stack) -> None:
    """Refresh median flags, targets and costs, and mark the cheapest node of b."""
    set_median(stack_a)
    set_median(stack_b)
    assign_targets(stack_a, stack_b)
    set_push_costs(stack_a, stack_b)
    mark_cheapest(stack_b)


def cheapest_node(stack: Stack) -> Node | None:
    """The first node flagged as cheapest, or None."""
    return next((node for node in stack if node.cheapest), None)


def _require_cheapest(stack: Stack) -> Node:
    node = cheapest_node(stack)
    if node is None:
        raise ValueError("stack b holds no node marked as cheapest")
    return node


def _require_target(node: Node) -> Node:
    if node.target is None:
        raise ValueError(f"node {node.number} has no target")
    return node.target


def _finish_b(machine: StackMachine) -> None:
    top = _require_cheapest(machine.b)
    while machine.b[0].number != top.number:
        if top.above_median:
            machine.rotate("b")
        else:
            machine.reverse_rotate("b")
        top = _require_cheapest(machine.b)


def _finish_a(machine: StackMachine) -> None:
    top = _require_target(_require_cheapest(machine.b))
    while machine.a[0].number != top.number:
        if top.above_median:
            machine.rotate("a")
        else:
            machine.reverse_rotate("a")
        assign_targets(machine.a, machine.b)
        top = _require_target(_require_cheapest(machine.b))


def move_cheapest(machine: StackMachine) -> None:
    """Bring the cheapest node of b and its target to the tops, then push it onto a."""
    a, b = machine.a, machine.b
    cheapest = _require_cheapest(b)
    target = _require_target(cheapest)
    cheapest_number = cheapest.number
    target_number = target.number
    if cheapest.above_median and target.above_median:
        while a[0].number != target_number and b[0].number != cheapest_number:
            machine.rotate_both()
    elif not cheapest.above_median and not target.above_median:
        while a[0].number != target_number and b[0].number != cheapest_number:
            machine.reverse_rotate_both()
    _finish_b(machine)
    _finish_a(machine)
    machine.push("a")


def smallest_to_top(machine: StackMachine) -> None:
    """Rotate stack a until its smallest number is on top."""
    smallest = minimum_node(machine.a)
    number = smallest.number
    if smallest.above_median:
        while machine.a[0].number != number:
            machine.rotate("a")
    else:
        while machine.a[0].number != number:
            machine.reverse_rotate("a")