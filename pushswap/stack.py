"""The two stacks of the puzzle and the operations that move numbers between them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Optional, TextIO

from pushswap.printf import printf

STACK_NAMES = ("a", "b")


@dataclass(eq=False)
class Node:
    """One slot of a stack together with the bookkeeping used by the sorter."""

    number: int
    index: int = 0
    push_cost: int = 0
    above_median: bool = False
    cheapest: bool = False
    target: Optional[Node] = field(default=None, repr=False)


_Payload = tuple[int, Optional[Node], bool, int]


def _payload(node: Node) -> _Payload:
    return node.number, node.target, node.cheapest, node.push_cost


class Stack:
    """A stack of nodes, top first.

    Swaps and rotations move a node's number, target, cheapest flag and push
    cost to a neighbouring slot; the slot keeps its index and median flag.
    Pushing moves whole nodes and renumbers the indexes of both stacks.
    """

    def __init__(self, numbers: Iterable[int] = ()) -> None:
        self._nodes = [Node(number, index) for index, number in enumerate(numbers)]

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __getitem__(self, position: int) -> Node:
        return self._nodes[position]

    def __repr__(self) -> str:
        return f"Stack({self.numbers()!r})"

    def numbers(self) -> list[int]:
        """The numbers from top to bottom."""
        return [node.number for node in self._nodes]

    def reindex(self) -> None:
        """Number the slots from 0 at the top."""
        for index, node in enumerate(self._nodes):
            node.index = index

    def _assign(self, payloads: list[_Payload]) -> None:
        for node, (number, target, cheapest, push_cost) in zip(self._nodes, payloads):
            node.number = number
            node.target = target
            node.cheapest = cheapest
            node.push_cost = push_cost

    def swap(self) -> bool:
        """Exchange the top two values; False when there are fewer than two."""
        if len(self._nodes) < 2:
            return False
        first, second = self._nodes[0], self._nodes[1]
        first_payload, second_payload = _payload(first), _payload(second)
        self._nodes[0:2]  # slots stay in place, only their contents move
        for node, (number, target, cheapest, push_cost) in (
            (first, second_payload),
            (second, first_payload),
        ):
            node.number = number
            node.target = target
            node.cheapest = cheapest
            node.push_cost = push_cost
        return True

    def rotate(self) -> bool:
        """Move the top value to the bottom; False when there are fewer than two."""
        if len(self._nodes) < 2:
            return False
        payloads = [_payload(node) for node in self._nodes]
        self._assign(payloads[1:] + payloads[:1])
        return True

    def reverse_rotate(self) -> bool:
        """Move the bottom value to the top; False when there are fewer than two."""
        if len(self._nodes) < 2:
            return False
        payloads = [_payload(node) for node in self._nodes]
        self._assign(payloads[-1:] + payloads[:-1])
        return True

    def is_sorted(self) -> bool:
        """True when the numbers never decrease from top to bottom."""
        return all(
            upper.number <= lower.number
            for upper, lower in zip(self._nodes, self._nodes[1:])
        )

    def _pop_top(self) -> Node:
        node = self._nodes.pop(0)
        self.reindex()
        return node

    def _push_top(self, node: Node) -> None:
        self._nodes.insert(0, node)
        self.reindex()


class StackMachine:
    """Stacks a and b with the named puzzle operations.

    Every operation that takes effect is appended to ``operations`` and, when
    an output stream is given, written to it one per line.
    """

    def __init__(self, numbers: Iterable[int] = (), output: TextIO | None = None) -> None:
        self.a = Stack(numbers)
        self.b = Stack()
        self.output = output
        self.operations: list[str] = []

    def stack(self, name: str) -> Stack:
        """The stack called ``name``, which is 'a' or 'b'."""
        if name == "a":
            return self.a
        if name == "b":
            return self.b
        raise ValueError(f"unknown stack {name!r}; expected 'a' or 'b'")

    def _emit(self, operation: str) -> None:
        self.operations.append(operation)
        if self.output is not None:
            printf("%s\n", operation, stream=self.output)

    def swap(self, name: str) -> None:
        """sa / sb: exchange the top two values of one stack."""
        if self.stack(name).swap():
            self._emit("s" + name)

    def swap_both(self) -> None:
        """ss: swap the tops of both stacks."""
        self.a.swap()
        self.b.swap()
        self._emit("ss")

    def push(self, dest: str) -> None:
        """pa / pb: move the top node of the other stack onto ``dest``."""
        target = self.stack(dest)
        source = self.b if target is self.a else self.a
        if not len(source):
            return
        target._push_top(source._pop_top())
        self._emit("p" + dest)

    def rotate(self, name: str) -> None:
        """ra / rb: move the top value of one stack to its bottom."""
        if self.stack(name).rotate():
            self._emit("r" + name)

    def rotate_both(self) -> None:
        """rr: rotate both stacks."""
        self.a.rotate()
        self.b.rotate()
        self._emit("rr")

    def reverse_rotate(self, name: str) -> None:
        """rra / rrb: move the bottom value of one stack to its top."""
        if self.stack(name).reverse_rotate():
            self._emit("rr" + name)

    def reverse_rotate_both(self) -> None:
        """rrr: reverse-rotate both stacks."""
        self.a.reverse_rotate()
        self.b.reverse_rotate()
        self._emit("rrr")