"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class _Cell:
    content: Any
    next: Optional[_Cell] = None


class LinkedList:
    """Singly linked list supporting front and back insertion."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._head: _Cell | None = None
        self._tail: _Cell | None = None
        self._size = 0
        for item in items or ():
            self.push_back(item)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        cell = self._head
        while cell is not None:
            yield cell.content
            cell = cell.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def push_front(self, content: Any) -> None:
        """Insert ``content`` before the first element."""
        cell = _Cell(content, self._head)
        self._head = cell
        if self._tail is None:
            self._tail = cell
        self._size += 1

    def push_back(self, content: Any) -> None:
        """Append ``content`` after the last element."""
        cell = _Cell(content)
        if self._tail is None:
            self._head = cell
        else:
            self._tail.next = cell
        self._tail = cell
        self._size += 1

    def last(self) -> Any:
        """Content of the last element, or None when the list is empty."""
        return None if self._tail is None else self._tail.content

    def pop_front(self, delete: Callable[[Any], None] | None = None) -> Any:
        """Remove and return the first content, passing it to ``delete`` if given."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        cell = self._head
        self._head = cell.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        if delete is not None:
            delete(cell.content)
        return cell.content

    def clear(self, delete: Callable[[Any], None] | None = None) -> None:
        """Remove every element, passing each content to ``delete`` if given."""
        while self._head is not None:
            self.pop_front(delete)

    def iterate(self, func: Callable[[Any], None]) -> None:
        """Call ``func`` on each content in order."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Callable[[Any], None] | None = None,
    ) -> LinkedList:
        """Return a new list holding ``func(content)`` for each content.

        If ``func`` raises, the contents already produced are released through
        ``delete`` before the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(func(content))
        except Exception:
            result.clear(delete)
            raise
        return result