"""A doubly linked list of integers with rank indexes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One list cell: a value, its rank index (-1 until assigned) and links."""

    value: int
    index: int = -1
    next: Optional["Node"] = field(default=None, repr=False)
    prev: Optional["Node"] = field(default=None, repr=False)


class IntList:
    """A doubly linked list of integers.

    Iterating the list yields its values from front to back; the nodes
    themselves are reachable from :attr:`head`.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_back(self, value: int) -> Node:
        """Append a new node holding *value*; return it."""
        node = Node(value)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
            node.prev = self._tail
        self._tail = node
        self._size += 1
        return node

    def push_front(self, value: int) -> Node:
        """Insert a new node holding *value* at the front; return it."""
        node = Node(value, next=self.head)
        if self.head is None:
            self._tail = node
        else:
            self.head.prev = node
        self.head = node
        self._size += 1
        return node

    def last(self) -> Optional[Node]:
        """The final node, or None for an empty list."""
        return self._tail

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def __repr__(self) -> str:
        return f"IntList({list(self)!r})"

    def is_ordered(self) -> bool:
        """True if the values never decrease from front to back."""
        values = list(self)
        return all(a <= b for a, b in zip(values, values[1:]))

    def has_duplicates(self) -> bool:
        """True if any value occurs more than once."""
        seen: set[int] = set()
        for value in self:
            if value in seen:
                return True
            seen.add(value)
        return False

    def assign_indexes(self) -> list[int]:
        """Set each node's index to the number of values strictly below it.

        Returns the assigned indexes in list order.
        """
        values = list(self)
        for node in self._nodes():
            node.index = sum(1 for other in values if node.value > other)
        return [node.index for node in self._nodes()]

    def max_index_node(self) -> Optional[Node]:
        """The first node carrying the largest index, or None if empty."""
        best: Optional[Node] = None
        for node in self._nodes():
            if best is None or node.index > best.index:
                best = node
        return best

    def for_each(self, func: Callable[[int], object]) -> None:
        """Call *func* on every value from front to back."""
        for value in self:
            func(value)

    def map(self, func: Callable[[int], int]) -> "IntList":
        """Return a new list of ``func(value)`` for every value."""
        return IntList(func(value) for value in self)

    def clear(self) -> None:
        """Remove every node, unlinking them from one another."""
        node = self.head
        while node is not None:
            following = node.next
            node.next = None
            node.prev = None
            node = following
        self.head = None
        self._tail = None
        self._size = 0