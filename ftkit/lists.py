"""A singly linked list of arbitrary items."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass
class Node:
    """One link of a list: an item and the node after it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list with constant-time insertion at both ends."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def push_front(self, item: Any) -> None:
        """Insert ``item`` before the first node."""
        node = Node(item, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_back(self, item: Any) -> None:
        """Append ``item`` after the last node."""
        node = Node(item)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def last(self) -> Optional[Node]:
        """The last node, or None when the list is empty."""
        return self._tail

    def clear(self, release: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove every node, passing each item to ``release`` first."""
        if release is not None:
            for item in self:
                release(item)
        self.head = None
        self._tail = None
        self._size = 0

    def iterate(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every item in order."""
        for item in self:
            func(item)

    def map(
        self,
        func: Callable[[Any], Any],
        release: Optional[Callable[[Any], Any]] = None,
    ) -> "LinkedList":
        """Return a new list of ``func(item)`` for every item.

        If ``func`` returns None for some item, the items produced so far are
        passed to ``release`` and ValueError is raised.
        """
        result = LinkedList()
        for item in self:
            mapped = func(item)
            if mapped is None:
                result.clear(release)
                raise ValueError(f"mapping produced no value for {item!r}")
            result.push_back(mapped)
        return result

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"