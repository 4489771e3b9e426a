"""A singly linked list."""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass
class _Node:
    data: Any
    next: Optional["_Node"] = None


class LinkedList:
    """A singly linked list of arbitrary values."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def push_front(self, data: Any) -> None:
        """Insert data at the head."""
        self._head = _Node(data, self._head)
        self._size += 1

    def push_back(self, data: Any) -> None:
        """Append data at the tail."""
        node = _Node(data)
        if self._head is None:
            self._head = node
        else:
            last = self._head
            while last.next is not None:
                last = last.next
            last.next = node
        self._size += 1

    def pop_front(self) -> Any:
        """Remove the head and return its data; an empty list gives None."""
        if self._head is None:
            return None
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.data

    def pop_back(self) -> Any:
        """Remove the tail and return its data; an empty list gives None."""
        if self._head is None:
            return None
        if self._head.next is None:
            data = self._head.data
            self._head = None
        else:
            node = self._head
            while node.next.next is not None:
                node = node.next
            data = node.next.data
            node.next = None
        self._size -= 1
        return data

    def sort(self, cmp: Callable[[Any, Any], bool]) -> "LinkedList":
        """Bubble-sort the values, swapping neighbours whenever cmp(left, right) is true."""
        for _ in range(self._size):
            node = self._head
            while node is not None and node.next is not None:
                if cmp(node.data, node.next.data):
                    node.data, node.next.data = node.next.data, node.data
                node = node.next
        return self

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"