"""A singly linked list with index-based insertion, removal and lookup."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(slots=True)
class _Node(Generic[T]):
    value: T
    next: _Node[T] | None = None


class LinkedList(Generic[T]):
    """A singly linked list that can hold values of any type."""

    def __init__(self, iterable: Iterable[T] | None = None) -> None:
        self._head: _Node[T] | None = None
        self._length = 0
        if iterable is not None:
            for value in iterable:
                self.push_back(value)

    def _node_at(self, idx: int) -> _Node[T] | None:
        """Return the node at ``idx``, or None if there is none."""
        if idx < 0:
            return None
        node = self._head
        for _ in range(idx):
            if node is None:
                break
            node = node.next
        return node

    def remove(self, idx: int) -> None:
        """Remove the value at ``idx``.

        Raises IndexError if no value is stored at that index.
        """
        if idx == 0:
            if self._head is None:
                raise IndexError("remove from empty list")
            self._head = self._head.next
        else:
            before = self._node_at(idx - 1)
            if before is None or before.next is None:
                raise IndexError(f"no value at index {idx}")
            before.next = before.next.next
        self._length -= 1

    def push_front(self, value: T) -> None:
        """Insert ``value`` as the new first element."""
        self._head = _Node(value, self._head)
        self._length += 1

    def push_back(self, value: T) -> None:
        """Append ``value`` to the end of the list."""
        new_node = _Node(value)
        if self._head is None:
            self._head = new_node
        else:
            node = self._head
            while node.next is not None:
                node = node.next
            node.next = new_node
        self._length += 1

    def add_at(self, value: T, idx: int) -> None:
        """Insert ``value`` at ``idx``, before the value currently there.

        ``idx`` may equal the length of the list, which appends.
        Raises IndexError if the position cannot be reached.
        """
        if idx == 0:
            self.push_front(value)
            return
        before = self._node_at(idx - 1)
        if before is None:
            raise IndexError(f"cannot insert at index {idx}")
        before.next = _Node(value, before.next)
        self._length += 1

    def get(self, idx: int) -> T | None:
        """Return the value at ``idx``, or None if there is none."""
        node = self._node_at(idx)
        return None if node is None else node.value

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"