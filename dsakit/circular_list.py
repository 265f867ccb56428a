"""Circular singly linked list addressed through its last node."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.next: _Node = self


class CircularList:
    """Circular list; iteration starts at the node after the last one."""

    def __init__(self) -> None:
        self._last: _Node | None = None
        self._size = 0

    def insert_at_front(self, value: Any) -> None:
        """Insert ``value`` so that it becomes the first element."""
        node = _Node(value)
        if self._last is None:
            self._last = node
        else:
            node.next = self._last.next
            self._last.next = node
        self._size += 1

    def __iter__(self) -> Iterator[Any]:
        if self._last is None:
            return
        first = self._last.next
        node = first
        while True:
            yield node.data
            node = node.next
            if node is first:
                break

    def __len__(self) -> int:
        return self._size

    def view(self) -> str:
        """Human-readable listing, one ``Data = value`` line per element."""
        if self._last is None:
            return "List is empty"
        return "\n".join(f"Data = {value}" for value in self)