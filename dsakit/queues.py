"""Fixed-capacity circular queue and double-ended queue on ring buffers."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class QueueFullError(Exception):
    """Raised when adding to a full queue."""


class QueueEmptyError(Exception):
    """Raised when removing from an empty queue."""


class _Ring:
    """Shared ring-buffer storage; public behaviour lives in the subclasses."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._front = 0
        self._size = 0

    def _index(self, offset: int) -> int:
        return (self._front + offset) % self.capacity

    def _snapshot(self) -> list[Any]:
        return [self._slots[self._index(i)] for i in range(self._size)]

    def _push_rear(self, value: Any) -> None:
        if self._size == self.capacity:
            raise QueueFullError("queue is full")
        self._slots[self._index(self._size)] = value
        self._size += 1

    def _pop_front(self) -> Any:
        if self._size == 0:
            raise QueueEmptyError("queue is empty")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._front = self._index(1)
        self._size -= 1
        return value


class CircularQueue(_Ring):
    """FIFO queue of at most ``capacity`` items (six by default)."""

    def __init__(self, capacity: int = 6) -> None:
        super().__init__(capacity)

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == self.capacity

    def enqueue(self, value: Any) -> None:
        self._push_rear(value)

    def dequeue(self) -> Any:
        """Remove and return the oldest item."""
        return self._pop_front()

    def __iter__(self) -> Iterator[Any]:
        return iter(self._snapshot())

    def __len__(self) -> int:
        return self._size


class ArrayDeque(_Ring):
    """Double-ended queue of at most ``capacity`` items (seven by default)."""

    def __init__(self, capacity: int = 7) -> None:
        super().__init__(capacity)

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == self.capacity

    def insert_front(self, value: Any) -> None:
        if self.is_full():
            raise QueueFullError("deque is full")
        self._front = self._index(-1)
        self._slots[self._front] = value
        self._size += 1

    def insert_rear(self, value: Any) -> None:
        self._push_rear(value)

    def delete_front(self) -> Any:
        """Remove and return the item at the front."""
        return self._pop_front()

    def delete_rear(self) -> Any:
        """Remove and return the item at the rear."""
        if self.is_empty():
            raise QueueEmptyError("deque is empty")
        index = self._index(self._size - 1)
        value = self._slots[index]
        self._slots[index] = None
        self._size -= 1
        return value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._snapshot())

    def __len__(self) -> int:
        return self._size