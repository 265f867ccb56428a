"""Producer-consumer bookkeeping over a buffer of fixed size."""

from __future__ import annotations

import threading


class BufferFullError(Exception):
    """Raised when producing into a full buffer."""


class BufferEmptyError(Exception):
    """Raised when consuming from an empty buffer."""


class BoundedBuffer:
    """Counts filled and empty slots; items are numbered, the newest consumed first."""

    def __init__(self, capacity: int = 3) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self.full = 0
        self.empty = capacity
        self._last_item = 0
        self._mutex = threading.Lock()

    def produce(self) -> int:
        """Produce the next item and return its number."""
        with self._mutex:
            if self.empty == 0:
                raise BufferFullError("buffer is full")
            self.full += 1
            self.empty -= 1
            self._last_item += 1
            return self._last_item

    def consume(self) -> int:
        """Consume the most recent item and return its number."""
        with self._mutex:
            if self.full == 0:
                raise BufferEmptyError("buffer is empty")
            self.full -= 1
            self.empty += 1
            item = self._last_item
            self._last_item -= 1
            return item