"""A bounded FIFO of byte values."""

from __future__ import annotations

from collections import deque


class QueueFullError(Exception):
    """Raised when a byte is put into a queue that has no room left."""


class ByteQueue:
    """FIFO of values 0-255 backed by a ring of ``size`` slots.

    One slot is always kept free, so the queue holds at most ``size - 1`` items.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("queue size must be at least 1")
        self.size = size
        self._items: deque[int] = deque()

    @property
    def capacity(self) -> int:
        return self.size - 1

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def get(self) -> int:
        """Remove and return the oldest byte."""
        if not self._items:
            raise IndexError("get from an empty ByteQueue")
        return self._items.popleft()

    def peek(self) -> int:
        """Return the oldest byte without removing it."""
        if not self._items:
            raise IndexError("peek into an empty ByteQueue")
        return self._items[0]

    def put(self, item: int) -> None:
        """Append a byte, raising QueueFullError when there is no room."""
        if not 0 <= item <= 0xFF:
            raise ValueError(f"byte value out of range: {item}")
        if self.is_full():
            raise QueueFullError("ByteQueue is full")
        self._items.append(item)