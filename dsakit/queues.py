"""A fixed-size linear queue and a fixed-size circular queue."""

from __future__ import annotations

from typing import Any, Iterator

DEFAULT_CAPACITY = 50


class QueueFullError(Exception):
    """Raised when an item is added to a queue that has no room left."""


class QueueEmptyError(Exception):
    """Raised when an item is read or removed from an empty queue."""


def _check_capacity(capacity: int) -> None:
    if capacity < 1:
        raise ValueError(f"capacity must be at least 1, got {capacity}")


class LinearQueue:
    """A queue that only grows at its rear until it reaches its capacity."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._items: list[Any] = []

    def enqueue(self, item: Any) -> None:
        """Add an item at the rear; raise QueueFullError once capacity is reached."""
        if len(self._items) == self.capacity:
            raise QueueFullError("queue overflow")
        self._items.append(item)

    def render(self) -> str:
        """The items from front to rear, joined by ' <- '; empty for an empty queue."""
        return " <- ".join(str(item) for item in self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


class CircularQueue:
    """A bounded queue stored in a ring buffer."""

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._front = 0
        self._size = 0

    def is_full(self) -> bool:
        """Whether no more items fit."""
        return self._size == self.capacity

    def is_empty(self) -> bool:
        """Whether the queue holds no items."""
        return self._size == 0

    def front(self) -> Any:
        """The item that would be removed next."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        return self._slots[self._front]

    def rear(self) -> Any:
        """The item added most recently."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        return self._slots[(self._front + self._size - 1) % self.capacity]

    def enqueue(self, item: Any) -> None:
        """Add an item at the rear; raise QueueFullError when full."""
        if self.is_full():
            raise QueueFullError("queue overflow")
        self._slots[(self._front + self._size) % self.capacity] = item
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the front item; raise QueueEmptyError when empty."""
        if self.is_empty():
            raise QueueEmptyError("queue underflow")
        item = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % self.capacity
        self._size -= 1
        return item

    def __len__(self) -> int:
        return self._size