"""Stacks backed by a fixed array, a doubling array and a linked list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


class StackFullError(Exception):
    """Raised when pushing onto a stack that has no room left."""


class StackEmptyError(Exception):
    """Raised when reading or popping from an empty stack."""


class ArrayStack:
    """A stack with a fixed capacity. Iterates from bottom to top."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, data: Any) -> None:
        """Push a value; raise StackFullError when the stack is full."""
        if self.is_full():
            raise StackFullError("stack overflow")
        self._items.append(data)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self.is_empty():
            raise StackEmptyError("stack underflow")
        return self._items.pop()

    def top(self) -> Any:
        """The top value, left in place."""
        if self.is_empty():
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def is_full(self) -> bool:
        """Whether the stack holds as many values as its capacity."""
        return len(self._items) == self.capacity

    def is_empty(self) -> bool:
        """Whether the stack holds no values."""
        return not self._items

    def clear(self) -> None:
        """Remove every value."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)


class DynamicArrayStack:
    """A stack whose capacity doubles whenever it fills. Iterates from bottom to top."""

    def __init__(self, capacity: int = 1) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, data: Any) -> None:
        """Push a value, doubling the capacity first if the stack is full."""
        if len(self._items) == self.capacity:
            self.capacity *= 2
        self._items.append(data)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self.is_empty():
            raise StackEmptyError("stack underflow")
        return self._items.pop()

    def top(self) -> Any:
        """The top value, left in place."""
        if self.is_empty():
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Whether the stack holds no values."""
        return not self._items

    def clear(self) -> None:
        """Remove every value; the capacity is kept."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)


@dataclass
class _Link:
    data: Any
    next: Optional[_Link] = None


class LinkedStack:
    """An unbounded stack of linked cells. Iterates from top to bottom."""

    def __init__(self) -> None:
        self._head: Optional[_Link] = None
        self._size = 0

    def push(self, data: Any) -> None:
        """Push a value onto the top."""
        self._head = _Link(data, self._head)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self._head is None:
            raise StackEmptyError("stack underflow")
        link = self._head
        self._head = link.next
        self._size -= 1
        return link.data

    def top(self) -> Any:
        """The top value, left in place."""
        if self._head is None:
            raise StackEmptyError("stack is empty")
        return self._head.data

    def is_empty(self) -> bool:
        """Whether the stack holds no values."""
        return self._head is None

    def clear(self) -> None:
        """Remove every value."""
        self._head = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        link = self._head
        while link is not None:
            yield link.data
            link = link.next