"""Two stacks sharing one fixed array, growing towards each other."""

from __future__ import annotations

from typing import Any

from dsakit.stacks import StackEmptyError, StackFullError


class TwoStacks:
    """A left stack growing up from the start and a right stack growing down from the end.

    Neither push fails until every slot of the shared array is in use.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._left_top = -1
        self._right_top = capacity

    def push_left(self, data: Any) -> None:
        """Push onto the left stack; raise StackFullError when the array is full."""
        if self.is_full():
            raise StackFullError("overflow")
        self._left_top += 1
        self._slots[self._left_top] = data

    def push_right(self, data: Any) -> None:
        """Push onto the right stack; raise StackFullError when the array is full."""
        if self.is_full():
            raise StackFullError("overflow")
        self._right_top -= 1
        self._slots[self._right_top] = data

    def pop_left(self) -> Any:
        """Remove and return the top of the left stack."""
        if self.is_empty_left():
            raise StackEmptyError("left stack underflow")
        value = self._slots[self._left_top]
        self._slots[self._left_top] = None
        self._left_top -= 1
        return value

    def pop_right(self) -> Any:
        """Remove and return the top of the right stack."""
        if self.is_empty_right():
            raise StackEmptyError("right stack underflow")
        value = self._slots[self._right_top]
        self._slots[self._right_top] = None
        self._right_top += 1
        return value

    def top_left(self) -> Any:
        """The top of the left stack, left in place."""
        if self.is_empty_left():
            raise StackEmptyError("left stack is empty")
        return self._slots[self._left_top]

    def top_right(self) -> Any:
        """The top of the right stack, left in place."""
        if self.is_empty_right():
            raise StackEmptyError("right stack is empty")
        return self._slots[self._right_top]

    def is_full(self) -> bool:
        """Whether every slot of the shared array is used."""
        return self._left_top + 1 == self._right_top

    def is_empty_left(self) -> bool:
        """Whether the left stack holds no values."""
        return self._left_top == -1

    def is_empty_right(self) -> bool:
        """Whether the right stack holds no values."""
        return self._right_top == self.capacity