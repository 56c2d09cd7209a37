"""Stacks that report their minimum in constant time."""

from __future__ import annotations

from typing import Any

from dsakit.stacks import StackEmptyError


class MinStack:
    """A stack that keeps the running minimum beside every value."""

    def __init__(self) -> None:
        self._values: list[Any] = []
        self._minimums: list[Any] = []

    def push(self, data: Any) -> None:
        """Push a value and record the minimum up to it."""
        self._values.append(data)
        if not self._minimums or self._minimums[-1] > data:
            self._minimums.append(data)
        else:
            self._minimums.append(self._minimums[-1])

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._values:
            raise StackEmptyError("stack underflow")
        self._minimums.pop()
        return self._values.pop()

    def get_min(self) -> Any:
        """The smallest value currently on the stack."""
        if not self._minimums:
            raise StackEmptyError("stack is empty")
        return self._minimums[-1]

    def __len__(self) -> int:
        return len(self._values)


class CompactMinStack:
    """A minimum-tracking stack that records a value only when it ties or lowers the minimum."""

    def __init__(self) -> None:
        self._values: list[Any] = []
        self._minimums: list[Any] = []

    def push(self, data: Any) -> None:
        """Push a value, noting it as a minimum if it is not larger than the current one."""
        self._values.append(data)
        if not self._minimums or self._minimums[-1] >= data:
            self._minimums.append(data)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._values:
            raise StackEmptyError("stack underflow")
        value = self._values.pop()
        if self._minimums[-1] == value:
            self._minimums.pop()
        return value

    def get_min(self) -> Any:
        """The smallest value currently on the stack."""
        if not self._minimums:
            raise StackEmptyError("stack is empty")
        return self._minimums[-1]

    def __len__(self) -> int:
        return len(self._values)