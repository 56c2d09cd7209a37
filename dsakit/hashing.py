"""A separate-chaining hash table of integers that rehashes when overloaded."""

from __future__ import annotations

from collections import deque

LOAD_FACTOR = 20
PRIME = 1000000009
MULTIPLIER = 3
OFFSET = 4


def hash_number(data: int, size: int) -> int:
    """Bucket index of a value in a table of the given size."""
    return ((MULTIPLIER * data + OFFSET) % PRIME) % size


class ChainedHashTable:
    """A set of integers in chained buckets.

    The table starts with ``size // LOAD_FACTOR`` buckets and doubles them when
    the average chain length exceeds the load factor.
    """

    def __init__(self, size: int) -> None:
        bucket_count = size // LOAD_FACTOR
        if bucket_count < 1:
            raise ValueError(f"size must be at least {LOAD_FACTOR}, got {size}")
        self._table: list[deque[int]] = [deque() for _ in range(bucket_count)]
        self._count = 0

    def insert(self, data: int) -> bool:
        """Add a value; return False if it was already present."""
        if data in self:
            return False
        self._table[hash_number(data, len(self._table))].appendleft(data)
        self._count += 1
        if self._count // len(self._table) > LOAD_FACTOR:
            self._rehash()
        return True

    def delete(self, data: int) -> bool:
        """Remove a value; return False if it was not present."""
        bucket = self._table[hash_number(data, len(self._table))]
        try:
            bucket.remove(data)
        except ValueError:
            return False
        self._count -= 1
        return True

    def _rehash(self) -> None:
        old = self._table
        self._table = [deque() for _ in range(len(old) * 2)]
        for bucket in old:
            for value in bucket:
                self._table[hash_number(value, len(self._table))].appendleft(value)

    def __contains__(self, data: object) -> bool:
        if not isinstance(data, int):
            return False
        return data in self._table[hash_number(data, len(self._table))]

    def __len__(self) -> int:
        return self._count

    def buckets(self) -> list[list[int]]:
        """A copy of every bucket's chain, most recently added value first."""
        return [list(bucket) for bucket in self._table]

    def render(self) -> str:
        """One line per bucket showing its chain."""
        return "\n".join(
            f"[node {index}] -> " + "".join(f"{value} -> " for value in bucket) + "NULL"
            for index, bucket in enumerate(self._table)
        )