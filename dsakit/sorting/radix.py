"""Least-significant-digit radix sort for non-negative integers."""

from __future__ import annotations

from typing import Iterable

BASE = 10


def radix_sort(values: Iterable[int]) -> list[int]:
    """Non-negative integers sorted one decimal digit at a time, lowest digit first."""
    items = list(values)
    if any(value < 0 for value in items):
        raise ValueError("radix sort needs non-negative integers")
    largest = max(items, default=0)
    place = 1
    while largest // place:
        buckets: list[list[int]] = [[] for _ in range(BASE)]
        for value in items:
            buckets[value // place % BASE].append(value)
        items = [value for bucket in buckets for value in bucket]
        place *= BASE
    return items