"""Sorts that place values by their magnitude rather than by comparing pairs."""

from __future__ import annotations

from collections import Counter
from typing import Iterable


def bead_sort(values: Iterable[int]) -> list[int]:
    """Non-negative integers sorted by letting beads fall down abacus rods."""
    items = list(values)
    if not items:
        return []
    if any(value < 0 for value in items):
        raise ValueError("bead sort needs non-negative integers")
    rows = len(items)
    fallen = [sum(1 for value in items if value > rod) for rod in range(max(items))]
    return [sum(1 for beads in fallen if row >= rows - beads) for row in range(rows)]


def bucket_sort(values: Iterable[float]) -> list[float]:
    """Numbers in ``[0, 1)`` sorted by spreading them over one bucket per value."""
    items = list(values)
    count = len(items)
    buckets: list[list[float]] = [[] for _ in range(count)]
    for value in items:
        if not 0 <= value < 1:
            raise ValueError(f"bucket sort needs values in [0, 1), got {value}")
        buckets[int(count * value)].append(value)
    return [value for bucket in buckets for value in sorted(bucket)]


def counting_sort_string(text: str) -> str:
    """The characters of ``text`` reordered by code point, by counting each one."""
    counts = Counter(text)
    return "".join(char * counts[char] for char in sorted(counts))


def pigeonhole_sort(values: Iterable[int]) -> list[int]:
    """Integers sorted with one hole for every value between the minimum and maximum."""
    items = list(values)
    if not items:
        return []
    low = min(items)
    holes = [0] * (max(items) - low + 1)
    for value in items:
        holes[value - low] += 1
    return [low + offset for offset, count in enumerate(holes) for _ in range(count)]