"""Shell sort, strand sort, a run-based merge sort in the style of Timsort, and wave sort."""

from __future__ import annotations

import heapq
from typing import Any, Iterable

RUN = 32


def shell_sort(values: Iterable[Any]) -> list:
    """A sorted copy, insertion-sorting values a halving gap apart."""
    items = list(values)
    gap = len(items) // 2
    while gap > 0:
        for index in range(gap, len(items)):
            position = index - gap
            while position >= 0 and not items[position] < items[position + gap]:
                items[position], items[position + gap] = (
                    items[position + gap],
                    items[position],
                )
                position -= gap
        gap //= 2
    return items


def strand_sort(values: Iterable[Any]) -> list:
    """A sorted copy, pulling out ascending strands and merging each into the result."""
    remaining = list(values)
    result: list = []
    while remaining:
        strand = [remaining[0]]
        rest = []
        for value in remaining[1:]:
            if strand[-1] <= value:
                strand.append(value)
            else:
                rest.append(value)
        result = list(heapq.merge(result, strand))
        remaining = rest
    return result


def _insertion_sort_range(items: list, start: int, stop: int) -> None:
    for index in range(start + 1, stop):
        current = items[index]
        position = index - 1
        while position >= start and items[position] > current:
            items[position + 1] = items[position]
            position -= 1
        items[position + 1] = current


def tim_sort(values: Iterable[Any]) -> list:
    """A stable sorted copy: runs of ``RUN`` values are insertion-sorted, then merged pairwise."""
    items = list(values)
    size = len(items)
    for start in range(0, size, RUN):
        _insertion_sort_range(items, start, min(start + RUN, size))
    width = RUN
    while width < size:
        for left in range(0, size, 2 * width):
            middle = min(left + width, size)
            right = min(left + 2 * width, size)
            if middle < right:
                items[left:right] = list(
                    heapq.merge(items[left:middle], items[middle:right])
                )
        width *= 2
    return items


def wave_sort(values: Iterable[Any]) -> list:
    """The values arranged so that ``a[0] >= a[1] <= a[2] >= a[3] ...``.

    The values are sorted and then each adjacent pair is swapped.
    """
    items = sorted(values)
    for index in range(0, len(items) - 1, 2):
        items[index], items[index + 1] = items[index + 1], items[index]
    return items