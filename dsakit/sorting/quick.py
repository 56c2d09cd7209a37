"""Quick sort with a last-element pivot and with a randomly chosen pivot."""

from __future__ import annotations

import random
from typing import Any, Callable, Iterable, MutableSequence, Optional


def partition(values: MutableSequence[Any], low: int, high: int) -> int:
    """Partition ``values[low:high + 1]`` in place around its last element.

    Values not larger than the pivot end up before it and larger values
    after it. Returns the pivot's final index.
    """
    pivot = values[high]
    boundary = low
    for index in range(low, high):
        if values[index] <= pivot:
            values[index], values[boundary] = values[boundary], values[index]
            boundary += 1
    values[boundary], values[high] = values[high], values[boundary]
    return boundary


def _sort_in_place(
    items: list, choose_pivot: Optional[Callable[[int, int], int]] = None
) -> None:
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        if choose_pivot is not None:
            pick = choose_pivot(low, high)
            items[pick], items[high] = items[high], items[pick]
        pivot_index = partition(items, low, high)
        pending.append((low, pivot_index - 1))
        pending.append((pivot_index + 1, high))


def quick_sort(values: Iterable[Any]) -> list:
    """A sorted copy, partitioning around the last element of each range."""
    items = list(values)
    _sort_in_place(items)
    return items


def random_pivot_quick_sort(
    values: Iterable[Any], rng: Optional[random.Random] = None
) -> list:
    """A sorted copy, partitioning around a randomly chosen element of each range."""
    if rng is None:
        rng = random.Random()
    items = list(values)
    _sort_in_place(items, rng.randint)
    return items


def generate_unsorted_array(
    size: int, low: int, high: int, rng: Optional[random.Random] = None
) -> list[int]:
    """``size`` random non-zero integers drawn from ``[low, high]``."""
    if low >= high:
        raise ValueError(f"low must be less than high, got {low} and {high}")
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if rng is None:
        rng = random.Random()
    result: list[int] = []
    while len(result) < size:
        number = rng.randint(low, high)
        if number:
            result.append(number)
    return result