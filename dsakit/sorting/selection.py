"""Selection sort, iterative and minimum-driven, and a pass-shrinking bubble sort."""

from __future__ import annotations

from typing import Any, Iterable, Sequence


def selection_sort(values: Iterable[Any]) -> list:
    """A sorted copy, swapping the smallest remaining value into place each step."""
    items = list(values)
    for position in range(len(items)):
        smallest = position
        for index in range(position + 1, len(items)):
            if items[index] < items[smallest]:
                smallest = index
        if smallest != position:
            items[smallest], items[position] = items[position], items[smallest]
    return items


def find_min_index(values: Sequence[Any], start: int = 0) -> int:
    """Index of the smallest value at or after ``start``; ties go to the last one."""
    if not 0 <= start < len(values):
        raise ValueError(f"start {start} is outside a sequence of length {len(values)}")
    answer = len(values) - 1
    for index in range(len(values) - 2, start - 1, -1):
        if values[index] < values[answer]:
            answer = index
    return answer


def selection_sort_recursive(values: Iterable[Any]) -> list:
    """A sorted copy, placing the minimum of each remaining suffix at its front."""
    items = list(values)
    for position in range(len(items)):
        smallest = find_min_index(items, position)
        if smallest != position:
            items[smallest], items[position] = items[position], items[smallest]
    return items


def recursive_bubble_sort(values: Iterable[Any]) -> list:
    """A sorted copy, each pass fixing the largest value of a shrinking prefix."""
    items = list(values)
    for length in range(len(items), 1, -1):
        for index in range(length - 1):
            if items[index] > items[index + 1]:
                items[index], items[index + 1] = items[index + 1], items[index]
    return items