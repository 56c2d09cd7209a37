"""Comparison sorts that work by swapping neighbours or sifting through a heap."""

from __future__ import annotations

from typing import Any, Iterable

SHRINK_NUMERATOR = 10
SHRINK_DENOMINATOR = 13


def bubble_sort(values: Iterable[Any]) -> list:
    """A sorted copy, bubbling the largest remaining value to the end each pass.

    Stops early once a pass makes no swap.
    """
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for index in range(end):
            if items[index] > items[index + 1]:
                items[index], items[index + 1] = items[index + 1], items[index]
                swapped = True
        if not swapped:
            break
    return items


def find_next_gap(gap: int) -> int:
    """Shrink a comb-sort gap by the factor 1.3, never going below 1."""
    return max(1, gap * SHRINK_NUMERATOR // SHRINK_DENOMINATOR)


def comb_sort(values: Iterable[Any]) -> list:
    """A sorted copy, comparing values a shrinking gap apart."""
    items = list(values)
    gap = len(items)
    swapped = True
    while gap != 1 or swapped:
        gap = find_next_gap(gap)
        swapped = False
        for index in range(len(items) - gap):
            if items[index] > items[index + gap]:
                items[index], items[index + gap] = items[index + gap], items[index]
                swapped = True
    return items


def insertion_sort(values: Iterable[Any]) -> list:
    """A sorted copy, inserting each value into the sorted prefix before it."""
    items = list(values)
    for index in range(1, len(items)):
        current = items[index]
        position = index - 1
        while position >= 0 and current < items[position]:
            items[position + 1] = items[position]
            position -= 1
        items[position + 1] = current
    return items


def odd_even_sort(values: Iterable[Any]) -> list:
    """A sorted copy, alternating passes over odd and even neighbour pairs."""
    items = list(values)
    done = False
    while not done:
        done = True
        for start in (1, 0):
            for index in range(start, len(items) - 1, 2):
                if items[index] > items[index + 1]:
                    items[index], items[index + 1] = items[index + 1], items[index]
                    done = False
    return items


def _sift_down(items: list, size: int, root: int) -> None:
    while True:
        largest = root
        for child in (2 * root + 1, 2 * root + 2):
            if child < size and items[child] > items[largest]:
                largest = child
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[Any]) -> list:
    """A sorted copy, built by repeatedly taking the top of a max-heap."""
    items = list(values)
    size = len(items)
    for root in range(size - 1, -1, -1):
        _sift_down(items, size, root)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items