"""Merge sorts, top-down and bottom-up, and a numeric ordering for digit strings."""

from __future__ import annotations

from typing import Any, Iterable, Sequence


def _merge(left: Sequence[Any], right: Sequence[Any]) -> list:
    """Merge two sorted runs; on ties the left run goes first."""
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if right[j] < left[i]:
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list:
    """A stable sorted copy, splitting in halves recursively."""
    items = list(values)
    if len(items) < 2:
        return items
    middle = (len(items) + 1) // 2
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def non_recursive_merge_sort(values: Iterable[Any]) -> list:
    """A stable sorted copy, merging runs of doubling width from the bottom up."""
    items = list(values)
    size = len(items)
    width = 1
    while width < size:
        for start in range(0, size, 2 * width):
            middle = min(start + width, size)
            end = min(start + 2 * width, size)
            if middle < end:
                items[start:end] = _merge(items[start:middle], items[middle:end])
        width *= 2
    return items


def numeric_key(text: str) -> tuple[int, str]:
    """Sort key that orders strings of digits by numeric value, ignoring leading zeros."""
    digits = text.lstrip("0")
    return len(digits), digits


def numeric_string_sort(strings: Iterable[str]) -> list[str]:
    """Strings of digits ordered by the numbers they spell."""
    return sorted(strings, key=numeric_key)