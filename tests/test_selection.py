import random

import pytest

from dsakit.sorting.selection import (
    find_min_index,
    recursive_bubble_sort,
    selection_sort,
    selection_sort_recursive,
)


@pytest.mark.parametrize(
    "values, expected",
    [
        ([1, 0, 0, 1, 1, 0, 2, 1], [0, 0, 0, 1, 1, 1, 1, 2]),
        ([19, 22, 540, 241, 156, 140, 12, 1], [1, 12, 19, 22, 140, 156, 241, 540]),
        ([11, 20, 30, 41, 15, 60, 82, 15], [11, 15, 15, 20, 30, 41, 60, 82]),
    ],
)
def test_selection_sort_source_cases(values, expected):
    assert selection_sort(values) == expected


def test_selection_sort_fourth_source_case():
    values = [1, 9, 11, 546, 26, 65, 212, 14]
    assert selection_sort(values) == sorted(values)


@pytest.mark.parametrize(
    "values, expected",
    [
        ([0, 1, 1, 2], [0, 1, 1, 2]),
        ([1, 0, 0, 1, 1, 0, 2, 1], [0, 0, 0, 1, 1, 1, 1, 2]),
        ([1, 1, 0, 0, 1, 2, 2, 0, 2, 1], [0, 0, 0, 1, 1, 1, 1, 2, 2, 2]),
        ([2, 2, 2, 0, 0, 1, 1], [0, 0, 1, 1, 2, 2, 2]),
    ],
)
def test_selection_sort_recursive_source_cases(values, expected):
    assert selection_sort_recursive(values) == expected


def test_recursive_bubble_sort_integers():
    values = [22, 46, 94, 12, 37, 63]
    assert recursive_bubble_sort(values) == sorted(values)


def test_recursive_bubble_sort_doubles():
    values = [20.4, 62.7, 12.2, 43.6, 74.1, 57.9]
    assert recursive_bubble_sort(values) == sorted(values)


@pytest.mark.parametrize(
    "sort", [selection_sort, selection_sort_recursive, recursive_bubble_sort]
)
def test_random_inputs_match_sorted(sort):
    rng = random.Random(13)
    for length in (0, 1, 2, 7, 60):
        values = [rng.randint(-20, 20) for _ in range(length)]
        assert sort(values) == sorted(values)


@pytest.mark.parametrize(
    "sort", [selection_sort, selection_sort_recursive, recursive_bubble_sort]
)
def test_input_is_not_mutated(sort):
    values = [3, 2, 1]
    sort(values)
    assert values == [3, 2, 1]


def test_find_min_index_points_at_minimum():
    values = [5, 3, 8, -2, 7]
    assert values[find_min_index(values)] == min(values)


def test_find_min_index_respects_start():
    values = [-10, 4, 9, 2, 6]
    index = find_min_index(values, 2)
    assert index >= 2
    assert values[index] == min(values[2:])


def test_find_min_index_prefers_last_tie():
    assert find_min_index([2, 1, 3, 1]) == 3


@pytest.mark.parametrize("values, start", [([], 0), ([1, 2], 2), ([1, 2], -1)])
def test_find_min_index_rejects_bad_start(values, start):
    with pytest.raises(ValueError):
        find_min_index(values, start)