import random

import pytest

from dsakit.sorting.quick import (
    generate_unsorted_array,
    partition,
    quick_sort,
    random_pivot_quick_sort,
)


def _random_lists():
    rng = random.Random(7)
    return [[rng.randint(-50, 50) for _ in range(length)] for length in (0, 1, 2, 5, 30, 200)]


@pytest.mark.parametrize("values", _random_lists())
def test_quick_sort_matches_sorted(values):
    assert quick_sort(values) == sorted(values)


@pytest.mark.parametrize("values", _random_lists())
def test_random_pivot_quick_sort_matches_sorted(values):
    assert random_pivot_quick_sort(values, random.Random(3)) == sorted(values)


def test_random_pivot_without_rng_sorts():
    values = [5, 3, 9, 3, -1, 0]
    assert random_pivot_quick_sort(values) == sorted(values)


def test_single_element_edge_case():
    assert random_pivot_quick_sort([2], random.Random(1)) == [2]


def test_quick_sort_does_not_mutate_input():
    values = [3, 1, 2]
    quick_sort(values)
    random_pivot_quick_sort(values, random.Random(0))
    assert values == [3, 1, 2]


def test_quick_sort_handles_long_sorted_input():
    values = list(range(3000))
    assert quick_sort(values) == values
    assert quick_sort(reversed(values)) == values


def test_partition_places_pivot_correctly():
    values = [9, 4, 7, 1, 8, 5]
    pivot = values[-1]
    index = partition(values, 0, len(values) - 1)
    assert values[index] == pivot
    assert all(value <= pivot for value in values[:index])
    assert all(value > pivot for value in values[index + 1:])
    assert sorted(values) == [1, 4, 5, 7, 8, 9]


def test_partition_only_touches_given_range():
    values = [100, 3, 1, 2, -100]
    index = partition(values, 1, 3)
    assert values[0] == 100 and values[4] == -100
    assert values[index] == 2
    assert sorted(values[1:4]) == [1, 2, 3]


def test_generate_unsorted_array_properties():
    result = generate_unsorted_array(500, 1, 10000, random.Random(42))
    assert len(result) == 500
    assert all(1 <= value <= 10000 for value in result)


def test_generate_unsorted_array_excludes_zero():
    result = generate_unsorted_array(200, -1, 1, random.Random(5))
    assert len(result) == 200
    assert set(result) <= {-1, 1}


def test_generate_unsorted_array_is_reproducible():
    first = generate_unsorted_array(20, 50, 1000, random.Random(9))
    second = generate_unsorted_array(20, 50, 1000, random.Random(9))
    assert first == second


def test_generated_array_sorts():
    values = generate_unsorted_array(1000, 1, 10000, random.Random(11))
    assert random_pivot_quick_sort(values, random.Random(2)) == sorted(values)


@pytest.mark.parametrize("low, high", [(5, 5), (10, 1)])
def test_generate_unsorted_array_rejects_bad_range(low, high):
    with pytest.raises(ValueError):
        generate_unsorted_array(3, low, high)


def test_generate_unsorted_array_rejects_negative_size():
    with pytest.raises(ValueError):
        generate_unsorted_array(-1, 1, 10)