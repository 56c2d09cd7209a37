import pytest

from dsakit.sorting.simple import (
    bubble_sort,
    comb_sort,
    find_next_gap,
    heap_sort,
    insertion_sort,
    odd_even_sort,
)

CASES = [
    [34, 56, 6, 23, 76, 34, 76, 343, 4, 76],
    [-6, 56, -45, 56, 0, -1, 8, 8],
    [-10, 78, -1, -6, 7, 4, 94, 5, 99, 0],
    [4.5, -3.6, 7.6, 0, 12.9],
    [78, 34, 35, 6, 34, 56, 3, 56, 2, 4],
    [5, -3, 7, -2, 1],
    [5.6, -3.1, -3.0, -2.1, 1.8],
    [],
    [42],
    [3, 3, 3, 3],
    list(range(20, 0, -1)),
]


@pytest.mark.parametrize("values", CASES)
def test_sorts_match_sorted(values):
    expected = sorted(values)
    assert bubble_sort(values) == expected
    assert comb_sort(values) == expected
    assert insertion_sort(values) == expected
    assert odd_even_sort(values) == expected
    assert heap_sort(values) == expected


def test_input_is_not_modified():
    values = [5, 1, 4, 2, 3]
    snapshot = list(values)
    bubble_sort(values)
    comb_sort(values)
    insertion_sort(values)
    odd_even_sort(values)
    heap_sort(values)
    assert values == snapshot


def test_accepts_any_iterable():
    assert bubble_sort(iter((9, 7, 8))) == [7, 8, 9]
    assert comb_sort(iter((9, 7, 8))) == [7, 8, 9]
    assert insertion_sort(iter((9, 7, 8))) == [7, 8, 9]
    assert odd_even_sort(iter((9, 7, 8))) == [7, 8, 9]
    assert heap_sort(iter((9, 7, 8))) == [7, 8, 9]


def test_result_is_a_permutation():
    values = [2, 9, 2, 1, 9, 0, -4]
    results = [
        bubble_sort(values),
        comb_sort(values),
        insertion_sort(values),
        odd_even_sort(values),
        heap_sort(values),
    ]
    for result in results:
        assert sorted(result) == sorted(values)
        assert all(a <= b for a, b in zip(result, result[1:]))


def test_strings_sort():
    words = ["pear", "apple", "fig", "banana"]
    expected = sorted(words)
    assert bubble_sort(words) == expected
    assert comb_sort(words) == expected
    assert insertion_sort(words) == expected
    assert odd_even_sort(words) == expected
    assert heap_sort(words) == expected


def test_find_next_gap_never_below_one():
    assert find_next_gap(0) == 1
    assert find_next_gap(1) == 1
    assert find_next_gap(2) == 1


def test_find_next_gap_shrinks():
    for gap in range(2, 200):
        assert 1 <= find_next_gap(gap) < gap


def test_find_next_gap_ratio():
    assert find_next_gap(13) == 10