import random

import pytest

from daakit.sorting import insertion_sort, merge_sort, quick_sort, selection_sort

SAMPLES = [
    [],
    [7],
    [2, 1],
    [1, 2, 3, 4, 5],
    [5, 4, 3, 2, 1],
    [3, 3, 3, 3],
    [4, -1, 0, 4, -7, 12, 0, 3],
    [10, 9, 8, 1, 2, 3, 10, 1],
]


@pytest.mark.parametrize("sample", SAMPLES)
def test_matches_builtin_sorted(sample):
    expected = sorted(sample)
    assert selection_sort(sample) == expected
    assert insertion_sort(sample) == expected
    assert merge_sort(sample) == expected
    assert quick_sort(sample) == expected


def test_random_inputs():
    rng = random.Random(1234)
    for size in range(0, 60, 7):
        data = [rng.randint(-50, 50) for _ in range(size)]
        expected = sorted(data)
        assert selection_sort(data) == expected
        assert insertion_sort(data) == expected
        assert merge_sort(data) == expected
        assert quick_sort(data) == expected


def test_input_is_not_modified():
    data = [9, 2, 7, 2, 5]
    snapshot = list(data)
    selection_sort(data)
    assert data == snapshot
    insertion_sort(data)
    assert data == snapshot
    merge_sort(data)
    assert data == snapshot
    quick_sort(data)
    assert data == snapshot


def test_accepts_any_iterable():
    assert selection_sort(x for x in (3, 1, 2)) == [1, 2, 3]
    assert insertion_sort(x for x in (3, 1, 2)) == [1, 2, 3]
    assert merge_sort(x for x in (3, 1, 2)) == [1, 2, 3]
    assert quick_sort(x for x in (3, 1, 2)) == [1, 2, 3]


def test_result_is_permutation():
    data = [8, 1, 8, 0, -3, 1]
    results = [
        selection_sort(data),
        insertion_sort(data),
        merge_sort(data),
        quick_sort(data),
    ]
    for result in results:
        assert sorted(result) == sorted(data)
        assert all(a <= b for a, b in zip(result, result[1:]))


def test_quick_sort_large_sorted_input_does_not_recurse_deeply():
    data = list(range(5000))
    assert quick_sort(data) == data
    assert quick_sort(reversed(data)) == data


def test_strings():
    words = ["pear", "apple", "fig", "banana"]
    expected = ["apple", "banana", "fig", "pear"]
    assert selection_sort(words) == expected
    assert insertion_sort(words) == expected
    assert merge_sort(words) == expected
    assert quick_sort(words) == expected