import pytest

from algobox.searching import (
    binary_search,
    contains_rotated,
    peak_index,
    search_range,
    search_rotated,
    single_non_duplicate,
)

SORTED = [-1, 0, 3, 5, 9, 12]
ROTATED = [4, 5, 6, 7, 0, 1, 2]
ROTATED_DUPS = [2, 5, 6, 0, 0, 1, 2]


def test_binary_search_finds_every_element():
    for index, value in enumerate(SORTED):
        assert binary_search(SORTED, value) == index


def test_binary_search_missing():
    assert binary_search(SORTED, 2) == -1
    assert binary_search([], 2) == -1


def test_search_rotated_finds_every_element():
    for index, value in enumerate(ROTATED):
        assert search_rotated(ROTATED, value) == index


def test_search_rotated_missing():
    assert search_rotated(ROTATED, 3) == -1
    assert search_rotated([1], 0) == -1


def test_contains_rotated():
    assert all(contains_rotated(ROTATED_DUPS, value) for value in ROTATED_DUPS)
    assert contains_rotated(ROTATED_DUPS, 3) is False
    assert contains_rotated([1, 0, 1, 1, 1], 0) is True
    assert contains_rotated([], 1) is False


def test_search_range_known_example():
    assert search_range([5, 7, 7, 8, 8, 10], 8) == (3, 4)


def test_search_range_invariants():
    nums = [1, 2, 2, 2, 3, 5, 5]
    for value in set(nums):
        first, last = search_range(nums, value)
        assert first == nums.index(value)
        assert last - first + 1 == nums.count(value)


def test_search_range_missing():
    assert search_range([5, 7, 7, 8, 8, 10], 6) == (-1, -1)
    assert search_range([], 0) == (-1, -1)


def test_single_non_duplicate():
    assert single_non_duplicate([1, 1, 2, 3, 3, 4, 4, 8, 8]) == 2
    assert single_non_duplicate([3, 3, 7, 7, 10, 11, 11]) == 10
    assert single_non_duplicate([9]) == 9


def test_single_non_duplicate_empty_raises():
    with pytest.raises(ValueError):
        single_non_duplicate([])


def test_peak_index():
    assert peak_index([0, 1, 0]) == 1
    arr = [0, 2, 5, 9, 4, 1, 0]
    assert arr[peak_index(arr)] == max(arr)


def test_peak_index_empty_raises():
    with pytest.raises(ValueError):
        peak_index([])