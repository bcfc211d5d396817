from collections import Counter

import pytest

from dsakit.sorting import (
    bubble_sort,
    frequency_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
    sort_colors,
)


@pytest.mark.parametrize(
    "given, expected",
    [
        ([5, 2, 1, 3, 4], [1, 2, 3, 4, 5]),
        ([11, 12, 13, 14, 15], [11, 12, 13, 14, 15]),
        ([20, 19, 18, 17, 16], [16, 17, 18, 19, 20]),
        ([9], [9]),
        ([], []),
    ],
)
def test_bubble_sort(given, expected):
    assert bubble_sort(list(given)) == expected


def test_bubble_sort_is_in_place():
    data = [3, 1, 2]
    result = bubble_sort(data)
    assert result is data
    assert data == [1, 2, 3]


SORT_CASES = [
    ([64, 25, 11, 22, 12], [11, 12, 22, 25, 64]),
    ([5, 6, 7, 8, 9], [5, 6, 7, 8, 9]),
    ([90, 80, 70, 60, 50, 40, 30, 20, 10], [10, 20, 30, 40, 50, 60, 70, 80, 90]),
    ([9], [9]),
    ([], []),
]


@pytest.mark.parametrize("given, expected", SORT_CASES)
def test_insertion_sort(given, expected):
    assert insertion_sort(list(given)) == expected


@pytest.mark.parametrize(
    "given, expected",
    [
        ([64, 25, 11, 22, 12], [11, 12, 22, 25, 64]),
        ([90, 80, 70, 60, 50, 40, 30, 20, 10], [10, 20, 30, 40, 50, 60, 70, 80, 90]),
        ([1, 2, 3, 4, 5], [1, 2, 3, 4, 5]),
        ([9], [9]),
        ([], []),
    ],
)
def test_merge_sort(given, expected):
    assert merge_sort(given) == expected


def test_merge_sort_with_duplicates():
    assert merge_sort([3, 1, 3, 2, 1]) == [1, 1, 2, 3, 3]


@pytest.mark.parametrize(
    "given, start, end, expected",
    [
        ([64, 25, 11, 22, 12], 0, 4, [11, 12, 22, 25, 64]),
        ([5, 6, 7, 8, 9], 0, 4, [5, 6, 7, 8, 9]),
        ([90, 80, 70, 60, 50, 40, 30, 20, 10], 0, 8, [10, 20, 30, 40, 50, 60, 70, 80, 90]),
        ([9], 0, 0, [9]),
        ([], 0, -1, []),
    ],
)
def test_quick_sort(given, start, end, expected):
    data = list(given)
    quick_sort(data, start, end)
    assert data == expected


def test_quick_sort_default_bounds():
    data = [4, 2, 5, 1, 3]
    quick_sort(data)
    assert data == [1, 2, 3, 4, 5]


def test_quick_sort_partial_range():
    data = [9, 3, 2, 1, 0]
    quick_sort(data, 1, 3)
    assert data == [9, 1, 2, 3, 0]


@pytest.mark.parametrize("given, expected", SORT_CASES)
def test_selection_sort(given, expected):
    assert selection_sort(list(given)) == expected


@pytest.mark.parametrize(
    "text, expected",
    [("tree", "eetr"), ("cccaaa", "cccaaa"), ("Aabb", "bbAa")],
)
def test_frequency_sort(text, expected):
    result = frequency_sort(text)
    assert Counter(result) == Counter(text)
    assert result == expected


def test_frequency_sort_counts_non_increasing():
    result = frequency_sort("abracadabra")
    runs = []
    for ch in result:
        if runs and runs[-1][0] == ch:
            runs[-1][1] += 1
        else:
            runs.append([ch, 1])
    counts = [count for _, count in runs]
    assert counts == sorted(counts, reverse=True)
    assert Counter(result) == Counter("abracadabra")


@pytest.mark.parametrize(
    "given, expected",
    [
        ([2, 0, 2, 1, 1, 0], [0, 0, 1, 1, 2, 2]),
        ([2, 0, 1], [0, 1, 2]),
        ([2, 2, 2, 1, 1, 1, 0, 0, 0], [0, 0, 0, 1, 1, 1, 2, 2, 2]),
        ([0], [0]),
        ([], []),
    ],
)
def test_sort_colors(given, expected):
    data = list(given)
    sort_colors(data)
    assert data == expected