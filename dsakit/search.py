"""Searching over sequences of integers."""

import logging

_log = logging.getLogger(__name__)


def binary_search(items, target):
    """Return the index of target in the sorted items, or -1."""
    start, end = 0, len(items) - 1
    while start <= end:
        mid = start + (end - start) // 2
        if target > items[mid]:
            start = mid + 1
        elif target < items[mid]:
            end = mid - 1
        else:
            return mid
    return -1


def index_of_all_occurrences(items, target):
    """Return every index at which target occurs."""
    return [i for i, value in enumerate(items) if value == target]


def linear_search(items, target):
    """Return the first index of target, or -1."""
    for i, value in enumerate(items):
        if value == target:
            _log.debug("Target element %s found in index %d", target, i)
            return i
    return -1


def min_and_max(items):
    """Return (smallest, largest); raise ValueError when items is empty."""
    iterator = iter(items)
    try:
        first = next(iterator)
    except StopIteration:
        raise ValueError("sequence is empty") from None
    smallest = largest = first
    for value in iterator:
        if value > largest:
            largest = value
        if value < smallest:
            smallest = value
    return smallest, largest


def peak_in_mountain_array(items):
    """Return the index of the peak of a mountain array."""
    start, end = 0, len(items) - 1
    while start < end:
        mid = start + (end - start) // 2
        if items[mid] < items[mid + 1]:
            start = mid + 1
        else:
            end = mid
    return start


def search_rotated_sorted(items, target):
    """Return the index of target in a rotated sorted sequence, or -1."""
    start, end = 0, len(items) - 1
    while start <= end:
        mid = start + (end - start) // 2
        if items[mid] == target:
            return mid
        if items[start] <= items[mid]:
            if items[start] <= target <= items[mid]:
                end = mid - 1
            else:
                start = mid + 1
        elif items[mid] <= target <= items[end]:
            start = mid + 1
        else:
            end = mid - 1
    return -1