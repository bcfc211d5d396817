"""Comparison sorts, frequency ordering and the three-colour partition."""

from collections import Counter


def bubble_sort(arr):
    """Sort arr in place by repeated adjacent swaps and return it."""
    n = len(arr)
    for done in range(n - 1):
        for j in range(n - done - 1):
            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
    return arr


def insertion_sort(arr):
    """Sort arr in place by insertion and return it."""
    for i in range(1, len(arr)):
        current = arr[i]
        prev = i - 1
        while prev >= 0 and arr[prev] > current:
            arr[prev + 1] = arr[prev]
            prev -= 1
        arr[prev + 1] = current
    return arr


def _merge(left, right):
    result = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result


def merge_sort(arr):
    """Return a sorted list built by recursive halving and merging."""
    if len(arr) <= 1:
        return list(arr)
    mid = len(arr) // 2
    return _merge(merge_sort(arr[:mid]), merge_sort(arr[mid:]))


def _partition(arr, start, end):
    pivot = arr[end]
    idx = start - 1
    for j in range(start, end):
        if arr[j] < pivot:
            idx += 1
            arr[j], arr[idx] = arr[idx], arr[j]
    idx += 1
    arr[idx], arr[end] = arr[end], arr[idx]
    return idx


def quick_sort(arr, start=0, end=None):
    """Sort arr[start..end] (inclusive) in place using Lomuto partitioning."""
    if end is None:
        end = len(arr) - 1
    if start < end:
        pivot_index = _partition(arr, start, end)
        quick_sort(arr, start, pivot_index - 1)
        quick_sort(arr, pivot_index + 1, end)


def selection_sort(arr):
    """Sort arr in place by repeatedly selecting the minimum and return it."""
    n = len(arr)
    for i in range(n - 1):
        smallest = min(range(i, n), key=arr.__getitem__)
        arr[i], arr[smallest] = arr[smallest], arr[i]
    return arr


def frequency_sort(text):
    """Return text with its characters grouped, most frequent first."""
    return "".join(ch * count for ch, count in Counter(text).most_common())


def sort_colors(nums):
    """Partition 0s, 1s and everything else (2s) in place, Dutch-flag style."""
    low = mid = 0
    high = len(nums) - 1
    while mid <= high:
        if nums[mid] == 0:
            nums[low], nums[mid] = nums[mid], nums[low]
            low += 1
            mid += 1
        elif nums[mid] == 1:
            mid += 1
        else:
            nums[high], nums[mid] = nums[mid], nums[high]
            high -= 1