"""Array exercises: parity partitioning, duplicates, pairs, zero moving, shuffling, running sums."""

from collections import Counter
from itertools import accumulate


def sort_array_by_parity(nums):
    """Move even numbers in front of odd ones, in place, and return the list."""
    left = 0
    for i, value in enumerate(nums):
        if value % 2 == 0:
            nums[left], nums[i] = value, nums[left]
            left += 1
    return nums


def contains_duplicates(nums):
    """Return True if any value appears more than once."""
    seen = set()
    for value in nums:
        if value in seen:
            return True
        seen.add(value)
    return False


def number_of_good_pairs(nums):
    """Count pairs (i, j) with i < j and nums[i] == nums[j]."""
    return sum(count * (count - 1) // 2 for count in Counter(nums).values())


def move_zeroes(nums):
    """Move every zero to the end, keeping the order of the rest, in place."""
    non_zero = [value for value in nums if value != 0]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))
    return nums


def shuffle_array(n, nums):
    """Interleave [x1..xn, y1..yn] into [x1, y1, x2, y2, ...]."""
    if n < 0 or len(nums) < 2 * n:
        raise ValueError(f"need at least {2 * n} numbers, got {len(nums)}")
    result = []
    for x, y in zip(nums[:n], nums[n : 2 * n]):
        result.extend((x, y))
    return result


def running_sum(nums):
    """Return the running (prefix) sums of nums."""
    return list(accumulate(nums))