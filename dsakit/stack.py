"""Stack and queue containers and monotonic-stack algorithms."""

from collections import deque


class Queue:
    """A first-in, first-out queue."""

    def __init__(self, items=()):
        self._items = deque(items)

    def enqueue(self, value):
        """Add value at the back."""
        self._items.append(value)

    def dequeue(self):
        """Remove and return the front value; raise IndexError if empty."""
        if not self._items:
            raise IndexError("queue is empty")
        return self._items.popleft()

    def front(self):
        """Return the front value without removing it; raise IndexError if empty."""
        if not self._items:
            raise IndexError("queue is empty")
        return self._items[0]

    def is_empty(self):
        """Return True if the queue holds nothing."""
        return not self._items

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __str__(self):
        return " ".join(str(item) for item in self._items)


class Stack:
    """A last-in, first-out stack of arbitrary items."""

    def __init__(self, items=()):
        self._items = list(items)

    def push(self, item):
        """Put item on top."""
        self._items.append(item)

    def pop(self):
        """Remove and return the top item; raise IndexError if empty."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def peek(self):
        """Return the top item without removing it; raise IndexError if empty."""
        if not self._items:
            raise IndexError("peek at empty stack")
        return self._items[-1]

    def is_empty(self):
        """Return True if the stack holds nothing."""
        return not self._items

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        """Iterate from bottom to top."""
        return iter(self._items)


def next_greater_element(elements):
    """For each element, the next strictly greater value to its right, or -1."""
    answer = [-1] * len(elements)
    stack = []
    for i in reversed(range(len(elements))):
        while stack and elements[stack[-1]] <= elements[i]:
            stack.pop()
        if stack:
            answer[i] = elements[stack[-1]]
        stack.append(i)
    return answer


def next_greater_element_mapped(nums1, nums2):
    """For each value of nums1, its next greater value in nums2, or -1.

    Values of nums1 that do not occur in nums2 map to 0.
    """
    stack = []
    next_greater = {}
    for num in nums2:
        while stack and num > stack[-1]:
            next_greater[stack.pop()] = num
        stack.append(num)
    for remaining in stack:
        next_greater[remaining] = -1
    return [next_greater.get(num, 0) for num in nums1]


def reverse_stack(items):
    """Return items in reverse order, as popped from a stack."""
    stack = list(items)
    reversed_items = []
    while stack:
        reversed_items.append(stack.pop())
    return reversed_items


def stock_span(prices):
    """For each day, the count of consecutive days up to it with price <= today's."""
    span = []
    stack = []
    for i, price in enumerate(prices):
        while stack and prices[stack[-1]] <= price:
            stack.pop()
        span.append(i - stack[-1] if stack else i + 1)
        stack.append(i)
    return span


_PAIRS = {")": "(", "}": "{", "]": "["}
_OPENERS = frozenset(_PAIRS.values())


def is_valid_brackets(s):
    """Return True if every bracket in s is properly matched and nested."""
    stack = []
    for ch in s:
        if ch in _OPENERS:
            stack.append(ch)
        elif not stack or stack[-1] != _PAIRS.get(ch):
            return False
        else:
            stack.pop()
    return not stack