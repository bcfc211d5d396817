"""Singly and doubly linked lists and classic list-node algorithms."""

from dataclasses import dataclass


@dataclass(eq=False)
class Node:
    """A node of a singly linked list."""

    data: int
    next: "Node | None" = None


class LinkedList:
    """A singly linked list reached through its head node."""

    def __init__(self, head=None):
        self.head = head

    def push_front(self, data):
        """Insert data at the front."""
        self.head = Node(data, self.head)

    def push_back(self, data):
        """Append data at the end."""
        new_node = Node(data)
        if self.head is None:
            self.head = new_node
            return
        current = self.head
        while current.next is not None:
            current = current.next
        current.next = new_node

    def pop_front(self):
        """Remove and return the first value; raise IndexError if empty."""
        if self.head is None:
            raise IndexError("pop from empty list")
        value = self.head.data
        self.head = self.head.next
        return value

    def pop_back(self):
        """Remove and return the last value; raise IndexError if empty."""
        if self.head is None:
            raise IndexError("pop from empty list")
        if self.head.next is None:
            value = self.head.data
            self.head = None
            return value
        prev, current = self.head, self.head.next
        while current.next is not None:
            prev, current = current, current.next
        prev.next = None
        return current.data

    def __iter__(self):
        node = self.head
        while node is not None:
            yield node.data
            node = node.next

    def __str__(self):
        return "".join(f"{value}->" for value in self)


class _DoublyNode:
    __slots__ = ("data", "next", "prev")

    def __init__(self, data):
        self.data = data
        self.next = None
        self.prev = None


class DoublyList:
    """A doubly linked list with head and tail references."""

    def __init__(self):
        self._head = None
        self._tail = None

    def push_front(self, value):
        """Insert value at the front."""
        node = _DoublyNode(value)
        if self._head is None:
            self._head = self._tail = node
        else:
            node.next = self._head
            self._head.prev = node
            self._head = node

    def push_back(self, value):
        """Append value at the end."""
        node = _DoublyNode(value)
        if self._head is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            node.prev = self._tail
            self._tail = node

    def pop_front(self):
        """Remove and return the first value; raise IndexError if empty."""
        if self._head is None:
            raise IndexError("pop from empty list")
        node = self._head
        self._head = node.next
        if self._head is not None:
            self._head.prev = None
        else:
            self._tail = None
        node.next = None
        return node.data

    def pop_back(self):
        """Remove and return the last value; raise IndexError if empty."""
        if self._tail is None:
            raise IndexError("pop from empty list")
        node = self._tail
        self._tail = node.prev
        if self._tail is not None:
            self._tail.next = None
        else:
            self._head = None
        node.prev = None
        return node.data

    def __iter__(self):
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __str__(self):
        return "".join(f"{value} <=>" for value in self)


@dataclass(eq=False)
class ListNode:
    """A bare singly linked list node."""

    val: int
    next: "ListNode | None" = None

    @classmethod
    def from_values(cls, values):
        """Build a chain from values and return its head, or None if empty."""
        head = None
        for value in reversed(list(values)):
            head = cls(value, head)
        return head

    def __iter__(self):
        node = self
        while node is not None:
            yield node.val
            node = node.next


def has_cycle(head):
    """Return True if following next pointers from head loops."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def middle_node(head):
    """Return the middle node; the second middle for even lengths."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def reverse_list(head):
    """Reverse the chain in place and return the new head."""
    prev = None
    current = head
    while current is not None:
        current.next, prev, current = prev, current, current.next
    return prev