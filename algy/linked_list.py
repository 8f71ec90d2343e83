from __future__ import annotations

from .types import *
from .base import _BaseContainer


class LinkedList(_BaseContainer[T]):
    """
    singly linked chain with head and tail references.
    add_first and add_last are o(1); search and removal by value are o(n).
    """

    def __init__(self):
        super().__init__()
        self._head: Optional[ListNode[T]] = None
        self._tail: Optional[ListNode[T]] = None
        self._size = 0

    def add_first(self, value: T) -> None:
        node = ListNode(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def add_last(self, value: T) -> None:
        node = ListNode(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def peek_first(self) -> T:
        if self._head is None: raise UnderflowError("list contains no elements")
        return self._head.value

    def peek_last(self) -> T:
        if self._tail is None: raise UnderflowError("list contains no elements")
        return self._tail.value

    def pop_first(self) -> T:
        """unlink and return the head value"""
        if self._head is None: raise UnderflowError("pop from empty list")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        node.next = None
        self._size -= 1
        return node.value

    def index_of(self, value: T) -> int:
        """position of the first equal value, or -1"""
        for i, item in enumerate(self):
            if item == value:
                return i
        return -1

    def contains(self, value: T) -> bool:
        return self.index_of(value) != -1

    def remove(self, value: T) -> bool:
        """unlink the first node holding value. returns False when absent."""
        previous = None
        current = self._head
        while current is not None:
            if current.value == value:
                if previous is None:
                    self._head = current.next
                else:
                    previous.next = current.next
                if current is self._tail:
                    self._tail = previous
                current.next = None
                self._size -= 1
                return True
            previous, current = current, current.next
        return False

    def reverse(self) -> None:
        """
        reverses the chain in place with the three-pointer walk:
        o(n) time, o(1) extra space, no nodes allocated or dropped.
        """
        previous = None
        current = self._head
        self._tail = current
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self._head = previous

    def clear(self) -> None:
        self._head = self._tail = None
        self._size = 0

    def __contains__(self, value: object) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size
