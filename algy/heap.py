from __future__ import annotations

import logging
from itertools import count
from .types import *
from .base import _BaseContainer
from .sequence import Sequence

logger = logging.getLogger(__name__)


class BinaryHeap(_BaseContainer[T]):
    """
    array-backed max-heap. the backing Sequence stores a complete binary tree in
    level order: children of i sit at 2i + 1 and 2i + 2, its parent at (i - 1) // 2.
    push and pop are o(log n), peek is o(1).

    an optional key orders items by key(item) instead of the items themselves.
    iteration yields the backing order, not priority order; use drain() for that.
    """

    def __init__(self, key: Optional[KeySelector[T, Any]] = None):
        super().__init__()
        self._items: Sequence[T] = Sequence()
        self._key = key

    @classmethod
    def from_iterable(cls, values: Iterable[T], key: Optional[KeySelector[T, Any]] = None) -> 'BinaryHeap[T]':
        """build a heap in o(n) by sifting down every internal node, last first"""
        heap = cls(key=key)
        heap._items.extend(values)
        for i in range(len(heap._items) // 2 - 1, -1, -1):
            heap._sift_down(i)
        logger.debug(f"heapified {len(heap._items)} items")
        return heap

    def _higher(self, a: T, b: T) -> bool:
        """True when a belongs above b"""
        if self._key is not None:
            return self._key(a) > self._key(b)
        return a > b

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if not self._higher(items[index], items[parent]):
                break
            items.swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            left, right = 2 * index + 1, 2 * index + 2
            largest = index
            if left < size and self._higher(items[left], items[largest]):
                largest = left
            if right < size and self._higher(items[right], items[largest]):
                largest = right
            if largest == index:
                return
            items.swap(index, largest)
            index = largest

    # --- core operations ---

    def push(self, value: T) -> None:
        self._items.append(value)
        self._sift_up(len(self._items) - 1)

    def pop(self) -> T:
        """remove and return the highest item"""
        if not self._items: raise UnderflowError("pop from empty heap")
        last = len(self._items) - 1
        self._items.swap(0, last)
        top = self._items.pop()
        if self._items:
            self._sift_down(0)
        return top

    def peek(self) -> T:
        if not self._items: raise UnderflowError("peek at empty heap")
        return self._items[0]

    def push_pop(self, value: T) -> T:
        """push then pop in one sift; returns value itself when it would be the top"""
        if not self._items or not self._higher(self._items[0], value):
            return value
        top = self._items[0]
        self._items[0] = value
        self._sift_down(0)
        return top

    def replace(self, value: T) -> T:
        """pop then push in one sift"""
        if not self._items: raise UnderflowError("replace on empty heap")
        top = self._items[0]
        self._items[0] = value
        self._sift_down(0)
        return top

    def drain(self) -> Traversal[T]:
        """pop every item lazily, highest first. the heap empties as it is consumed."""
        def walk():
            while self._items:
                yield self.pop()

        return Traversal(walk())

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


class MinHeap(BinaryHeap[T]):
    """binary heap with the smallest item (or smallest key) on top"""

    def _higher(self, a: T, b: T) -> bool:
        if self._key is not None:
            return self._key(a) < self._key(b)
        return a < b


class PriorityQueue(_BaseContainer[T]):
    """
    highest priority first. items sharing a priority come out in insertion order,
    and the items themselves never need to be comparable.
    """

    def __init__(self):
        super().__init__()
        # entries are (priority, -sequence, item); a larger -sequence means earlier
        self._heap: BinaryHeap[Tuple[Any, int, T]] = BinaryHeap(key=lambda entry: (entry[0], entry[1]))
        self._counter = count()

    def push(self, item: T, priority: Any) -> None:
        self._heap.push((priority, -next(self._counter), item))

    def pop(self) -> T:
        if not self._heap: raise UnderflowError("pop from empty priority queue")
        return self._heap.pop()[2]

    def peek(self) -> T:
        if not self._heap: raise UnderflowError("peek at empty priority queue")
        return self._heap.peek()[2]

    def peek_priority(self) -> Any:
        if not self._heap: raise UnderflowError("peek at empty priority queue")
        return self._heap.peek()[0]

    def __iter__(self) -> Iterator[T]:
        return (entry[2] for entry in self._heap)

    def __len__(self) -> int:
        return len(self._heap)
