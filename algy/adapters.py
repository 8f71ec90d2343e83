from __future__ import annotations

from .types import *
from .base import _BaseContainer
from .sequence import Sequence
from .linked_list import LinkedList


class Stack(_BaseContainer[T]):
    """lifo adapter over a Sequence. iteration runs from top to bottom."""

    def __init__(self):
        super().__init__()
        self._items: Sequence[T] = Sequence()

    def push(self, value: T) -> None:
        self._items.append(value)

    def pop(self) -> T:
        if not self._items: raise UnderflowError("pop from empty stack")
        return self._items.pop()

    def peek(self) -> T:
        if not self._items: raise UnderflowError("peek at empty stack")
        return self._items.last()

    def pop_or_default(self, default: Optional[T] = None) -> Optional[T]:
        try: return self.pop()
        except UnderflowError: return default

    def peek_or_default(self, default: Optional[T] = None) -> Optional[T]:
        try: return self.peek()
        except UnderflowError: return default

    def __iter__(self) -> Iterator[T]:
        for i in range(len(self._items) - 1, -1, -1):
            yield self._items[i]

    def __len__(self) -> int:
        return len(self._items)


class Queue(_BaseContainer[T]):
    """fifo adapter over a LinkedList. iteration runs from front to back."""

    def __init__(self):
        super().__init__()
        self._items: LinkedList[T] = LinkedList()

    def enqueue(self, value: T) -> None:
        self._items.add_last(value)

    def dequeue(self) -> T:
        if not self._items: raise UnderflowError("dequeue from empty queue")
        return self._items.pop_first()

    def peek(self) -> T:
        if not self._items: raise UnderflowError("peek at empty queue")
        return self._items.peek_first()

    def dequeue_or_default(self, default: Optional[T] = None) -> Optional[T]:
        try: return self.dequeue()
        except UnderflowError: return default

    def peek_or_default(self, default: Optional[T] = None) -> Optional[T]:
        try: return self.peek()
        except UnderflowError: return default

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


# --- monotonic stack ---

def next_greater_indices(values: Iterable[T]) -> List[int]:
    """
    for each position, the index of the next strictly greater value to its right,
    or -1 when none exists.
    the stack holds indices still waiting for a greater value; each index is pushed
    and popped at most once, so the whole scan is o(n).
    """
    data = list(values)
    result = [-1] * len(data)
    pending: Stack[int] = Stack()

    for i, value in enumerate(data):
        while pending and data[pending.peek()] < value:
            result[pending.pop()] = i
        pending.push(i)

    return result


def next_greater_values(values: Iterable[T], sentinel: Any = -1) -> List[Any]:
    """like next_greater_indices but reports the greater value itself, or sentinel"""
    data = list(values)
    return [data[i] if i != -1 else sentinel for i in next_greater_indices(data)]
