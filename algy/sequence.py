from __future__ import annotations

import logging
import operator
import numpy as np
from .types import *
from .base import _BaseContainer

logger = logging.getLogger(__name__)


class Sequence(_BaseContainer[T]):
    """
    resizable ordered container over a contiguous numpy object buffer.
    append is amortized o(1): a full buffer is replaced by one of twice the
    capacity (minimum 1) and the live prefix copied across.
    indices are strict: only [0, length) is valid, negative indices included.
    """

    def __init__(self, capacity: int = 0):
        super().__init__()
        if capacity < 0: raise ValueError("capacity must be non-negative")
        self._buffer = np.empty(capacity, dtype=object)
        self._length = 0

    @property
    def capacity(self) -> int: return len(self._buffer)

    def _as_index(self, index: Any) -> int:
        try:
            return operator.index(index)
        except TypeError:
            raise TypeError(f"sequence indices must be integers, not {type(index).__name__}") from None

    def _check_index(self, index: Any, upper: Optional[int] = None) -> int:
        """the index as an int inside [0, upper), upper defaulting to the length"""
        index = self._as_index(index)
        limit = self._length if upper is None else upper
        if not 0 <= index < limit:
            raise IndexOutOfRangeError(index, self._length)
        return index

    def _grow(self) -> None:
        new_capacity = max(1, 2 * self.capacity)
        new_buffer = np.empty(new_capacity, dtype=object)
        new_buffer[:self._length] = self._buffer[:self._length]
        logger.debug(f"sequence grew from {self.capacity} to {new_capacity}")
        self._buffer = new_buffer

    # --- core operations ---

    def append(self, value: T) -> None:
        """add a value at the end, growing the buffer when it is full"""
        if self._length == self.capacity:
            self._grow()
        self._buffer[self._length] = value
        self._length += 1

    def get(self, index: int) -> T:
        index = self._check_index(index)
        return self._buffer[index]

    def set(self, index: int, value: T) -> None:
        index = self._check_index(index)
        self._buffer[index] = value

    def remove_at(self, index: int) -> T:
        """remove and return the value at index, shifting the tail left. o(n)"""
        index = self._check_index(index)
        value = self._buffer[index]
        self._buffer[index:self._length - 1] = self._buffer[index + 1:self._length]
        self._length -= 1
        self._buffer[self._length] = None
        return value

    def insert_at(self, index: int, value: T) -> None:
        """insert before position index; index == length appends. o(n)"""
        index = self._check_index(index, upper=self._length + 1)
        if self._length == self.capacity:
            self._grow()
        self._buffer[index + 1:self._length + 1] = self._buffer[index:self._length]
        self._buffer[index] = value
        self._length += 1

    def pop(self) -> T:
        """remove and return the last value"""
        if self._length == 0: raise UnderflowError("pop from empty sequence")
        self._length -= 1
        value = self._buffer[self._length]
        self._buffer[self._length] = None
        return value

    def last(self) -> T:
        if self._length == 0: raise UnderflowError("sequence contains no elements")
        return self._buffer[self._length - 1]

    def swap(self, i: int, j: int) -> None:
        i, j = self._check_index(i), self._check_index(j)
        self._buffer[i], self._buffer[j] = self._buffer[j], self._buffer[i]

    def clear(self) -> None:
        """drop every value, keeping the allocated capacity"""
        self._buffer[:self._length] = None
        self._length = 0

    def index_of(self, value: T) -> int:
        """position of the first equal value, or -1"""
        for i in range(self._length):
            if self._buffer[i] == value:
                return i
        return -1

    def extend(self, values: Iterable[T]) -> None:
        for value in values:
            self.append(value)

    # --- python protocol ---

    def __getitem__(self, index: int) -> T:
        return self.get(index)

    def __setitem__(self, index: int, value: T) -> None:
        self.set(index, value)

    def __contains__(self, value: object) -> bool:
        return self.index_of(value) != -1

    def __iter__(self) -> Iterator[T]:
        for i in range(self._length):
            yield self._buffer[i]

    def __len__(self) -> int:
        return self._length

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Sequence):
            other = list(other)
        if not isinstance(other, (list, tuple)):
            return NotImplemented
        return len(other) == self._length and all(a == b for a, b in zip(self, other))

    __hash__ = None
