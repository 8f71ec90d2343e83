from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type, Hashable
)
from enum import Enum

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

KeySelector = Callable[[T], K]
Predicate = Callable[[T], bool]


# --- error taxonomy ---

class AlgyError(Exception):
    """base class for every error raised by an algy structure"""
    pass


class UnderflowError(AlgyError, IndexError):
    """pop, dequeue or peek on an empty stack, queue or heap"""
    pass


class IndexOutOfRangeError(AlgyError, IndexError):
    """sequence access outside [0, length)"""

    def __init__(self, index: int, length: int):
        super().__init__(f"index {index} out of range for length {length}")
        self.index = index
        self.length = length


class InvalidOperationError(AlgyError, ValueError):
    """operation not allowed by the structure's configuration"""
    pass


class DuplicatePolicy(Enum):
    """how a binary search tree treats a value that is already present"""
    REJECT = 'reject'  # insert returns False
    RIGHT = 'right'    # duplicate goes into the right subtree
    RAISE = 'raise'    # insert raises InvalidOperationError


# --- nodes ---

class ListNode(Generic[T]):
    """a link in a singly linked chain. owned by exactly one list."""
    __slots__ = ('value', 'next')

    def __init__(self, value: T, next: Optional['ListNode[T]'] = None):
        self.value = value
        self.next = next

    def __repr__(self) -> str:
        return f"ListNode(value={self.value!r})"


class BSTNode(Generic[T]):
    """a binary search tree node owning its left and right subtrees"""
    __slots__ = ('value', 'left', 'right')

    def __init__(self, value: T):
        self.value = value
        self.left: Optional['BSTNode[T]'] = None
        self.right: Optional['BSTNode[T]'] = None

    @property
    def is_leaf(self) -> bool: return self.left is None and self.right is None

    def __repr__(self) -> str:
        return f"BSTNode(value={self.value!r}, leaf={self.is_leaf})"


# --- lazy producers ---

class Traversal(Generic[T]):
    """
    finite, non-restartable producer wrapping a generator.
    values are computed as they are pulled, so memory stays proportional to the
    traversal frontier. once exhausted it stays exhausted.
    """

    def __init__(self, source: Iterator[T]):
        from .extensions.terminal import TerminalAccessor
        self._source = source
        self._is_exhausted = False
        self.to = TerminalAccessor(self)

    @property
    def is_exhausted(self) -> bool: return self._is_exhausted

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        try:
            return next(self._source)
        except StopIteration:
            self._is_exhausted = True
            raise

    def take(self, count: int) -> List[T]:
        """pull at most 'count' further values"""
        result = []
        if count <= 0: return result
        for item in self:
            result.append(item)
            if len(result) >= count:
                break
        return result

    def __repr__(self) -> str:
        return f"Traversal(exhausted={self._is_exhausted})"
