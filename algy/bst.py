from __future__ import annotations

import logging
from collections import deque
from .types import *
from .base import _BaseContainer

logger = logging.getLogger(__name__)


class BinarySearchTree(_BaseContainer[T]):
    """
    unbalanced binary search tree. every operation is o(h), where h ranges from
    log n for random insertion order to n for sorted insertion order.
    no rebalancing is ever performed.

    all walks are iterative, using an explicit stack or queue, so a degenerate
    tree never exhausts the interpreter's call stack.
    """

    def __init__(self, duplicates: DuplicatePolicy = DuplicatePolicy.REJECT):
        super().__init__()
        self._root: Optional[BSTNode[T]] = None
        self._size = 0
        self._duplicates = duplicates

    @property
    def duplicates(self) -> DuplicatePolicy: return self._duplicates

    # --- mutation ---

    def insert(self, value: T) -> bool:
        """
        descend by comparison and attach a new leaf at the empty slot.
        returns False when the value is already present under DuplicatePolicy.REJECT.
        """
        if self._root is None:
            self._root = BSTNode(value)
            self._size = 1
            return True

        current = self._root
        while True:
            if value < current.value:
                if current.left is None:
                    current.left = BSTNode(value)
                    break
                current = current.left
            elif value > current.value or self._duplicates is DuplicatePolicy.RIGHT:
                if current.right is None:
                    current.right = BSTNode(value)
                    break
                current = current.right
            elif self._duplicates is DuplicatePolicy.RAISE:
                raise InvalidOperationError(f"duplicate value {value!r} rejected")
            else:
                logger.debug(f"duplicate value {value!r} rejected")
                return False

        self._size += 1
        return True

    def extend(self, values: Iterable[T]) -> int:
        """insert each value in order, returning how many were accepted"""
        return sum(1 for value in values if self.insert(value))

    def remove(self, value: T) -> bool:
        """
        unlink the node holding value. a node with two children takes the value of
        its in-order successor, which is then unlinked instead.
        """
        parent = None
        current = self._root
        while current is not None and current.value != value:
            parent = current
            current = current.left if value < current.value else current.right
        if current is None:
            return False

        if current.left is not None and current.right is not None:
            successor_parent = current
            successor = current.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            current.value = successor.value
            parent, current = successor_parent, successor

        child = current.left if current.left is not None else current.right
        if parent is None:
            self._root = child
        elif parent.left is current:
            parent.left = child
        else:
            parent.right = child

        self._size -= 1
        return True

    def clear(self) -> None:
        self._root = None
        self._size = 0

    # --- queries ---

    def _find(self, value: T) -> Optional[BSTNode[T]]:
        current = self._root
        while current is not None:
            if value < current.value:
                current = current.left
            elif value > current.value:
                current = current.right
            else:
                return current
        return None

    def search(self, value: T) -> Optional[T]:
        """the stored value equal to value, or None"""
        node = self._find(value)
        return node.value if node is not None else None

    def contains(self, value: T) -> bool:
        return self._find(value) is not None

    def min(self) -> T:
        if self._root is None: raise UnderflowError("tree contains no elements")
        current = self._root
        while current.left is not None:
            current = current.left
        return current.value

    def max(self) -> T:
        if self._root is None: raise UnderflowError("tree contains no elements")
        current = self._root
        while current.right is not None:
            current = current.right
        return current.value

    def height(self) -> int:
        """edges on the longest root-to-leaf path; -1 for an empty tree"""
        if self._root is None:
            return -1
        height = -1
        level = [self._root]
        while level:
            height += 1
            level = [child for node in level for child in (node.left, node.right) if child is not None]
        return height

    # --- traversals ---

    def in_order(self) -> Traversal[T]:
        """ascending values, produced lazily with a stack of pending ancestors"""
        def walk():
            pending = []
            current = self._root
            while pending or current is not None:
                while current is not None:
                    pending.append(current)
                    current = current.left
                current = pending.pop()
                yield current.value
                current = current.right

        return Traversal(walk())

    def pre_order(self) -> Traversal[T]:
        """node, then left subtree, then right subtree"""
        def walk():
            pending = [self._root] if self._root is not None else []
            while pending:
                node = pending.pop()
                yield node.value
                # right first so left is popped first
                if node.right is not None: pending.append(node.right)
                if node.left is not None: pending.append(node.left)

        return Traversal(walk())

    def post_order(self) -> Traversal[T]:
        """left subtree, right subtree, then node"""
        def walk():
            pending = []
            last_yielded = None
            current = self._root
            while pending or current is not None:
                if current is not None:
                    pending.append(current)
                    current = current.left
                    continue
                top = pending[-1]
                if top.right is not None and top.right is not last_yielded:
                    current = top.right
                else:
                    pending.pop()
                    yield top.value
                    last_yielded = top

        return Traversal(walk())

    def level_order(self) -> Traversal[T]:
        """breadth-first, left to right within each depth"""
        def walk():
            frontier = deque([self._root] if self._root is not None else [])
            while frontier:
                node = frontier.popleft()
                yield node.value
                if node.left is not None: frontier.append(node.left)
                if node.right is not None: frontier.append(node.right)

        return Traversal(walk())

    # --- python protocol ---

    def __contains__(self, value: object) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[T]:
        return self.in_order()

    def __len__(self) -> int:
        return self._size
