r"""
'       _    _
'      / \  | | __ _ _   _
'     / _ \ | |/ _` | | | |
'    / ___ \| | (_| | |_| |
'   /_/   \_\_|\__, |\__, |
'              |___/ |___/
"""

# expose the containers
from .sequence import Sequence
from .linked_list import LinkedList
from .adapters import Stack, Queue, next_greater_indices, next_greater_values
from .bst import BinarySearchTree
from .heap import BinaryHeap, MinHeap, PriorityQueue
from .graph import Graph

# expose the algorithms
from .sorting import merge_sort, merge_sort_bottom_up, is_sorted
from .memo import MemoCache, memoize, fib_memo, fib_tabulation, fib_naive

# expose the factory functions
from .factories import (
    sequence_of,
    linked_list_of,
    stack_of,
    queue_of,
    bst_of,
    heap_of,
    graph_from_edges
)

# expose supporting types and errors
from .types import (
    AlgyError,
    UnderflowError,
    IndexOutOfRangeError,
    InvalidOperationError,
    DuplicatePolicy,
    Traversal,
    ListNode,
    BSTNode
)

# define what `import *` does
__all__ = [
    "Sequence",
    "LinkedList",
    "Stack",
    "Queue",
    "next_greater_indices",
    "next_greater_values",
    "BinarySearchTree",
    "BinaryHeap",
    "MinHeap",
    "PriorityQueue",
    "Graph",
    "merge_sort",
    "merge_sort_bottom_up",
    "is_sorted",
    "MemoCache",
    "memoize",
    "fib_memo",
    "fib_tabulation",
    "fib_naive",
    "sequence_of",
    "linked_list_of",
    "stack_of",
    "queue_of",
    "bst_of",
    "heap_of",
    "graph_from_edges",
    "AlgyError",
    "UnderflowError",
    "IndexOutOfRangeError",
    "InvalidOperationError",
    "DuplicatePolicy",
    "Traversal",
    "ListNode",
    "BSTNode"
]
