from .types import *
from .sequence import Sequence
from .linked_list import LinkedList
from .adapters import Stack, Queue
from .bst import BinarySearchTree
from .heap import BinaryHeap, MinHeap
from .graph import Graph, Vertex


def sequence_of(values: Iterable[T]) -> Sequence[T]:
    """create sequence from iterable"""
    sequence = Sequence()
    sequence.extend(values)
    return sequence

def linked_list_of(values: Iterable[T]) -> LinkedList[T]:
    """create linked list preserving iteration order"""
    chain = LinkedList()
    for value in values:
        chain.add_last(value)
    return chain

def stack_of(values: Iterable[T]) -> Stack[T]:
    """create stack; the last value ends up on top"""
    stack = Stack()
    for value in values:
        stack.push(value)
    return stack

def queue_of(values: Iterable[T]) -> Queue[T]:
    """create queue; the first value is dequeued first"""
    queue = Queue()
    for value in values:
        queue.enqueue(value)
    return queue

def bst_of(values: Iterable[T], duplicates: DuplicatePolicy = DuplicatePolicy.REJECT) -> BinarySearchTree[T]:
    """create search tree by inserting values in order"""
    tree = BinarySearchTree(duplicates=duplicates)
    tree.extend(values)
    return tree

def heap_of(values: Iterable[T], key: Optional[KeySelector[T, Any]] = None,
            smallest_first: bool = False) -> BinaryHeap[T]:
    """create heap in o(n)"""
    cls = MinHeap if smallest_first else BinaryHeap
    return cls.from_iterable(values, key=key)

def graph_from_edges(edges: Iterable[Tuple[Vertex, Vertex]], directed: bool = False) -> Graph:
    """create graph by adding edges in order"""
    graph = Graph(directed=directed)
    for u, v in edges:
        graph.add_edge(u, v)
    return graph
