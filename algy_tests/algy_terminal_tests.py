import numpy as np
import pandas as pd
import suite
from algy import (
    sequence_of, linked_list_of, stack_of, queue_of, bst_of, heap_of, graph_from_edges,
    Sequence, LinkedList, Stack, Queue, BinarySearchTree, BinaryHeap, Graph
)

test = suite.test
assert_that = suite.assert_that


# --- exports ---

@test("to.array converts containers to numpy arrays")
def test_to_array():
    array = sequence_of([1, 2, 3]).to.array()
    assert_that(isinstance(array, np.ndarray), "numpy array returned")
    assert_that(array.tolist() == [1, 2, 3], f"got {array.tolist()}")
    floats = bst_of([2, 1]).to.array(dtype=float)
    assert_that(floats.dtype == np.float64 and floats.tolist() == [1.0, 2.0], "dtype honoured")


@test("to.pandas converts containers to a named series")
def test_to_pandas():
    series = linked_list_of([4, 5]).to.pandas(name='values')
    assert_that(isinstance(series, pd.Series), "pandas series returned")
    assert_that(series.name == 'values' and series.tolist() == [4, 5], f"got {series}")


@test("to.set, to.tuple and to.count")
def test_to_misc():
    stack = stack_of([1, 2, 2, 3])
    assert_that(stack.to.set() == {1, 2, 3}, "set export")
    assert_that(stack.to.tuple() == (3, 2, 2, 1), "tuple export in iteration order")
    assert_that(stack.to.count() == 4, "count all")
    assert_that(stack.to.count(lambda x: x == 2) == 2, "count with predicate")


@test("exports on a traversal consume it")
def test_traversal_export_consumes():
    traversal = bst_of([3, 1, 2]).in_order()
    assert_that(traversal.to.count() == 3, "count drains the traversal")
    assert_that(traversal.to.list() == [], "nothing left afterwards")


# --- factories ---

@test("factories build the matching container types")
def test_factory_types():
    pairs = [
        (sequence_of([1]), Sequence),
        (linked_list_of([1]), LinkedList),
        (stack_of([1]), Stack),
        (queue_of([1]), Queue),
        (bst_of([1]), BinarySearchTree),
        (heap_of([1]), BinaryHeap),
        (graph_from_edges([(1, 2)]), Graph),
    ]
    for built, expected in pairs:
        assert_that(isinstance(built, expected), f"{built!r} is not a {expected.__name__}")


@test("factories preserve the documented orders")
def test_factory_orders():
    assert_that(queue_of([1, 2, 3]).dequeue() == 1, "queue front is the first value")
    assert_that(stack_of([1, 2, 3]).pop() == 3, "stack top is the last value")
    assert_that(linked_list_of('abc').to.list() == ['a', 'b', 'c'], "linked list keeps order")
    assert_that(heap_of([1, 9, 4]).peek() == 9, "heap top is the maximum")


@test("empty containers report emptiness")
def test_empty_containers():
    for container in (Sequence(), LinkedList(), Stack(), Queue(), BinarySearchTree(), BinaryHeap(), Graph()):
        assert_that(container.is_empty(), f"{type(container).__name__} should start empty")
        assert_that(not container, f"{type(container).__name__} should be falsy when empty")
        assert_that(container.to.list() == [], "empty export")


@test("repr previews at most ten values")
def test_repr_preview():
    text = repr(sequence_of(range(20)))
    assert_that(text.startswith("Sequence([0, 1,") and text.endswith("9, ...])"), text)


if __name__ == "__main__":
    suite.run(title="algy export and factory test suite")
