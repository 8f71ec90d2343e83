import random
import suite
from algy import (
    BinarySearchTree, bst_of, DuplicatePolicy, InvalidOperationError, UnderflowError, Traversal
)

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


#        5
#      /   \
#     3     8
#    / \   / \
#   1   4 7   9
def build_sample_tree():
    return bst_of([5, 3, 8, 1, 4, 7, 9])


# --- insertion ---

@test("insert then in_order yields sorted values")
def test_in_order_scenario():
    tree = BinarySearchTree()
    for value in [5, 3, 8, 1, 4]:
        tree.insert(value)
    result = tree.in_order().to.list()
    assert_that(result == [1, 3, 4, 5, 8], f"expected [1, 3, 4, 5, 8], got {result}")


@test("duplicates are rejected by default")
def test_duplicates_rejected():
    tree = BinarySearchTree()
    assert_that(tree.insert(2), "first insert succeeds")
    assert_that(not tree.insert(2), "duplicate insert reports False")
    assert_that(len(tree) == 1, "duplicate not stored")
    assert_that(tree.duplicates is DuplicatePolicy.REJECT, "reject is the default policy")


@test("extend counts accepted values")
def test_extend_counts():
    tree = BinarySearchTree()
    accepted = tree.extend([3, 1, 3, 2, 1])
    assert_that(accepted == 3, f"expected 3 accepted, got {accepted}")
    assert_that(tree.to.list() == [1, 2, 3], f"got {tree.to.list()}")


@test("raise policy turns duplicates into InvalidOperationError")
def test_duplicates_raise():
    tree = bst_of([1, 2], duplicates=DuplicatePolicy.RAISE)
    assert_raises(InvalidOperationError, lambda: tree.insert(2))
    assert_raises(ValueError, lambda: tree.insert(1), "InvalidOperationError is a ValueError")
    assert_that(len(tree) == 2, "nothing stored on failure")


@test("right policy keeps duplicates in the right subtree")
def test_duplicates_right():
    tree = bst_of([5, 3, 5, 5, 7], duplicates=DuplicatePolicy.RIGHT)
    assert_that(len(tree) == 5, "every value stored")
    assert_that(tree.to.list() == [3, 5, 5, 5, 7], f"got {tree.to.list()}")
    assert_that(tree.remove(5) and tree.to.list() == [3, 5, 5, 7], "remove takes out one copy")


@test("random insertion orders always produce the sorted distinct set")
def test_in_order_property():
    rng = random.Random(42)
    for _ in range(30):
        values = [rng.randint(-50, 50) for _ in range(rng.randint(0, 60))]
        tree = bst_of(values)
        result = tree.in_order().to.list()
        assert_that(result == sorted(set(values)), f"in_order of {values} gave {result}")
        assert_that(len(tree) == len(set(values)), "size matches distinct count")


# --- search ---

@test("search and contains report hits and misses")
def test_search():
    tree = build_sample_tree()
    assert_that(tree.search(7) == 7, "search returns the stored value")
    assert_that(tree.search(6) is None, "miss returns None")
    assert_that(tree.contains(1) and 9 in tree, "contains and in")
    assert_that(not tree.contains(10), "absent value")
    assert_that(not BinarySearchTree().contains(1), "empty tree contains nothing")


@test("min, max and height")
def test_min_max_height():
    tree = build_sample_tree()
    assert_that(tree.min() == 1 and tree.max() == 9, "extremes")
    assert_that(tree.height() == 2, f"expected height 2, got {tree.height()}")
    assert_that(BinarySearchTree().height() == -1, "empty height is -1")
    assert_that(bst_of([1]).height() == 0, "single node height is 0")
    assert_raises(UnderflowError, BinarySearchTree().min)
    assert_raises(UnderflowError, BinarySearchTree().max)


@test("sorted insertion degenerates without rebalancing")
def test_degenerate_tree():
    tree = bst_of(range(2000))
    assert_that(tree.height() == 1999, f"expected a chain of height 1999, got {tree.height()}")
    result = tree.in_order().to.list()
    assert_that(result == list(range(2000)), "iterative traversal survives a deep chain")
    assert_that(tree.contains(1999), "deep search works")


# --- traversals ---

@test("pre, post and level order on the sample tree")
def test_other_traversals():
    tree = build_sample_tree()
    pre = tree.pre_order().to.list()
    post = tree.post_order().to.list()
    level = tree.level_order().to.list()
    assert_that(pre == [5, 3, 1, 4, 8, 7, 9], f"pre order got {pre}")
    assert_that(post == [1, 4, 3, 7, 9, 8, 5], f"post order got {post}")
    assert_that(level == [5, 3, 8, 1, 4, 7, 9], f"level order got {level}")


@test("traversals of an empty tree are empty")
def test_empty_traversals():
    tree = BinarySearchTree()
    for traversal in (tree.in_order(), tree.pre_order(), tree.post_order(), tree.level_order()):
        assert_that(traversal.to.list() == [], "empty traversal")


@test("in_order is lazy and not restartable")
def test_in_order_lazy():
    tree = build_sample_tree()
    traversal = tree.in_order()
    assert_that(isinstance(traversal, Traversal), "returns a Traversal")
    assert_that(traversal.take(2) == [1, 3], "take pulls the first values")
    assert_that(next(traversal) == 4, "next continues where take stopped")
    assert_that(traversal.to.list() == [5, 7, 8, 9], "export drains the remainder")
    assert_that(traversal.is_exhausted, "traversal reports exhaustion")
    assert_that(list(traversal) == [], "exhausted traversal stays empty")
    assert_that(traversal.take(0) == [], "take(0) pulls nothing")


@test("iterating a tree is in order")
def test_iter_in_order():
    assert_that(list(bst_of([2, 1, 3])) == [1, 2, 3], "iter uses in_order")


# --- removal ---

@test("remove handles leaf, one-child and two-child nodes")
def test_remove_cases():
    tree = build_sample_tree()
    assert_that(tree.remove(1), "leaf removed")
    assert_that(tree.to.list() == [3, 4, 5, 7, 8, 9], f"got {tree.to.list()}")
    assert_that(tree.remove(3), "one-child node removed")
    assert_that(tree.to.list() == [4, 5, 7, 8, 9], f"got {tree.to.list()}")
    assert_that(tree.remove(8), "two-child node removed")
    assert_that(tree.to.list() == [4, 5, 7, 9], f"got {tree.to.list()}")
    assert_that(tree.remove(5), "root removed")
    assert_that(tree.to.list() == [4, 7, 9], f"got {tree.to.list()}")
    assert_that(not tree.remove(42), "absent value reports False")
    assert_that(len(tree) == 3, "size tracked")


@test("removing every value in random order keeps the tree ordered")
def test_remove_property():
    rng = random.Random(7)
    values = list(range(100))
    rng.shuffle(values)
    tree = bst_of(values)
    remaining = set(values)
    removal_order = values[:]
    rng.shuffle(removal_order)
    for value in removal_order:
        assert_that(tree.remove(value), f"{value} should be removable")
        remaining.discard(value)
        assert_that(tree.to.list() == sorted(remaining), f"order broken after removing {value}")
    assert_that(tree.is_empty(), "tree empty at the end")


@test("clear drops every node")
def test_clear():
    tree = build_sample_tree()
    tree.clear()
    assert_that(len(tree) == 0 and tree.to.list() == [], "cleared")
    assert_that(tree.insert(1), "reusable after clear")


if __name__ == "__main__":
    suite.run(title="algy binary search tree test suite")
