from __future__ import annotations

from .types import *


def merge_sort(values: Iterable[T], key: Optional[KeySelector[T, Any]] = None) -> List[T]:
    """
    stable top-down merge sort. returns a new list; the input is never mutated.
    o(n log n) time, o(n) auxiliary space, recursion depth log2(n).
    """
    items = list(values)
    if len(items) <= 1:
        return items

    mid = len(items) // 2
    left = merge_sort(items[:mid], key)
    right = merge_sort(items[mid:], key)
    return _merge(left, right, key)


def merge_sort_bottom_up(values: Iterable[T], key: Optional[KeySelector[T, Any]] = None) -> List[T]:
    """
    stable iterative merge sort: merges runs of width 1, 2, 4, ... until one run
    remains. same guarantees as merge_sort without any recursion.
    """
    items = list(values)
    width = 1
    while width < len(items):
        merged = []
        for start in range(0, len(items), 2 * width):
            left = items[start:start + width]
            right = items[start + width:start + 2 * width]
            merged.extend(_merge(left, right, key))
        items = merged
        width *= 2
    return items


def _merge(left: List[T], right: List[T], key: Optional[KeySelector[T, Any]]) -> List[T]:
    """merge two sorted runs. on ties the left run wins, which keeps the sort stable."""
    result = []
    i = j = 0
    while i < len(left) and j < len(right):
        lk = key(left[i]) if key is not None else left[i]
        rk = key(right[j]) if key is not None else right[j]
        # only a strictly smaller right element may overtake the left one
        if rk < lk:
            result.append(right[j])
            j += 1
        else:
            result.append(left[i])
            i += 1

    result.extend(left[i:])
    result.extend(right[j:])
    return result


def is_sorted(values: Iterable[T], key: Optional[KeySelector[T, Any]] = None) -> bool:
    """True when every element is <= its successor"""
    previous = None
    first = True
    for item in values:
        current = key(item) if key is not None else item
        if not first and current < previous:
            return False
        previous, first = current, False
    return True
