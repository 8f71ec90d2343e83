from __future__ import annotations

import logging
from functools import wraps
from .types import *

logger = logging.getLogger(__name__)

_MISSING = object()


class MemoCache(Generic[K, V]):
    """
    results of sub-problems keyed by their inputs. grows monotonically and never
    evicts; its lifetime is whatever owns it, typically one top-level call.
    """

    def __init__(self):
        self._store: Dict[K, V] = {}
        self.hits = 0
        self.misses = 0

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """cached value or default. counts as a hit or a miss."""
        value = self._store.get(key, _MISSING)
        if value is _MISSING:
            self.misses += 1
            return default
        self.hits += 1
        return value

    def put(self, key: K, value: V) -> V:
        self._store[key] = value
        return value

    def get_or_compute(self, key: K, factory: Callable[[], V]) -> V:
        """cached value, or factory() stored under key on a miss"""
        value = self.get(key, _MISSING)
        if value is _MISSING:
            value = self.put(key, factory())
        return value

    def clear(self) -> None:
        self._store.clear()
        self.hits = self.misses = 0

    def __contains__(self, key: object) -> bool:
        return key in self._store

    def __len__(self) -> int:
        return len(self._store)

    def __repr__(self) -> str:
        return f"MemoCache(size={len(self._store)}, hits={self.hits}, misses={self.misses})"


def memoize(func: Callable[..., V]) -> Callable[..., V]:
    """
    decorator caching results by positional and keyword arguments, which must be
    hashable. the cache lives as long as the decorated function and is exposed as
    func.cache; func.cache_clear() empties it.
    """
    cache: MemoCache[Tuple, V] = MemoCache()

    @wraps(func)
    def wrapper(*args, **kwargs):
        key = (args, tuple(sorted(kwargs.items()))) if kwargs else args
        return cache.get_or_compute(key, lambda: func(*args, **kwargs))

    wrapper.cache = cache
    wrapper.cache_clear = cache.clear
    return wrapper


# --- fibonacci ---

def _check_n(n: int) -> None:
    if n < 0: raise ValueError("n must be non-negative")


def fib_naive(n: int) -> int:
    """the exponential definition f(n) = f(n - 1) + f(n - 2); small n only"""
    _check_n(n)
    if n < 2:
        return n
    return fib_naive(n - 1) + fib_naive(n - 2)


def fib_memo(n: int, cache: Optional[MemoCache[int, int]] = None) -> int:
    """
    top-down fibonacci. every sub-problem is computed once, so time and space are
    o(n). without a caller-supplied cache a fresh one is scoped to this call.
    the descent keeps its pending sub-problems on an explicit stack instead of the
    call stack, so large n never hits the interpreter's recursion limit.
    """
    _check_n(n)
    memo = cache if cache is not None else MemoCache()

    def known(k: int) -> bool:
        return k < 2 or k in memo

    def value(k: int) -> int:
        return k if k < 2 else memo.get(k)

    # a key is resolved only once both of its sub-problems are cached
    pending = [n]
    while pending:
        k = pending[-1]
        if known(k):
            pending.pop()
            continue
        missing = [j for j in (k - 1, k - 2) if not known(j)]
        if missing:
            pending.extend(missing)
            continue
        pending.pop()
        memo.put(k, value(k - 1) + value(k - 2))

    result = value(n)
    logger.debug(f"fib_memo({n}): {memo!r}")
    return result


def fib_tabulation(n: int) -> int:
    """bottom-up fibonacci keeping only the last two values: o(n) time, o(1) space"""
    _check_n(n)
    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current
    return previous
