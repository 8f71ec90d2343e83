from __future__ import annotations
import numpy as np
import pandas as pd
from ..types import *


class TerminalAccessor(Generic[T]):
    """
    exports the values of a container or traversal to common python, numpy and
    pandas shapes. on a Traversal every export consumes the remaining values.
    """

    def __init__(self, source: Iterable[T]):
        self._source = source

    def list(self) -> List[T]:
        """convert to list"""
        return list(self._source)

    def tuple(self) -> Tuple[T, ...]:
        """convert to tuple"""
        return tuple(self._source)

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._source)

    def array(self, dtype: Optional[Any] = None) -> np.ndarray:
        """convert to numpy array"""
        return np.array(list(self._source), dtype=dtype)

    def pandas(self, name: Optional[str] = None) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(list(self._source), name=name)

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return sum(1 for _ in self._source)
        return sum(1 for x in self._source if predicate(x))

