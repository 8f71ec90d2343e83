from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *
from .extensions.terminal import TerminalAccessor


# --- abstract base class ---

class IContainer(ABC, Generic[T]):
    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        """iterate the stored values in the container's natural order"""
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass


# --- base container implementation ---

class _BaseContainer(IContainer[T]):
    """shared behaviour for every sized container: emptiness, export accessor, repr"""

    def __init__(self):
        self.to = TerminalAccessor(self)

    def is_empty(self) -> bool:
        return len(self) == 0

    def __repr__(self) -> str:
        preview = []
        for i, item in enumerate(self):
            if i == 10:
                preview.append('...')
                break
            preview.append(repr(item))
        return f"{type(self).__name__}([{', '.join(preview)}])"
