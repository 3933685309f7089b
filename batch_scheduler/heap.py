from __future__ import annotations

import heapq
import itertools
from typing import Any, Generic, List, Tuple, TypeVar

T = TypeVar("T")


class MinHeap(Generic[T]):
    """
    Binary min-heap of items ordered by an arbitrary comparable key.

    Items with equal keys come out in the order they were pushed. The items
    themselves are never compared, so they need not be orderable.
    """

    def __init__(self) -> None:
        self._entries: List[Tuple[Any, int, T]] = []
        self._counter = itertools.count()

    def push(self, key: Any, item: T) -> None:
        heapq.heappush(self._entries, (key, next(self._counter), item))

    def pop(self) -> T:
        if not self._entries:
            raise IndexError("pop from empty heap")
        _, _, item = heapq.heappop(self._entries)
        return item

    def peek_key(self) -> Any:
        if not self._entries:
            raise IndexError("peek at empty heap")
        return self._entries[0][0]

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)
