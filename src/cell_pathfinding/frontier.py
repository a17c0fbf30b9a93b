from __future__ import annotations

import heapq
from itertools import count
from typing import Generic, Iterator, List, Optional, Tuple, TypeVar

T = TypeVar("T")


class PriorityFrontier(Generic[T]):
    """
    Unbounded min-priority work queue backed by a binary heap.

    The same item may be enqueued several times at different priorities;
    stale entries are simply popped later (no decrease-key). Equal
    priorities come out in insertion order.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[float, int, T]] = []
        self._counter: Iterator[int] = count()

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def enqueue(self, item: T, priority: float) -> None:
        heapq.heappush(self._heap, (priority, next(self._counter), item))

    def dequeue(self) -> T:
        if not self._heap:
            raise IndexError("dequeue from an empty frontier")
        _, _, item = heapq.heappop(self._heap)
        return item

    def try_dequeue(self) -> Tuple[bool, Optional[T]]:
        if not self._heap:
            return False, None
        return True, self.dequeue()
