import heapq
from collections.abc import Hashable

from campus_nav.app.protocols import Frontier


class SortedFrontier(Frontier):
    """
    Ascending list of (element, priority) with linear insertion.
    A new entry goes before the first strictly greater priority, so equal
    priorities are served in insertion order. O(n) enqueue is fine at scene
    scale (tens to low hundreds of nodes).
    """

    def __init__(self):
        self._items: list[tuple[Hashable, float]] = []

    def enqueue(self, element: Hashable, priority: float) -> None:
        for i, (_, p) in enumerate(self._items):
            if p > priority:
                self._items.insert(i, (element, priority))
                return
        self._items.append((element, priority))

    def dequeue(self) -> tuple[Hashable, float]:
        if not self._items:
            raise IndexError("dequeue from an empty frontier")
        return self._items.pop(0)

    def peek(self) -> tuple[Hashable, float]:
        if not self._items:
            raise IndexError("peek into an empty frontier")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class HeapFrontier(Frontier):
    """Binary heap with an insertion counter as tie-break (same order as SortedFrontier)."""

    def __init__(self):
        self._q: list[tuple[float, int, Hashable]] = []
        self._seq = 0

    def enqueue(self, element: Hashable, priority: float) -> None:
        self._seq += 1
        heapq.heappush(self._q, (priority, self._seq, element))

    def dequeue(self) -> tuple[Hashable, float]:
        if not self._q:
            raise IndexError("dequeue from an empty frontier")
        priority, _, element = heapq.heappop(self._q)
        return element, priority

    def peek(self) -> tuple[Hashable, float]:
        if not self._q:
            raise IndexError("peek into an empty frontier")
        priority, _, element = self._q[0]
        return element, priority

    def is_empty(self) -> bool:
        return not self._q

    def __len__(self) -> int:
        return len(self._q)
