"""
frontier.py — Frontier Disciplines
===================================
The only thing that really differs between BFS, DFS, Dijkstra and A* is
which discovered node gets expanded next.  Each class here is one answer
to that question; the shared search driver (search.py) does the rest.

    FifoFrontier      → BFS       (collections.deque)
    LifoFrontier      → DFS       (plain list used as a stack)
    PriorityFrontier  → Dijkstra / A*   (heapq, ordered by an injected key)

PriorityFrontier breaks ties by insertion order: heap entries are
(key, sequence, item) so two items with the same key come out in the
order they were pushed, and the QueueItem itself is never compared.
"""

import heapq
import itertools
from collections import deque
from typing import Callable, Deque, Iterator, List, Tuple

from algorithms.step import QueueItem


class Frontier:
    """Container of QueueItems waiting to be expanded."""

    def push(self, item: QueueItem) -> None:
        raise NotImplementedError

    def pop(self) -> QueueItem:
        raise NotImplementedError

    def items(self) -> Iterator[QueueItem]:
        """Remaining items in the order pop() would return them."""
        raise NotImplementedError

    def __len__(self) -> int:
        raise NotImplementedError

    def __bool__(self) -> bool:
        return len(self) > 0


class FifoFrontier(Frontier):
    def __init__(self):
        self._queue: Deque[QueueItem] = deque()

    def push(self, item: QueueItem) -> None:
        self._queue.append(item)

    def pop(self) -> QueueItem:
        return self._queue.popleft()

    def items(self) -> Iterator[QueueItem]:
        return iter(self._queue)

    def __len__(self) -> int:
        return len(self._queue)


class LifoFrontier(Frontier):
    def __init__(self):
        self._stack: List[QueueItem] = []

    def push(self, item: QueueItem) -> None:
        self._stack.append(item)

    def pop(self) -> QueueItem:
        return self._stack.pop()

    def items(self) -> Iterator[QueueItem]:
        return reversed(self._stack)

    def __len__(self) -> int:
        return len(self._stack)


class PriorityFrontier(Frontier):
    """
    Min-priority queue.  `key` maps an item to its ordering value; the
    default reads `item.priority`, which each algorithm fills in when it
    builds the item.
    """

    def __init__(self, key: Callable[[QueueItem], float] = lambda item: item.priority):
        self._key = key
        self._heap: List[Tuple[float, int, QueueItem]] = []
        self._seq = itertools.count()

    def push(self, item: QueueItem) -> None:
        heapq.heappush(self._heap, (self._key(item), next(self._seq), item))

    def pop(self) -> QueueItem:
        return heapq.heappop(self._heap)[2]

    def items(self) -> Iterator[QueueItem]:
        return (entry[2] for entry in sorted(self._heap, key=lambda e: e[:2]))

    def __len__(self) -> int:
        return len(self._heap)
