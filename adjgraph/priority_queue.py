"""Binary-heap priority queues used by the weighted processors."""

from __future__ import annotations

import heapq
from itertools import count
from typing import Generic, NamedTuple, TypeVar

from adjgraph.errors import EmptyQueueError

V = TypeVar("V")


class Entry(NamedTuple, Generic[V]):
    priority: float
    value: V


class _HeapQueue(Generic[V]):
    """heapq list of (key, sequence, value) triples.

    Duplicate priorities and stale entries are allowed: nothing is removed
    except by popping. Equal priorities pop in insertion order and values
    never need to be comparable.
    """

    _sign = 1

    def __init__(self) -> None:
        self._heap: list[tuple[float, int, V]] = []
        self._counter = count()

    def insert(self, priority: float, value: V) -> None:
        heapq.heappush(self._heap, (self._sign * priority, next(self._counter), value))

    def peek(self) -> Entry[V]:
        if not self._heap:
            raise EmptyQueueError("Cannot peek at an empty priority queue")
        key, _, value = self._heap[0]
        return Entry(self._sign * key, value)

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)

    def _pop(self) -> Entry[V]:
        if not self._heap:
            raise EmptyQueueError("Cannot delete from an empty priority queue")
        key, _, value = heapq.heappop(self._heap)
        return Entry(self._sign * key, value)


class MinPriorityQueue(_HeapQueue[V]):
    def delete_min(self) -> Entry[V]:
        """Remove and return the entry with the smallest priority."""
        return self._pop()


class MaxPriorityQueue(_HeapQueue[V]):
    _sign = -1

    def delete_max(self) -> Entry[V]:
        """Remove and return the entry with the largest priority."""
        return self._pop()
