"""
Priority queue with arbitrary removal and both minimum and maximum dequeue.

Items are ordered by priority (0.0 to 1.0) and then by the item's own
ordering, so equal priorities dequeue deterministically. Two heaps (one per
direction) hold the entries; an item -> (priority, entry id) map answers
membership and priority lookups in O(1). Removed or replaced entries stay in
the heaps until they surface and are discarded.
"""

from __future__ import annotations

import heapq
import itertools
from typing import Generic, TypeVar

# Items must be hashable and support "<" (str, int, tuples of those)
T = TypeVar("T")

MIN_PRIORITY = 0.0
MAX_PRIORITY = 1.0

# Heaps are rebuilt when stale entries outnumber live ones by this factor
_COMPACT_RATIO = 2
_COMPACT_MIN_SIZE = 64


class _Descending:
    """Wraps an item so that heapq orders it largest first."""

    __slots__ = ("item",)

    def __init__(self, item) -> None:
        self.item = item

    def __lt__(self, other: _Descending) -> bool:
        return other.item < self.item

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _Descending) and self.item == other.item


class PriorityQueue(Generic[T]):
    """
    Priority queue used by the A* and Dijkstra searches.

    Lower priority values dequeue first from dequeue_minimum() and last from
    dequeue_maximum(). Each item can be enqueued at most once at a time.
    """

    def __init__(self) -> None:
        self._entries: dict[T, tuple[float, int]] = {}
        self._min_heap: list[tuple[float, T, int]] = []
        self._max_heap: list[tuple[float, _Descending, int]] = []
        self._counter = itertools.count()

    @property
    def count(self) -> int:
        """Number of items in the queue."""
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def contains(self, item: T) -> bool:
        return item in self._entries

    def __contains__(self, item: object) -> bool:
        return item in self._entries

    def get_priority(self, item: T) -> float:
        """
        Return the priority of an item in the queue.

        Raises:
            ValueError: If the item is not in the queue
        """
        self._check_item_exists(item)
        return self._entries[item][0]

    def enqueue(self, item: T, priority: float) -> None:
        """
        Add an item with the given priority.

        Raises:
            ValueError: If the item is already queued or priority is outside [0.0, 1.0]
        """
        if item in self._entries:
            raise ValueError(f"The item '{item}' already exists in the queue.")
        if not MIN_PRIORITY <= priority <= MAX_PRIORITY:
            raise ValueError(
                f"Parameter 'priority' must be between {MIN_PRIORITY} and {MAX_PRIORITY} "
                f"inclusive, got {priority}."
            )

        entry_id = next(self._counter)
        self._entries[item] = (priority, entry_id)
        heapq.heappush(self._min_heap, (priority, item, entry_id))
        heapq.heappush(self._max_heap, (-priority, _Descending(item), entry_id))

    def dequeue_minimum(self) -> T:
        """
        Remove and return the item with the lowest priority.

        Raises:
            IndexError: If the queue is empty
        """
        self._check_not_empty()
        while True:
            _priority, item, entry_id = heapq.heappop(self._min_heap)
            if self._is_live(item, entry_id):
                del self._entries[item]
                self._maybe_compact()
                return item

    def dequeue_maximum(self) -> T:
        """
        Remove and return the item with the highest priority.

        Raises:
            IndexError: If the queue is empty
        """
        self._check_not_empty()
        while True:
            _priority, wrapped, entry_id = heapq.heappop(self._max_heap)
            if self._is_live(wrapped.item, entry_id):
                del self._entries[wrapped.item]
                self._maybe_compact()
                return wrapped.item

    def remove(self, item: T) -> None:
        """
        Remove an item from the queue.

        Raises:
            ValueError: If the item is not in the queue
        """
        self._check_item_exists(item)
        del self._entries[item]
        self._maybe_compact()

    def _is_live(self, item: T, entry_id: int) -> bool:
        entry = self._entries.get(item)
        return entry is not None and entry[1] == entry_id

    def _maybe_compact(self) -> None:
        """Rebuild both heaps from live entries once stale ones dominate."""
        heap_size = max(len(self._min_heap), len(self._max_heap))
        if heap_size < _COMPACT_MIN_SIZE or heap_size <= _COMPACT_RATIO * len(self._entries):
            return

        self._min_heap = [
            (priority, item, entry_id) for item, (priority, entry_id) in self._entries.items()
        ]
        self._max_heap = [
            (-priority, _Descending(item), entry_id)
            for item, (priority, entry_id) in self._entries.items()
        ]
        heapq.heapify(self._min_heap)
        heapq.heapify(self._max_heap)

    def _check_item_exists(self, item: T) -> None:
        if item not in self._entries:
            raise ValueError(f"The item '{item}' does not exist in the queue.")

    def _check_not_empty(self) -> None:
        if not self._entries:
            raise IndexError("The queue is empty.")

    def __repr__(self) -> str:
        return f"PriorityQueue(count={len(self._entries)})"
