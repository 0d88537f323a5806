from __future__ import annotations
from typing import Generic, Iterable, List, Optional, TypeVar

from .ordering import Predicate, greater_than

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """A binary max-heap ordered by a pluggable priority predicate.

    `higher_priority(a, b)` returns True when `a` must sit above `b`. When it
    is omitted the natural `a > b` ordering is used, so elements only need to
    be orderable in that case; any element type works with an explicit
    predicate.
    """

    __slots__ = ("_heap", "_higher_priority")

    def __init__(
        self,
        it: Optional[Iterable[T]] = None,
        higher_priority: Optional[Predicate[T]] = None,
    ) -> None:
        if higher_priority is None:
            higher_priority = greater_than
        elif not callable(higher_priority):
            raise TypeError("higher_priority must be callable")
        self._higher_priority = higher_priority
        self._heap: List[T] = []
        if it is not None:
            self._heap = list(it)
            self._build()  # Bulk build in O(n) instead of repeated adds

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _build(self) -> None:
        """Restore the heap property over the whole array, leaves first."""
        for i in reversed(range(len(self._heap) // 2)):
            self._heapify(i)

    def _percolate_up(self, child: int) -> None:
        heap = self._heap
        higher = self._higher_priority
        item = heap[child]
        slot = child
        while slot > 0:
            parent = (slot - 1) // 2
            if not higher(item, heap[parent]):
                break
            slot = parent
        # All comparisons are done before the array is touched.
        while child > slot:
            parent = (child - 1) // 2
            heap[child] = heap[parent]
            child = parent
        heap[slot] = item

    def _heapify(self, parent: int) -> None:
        """Percolate the element at `parent` down until no child outranks it.

        A child that ties with its parent is still swapped up; equal-priority
        elements are therefore not kept in insertion order.
        """
        heap = self._heap
        higher = self._higher_priority
        n = len(heap)
        while True:
            left = 2 * parent + 1
            if left >= n:
                break
            right = left + 1
            preferred = left
            if right < n and higher(heap[right], heap[left]):
                preferred = right
            if higher(heap[parent], heap[preferred]):
                break
            heap[parent], heap[preferred] = heap[preferred], heap[parent]
            parent = preferred

    # -----------------------------
    # Public API
    # -----------------------------
    @property
    def count(self) -> int:
        """Number of elements in the queue."""
        return len(self._heap)

    @property
    def is_empty(self) -> bool:
        return not self._heap

    def add(self, element: T) -> None:
        """Add `element` to the queue (O(log n)).

        If the predicate raises, the exception propagates and the queue is
        left as it was before the call.
        """
        heap = self._heap
        heap.append(element)
        try:
            self._percolate_up(len(heap) - 1)
        except Exception:
            heap.pop()
            raise

    def peek(self) -> Optional[T]:
        """Return the highest-priority element without removing it (O(1)).

        Returns None when the queue is empty.
        """
        return self._heap[0] if self._heap else None

    def poll(self) -> Optional[T]:
        """Remove and return the highest-priority element (O(log n)).

        Returns None when the queue is empty. If the predicate raises while
        the new root is percolated down, the polled element is already gone.
        """
        heap = self._heap
        if not heap:
            return None
        top = heap[0]
        heap[0], heap[-1] = heap[-1], heap[0]
        heap.pop()
        self._heapify(0)
        return top

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:  # pragma: no cover - trivial
        return bool(self._heap)

    def to_list(self) -> List[T]:
        # Copy of the backing array in heap order, not sorted order
        return list(self._heap)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"PriorityQueue({self._heap!r})"
