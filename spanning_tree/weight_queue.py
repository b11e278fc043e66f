"""
Min-priority queue over vertices, keyed by an external weight labeling.

The queue stores vertices, not priorities. Priorities are read from the
weight labeling on every comparison, so the labeling and the heap must stay
in sync: after lowering `weights[v]` for a queued vertex, call `update(v)`
before any other queue operation.

Implemented as an indexed binary heap: the heap array plus a position
labeling recording where each vertex sits, which lets `update` find and
sift an arbitrary member in O(log n).

Complexity:
    push, pop, update - O(log n)
    top, empty, in    - O(1)

Preconditions are the caller's job and are not checked:
    - push(v): v is not queued
    - update(v): v is queued and its weight was lowered, never raised
"""

from typing import Generic

from graph.labeling import Labeling
from localtypes import W, Vertex

# Position of a vertex that is not in the heap
_ABSENT = -1


class WeightQueue(Generic[W]):
    """
    Decrease-key priority queue over the vertices of a weight labeling.

    Ties between equal weights go to the smaller vertex identifier, so the
    extraction order is deterministic.

    Example:
        >>> weights = Labeling(3, 10)
        >>> q = WeightQueue(weights)
        >>> q.push(0); q.push(1)
        >>> weights[1] = 4
        >>> q.update(1)
        >>> q.top()
        1
    """

    __slots__ = ("_weights", "_heap", "_position")

    def __init__(self, weights: Labeling[W]) -> None:
        # Shared with the caller, never copied
        self._weights = weights
        self._heap: list[Vertex] = []
        self._position: Labeling[int] = Labeling.like(weights, _ABSENT)

    @property
    def weights(self) -> Labeling[W]:
        return self._weights

    def push(self, vertex: Vertex) -> None:
        self._position[vertex] = len(self._heap)
        self._heap.append(vertex)
        self._sift_up(len(self._heap) - 1)

    def top(self) -> Vertex:
        return self._heap[0]

    def pop(self) -> None:
        heap = self._heap
        last = heap.pop()
        self._position[last] = _ABSENT
        if heap:
            removed = heap[0]
            self._position[removed] = _ABSENT
            heap[0] = last
            self._position[last] = 0
            self._sift_down(0)

    def update(self, vertex: Vertex) -> None:
        self._sift_up(self._position[vertex])

    def empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __contains__(self, vertex: Vertex) -> bool:
        return self._position[vertex] != _ABSENT

    def _precedes(self, a: Vertex, b: Vertex) -> bool:
        weight_a, weight_b = self._weights[a], self._weights[b]
        if weight_a < weight_b:
            return True
        if weight_b < weight_a:
            return False
        return a < b

    def _sift_up(self, index: int) -> None:
        heap, position = self._heap, self._position
        vertex = heap[index]
        while index > 0:
            parent = (index - 1) >> 1
            above = heap[parent]
            if not self._precedes(vertex, above):
                break
            heap[index] = above
            position[above] = index
            index = parent
        heap[index] = vertex
        position[vertex] = index

    def _sift_down(self, index: int) -> None:
        heap, position = self._heap, self._position
        size = len(heap)
        vertex = heap[index]
        while True:
            child = 2 * index + 1
            if child >= size:
                break
            right = child + 1
            if right < size and self._precedes(heap[right], heap[child]):
                child = right
            below = heap[child]
            if not self._precedes(below, vertex):
                break
            heap[index] = below
            position[below] = index
            index = child
        heap[index] = vertex
        position[vertex] = index
