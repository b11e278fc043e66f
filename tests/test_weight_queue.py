"""Tests for spanning_tree/weight_queue.py"""

import random

import pytest

from graph import Labeling
from spanning_tree import WeightQueue


def assert_heap_invariants(queue: WeightQueue) -> None:
    """Parent precedes children by (weight, vertex), and positions match slots."""
    heap = queue._heap
    weights = queue.weights
    for index, vertex in enumerate(heap):
        assert queue._position[vertex] == index
        if index:
            parent = heap[(index - 1) // 2]
            assert (weights[parent], parent) <= (weights[vertex], vertex)
    queued = set(heap)
    for vertex in weights:
        assert (vertex in queue) == (vertex in queued)


def drain(queue: WeightQueue) -> list[int]:
    order = []
    while not queue.empty():
        order.append(queue.top())
        queue.pop()
    return order


class TestBasicOperations:
    def test_empty_on_creation(self):
        queue = WeightQueue(Labeling(3, 0))
        assert queue.empty()
        assert len(queue) == 0
        assert not queue

    def test_top_is_minimum(self):
        weights = Labeling(4, 0)
        for vertex, weight in enumerate([7, 3, 9, 5]):
            weights[vertex] = weight
        queue = WeightQueue(weights)
        for vertex in range(4):
            queue.push(vertex)
        assert queue.top() == 1
        assert len(queue) == 4

    def test_pops_in_weight_order(self):
        weights = Labeling(5, 0)
        for vertex, weight in enumerate([4, -2, 8, 0, 3]):
            weights[vertex] = weight
        queue = WeightQueue(weights)
        for vertex in (2, 0, 4, 1, 3):
            queue.push(vertex)
        assert drain(queue) == [1, 3, 4, 0, 2]

    def test_ties_broken_by_vertex(self):
        """Equal weights come out smallest vertex first, whatever the push order."""
        weights = Labeling(4, 1)
        queue = WeightQueue(weights)
        for vertex in (3, 1, 2, 0):
            queue.push(vertex)
        assert drain(queue) == [0, 1, 2, 3]

    def test_membership(self):
        queue = WeightQueue(Labeling(3, 0))
        queue.push(2)
        assert 2 in queue
        assert 0 not in queue
        queue.pop()
        assert 2 not in queue

    def test_shares_weight_labeling(self):
        """The queue reads the caller's labeling, it does not copy it."""
        weights = Labeling(2, 10)
        queue = WeightQueue(weights)
        assert queue.weights is weights


class TestUpdate:
    def test_decrease_moves_to_top(self):
        weights = Labeling(3, 0)
        weights[0], weights[1], weights[2] = 1, 5, 9
        queue = WeightQueue(weights)
        for vertex in range(3):
            queue.push(vertex)

        weights[2] = 0
        queue.update(2)
        assert queue.top() == 2
        assert_heap_invariants(queue)

    def test_decrease_to_tie(self):
        weights = Labeling(3, 0)
        weights[0], weights[1], weights[2] = 4, 2, 8
        queue = WeightQueue(weights)
        for vertex in range(3):
            queue.push(vertex)

        weights[0] = 2
        queue.update(0)
        assert drain(queue) == [0, 1, 2]

    def test_stale_weight_never_used(self):
        """A vertex lowered from 10 to 3 leaves after every queued weight <= 3."""
        weights = Labeling(5, 0)
        for vertex, weight in enumerate([10, 1, 3, 2, 5]):
            weights[vertex] = weight
        queue = WeightQueue(weights)
        for vertex in range(5):
            queue.push(vertex)

        weights[0] = 3
        queue.update(0)
        assert drain(queue) == [1, 3, 0, 2, 4]


class TestHeapInvariants:
    @pytest.mark.parametrize("seed", range(20))
    def test_interleaved_operations(self, seed):
        """Random push/update/pop sequences keep the heap ordered and indexed."""
        rng = random.Random(seed)
        order = 40
        weights = Labeling(order, 0)
        queue = WeightQueue(weights)
        outside = set(range(order))

        for _ in range(300):
            action = rng.random()
            if action < 0.4 and outside:
                vertex = rng.choice(sorted(outside))
                weights[vertex] = rng.randint(-50, 50)
                queue.push(vertex)
                outside.discard(vertex)
            elif action < 0.8 and len(queue):
                vertex = rng.choice(queue._heap)
                weights[vertex] -= rng.randint(0, 20)
                queue.update(vertex)
            elif len(queue):
                top = queue.top()
                expected = min(queue._heap, key=lambda v: (weights[v], v))
                assert top == expected
                queue.pop()
            assert_heap_invariants(queue)

        remaining = drain(queue)
        assert remaining == sorted(remaining, key=lambda v: (weights[v], v))
