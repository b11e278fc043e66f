"""Tests for utils/graph.py"""

from graph import AdjacencyListGraph
from utils.graph import connected_components, reachable_from


class TestReachableFrom:
    def test_isolated_vertex(self):
        graph = AdjacencyListGraph(3)
        assert reachable_from(graph, 1) == frozenset({1})

    def test_chain(self):
        graph = AdjacencyListGraph.from_edges(4, [(0, 1, 1), (1, 2, 1)])
        assert reachable_from(graph, 2) == frozenset({0, 1, 2})

    def test_cycle_and_self_loop(self):
        """Cycles and self-loops terminate."""
        graph = AdjacencyListGraph.from_edges(
            3, [(0, 1, 1), (1, 2, 1), (2, 0, 1), (1, 1, 1)]
        )
        assert reachable_from(graph, 0) == frozenset({0, 1, 2})


class TestConnectedComponents:
    def test_empty_graph(self):
        assert connected_components(AdjacencyListGraph()) == frozenset()

    def test_two_components_and_isolated(self):
        graph = AdjacencyListGraph.from_edges(5, [(0, 1, 1), (2, 3, 1)])
        assert connected_components(graph) == frozenset(
            [frozenset({0, 1}), frozenset({2, 3}), frozenset({4})]
        )

    def test_connected(self, random_graph):
        graph = random_graph(3, order=12, extra_edges=5)
        assert connected_components(graph) == frozenset([frozenset(range(12))])
