"""
Undirected adjacency list multigraph.

Vertices are dense integers handed out by `add_vertex`. Edges are immutable
records carrying their endpoints and weight, so parallel edges between the
same pair of vertices stay distinct.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from typing_extensions import override

from localtypes import Graph, Vertex, Weight


@dataclass(frozen=True, slots=True)
class Edge:
    """An undirected edge. `index` is its position in insertion order."""

    index: int
    source: Vertex
    target: Vertex
    weight: Weight = 1

    def endpoints(self) -> tuple[Vertex, Vertex]:
        return self.source, self.target


def edge_weight(edge: Edge) -> Weight:
    """Weight function for `AdjacencyListGraph` edges."""
    return edge.weight


class AdjacencyListGraph(Graph[Edge]):
    """
    Undirected multigraph stored as one incident edge list per vertex.

    Self-loops are listed once in their vertex's incident list.

    Example:
        >>> g = AdjacencyListGraph(3)
        >>> e = g.add_edge(0, 1, 5)
        >>> g.opposite(e, 0)
        1
    """

    def __init__(self, order: int = 0) -> None:
        self._incident: list[list[Edge]] = [[] for _ in range(order)]
        self._edges: list[Edge] = []

    @classmethod
    def from_edges(
        cls, order: int, edges: Iterable[tuple[Vertex, Vertex, Weight]]
    ) -> AdjacencyListGraph:
        """Build a graph with `order` vertices from (source, target, weight) triples."""
        graph = cls(order)
        for source, target, weight in edges:
            graph.add_edge(source, target, weight)
        return graph

    def add_vertex(self) -> Vertex:
        self._incident.append([])
        return len(self._incident) - 1

    def add_edge(self, source: Vertex, target: Vertex, weight: Weight = 1) -> Edge:
        """
        Connect `source` and `target`.

        Raises:
            ValueError: If either endpoint is not a vertex of the graph.
        """
        for vertex in (source, target):
            if not 0 <= vertex < len(self._incident):
                raise ValueError(f"Vertex {vertex} is not in the graph")

        edge = Edge(len(self._edges), source, target, weight)
        self._edges.append(edge)
        self._incident[source].append(edge)
        if target != source:
            self._incident[target].append(edge)
        return edge

    @override
    def order(self) -> int:
        return len(self._incident)

    def size(self) -> int:
        return len(self._edges)

    @override
    def vertices(self) -> Iterator[Vertex]:
        return iter(range(len(self._incident)))

    def edges(self) -> tuple[Edge, ...]:
        return tuple(self._edges)

    @override
    def incident_edges(self, vertex: Vertex) -> Iterator[Edge]:
        return iter(self._incident[vertex])

    @override
    def opposite(self, edge: Edge, vertex: Vertex) -> Vertex:
        return edge.target if edge.source == vertex else edge.source

    def __repr__(self) -> str:
        return f"AdjacencyListGraph(order={self.order()}, size={self.size()})"
