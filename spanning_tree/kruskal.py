"""
Kruskal's minimum spanning forest.

Independent of the Prim machinery: it sorts every edge once and grows the
forest with a union-find, so it serves as a cross-check for `prim`.
"""

import logging

from localtypes import E, EdgeWeight, Graph, Vertex, Weight
from utils.union_find import UnionFind

logger = logging.getLogger(__name__)


def unique_edges(graph: Graph[E]) -> list[tuple[E, Vertex, Vertex]]:
    """
    Every edge of `graph` once, with its endpoints, in discovery order.

    Edges are collected from the incident lists, so they must be hashable
    and compare equal when seen from either endpoint.
    """
    seen: set[E] = set()
    edges: list[tuple[E, Vertex, Vertex]] = []
    for vertex in graph.vertices():
        for edge in graph.incident_edges(vertex):
            if edge in seen:
                continue
            seen.add(edge)
            edges.append((edge, vertex, graph.opposite(edge, vertex)))
    return edges


def kruskal(graph: Graph[E], weight: EdgeWeight[E, Weight]) -> list[E]:
    """
    Minimum spanning forest as a list of edges.

    Args:
        graph: Undirected graph satisfying the `Graph` protocol.
        weight: Function from edges to totally ordered weights.

    Returns:
        Accepted edges in increasing weight order. Equal weights keep
        discovery order.
    """
    candidates = unique_edges(graph)
    candidates.sort(key=lambda candidate: weight(candidate[0]))

    components = UnionFind(graph)
    forest: list[E] = []
    for edge, u, v in candidates:
        if components.union(u, v):
            forest.append(edge)

    logger.debug(
        f"Kruskal accepted {len(forest)} of {len(candidates)} edges "
        f"over {graph.order()} vertices"
    )
    return forest
