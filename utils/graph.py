"""
Functions related to graph connectivity
"""

from collections import deque
from typing import Any

from graph.labeling import label_vertices
from localtypes import Graph, Vertex


def reachable_from(graph: Graph[Any], source: Vertex) -> frozenset[Vertex]:
    """
    Vertices connected to `source`, `source` included.

    Args:
        graph: Undirected graph satisfying the `Graph` protocol.
        source: Starting vertex.

    Returns:
        frozenset[Vertex]: the connected component of `source`.
    """
    seen = label_vertices(graph, False)
    component = set()

    # Breadth-first traversal
    queue = deque([source])
    while queue:
        current = queue.popleft()

        # Avoid cycles
        if seen[current]:
            continue

        component.add(current)
        queue.extend(
            graph.opposite(edge, current) for edge in graph.incident_edges(current)
        )

        # Mark the vertex as seen
        seen[current] = True

    return frozenset(component)


def connected_components(graph: Graph[Any]) -> frozenset[frozenset[Vertex]]:
    """
    Extract connected components from an undirected graph.

    Returns:
        frozenset[frozenset[Vertex]]: set of connected components of the graph
    """
    seen: set[Vertex] = set()
    components = set()

    # Guarantees all the vertices are at least visited once
    for vertex in graph.vertices():
        # Avoid visiting an already seen component
        if vertex in seen:
            continue

        component = reachable_from(graph, vertex)
        seen.update(component)
        components.add(component)
    return frozenset(components)
