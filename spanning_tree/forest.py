"""
Reading spanning forests back out of a predecessor labeling.

A predecessor labeling maps each root to itself, each other reached vertex
to its parent, and unreached vertices to NIL_VERTEX. These helpers recover
the edges, the total weight, the roots and root paths from it.
"""

from collections.abc import Iterator
from typing import Any

from graph.labeling import Labeling
from localtypes import NIL_VERTEX, E, EdgeWeight, Graph, Vertex, Weight


def roots(predecessor: Labeling[Vertex | None]) -> tuple[Vertex, ...]:
    """Vertices that are their own predecessor."""
    return tuple(v for v, p in predecessor.items() if p == v)


def path_to_root(
    predecessor: Labeling[Vertex | None], vertex: Vertex
) -> tuple[Vertex, ...]:
    """
    Follow predecessor pointers from `vertex` up to its root.

    Returns:
        The vertices visited, `vertex` first and the root last.

    Raises:
        ValueError: If `vertex` was never reached, or if the walk is longer
            than the number of vertices (the labeling contains a cycle).
    """
    if predecessor[vertex] is NIL_VERTEX:
        raise ValueError(f"Vertex {vertex} was not reached")

    path = [vertex]
    current = vertex
    while (parent := predecessor[current]) != current:
        if parent is NIL_VERTEX:
            raise ValueError(f"Vertex {current} has no predecessor")
        if len(path) > len(predecessor):
            raise ValueError("Predecessor labeling contains a cycle")
        path.append(parent)
        current = parent
    return tuple(path)


def tree_edges(
    graph: Graph[E],
    predecessor: Labeling[Vertex | None],
    weight: EdgeWeight[E, Weight],
) -> Iterator[E]:
    """
    Edges of the forest described by `predecessor`.

    For each non-root reached vertex, yields the lightest edge joining it to
    its predecessor. With parallel edges this is the edge Prim selected, up
    to ties between equal weights.

    Raises:
        ValueError: If a vertex and its predecessor share no edge.
    """
    for vertex, parent in predecessor.items():
        if parent is NIL_VERTEX or parent == vertex:
            continue
        lightest: Any = None
        for edge in graph.incident_edges(vertex):
            if graph.opposite(edge, vertex) != parent:
                continue
            if lightest is None or weight(edge) < weight(lightest):
                lightest = edge
        if lightest is None:
            raise ValueError(
                f"No edge joins vertex {vertex} to its predecessor {parent}"
            )
        yield lightest


def forest_weight(
    graph: Graph[E],
    predecessor: Labeling[Vertex | None],
    weight: EdgeWeight[E, Weight],
) -> Weight:
    """Total weight of the forest described by `predecessor`."""
    return sum(weight(edge) for edge in tree_edges(graph, predecessor, weight))
