"""
Jarnik-Prim minimum spanning tree over an abstract graph.

The search grows a tree from a source vertex. Each vertex carries a color:
WHITE until it is discovered, GRAY while it waits in the weight queue with a
tentative cheapest connection to the tree, BLACK once it is extracted and
its connection is final. At every extraction the queue minimum is the
lightest edge crossing the cut between the BLACK set and the rest, so by the
cut property it belongs to some minimum spanning tree.

Vertices that cannot be reached from the source stay WHITE with a NIL
predecessor and the sentinel weight. The result is then a spanning tree of
the source's component only, which is the expected outcome on a
disconnected graph. `minimum_spanning_forest` restarts the search in every
untouched component to cover the whole graph.

Negative weights are fine: unlike Dijkstra, Prim only compares single
edge weights.

Functions:
    prim(graph, source, weight)              - predecessor labeling of the tree
    minimum_spanning_forest(graph, weight)   - drained search covering every component
"""

import logging
from collections.abc import Iterator
from typing import Any, Generic

from graph.labeling import Labeling, label_vertices
from graph.weights import weight_limit
from localtypes import NIL_VERTEX, Color, E, EdgeWeight, Graph, Vertex, Weight

from .weight_queue import WeightQueue

logger = logging.getLogger(__name__)


class PrimSearch(Generic[E]):
    """
    State of one Prim search: four labelings and the weight queue.

    Iterating the search finalizes one vertex per step and yields it, which
    lets callers stop early with their own predicate:

        >>> search = PrimSearch(graph, 0, edge_weight)
        >>> for count, vertex in enumerate(search, 1):
        ...     if count == k:
        ...         break

    `run()` drains the queue and returns the predecessor labeling.

    Attributes:
        predecessor: Vertex each vertex was reached from. The source maps to
            itself, unreached vertices to NIL_VERTEX.
        weight: Cheapest known edge weight connecting each vertex to the
            tree. The source keeps the sentinel, as do unreached vertices.
        color: Visitation state of each vertex.
        tree_edge: The edge that set each vertex's predecessor, or None.
    """

    def __init__(
        self,
        graph: Graph[E],
        source: Vertex | None,
        weight: EdgeWeight[E, Weight],
        *,
        infinity: Weight | None = None,
    ) -> None:
        if infinity is None:
            infinity = weight_limit(weight)

        self.graph = graph
        self.source = source
        self.edge_weight = weight
        self.infinity = infinity

        self.predecessor: Labeling[Vertex | None] = label_vertices(graph, NIL_VERTEX)
        self.color: Labeling[Color] = label_vertices(graph, Color.WHITE)
        self.weight: Labeling[Weight] = label_vertices(graph, infinity)
        self.tree_edge: Labeling[E | None] = label_vertices(graph, None)
        self.queue: WeightQueue[Weight] = WeightQueue(self.weight)

        if source is not None:
            self.restart(source)

    def restart(self, source: Vertex) -> None:
        """
        Seed a new root. `source` must be WHITE and the queue empty.

        Labelings are kept, so vertices finalized by earlier roots stay BLACK
        and the next `run()` grows a new tree beside the previous ones.
        """
        self.source = source
        # Pushed alone, so its own weight entry is never compared
        self.queue.push(source)
        self.predecessor[source] = source
        self.color[source] = Color.GRAY

    def step(self) -> Vertex:
        """
        Extract the frontier minimum, relax its edges and finalize it.

        Must only be called while the queue is non-empty.
        """
        graph, queue = self.graph, self.queue
        color, weight = self.color, self.weight
        edge_weight = self.edge_weight
        debug = logger.isEnabledFor(logging.DEBUG)

        u = queue.top()
        queue.pop()
        if debug:
            logger.debug(f"Extracted {u} at weight {weight[u]}")
        for edge in graph.incident_edges(u):
            v = graph.opposite(edge, u)
            # Self-loops never improve a connection, BLACK vertices are final
            if v == u or color[v] is Color.BLACK:
                continue
            w = edge_weight(edge)
            if w < weight[v]:
                previous = weight[v]
                weight[v] = w
                self.predecessor[v] = u
                self.tree_edge[v] = edge
                if color[v] is Color.WHITE:
                    queue.push(v)
                    color[v] = Color.GRAY
                    action = "push"
                else:
                    queue.update(v)
                    action = "update"
                if debug:
                    logger.debug(
                        f"Relaxed {v} from {u}: weight {previous} -> {w} ({action})"
                    )
        color[u] = Color.BLACK
        return u

    def __iter__(self) -> Iterator[Vertex]:
        while not self.queue.empty():
            yield self.step()

    def run(self) -> Labeling[Vertex | None]:
        logger.debug(
            f"Prim search from {self.source} over {self.graph.order()} vertices"
        )
        finalized = sum(1 for _ in self)
        logger.debug(f"Prim search from {self.source} finalized {finalized} vertices")
        return self.predecessor

    def tree_edges(self) -> Iterator[E]:
        """The exact edges selected for the tree, one per reached non-root vertex."""
        return (edge for edge in self.tree_edge.values() if edge is not None)

    def total_weight(self) -> Weight:
        return sum(self.edge_weight(edge) for edge in self.tree_edges())


def prim(
    graph: Graph[E],
    source: Vertex,
    weight: EdgeWeight[E, Weight],
    *,
    infinity: Weight | None = None,
) -> Labeling[Vertex | None]:
    """
    Minimum spanning tree of the component containing `source`.

    Args:
        graph: Undirected graph satisfying the `Graph` protocol.
        source: Root of the tree. Must be a vertex of `graph`.
        weight: Function from edges to totally ordered weights.
        infinity: Weight above every edge weight. Defaults to
            `weight.max_value()` when available, `math.inf` otherwise.

    Returns:
        Predecessor labeling: `source` maps to itself, every other vertex of
        its component to its tree parent, all remaining vertices to NIL_VERTEX.
    """
    return PrimSearch(graph, source, weight, infinity=infinity).run()


def minimum_spanning_forest(
    graph: Graph[Any],
    weight: EdgeWeight[Any, Weight],
    *,
    infinity: Weight | None = None,
) -> PrimSearch[Any]:
    """
    Minimum spanning forest covering every component of `graph`.

    Restarts the search from the smallest WHITE vertex until none is left,
    sharing the labelings between restarts. Each component's root maps to
    itself in the predecessor labeling.

    Returns:
        PrimSearch: the drained search, exposing the predecessor, weight,
        color and tree edge labelings of the whole forest.
    """
    search: PrimSearch[Any] = PrimSearch(graph, None, weight, infinity=infinity)
    roots = []
    for vertex in graph.vertices():
        if search.color[vertex] is not Color.WHITE:
            continue
        roots.append(vertex)
        search.restart(vertex)
        search.run()

    logger.debug(f"Spanning forest has {len(roots)} component(s), roots {roots}")
    return search
