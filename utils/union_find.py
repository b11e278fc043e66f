"""
Union-Find (Disjoint Set Union) over the vertices of a graph.

Efficient data structure for tracking disjoint vertex sets with:
- find(v): Which set contains v? - O(α(n)) amortized
- union(u, v): Merge sets containing u and v - O(α(n)) amortized
- connected(u, v): Are u and v in the same set? - O(α(n)) amortized

Where α(n) is the inverse Ackermann function (effectively constant ≤ 4).

Parents and ranks are vertex labelings, so every vertex starts as its own
singleton set and no lazy initialization is needed.
"""

from typing import Any

from graph.labeling import Labeling, label_vertices
from localtypes import Graph, Vertex


class UnionFind:
    """
    Union-Find with path compression and union by rank.

    Example:
        >>> from graph import AdjacencyListGraph
        >>> uf = UnionFind(AdjacencyListGraph(5))
        >>> uf.union(1, 2)
        True
        >>> uf.union(2, 3)
        True
        >>> uf.connected(1, 3)
        True
        >>> uf.connected(1, 4)
        False
    """

    def __init__(self, graph: Graph[Any]) -> None:
        self._parent: Labeling[Vertex] = label_vertices(graph, 0)
        self._rank: Labeling[int] = label_vertices(graph, 0)
        for vertex in self._parent:
            self._parent[vertex] = vertex

    def find(self, vertex: Vertex) -> Vertex:
        """
        Find the representative (root) of the set containing vertex.

        Uses path compression: flattens the tree by pointing all vertices
        along the path directly to the root.
        """
        parent = self._parent

        # Find root
        root = vertex
        while parent[root] != root:
            root = parent[root]

        # Path compression: point all vertices to root
        current = vertex
        while parent[current] != root:
            parent[current], current = root, parent[current]

        return root

    def union(self, u: Vertex, v: Vertex) -> bool:
        """
        Merge the sets containing u and v.

        Uses union by rank: attaches the shorter tree under the taller one
        to keep trees balanced.

        Returns:
            True if two distinct sets were merged, False if u and v were
            already connected.
        """
        root_u = self.find(u)
        root_v = self.find(v)

        if root_u == root_v:
            return False

        # Attach smaller tree under larger tree
        if self._rank[root_u] < self._rank[root_v]:
            root_u, root_v = root_v, root_u
        self._parent[root_v] = root_u
        if self._rank[root_u] == self._rank[root_v]:
            self._rank[root_u] += 1
        return True

    def connected(self, u: Vertex, v: Vertex) -> bool:
        """Check if u and v are in the same set."""
        return self.find(u) == self.find(v)

    def get_all_sets(self) -> dict[Vertex, set[Vertex]]:
        """
        Get all disjoint sets as a dictionary.

        Returns:
            Mapping from each set's representative to its members.
        """
        sets: dict[Vertex, set[Vertex]] = {}
        for vertex in self._parent:
            sets.setdefault(self.find(vertex), set()).add(vertex)
        return sets
