"""
Minimum spanning trees and forests.

**Weight queue** (weight_queue.py)
    Indexed binary heap over vertices, ordered by a weight labeling it
    shares with its owner, with in-place decrease-key.
    - WeightQueue(weights): push, top, pop, update, empty

**Prim** (prim.py)
    Greedy frontier expansion driven by vertex colors.
    - prim(graph, source, weight) -> predecessor labeling
    - minimum_spanning_forest(graph, weight) -> PrimSearch over every component
    - PrimSearch: step-by-step search for callers that stop early

**Forest** (forest.py)
    Reading trees back out of a predecessor labeling.
    - tree_edges, forest_weight, path_to_root, roots

**Kruskal** (kruskal.py)
    Sort-and-merge reference algorithm.
    - kruskal(graph, weight) -> edges
"""

from .forest import forest_weight, path_to_root, roots, tree_edges
from .kruskal import kruskal, unique_edges
from .prim import PrimSearch, minimum_spanning_forest, prim
from .weight_queue import WeightQueue

__all__ = [
    # Weight queue
    "WeightQueue",
    # Prim
    "PrimSearch",
    "prim",
    "minimum_spanning_forest",
    # Forest
    "forest_weight",
    "path_to_root",
    "roots",
    "tree_edges",
    # Kruskal
    "kruskal",
    "unique_edges",
]
