"""
Graph collaborators and per-vertex state.

**Labeling** (labeling.py)
    Dense total maps from vertices to values, the state container for every
    graph algorithm in the project.
    - label_vertices(graph, default) -> Labeling

**Weights** (weights.py)
    Edge weight functions and the maximum sentinel they imply.
    - weight_limit, dtype_limit, MappingWeight

**Representations** (adjacency.py, matrix.py)
    Concrete graphs satisfying the `localtypes.Graph` protocol.
    - AdjacencyListGraph: undirected multigraph with weighted edge records
    - MatrixGraph: dense symmetric numpy matrix
    - SparseGraph: symmetric scipy sparse matrix
"""

from .adjacency import AdjacencyListGraph, Edge, edge_weight
from .labeling import Labeling, label_vertices
from .matrix import MatrixEdge, MatrixGraph, MatrixWeight, SparseGraph
from .weights import MappingWeight, dtype_limit, weight_limit

__all__ = [
    # Labeling
    "Labeling",
    "label_vertices",
    # Weights
    "MappingWeight",
    "dtype_limit",
    "weight_limit",
    # Representations
    "AdjacencyListGraph",
    "Edge",
    "edge_weight",
    "MatrixEdge",
    "MatrixGraph",
    "MatrixWeight",
    "SparseGraph",
]
