"""
Undirected graphs backed by symmetric weight matrices.

Both representations address an edge by its (row, col) cell with
row <= col, and read weights straight from the matrix so that the weight
sentinel follows the matrix dtype.

Classes:
    MatrixGraph - dense numpy matrix, `null_value` cells are not edges
    SparseGraph - scipy sparse matrix, every stored cell is an edge
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from typing import Any, NamedTuple

import numpy as np
import numpy.typing as npt
from scipy import sparse
from typing_extensions import override

from constants import MATRIX_NULL_VALUE
from localtypes import Graph, Vertex, Weight

from .weights import dtype_limit


class MatrixEdge(NamedTuple):
    row: Vertex
    col: Vertex


def _edge(u: Vertex, v: Vertex) -> MatrixEdge:
    return MatrixEdge(u, v) if u <= v else MatrixEdge(v, u)


def _check_square(shape: tuple[int, ...]) -> None:
    if len(shape) != 2 or shape[0] != shape[1]:
        raise ValueError(f"Adjacency matrix must be square, got shape {shape}")


class MatrixWeight:
    """
    Edge weight function reading a matrix cell.

    `max_value()` is the dtype maximum, so edge weights must be strictly
    below it (see `dtype_limit`).
    """

    __slots__ = ("_matrix",)

    def __init__(self, matrix: Any) -> None:
        self._matrix = matrix

    def __call__(self, edge: MatrixEdge) -> Weight:
        return self._matrix[edge.row, edge.col]

    def max_value(self) -> Weight:
        return dtype_limit(self._matrix.dtype)


class MatrixGraph(Graph[MatrixEdge]):
    """
    Graph over a dense, symmetric numpy matrix.

    Cells equal to `null_value` are missing edges; pass `math.nan` or
    `np.inf` when 0 is a legitimate weight. Diagonal cells are self-loops.

    Example:
        >>> g = MatrixGraph(np.array([[0, 2], [2, 0]]))
        >>> list(g.incident_edges(0))
        [MatrixEdge(row=0, col=1)]
    """

    def __init__(
        self, matrix: npt.ArrayLike, null_value: Weight = MATRIX_NULL_VALUE
    ) -> None:
        matrix = np.asarray(matrix)
        _check_square(matrix.shape)

        exact = not np.issubdtype(matrix.dtype, np.inexact)
        if not np.array_equal(matrix, matrix.T, equal_nan=not exact):
            raise ValueError("Adjacency matrix must be symmetric")

        if isinstance(null_value, float) and math.isnan(null_value):
            present = ~np.isnan(matrix)
        else:
            present = matrix != null_value

        self._matrix = matrix
        self._neighbours: list[npt.NDArray[np.intp]] = [
            np.flatnonzero(row) for row in present
        ]

    @property
    def matrix(self) -> npt.NDArray[Any]:
        return self._matrix

    def weights(self) -> MatrixWeight:
        return MatrixWeight(self._matrix)

    @override
    def order(self) -> int:
        return self._matrix.shape[0]

    @override
    def vertices(self) -> Iterator[Vertex]:
        return iter(range(self.order()))

    @override
    def incident_edges(self, vertex: Vertex) -> Iterator[MatrixEdge]:
        return (_edge(vertex, int(other)) for other in self._neighbours[vertex])

    @override
    def opposite(self, edge: MatrixEdge, vertex: Vertex) -> Vertex:
        return edge.col if edge.row == vertex else edge.row


class SparseGraph(Graph[MatrixEdge]):
    """
    Graph over a symmetric scipy sparse matrix.

    The matrix is converted to CSR once. Stored cells are edges, explicit
    zeros included, which is how scipy.sparse.csgraph treats them too.
    """

    def __init__(self, matrix: Any) -> None:
        csr = sparse.csr_array(matrix)
        _check_square(csr.shape)
        if (csr != csr.T).nnz != 0:
            raise ValueError("Adjacency matrix must be symmetric")
        csr.sort_indices()
        self._csr = csr

    @property
    def matrix(self) -> sparse.csr_array:
        return self._csr

    def weights(self) -> MatrixWeight:
        return MatrixWeight(self._csr)

    @override
    def order(self) -> int:
        return self._csr.shape[0]

    @override
    def vertices(self) -> Iterator[Vertex]:
        return iter(range(self.order()))

    @override
    def incident_edges(self, vertex: Vertex) -> Iterator[MatrixEdge]:
        start, stop = self._csr.indptr[vertex], self._csr.indptr[vertex + 1]
        return (
            _edge(vertex, int(other)) for other in self._csr.indices[start:stop]
        )

    @override
    def opposite(self, edge: MatrixEdge, vertex: Vertex) -> Vertex:
        return edge.col if edge.row == vertex else edge.row
