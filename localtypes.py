"""
Type definitions for graph labeling and spanning tree operations.

This module contains the custom types shared by the graph collaborators and
the spanning tree algorithms, organized by their primary use cases.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from enum import IntEnum
from typing import Any, Final, Protocol, TypeAlias, TypeVar, runtime_checkable

# Basic type variables for generic operations
V = TypeVar("V")
E = TypeVar("E", bound=Hashable)
E_contra = TypeVar("E_contra", contravariant=True)
W = TypeVar("W")
W_co = TypeVar("W_co", covariant=True)

# Vertices live in the dense domain 0 .. order - 1
Vertex: TypeAlias = int

# Explicit absent marker, never a valid vertex index
NIL_VERTEX: Final = None


class Color(IntEnum):
    """Visitation state of a vertex. Transitions only go WHITE -> GRAY -> BLACK."""

    WHITE = 0  # undiscovered
    GRAY = 1  # in the frontier
    BLACK = 2  # finalized


@runtime_checkable
class Graph(Protocol[E]):
    """
    Capability set the algorithms need from a graph.

    Any adjacency list, adjacency matrix or edge list representation
    exposing these four methods plugs into the algorithms unchanged.
    """

    def order(self) -> int:
        """Number of vertices. Vertices are 0 .. order - 1."""
        ...

    def vertices(self) -> Iterable[Vertex]: ...

    def incident_edges(self, vertex: Vertex) -> Iterable[E]:
        """Edges touching `vertex`, in no particular order."""
        ...

    def opposite(self, edge: E, vertex: Vertex) -> Vertex:
        """The endpoint of `edge` other than `vertex`."""
        ...


class EdgeWeight(Protocol[E_contra, W_co]):
    """
    Function from edges to a totally ordered weight.

    Implementations may also expose `max_value()`, used as the infinite
    sentinel; see `graph.weights.weight_limit`.
    """

    def __call__(self, edge: E_contra, /) -> W_co: ...


# Weights only need `<` and a maximum
Weight: TypeAlias = Any
