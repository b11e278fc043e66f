"""
Vertex labelings: total maps from the vertices of a graph to arbitrary values.

A labeling is a dense array indexed by vertex. It is populated for every
vertex when it is created and never grows or shrinks afterwards. Reads and
writes are plain list indexing, with no membership checks.

Functions:
    label_vertices(graph, default) - Labeling with `default` on every vertex
"""

from collections.abc import Iterable, Iterator
from typing import Any, Generic

from localtypes import V, Graph, Vertex


class Labeling(Generic[V]):
    """
    Mapping from every vertex of a fixed graph to a value of type V.

    Example:
        >>> color = Labeling(3, "white")
        >>> color[1] = "gray"
        >>> list(color.values())
        ['white', 'gray', 'white']
    """

    __slots__ = ("_values",)

    def __init__(self, order: int, default: V) -> None:
        # Every slot references the same default object
        self._values: list[V] = [default] * order

    @classmethod
    def like(cls, other: "Labeling[Any]", default: V) -> "Labeling[V]":
        """New labeling over the same vertex domain as `other`."""
        return cls(len(other), default)

    def __getitem__(self, vertex: Vertex) -> V:
        return self._values[vertex]

    def __setitem__(self, vertex: Vertex, value: V) -> None:
        self._values[vertex] = value

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(range(len(self._values)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Labeling):
            return NotImplemented
        return self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Labeling({self._values!r})"

    def values(self) -> Iterable[V]:
        return iter(self._values)

    def items(self) -> Iterable[tuple[Vertex, V]]:
        return enumerate(self._values)

    def to_dict(self) -> dict[Vertex, V]:
        return dict(enumerate(self._values))


def label_vertices(graph: Graph[Any], default: V) -> Labeling[V]:
    """
    Create a labeling holding `default` for every vertex of `graph`.

    Args:
        graph: Graph whose vertex domain the labeling covers.
        default: Initial value for every vertex. It is shared, not copied,
            so it should be immutable.

    Returns:
        Labeling[V]: a fresh labeling owned by the caller.
    """
    return Labeling(graph.order(), default)
